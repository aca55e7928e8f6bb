"""Modelos Pydantic para el catálogo estático del registro."""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class NameTable(BaseModel):
    """Tabla de asociación código -> nombre (destinos, horarios, paquetes)."""

    model_config = ConfigDict(frozen=True)

    title: str
    entries: Mapping[int, str] = Field(..., min_length=1)

    @field_validator("entries")
    @classmethod
    def _read_only_entries(cls, value: Mapping[int, str]) -> Mapping[int, str]:
        return MappingProxyType(dict(value))

    @property
    def first_code(self) -> int:
        return min(self.entries)

    @property
    def last_code(self) -> int:
        return max(self.entries)

    def name_for(self, code: int) -> Optional[str]:
        """Retorna el nombre del código, o None si está fuera de la tabla."""
        if not self.first_code <= code <= self.last_code:
            return None
        return self.entries.get(code)

    def values_and_names(self) -> str:
        """Texto con una línea 'código - nombre' por entrada, para el prompt."""
        return "\n".join(f"  {code} - {name}" for code, name in sorted(self.entries.items()))


# ============================================================================
# Catálogo
# ============================================================================

class RegistrationCatalog(BaseModel):
    """
    Datos fijos del formulario de registro.

    Las reglas mapean un código de destino al conjunto de códigos
    permitidos para ese destino.
    """

    model_config = ConfigDict(frozen=True)

    destinations: NameTable
    flight_times: NameTable
    wifi_bundles: NameTable
    flight_time_rules: Mapping[int, frozenset[int]]
    wifi_bundle_rules: Mapping[int, frozenset[int]]
    min_age: int = Field(default=15, ge=0)
    max_age: int = Field(default=120, ge=0)

    @field_validator("flight_time_rules", "wifi_bundle_rules")
    @classmethod
    def _read_only_rules(cls, value: Mapping[int, frozenset[int]]) -> Mapping[int, frozenset[int]]:
        """Las reglas quedan de solo lectura una vez validadas."""
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_consistency(self) -> "RegistrationCatalog":
        if self.min_age > self.max_age:
            raise ValueError(f"min_age ({self.min_age}) mayor que max_age ({self.max_age})")

        for rules, table, label in (
            (self.flight_time_rules, self.flight_times, "flight_time_rules"),
            (self.wifi_bundle_rules, self.wifi_bundles, "wifi_bundle_rules"),
        ):
            for destination, allowed in rules.items():
                if destination not in self.destinations.entries:
                    raise ValueError(f"{label}: destino desconocido {destination}")
                unknown = sorted(code for code in allowed if code not in table.entries)
                if unknown:
                    raise ValueError(f"{label}: códigos desconocidos {unknown} para destino {destination}")
        return self

    def allows_flight_time(self, destination: int, flight_time: int) -> bool:
        return flight_time in self.flight_time_rules.get(destination, frozenset())

    def allows_wifi_bundle(self, destination: int, bundle: int) -> bool:
        return bundle in self.wifi_bundle_rules.get(destination, frozenset())


def default_catalog() -> RegistrationCatalog:
    """Construye el catálogo compilado en la aplicación."""
    return RegistrationCatalog(
        destinations=NameTable(
            title="Destinos",
            entries={
                1: "Londres",
                2: "Nueva York",
                3: "París",
                4: "Tokio",
                5: "Buenos Aires",
            },
        ),
        flight_times=NameTable(
            title="Horarios de vuelo",
            entries={
                1: "Mañana (06:00-12:00)",
                2: "Tarde (12:00-18:00)",
                3: "Noche (18:00-24:00)",
            },
        ),
        wifi_bundles=NameTable(
            title="Paquetes WiFi",
            entries={
                1: "Básico",
                2: "Estándar",
                3: "Premium",
            },
        ),
        # Tokio solo tiene vuelos nocturnos; París no tiene vuelos de noche
        flight_time_rules={
            1: frozenset({1, 2, 3}),
            2: frozenset({1, 2, 3}),
            3: frozenset({1, 2}),
            4: frozenset({3}),
            5: frozenset({2, 3}),
        },
        # Vuelos cortos no ofrecen Premium; largos no ofrecen Básico
        wifi_bundle_rules={
            1: frozenset({1, 2}),
            2: frozenset({1, 2, 3}),
            3: frozenset({1, 2}),
            4: frozenset({2, 3}),
            5: frozenset({2, 3}),
        },
    )
