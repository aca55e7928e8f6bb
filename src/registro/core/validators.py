"""
Validadores de campo y de formulario.

Un validador es un predicado sin efectos secundarios: validate(valor) -> bool.
Los validadores cruzados inspeccionan el valor actual de dos campos.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Mapping

if TYPE_CHECKING:
    from registro.config import RegistrationCatalog
    from registro.core.field import Field

logger = logging.getLogger(__name__)


class Validator(ABC):
    """Validador base de un valor."""

    message: str = "Valor inválido"

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Retorna True si el valor es aceptable."""
        pass


# =============================================================================
# VALIDADORES DE CAMPO
# =============================================================================

class RangeValidator(Validator):
    """Valida que min <= valor <= max (ambos extremos incluidos)."""

    def __init__(self, min_value: Any, max_value: Any):
        self.min_value = min_value
        self.max_value = max_value
        self.message = f"Debe estar entre {min_value} y {max_value}"

    def validate(self, value: Any) -> bool:
        return not (value < self.min_value or value > self.max_value)


class NoDigitValidator(Validator):
    """Valida que el texto no contenga dígitos."""

    message = "No debe contener dígitos"

    def validate(self, value: str) -> bool:
        return not any(ch.isdecimal() for ch in value)


class IdValidator(Validator):
    """
    Valida un número de identidad por su dígito de control.

    El número se completa con ceros a la izquierda hasta 9 dígitos. Los
    primeros 8 se multiplican alternadamente por 1 y 2; si un producto
    supera 9 se suman sus dígitos. El dígito de control es
    (10 - suma % 10) % 10 y debe coincidir con el último dígito.
    """

    DIGITS = 9
    message = "Dígito de control incorrecto"

    def validate(self, value: int) -> bool:
        if value <= 0 or value >= 10 ** self.DIGITS:
            return False
        digits = [int(ch) for ch in str(value).zfill(self.DIGITS)]
        return self.check_digit(digits[:-1]) == digits[-1]

    @staticmethod
    def check_digit(digits: Iterable[int]) -> int:
        total = 0
        for i, digit in enumerate(digits):
            product = digit * (1 if i % 2 == 0 else 2)
            total += product - 9 if product > 9 else product
        return (10 - total % 10) % 10


# =============================================================================
# VALIDADORES CRUZADOS
# =============================================================================

class CrossFieldValidator(Validator):
    """
    Validador que relaciona el valor actual de dos campos.

    Si alguno de los dos campos no es válido por sí mismo, la regla no se
    evalúa y el resultado es False.
    """

    def __init__(self, first: "Field", second: "Field"):
        self.first = first
        self.second = second

    @property
    def fields(self) -> tuple["Field", "Field"]:
        return (self.first, self.second)

    def validate(self, value: Any = None) -> bool:
        if not (self.first.is_valid and self.second.is_valid):
            return False
        result = self.check(self.first.value, self.second.value)
        if not result:
            logger.debug("Regla cruzada rechazada: %s (%r, %r)",
                         type(self).__name__, self.first.value, self.second.value)
        return result

    @abstractmethod
    def check(self, first_value: Any, second_value: Any) -> bool:
        """Evalúa la relación entre dos valores ya válidos."""
        pass


class CombinationValidator(CrossFieldValidator):
    """Acepta solo pares (primero, segundo) presentes en el conjunto permitido."""

    def __init__(self, first: "Field", second: "Field",
                 allowed: Mapping[int, frozenset[int]], message: str = ""):
        super().__init__(first, second)
        self.allowed = allowed
        if message:
            self.message = message

    def check(self, first_value: Any, second_value: Any) -> bool:
        return int(second_value) in self.allowed.get(int(first_value), frozenset())


class DestinationToFlightTimeValidator(CombinationValidator):
    """El horario de vuelo debe ofrecerse para el destino elegido."""

    def __init__(self, destination: "Field", flight_time: "Field", catalog: "RegistrationCatalog"):
        super().__init__(
            destination, flight_time, catalog.flight_time_rules,
            message="El horario elegido no está disponible para ese destino",
        )


class DestinationToWifiBundleValidator(CombinationValidator):
    """El paquete WiFi debe ofrecerse para el destino elegido."""

    def __init__(self, destination: "Field", wifi_bundle: "Field", catalog: "RegistrationCatalog"):
        super().__init__(
            destination, wifi_bundle, catalog.wifi_bundle_rules,
            message="El paquete WiFi elegido no está disponible para ese destino",
        )
