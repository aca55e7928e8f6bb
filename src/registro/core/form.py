"""
Formulario: colección ordenada de campos más validadores cruzados.
"""

import logging
from enum import Enum

from registro.core.field import Field
from registro.core.input import InputReader
from registro.core.validators import CrossFieldValidator

logger = logging.getLogger(__name__)


class FillResult(Enum):
    """Resultado de completar el formulario."""
    COMPLETED = "completed"  # Se pidieron todos los campos pendientes
    CANCEL = "cancel"        # Usuario canceló


class Form:
    """
    Formulario de registro.

    El formulario es correcto si todos los campos son válidos y todas las
    reglas cruzadas se cumplen. El orden de los campos solo afecta el
    orden en que se piden y se muestran.
    """

    def __init__(self):
        self.fields: list[Field] = []
        self.validators: list[CrossFieldValidator] = []
        # Mensajes de las reglas cruzadas que fallaron en el último validate_form()
        self.rule_errors: list[str] = []

    def add_field(self, field: Field) -> Field:
        self.fields.append(field)
        return field

    def add_validator(self, validator: CrossFieldValidator) -> CrossFieldValidator:
        self.validators.append(validator)
        return validator

    def fill_form(self, reader: InputReader) -> FillResult:
        """
        Pide solo los campos inválidos o sin completar.

        Los campos que ya son válidos no se vuelven a pedir.
        """
        for field in self.fields:
            if field.is_valid:
                continue
            if not field.fill(reader):
                logger.debug("Carga cancelada en el campo %r", field.label)
                return FillResult.CANCEL
            field.validate()
        return FillResult.COMPLETED

    def validate_form(self) -> bool:
        """
        Revalida todos los campos y luego las reglas cruzadas.

        No lee datos nuevos. Una regla cruzada que falla invalida sus dos
        campos para que se vuelvan a pedir en el próximo fill_form().
        """
        fields_ok = all([field.validate() for field in self.fields])

        self.rule_errors = []
        rules_ok = True
        for validator in self.validators:
            if validator.validate():
                continue
            rules_ok = False
            # Si algún campo ya era inválido, la regla no se evaluó
            if all(f.is_valid for f in validator.fields):
                self.rule_errors.append(validator.message)
                for f in validator.fields:
                    f.invalidate(validator.message)

        logger.debug("Formulario: campos=%s reglas=%s", fields_ok, rules_ok)
        return fields_ok and rules_ok

    @property
    def is_valid(self) -> bool:
        return all(f.is_valid for f in self.fields) and all(v.validate() for v in self.validators)

    def values(self) -> dict[str, object]:
        """Diccionario etiqueta -> valor mostrado."""
        return {f.label: f.display_value() for f in self.fields}

    def __str__(self) -> str:
        return "\n".join(str(f) for f in self.fields)
