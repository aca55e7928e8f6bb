"""
Núcleo del formulario de registro.

- values: valores enumerados y parsers de texto
- validators: validadores de campo y validadores cruzados
- field: campo con prompt, valor y validador
- form: formulario con campos y reglas cruzadas
- input: interfaz de lectura de valores
"""

from registro.core.field import Field
from registro.core.form import FillResult, Form
from registro.core.input import InputReader
from registro.core.validators import (
    CombinationValidator,
    CrossFieldValidator,
    DestinationToFlightTimeValidator,
    DestinationToWifiBundleValidator,
    IdValidator,
    NoDigitValidator,
    RangeValidator,
    Validator,
)
from registro.core.values import (
    EnumeratedValue,
    parse_enumerated,
    parse_int,
    parse_text,
    parse_unsigned,
)

__all__ = [
    "Field",
    "FillResult",
    "Form",
    "InputReader",
    # validadores
    "Validator",
    "RangeValidator",
    "NoDigitValidator",
    "IdValidator",
    "CrossFieldValidator",
    "CombinationValidator",
    "DestinationToFlightTimeValidator",
    "DestinationToWifiBundleValidator",
    # valores
    "EnumeratedValue",
    "parse_text",
    "parse_int",
    "parse_unsigned",
    "parse_enumerated",
]
