"""
Valores de campo y conversión desde texto.

Los parsers reciben el texto ingresado y lanzan ValueError con un mensaje
legible cuando no se puede convertir.
"""

from functools import total_ordering
from typing import Callable, Optional

from registro.config import NameTable


@total_ordering
class EnumeratedValue:
    """
    Código entero asociado a una tabla de nombres.

    Se muestra con el nombre de la tabla si el código está en rango,
    o con el número tal cual si no lo está. Se compara por código,
    también contra enteros, para poder usar RangeValidator(1, 5).
    """

    __slots__ = ("code", "table")

    def __init__(self, code: int, table: NameTable):
        self.code = code
        self.table = table

    @staticmethod
    def _code_of(other) -> Optional[int]:
        if isinstance(other, EnumeratedValue):
            return other.code
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other) -> bool:
        code = self._code_of(other)
        if code is None:
            return NotImplemented
        return self.code == code

    def __lt__(self, other) -> bool:
        code = self._code_of(other)
        if code is None:
            return NotImplemented
        return self.code < code

    def __hash__(self) -> int:
        return hash(self.code)

    def __int__(self) -> int:
        return self.code

    def __str__(self) -> str:
        name = self.table.name_for(self.code)
        return name if name is not None else str(self.code)

    def __repr__(self) -> str:
        return f"EnumeratedValue({self.code}, {self.table.title!r})"


# ============================================================================
# Parsers
# ============================================================================

def parse_text(raw: str) -> str:
    """Texto libre, sin espacios en los extremos."""
    return raw.strip()


def parse_int(raw: str) -> int:
    """Entero con signo opcional, solo dígitos 0-9."""
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdecimal()):
        raise ValueError("Debe ser un número entero")
    return int(text)


def parse_unsigned(raw: str) -> int:
    value = parse_int(raw)
    if value < 0:
        raise ValueError("Debe ser un número entero no negativo")
    return value


def parse_enumerated(table: NameTable) -> Callable[[str], EnumeratedValue]:
    """Crea un parser que lee un código y lo asocia a la tabla."""

    def parse(raw: str) -> EnumeratedValue:
        return EnumeratedValue(parse_int(raw), table)

    return parse
