"""
Campo del formulario: prompt, valor actual, estado y un validador.
"""

import logging
from typing import Any, Callable, Optional

from registro.core.input import InputReader
from registro.core.validators import Validator

logger = logging.getLogger(__name__)


class Field:
    """
    Unidad prompt/valor/validez del formulario.

    Estados: sin completar -> completado sin verificar -> válido o inválido.
    is_valid es False hasta que una validación resulte exitosa.
    """

    def __init__(self, prompt: str, parser: Callable[[str], Any], label: Optional[str] = None):
        self.prompt = prompt
        self.parser = parser
        # Para mostrar se usa la primera línea del prompt
        self.label = label or prompt.splitlines()[0]
        self.value: Any = None
        self.filled = False
        self.is_valid = False
        self.error = ""
        self.validator: Optional[Validator] = None

    def add_validator(self, validator: Validator) -> None:
        """Asigna el validador del campo (reemplaza al anterior)."""
        self.validator = validator

    def fill(self, reader: InputReader) -> bool:
        """
        Lee un nuevo valor desde el lector.

        Returns:
            False si el usuario canceló, True en otro caso
        """
        value = reader.read(self.prompt, self.parser)
        if value is None:
            return False
        self.value = value
        self.filled = True
        self.is_valid = False
        self.error = ""
        return True

    def validate(self) -> bool:
        """Aplica el validador al valor actual y guarda el resultado."""
        if self.validator is None:
            self.is_valid = True
        elif not self.filled:
            self.is_valid = False
        else:
            self.is_valid = self.validator.validate(self.value)

        if self.is_valid:
            self.error = ""
        else:
            self.error = self.validator.message if self.filled else "Campo requerido"
        logger.debug("Campo %r = %r -> %s", self.label, self.value,
                     "válido" if self.is_valid else "inválido")
        return self.is_valid

    def invalidate(self, message: str) -> None:
        """Marca el campo como inválido por una regla externa al campo."""
        self.is_valid = False
        self.error = message

    def display_value(self) -> str:
        return str(self.value) if self.filled else "-"

    def __str__(self) -> str:
        text = f"{self.label} {self.display_value()}"
        if not self.is_valid:
            text += f"   <-- {self.error or 'Valor inválido'}"
        return text
