"""
Lectura de valores desde la consola con questionary.

El texto ingresado se valida con el parser del campo antes de aceptarlo:
si la conversión falla se muestra el error en línea y se vuelve a pedir.
"""

from typing import Callable, Optional, TypeVar

import questionary
from questionary import Style

from registro.cli.theme import get_palette

T = TypeVar("T")


def get_prompt_style() -> Style:
    """Obtiene el estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        # Marcador de pregunta (?)
        ('qmark', f'fg:{p.accent} bold'),
        # Texto de la pregunta
        ('question', 'bold'),
        # Respuesta ingresada
        ('answer', f'fg:{p.success} bold'),
        # Instrucciones
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
    ])


def parse_check(parse: Callable[[str], T]) -> Callable[[str], bool | str]:
    """Adapta un parser al formato de validate de questionary."""

    def check(raw: str) -> bool | str:
        try:
            parse(raw)
        except ValueError as exc:
            return str(exc)
        return True

    return check


class ConsoleInput:
    """Lector interactivo de valores de campo."""

    def __init__(self, style: Optional[Style] = None):
        self.style = style or get_prompt_style()

    def read(self, prompt: str, parse: Callable[[str], T]) -> Optional[T]:
        try:
            answer = questionary.text(
                prompt,
                validate=parse_check(parse),
                style=self.style,
            ).ask()
        except EOFError:
            answer = None

        if answer is None:
            return None
        return parse(answer)
