"""
Interfaz de entrada de datos para los campos del formulario.
"""

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class InputReader(Protocol):
    """
    Fuente de valores para Field.fill().

    read() muestra el prompt, convierte el texto con parse y retorna el valor.
    Si parse lanza ValueError, el lector vuelve a preguntar. Retorna None si
    el usuario cancela.
    """

    def read(self, prompt: str, parse: Callable[[str], T]) -> Optional[T]:
        ...
