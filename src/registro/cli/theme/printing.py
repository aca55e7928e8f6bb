"""
Funciones que imprimen directamente a la consola.
"""

from registro.cli.theme.palette import get_console, get_palette
from registro.cli.theme.styled import (
    styled_banner, styled_success, styled_warning, styled_error, styled_info,
)


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    console = get_console()
    console.print(styled_success(text))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    """Imprime error."""
    console = get_console()
    console.print(styled_error(text))


def print_info(text: str) -> None:
    """Imprime información."""
    console = get_console()
    console.print(styled_info(text))


# =============================================================================
# BANNERS
# =============================================================================

def print_welcome_banner() -> None:
    """Imprime el banner de bienvenida."""
    console = get_console()
    console.print(styled_banner(
        "¡Hola y bienvenido!",
        "Para registrarte completa los campos a continuación",
    ))
    console.print()


def print_error_banner() -> None:
    """Imprime el banner de error del formulario."""
    console = get_console()
    p = get_palette()
    console.print(styled_banner(
        "¡Hay un error en al menos uno de los campos!",
        "Por favor corrige los errores",
        border=p.error,
    ))


def print_goodbye_banner() -> None:
    """Imprime el banner de despedida."""
    console = get_console()
    p = get_palette()
    console.print(styled_banner(
        "¡Gracias!",
        "Estos son los datos que enviaste:",
        border=p.success,
    ))
