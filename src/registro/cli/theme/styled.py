"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from registro.cli.theme.palette import get_palette


def styled_banner(title: str, subtitle: str, border: str = None) -> Panel:
    """Crea un banner de dos líneas centrado."""
    p = get_palette()
    content = Text(justify="center")
    content.append(title, style=f"bold {p.primary}")
    content.append(f"\n{subtitle}", style=p.secondary)

    return Panel(
        content,
        border_style=border or p.primary,
        box=box.DOUBLE,
        padding=(0, 2),
        width=62,
    )


def styled_value(value, valid: bool = True) -> Text:
    """Valor de un campo, en color de error si no es válido."""
    p = get_palette()
    return Text(str(value), style=f"bold {p.number}" if valid else f"bold {p.error}")


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    """Texto informativo."""
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)
