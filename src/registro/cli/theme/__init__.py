"""
Sistema de temas para la interfaz CLI del registro.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear e imprimir tablas Rich
"""

from registro.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from registro.cli.theme.styled import (
    styled_banner,
    styled_value,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
)

from registro.cli.theme.printing import (
    print_success,
    print_warning,
    print_error,
    print_info,
    print_welcome_banner,
    print_error_banner,
    print_goodbye_banner,
)

from registro.cli.theme.tables import (
    create_form_table,
    create_name_table,
    create_rules_table,
    print_form,
    print_catalog,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_banner",
    "styled_value",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    # printing
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_welcome_banner",
    "print_error_banner",
    "print_goodbye_banner",
    # tables
    "create_form_table",
    "create_name_table",
    "create_rules_table",
    "print_form",
    "print_catalog",
]
