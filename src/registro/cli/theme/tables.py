"""
Funciones para crear e imprimir tablas Rich.
"""

from rich.table import Table
from rich.text import Text
from rich import box

from registro.config import NameTable, RegistrationCatalog
from registro.core import Form
from registro.cli.theme.palette import get_console, get_palette
from registro.cli.theme.styled import styled_value


def create_form_table(form: Form) -> Table:
    """Crea tabla con los campos del formulario y su estado."""
    p = get_palette()

    table = Table(
        show_header=True,
        header_style=f"bold {p.primary}",
        box=box.ROUNDED,
        border_style=p.border,
        padding=(0, 1),
    )
    table.add_column("Campo", style=p.label)
    table.add_column("Valor")
    table.add_column("Estado")

    for field in form.fields:
        if field.is_valid:
            status = Text("OK", style=p.success)
        else:
            status = Text(f"<-- {field.error or 'Valor inválido'}", style=p.error)
        table.add_row(field.label, styled_value(field.display_value(), field.is_valid), status)

    return table


def print_form(form: Form) -> None:
    """Imprime todos los campos del formulario, en orden."""
    console = get_console()
    console.print(create_form_table(form))


def create_name_table(names: NameTable) -> Table:
    """Crea tabla código/nombre."""
    p = get_palette()

    table = Table(
        title=names.title,
        title_style=f"bold {p.secondary}",
        box=box.SIMPLE,
        header_style=f"bold {p.primary}",
    )
    table.add_column("Código", justify="right", style=p.number)
    table.add_column("Nombre")

    for code, name in sorted(names.entries.items()):
        table.add_row(str(code), name)
    return table


def create_rules_table(catalog: RegistrationCatalog) -> Table:
    """Crea tabla con horarios y paquetes WiFi permitidos por destino."""
    p = get_palette()

    table = Table(
        title="Combinaciones disponibles",
        title_style=f"bold {p.secondary}",
        box=box.SIMPLE,
        header_style=f"bold {p.primary}",
    )
    table.add_column("Destino")
    table.add_column("Horarios")
    table.add_column("WiFi")

    def _names(codes, names: NameTable) -> str:
        return ", ".join(names.entries[c] for c in sorted(codes)) or "-"

    for code, destination in sorted(catalog.destinations.entries.items()):
        table.add_row(
            destination,
            _names(catalog.flight_time_rules.get(code, ()), catalog.flight_times),
            _names(catalog.wifi_bundle_rules.get(code, ()), catalog.wifi_bundles),
        )
    return table


def print_catalog(catalog: RegistrationCatalog) -> None:
    """Imprime las tablas de nombres y las combinaciones permitidas."""
    console = get_console()
    for names in (catalog.destinations, catalog.flight_times, catalog.wifi_bundles):
        console.print(create_name_table(names))
    console.print(create_rules_table(catalog))
