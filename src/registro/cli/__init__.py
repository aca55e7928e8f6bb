"""
CLI del registro de pasajeros.

Sin subcomando ejecuta el formulario de registro.

Comandos:
- registrar: Formulario interactivo de registro
- catalogo: Muestra destinos, horarios, paquetes WiFi y combinaciones
"""

import typer

from registro.cli.theme import CLITheme, ThemeName

# Crear aplicación principal
app = typer.Typer(
    name="registro",
    help="Registro de pasajeros con validación de datos.",
)


@app.command()
def registrar(
    tema: ThemeName = typer.Option(ThemeName.DEFAULT, "--tema", "-t", help="Tema de colores"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Muestra mensajes de diagnóstico"),
):
    """Completa el formulario de registro de forma interactiva."""
    from registro.observability import setup_logging
    from registro.cli.prompts import ConsoleInput
    from registro.cli.registration import run_registration
    from registro.cli.theme import print_warning

    setup_logging("DEBUG" if verbose else "WARNING")
    CLITheme.set_theme(tema)

    form = run_registration(ConsoleInput())
    if form is None:
        print_warning("Registro cancelado")
        raise typer.Exit(1)


@app.command()
def catalogo(
    tema: ThemeName = typer.Option(ThemeName.DEFAULT, "--tema", "-t", help="Tema de colores"),
):
    """Muestra las tablas de destinos, horarios y paquetes WiFi."""
    from registro.config import default_catalog
    from registro.cli.theme import print_catalog

    CLITheme.set_theme(tema)
    print_catalog(default_catalog())


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Registro de pasajeros con validación de datos.

    Sin subcomando, equivale a 'registro registrar'.
    """
    if ctx.invoked_subcommand is None:
        registrar(tema=ThemeName.DEFAULT, verbose=False)

def main():
    """Punto de entrada del script 'registro'."""
    app()


__all__ = [
    "app",
    "main",
]
