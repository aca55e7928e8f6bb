"""Registro de pasajeros - formulario de consola con validación."""

__version__ = "1.0.0"
