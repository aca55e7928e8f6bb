"""Permite ejecutar con 'python -m registro'."""

from registro.cli import main

main()
