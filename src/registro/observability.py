"""Configuración de logging para registro."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "WARNING") -> None:
    """
    Configura el logging de diagnóstico.

    Args:
        level: Nivel de log (DEBUG, INFO, WARNING, ERROR)
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "rich": {
                "format": "%(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "()": "rich.logging.RichHandler",
                "formatter": "rich",
                "level": level,
                "show_path": False,
                "rich_tracebacks": True,
            },
        },
        "loggers": {
            "registro": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
        },
    }

    logging.config.dictConfig(config)
