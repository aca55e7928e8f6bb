"""Configuración de pytest para tests de registro."""

import pytest

from registro.config import default_catalog


class ScriptedInput:
    """Lector que responde con una lista fija de textos."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.rejected = []

    def read(self, prompt, parse):
        while self.answers:
            raw = self.answers.pop(0)
            self.prompts.append(prompt)
            try:
                return parse(raw)
            except ValueError:
                self.rejected.append(raw)
        # Sin respuestas: equivale a cancelar
        return None


@pytest.fixture
def catalog():
    """Catálogo por defecto."""
    return default_catalog()


@pytest.fixture
def scripted():
    """Fábrica de lectores con respuestas fijas."""
    return ScriptedInput

