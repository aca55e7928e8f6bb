"""
Tests para config.py - Catálogo estático.
"""

import pytest
from pydantic import ValidationError

from registro.config import NameTable, RegistrationCatalog


def _catalog_kwargs(catalog, **overrides):
    data = {
        "destinations": catalog.destinations,
        "flight_times": catalog.flight_times,
        "wifi_bundles": catalog.wifi_bundles,
        "flight_time_rules": catalog.flight_time_rules,
        "wifi_bundle_rules": catalog.wifi_bundle_rules,
    }
    data.update(overrides)
    return data


class TestNameTable:
    """Tests para NameTable."""

    def test_range(self, catalog):
        assert catalog.destinations.first_code == 1
        assert catalog.destinations.last_code == 5
        assert catalog.flight_times.last_code == 3
        assert catalog.wifi_bundles.last_code == 3

    def test_name_for(self, catalog):
        assert catalog.flight_times.name_for(2).startswith("Tarde")
        assert catalog.flight_times.name_for(4) is None
        assert catalog.flight_times.name_for(0) is None

    def test_values_and_names(self, catalog):
        text = catalog.wifi_bundles.values_and_names()
        lines = text.splitlines()
        assert len(lines) == 3
        assert lines[0].strip() == "1 - Básico"
        assert lines[2].strip() == "3 - Premium"

    def test_empty_table_rejected(self):
        with pytest.raises(ValidationError):
            NameTable(title="Vacía", entries={})

    def test_frozen(self, catalog):
        with pytest.raises(ValidationError):
            catalog.destinations.title = "Otro"

    def test_entries_read_only(self, catalog):
        """Test las entradas no se pueden modificar en el lugar."""
        with pytest.raises(TypeError):
            catalog.destinations.entries[9] = "Marte"
        assert catalog.destinations.last_code == 5

    def test_entries_copied_from_input(self):
        source = {1: "Uno"}
        table = NameTable(title="T", entries=source)
        source[2] = "Dos"
        assert table.last_code == 1


class TestRegistrationCatalog:
    """Tests para RegistrationCatalog."""

    def test_default_ages(self, catalog):
        assert catalog.min_age == 15
        assert catalog.max_age == 120

    def test_every_destination_has_rules(self, catalog):
        for code in catalog.destinations.entries:
            assert catalog.flight_time_rules[code]
            assert catalog.wifi_bundle_rules[code]

    def test_rules_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.flight_time_rules[4] = frozenset({1})
        with pytest.raises(TypeError):
            del catalog.wifi_bundle_rules[1]
        assert catalog.allows_flight_time(4, 1) is False
        assert catalog.allows_wifi_bundle(1, 1) is True

    def test_allows_helpers(self, catalog):
        assert catalog.allows_flight_time(4, 3) is True
        assert catalog.allows_flight_time(4, 1) is False
        assert catalog.allows_wifi_bundle(1, 3) is False
        assert catalog.allows_wifi_bundle(2, 3) is True
        assert catalog.allows_wifi_bundle(9, 1) is False

    def test_unknown_destination_in_rules(self, catalog):
        """Test regla con destino inexistente."""
        rules = dict(catalog.flight_time_rules)
        rules[9] = frozenset({1})
        with pytest.raises(ValidationError, match="destino desconocido"):
            RegistrationCatalog(**_catalog_kwargs(catalog, flight_time_rules=rules))

    def test_unknown_code_in_rules(self, catalog):
        """Test regla con paquete WiFi inexistente."""
        rules = dict(catalog.wifi_bundle_rules)
        rules[1] = frozenset({1, 7})
        with pytest.raises(ValidationError, match="códigos desconocidos"):
            RegistrationCatalog(**_catalog_kwargs(catalog, wifi_bundle_rules=rules))

    def test_min_age_greater_than_max(self, catalog):
        with pytest.raises(ValidationError):
            RegistrationCatalog(**_catalog_kwargs(catalog, min_age=50, max_age=40))
