"""
Tests para core/field.py - Campo del formulario.
"""

from registro.core import (
    Field,
    IdValidator,
    NoDigitValidator,
    RangeValidator,
    parse_enumerated,
    parse_int,
    parse_text,
    parse_unsigned,
)


class TestFieldState:
    """Tests para el estado de un campo."""

    def test_initial_state(self):
        """Test campo nuevo sin valor e inválido."""
        f = Field("¿Cuál es tu nombre?", parse_text)
        assert f.value is None
        assert f.filled is False
        assert f.is_valid is False
        assert f.validator is None
        assert f.label == "¿Cuál es tu nombre?"

    def test_label_is_first_prompt_line(self, catalog):
        f = Field("¿Destino?\n" + catalog.destinations.values_and_names(),
                  parse_enumerated(catalog.destinations))
        assert f.label == "¿Destino?"

    def test_add_validator_replaces(self):
        f = Field("x", parse_int)
        first = RangeValidator(1, 2)
        second = RangeValidator(3, 4)
        f.add_validator(first)
        f.add_validator(second)
        assert f.validator is second


class TestFieldFill:
    """Tests para Field.fill."""

    def test_fill_stores_value(self, scripted):
        f = Field("¿Nombre?", parse_text)
        assert f.fill(scripted(["Ana"])) is True
        assert f.value == "Ana"
        assert f.filled is True
        assert f.is_valid is False

    def test_fill_resets_validity(self, scripted):
        """Test completar de nuevo deja el campo sin verificar."""
        f = Field("¿Año?", parse_int)
        f.add_validator(RangeValidator(1900, 2000))
        f.fill(scripted(["1950"]))
        assert f.validate() is True
        f.fill(scripted(["1960"]))
        assert f.is_valid is False

    def test_malformed_input_reasked(self, scripted):
        """Test texto no numérico se rechaza y se vuelve a pedir."""
        reader = scripted(["abc", "-3", "42"])
        f = Field("¿Documento?", parse_unsigned)
        assert f.fill(reader) is True
        assert f.value == 42
        assert reader.rejected == ["abc", "-3"]
        assert len(reader.prompts) == 3

    def test_cancel_keeps_previous_value(self, scripted):
        f = Field("¿Nombre?", parse_text)
        f.fill(scripted(["Ana"]))
        assert f.fill(scripted([])) is False
        assert f.value == "Ana"


class TestFieldValidate:
    """Tests para Field.validate."""

    def test_matches_validator(self, scripted):
        f = Field("¿Nombre?", parse_text)
        f.add_validator(NoDigitValidator())
        f.fill(scripted(["R2D2"]))
        assert f.validate() is False
        assert f.is_valid == NoDigitValidator().validate("R2D2")
        f.fill(scripted(["Ana"]))
        assert f.validate() is True

    def test_without_validator_is_valid(self, scripted):
        f = Field("¿Comentario?", parse_text)
        f.fill(scripted(["123"]))
        assert f.validate() is True

    def test_unfilled_with_validator_is_invalid(self):
        f = Field("¿Documento?", parse_unsigned)
        f.add_validator(IdValidator())
        assert f.validate() is False
        assert f.error == "Campo requerido"

    def test_error_message(self, scripted):
        f = Field("¿Documento?", parse_unsigned)
        f.add_validator(IdValidator())
        f.fill(scripted(["123456783"]))
        f.validate()
        assert f.error == IdValidator.message

    def test_invalidate(self, scripted):
        f = Field("¿Año?", parse_int)
        f.fill(scripted(["1990"]))
        f.validate()
        f.invalidate("No disponible")
        assert f.is_valid is False
        assert f.error == "No disponible"


class TestFieldDisplay:
    """Tests para la representación de texto."""

    def test_valid_field(self, scripted):
        f = Field("¿Nombre?", parse_text)
        f.fill(scripted(["Ana"]))
        f.validate()
        assert str(f) == "¿Nombre? Ana"

    def test_invalid_field_has_marker(self, scripted):
        f = Field("¿Nombre?", parse_text)
        f.add_validator(NoDigitValidator())
        f.fill(scripted(["Ana1"]))
        f.validate()
        assert str(f).startswith("¿Nombre? Ana1")
        assert "<--" in str(f)
        assert NoDigitValidator.message in str(f)

    def test_unfilled_field(self):
        f = Field("¿Nombre?", parse_text)
        assert f.display_value() == "-"
        assert "<--" in str(f)

    def test_enumerated_field_renders_name(self, scripted, catalog):
        f = Field("¿Destino?", parse_enumerated(catalog.destinations))
        f.add_validator(RangeValidator(1, 5))
        f.fill(scripted(["3"]))
        f.validate()
        assert str(f) == "¿Destino? París"

    def test_enumerated_out_of_range_renders_code(self, scripted, catalog):
        f = Field("¿Destino?", parse_enumerated(catalog.destinations))
        f.add_validator(RangeValidator(1, 5))
        f.fill(scripted(["8"]))
        f.validate()
        assert str(f).startswith("¿Destino? 8")
