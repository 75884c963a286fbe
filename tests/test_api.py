"""Tests for the top-level entry points."""

import json

import pytest

from schema_form import (
    FieldKind,
    Form,
    JSONSchema,
    SchemaParseError,
    check_form,
    from_json_schema,
    parse_form,
    parse_schema,
    validate_form,
)


SIGNUP_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Signup",
    "type": "object",
    "required": ["email", "password"],
    "properties": {
        "email": {"type": "string", "format": "email", "title": "Email"},
        "password": {"type": "string", "format": "password", "minLength": 8},
        "age": {"type": "integer", "minimum": 13, "maximum": 120},
        "plan": {"type": "string", "enum": ["free", "pro"]},
        "bio": {"type": "string", "maxLength": 500},
        "newsletter": {"type": "boolean", "default": False},
        "tags": {"type": "array", "items": {"type": "string"}, "maxItems": 5},
        "source": {"const": "web"},
    },
}


class TestParseSchema:
    """Tests for schema decoding."""

    def test_parse_text(self):
        """Test decoding JSON text."""
        schema = parse_schema('{"type": "string", "title": "Name"}')
        assert schema.title == "Name"

    def test_parse_bytes(self):
        """Test decoding UTF-8 bytes."""
        schema = parse_schema(b'{"type": "object", "properties": {"name": {"type": "string"}}}')
        assert schema.properties["name"].type == "string"

    def test_parse_mapping(self):
        """Test decoding a mapping."""
        assert parse_schema({}).type is None

    @pytest.mark.parametrize("data", ["{invalid json}", "[1, 2]", '{"properties": 3}'])
    def test_invalid_input(self, data):
        """Test that malformed schemas raise SchemaParseError."""
        with pytest.raises(SchemaParseError, match="invalid JSON Schema"):
            parse_schema(data)


class TestFromJsonSchema:
    """Tests for parse-and-convert."""

    def test_signup_form(self):
        """Test converting and validating a realistic schema."""
        form = from_json_schema(json.dumps(SIGNUP_SCHEMA))
        kinds = {f.name: f.kind for f in form.fields}
        assert [f.name for f in form.fields] == sorted(SIGNUP_SCHEMA["properties"])
        assert kinds == {
            "age": FieldKind.NUMBER.value,
            "bio": FieldKind.TEXTAREA.value,
            "email": FieldKind.EMAIL.value,
            "newsletter": FieldKind.CHECKBOX.value,
            "password": FieldKind.PASSWORD.value,
            "plan": FieldKind.RADIO.value,
            "source": FieldKind.HIDDEN.value,
            "tags": FieldKind.ARRAY.value,
        }
        validate_form(form)

    def test_accepts_schema_model(self):
        """Test passing an already parsed schema."""
        form = from_json_schema(JSONSchema(type="string", format="date"))
        assert form.fields[0].kind == FieldKind.DATE.value

    def test_serialized_round_trip(self):
        """Test that a converted form survives serialization."""
        form = from_json_schema(SIGNUP_SCHEMA)
        restored = parse_form(form.to_json())
        assert restored == form
        assert check_form(restored).is_valid


    def test_nullable_enum_export(self):
        """Test that a null enum member exports as a labelled option."""
        form = from_json_schema({"type": ["string", "null"], "enum": ["a", None]})
        assert form.to_dict()["fields"][0]["options"] == [
            {"label": "a", "value": "a"},
            {"label": "null", "value": None},
        ]
        assert parse_form(form.to_json()) == form

class TestParseForm:
    """Tests for form decoding."""

    def test_parse_form(self):
        """Test decoding a serialized form."""
        form = parse_form({"method": "GET", "fields": [{"name": "q", "type": "text"}]})
        assert isinstance(form, Form)
        assert form.fields[0].name == "q"

    def test_invalid_form(self):
        """Test that a field without a type is rejected."""
        with pytest.raises(SchemaParseError, match="invalid form definition"):
            parse_form({"fields": [{"name": "q"}]})
