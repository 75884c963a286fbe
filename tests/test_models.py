"""Tests for schema-form data models."""

import json

import pytest
from pydantic import ValidationError

from schema_form.models.form import (
    ConditionalField,
    FieldKind,
    FieldOption,
    FieldValidation,
    Form,
    FormField,
    stringify_scalar,
)
from schema_form.models.json_schema import JSONSchema
from schema_form.models.validation_result import FormValidationResult


class TestJSONSchema:
    """Tests for JSONSchema model."""

    def test_basic_schema(self):
        """Test creating a schema from JSON Schema keywords."""
        schema = JSONSchema.model_validate({
            "type": "string",
            "title": "Name",
            "minLength": 2,
            "maxLength": 50,
            "readOnly": True,
        })
        assert schema.title == "Name"
        assert schema.min_length == 2
        assert schema.max_length == 50
        assert schema.read_only is True

    def test_nested_properties(self):
        """Test that properties are parsed into schema nodes."""
        schema = JSONSchema.model_validate({
            "type": "object",
            "properties": {"name": {"type": "string"}, "gone": None},
            "required": ["name"],
        })
        assert isinstance(schema.properties["name"], JSONSchema)
        assert schema.properties["gone"] is None
        assert schema.required == ["name"]

    def test_keyword_aliases(self):
        """Test keywords that are not valid Python names."""
        schema = JSONSchema.model_validate({
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "$id": "test",
            "$ref": "#/$defs/test",
            "if": {"properties": {"a": {"const": 1}}},
            "then": {"properties": {"b": {}}},
            "else": {"properties": {"c": {}}},
            "not": {"type": "null"},
            "allOf": [{"type": "string"}],
        })
        assert schema.schema_uri.endswith("schema")
        assert schema.id == "test"
        assert schema.ref == "#/$defs/test"
        assert schema.if_.properties["a"].const == 1
        assert "b" in schema.then.properties
        assert "c" in schema.else_.properties
        assert schema.not_.type == "null"
        assert len(schema.all_of) == 1

    def test_unknown_keywords_ignored(self):
        """Test that unsupported keywords do not fail parsing."""
        schema = JSONSchema.model_validate({"type": "string", "contentEncoding": "base64"})
        assert schema.type == "string"

    def test_schema_is_frozen(self):
        """Test that schema nodes cannot be modified."""
        schema = JSONSchema(type="string")
        with pytest.raises(ValidationError):
            schema.type = "number"

    @pytest.mark.parametrize(
        "type_value, expected",
        [
            (None, (None, None, False)),
            ("string", ("string", None, True)),
            (["string", "null"], (None, ["string", "null"], True)),
            ([], (None, [], True)),
        ],
    )
    def test_declared_type(self, type_value, expected):
        """Test single and union type access."""
        schema = JSONSchema(type=type_value)
        assert schema.declared_type() == expected


class TestStringifyScalar:
    """Tests for scalar rendering."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("a", "a"),
            (1, "1"),
            (1.0, "1"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (1e21, "1e+21"),
            (-1e21, "-1e+21"),
            (1e20, "100000000000000000000"),
        ],
    )
    def test_stringify(self, value, expected):
        """Test text form of each scalar type."""
        assert stringify_scalar(value) == expected


class TestFieldValidation:
    """Tests for FieldValidation model."""

    def test_empty(self):
        """Test an empty validation block."""
        assert FieldValidation().is_empty()

    def test_zero_is_a_bound(self):
        """Test that zero counts as a set bound."""
        assert not FieldValidation(min_length=0).is_empty()

    def test_required_only(self):
        """Test that required alone is not empty."""
        assert not FieldValidation(required=True).is_empty()

    def test_wire_names(self):
        """Test parsing from serialized key names."""
        validation = FieldValidation.model_validate({
            "minLength": 1,
            "maxLength": 5,
            "min": 0,
            "max": 10,
            "patternError": "bad",
            "minItems": 1,
            "maxItems": 3,
        })
        assert validation.min_length == 1
        assert validation.maximum == 10
        assert validation.pattern_error == "bad"
        assert validation.max_items == 3


class TestFormField:
    """Tests for FormField model."""

    def test_basic_field(self):
        """Test creating a basic field."""
        field = FormField(name="email", kind=FieldKind.EMAIL.value, label="Email")
        assert field.name == "email"
        assert field.kind == "email"
        assert field.options == []
        assert field.validation is None
        assert field.read_only is False

    def test_unknown_kind_is_kept(self):
        """Test that any kind string is accepted for later validation."""
        field = FormField(name="x", kind="color")
        assert field.kind == "color"

    def test_parse_wire_format(self):
        """Test parsing a serialized field."""
        field = FormField.model_validate({
            "name": "tags",
            "type": "array",
            "readOnly": True,
            "helpText": "Add tags",
            "fields": [{"name": "item", "type": "text"}],
            "conditional": {
                "condition": "other",
                "value": True,
                "then": [{"name": "a", "type": "text"}],
                "else": [{"name": "b", "type": "text"}],
            },
        })
        assert field.kind == "array"
        assert field.read_only is True
        assert field.help_text == "Add tags"
        assert field.fields[0].name == "item"
        assert field.conditional.value is True
        assert field.conditional.else_[0].name == "b"


class TestForm:
    """Tests for Form model."""

    def test_minimal_export(self):
        """Test that empty attributes are omitted."""
        form = Form(method="POST", fields=[FormField(name="name", kind="text")])
        assert form.to_dict() == {
            "method": "POST",
            "fields": [{"name": "name", "type": "text"}],
        }

    def test_fields_always_present(self):
        """Test that a form without fields still exports the fields key."""
        assert Form().to_dict() == {"fields": []}

    def test_full_export(self):
        """Test exporting nested fields, options and conditionals."""
        form = Form(
            title="Signup",
            fields=[
                FormField(
                    name="plan",
                    kind="radio",
                    options=[FieldOption(label="Free", value="free"), FieldOption(label="Pro", value="pro")],
                    validation=FieldValidation(required=True),
                ),
                FormField(
                    name="address",
                    kind="object",
                    fields=[FormField(name="city", kind="text", validation=FieldValidation(max_length=20))],
                    conditional=ConditionalField(
                        condition="plan",
                        value="pro",
                        then=[FormField(name="vat", kind="text")],
                    ),
                ),
            ],
        )
        data = form.to_dict()
        plan, address = data["fields"]
        assert plan["options"] == [{"label": "Free", "value": "free"}, {"label": "Pro", "value": "pro"}]
        assert plan["validation"] == {"required": True}
        assert address["fields"] == [{"name": "city", "type": "text", "validation": {"maxLength": 20}}]
        assert address["conditional"] == {
            "condition": "plan",
            "value": "pro",
            "then": [{"name": "vat", "type": "text"}],
        }
        assert "readOnly" not in address

    def test_export_round_trip(self):
        """Test that the exported form parses back to the same form."""
        form = Form(
            method="POST",
            fields=[
                FormField(
                    name="count",
                    kind="number",
                    default=3,
                    read_only=True,
                    validation=FieldValidation(minimum=0, maximum=10, step=1),
                )
            ],
        )
        assert Form.model_validate(form.to_dict()) == form

    def test_null_option_value_kept(self):
        """Test that an option whose value is null still exports its value."""
        form = Form(fields=[
            FormField(
                name="tier",
                kind="radio",
                options=[FieldOption(label="a", value="a"), FieldOption(label="null", value=None)],
            )
        ])
        assert form.to_dict()["fields"][0]["options"] == [
            {"label": "a", "value": "a"},
            {"label": "null", "value": None},
        ]

    def test_to_json(self):
        """Test JSON text export."""
        form = Form(fields=[FormField(name="a", kind="text")])
        assert json.loads(form.to_json(indent=2)) == form.to_dict()


class TestFormValidationResult:
    """Tests for FormValidationResult model."""

    def test_valid_result(self):
        """Test valid result export."""
        assert FormValidationResult(is_valid=True).to_dict() == {"is_valid": True}

    def test_invalid_result(self):
        """Test invalid result export."""
        result = FormValidationResult(
            is_valid=False,
            error_type="FieldNameError",
            path="fields[0]",
            message="fields[0]: field name 'submit' is reserved and cannot be used",
        )
        assert result.to_dict()["error_type"] == "FieldNameError"
        assert result.to_dict()["path"] == "fields[0]"
