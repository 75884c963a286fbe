"""
Top-level entry points.

Decode raw JSON Schema / form documents and run the converter. Decoding is
done by pydantic; the returned form is not validated.
"""

from typing import Any

from pydantic import ValidationError

from schema_form.converter.json_schema import convert_schema_to_form
from schema_form.exceptions import SchemaParseError
from schema_form.models.form import Form
from schema_form.models.json_schema import JSONSchema


def parse_schema(data: str | bytes | dict[str, Any]) -> JSONSchema:
    """
    Decode a JSON Schema document.

    Args:
        data: JSON text, UTF-8 bytes or an already decoded mapping.

    Raises:
        SchemaParseError: If the input is not a JSON object or does not fit
            the schema model.
    """
    try:
        if isinstance(data, (str, bytes)):
            return JSONSchema.model_validate_json(data)
        return JSONSchema.model_validate(data)
    except ValidationError as e:
        raise SchemaParseError(f"invalid JSON Schema: {e}") from e


def parse_form(data: str | bytes | dict[str, Any]) -> Form:
    """
    Decode a serialized form definition.

    Raises:
        SchemaParseError: If the input does not fit the form model.
    """
    try:
        if isinstance(data, (str, bytes)):
            return Form.model_validate_json(data)
        return Form.model_validate(data)
    except ValidationError as e:
        raise SchemaParseError(f"invalid form definition: {e}") from e


def from_json_schema(data: str | bytes | dict[str, Any] | JSONSchema) -> Form:
    """
    Parse a JSON Schema and convert it into a form.

    The form is NOT validated; call ``validate_form`` before rendering.
    """
    schema = data if isinstance(data, JSONSchema) else parse_schema(data)
    return convert_schema_to_form(schema)
