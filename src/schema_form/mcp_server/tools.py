"""
MCP Tool definitions for schema-form.

Wraps schema conversion and form validation as MCP tools.
"""

import logging
from typing import Any

from schema_form.api import from_json_schema, parse_form
from schema_form.exceptions import FormError, SchemaParseError
from schema_form.validation.form_validator import check_form

logger = logging.getLogger("schema-form-mcp")


def mcp_schema_to_form(
    schema: dict[str, Any] | str,
    validate: bool = True,
) -> dict[str, Any]:
    """
    MCP-compatible wrapper for JSON Schema conversion.

    Args:
        schema: JSON Schema as an object or as JSON text.
        validate: Also check the converted form and report the result.

    Returns:
        Dictionary with the serialized form and, if requested, the
        validation result:
        {
            "form": {"method": "POST", "fields": [...]},
            "validation": {"is_valid": true}
        }
        On conversion failure: {"error": "..."}
    """
    try:
        form = from_json_schema(schema)
    except (SchemaParseError, FormError) as e:
        logger.error(f"Schema conversion failed: {e}")
        return {"error": str(e)}

    result: dict[str, Any] = {"form": form.to_dict()}
    if validate:
        result["validation"] = check_form(form).to_dict()
    logger.info(f"Converted schema into {len(form.fields)} top-level fields")
    return result


def mcp_validate_form(form: dict[str, Any] | str) -> dict[str, Any]:
    """
    MCP-compatible wrapper for form validation.

    Args:
        form: Serialized form definition as an object or JSON text.

    Returns:
        The validation result, e.g.
        {"is_valid": false, "error_type": "FieldNameError", "path": "fields[0]", "message": "..."}
        On decode failure: {"error": "..."}
    """
    try:
        parsed = parse_form(form)
    except SchemaParseError as e:
        logger.error(f"Form decoding failed: {e}")
        return {"error": str(e)}

    return check_form(parsed).to_dict()


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "schema_to_form",
            "description": """
Convert a JSON Schema into a form definition.

WHEN TO USE:
- When you have a JSON Schema and need a renderable form for it
- When you want to know which form controls a schema maps to

RESULT:
- form: the form definition (fields, options, validation, conditionals)
- validation: whether the form definition is consistent (when validate=true)

Properties become fields in alphabetical order. Enums with up to 3 values
become radio buttons, longer enums become selects, const values become
hidden fields.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema": {
                        "type": ["object", "string"],
                        "description": "JSON Schema document (object or JSON text)",
                    },
                    "validate": {
                        "type": "boolean",
                        "description": "Validate the converted form (default: true)",
                        "default": True,
                    },
                },
                "required": ["schema"],
            },
        },
        {
            "name": "validate_form",
            "description": """
Check that a form definition is internally consistent.

Reports the first problem found: invalid, reserved or duplicate field names,
unknown field types, missing or duplicate options, inconsistent validation
bounds, or conditionals that reference unknown fields.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "form": {
                        "type": ["object", "string"],
                        "description": "Form definition (object or JSON text)",
                    },
                },
                "required": ["form"],
            },
        },
    ]
