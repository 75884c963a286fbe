"""
schema-form: Form definitions from JSON Schema.

Convert a JSON Schema into a renderable form definition, then check that
the definition is consistent before handing it to a renderer.

Simple Usage:
    from schema_form import from_json_schema, validate_form

    form = from_json_schema('{"type": "object", "properties": {"email": {"type": "string", "format": "email"}}}')
    validate_form(form)  # raises FormError on the first problem

    form_config = form.to_dict()

Working with trees:
    from schema_form import JSONSchema, convert_schema_to_form, check_form

    schema = JSONSchema.model_validate({"type": "string", "enum": ["a", "b"]})
    form = convert_schema_to_form(schema)

    # Forms may be edited before validation
    form.fields[0].name = "choice"

    result = check_form(form)
    if not result.is_valid:
        print(result.message)

MCP server:
    python run_mcp_server.py --transport stdio
"""

from schema_form.api import (
    from_json_schema,
    parse_form,
    parse_schema,
)
from schema_form.converter import (
    convert_schema_to_field,
    convert_schema_to_form,
    infer_field_kind,
)
from schema_form.exceptions import (
    ConditionReferenceError,
    ConstraintError,
    FieldKindError,
    FieldNameError,
    FormError,
    SchemaParseError,
    StructuralError,
)
from schema_form.models import (
    ConditionalField,
    FieldKind,
    FieldOption,
    FieldValidation,
    Form,
    FormField,
    FormValidationResult,
    JSONSchema,
)
from schema_form.validation import (
    check_form,
    validate_form,
)

__all__ = [
    # Main interface
    "from_json_schema",
    "parse_form",
    "parse_schema",
    "convert_schema_to_field",
    "convert_schema_to_form",
    "infer_field_kind",
    "validate_form",
    "check_form",
    # Models
    "ConditionalField",
    "FieldKind",
    "FieldOption",
    "FieldValidation",
    "Form",
    "FormField",
    "FormValidationResult",
    "JSONSchema",
    # Errors
    "ConditionReferenceError",
    "ConstraintError",
    "FieldKindError",
    "FieldNameError",
    "FormError",
    "SchemaParseError",
    "StructuralError",
]

__version__ = "0.1.0"
