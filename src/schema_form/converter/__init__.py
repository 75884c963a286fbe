"""
Schema converters for schema-form.

This module contains:
- Field kind inference (schema node -> field kind)
- JSON Schema to form tree conversion
"""

from schema_form.converter.inference import (
    infer_declared_kind,
    infer_field_kind,
)
from schema_form.converter.json_schema import (
    build_conditional_field,
    build_validation,
    convert_enum_to_options,
    convert_properties_to_fields,
    convert_schema_to_field,
    convert_schema_to_form,
)

__all__ = [
    "infer_declared_kind",
    "infer_field_kind",
    "build_conditional_field",
    "build_validation",
    "convert_enum_to_options",
    "convert_properties_to_fields",
    "convert_schema_to_field",
    "convert_schema_to_form",
]
