"""
Data models for schema-form.

This module contains Pydantic models for:
- JSON Schema input (read-only schema tree)
- Form definition output (field tree)
- Validation results
"""

from schema_form.models.json_schema import (
    JSONSchema,
    Scalar,
)
from schema_form.models.form import (
    ConditionalField,
    FieldKind,
    FieldOption,
    FieldValidation,
    Form,
    FormField,
    stringify_scalar,
)
from schema_form.models.validation_result import FormValidationResult

__all__ = [
    # Schema input
    "JSONSchema",
    "Scalar",
    # Form output
    "ConditionalField",
    "FieldKind",
    "FieldOption",
    "FieldValidation",
    "Form",
    "FormField",
    "stringify_scalar",
    # Validation
    "FormValidationResult",
]
