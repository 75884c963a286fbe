"""
Form validation for schema-form.

Structural checks that a form definition must pass before rendering.
"""

from schema_form.validation.form_validator import (
    check_form,
    validate_field,
    validate_form,
)

__all__ = [
    "check_form",
    "validate_field",
    "validate_form",
]
