"""
Form definition validator.

Walks a form depth-first and raises on the first violated invariant, so a
form that passes can be rendered without further checks. The form is only
read, never modified.

Per field, checks run in this order:

1. name pattern and reserved names
2. duplicate name in the enclosing scope, then the name is registered there
3. field kind
4. options
5. validation rules (bounds, then applicability to the kind)
6. nested fields, in a fresh scope (object and array only)
7. conditional reference, then ``then`` and ``else`` fields, each in a
   fresh scope

Scopes are plain sets created per call and discarded on return.
"""

import logging

from schema_form.exceptions import (
    ConditionReferenceError,
    ConstraintError,
    FieldKindError,
    FieldNameError,
    FormError,
    StructuralError,
)
from schema_form.models.form import (
    ConditionalField,
    FieldKind,
    FieldValidation,
    Form,
    FormField,
    stringify_scalar,
)
from schema_form.models.validation_result import FormValidationResult
from schema_form.validation.constants import (
    CHOICE_KINDS,
    CONTAINER_KINDS,
    HTTP_METHODS,
    OPTION_REQUIRED_KINDS,
    OPTIONLESS_KINDS,
    RESERVED_FIELD_NAMES,
    TEXT_KINDS,
    VALID_FIELD_NAME,
)

logger = logging.getLogger("schema-form")

LENGTH_RULES = ("minLength/maxLength", ("min_length", "max_length"))
RANGE_RULES = ("min/max/step", ("minimum", "maximum", "step"))
ITEM_RULES = ("minItems/maxItems", ("min_items", "max_items"))


def _inapplicable_rules(kind: FieldKind) -> tuple:
    """Validation rule groups a field kind must not carry."""
    if kind in TEXT_KINDS:
        return (RANGE_RULES, ITEM_RULES)
    if kind == FieldKind.NUMBER:
        return (LENGTH_RULES, ITEM_RULES)
    if kind == FieldKind.ARRAY:
        return (LENGTH_RULES, RANGE_RULES)
    if kind in CHOICE_KINDS:
        return (LENGTH_RULES, RANGE_RULES, ITEM_RULES)
    return ()


def validate_form(form: Form | None) -> None:
    """
    Check that a form definition is internally consistent.

    Args:
        form: The form to check.

    Raises:
        StructuralError: Missing form or no fields.
        FieldNameError: Invalid, reserved or duplicated field name.
        FieldKindError: Unknown kind or nested fields on a non-container.
        ConstraintError: Inconsistent options, bounds or HTTP method.
        ConditionReferenceError: Conditional names an unavailable field.
    """
    if form is None:
        raise StructuralError("form cannot be None")

    if not form.fields:
        raise StructuralError("form must have at least one field")

    if form.method and form.method.upper() not in HTTP_METHODS:
        raise ConstraintError(
            f"invalid HTTP method: {form.method} (must be one of: {', '.join(HTTP_METHODS)})"
        )

    scope: set[str] = set()
    for i, field in enumerate(form.fields):
        validate_field(field, scope, f"fields[{i}]")


def check_form(form: Form | None) -> FormValidationResult:
    """Validate a form and report the outcome instead of raising."""
    try:
        validate_form(form)
    except FormError as e:
        logger.debug(f"Form validation failed: {e}")
        return FormValidationResult(
            is_valid=False,
            error_type=type(e).__name__,
            path=e.path or None,
            message=str(e),
        )
    return FormValidationResult(is_valid=True)


def validate_field(field: FormField | None, scope: set[str], path: str) -> None:
    """Validate one field and everything below it, registering its name in ``scope``."""
    if field is None:
        raise StructuralError("field cannot be None", path)

    validate_field_name(field.name, path)

    if field.name:
        if field.name in scope:
            raise FieldNameError(f"duplicate field name '{field.name}' at the same level", path)
        scope.add(field.name)

    kind = validate_field_kind(field.kind, path)
    validate_options(field, kind, path)

    if field.validation is not None:
        validate_rules(field.validation, kind, path)

    if field.fields:
        if kind not in CONTAINER_KINDS:
            raise FieldKindError(
                f"fields with nested fields must have type 'object' or 'array', got '{field.kind}'",
                path,
            )
        nested_scope: set[str] = set()
        for i, nested in enumerate(field.fields):
            validate_field(nested, nested_scope, f"{path}.fields[{i}]")

    if field.conditional is not None:
        validate_conditional(field.conditional, field.name, scope, path)


def validate_field_name(name: str, path: str) -> None:
    """Empty names are allowed; anything else must be a usable form control name."""
    if not name:
        return

    if not VALID_FIELD_NAME.match(name):
        raise FieldNameError(
            f"invalid field name '{name}' (must start with letter/underscore and contain "
            "only letters, digits, underscores, hyphens, and dots)",
            path,
        )

    if name.lower() in RESERVED_FIELD_NAMES:
        raise FieldNameError(f"field name '{name}' is reserved and cannot be used", path)


def validate_field_kind(kind: str, path: str) -> FieldKind:
    """Resolve a kind string to a FieldKind."""
    try:
        return FieldKind(kind)
    except ValueError:
        raise FieldKindError(f"invalid field type '{kind}'", path) from None


def validate_options(field: FormField, kind: FieldKind, path: str) -> None:
    """Check option presence and uniqueness for the field kind."""
    if kind in OPTION_REQUIRED_KINDS and not field.options:
        raise ConstraintError(f"field type '{kind.value}' requires at least one option", path)

    if kind in OPTIONLESS_KINDS and field.options:
        raise ConstraintError(f"field type '{kind.value}' cannot have options", path)

    if kind in CHOICE_KINDS:
        seen: set[str] = set()
        for i, option in enumerate(field.options):
            option_value = stringify_scalar(option.value)
            if option_value in seen:
                raise ConstraintError(f"duplicate option value '{option_value}' at options[{i}]", path)
            seen.add(option_value)


def validate_rules(validation: FieldValidation, kind: FieldKind, path: str) -> None:
    """Check bound consistency, then that every rule applies to the kind."""
    if validation.min_length is not None and validation.min_length < 0:
        raise ConstraintError("validation.minLength cannot be negative", path)
    if validation.max_length is not None and validation.max_length < 0:
        raise ConstraintError("validation.maxLength cannot be negative", path)
    if (
        validation.min_length is not None
        and validation.max_length is not None
        and validation.min_length > validation.max_length
    ):
        raise ConstraintError(
            f"validation.minLength ({validation.min_length}) cannot be greater than "
            f"maxLength ({validation.max_length})",
            path,
        )

    if (
        validation.minimum is not None
        and validation.maximum is not None
        and validation.minimum > validation.maximum
    ):
        raise ConstraintError(
            f"validation.min ({stringify_scalar(validation.minimum)}) cannot be greater than "
            f"max ({stringify_scalar(validation.maximum)})",
            path,
        )

    if validation.min_items is not None and validation.min_items < 0:
        raise ConstraintError("validation.minItems cannot be negative", path)
    if validation.max_items is not None and validation.max_items < 0:
        raise ConstraintError("validation.maxItems cannot be negative", path)
    if (
        validation.min_items is not None
        and validation.max_items is not None
        and validation.min_items > validation.max_items
    ):
        raise ConstraintError(
            f"validation.minItems ({validation.min_items}) cannot be greater than "
            f"maxItems ({validation.max_items})",
            path,
        )

    if validation.step is not None and validation.step <= 0:
        raise ConstraintError(
            f"validation.step must be positive, got {stringify_scalar(validation.step)}", path
        )

    for label, attributes in _inapplicable_rules(kind):
        if any(getattr(validation, attribute) is not None for attribute in attributes):
            raise ConstraintError(
                f"validation rules {label} are not applicable for field type '{kind.value}'", path
            )


def validate_conditional(
    conditional: ConditionalField,
    owner_name: str,
    scope: set[str],
    path: str,
) -> None:
    """
    Check a conditional against the scope of the field that owns it.

    The owner's name is already in ``scope`` at this point, but a field may
    not gate itself, so self references are rejected explicitly.
    """
    if not conditional.condition:
        raise ConditionReferenceError("conditional field must specify a condition field name", path)

    if owner_name and conditional.condition == owner_name:
        raise ConditionReferenceError(
            f"conditional field cannot reference its own field '{owner_name}'", path
        )

    if conditional.condition not in scope:
        raise ConditionReferenceError(
            f"conditional field references non-existent field '{conditional.condition}'", path
        )

    then_scope: set[str] = set()
    for i, field in enumerate(conditional.then):
        validate_field(field, then_scope, f"{path}.conditional.then[{i}]")

    else_scope: set[str] = set()
    for i, field in enumerate(conditional.else_):
        validate_field(field, else_scope, f"{path}.conditional.else[{i}]")
