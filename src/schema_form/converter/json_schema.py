"""
JSON Schema to form conversion.

Recursively translates a JSON Schema tree into a Form / FormField tree.
Properties are always converted in sorted key order so the same schema
yields the same field order on every run. The result is not validated;
pass it to ``validate_form`` before rendering.
"""

import logging
from typing import Any

from schema_form.config import get_config
from schema_form.converter.inference import infer_declared_kind, infer_field_kind
from schema_form.exceptions import StructuralError
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

logger = logging.getLogger("schema-form")

ARRAY_ITEM_NAME = "item"


def convert_schema_to_form(schema: JSONSchema | None) -> Form:
    """
    Convert a root schema into a form.

    Object-style roots (with ``properties``) produce one field per property.
    Any other root is converted into a single anonymous field.

    Raises:
        StructuralError: If ``schema`` is None.
    """
    if schema is None:
        raise StructuralError("schema cannot be None")

    form = Form(
        title=schema.title,
        description=schema.description,
        method=get_config().default_method,
    )

    if schema.properties is not None:
        form.fields = convert_properties_to_fields(schema.properties, schema.required)
    else:
        field = convert_schema_to_field("", schema)
        if field is not None:
            form.fields = [field]

    logger.debug(f"Converted schema '{schema.title or ''}' into {len(form.fields)} top-level fields")
    return form


def convert_properties_to_fields(
    properties: dict[str, JSONSchema | None] | None,
    required: list[str] | None = None,
) -> list[FormField]:
    """Convert a properties mapping into fields, sorted by property name."""
    if not properties:
        return []

    required_names = set(required or [])
    fields: list[FormField] = []

    for name in sorted(properties):
        field = convert_schema_to_field(name, properties[name])
        if field is None:
            continue
        if name in required_names:
            if field.validation is None:
                field.validation = FieldValidation()
            field.validation.required = True
        fields.append(field)

    return fields


def convert_schema_to_field(name: str, schema: JSONSchema | None) -> FormField | None:
    """Convert one schema node into a field, or None for a missing schema."""
    if schema is None:
        return None

    field = FormField(
        name=name,
        kind=infer_field_kind(schema).value,
        label=schema.title,
        description=schema.description,
        default=schema.default,
        read_only=bool(schema.read_only),
        deprecated=bool(schema.deprecated),
    )

    if schema.enum:
        field.options = convert_enum_to_options(schema.enum)
    elif schema.const is not None:
        field.value = schema.const

    field.validation = build_validation(schema)

    # Nested structure follows the declared type even when enum/const
    # replaced the field kind
    structure = infer_declared_kind(schema)

    if structure == FieldKind.OBJECT and schema.properties is not None:
        field.fields = convert_properties_to_fields(schema.properties, schema.required)

    if structure == FieldKind.ARRAY:
        item_field = convert_schema_to_field(ARRAY_ITEM_NAME, schema.items)
        if item_field is not None:
            field.fields = [item_field]
        if schema.min_items is not None or schema.max_items is not None:
            if field.validation is None:
                field.validation = FieldValidation()
            if schema.min_items is not None:
                field.validation.min_items = schema.min_items
            if schema.max_items is not None:
                field.validation.max_items = schema.max_items

    if schema.if_ is not None:
        field.conditional = build_conditional_field(schema)

    return field


def convert_enum_to_options(values: list[Any]) -> list[FieldOption]:
    """Turn enum values into options labelled with their text form."""
    return [FieldOption(label=stringify_scalar(value), value=value) for value in values]


def build_validation(schema: JSONSchema | None) -> FieldValidation | None:
    """
    Collect string and numeric constraints from a schema node.

    Exclusive bounds are folded onto the same ``minimum``/``maximum``
    fields as inclusive ones; when both are present the exclusive bound
    wins. Returns None when the schema carries no constraint.
    """
    if schema is None:
        return None

    validation = FieldValidation(
        min_length=schema.min_length,
        max_length=schema.max_length,
        minimum=schema.minimum,
        maximum=schema.maximum,
        step=schema.multiple_of,
    )

    if schema.pattern:
        validation.pattern = schema.pattern
        validation.pattern_error = get_config().pattern_error_message
    if schema.exclusive_minimum is not None:
        validation.minimum = schema.exclusive_minimum
    if schema.exclusive_maximum is not None:
        validation.maximum = schema.exclusive_maximum

    if validation.is_empty():
        return None
    return validation


def build_conditional_field(schema: JSONSchema) -> ConditionalField | None:
    """
    Build conditional field lists from ``if``/``then``/``else``.

    The condition is the alphabetically first property named in ``if``;
    its ``const``, when given, becomes the trigger value. Returns None when
    no condition field can be found.
    """
    if schema.if_ is None or not schema.if_.properties:
        return None

    condition = min(schema.if_.properties)
    if not condition:
        return None
    condition_schema = schema.if_.properties[condition]

    conditional = ConditionalField(
        condition=condition,
        value=condition_schema.const if condition_schema is not None else None,
    )
    if schema.then is not None:
        conditional.then = convert_properties_to_fields(schema.then.properties, schema.then.required)
    if schema.else_ is not None:
        conditional.else_ = convert_properties_to_fields(schema.else_.properties, schema.else_.required)

    return conditional
