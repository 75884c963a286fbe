"""
Field kind inference.

Maps one JSON Schema node to exactly one field kind. Rules, highest
precedence first:

1. non-empty ``enum``: radio for up to RADIO_MAX_OPTIONS values, else select
2. ``const``: hidden
3. declared ``type`` (first non-"null" entry of a union)
4. no ``type``: object with ``properties``, array with ``items``, else text

Enum and const win even over an explicit object/array type.
"""

from schema_form.models.form import FieldKind
from schema_form.models.json_schema import JSONSchema

RADIO_MAX_OPTIONS = 3
TEXTAREA_MIN_LENGTH = 100

STRING_FORMAT_KINDS = {
    "email": FieldKind.EMAIL,
    "uri": FieldKind.URL,
    "url": FieldKind.URL,
    "date": FieldKind.DATE,
    "time": FieldKind.TIME,
    "date-time": FieldKind.DATETIME,
    "password": FieldKind.PASSWORD,
}

TYPE_KINDS = {
    "number": FieldKind.NUMBER,
    "integer": FieldKind.NUMBER,
    "boolean": FieldKind.CHECKBOX,
    "array": FieldKind.ARRAY,
    "object": FieldKind.OBJECT,
    "null": FieldKind.TEXT,
}


def choice_kind(option_count: int) -> FieldKind:
    """Radio for short option lists, select otherwise."""
    if option_count <= RADIO_MAX_OPTIONS:
        return FieldKind.RADIO
    return FieldKind.SELECT


def infer_field_kind(schema: JSONSchema) -> FieldKind:
    """Determine the field kind for a schema node."""
    if schema.enum:
        return choice_kind(len(schema.enum))
    if schema.const is not None:
        return FieldKind.HIDDEN
    return infer_declared_kind(schema)


def infer_declared_kind(schema: JSONSchema) -> FieldKind:
    """Determine the field kind from ``type``, ignoring enum and const."""
    type_name, type_names, has_type = schema.declared_type()

    if not has_type:
        if schema.properties is not None:
            return FieldKind.OBJECT
        if schema.items is not None:
            return FieldKind.ARRAY
        return FieldKind.TEXT

    if type_names is not None:
        # Union types: the first non-null member decides
        for name in type_names:
            if name != "null":
                return map_type_to_kind(name, schema)
        return FieldKind.TEXT

    return map_type_to_kind(type_name, schema)


def map_type_to_kind(type_name: str, schema: JSONSchema) -> FieldKind:
    """Map a JSON Schema type name to a field kind."""
    if type_name == "string":
        return map_string_to_kind(schema)
    return TYPE_KINDS.get(type_name, FieldKind.TEXT)


def map_string_to_kind(schema: JSONSchema) -> FieldKind:
    """Pick a string subtype from ``format``, falling back to length."""
    if schema.format in STRING_FORMAT_KINDS:
        return STRING_FORMAT_KINDS[schema.format]
    if schema.max_length is not None and schema.max_length > TEXTAREA_MIN_LENGTH:
        return FieldKind.TEXTAREA
    return FieldKind.TEXT
