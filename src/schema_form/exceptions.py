"""
Exceptions raised by the converter and the form validator.

Every form error is a ValueError whose message starts with the index-chain
path of the offending node, e.g. ``fields[1].fields[0]: ...``.
"""


class FormError(ValueError):
    """Base class for conversion and validation failures."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class StructuralError(FormError):
    """Missing schema root, missing form or an empty field list."""


class FieldNameError(FormError):
    """Invalid, reserved or duplicated field name."""


class FieldKindError(FormError):
    """Unrecognized field kind or children on a non-container kind."""


class ConstraintError(FormError):
    """Options, bounds or validation keywords inconsistent with the field."""


class ConditionReferenceError(FormError):
    """Conditional names a field that is not available in its scope."""


class SchemaParseError(ValueError):
    """Raw schema input could not be decoded into a schema tree."""
