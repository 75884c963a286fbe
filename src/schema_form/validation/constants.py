"""
Constants for the form validator.

Field name rules, reserved names and the kind groups that decide which
options and validation keywords a field may carry.
"""

import re

from schema_form.models.form import FieldKind

# Letters, digits, underscores, hyphens and dots; no leading digit
VALID_FIELD_NAME = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_.-]*$")

# Names that clash with form element properties, compared case-insensitively
RESERVED_FIELD_NAMES = frozenset({"submit", "reset", "button", "form", "fieldset", "legend"})

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

TEXT_KINDS = frozenset({
    FieldKind.TEXT,
    FieldKind.EMAIL,
    FieldKind.PASSWORD,
    FieldKind.URL,
    FieldKind.TEL,
    FieldKind.TEXTAREA,
})

DATE_KINDS = frozenset({
    FieldKind.DATE,
    FieldKind.TIME,
    FieldKind.DATETIME,
    FieldKind.MONTH,
    FieldKind.WEEK,
})

CHOICE_KINDS = frozenset({FieldKind.CHECKBOX, FieldKind.RADIO, FieldKind.SELECT})

# Kinds that must have at least one option
OPTION_REQUIRED_KINDS = frozenset({FieldKind.SELECT, FieldKind.RADIO})

# Kinds that must not have options
OPTIONLESS_KINDS = TEXT_KINDS | DATE_KINDS | {FieldKind.NUMBER}

CONTAINER_KINDS = frozenset({FieldKind.OBJECT, FieldKind.ARRAY})
