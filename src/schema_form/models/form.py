"""
Form definition models.

These models are the output of the schema converter and the input of the
form validator and of any renderer. The serialized representation uses
camelCase keys and omits attributes that are absent or empty.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from schema_form.models.json_schema import Scalar


class FieldKind(str, Enum):
    """Closed set of renderable field kinds."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    TEL = "tel"
    URL = "url"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    MONTH = "month"
    WEEK = "week"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"
    HIDDEN = "hidden"
    OBJECT = "object"
    ARRAY = "array"


def stringify_scalar(value: Any) -> str:
    """
    Render an opaque scalar as display text.

    Used for option labels and for option-uniqueness comparisons, so
    ``1``, ``1.0`` and ``"1"`` all render as ``"1"``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


class FieldOption(BaseModel):
    """Option for select, radio or checkbox fields."""

    label: str = Field(..., description="Display text")
    value: Scalar = Field(default=None, description="Submitted value")


class FieldValidation(BaseModel):
    """Validation rules attached to a form field."""

    model_config = ConfigDict(populate_by_name=True)

    required: bool = Field(default=False)
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    minimum: float | None = Field(default=None, alias="min")
    maximum: float | None = Field(default=None, alias="max")
    pattern: str | None = Field(default=None)
    pattern_error: str | None = Field(default=None, alias="patternError")
    step: float | None = Field(default=None)
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")

    def is_empty(self) -> bool:
        """True when no rule at all is set."""
        return not self.required and all(
            getattr(self, name) is None
            for name in (
                "min_length",
                "max_length",
                "minimum",
                "maximum",
                "pattern",
                "step",
                "min_items",
                "max_items",
            )
        )


class FormField(BaseModel):
    """A single renderable form control, possibly with nested fields."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Field name, empty for an anonymous root field")
    # Plain string so caller-built trees can carry kinds the validator rejects
    kind: str = Field(..., alias="type", description="One of the FieldKind values")
    label: str | None = Field(default=None)
    description: str | None = Field(default=None)
    placeholder: str | None = Field(default=None)
    default: Any = Field(default=None)
    value: Scalar = Field(default=None, description="Fixed value")
    options: list[FieldOption] = Field(default_factory=list)
    validation: FieldValidation | None = Field(default=None)
    read_only: bool = Field(default=False, alias="readOnly")
    deprecated: bool = Field(default=False)
    fields: list["FormField"] = Field(default_factory=list, description="Children of object/array fields")
    conditional: "ConditionalField | None" = Field(default=None)
    help_text: str | None = Field(default=None, alias="helpText")


class ConditionalField(BaseModel):
    """Alternate field lists gated on the value of a sibling field."""

    model_config = ConfigDict(populate_by_name=True)

    condition: str = Field(..., description="Name of the sibling field that triggers this condition")
    value: Scalar = Field(default=None, description="Value that triggers the condition")
    then: list[FormField] = Field(default_factory=list)
    else_: list[FormField] = Field(default_factory=list, alias="else")


FormField.model_rebuild()
ConditionalField.model_rebuild()

# Serialized keys dropped when false or empty
_OMIT_WHEN_EMPTY = ("options", "readOnly", "deprecated", "fields")


def _prune_field(data: dict[str, Any]) -> dict[str, Any]:
    """Drop empty attributes from a dumped field, recursing into children."""
    for key in _OMIT_WHEN_EMPTY:
        if data.get(key) is False or data.get(key) == []:
            del data[key]

    if "options" in data:
        data["options"] = [{"label": option["label"], "value": option.get("value")} for option in data["options"]]

    if "fields" in data:
        data["fields"] = [_prune_field(child) for child in data["fields"]]

    validation = data.get("validation")
    if validation is not None and validation.get("required") is False:
        del validation["required"]

    conditional = data.get("conditional")
    if conditional is not None:
        for branch in ("then", "else"):
            children = [_prune_field(child) for child in conditional.get(branch, [])]
            if children:
                conditional[branch] = children
            else:
                conditional.pop(branch, None)

    return data


class Form(BaseModel):
    """Complete form definition."""

    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    action: str | None = Field(default=None)
    method: str | None = Field(default=None)
    fields: list[FormField] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """
        Export the serialized form representation.

        Unset attributes, false flags and empty lists are left out; the
        form's own ``fields`` list is always present.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        data["fields"] = [_prune_field(field) for field in data["fields"]]
        return data

    def to_json(self, indent: int | None = None) -> str:
        """Export the serialized form representation as JSON text."""
        return json.dumps(self.to_dict(), indent=indent)
