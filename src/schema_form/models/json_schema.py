"""
JSON Schema input model.

A bounded, read-only view of a JSON Schema document: the keywords the
converter understands, plus the composition and core keywords it accepts
without interpreting. Unknown keywords are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Opaque scalar value carried by enum, const and option values
Scalar = str | int | float | bool | None


class JSONSchema(BaseModel):
    """One node of a JSON Schema tree."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Core
    schema_uri: str | None = Field(default=None, alias="$schema")
    id: str | None = Field(default=None, alias="$id")
    ref: str | None = Field(default=None, alias="$ref")
    comment: str | None = Field(default=None, alias="$comment")
    defs: dict[str, "JSONSchema"] | None = Field(default=None, alias="$defs")

    # Applicators (composition keywords are accepted, not interpreted)
    all_of: list["JSONSchema"] | None = Field(default=None, alias="allOf")
    any_of: list["JSONSchema"] | None = Field(default=None, alias="anyOf")
    one_of: list["JSONSchema"] | None = Field(default=None, alias="oneOf")
    not_: "JSONSchema | None" = Field(default=None, alias="not")
    if_: "JSONSchema | None" = Field(default=None, alias="if")
    then: "JSONSchema | None" = Field(default=None, alias="then")
    else_: "JSONSchema | None" = Field(default=None, alias="else")
    properties: dict[str, "JSONSchema | None"] | None = Field(default=None)
    items: "JSONSchema | None" = Field(default=None)

    # Type and content
    type: str | list[str] | None = Field(default=None, description="Type name or union of type names")
    format: str | None = Field(default=None)
    enum: list[Scalar] | None = Field(default=None)
    const: Scalar = Field(default=None)

    # Numbers
    multiple_of: float | None = Field(default=None, alias="multipleOf")
    minimum: float | None = Field(default=None)
    maximum: float | None = Field(default=None)
    exclusive_minimum: float | None = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: float | None = Field(default=None, alias="exclusiveMaximum")

    # Strings
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    pattern: str | None = Field(default=None)

    # Arrays
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")
    unique_items: bool | None = Field(default=None, alias="uniqueItems")

    # Objects
    required: list[str] | None = Field(default=None)

    # Metadata
    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    default: Any = Field(default=None)
    read_only: bool | None = Field(default=None, alias="readOnly")
    deprecated: bool | None = Field(default=None)

    def declared_type(self) -> tuple[str | None, list[str] | None, bool]:
        """
        Return the declared type as ``(name, names, has_type)``.

        ``type`` may be a single name or a list of names. Exactly one of
        ``name`` and ``names`` is set when ``has_type`` is true.
        """
        if self.type is None:
            return None, None, False
        if isinstance(self.type, str):
            return self.type, None, True
        return None, list(self.type), True


JSONSchema.model_rebuild()
