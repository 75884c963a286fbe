"""
Validation result model for form definition checks.

This is the non-raising view of the form validator, suitable for returning
across a tool or API boundary.
"""

from typing import Any

from pydantic import BaseModel, Field


class FormValidationResult(BaseModel):
    """Result of checking a form definition."""

    is_valid: bool = Field(..., description="Whether the form definition is valid")
    error_type: str | None = Field(
        default=None, description="Error class name, e.g. FieldNameError"
    )
    path: str | None = Field(
        default=None, description="Index-chain path of the offending field"
    )
    message: str | None = Field(
        default=None, description="Full error message including the path"
    )

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dict without unset keys."""
        return self.model_dump(exclude_none=True)
