"""
Submission check results.

``validate_submission`` reports each broken field rule (required flag,
number bounds, text length, pattern, email shape, allowed options) as a
``FieldValidationError``. The UI shows the first message per field; the
``validateSubmission`` procedure returns the whole result.
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldValidationError(BaseModel):
    """One broken rule on one field, keyed by the field's submission name."""

    field_name: str = Field(..., description="Submission key (FormField.name) of the field")
    error_type: str = Field(
        ...,
        description="required, type, format, pattern, enum, minimum, maximum, min_length, max_length",
    )
    message: str = Field(..., description="Message built from the field label, e.g. 'Age must be at most 120'")
    expected: Any | None = Field(default=None, description="Bound, pattern, options or type that was required")
    received: Any | None = Field(default=None, description="Value as submitted")


class ValidationResult(BaseModel):
    """
    Outcome of checking one submission against a form's fields.

    All broken rules are collected, not just the first. Keys that match no
    field are kept in ``validated_data`` and listed in ``warnings``.
    """

    is_valid: bool = Field(..., description="Whether the submission is valid")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Values with numeric strings converted, None when invalid"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Unknown keys and unusable patterns"
    )

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def get_field_errors(self, field_name: str) -> list[FieldValidationError]:
        """Broken rules for one submission key, in field-check order."""
        return [e for e in self.errors if e.field_name == field_name]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Messages grouped by submission key; fields without errors are absent."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            result.setdefault(error.field_name, []).append(error.message)
        return result

    def first_errors(self) -> dict[str, str]:
        """First message per field, the way a form shows one error under each input."""
        return {name: messages[0] for name, messages in self.to_error_dict().items()}
