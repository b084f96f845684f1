"""
Field definition models.

A form is an ordered list of ``FormField`` descriptors. The same shape is
produced by the description analyzer, stored with a form, and consumed by
the UI to render input controls.
"""

from typing import Literal

from pydantic import BaseModel, Field

FieldType = Literal["text", "email", "number", "textarea", "select", "checkbox", "radio"]

# Types whose value is a choice among ``options``
CHOICE_TYPES: frozenset[str] = frozenset({"select", "radio"})

# Types whose ``validation`` bounds apply to the string length
TEXT_TYPES: frozenset[str] = frozenset({"text", "email", "textarea"})


class FieldValidation(BaseModel):
    """
    Validation rules for a single field.

    ``min``/``max`` are value bounds for number fields and length bounds
    for text fields.
    """

    min: int | float | None = Field(default=None, description="Lower bound")
    max: int | float | None = Field(default=None, description="Upper bound")
    pattern: str | None = Field(default=None, description="Regex the value must match")


class FormField(BaseModel):
    """Descriptor for one form field."""

    id: str = Field(..., description="Identifier, unique within the form")
    name: str = Field(..., description="Key of this field in submission data")
    label: str = Field(..., description="Human-readable caption")
    type: FieldType = Field(..., description="Input control type")
    required: bool = Field(default=False, description="Whether a value is mandatory")
    placeholder: str | None = Field(default=None, description="Hint text")
    options: list[str] | None = Field(
        default=None,
        description="Allowed values, only for select and radio fields",
    )
    validation: FieldValidation | None = Field(default=None, description="Validation rules")

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_TYPES

    @property
    def is_text(self) -> bool:
        return self.type in TEXT_TYPES
