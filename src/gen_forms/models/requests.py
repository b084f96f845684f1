"""
Input models for the RPC procedures.

Each procedure validates its arguments with one of these models; their
JSON Schemas double as the MCP tool ``inputSchema``.
"""

from pydantic import BaseModel, Field, JsonValue

from gen_forms.models.field_definitions import FormField


class EmptyInput(BaseModel):
    """Input for procedures without arguments."""


class ParseFormDescriptionInput(BaseModel):
    description: str = Field(..., description="Plain-text description of the form")


class CreateFormInput(BaseModel):
    title: str = Field(..., description="Form title, must not be empty")
    description: str | None = Field(default=None, description="Optional description")
    fields: list[FormField] = Field(..., description="Ordered field descriptors")


class UpdateFormInput(BaseModel):
    """
    Partial update of a form.

    Only the attributes present in ``model_fields_set`` are changed, so an
    explicit ``description: null`` clears the description while an absent
    one leaves it untouched.
    """

    id: str = Field(..., description="Identifier of the form to update")
    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(default=None, description="New description")
    fields: list[FormField] | None = Field(default=None, description="New field list")

    def changes(self) -> dict:
        """Return only the attributes the caller supplied."""
        return {
            key: getattr(self, key)
            for key in ("title", "description", "fields")
            if key in self.model_fields_set
        }


class FormIdInput(BaseModel):
    id: str = Field(..., description="Form identifier")


class FormSubmissionsInput(BaseModel):
    form_id: str = Field(..., description="Form identifier")


class CreateSubmissionInput(BaseModel):
    form_id: str = Field(..., description="Form the answers belong to")
    submission_data: dict[str, JsonValue] = Field(
        ..., description="Values keyed by field name"
    )
