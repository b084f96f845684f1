"""
Form and submission models.

``ParsedForm`` is the ephemeral analyzer output. ``Form`` and
``Submission`` are the persisted records returned by the store.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, JsonValue

from gen_forms.models.field_definitions import FormField


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way the store persists it."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ParsedForm(BaseModel):
    """Form structure generated from a plain-text description."""

    title: str = Field(..., description="Form title")
    description: str | None = Field(default=None, description="Form description")
    fields: list[FormField] = Field(default_factory=list, description="Ordered fields")


class Form(BaseModel):
    """A persisted, shareable form definition."""

    id: str = Field(..., description="Generated identifier, used in share links")
    title: str
    description: str | None = None
    fields: list[FormField] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    def get_field(self, name: str) -> FormField | None:
        """Look up a field by its submission key."""
        for field in self.fields:
            if field.name == name:
                return field
        return None


class Submission(BaseModel):
    """One set of answers recorded against a form."""

    id: str
    form_id: str
    submission_data: dict[str, JsonValue] = Field(default_factory=dict)
    submitted_at: datetime
