"""
Event handlers for the Gen-Forms UI.

Kept free of gradio imports so they can be driven directly from tests.
Each handler returns plain values in the order the app wires its outputs.
"""

import logging
from typing import Any, Protocol

from gen_forms.errors import GenFormsError
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, ParsedForm, Submission
from gen_forms.validation import validate_submission

logger = logging.getLogger("gen-forms-ui")

EXAMPLE_DESCRIPTIONS = [
    "I need a contact form with name, email, and message fields",
    "Create a registration form with first name, last name, email, phone, and age",
    "I want a feedback form with rating, comments, and contact email",
    "Make a job application form with name, email, resume upload, and experience level",
]

FIELD_TYPE_ICONS = {
    "text": "📝",
    "email": "📧",
    "number": "🔢",
    "textarea": "📄",
    "select": "📋",
    "checkbox": "☑️",
    "radio": "🔘",
}


class FormsBackend(Protocol):
    """What the UI needs from ``FormService`` or ``FormsClient``."""

    async def initialize(self) -> None: ...

    async def parse_form_description(self, description: str) -> ParsedForm: ...

    async def create_form(
        self,
        title: str,
        description: str | None = None,
        fields: list[FormField] | None = None,
    ) -> Form: ...

    async def get_forms(self) -> list[Form]: ...

    async def get_form_by_id(self, form_id: str) -> Form | None: ...

    async def delete_form(self, form_id: str) -> bool: ...

    async def create_submission(self, form_id: str, submission_data: dict[str, Any]) -> Submission: ...

    async def get_form_submissions(self, form_id: str) -> list[Submission]: ...


def render_field_summary(fields: list[FormField]) -> str:
    """Markdown list of detected fields."""
    if not fields:
        return "*No fields*"
    lines = []
    for field in fields:
        icon = FIELD_TYPE_ICONS.get(field.type, "•")
        line = f"- {icon} **{field.label}** `{field.type}`"
        if field.required:
            line += " *(required)*"
        if field.options:
            line += f" options: {', '.join(field.options)}"
        lines.append(line)
    return "\n".join(lines)


def collect_values(fields: list[FormField], values: list[Any]) -> dict[str, Any]:
    """
    Pair control values with field names.

    Unanswered controls (None or blank text) are left out so only real
    answers end up in the submission.
    """
    data: dict[str, Any] = {}
    for field, value in zip(fields, values):
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        if field.type == "number" and isinstance(value, float) and value.is_integer():
            value = int(value)
        data[field.name] = value
    return data


class FormsUI:
    """
    UI actions bound to one backend.

    The backend is initialized on first use so that a SQL store opens its
    connections on the event loop that serves the UI.
    """

    def __init__(self, backend: FormsBackend):
        self.backend = backend
        self._ready = False

    async def _ensure_ready(self) -> FormsBackend:
        if not self._ready:
            await self.backend.initialize()
            self._ready = True
        return self.backend

    async def preview(self, description: str) -> tuple[str, str, str, dict | None]:
        """
        Parse a description without saving it.

        Returns:
            (status markdown, parsed title, field summary, parsed form as JSON)
        """
        if not description or not description.strip():
            return "❌ Please describe the form you need", "", "", None

        backend = await self._ensure_ready()
        try:
            parsed = await backend.parse_form_description(description)
        except GenFormsError as e:
            logger.warning(f"Preview failed: {e.message}")
            return f"❌ {e.message}", "", "", None

        status = f"✅ Detected {len(parsed.fields)} field(s). Edit the title and create the form."
        return status, parsed.title, render_field_summary(parsed.fields), parsed.model_dump(mode="json")

    async def save(self, parsed: dict | None, custom_title: str) -> tuple[str, str]:
        """
        Persist a previewed form.

        The custom title wins when it is not blank.

        Returns:
            (status markdown, new form id or "")
        """
        if not parsed:
            return "❌ Generate a preview first", ""

        preview = ParsedForm.model_validate(parsed)
        title = custom_title.strip() if custom_title and custom_title.strip() else preview.title

        backend = await self._ensure_ready()
        try:
            form = await backend.create_form(title, preview.description, preview.fields)
        except GenFormsError as e:
            logger.warning(f"Create failed: {e.message}")
            return f"❌ {e.message}", ""

        return f"✅ Form **{form.title}** created. Share id: `{form.id}`", form.id

    async def form_choices(self) -> list[tuple[str, str]]:
        """(label, id) pairs for form pickers."""
        backend = await self._ensure_ready()
        forms = await backend.get_forms()
        return [(f"{form.title} ({len(form.fields)} fields)", form.id) for form in forms]

    async def describe_form(self, form_id: str | None) -> str:
        if not form_id:
            return ""
        backend = await self._ensure_ready()
        form = await backend.get_form_by_id(form_id)
        if form is None:
            return "❌ Form not found"
        header = f"### 📋 {form.title}"
        if form.description:
            header += f"\n\n{form.description}"
        created = form.created_at.strftime("%Y-%m-%d %H:%M")
        return f"{header}\n\n*Created {created} UTC*\n\n{render_field_summary(form.fields)}"

    async def delete(self, form_id: str | None) -> str:
        if not form_id:
            return "❌ Select a form first"
        backend = await self._ensure_ready()
        try:
            deleted = await backend.delete_form(form_id)
        except GenFormsError as e:
            return f"❌ {e.message}"
        return "🗑️ Form deleted with all its submissions" if deleted else "❌ Form not found"

    async def submissions(self, form_id: str | None) -> tuple[str, list[dict]]:
        """
        Returns:
            (status markdown, rows of submitted values with their timestamp)
        """
        if not form_id:
            return "❌ Select a form first", []
        backend = await self._ensure_ready()
        items = await backend.get_form_submissions(form_id)
        if not items:
            return "⏳ No submissions yet", []
        rows = [
            {"submitted_at": s.submitted_at.isoformat(), **s.submission_data}
            for s in items
        ]
        return f"📬 {len(items)} submission(s)", rows

    async def load_form(self, form_id: str | None) -> dict | None:
        """The form as JSON, used to render its controls."""
        if not form_id:
            return None
        backend = await self._ensure_ready()
        form = await backend.get_form_by_id(form_id)
        return form.model_dump(mode="json") if form is not None else None

    async def submit(self, form_json: dict | None, values: list[Any]) -> tuple[str, dict[str, str]]:
        """
        Validate the answers and record them.

        Returns:
            (status markdown, first error per field name)
        """
        if not form_json:
            return "❌ Select a form first", {}

        form = Form.model_validate(form_json)
        data = collect_values(form.fields, values)

        result = validate_submission(form.fields, data)
        if not result.is_valid:
            errors = result.first_errors()
            lines = "\n".join(f"- {message}" for message in errors.values())
            return f"❌ Please fix the following:\n{lines}", errors

        backend = await self._ensure_ready()
        try:
            submission = await backend.create_submission(form.id, result.validated_data or data)
        except GenFormsError as e:
            logger.warning(f"Submission to {form.id} failed: {e.message}")
            return f"❌ {e.message}", {}

        logger.info(f"Recorded submission {submission.id} for form {form.id}")
        return "🎉 Thank you! Your response was recorded.", {}
