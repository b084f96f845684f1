"""
Local-only form store.

Keeps everything in process memory. Useful for demos, tests and running
the UI without a database. Each instance owns its own state; select it
with ``GEN_FORMS_STORE=memory`` or pass one to ``FormService`` directly.
"""

import copy
import logging
import uuid
from typing import Any

from gen_forms.errors import ConstraintViolationError
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, Submission, utcnow
from gen_forms.store.base import FormStore

logger = logging.getLogger("gen-forms.store")


class InMemoryFormStore(FormStore):
    """Form store backed by dictionaries."""

    def __init__(self) -> None:
        self._forms: dict[str, Form] = {}
        self._submissions: dict[str, list[Submission]] = {}

    async def create(
        self,
        title: str,
        description: str | None,
        fields: list[FormField],
    ) -> Form:
        now = utcnow()
        form = Form(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            fields=[f.model_copy(deep=True) for f in fields],
            created_at=now,
            updated_at=now,
        )
        self._forms[form.id] = form
        self._submissions[form.id] = []
        logger.debug("Created form %s in memory", form.id)
        return form.model_copy(deep=True)

    async def get(self, form_id: str) -> Form | None:
        form = self._forms.get(form_id)
        return form.model_copy(deep=True) if form else None

    async def list_forms(self) -> list[Form]:
        return [form.model_copy(deep=True) for form in self._forms.values()]

    async def update(self, form_id: str, changes: dict[str, Any]) -> Form | None:
        form = self._forms.get(form_id)
        if form is None:
            return None

        updates = dict(changes)
        if "fields" in updates:
            updates["fields"] = [f.model_copy(deep=True) for f in updates["fields"]]
        updates["updated_at"] = max(utcnow(), form.updated_at)

        updated = form.model_copy(update=updates)
        self._forms[form_id] = updated
        return updated.model_copy(deep=True)

    async def delete(self, form_id: str) -> bool:
        if form_id not in self._forms:
            return False
        # No await between the two removals, so readers never see half a delete
        del self._forms[form_id]
        removed = self._submissions.pop(form_id, [])
        logger.debug("Deleted form %s and %d submission(s)", form_id, len(removed))
        return True

    async def create_submission(self, form_id: str, data: dict[str, Any]) -> Submission:
        if form_id not in self._forms:
            raise ConstraintViolationError(f"Form with id {form_id} not found")

        submission = Submission(
            id=str(uuid.uuid4()),
            form_id=form_id,
            submission_data=copy.deepcopy(data),
            submitted_at=utcnow(),
        )
        self._submissions[form_id].append(submission)
        return submission.model_copy(deep=True)

    async def list_submissions(self, form_id: str) -> list[Submission]:
        return [s.model_copy(deep=True) for s in self._submissions.get(form_id, [])]
