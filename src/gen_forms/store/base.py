"""
Form store interface.

A store persists forms and their submissions. Implementations must
generate identifiers, keep ``updated_at >= created_at``, and delete a
form's submissions together with the form.
"""

from abc import ABC, abstractmethod
from typing import Any

from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, Submission


class FormStore(ABC):
    """CRUD persistence for forms and submissions."""

    async def initialize(self) -> None:
        """Prepare the backing storage (create tables, ...)."""

    async def close(self) -> None:
        """Release connections held by the store."""

    @abstractmethod
    async def create(
        self,
        title: str,
        description: str | None,
        fields: list[FormField],
    ) -> Form:
        """Persist a new form with a fresh id and timestamps."""

    @abstractmethod
    async def get(self, form_id: str) -> Form | None:
        """Return the form, or None if it does not exist."""

    @abstractmethod
    async def list_forms(self) -> list[Form]:
        """Return all forms in creation order."""

    @abstractmethod
    async def update(self, form_id: str, changes: dict[str, Any]) -> Form | None:
        """
        Apply a partial update.

        ``changes`` may hold ``title``, ``description`` and ``fields``;
        absent keys are left untouched. Returns None if the form does not
        exist.
        """

    @abstractmethod
    async def delete(self, form_id: str) -> bool:
        """Delete the form and all its submissions. Returns whether it existed."""

    @abstractmethod
    async def create_submission(self, form_id: str, data: dict[str, Any]) -> Submission:
        """
        Record a submission.

        Raises:
            ConstraintViolationError: If ``form_id`` does not resolve to a form.
        """

    @abstractmethod
    async def list_submissions(self, form_id: str) -> list[Submission]:
        """Return the form's submissions, oldest first."""
