"""
Form Service.

This is the main entry point for Gen-Forms. It validates input, calls the
description analyzer and the form store, and logs every operation. The
MCP tools, the HTTP RPC endpoints and the UI all go through it.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from gen_forms.analyzer import parse_form_description
from gen_forms.config import GenFormsConfig, get_config
from gen_forms.errors import InvalidInputError, NotFoundError
from gen_forms.logging_setup import log_operation, logged_operation
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, ParsedForm, Submission
from gen_forms.models.validation_result import ValidationResult
from gen_forms.store import FormStore, create_store
from gen_forms.validation import check_form_fields, validate_submission

logger = logging.getLogger("gen-forms.service")

_UNSET: Any = object()


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise InvalidInputError("title must not be empty")
    return title


def _require_fields(fields: list[FormField] | None) -> list[FormField]:
    if fields is None:
        raise InvalidInputError("fields must be a list")
    result = check_form_fields(fields)
    if not result.is_valid:
        raise InvalidInputError(
            "Invalid field list:\n" + "\n".join(f"  - {e}" for e in result.errors),
            issues=result.errors,
        )
    return fields


class FormService:
    """
    Operations for building forms and collecting submissions.

    Usage:
        service = FormService.from_config()
        await service.initialize()

        parsed = await service.parse_form_description(
            "Event signup. Ask for name, email and country."
        )
        form = await service.create_form(parsed.title, parsed.description, parsed.fields)
        await service.create_submission(form.id, {"name": "Ada", "email": "ada@example.com"})
    """

    def __init__(
        self,
        store: FormStore | None = None,
        validate_submissions: bool | None = None,
    ):
        """
        Initialize the service.

        Args:
            store: Form store to use. If None, one is built from configuration.
            validate_submissions: Whether ``create_submission`` rejects values
                that break the field rules. If None, uses
                config.validate_submissions.
        """
        config = get_config()
        self.store = store or create_store(config)
        self.validate_submissions = (
            config.validate_submissions if validate_submissions is None else validate_submissions
        )

    @classmethod
    def from_config(cls, config: GenFormsConfig | None = None) -> "FormService":
        config = config or get_config()
        return cls(
            store=create_store(config),
            validate_submissions=config.validate_submissions,
        )

    async def initialize(self) -> None:
        """Prepare the store. Safe to call more than once."""
        await self.store.initialize()

    async def close(self) -> None:
        await self.store.close()

    @log_operation("parseFormDescription")
    async def parse_form_description(self, description: str) -> ParsedForm:
        """
        Turn a plain-text description into a form preview.

        Nothing is persisted; pass the result to ``create_form`` to keep it.

        Raises:
            InvalidInputError: If the description is empty.
        """
        return parse_form_description(description)

    async def create_form(
        self,
        title: str,
        description: str | None = None,
        fields: list[FormField] | None = None,
    ) -> Form:
        """
        Persist a new form.

        Raises:
            InvalidInputError: If the title is empty or the field list is malformed.
        """
        title = _require_title(title)
        fields = _require_fields(fields if fields is not None else [])

        async with logged_operation("createForm", fields=len(fields)):
            form = await self.store.create(title, description, fields)
        logger.info(f"Created form {form.id} ({form.title!r})")
        return form

    @log_operation("getForms")
    async def get_forms(self) -> list[Form]:
        return await self.store.list_forms()

    async def get_form_by_id(self, form_id: str) -> Form | None:
        async with logged_operation("getFormById", form_id=form_id):
            return await self.store.get(form_id)

    async def update_form(
        self,
        form_id: str,
        *,
        title: str | None = _UNSET,
        description: str | None = _UNSET,
        fields: list[FormField] | None = _UNSET,
    ) -> Form | None:
        """
        Update some attributes of a form.

        Attributes left out are not touched; ``description=None`` clears the
        description. Any accepted change refreshes ``updated_at``. Without
        any attribute the current form is returned unchanged.

        Returns:
            The updated form, or None if no form has this id.
        """
        changes: dict[str, Any] = {}
        if title is not _UNSET:
            changes["title"] = _require_title(title)
        if description is not _UNSET:
            changes["description"] = description
        if fields is not _UNSET:
            changes["fields"] = _require_fields(fields)

        async with logged_operation("updateForm", form_id=form_id, changes=sorted(changes)):
            if not changes:
                return await self.store.get(form_id)
            return await self.store.update(form_id, changes)

    async def delete_form(self, form_id: str) -> bool:
        """Delete a form and all its submissions."""
        async with logged_operation("deleteForm", form_id=form_id):
            deleted = await self.store.delete(form_id)
        if not deleted:
            logger.info(f"deleteForm: no form with id {form_id}")
        return deleted

    async def create_submission(
        self,
        form_id: str,
        submission_data: dict[str, Any],
    ) -> Submission:
        """
        Record answers against a form.

        Raises:
            ConstraintViolationError: If the form does not exist.
            InvalidInputError: If submission validation is enabled and the
                values break the field rules.
        """
        if not isinstance(submission_data, dict):
            raise InvalidInputError("submission_data must be an object keyed by field name")

        if self.validate_submissions:
            result = await self.validate_submission(form_id, submission_data)
            if not result.is_valid:
                messages = [e.message for e in result.errors]
                raise InvalidInputError(
                    "Submission is invalid:\n" + "\n".join(f"  - {m}" for m in messages),
                    issues=messages,
                )
            submission_data = result.validated_data or {}

        async with logged_operation("createSubmission", form_id=form_id):
            return await self.store.create_submission(form_id, submission_data)

    async def get_form_submissions(self, form_id: str) -> list[Submission]:
        async with logged_operation("getFormSubmissions", form_id=form_id):
            return await self.store.list_submissions(form_id)

    async def validate_submission(
        self,
        form_id: str,
        submission_data: dict[str, Any],
    ) -> ValidationResult:
        """
        Check values against a stored form's field rules without saving them.

        Raises:
            NotFoundError: If the form does not exist.
        """
        form = await self.store.get(form_id)
        if form is None:
            raise NotFoundError(f"Form with id {form_id} not found")
        return validate_submission(form.fields, submission_data)

    async def healthcheck(self) -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
