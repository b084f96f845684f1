"""
RPC procedure registry.

Maps each procedure name to its input model and a call on ``FormService``.
The MCP server and the HTTP server both dispatch through ``call_procedure``
so the two surfaces expose exactly the same operations.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from gen_forms.errors import GenFormsError, InvalidInputError, NotFoundError
from gen_forms.models.requests import (
    CreateFormInput,
    CreateSubmissionInput,
    EmptyInput,
    FormIdInput,
    FormSubmissionsInput,
    ParseFormDescriptionInput,
    UpdateFormInput,
)
from gen_forms.service import FormService

logger = logging.getLogger("gen-forms.procedures")

Handler = Callable[[FormService, Any], Awaitable[Any]]


@dataclass(frozen=True)
class Procedure:
    """One remotely callable operation."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema of the arguments object."""
        schema = self.input_model.model_json_schema()
        schema.setdefault("properties", {})
        schema["type"] = "object"
        return schema


PROCEDURES: dict[str, Procedure] = {
    p.name: p
    for p in (
        Procedure(
            name="healthcheck",
            description="Report that the service is up.",
            input_model=EmptyInput,
            handler=lambda service, args: service.healthcheck(),
        ),
        Procedure(
            name="parseFormDescription",
            description=(
                "Turn a plain-text form description into a title and a list of "
                "fields. Nothing is saved; use createForm to keep the result."
            ),
            input_model=ParseFormDescriptionInput,
            handler=lambda service, args: service.parse_form_description(args.description),
        ),
        Procedure(
            name="createForm",
            description="Save a form definition and return it with its generated id.",
            input_model=CreateFormInput,
            handler=lambda service, args: service.create_form(
                args.title, args.description, args.fields
            ),
        ),
        Procedure(
            name="getForms",
            description="List all saved forms.",
            input_model=EmptyInput,
            handler=lambda service, args: service.get_forms(),
        ),
        Procedure(
            name="getFormById",
            description="Fetch one form by id; returns null when it does not exist.",
            input_model=FormIdInput,
            handler=lambda service, args: service.get_form_by_id(args.id),
        ),
        Procedure(
            name="updateForm",
            description=(
                "Change the title, description and/or fields of a form. Omitted "
                "attributes are left as they are. Returns null when the form "
                "does not exist."
            ),
            input_model=UpdateFormInput,
            handler=lambda service, args: service.update_form(args.id, **args.changes()),
        ),
        Procedure(
            name="deleteForm",
            description="Delete a form and all its submissions; returns whether it existed.",
            input_model=FormIdInput,
            handler=lambda service, args: service.delete_form(args.id),
        ),
        Procedure(
            name="createSubmission",
            description="Record answers (keyed by field name) against a form.",
            input_model=CreateSubmissionInput,
            handler=lambda service, args: service.create_submission(
                args.form_id, args.submission_data
            ),
        ),
        Procedure(
            name="getFormSubmissions",
            description="List a form's submissions, oldest first.",
            input_model=FormSubmissionsInput,
            handler=lambda service, args: service.get_form_submissions(args.form_id),
        ),
        Procedure(
            name="validateSubmission",
            description="Check answers against a form's field rules without saving them.",
            input_model=CreateSubmissionInput,
            handler=lambda service, args: service.validate_submission(
                args.form_id, args.submission_data
            ),
        ),
    )
}


def to_jsonable(value: Any) -> Any:
    """Convert procedure results to plain JSON values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def error_payload(error: Exception) -> dict[str, Any]:
    """Structured description of a failed call."""
    if isinstance(error, GenFormsError):
        payload: dict[str, Any] = error.to_dict()
        issues = getattr(error, "issues", None)
        if issues:
            payload["issues"] = issues
        return payload
    return {"code": "unexpected", "message": str(error)}


async def call_procedure(
    service: FormService,
    name: str,
    arguments: dict[str, Any] | None = None,
) -> Any:
    """
    Validate arguments and run a procedure.

    Returns:
        The result converted to JSON values.

    Raises:
        NotFoundError: If no procedure has this name.
        InvalidInputError: If the arguments do not match the input model.
    """
    procedure = PROCEDURES.get(name)
    if procedure is None:
        raise NotFoundError(f"Unknown procedure: {name}")

    try:
        args = procedure.input_model.model_validate(arguments or {})
    except ValidationError as e:
        issues = [
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidInputError(f"Invalid arguments for {name}", issues=issues) from e

    logger.debug(f"Dispatching {name}")
    result = await procedure.handler(service, args)
    return to_jsonable(result)
