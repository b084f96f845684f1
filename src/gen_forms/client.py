"""
HTTP client for the Gen-Forms RPC server.

Mirrors the ``FormService`` methods so the UI can run against a remote
server (``GEN_FORMS_API_URL``) or an in-process service interchangeably.
"""

import logging
from typing import Any

import httpx

from gen_forms.errors import GenFormsError, InvalidInputError, NotFoundError, StorageError
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, ParsedForm, Submission
from gen_forms.models.validation_result import ValidationResult

logger = logging.getLogger("gen-forms.client")

_ERRORS_BY_CODE: dict[str, type[GenFormsError]] = {
    "invalid_input": InvalidInputError,
    "not_found": NotFoundError,
    "storage_error": StorageError,
}


class FormsClient:
    """
    Async client for ``POST /rpc/<procedure>``.

    Usage:
        async with FormsClient("http://localhost:2022") as client:
            forms = await client.get_forms()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "FormsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def initialize(self) -> None:
        """Nothing to prepare; the server owns the store."""

    async def close(self) -> None:
        await self._client.aclose()

    async def call(self, procedure: str, arguments: dict[str, Any] | None = None) -> Any:
        """
        Call a procedure and return its JSON result.

        Raises:
            GenFormsError: The matching subclass for the server's error code.
            httpx.HTTPError: If the server cannot be reached.
        """
        response = await self._client.post(f"/rpc/{procedure}", json=arguments or {})
        try:
            payload = response.json()
        except ValueError:
            response.raise_for_status()
            raise GenFormsError(f"Unexpected response from {procedure}: {response.text[:200]}")

        if "error" in payload:
            error = payload["error"]
            error_cls = _ERRORS_BY_CODE.get(error.get("code"), GenFormsError)
            logger.debug(f"{procedure} returned error {error}")
            if error_cls is InvalidInputError:
                raise InvalidInputError(error.get("message", ""), issues=error.get("issues"))
            raise error_cls(error.get("message", ""))
        return payload.get("result")

    async def healthcheck(self) -> dict[str, str]:
        return await self.call("healthcheck")

    async def parse_form_description(self, description: str) -> ParsedForm:
        result = await self.call("parseFormDescription", {"description": description})
        return ParsedForm.model_validate(result)

    async def create_form(
        self,
        title: str,
        description: str | None = None,
        fields: list[FormField] | None = None,
    ) -> Form:
        result = await self.call("createForm", {
            "title": title,
            "description": description,
            "fields": [f.model_dump(mode="json") for f in fields or []],
        })
        return Form.model_validate(result)

    async def get_forms(self) -> list[Form]:
        return [Form.model_validate(item) for item in await self.call("getForms")]

    async def get_form_by_id(self, form_id: str) -> Form | None:
        result = await self.call("getFormById", {"id": form_id})
        return Form.model_validate(result) if result is not None else None

    async def update_form(self, form_id: str, **changes: Any) -> Form | None:
        arguments: dict[str, Any] = {"id": form_id}
        for key, value in changes.items():
            if key == "fields" and value is not None:
                value = [f.model_dump(mode="json") for f in value]
            arguments[key] = value
        result = await self.call("updateForm", arguments)
        return Form.model_validate(result) if result is not None else None

    async def delete_form(self, form_id: str) -> bool:
        return bool(await self.call("deleteForm", {"id": form_id}))

    async def create_submission(self, form_id: str, submission_data: dict[str, Any]) -> Submission:
        result = await self.call("createSubmission", {
            "form_id": form_id,
            "submission_data": submission_data,
        })
        return Submission.model_validate(result)

    async def get_form_submissions(self, form_id: str) -> list[Submission]:
        result = await self.call("getFormSubmissions", {"form_id": form_id})
        return [Submission.model_validate(item) for item in result]

    async def validate_submission(
        self,
        form_id: str,
        submission_data: dict[str, Any],
    ) -> ValidationResult:
        result = await self.call("validateSubmission", {
            "form_id": form_id,
            "submission_data": submission_data,
        })
        return ValidationResult.model_validate(result)
