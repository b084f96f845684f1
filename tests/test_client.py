"""Tests for FormsClient against the in-process RPC app."""

import pytest
from httpx import ASGITransport

from gen_forms.client import FormsClient
from gen_forms.errors import InvalidInputError, NotFoundError
from gen_forms.http_server import create_http_app
from gen_forms.models.forms import Form

pytestmark = pytest.mark.anyio


@pytest.fixture
async def client(service):
    transport = ASGITransport(app=create_http_app(service))
    async with FormsClient("http://test/", transport=transport) as forms_client:
        yield forms_client


class TestFormsClient:
    """Tests for the remote service mirror."""

    async def test_healthcheck(self, client):
        assert (await client.healthcheck())["status"] == "ok"

    async def test_full_flow(self, client):
        """Test parse, create, update, submit and delete through the client."""
        parsed = await client.parse_form_description("Feedback. Email and comments please")
        form = await client.create_form(parsed.title, parsed.description, parsed.fields)
        assert isinstance(form, Form)
        assert [f.name for f in form.fields] == ["email", "comments"]

        updated = await client.update_form(form.id, title="Product feedback")
        assert updated.title == "Product feedback"
        assert updated.fields == form.fields

        await client.create_submission(form.id, {"email": "ada@example.com", "comments": "Great"})
        submissions = await client.get_form_submissions(form.id)
        assert submissions[0].submission_data["comments"] == "Great"

        assert [f.id for f in await client.get_forms()] == [form.id]
        assert await client.delete_form(form.id) is True
        assert await client.get_form_by_id(form.id) is None

    async def test_update_fields(self, client, contact_fields):
        form = await client.create_form("Contact", None, contact_fields)
        updated = await client.update_form(form.id, fields=contact_fields[:2], description=None)
        assert [f.name for f in updated.fields] == ["name", "email"]

    async def test_validate_submission(self, client, contact_fields):
        form = await client.create_form("Contact", None, contact_fields)
        result = await client.validate_submission(form.id, {"name": "Ada"})
        assert not result.is_valid
        assert result.first_errors() == {"email": "Email Address is required"}

    async def test_errors_are_typed(self, client):
        """Test that server error codes become the matching exceptions."""
        with pytest.raises(InvalidInputError) as exc_info:
            await client.create_form("", None, [])
        assert "title" in exc_info.value.message

        with pytest.raises(NotFoundError):
            await client.create_submission("nope", {"a": 1})
