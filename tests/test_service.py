"""Tests for FormService."""

import logging

import anyio
import pytest

from gen_forms.errors import ConstraintViolationError, InvalidInputError, NotFoundError
from gen_forms.models.field_definitions import FormField
from gen_forms.service import FormService
from gen_forms.store import InMemoryFormStore

pytestmark = pytest.mark.anyio


class TestParse:
    """Tests for parse_form_description."""

    async def test_parse_does_not_persist(self, service):
        """Test that a preview is not saved."""
        parsed = await service.parse_form_description("Signup with email and age")
        assert [f.name for f in parsed.fields] == ["email", "age"]
        assert await service.get_forms() == []

    async def test_parse_empty(self, service):
        """Test the empty description."""
        with pytest.raises(InvalidInputError):
            await service.parse_form_description("")

    async def test_parse_then_create(self, service):
        """Test the builder flow end to end."""
        parsed = await service.parse_form_description("Customer Survey Form. This form collects feedback.")
        form = await service.create_form(parsed.title, parsed.description, parsed.fields)
        assert form.title == "Customer Survey Form"
        assert (await service.get_form_by_id(form.id)).fields == parsed.fields


class TestCreateForm:
    """Tests for create_form."""

    async def test_create(self, service, contact_fields):
        """Test creating a form."""
        form = await service.create_form("Contact", None, contact_fields)
        assert form.description is None
        assert [f.id for f in form.fields] == ["name", "email", "age", "country"]

    @pytest.mark.parametrize("title", ["", "   "])
    async def test_blank_title(self, service, title):
        """Test that a blank title is rejected."""
        with pytest.raises(InvalidInputError):
            await service.create_form(title, None, [])

    async def test_hyphenated_name_round_trip(self, service):
        """Test that field names are not restricted to identifiers."""
        fields = [FormField(id="f1", name="first-name", label="First name", type="text")]
        form = await service.create_form("Signup", None, fields)
        assert (await service.get_form_by_id(form.id)).fields == fields

    async def test_malformed_fields(self, service):
        """Test that structural problems are reported as issues."""
        fields = [
            FormField(id="a", name="dup", label="A", type="text"),
            FormField(id="b", name="dup", label="B", type="text"),
        ]
        with pytest.raises(InvalidInputError) as exc_info:
            await service.create_form("Form", None, fields)
        assert exc_info.value.issues == ["Duplicate field name 'dup'"]
        assert await service.get_forms() == []


class TestUpdateForm:
    """Tests for update_form."""

    async def test_title_only(self, service, contact_fields):
        """Test that omitted attributes keep their values."""
        form = await service.create_form("Old", "Description", contact_fields)
        await anyio.sleep(0.01)

        updated = await service.update_form(form.id, title="New")
        assert updated.title == "New"
        assert updated.description == "Description"
        assert updated.fields == contact_fields
        assert updated.updated_at > form.updated_at

    async def test_clear_description(self, service):
        """Test that None clears the description."""
        form = await service.create_form("Form", "Description", [])
        assert (await service.update_form(form.id, description=None)).description is None

    async def test_no_changes(self, service):
        """Test that an empty update returns the form untouched."""
        form = await service.create_form("Form", None, [])
        assert await service.update_form(form.id) == form

    async def test_missing_form(self, service):
        """Test updating an unknown id."""
        assert await service.update_form("does-not-exist", title="X") is None

    async def test_blank_title_rejected(self, service):
        """Test validation before storage."""
        form = await service.create_form("Form", None, [])
        with pytest.raises(InvalidInputError):
            await service.update_form(form.id, title=" ")
        assert (await service.get_form_by_id(form.id)).title == "Form"

    async def test_null_fields_rejected(self, service):
        """Test that fields cannot be set to None."""
        form = await service.create_form("Form", None, [])
        with pytest.raises(InvalidInputError):
            await service.update_form(form.id, fields=None)


class TestSubmissions:
    """Tests for submissions through the service."""

    async def test_create_and_list(self, service, contact_fields):
        """Test recording answers."""
        form = await service.create_form("Contact", None, contact_fields)
        await service.create_submission(form.id, {"name": "Ada"})
        submissions = await service.get_form_submissions(form.id)
        assert [s.submission_data for s in submissions] == [{"name": "Ada"}]

    async def test_missing_form(self, service):
        """Test that a submission to an unknown form fails."""
        with pytest.raises(NotFoundError):
            await service.create_submission("does-not-exist", {"name": "Ada"})

    async def test_missing_form_is_constraint_violation(self, service):
        """Test the concrete error type."""
        with pytest.raises(ConstraintViolationError):
            await service.create_submission("does-not-exist", {})

    async def test_unvalidated_by_default(self, service, contact_fields):
        """Test that the lenient service stores anything."""
        form = await service.create_form("Contact", None, contact_fields)
        submission = await service.create_submission(form.id, {"age": "not a number"})
        assert submission.submission_data == {"age": "not a number"}

    async def test_strict_service_rejects_invalid(self, strict_service, contact_fields):
        """Test server-side validation."""
        form = await strict_service.create_form("Contact", None, contact_fields)
        with pytest.raises(InvalidInputError) as exc_info:
            await strict_service.create_submission(form.id, {"name": "Ada"})
        assert exc_info.value.issues == ["Email Address is required"]
        assert await strict_service.get_form_submissions(form.id) == []

    async def test_strict_service_stores_cleaned_values(self, strict_service, contact_fields):
        """Test that numeric strings are stored as numbers."""
        form = await strict_service.create_form("Contact", None, contact_fields)
        submission = await strict_service.create_submission(
            form.id, {"name": "Ada", "email": "ada@example.com", "age": "36"}
        )
        assert submission.submission_data["age"] == 36

    async def test_validate_without_saving(self, service, contact_fields):
        """Test validate_submission."""
        form = await service.create_form("Contact", None, contact_fields)
        result = await service.validate_submission(form.id, {"name": "Ada", "email": "x"})
        assert not result.is_valid
        assert list(result.first_errors()) == ["email"]
        assert await service.get_form_submissions(form.id) == []

    async def test_validate_missing_form(self, service):
        with pytest.raises(NotFoundError):
            await service.validate_submission("does-not-exist", {})


class TestDeleteForm:
    """Tests for delete_form."""

    async def test_delete_removes_submissions(self, service):
        """Test the cascade through the service."""
        form = await service.create_form("Form", None, [])
        for i in range(3):
            await service.create_submission(form.id, {"n": i})

        assert await service.delete_form(form.id) is True
        assert await service.get_form_by_id(form.id) is None
        assert await service.get_form_submissions(form.id) == []
        assert await service.get_forms() == []

    async def test_delete_missing(self, service):
        assert await service.delete_form("does-not-exist") is False


class TestServiceMisc:
    """Tests for construction, health and logging."""

    async def test_healthcheck(self, service):
        result = await service.healthcheck()
        assert result["status"] == "ok"
        assert "timestamp" in result

    async def test_from_config_memory(self):
        """Test building the service from configuration."""
        from gen_forms.config import GenFormsConfig

        service = FormService.from_config(GenFormsConfig(store_backend="memory", validate_submissions=True))
        assert isinstance(service.store, InMemoryFormStore)
        assert service.validate_submissions is True

    async def test_operations_are_logged(self, service, caplog, monkeypatch):
        """Test that completed operations are logged with their duration."""
        monkeypatch.setattr(logging.getLogger("gen-forms"), "propagate", True)
        monkeypatch.setattr(logging.getLogger("gen-forms"), "disabled", False)
        with caplog.at_level(logging.INFO, logger="gen-forms"):
            await service.create_form("Form", None, [])
        assert any("createForm completed in" in r.getMessage() for r in caplog.records)
