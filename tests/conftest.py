"""Shared fixtures for Gen-Forms tests."""

import pytest

from gen_forms.models.field_definitions import FieldValidation, FormField
from gen_forms.service import FormService
from gen_forms.store import InMemoryFormStore, SqlFormStore


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def memory_store():
    store = InMemoryFormStore()
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
async def sql_store(tmp_path):
    store = SqlFormStore.from_url(f"sqlite+aiosqlite:///{tmp_path}/forms.db")
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "sql"])
async def store(request, tmp_path):
    """Both store implementations, so behavior is checked against each."""
    if request.param == "memory":
        store = InMemoryFormStore()
    else:
        store = SqlFormStore.from_url(f"sqlite+aiosqlite:///{tmp_path}/forms.db")
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
async def service(memory_store):
    return FormService(store=memory_store, validate_submissions=False)


@pytest.fixture
async def strict_service(memory_store):
    """Service that validates submissions before storing them."""
    return FormService(store=memory_store, validate_submissions=True)


@pytest.fixture
def contact_fields():
    return [
        FormField(
            id="name",
            name="name",
            label="Name",
            type="text",
            required=True,
            placeholder="Enter your name",
        ),
        FormField(
            id="email",
            name="email",
            label="Email Address",
            type="email",
            required=True,
            placeholder="Enter your email",
        ),
        FormField(
            id="age",
            name="age",
            label="Age",
            type="number",
            required=False,
            validation=FieldValidation(min=0, max=120),
        ),
        FormField(
            id="country",
            name="country",
            label="Country",
            type="select",
            options=["Canada", "Other"],
        ),
    ]
