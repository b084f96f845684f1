"""
SQL form store.

SQLAlchemy async ORM over any async database URL. SQLite (through
aiosqlite) is the default; foreign keys are switched on for every SQLite
connection so the ``ON DELETE CASCADE`` constraint is enforced.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import delete, event, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gen_forms.errors import ConstraintViolationError, StorageError
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form, Submission, utcnow
from gen_forms.store.base import FormStore
from gen_forms.store.tables import Base, FormRecord, SubmissionRecord

logger = logging.getLogger("gen-forms.store")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _dump_fields(fields: list[FormField]) -> list[dict[str, Any]]:
    return [field.model_dump(mode="json") for field in fields]


def _to_form(record: FormRecord) -> Form:
    return Form(
        id=record.id,
        title=record.title,
        description=record.description,
        fields=[FormField.model_validate(f) for f in record.fields],
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_submission(record: SubmissionRecord) -> Submission:
    return Submission(
        id=record.id,
        form_id=record.form_id,
        submission_data=record.submission_data,
        submitted_at=record.submitted_at,
    )


class SqlFormStore(FormStore):
    """Form store backed by a relational database."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SqlFormStore":
        return cls(create_async_engine(database_url, echo=echo))

    async def initialize(self) -> None:
        """Create the tables if they do not exist."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not create tables: {e}") from e

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        """One session and one transaction per operation."""
        async with self._sessions() as session:
            try:
                async with session.begin():
                    yield session
            except SQLAlchemyError as e:
                logger.error(f"Storage operation failed: {e}")
                raise StorageError(f"Storage operation failed: {e}") from e

    async def create(
        self,
        title: str,
        description: str | None,
        fields: list[FormField],
    ) -> Form:
        now = utcnow()
        record = FormRecord(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            fields=_dump_fields(fields),
            created_at=now,
            updated_at=now,
        )
        async with self._transaction() as session:
            session.add(record)
            await session.flush()
            return _to_form(record)

    async def get(self, form_id: str) -> Form | None:
        async with self._transaction() as session:
            record = await session.get(FormRecord, form_id)
            return _to_form(record) if record else None

    async def list_forms(self) -> list[Form]:
        async with self._transaction() as session:
            result = await session.execute(
                select(FormRecord).order_by(FormRecord.created_at, FormRecord.id)
            )
            return [_to_form(record) for record in result.scalars()]

    async def update(self, form_id: str, changes: dict[str, Any]) -> Form | None:
        async with self._transaction() as session:
            record = await session.get(FormRecord, form_id)
            if record is None:
                return None

            if "title" in changes:
                record.title = changes["title"]
            if "description" in changes:
                record.description = changes["description"]
            if "fields" in changes:
                record.fields = _dump_fields(changes["fields"])
            record.updated_at = max(utcnow(), record.updated_at)

            await session.flush()
            return _to_form(record)

    async def delete(self, form_id: str) -> bool:
        async with self._transaction() as session:
            await session.execute(
                delete(SubmissionRecord).where(SubmissionRecord.form_id == form_id)
            )
            result = await session.execute(delete(FormRecord).where(FormRecord.id == form_id))
            return result.rowcount > 0

    async def create_submission(self, form_id: str, data: dict[str, Any]) -> Submission:
        async with self._transaction() as session:
            if await session.get(FormRecord, form_id) is None:
                raise ConstraintViolationError(f"Form with id {form_id} not found")

            record = SubmissionRecord(
                id=str(uuid.uuid4()),
                form_id=form_id,
                submission_data=data,
                submitted_at=utcnow(),
            )
            session.add(record)
            try:
                await session.flush()
            except IntegrityError as e:
                # Form removed between the lookup and the insert
                raise ConstraintViolationError(f"Form with id {form_id} not found") from e
            return _to_submission(record)

    async def list_submissions(self, form_id: str) -> list[Submission]:
        async with self._transaction() as session:
            result = await session.execute(
                select(SubmissionRecord)
                .where(SubmissionRecord.form_id == form_id)
                .order_by(SubmissionRecord.submitted_at, SubmissionRecord.id)
            )
            return [_to_submission(record) for record in result.scalars()]
