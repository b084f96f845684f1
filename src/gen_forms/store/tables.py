"""
Relational layout for the SQL form store.

Field lists and submission data are kept as JSON columns; submissions
reference their form with ``ON DELETE CASCADE``.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class FormRecord(Base):
    __tablename__ = "forms"

    id = Column(String(36), primary_key=True)  # uuid4 string, used in share links
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    fields = Column(JSON, nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)


class SubmissionRecord(Base):
    __tablename__ = "form_submissions"

    id = Column(String(36), primary_key=True)
    form_id = Column(String(36), ForeignKey("forms.id", ondelete="CASCADE"), nullable=False)
    submission_data = Column(JSON, nullable=False)
    submitted_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_form_submissions_form_id_submitted_at", "form_id", "submitted_at"),
    )
