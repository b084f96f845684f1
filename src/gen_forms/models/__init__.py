"""
Data models for Gen-Forms.

This module contains Pydantic models for:
- Field descriptors
- Parsed forms, persisted forms and submissions
- RPC procedure inputs
- Validation results
"""

from gen_forms.models.field_definitions import (
    FieldType,
    FieldValidation,
    FormField,
)
from gen_forms.models.forms import (
    Form,
    ParsedForm,
    Submission,
)
from gen_forms.models.requests import (
    CreateFormInput,
    CreateSubmissionInput,
    EmptyInput,
    FormIdInput,
    FormSubmissionsInput,
    ParseFormDescriptionInput,
    UpdateFormInput,
)
from gen_forms.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Fields
    "FieldType",
    "FieldValidation",
    "FormField",
    # Forms
    "Form",
    "ParsedForm",
    "Submission",
    # Procedure inputs
    "CreateFormInput",
    "CreateSubmissionInput",
    "EmptyInput",
    "FormIdInput",
    "FormSubmissionsInput",
    "ParseFormDescriptionInput",
    "UpdateFormInput",
    # Validation
    "ValidationResult",
    "FieldValidationError",
]
