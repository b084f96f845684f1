"""
Gen-Forms: Forms from plain-text descriptions.

Describe a form in a sentence, get a title and a list of typed fields,
save it, share its id and collect submissions.

Simple Usage:
    from gen_forms import parse_form_description

    parsed = parse_form_description(
        "Customer Survey Form. Ask for email, age and comments."
    )
    print(parsed.title)                       # Customer Survey Form
    print([f.name for f in parsed.fields])    # ['email', 'age', 'comments']

Service Usage:
    from gen_forms import FormService

    service = FormService.from_config()
    await service.initialize()

    form = await service.create_form(parsed.title, parsed.description, parsed.fields)
    await service.create_submission(form.id, {"email": "ada@example.com"})
    submissions = await service.get_form_submissions(form.id)

Remote Usage:
    from gen_forms import FormsClient

    async with FormsClient("http://localhost:2022") as client:
        forms = await client.get_forms()

Logging:
    from gen_forms import setup_logging

    # Console logging with module and line numbers
    setup_logging(verbose=True)

    # Or append to a file as well
    setup_logging(file_path="gen_forms.log")
"""

from gen_forms.analyzer import parse_form_description
from gen_forms.client import FormsClient
from gen_forms.config import GenFormsConfig, get_config, update_config
from gen_forms.errors import (
    ConstraintViolationError,
    GenFormsError,
    InvalidInputError,
    NotFoundError,
    StorageError,
)
from gen_forms.logging_setup import disable_logging, setup_logging
from gen_forms.models import (
    FieldValidation,
    Form,
    FormField,
    ParsedForm,
    Submission,
    ValidationResult,
)
from gen_forms.service import FormService
from gen_forms.validation import validate_submission

__all__ = [
    # Main interface
    "FormService",
    "FormsClient",
    "parse_form_description",
    "validate_submission",
    # Models
    "FieldValidation",
    "Form",
    "FormField",
    "ParsedForm",
    "Submission",
    "ValidationResult",
    # Errors
    "GenFormsError",
    "InvalidInputError",
    "NotFoundError",
    "ConstraintViolationError",
    "StorageError",
    # Configuration
    "GenFormsConfig",
    "get_config",
    "update_config",
    # Logging
    "setup_logging",
    "disable_logging",
]

__version__ = "0.1.0"
