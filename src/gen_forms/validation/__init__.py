"""
Validation for Gen-Forms.

Structural checks for field lists and value checks for submissions.
"""

from gen_forms.validation.form_checks import FormCheckResult, check_form_fields
from gen_forms.validation.submission_validator import validate_submission

__all__ = [
    "FormCheckResult",
    "check_form_fields",
    "validate_submission",
]
