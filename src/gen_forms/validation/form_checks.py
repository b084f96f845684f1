"""
Structural checks for form definitions.

These run before a field list is persisted, so a stored form can always
be rendered and validated.
"""

import re
from collections import Counter
from typing import Iterable

from pydantic import BaseModel, Field

from gen_forms.models.field_definitions import FormField


class FormCheckResult(BaseModel):
    """Result of checking a field list."""

    is_valid: bool = Field(..., description="Whether the field list is usable")
    errors: list[str] = Field(default_factory=list, description="Blocking problems")


def _check_field_name(name: str) -> tuple[bool, str | None]:
    """Any non-blank string can key submission data."""
    if not name.strip():
        return False, "Field name cannot be empty"
    return True, None


def _duplicates(values: Iterable[str]) -> list[str]:
    return [value for value, count in Counter(values).items() if count > 1]


def _check_single_field(field: FormField) -> list[str]:
    errors = []

    is_valid, error = _check_field_name(field.name)
    if not is_valid:
        errors.append(f"Invalid field name '{field.name}': {error}")

    if field.is_choice and not field.options:
        errors.append(f"Field '{field.name}' of type {field.type} needs options")
    elif not field.is_choice and field.options:
        errors.append(f"Field '{field.name}' of type {field.type} cannot have options")

    rules = field.validation
    if rules is not None:
        if rules.min is not None and rules.max is not None and rules.min > rules.max:
            errors.append(f"Field '{field.name}' has min greater than max")
        if rules.pattern:
            try:
                re.compile(rules.pattern)
            except re.error as e:
                errors.append(f"Field '{field.name}' has an invalid pattern: {e}")

    return errors


def check_form_fields(fields: list[FormField]) -> FormCheckResult:
    """
    Check a field list for problems that would break rendering or submission.

    Checks for:
    1. Duplicate ids and names
    2. Non-blank field names
    3. Options present exactly for select/radio fields
    4. Consistent validation bounds and compilable patterns
    """
    errors = []

    for field_id in _duplicates(f.id for f in fields):
        errors.append(f"Duplicate field id '{field_id}'")
    for name in _duplicates(f.name for f in fields):
        errors.append(f"Duplicate field name '{name}'")

    for field in fields:
        errors.extend(_check_single_field(field))

    return FormCheckResult(is_valid=not errors, errors=errors)
