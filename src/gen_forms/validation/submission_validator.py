"""
Submission validator.

Checks submitted values against the ``required`` flag and ``validation``
rules of each field before a submission is accepted. The UI runs it before
calling ``create_submission``; the service can also enforce it server side.
"""

import math
import re
from typing import Any

from gen_forms.models.field_definitions import FormField
from gen_forms.models.validation_result import FieldValidationError, ValidationResult
from gen_forms.validation.constants import (
    CHECKBOX_MESSAGE,
    EMAIL_MESSAGE,
    EMAIL_PATTERN,
    ENUM_MESSAGE,
    MAX_LENGTH_MESSAGE,
    MAXIMUM_MESSAGE,
    MIN_LENGTH_MESSAGE,
    MINIMUM_MESSAGE,
    NUMBER_MESSAGE,
    PATTERN_MESSAGE,
    REQUIRED_MESSAGE,
    TEXT_MESSAGE,
)


def _format_bound(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)


def _is_empty(field: FormField, value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, (list, dict)) and not value:
        return True
    # An unchecked box counts as no answer
    return field.type == "checkbox" and value is False


def _coerce_number(value: Any) -> int | float | None:
    """Return the numeric value, or None when it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


class _FieldChecker:
    """Collects errors for one field."""

    def __init__(self, field: FormField, value: Any):
        self.field = field
        self.value = value
        self.errors: list[FieldValidationError] = []
        self.warnings: list[str] = []

    def fail(self, error_type: str, template: str, expected: Any = None, **kwargs) -> None:
        self.errors.append(
            FieldValidationError(
                field_name=self.field.name,
                error_type=error_type,
                message=template.format(label=self.field.label, **kwargs),
                expected=expected,
                received=self.value,
            )
        )

    def check(self) -> Any:
        """Validate the value and return its cleaned form."""
        field_type = self.field.type
        if field_type == "number":
            return self._check_number()
        if field_type == "checkbox":
            return self._check_checkbox()
        if self.field.is_choice:
            return self._check_choice()
        return self._check_text()

    def _check_number(self) -> Any:
        number = _coerce_number(self.value)
        if number is None:
            self.fail("type", NUMBER_MESSAGE, expected="number")
            return self.value

        rules = self.field.validation
        if rules is not None:
            if rules.min is not None and number < rules.min:
                self.fail("minimum", MINIMUM_MESSAGE, expected=rules.min, bound=_format_bound(rules.min))
            if rules.max is not None and number > rules.max:
                self.fail("maximum", MAXIMUM_MESSAGE, expected=rules.max, bound=_format_bound(rules.max))
        return number

    def _check_checkbox(self) -> Any:
        if not isinstance(self.value, bool):
            self.fail("type", CHECKBOX_MESSAGE, expected="boolean")
        return self.value

    def _check_choice(self) -> Any:
        options = self.field.options or []
        if not isinstance(self.value, str) or (options and self.value not in options):
            self.fail("enum", ENUM_MESSAGE, expected=options, options=", ".join(options))
        return self.value

    def _check_text(self) -> Any:
        if not isinstance(self.value, str):
            self.fail("type", TEXT_MESSAGE, expected="string")
            return self.value

        rules = self.field.validation
        if rules is not None:
            length = len(self.value)
            if rules.min is not None and length < rules.min:
                self.fail("min_length", MIN_LENGTH_MESSAGE, expected=rules.min, bound=_format_bound(rules.min))
            if rules.max is not None and length > rules.max:
                self.fail("max_length", MAX_LENGTH_MESSAGE, expected=rules.max, bound=_format_bound(rules.max))
            if rules.pattern:
                try:
                    matched = re.search(rules.pattern, self.value) is not None
                except re.error:
                    self.warnings.append(
                        f"Pattern for '{self.field.name}' is not a valid regular expression"
                    )
                    matched = True
                if not matched:
                    self.fail("pattern", PATTERN_MESSAGE, expected=rules.pattern)

        if self.field.type == "email" and not EMAIL_PATTERN.match(self.value):
            self.fail("format", EMAIL_MESSAGE, expected="email")
        return self.value


def validate_submission(fields: list[FormField], data: dict[str, Any]) -> ValidationResult:
    """
    Validate submitted values against a form's fields.

    Args:
        fields: The form's field descriptors.
        data: Values keyed by field name.

    Returns:
        ValidationResult. ``validated_data`` holds the cleaned values
        (numeric strings converted to numbers) when there are no errors.
    """
    errors: list[FieldValidationError] = []
    warnings: list[str] = []
    cleaned: dict[str, Any] = {}

    for field in fields:
        value = data.get(field.name)
        if _is_empty(field, value):
            if field.required:
                errors.append(
                    FieldValidationError(
                        field_name=field.name,
                        error_type="required",
                        message=REQUIRED_MESSAGE.format(label=field.label),
                        received=value,
                    )
                )
            elif field.name in data:
                cleaned[field.name] = value
            continue

        checker = _FieldChecker(field, value)
        cleaned[field.name] = checker.check()
        errors.extend(checker.errors)
        warnings.extend(checker.warnings)

    known = {field.name for field in fields}
    for key, value in data.items():
        if key not in known:
            warnings.append(f"Unknown field '{key}'")
            cleaned[key] = value

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        validated_data=cleaned if not errors else None,
        warnings=warnings,
    )
