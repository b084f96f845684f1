"""
Field catalog for the description analyzer.

An ordered table of trigger keywords and the field each one produces.
Synonyms for the same field share one entry so the field is added at
most once. Centralizing the catalog here keeps the analyzer itself small.
"""

from dataclasses import dataclass

from gen_forms.models.field_definitions import FieldValidation, FormField

# Digits, spaces, hyphens, parentheses, optional leading +
PHONE_PATTERN = r"^\+?[\d\s\-\(\)]+$"

DEFAULT_TITLE = "Generated Form"
DESCRIPTION_PREFIX = "Form generated from: "
TITLE_FALLBACK_LENGTH = 50


@dataclass(frozen=True)
class CatalogEntry:
    """Trigger keywords mapped to a field template."""

    triggers: tuple[str, ...]
    template: FormField

    def matches(self, lowered_text: str) -> bool:
        """Plain substring test, no word boundaries."""
        return any(trigger in lowered_text for trigger in self.triggers)

    def build_field(self) -> FormField:
        return self.template.model_copy(deep=True)


FIELD_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        triggers=("name", "full name"),
        template=FormField(
            id="name",
            name="name",
            label="Name",
            type="text",
            required=True,
            placeholder="Enter your name",
        ),
    ),
    CatalogEntry(
        triggers=("email", "e-mail"),
        template=FormField(
            id="email",
            name="email",
            label="Email Address",
            type="email",
            required=True,
            placeholder="Enter your email",
        ),
    ),
    CatalogEntry(
        triggers=("phone", "telephone", "mobile"),
        template=FormField(
            id="phone",
            name="phone",
            label="Phone Number",
            type="text",
            required=False,
            placeholder="Enter your phone number",
            validation=FieldValidation(min=10, max=15, pattern=PHONE_PATTERN),
        ),
    ),
    CatalogEntry(
        triggers=("age",),
        template=FormField(
            id="age",
            name="age",
            label="Age",
            type="number",
            required=True,
            placeholder="Enter your age",
            validation=FieldValidation(min=0, max=120),
        ),
    ),
    CatalogEntry(
        triggers=("address",),
        template=FormField(
            id="address",
            name="address",
            label="Address",
            type="textarea",
            required=False,
            placeholder="Enter your address",
            validation=FieldValidation(min=10, max=200),
        ),
    ),
    CatalogEntry(
        triggers=("comment", "message", "feedback"),
        template=FormField(
            id="comments",
            name="comments",
            label="Comments",
            type="textarea",
            required=False,
            placeholder="Enter your comments",
            validation=FieldValidation(min=0, max=1000),
        ),
    ),
    CatalogEntry(
        triggers=("gender",),
        template=FormField(
            id="gender",
            name="gender",
            label="Gender",
            type="select",
            required=False,
            placeholder="Select your gender",
            options=["Male", "Female", "Other", "Prefer not to say"],
        ),
    ),
    CatalogEntry(
        triggers=("country",),
        template=FormField(
            id="country",
            name="country",
            label="Country",
            type="select",
            required=False,
            placeholder="Select your country",
            options=["United States", "Canada", "United Kingdom", "Australia", "Other"],
        ),
    ),
    CatalogEntry(
        triggers=("newsletter", "subscribe"),
        template=FormField(
            id="newsletter",
            name="newsletter",
            label="Subscribe to newsletter",
            type="checkbox",
            required=False,
        ),
    ),
    CatalogEntry(
        triggers=("terms", "agreement"),
        template=FormField(
            id="terms",
            name="terms",
            label="I agree to the terms and conditions",
            type="checkbox",
            required=True,
        ),
    ),
)

# Used when no catalog entry fires
DEFAULT_FIELDS: tuple[FormField, ...] = (
    FormField(
        id="name",
        name="name",
        label="Name",
        type="text",
        required=True,
        placeholder="Enter your name",
        validation=FieldValidation(min=1, max=100),
    ),
    FormField(
        id="message",
        name="message",
        label="Message",
        type="textarea",
        required=True,
        placeholder="Enter your message",
        validation=FieldValidation(min=1, max=500),
    ),
)


def default_fields() -> list[FormField]:
    """Fresh copies of the default name/message pair."""
    return [field.model_copy(deep=True) for field in DEFAULT_FIELDS]
