"""Tests for the description analyzer and field catalog."""

import pytest

from gen_forms.analyzer import (
    FIELD_CATALOG,
    extract_title,
    match_fields,
    parse_form_description,
)
from gen_forms.analyzer.field_catalog import PHONE_PATTERN
from gen_forms.errors import InvalidInputError


def _names(parsed):
    return [field.name for field in parsed.fields]


class TestFieldMatching:
    """Tests for trigger matching."""

    def test_email_yields_one_required_email_field(self):
        """Test that any mention of email produces the email field."""
        parsed = parse_form_description("Newsletter signup with email")
        email_fields = [f for f in parsed.fields if f.name == "email"]
        assert len(email_fields) == 1
        assert email_fields[0].type == "email"
        assert email_fields[0].required is True
        assert email_fields[0].label == "Email Address"

    def test_synonyms_do_not_duplicate(self):
        """Test that several triggers of one entry add the field once."""
        parsed = parse_form_description("Reach me by phone, telephone or mobile. Or e-mail, or email")
        assert _names(parsed).count("phone") == 1
        assert _names(parsed).count("email") == 1

    def test_catalog_order_not_mention_order(self):
        """Test that fields follow the catalog order."""
        parsed = parse_form_description("Country, then email, then full name")
        assert _names(parsed) == ["name", "email", "country"]

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        parsed = parse_form_description("GENDER and ADDRESS")
        assert _names(parsed) == ["address", "gender"]

    def test_username_triggers_name(self):
        """Test plain substring matching: 'username' contains 'name'."""
        parsed = parse_form_description("Pick a username")
        assert _names(parsed) == ["name"]

    def test_message_triggers_age(self):
        """Test plain substring matching: 'message' contains 'age'."""
        parsed = parse_form_description("Leave us a message")
        assert _names(parsed) == ["age", "comments"]

    def test_checkbox_fields(self):
        """Test the newsletter and terms checkboxes."""
        parsed = parse_form_description("Subscribe box plus the usual agreement")
        newsletter, terms = parsed.fields
        assert newsletter.type == "checkbox" and newsletter.required is False
        assert terms.type == "checkbox" and terms.required is True
        assert terms.label == "I agree to the terms and conditions"
        assert newsletter.placeholder is None

    def test_phone_rules(self):
        """Test the phone field validation."""
        (phone,) = match_fields("phone")
        assert phone.validation.min == 10
        assert phone.validation.max == 15
        assert phone.validation.pattern == PHONE_PATTERN

    def test_select_options(self):
        """Test the gender and country choices."""
        gender, country = match_fields("gender and country")
        assert gender.options == ["Male", "Female", "Other", "Prefer not to say"]
        assert country.options == ["United States", "Canada", "United Kingdom", "Australia", "Other"]

    def test_returned_fields_are_copies(self):
        """Test that changing a parsed field leaves the catalog untouched."""
        (field,) = match_fields("email")
        field.label = "Changed"
        field.required = False
        assert FIELD_CATALOG[1].template.label == "Email Address"
        assert match_fields("email")[0].required is True


class TestDefaultFields:
    """Tests for the fallback field pair."""

    def test_no_triggers_gives_default_pair(self):
        """Test that an unmatched description gets name and message."""
        parsed = parse_form_description("Tell us about your trip")
        assert _names(parsed) == ["name", "message"]
        name, message = parsed.fields
        assert name.required and message.required
        assert message.type == "textarea"
        assert (name.validation.min, name.validation.max) == (1, 100)
        assert (message.validation.min, message.validation.max) == (1, 500)

    def test_whitespace_description(self):
        """Test that a blank but non-empty description is accepted."""
        parsed = parse_form_description("   ")
        assert parsed.title == "Generated Form"
        assert _names(parsed) == ["name", "message"]


class TestTitle:
    """Tests for title extraction."""

    def test_title_before_first_period(self):
        """Test the first sentence becomes the title."""
        parsed = parse_form_description("Customer Survey Form. This form collects feedback.")
        assert parsed.title == "Customer Survey Form"
        assert _names(parsed) == ["comments"]

    def test_question_and_exclamation(self):
        """Test other terminal punctuation."""
        assert extract_title("Join us! Bring a friend.") == "Join us"
        assert extract_title("  Coming? yes") == "Coming"

    def test_fallback_first_50_characters(self):
        """Test descriptions without terminal punctuation."""
        text = "a form for collecting details about the upcoming team offsite in spring"
        assert extract_title(text) == text[:50].strip()

    def test_empty_first_sentence_uses_default(self):
        """Test that punctuation-only input falls back to the default title."""
        assert extract_title("...email") == "Generated Form"


class TestParseFormDescription:
    """Tests for the full parse."""

    def test_description_quotes_input(self):
        """Test the generated description."""
        parsed = parse_form_description("Contact form with email")
        assert parsed.description == "Form generated from: Contact form with email"

    def test_empty_description_rejected(self):
        """Test that an empty description is invalid input."""
        with pytest.raises(InvalidInputError):
            parse_form_description("")

    def test_deterministic(self):
        """Test that the same text always gives the same form."""
        text = "Registration with name, email, phone, age and country"
        assert parse_form_description(text) == parse_form_description(text)
