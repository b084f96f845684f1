"""
Description Analyzer.

Turns a plain-text form description into a ``ParsedForm``. The matching is
deliberately naive: every catalog entry whose trigger occurs anywhere in
the lowercased text contributes its field, so "username" also triggers
the ``name`` field.
"""

import logging
import re

from gen_forms.analyzer.field_catalog import (
    DEFAULT_TITLE,
    DESCRIPTION_PREFIX,
    FIELD_CATALOG,
    TITLE_FALLBACK_LENGTH,
    CatalogEntry,
    default_fields,
)
from gen_forms.errors import InvalidInputError
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import ParsedForm

logger = logging.getLogger("gen-forms.analyzer")

_TERMINAL_PUNCTUATION = re.compile(r"[.!?]")


def extract_title(description: str) -> str:
    """
    Derive a form title from the description.

    The title is the text before the first ``.``, ``!`` or ``?``. Without
    terminal punctuation the first 50 characters are used instead.
    """
    match = _TERMINAL_PUNCTUATION.search(description)
    if match:
        title = description[: match.start()].strip()
    else:
        title = description[:TITLE_FALLBACK_LENGTH].strip()
    return title or DEFAULT_TITLE


def match_fields(
    description: str,
    catalog: tuple[CatalogEntry, ...] = FIELD_CATALOG,
) -> list[FormField]:
    """Return one field per matching catalog entry, in catalog order."""
    lowered = description.lower()
    return [entry.build_field() for entry in catalog if entry.matches(lowered)]


def parse_form_description(description: str) -> ParsedForm:
    """
    Parse a plain-text description into a form structure.

    Args:
        description: Free text such as
            "Contact form. Ask for name, email and a message."

    Returns:
        ParsedForm with a derived title, a description quoting the input
        and the matched fields (or the default name/message pair).

    Raises:
        InvalidInputError: If the description is empty.
    """
    if not description:
        raise InvalidInputError("description must not be empty")

    fields = match_fields(description)
    if not fields:
        logger.debug("No catalog trigger matched, using default fields")
        fields = default_fields()

    parsed = ParsedForm(
        title=extract_title(description),
        description=f"{DESCRIPTION_PREFIX}{description}",
        fields=fields,
    )
    logger.debug(
        "Parsed description into %d field(s): %s",
        len(parsed.fields),
        [f.name for f in parsed.fields],
    )
    return parsed
