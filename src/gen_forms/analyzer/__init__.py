"""
Description analysis for Gen-Forms.

This module contains:
- The field catalog (trigger keywords to field templates)
- The description analyzer (text to ParsedForm)
"""

from gen_forms.analyzer.description_analyzer import (
    extract_title,
    match_fields,
    parse_form_description,
)
from gen_forms.analyzer.field_catalog import (
    DEFAULT_FIELDS,
    FIELD_CATALOG,
    CatalogEntry,
)

__all__ = [
    "parse_form_description",
    "extract_title",
    "match_fields",
    "FIELD_CATALOG",
    "DEFAULT_FIELDS",
    "CatalogEntry",
]
