"""
Constants for form and submission validation.

This module contains the patterns and messages shared by the form
definition checks and the submission validator.
"""

import re

# Loose shape check, the same one browsers apply to <input type="email">
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Message templates, formatted with the field label
REQUIRED_MESSAGE = "{label} is required"
MINIMUM_MESSAGE = "{label} must be at least {bound}"
MAXIMUM_MESSAGE = "{label} must be at most {bound}"
MIN_LENGTH_MESSAGE = "{label} must be at least {bound} characters"
MAX_LENGTH_MESSAGE = "{label} must be at most {bound} characters"
PATTERN_MESSAGE = "{label} format is invalid"
EMAIL_MESSAGE = "{label} must be a valid email address"
NUMBER_MESSAGE = "{label} must be a number"
TEXT_MESSAGE = "{label} must be text"
CHECKBOX_MESSAGE = "{label} must be checked or unchecked"
ENUM_MESSAGE = "{label} must be one of: {options}"
