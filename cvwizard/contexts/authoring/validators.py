"""
Field-level validators for scalar resume fields.

Every validator returns a human-readable message, or an empty string when the
value is acceptable. Validators never raise and never touch session state; the
caller decides where to store the message.

Usage:
    from cvwizard.contexts.authoring.validators import validate

    validate("email", "jane@doe")      # "Please enter a valid email address"
    validate("firstName", "Jane")      # ""
"""

import re
from typing import Callable, Dict

# Anything that is not a letter, whitespace, apostrophe or hyphen
NAME_FORBIDDEN = re.compile(r"[^\w\s'-]|[\d_]")
EMAIL_PATTERN = re.compile(r"^[\w.!#$%&'*+/=?^_`{|}~-]+@[\w-]+(?:\.[\w-]+)+$", re.ASCII)
PHONE_FORBIDDEN = re.compile(r"[^0-9\s-]")
URL_PATTERN = re.compile(r"^https?://[^\s.]+\.\S+$", re.IGNORECASE)

REQUIRED_MESSAGE = "This field is required"
NAME_MESSAGE = "Only letters are allowed"
EMAIL_REQUIRED_MESSAGE = "Email is required"
EMAIL_MESSAGE = "Please enter a valid email address"
PHONE_REQUIRED_MESSAGE = "Phone number is required"
PHONE_MESSAGE = "Only digits, spaces and hyphens are allowed"
URL_MESSAGE = "Please enter a valid URL starting with http:// or https://"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def canonical_field_name(field_name: str) -> str:
    """
    Convert a serialized camelCase field name to its snake_case attribute name.

    Example:
        >>> canonical_field_name("firstName")
        'first_name'
        >>> canonical_field_name("first_name")
        'first_name'
    """
    return _CAMEL_BOUNDARY.sub("_", field_name).lower()


def validate_name(value: str) -> str:
    if not value.strip():
        return REQUIRED_MESSAGE
    if NAME_FORBIDDEN.search(value):
        return NAME_MESSAGE
    return ""


def validate_email(value: str) -> str:
    if not value.strip():
        return EMAIL_REQUIRED_MESSAGE
    if not EMAIL_PATTERN.match(value):
        return EMAIL_MESSAGE
    return ""


def validate_phone(value: str) -> str:
    if not value.strip():
        return PHONE_REQUIRED_MESSAGE
    if PHONE_FORBIDDEN.search(value):
        return PHONE_MESSAGE
    return ""


def validate_url(value: str) -> str:
    """Optional URL: empty is fine, otherwise needs a scheme and a dot after it."""
    if not value.strip():
        return ""
    if not URL_PATTERN.match(value.strip()):
        return URL_MESSAGE
    return ""


VALIDATORS: Dict[str, Callable[[str], str]] = {
    "first_name": validate_name,
    "last_name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
    "linkedin": validate_url,
    "website": validate_url,
}


def validate(field_name: str, value) -> str:
    """
    Validate a single scalar field.

    Args:
        field_name: Field name, camelCase ("firstName") or snake_case ("first_name")
        value: Raw value as entered; None is treated as empty

    Returns:
        Error message, or "" when the value is valid or the field has no rules
    """
    validator = VALIDATORS.get(canonical_field_name(field_name))
    if validator is None:
        return ""
    return validator("" if value is None else str(value))
