"""
Domain validators module.

Stateless checks for common form inputs:
- validate_email: local@domain.tld shape
- validate_phone: optional '+' and 9-15 digits, whitespace ignored
- validate_password: length, lowercase, uppercase and digit requirements
- validate_polish_postal_code: DD-DDD

Each validator returns an error message, or None when the value is valid.
"""

import re
from typing import Optional

from modules.form_validation.core.base import ErrorCode
from modules.form_validation.core.registry import register_validator
from modules.form_validation.messages import get_message

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?\d{9,15}", re.ASCII)
POSTAL_CODE_PATTERN = re.compile(r"\d{2}-\d{3}", re.ASCII)
WHITESPACE_PATTERN = re.compile(r"\s")

PASSWORD_MIN_LENGTH = 8


def normalize_phone(phone: str) -> str:
    """Remove all whitespace from a phone number"""
    return WHITESPACE_PATTERN.sub("", phone)


@register_validator("email")
def validate_email(email: str, locale: Optional[str] = None) -> Optional[str]:
    if not EMAIL_PATTERN.fullmatch(email):
        return get_message(ErrorCode.EMAIL_INVALID, locale)
    return None


@register_validator("phone")
def validate_phone(phone: str, locale: Optional[str] = None) -> Optional[str]:
    """
    Validate a phone number.

    Whitespace is stripped before matching; any other punctuation
    (dashes, parentheses) is rejected.

    Example:
        >>> validate_phone("+48 123 456 789") is None
        True
    """
    if not PHONE_PATTERN.fullmatch(normalize_phone(phone)):
        return get_message(ErrorCode.PHONE_INVALID, locale)
    return None


@register_validator("password")
def validate_password(password: str, locale: Optional[str] = None) -> Optional[str]:
    """
    Validate password strength.

    Requirements are checked in order and the first unmet one is reported:
    at least 8 characters, a lowercase letter, an uppercase letter, a digit.
    Special characters are not required.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return get_message(ErrorCode.PASSWORD_TOO_SHORT, locale, min_length=PASSWORD_MIN_LENGTH)

    if not re.search(r"[a-z]", password):
        return get_message(ErrorCode.PASSWORD_NO_LOWERCASE, locale)

    if not re.search(r"[A-Z]", password):
        return get_message(ErrorCode.PASSWORD_NO_UPPERCASE, locale)

    if not re.search(r"\d", password, re.ASCII):
        return get_message(ErrorCode.PASSWORD_NO_DIGIT, locale)

    return None


@register_validator("postal_code")
def validate_polish_postal_code(code: str, locale: Optional[str] = None) -> Optional[str]:
    if not POSTAL_CODE_PATTERN.fullmatch(code):
        return get_message(ErrorCode.POSTAL_CODE_INVALID, locale)
    return None
