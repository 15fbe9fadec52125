"""
Message catalog for validation errors.

Messages are fixed strings per locale. Polish is the default; English is
provided for callers that select it via settings or explicitly.
"""

from typing import Any, Dict, Optional

from modules.form_validation.core.base import ErrorCode
from shared.utils.config import settings

DEFAULT_LOCALE = "pl"

MESSAGES: Dict[str, Dict[ErrorCode, str]] = {
    "pl": {
        ErrorCode.REQUIRED: "To pole jest wymagane",
        ErrorCode.MIN_LENGTH: "Minimalna długość to {min_length} znaków",
        ErrorCode.MAX_LENGTH: "Maksymalna długość to {max_length} znaków",
        ErrorCode.INVALID_FORMAT: "Nieprawidłowy format",
        ErrorCode.EMAIL_INVALID: "Nieprawidłowy adres email",
        ErrorCode.PHONE_INVALID: "Nieprawidłowy numer telefonu",
        ErrorCode.PASSWORD_TOO_SHORT: "Hasło musi mieć co najmniej {min_length} znaków",
        ErrorCode.PASSWORD_NO_LOWERCASE: "Hasło musi zawierać co najmniej jedną małą literę",
        ErrorCode.PASSWORD_NO_UPPERCASE: "Hasło musi zawierać co najmniej jedną wielką literę",
        ErrorCode.PASSWORD_NO_DIGIT: "Hasło musi zawierać co najmniej jedną cyfrę",
        ErrorCode.POSTAL_CODE_INVALID: "Nieprawidłowy format kodu pocztowego (XX-XXX)",
        ErrorCode.PESEL_FORMAT: "PESEL musi mieć 11 cyfr",
        ErrorCode.PESEL_CHECKSUM: "Nieprawidłowy numer PESEL",
        ErrorCode.NIP_FORMAT: "NIP musi mieć 10 cyfr",
        ErrorCode.NIP_CHECKSUM: "Nieprawidłowy numer NIP",
    },
    "en": {
        ErrorCode.REQUIRED: "This field is required",
        ErrorCode.MIN_LENGTH: "Minimum length is {min_length} characters",
        ErrorCode.MAX_LENGTH: "Maximum length is {max_length} characters",
        ErrorCode.INVALID_FORMAT: "Invalid format",
        ErrorCode.EMAIL_INVALID: "Invalid email address",
        ErrorCode.PHONE_INVALID: "Invalid phone number",
        ErrorCode.PASSWORD_TOO_SHORT: "Password must be at least {min_length} characters long",
        ErrorCode.PASSWORD_NO_LOWERCASE: "Password must contain at least one lowercase letter",
        ErrorCode.PASSWORD_NO_UPPERCASE: "Password must contain at least one uppercase letter",
        ErrorCode.PASSWORD_NO_DIGIT: "Password must contain at least one digit",
        ErrorCode.POSTAL_CODE_INVALID: "Invalid postal code format (XX-XXX)",
        ErrorCode.PESEL_FORMAT: "PESEL must have 11 digits",
        ErrorCode.PESEL_CHECKSUM: "Invalid PESEL number",
        ErrorCode.NIP_FORMAT: "NIP must have 10 digits",
        ErrorCode.NIP_CHECKSUM: "Invalid NIP number",
    },
}


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Pick the catalog to use.

    Falls back to the configured locale, then to Polish for unknown values.
    """
    locale = locale or settings.VALIDATION_LOCALE
    return locale if locale in MESSAGES else DEFAULT_LOCALE


def get_message(code: ErrorCode, locale: Optional[str] = None, **params: Any) -> str:
    """
    Get the message for an error code.

    Args:
        code: Error code
        locale: Catalog locale ("pl", "en"); settings default when None
        **params: Values interpolated into the template (e.g. min_length=5)

    Returns:
        Formatted message

    Example:
        >>> get_message(ErrorCode.MIN_LENGTH, "pl", min_length=5)
        'Minimalna długość to 5 znaków'
    """
    template = MESSAGES[resolve_locale(locale)][code]
    return template.format(**params) if params else template
