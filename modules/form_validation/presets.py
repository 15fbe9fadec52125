"""
Predefined validation rules for common fields.

Each preset combines generic checks with the matching domain validator
as its custom check, e.g. the "pesel" preset is required and runs the
PESEL checksum.
"""

from typing import Dict, Optional

from modules.form_validation.core.base import ValidationRule
from modules.form_validation.core.exceptions import RuleNotFoundError
from modules.form_validation.core.registry import bind_validator
from modules.form_validation.validators.domain_validators import (
    PASSWORD_MIN_LENGTH,
    validate_email,
    validate_phone,
    validate_password,
    validate_polish_postal_code,
)
from modules.form_validation.validators.checksum_validators import validate_pesel, validate_nip

EMAIL_RULE_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
POSTAL_CODE_RULE_PATTERN = r"^\d{2}-\d{3}$"


def build_presets(locale: Optional[str] = None) -> Dict[str, ValidationRule]:
    """
    Build the preset rules with messages in the given locale.

    Args:
        locale: Message catalog locale; resolved from settings at call time when None

    Returns:
        Dictionary mapping preset name to rule
    """
    return {
        "email": ValidationRule(
            required=True,
            pattern=EMAIL_RULE_PATTERN,
            custom=bind_validator(validate_email, locale),
        ),
        "phone": ValidationRule(
            required=True,
            custom=bind_validator(validate_phone, locale),
        ),
        "password": ValidationRule(
            required=True,
            min_length=PASSWORD_MIN_LENGTH,
            custom=bind_validator(validate_password, locale),
        ),
        "postal_code": ValidationRule(
            required=True,
            pattern=POSTAL_CODE_RULE_PATTERN,
            custom=bind_validator(validate_polish_postal_code, locale),
        ),
        "pesel": ValidationRule(
            required=True,
            custom=bind_validator(validate_pesel, locale),
        ),
        "nip": ValidationRule(
            required=True,
            custom=bind_validator(validate_nip, locale),
        ),
    }


# Presets using the configured default locale
VALIDATION_RULES: Dict[str, ValidationRule] = build_presets()


def get_preset(name: str, locale: Optional[str] = None) -> ValidationRule:
    """
    Get a preset rule by name.

    Raises:
        RuleNotFoundError: If no preset has that name
    """
    presets = VALIDATION_RULES if locale is None else build_presets(locale)
    try:
        return presets[name]
    except KeyError:
        raise RuleNotFoundError(
            f"Unknown preset '{name}'. Available: {sorted(presets)}"
        ) from None
