"""
Form validation module.

Provides field-level validation for form input.

Main components:
- FormValidator: Rule registry and aggregate validator for one form
- ValidationRule: Declarative checks for a field (required, length, pattern, custom)
- Domain validators: email, phone, password, postal code, PESEL, NIP

Usage:
    from modules.form_validation import FormValidator, ValidationRule, validate_pesel

    validator = FormValidator()
    validator.add_field("name", ValidationRule(required=True, min_length=3))
    validator.add_field("pesel", ValidationRule(required=True, custom=validate_pesel))

    result = validator.validate({"name": "Jan", "pesel": "44051401359"})

    if result.is_valid:
        print("Form is valid!")
    else:
        for field_name, message in result.errors.items():
            print(f"{field_name}: {message}")
"""

from modules.form_validation.core.base import ValidationRule, ValidationResult, ErrorCode
from modules.form_validation.core.exceptions import (
    FormValidationException,
    ConfigurationError,
    RuleNotFoundError,
)
from modules.form_validation.core.registry import register_validator, get_validator, VALIDATOR_REGISTRY
from modules.form_validation.validators import (
    validate_field,
    validate_email,
    validate_phone,
    validate_password,
    validate_polish_postal_code,
    validate_pesel,
    validate_nip,
    pesel_control_digit,
    nip_control_digit,
)
from modules.form_validation.presets import VALIDATION_RULES, get_preset
from modules.form_validation.engine import FormValidator

__all__ = [
    'FormValidator',
    'ValidationRule',
    'ValidationResult',
    'ErrorCode',
    'FormValidationException',
    'ConfigurationError',
    'RuleNotFoundError',
    'register_validator',
    'get_validator',
    'VALIDATOR_REGISTRY',
    'validate_field',
    'validate_email',
    'validate_phone',
    'validate_password',
    'validate_polish_postal_code',
    'validate_pesel',
    'validate_nip',
    'pesel_control_digit',
    'nip_control_digit',
    'VALIDATION_RULES',
    'get_preset',
]
