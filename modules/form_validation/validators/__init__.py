"""
Validators module.

Contains all built-in validators organized by category:
- field_validators: Rule pipeline for a single field value
- domain_validators: Email, phone, password and postal code checks
- checksum_validators: PESEL and NIP checksum algorithms

Domain validators are registered by name via decorators on import.
"""

from modules.form_validation.validators.field_validators import validate_field
from modules.form_validation.validators.domain_validators import (
    validate_email,
    validate_phone,
    validate_password,
    validate_polish_postal_code,
)
from modules.form_validation.validators.checksum_validators import (
    validate_pesel,
    validate_nip,
    pesel_control_digit,
    nip_control_digit,
)

__all__ = [
    'validate_field',
    'validate_email',
    'validate_phone',
    'validate_password',
    'validate_polish_postal_code',
    'validate_pesel',
    'validate_nip',
    'pesel_control_digit',
    'nip_control_digit',
]
