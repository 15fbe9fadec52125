"""
Base data models for the form validation system.

This module provides the foundation shared by every validator:
- ValidationRule: Immutable option bag describing the checks for one field
- ValidationResult: Outcome of validating a whole form
- ErrorCode: Error taxonomy, used as message catalog keys
"""

import re
from dataclasses import dataclass, field as dataclass_field, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


CustomCheck = Callable[[Any], Optional[str]]


class ErrorCode(str, Enum):
    """Error codes for every failure the engine can report"""
    # Generic rule checks
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    INVALID_FORMAT = "invalid_format"

    # Domain format failures
    EMAIL_INVALID = "email_invalid"
    PHONE_INVALID = "phone_invalid"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_NO_LOWERCASE = "password_no_lowercase"
    PASSWORD_NO_UPPERCASE = "password_no_uppercase"
    PASSWORD_NO_DIGIT = "password_no_digit"
    POSTAL_CODE_INVALID = "postal_code_invalid"
    PESEL_FORMAT = "pesel_format"
    NIP_FORMAT = "nip_format"

    # Domain checksum failures
    PESEL_CHECKSUM = "pesel_checksum"
    NIP_CHECKSUM = "nip_checksum"


@dataclass(frozen=True)
class ValidationRule:
    """
    Set of constraints bound to a single field.

    All fields are optional; a rule with no checks accepts every value.
    Checks run in a fixed order: required -> min_length -> max_length
    -> pattern -> custom.

    Example:
        rule = ValidationRule(required=True, min_length=3, pattern=r"^[A-Za-z]+$")
    """
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Union[str, re.Pattern]] = None
    custom: Optional[CustomCheck] = None

    def merge(self, **overrides: Any) -> "ValidationRule":
        """Return a copy of this rule with the given fields replaced"""
        return replace(self, **overrides)

    def has_checks(self) -> bool:
        return bool(
            self.required
            or self.min_length
            or self.max_length
            or self.pattern
            or self.custom
        )


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validating a set of values against registered rules.

    `errors` maps field name to its (single) error message and contains
    only the fields that failed.
    """
    is_valid: bool
    errors: Dict[str, str] = dataclass_field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=dict(errors))

    def error_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'is_valid': self.is_valid,
            'errors': dict(self.errors),
        }
