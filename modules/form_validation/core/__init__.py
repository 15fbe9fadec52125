"""
Validation core module.

Contains base data models, exceptions and the domain validator registry.
"""

from modules.form_validation.core.base import ValidationRule, ValidationResult, ErrorCode
from modules.form_validation.core.exceptions import (
    FormValidationException,
    ConfigurationError,
    RuleNotFoundError,
)
from modules.form_validation.core.registry import VALIDATOR_REGISTRY, register_validator, get_validator

__all__ = [
    'ValidationRule',
    'ValidationResult',
    'ErrorCode',
    'FormValidationException',
    'ConfigurationError',
    'RuleNotFoundError',
    'VALIDATOR_REGISTRY',
    'register_validator',
    'get_validator',
]
