"""
Custom exceptions for form validation module.

Validation failures are never raised; these cover configuration problems only.
"""


class FormValidationException(Exception):
    """Base exception for form validation module."""
    pass


class ConfigurationError(FormValidationException):
    """Exception raised for invalid form configuration."""
    pass


class RuleNotFoundError(ConfigurationError):
    """Exception raised when a named preset or validator does not exist."""
    pass
