"""
Field validators module.

Evaluates a single value against a single ValidationRule. Checks run in a
fixed order and the first failure wins:
- required: value must not be None or an empty string
- min_length / max_length: length of the value's string form
- pattern: regex search over the value's string form
- custom: caller-supplied check, called with the original value
"""

import re
from typing import Any, Optional

from modules.form_validation.core.base import ErrorCode, ValidationRule
from modules.form_validation.messages import get_message


def is_missing(value: Any) -> bool:
    """Check if value counts as absent (None or empty string)"""
    return value is None or value == ""


def is_required_missing(value: Any, rule: ValidationRule) -> bool:
    return bool(rule.required and is_missing(value))


def check_length(
    value: str,
    rule: ValidationRule,
    locale: Optional[str] = None
) -> Optional[str]:
    """
    Validate string length against the rule bounds.

    A bound of None or 0 disables that side of the check.
    """
    if rule.min_length and len(value) < rule.min_length:
        return get_message(ErrorCode.MIN_LENGTH, locale, min_length=rule.min_length)

    if rule.max_length and len(value) > rule.max_length:
        return get_message(ErrorCode.MAX_LENGTH, locale, max_length=rule.max_length)

    return None


def check_pattern(
    value: str,
    rule: ValidationRule,
    locale: Optional[str] = None
) -> Optional[str]:
    """
    Validate value against the rule's regex pattern.

    The pattern is searched, not anchored; anchor it explicitly with ^...$
    to require a full match. An invalid pattern string is reported as a
    format failure.
    """
    if not rule.pattern:
        return None

    try:
        matches = re.search(rule.pattern, value) is not None
    except re.error:
        matches = False

    return None if matches else get_message(ErrorCode.INVALID_FORMAT, locale)


def run_custom(value: Any, rule: ValidationRule) -> Optional[str]:
    """
    Run the caller-supplied check.

    Exceptions raised by the check propagate unchanged.
    """
    if rule.custom is None:
        return None

    return rule.custom(value) or None


def validate_field(
    value: Any,
    rule: ValidationRule,
    locale: Optional[str] = None
) -> Optional[str]:
    """
    Validate one value against one rule.

    Args:
        value: Raw field value (any type)
        rule: Rule to apply
        locale: Message catalog locale; settings default when None

    Returns:
        Error message, or None if the value is valid

    Example:
        >>> validate_field("test", ValidationRule(min_length=5))
        'Minimalna długość to 5 znaków'
        >>> validate_field(None, ValidationRule(min_length=5)) is None
        True
    """
    if is_required_missing(value, rule):
        return get_message(ErrorCode.REQUIRED, locale)

    # Absent optional values are always valid
    if is_missing(value):
        return None

    str_value = str(value)

    return (
        check_length(str_value, rule, locale)
        or check_pattern(str_value, rule, locale)
        or run_custom(value, rule)
    )
