"""Boolean predicates for common value checks."""

import math
import re
from typing import Any, Callable, Optional, Union
from urllib.parse import urlparse

from modules.form_validation.validators.domain_validators import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    normalize_phone,
)


def required(value: Any) -> bool:
    return value is not None and value != ""


def email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def phone(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(normalize_phone(value)) is not None


def url(value: str) -> bool:
    """
    Check if value parses as an absolute URL.

    Example:
        >>> url("https://example.com/path")
        True
        >>> url("example.com")
        False
    """
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def _to_number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def number(value: Any) -> bool:
    """Check if value converts to a finite number"""
    converted = _to_number(value)
    return converted is not None and math.isfinite(converted)


def integer(value: Any) -> bool:
    converted = _to_number(value)
    return converted is not None and math.isfinite(converted) and converted.is_integer()


def positive(value: Any) -> bool:
    converted = _to_number(value)
    return converted is not None and converted > 0


def min_value(minimum: float) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        converted = _to_number(value)
        return converted is not None and converted >= minimum
    return check


def max_value(maximum: float) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        converted = _to_number(value)
        return converted is not None and converted <= maximum
    return check


def length(minimum: int, maximum: Optional[int] = None) -> Callable[[str], bool]:
    """
    Build a length predicate.

    A falsy maximum means no upper bound.

    Example:
        >>> length(2, 4)("abc")
        True
    """
    def check(value: str) -> bool:
        size = len(value)
        if maximum:
            return minimum <= size <= maximum
        return size >= minimum
    return check


def pattern(regex: Union[str, re.Pattern]) -> Callable[[str], bool]:
    compiled = re.compile(regex)

    def check(value: str) -> bool:
        return compiled.search(value) is not None
    return check
