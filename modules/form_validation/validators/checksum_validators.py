"""
Checksum validators for Polish identification numbers.

- PESEL: 11-digit national identification number
- NIP: 10-digit tax identification number

Both use a weighted sum over the leading digits to compute a control digit
that must match the last digit. The format check always runs first, so the
checksum step only ever sees input of the exact expected length.
"""

import re
from typing import List, Optional, Sequence

from modules.form_validation.core.base import ErrorCode
from modules.form_validation.core.registry import register_validator
from modules.form_validation.messages import get_message

PESEL_PATTERN = re.compile(r"\d{11}", re.ASCII)
PESEL_WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)

NIP_PATTERN = re.compile(r"\d{10}", re.ASCII)
NIP_WEIGHTS = (6, 5, 7, 2, 3, 4, 5, 6, 7)


def _to_digits(value: str) -> List[int]:
    return [int(char) for char in value]


def weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Sum of digit * weight over the length of the weights"""
    return sum(digit * weight for digit, weight in zip(digits, weights))


def pesel_control_digit(prefix: str) -> int:
    """
    Compute the PESEL control digit for the first 10 digits.

    Args:
        prefix: String starting with at least 10 digits (extra characters are ignored)

    Returns:
        Control digit 0-9

    Example:
        >>> pesel_control_digit("4405140135")
        9
    """
    total = weighted_sum(_to_digits(prefix[:10]), PESEL_WEIGHTS)
    return (10 - total % 10) % 10


def nip_control_digit(prefix: str) -> int:
    """
    Compute the NIP control value for the first 9 digits.

    The result is sum mod 11, so it can be 10; such a prefix has no
    valid NIP and any 10th digit is rejected as a checksum mismatch.

    Example:
        >>> nip_control_digit("123456321")
        8
    """
    total = weighted_sum(_to_digits(prefix[:9]), NIP_WEIGHTS)
    return total % 11


@register_validator("pesel")
def validate_pesel(pesel: str, locale: Optional[str] = None) -> Optional[str]:
    """
    Validate a PESEL number.

    Args:
        pesel: Candidate PESEL
        locale: Message catalog locale

    Returns:
        Format message if not exactly 11 digits, checksum message if the
        control digit does not match, None if valid
    """
    if not PESEL_PATTERN.fullmatch(pesel):
        return get_message(ErrorCode.PESEL_FORMAT, locale)

    if pesel_control_digit(pesel) != int(pesel[10]):
        return get_message(ErrorCode.PESEL_CHECKSUM, locale)

    return None


@register_validator("nip")
def validate_nip(nip: str, locale: Optional[str] = None) -> Optional[str]:
    """
    Validate a NIP number.

    Args:
        nip: Candidate NIP, digits only (no dashes)
        locale: Message catalog locale

    Returns:
        Format message if not exactly 10 digits, checksum message if the
        control value does not match, None if valid
    """
    if not NIP_PATTERN.fullmatch(nip):
        return get_message(ErrorCode.NIP_FORMAT, locale)

    if nip_control_digit(nip) != int(nip[9]):
        return get_message(ErrorCode.NIP_CHECKSUM, locale)

    return None
