"""
Tests for PESEL and NIP checksum validation.
"""

import random

import pytest

from modules.form_validation import (
    validate_pesel,
    validate_nip,
    pesel_control_digit,
    nip_control_digit,
)

PESEL_FORMAT_MESSAGE = "PESEL musi mieć 11 cyfr"
PESEL_CHECKSUM_MESSAGE = "Nieprawidłowy numer PESEL"
NIP_FORMAT_MESSAGE = "NIP musi mieć 10 cyfr"
NIP_CHECKSUM_MESSAGE = "Nieprawidłowy numer NIP"


def _random_digits(rng: random.Random, count: int) -> str:
    return "".join(rng.choice("0123456789") for _ in range(count))


def test_valid_pesel():
    assert validate_pesel("44051401359") is None


def test_pesel_checksum_mismatch():
    assert validate_pesel("12345678901") == PESEL_CHECKSUM_MESSAGE
    assert validate_pesel("44051401358") == PESEL_CHECKSUM_MESSAGE


@pytest.mark.parametrize("pesel", [
    "123",
    "",
    "4405140135",
    "440514013590",
    "4405140135a",
    " 44051401359",
    "44051401359\n",
    "4405-140135",
])
def test_pesel_format(pesel):
    assert validate_pesel(pesel) == PESEL_FORMAT_MESSAGE


def test_pesel_control_digit():
    assert pesel_control_digit("4405140135") == 9
    assert pesel_control_digit("1234567890") == 3


def test_pesel_round_trip():
    rng = random.Random(1234)
    for _ in range(500):
        prefix = _random_digits(rng, 10)
        pesel = prefix + str(pesel_control_digit(prefix))
        assert validate_pesel(pesel) is None, pesel


def test_pesel_wrong_control_digit_always_rejected():
    prefix = "4405140135"
    for digit in "012345678":
        assert validate_pesel(prefix + digit) == PESEL_CHECKSUM_MESSAGE


def test_valid_nip():
    assert validate_nip("1234563218") is None


def test_nip_checksum_mismatch():
    assert validate_nip("1234567890") == NIP_CHECKSUM_MESSAGE


@pytest.mark.parametrize("nip", [
    "123",
    "",
    "123456321",
    "12345632180",
    "123-456-32-18",
    "123456321x",
])
def test_nip_format(nip):
    assert validate_nip(nip) == NIP_FORMAT_MESSAGE


def test_nip_control_digit():
    assert nip_control_digit("123456321") == 8
    assert nip_control_digit("123456789") == 10


def test_nip_round_trip():
    rng = random.Random(4321)
    checked = 0
    while checked < 500:
        prefix = _random_digits(rng, 9)
        control = nip_control_digit(prefix)
        if control == 10:
            continue
        assert validate_nip(prefix + str(control)) is None, prefix
        checked += 1


def test_nip_control_ten_has_no_valid_number():
    # 2 * 5 = 10, so this prefix yields a control value of 10
    prefix = "020000000"
    assert nip_control_digit(prefix) == 10

    for digit in "0123456789":
        assert validate_nip(prefix + digit) == NIP_CHECKSUM_MESSAGE


def test_english_messages():
    assert validate_pesel("123", locale="en") == "PESEL must have 11 digits"
    assert validate_pesel("12345678901", locale="en") == "Invalid PESEL number"
    assert validate_nip("123", locale="en") == "NIP must have 10 digits"
