"""
Tests for FormValidator: field registration and aggregate validation.
"""

import pytest

from modules.form_validation import (
    ConfigurationError,
    FormValidator,
    ValidationRule,
    ValidationResult,
    validate_pesel,
)


@pytest.fixture
def validator():
    return FormValidator()


def test_valid_form(validator):
    validator.add_field("name", ValidationRule(required=True, min_length=3))
    validator.add_field("email", ValidationRule(required=True))

    result = validator.validate({"name": "John", "email": "john@example.com"})

    assert result.is_valid is True
    assert result.errors == {}


def test_invalid_form_reports_each_field(validator):
    validator.add_field("name", ValidationRule(required=True, min_length=5))
    validator.add_field("email", ValidationRule(required=True))

    result = validator.validate({"name": "Jo", "email": ""})

    assert result.is_valid is False
    assert result.errors == {
        "name": "Minimalna długość to 5 znaków",
        "email": "To pole jest wymagane",
    }


def test_unregistered_values_are_ignored(validator):
    validator.add_field("name", ValidationRule(required=True))

    result = validator.validate({"name": "Jan", "extra": "", "other": None})

    assert result.is_valid is True
    assert "extra" not in result.errors


def test_registered_field_absent_from_values(validator):
    validator.add_field("required_field", ValidationRule(required=True))
    validator.add_field("optional_field", ValidationRule(min_length=10))

    result = validator.validate({})

    assert result.errors == {"required_field": "To pole jest wymagane"}


def test_add_field_replaces_existing_rule(validator):
    validator.add_field("name", ValidationRule(required=True))
    validator.add_field("name", ValidationRule(min_length=2))

    assert len(validator) == 1
    assert validator.get_rule("name") == ValidationRule(min_length=2)
    assert validator.validate({}).is_valid is True


def test_add_and_remove_field(validator):
    validator.add_field("test", ValidationRule(required=True))
    assert validator.validate({"test": ""}).is_valid is False

    validator.remove_field("test")
    assert validator.validate({"test": ""}).is_valid is True
    assert "test" not in validator


def test_remove_absent_field_is_noop(validator):
    validator.add_field("name", ValidationRule(required=True))
    validator.remove_field("missing")
    assert validator.fields == ("name",)


def test_fields_keep_registration_order(validator):
    for name in ("c", "a", "b"):
        validator.add_field(name, ValidationRule())
    assert validator.fields == ("c", "a", "b")


def test_add_field_accepts_rule_options_mapping(validator):
    validator.add_field("name", {"required": True, "max_length": 3})

    assert validator.get_rule("name") == ValidationRule(required=True, max_length=3)
    assert validator.validate({"name": "Anna"}).errors == {"name": "Maksymalna długość to 3 znaków"}


def test_validate_is_idempotent(validator):
    validator.add_field("name", ValidationRule(required=True, min_length=5))
    validator.add_field("pesel", ValidationRule(required=True, custom=validate_pesel))
    values = {"name": "Jo", "pesel": "12345678901"}

    first = validator.validate(values)
    second = validator.validate(values)

    assert first == second
    assert first is not second
    assert first.errors is not second.errors


def test_is_valid_matches_errors(validator):
    validator.add_field("a", ValidationRule(required=True))
    validator.add_field("b", ValidationRule(pattern=r"^\d+$"))

    for values in ({}, {"a": "x"}, {"a": "x", "b": "1"}, {"a": "x", "b": "y"}):
        result = validator.validate(values)
        assert result.is_valid == (not result.errors)


def test_custom_domain_validator(validator):
    validator.add_field("pesel", ValidationRule(required=True, custom=validate_pesel))

    assert validator.validate({"pesel": "44051401359"}).is_valid is True
    assert validator.validate({"pesel": "123"}).errors == {"pesel": "PESEL musi mieć 11 cyfr"}


def test_custom_exception_propagates_from_validate(validator):
    def broken(value):
        raise RuntimeError("check failed to run")

    validator.add_field("field", ValidationRule(custom=broken))

    with pytest.raises(RuntimeError):
        validator.validate({"field": "value"})


def test_result_to_dict(validator):
    validator.add_field("email", ValidationRule(required=True))
    result = validator.validate({})

    assert isinstance(result, ValidationResult)
    assert result.to_dict() == {"is_valid": False, "errors": {"email": "To pole jest wymagane"}}
    assert result.error_for("email") == "To pole jest wymagane"
    assert result.error_for("name") is None


def test_locale_applies_to_fields_and_domain_methods():
    validator = FormValidator(locale="en")
    validator.add_field("name", ValidationRule(required=True))

    assert validator.validate({}).errors == {"name": "This field is required"}
    assert validator.validate_pesel("123") == "PESEL must have 11 digits"
    assert validator.validate_nip("1234567890") == "Invalid NIP number"


def test_domain_validator_methods(validator):
    assert validator.validate_field("test", ValidationRule(min_length=5)) == "Minimalna długość to 5 znaków"
    assert validator.validate_email("test@example.com") is None
    assert validator.validate_phone("123 456 789") is None
    assert validator.validate_password("StrongPass123") is None
    assert validator.validate_polish_postal_code("00-001") is None
    assert validator.validate_pesel("44051401359") is None
    assert validator.validate_nip("1234563218") is None


def test_add_field_mapping_with_unknown_option(validator):
    with pytest.raises(ConfigurationError, match="minLength"):
        validator.add_field("name", {"required": True, "minLength": 5})

    assert "name" not in validator


def test_add_field_mapping_with_custom_and_preset(validator):
    validator.add_field("code", {"pattern": r"^\d+$", "custom": lambda value: None if value != "000" else "zero"})
    validator.add_field("pesel", {"preset": "pesel", "required": False})

    assert validator.validate({"code": "000"}).errors == {"code": "zero"}
    assert validator.validate({"code": "12a"}).errors == {"code": "Nieprawidłowy format"}
    assert validator.validate({"pesel": "12345678901"}).errors == {"pesel": "Nieprawidłowy numer PESEL"}
