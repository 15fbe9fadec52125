"""
FormValidator - Main entry point for form validation.

Holds the field name -> rule bindings for one form and validates a whole
set of values against them in a single pass.
"""

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from modules.form_validation.core.base import ValidationResult, ValidationRule
from modules.form_validation.core.config_loader import FormConfigLoader, build_rule
from modules.form_validation.validators import (
    validate_field,
    validate_email,
    validate_phone,
    validate_password,
    validate_polish_postal_code,
    validate_pesel,
    validate_nip,
)
from shared.utils.logger import setup_logger, log_function_call

logger = setup_logger(__name__)


class FormValidator:
    """
    Rule registry and aggregate validator for a single form.

    Each field name is bound to at most one ValidationRule. Validation walks
    the registered fields (not the keys of the supplied values), so
    unregistered values are ignored and registered but absent fields are
    validated as None.

    Usage:
        validator = FormValidator()
        validator.add_field("name", ValidationRule(required=True, min_length=5))
        validator.add_field("email", ValidationRule(required=True))

        result = validator.validate({"name": "Jo", "email": ""})
        if not result.is_valid:
            for field_name, message in result.errors.items():
                print(f"{field_name}: {message}")
    """

    def __init__(self, locale: Optional[str] = None):
        """
        Initialize an empty validator.

        Args:
            locale: Message catalog locale ("pl", "en")
                    If None, uses VALIDATION_LOCALE from settings
        """
        self.locale = locale
        self._validations: Dict[str, ValidationRule] = {}

    @classmethod
    def from_config(
        cls,
        form_name: str,
        config_path: Optional[str] = None,
        loader: Optional[FormConfigLoader] = None
    ) -> "FormValidator":
        """
        Build a validator from a form defined in YAML configuration.

        Args:
            form_name: Form identifier under `forms:` in the config file
            config_path: Path to config file (ignored when loader is given)
            loader: Pre-built config loader

        Returns:
            FormValidator with every configured field registered

        Raises:
            ConfigurationError: If a field entry is invalid
        """
        log_function_call(logger, "FormValidator.from_config", form_name=form_name, config_path=config_path)

        loader = loader or FormConfigLoader(config_path)
        locale = loader.get_global_settings().get('locale')
        validator = cls(locale=locale)

        rules = loader.get_form_rules(form_name)
        if not rules:
            logger.warning(f"No fields configured for form '{form_name}'")

        for field_name, rule in rules.items():
            validator.add_field(field_name, rule)

        logger.info(f"Loaded form '{form_name}' with {len(rules)} fields")
        return validator

    def add_field(
        self,
        field_name: str,
        rule: Union[ValidationRule, Mapping[str, Any]]
    ) -> None:
        """
        Bind a rule to a field, replacing any existing binding.

        Args:
            field_name: Field name
            rule: ValidationRule, or a mapping of rule options (same keys
                  as a YAML field entry, plus a `custom` callable)

        Raises:
            ConfigurationError: If a mapping has unknown keys or invalid values
        """
        if isinstance(rule, Mapping):
            rule = build_rule(field_name, dict(rule), self.locale)

        if field_name in self._validations:
            logger.debug(f"Replacing rule for field '{field_name}'")

        self._validations[field_name] = rule

    def remove_field(self, field_name: str) -> None:
        """Remove a field's rule; does nothing if it is not registered"""
        self._validations.pop(field_name, None)

    def get_rule(self, field_name: str) -> Optional[ValidationRule]:
        return self._validations.get(field_name)

    @property
    def fields(self) -> Tuple[str, ...]:
        """Registered field names in registration order"""
        return tuple(self._validations)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._validations

    def __len__(self) -> int:
        return len(self._validations)

    def validate(self, values: Mapping[str, Any]) -> ValidationResult:
        """
        Validate values against every registered field.

        Args:
            values: Field name -> raw value

        Returns:
            ValidationResult with one message per failed field

        Example:
            result = validator.validate({"name": "John", "email": "john@example.com"})
        """
        errors: Dict[str, str] = {}

        for field_name, rule in self._validations.items():
            error = self.validate_field(values.get(field_name), rule)
            if error:
                errors[field_name] = error

        if errors:
            logger.debug(f"Validation failed for fields: {sorted(errors)}")

        return ValidationResult.from_errors(errors)

    def validate_field(self, value: Any, rule: ValidationRule) -> Optional[str]:
        """Validate a single value against a rule; see field_validators.validate_field"""
        return validate_field(value, rule, self.locale)

    # Domain validators using this form's locale

    def validate_email(self, email: str) -> Optional[str]:
        return validate_email(email, locale=self.locale)

    def validate_phone(self, phone: str) -> Optional[str]:
        return validate_phone(phone, locale=self.locale)

    def validate_password(self, password: str) -> Optional[str]:
        return validate_password(password, locale=self.locale)

    def validate_polish_postal_code(self, code: str) -> Optional[str]:
        return validate_polish_postal_code(code, locale=self.locale)

    def validate_pesel(self, pesel: str) -> Optional[str]:
        return validate_pesel(pesel, locale=self.locale)

    def validate_nip(self, nip: str) -> Optional[str]:
        return validate_nip(nip, locale=self.locale)
