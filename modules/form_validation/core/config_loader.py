"""
Form configuration loader.

Loads form definitions from YAML configuration files and turns field
entries into ValidationRule objects.
"""

import re
import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path

from modules.form_validation.core.base import ValidationRule
from modules.form_validation.core.exceptions import ConfigurationError, RuleNotFoundError
from modules.form_validation.core.registry import bind_validator, get_validator, list_validators
from modules.form_validation.presets import get_preset
from shared.utils.config import settings
from shared.utils.logger import setup_logger, log_error

logger = setup_logger(__name__)

RULE_KEYS = {"preset", "validator", "required", "min_length", "max_length", "pattern", "custom"}


class FormConfigLoader:
    """
    Loads form configuration from YAML files.

    Supports:
    - Form definitions (field name -> rule options)
    - Global settings (locale)

    Example file:
        global:
          locale: pl
        forms:
          registration:
            fields:
              name: {required: true, min_length: 3}
              email: {preset: email}
              pesel: {required: true, validator: pesel}
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to form configuration YAML file
                        If None, uses VALIDATION_CONFIG_PATH or
                        the default: config/validation/forms.yaml
        """
        if config_path is None:
            config_path = settings.VALIDATION_CONFIG_PATH

        if config_path is None:
            base_dir = Path(__file__).parent.parent.parent.parent
            config_path = base_dir / "config" / "validation" / "forms.yaml"

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
            ConfigurationError: If the document is not a mapping
        """
        if not self.config_path.exists():
            logger.warning(
                f"Form config file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            log_error(logger, e, f"Failed to parse form config {self.config_path}")
            raise

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Form config {self.config_path} must be a mapping, got {type(config).__name__}"
            )

        self._config = config
        logger.info(f"Loaded form config from: {self.config_path}")
        return self._config

    def get_form_fields(self, form_name: str) -> Dict[str, Any]:
        """
        Get raw field configuration for a form.

        Args:
            form_name: Form identifier

        Returns:
            Dictionary mapping field name to its rule options

        Raises:
            ConfigurationError: If the form or its fields are not mappings
        """
        form_config = self._get_forms().get(form_name) or {}
        if not isinstance(form_config, dict):
            raise ConfigurationError(
                f"Form '{form_name}': expected a mapping, got {type(form_config).__name__}"
            )

        fields = form_config.get('fields') or {}
        if not isinstance(fields, dict):
            raise ConfigurationError(
                f"Form '{form_name}': 'fields' must be a mapping of field name to rule options, "
                f"got {type(fields).__name__}"
            )
        return fields

    def get_form_rules(self, form_name: str) -> Dict[str, ValidationRule]:
        """
        Get ValidationRule objects for every field of a form.

        Raises:
            ConfigurationError: If a field entry is invalid
        """
        locale = self.get_global_settings().get('locale')
        return {
            field_name: build_rule(field_name, field_config, locale)
            for field_name, field_config in self.get_form_fields(form_name).items()
        }

    def list_forms(self) -> List[str]:
        return list(self._get_forms().keys())

    def _get_forms(self) -> Dict[str, Any]:
        if self._config is None:
            self.load()

        forms = self._config.get('forms') or {}
        if not isinstance(forms, dict):
            raise ConfigurationError(
                f"'forms' in {self.config_path} must be a mapping of form name to definition, "
                f"got {type(forms).__name__}"
            )
        return forms

    def get_global_settings(self) -> Dict[str, Any]:
        """
        Get global form settings.

        Returns:
            Global settings dictionary
        """
        if self._config is None:
            self.load()

        return self._config.get('global', {}) or {}

    def _get_default_config(self) -> Dict[str, Any]:
        return {
            'global': {
                'locale': settings.VALIDATION_LOCALE,
            },
            'forms': {}
        }

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()


def _optional_int(field_name: str, key: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(
            f"Field '{field_name}': '{key}' must be a non-negative integer, got {value!r}"
        )
    return value


def build_rule(
    field_name: str,
    field_config: Optional[Dict[str, Any]],
    locale: Optional[str] = None
) -> ValidationRule:
    """
    Build a ValidationRule from a field's configuration entry.

    `preset` selects a starting rule, `validator` names a registered domain
    validator used as the custom check (taking precedence over a `custom`
    callable), and the remaining keys override the preset.

    Args:
        field_name: Field name (used in error messages)
        field_config: Rule options; None means no checks
        locale: Message locale for preset and named validators

    Returns:
        ValidationRule

    Raises:
        ConfigurationError: If the entry has unknown keys, bad values or an invalid regex
        RuleNotFoundError: If the preset or validator name is unknown
    """
    field_config = field_config or {}
    if not isinstance(field_config, dict):
        raise ConfigurationError(
            f"Field '{field_name}': expected a mapping of rule options, got {type(field_config).__name__}"
        )

    unknown = set(field_config) - RULE_KEYS
    if unknown:
        raise ConfigurationError(
            f"Field '{field_name}': unknown rule options {sorted(unknown)}"
        )

    rule = ValidationRule()
    if 'preset' in field_config:
        rule = get_preset(field_config['preset'], locale)

    overrides: Dict[str, Any] = {}

    if 'required' in field_config:
        overrides['required'] = bool(field_config['required'])

    for key in ('min_length', 'max_length'):
        if key in field_config:
            overrides[key] = _optional_int(field_name, key, field_config[key])

    if 'pattern' in field_config:
        pattern = field_config['pattern']
        try:
            overrides['pattern'] = re.compile(pattern) if pattern else None
        except (re.error, TypeError) as e:
            raise ConfigurationError(
                f"Field '{field_name}': invalid pattern {pattern!r}: {e}"
            ) from e

    if 'custom' in field_config:
        custom = field_config['custom']
        if custom is not None and not callable(custom):
            raise ConfigurationError(
                f"Field '{field_name}': 'custom' must be callable, got {type(custom).__name__}"
            )
        overrides['custom'] = custom

    if 'validator' in field_config:
        validator_name = field_config['validator']
        validator = get_validator(validator_name)
        if validator is None:
            raise RuleNotFoundError(
                f"Field '{field_name}': validator '{validator_name}' not found in registry. "
                f"Available: {sorted(list_validators())}"
            )
        overrides['custom'] = bind_validator(validator, locale)

    return rule.merge(**overrides) if overrides else rule


def load_form_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Convenience function to load form configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration dictionary
    """
    loader = FormConfigLoader(config_path)
    return loader.load()
