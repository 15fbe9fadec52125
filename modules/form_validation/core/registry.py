"""
Domain validator registry.

Provides decorator-based registration for domain validators so form
configuration can refer to them by name ("pesel", "nip", ...).
"""

from typing import Any, Callable, Dict, Optional

from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

DomainValidator = Callable[..., Optional[str]]

# Registry of all named domain validators
VALIDATOR_REGISTRY: Dict[str, DomainValidator] = {}


def register_validator(name: str):
    """
    Decorator to register a domain validator under a name.

    Usage:
        @register_validator("pesel")
        def validate_pesel(pesel: str, locale: Optional[str] = None) -> Optional[str]:
            ...

    Args:
        name: Unique name for the validator (used in configuration)

    Returns:
        Decorator function
    """
    def decorator(func: DomainValidator) -> DomainValidator:
        if name in VALIDATOR_REGISTRY and VALIDATOR_REGISTRY[name] is not func:
            logger.warning(
                f"Validator '{name}' is already registered. "
                f"Overwriting with {func.__name__}"
            )

        VALIDATOR_REGISTRY[name] = func
        logger.debug(f"Registered validator: {name} -> {func.__name__}")
        return func

    return decorator


def get_validator(name: str) -> Optional[DomainValidator]:
    """
    Get validator function by name from registry.

    Args:
        name: Validator name

    Returns:
        Validator function or None if not found
    """
    return VALIDATOR_REGISTRY.get(name)


def list_validators() -> Dict[str, str]:
    """
    List all registered validators.

    Returns:
        Dictionary mapping validator names to function names
    """
    return {
        name: func.__name__
        for name, func in VALIDATOR_REGISTRY.items()
    }


def is_registered(name: str) -> bool:
    return name in VALIDATOR_REGISTRY


def bind_validator(validator: DomainValidator, locale: Optional[str] = None) -> Callable[[Any], Optional[str]]:
    """
    Adapt a domain validator for use as a rule's custom check.

    The field value is converted with str() before validation, so numeric
    input such as 123456789 is checked like "123456789".

    Args:
        validator: Domain validator taking (value, locale=...)
        locale: Message locale passed through on every call

    Returns:
        Single-argument check returning an error message or None
    """
    def custom(value: Any) -> Optional[str]:
        return validator(str(value), locale=locale)

    custom.__name__ = getattr(validator, '__name__', 'custom')
    return custom
