"""Public entry point: is_valid_phone, backed by a shared default validator.

The default validator never reads the environment: no default region, so only
international input is parsed. For a configured region, call
build_validator(Settings(...)) or build_validator(load_settings()) explicitly.
"""

from egphone.application import PhoneValidator
from egphone.config import Settings
from egphone.infrastructure import PhonenumbersParser

_default_validator: PhoneValidator | None = None


def build_validator(settings: Settings | None = None) -> PhoneValidator:
    """Wire a PhoneValidator with the phonenumbers adapter. No settings means no default region."""
    settings = settings if settings is not None else Settings()
    return PhoneValidator(PhonenumbersParser(default_region=settings.default_region))


def _get_validator() -> PhoneValidator:
    global _default_validator
    if _default_validator is None:
        _default_validator = build_validator()
    return _default_validator


def is_valid_phone(phone: str | None) -> bool:
    """Return True if phone is a plausible number (strict for Egypt, generic elsewhere)."""
    return _get_validator().is_valid(phone)
