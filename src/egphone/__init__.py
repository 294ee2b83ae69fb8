"""
egphone: phone validation with strict Egyptian numbering-plan rules.

- domain: ParsedPhoneNumber, Egyptian plan rules, parser-free fallback. No outer dependencies.
- application: use case (PhoneValidator), ports (PhoneNumberParser), DTOs (ParseFailure).
- infrastructure: adapters (PhonenumbersParser).
"""

from egphone.application import ParseFailure, PhoneNumberParser, PhoneValidator
from egphone.config import Settings, load_settings
from egphone.domain import ParsedPhoneNumber, classify_national_number, validate_without_parser
from egphone.infrastructure import PhonenumbersParser
from egphone.validation import build_validator, is_valid_phone

__all__ = [
    "ParseFailure",
    "ParsedPhoneNumber",
    "PhoneNumberParser",
    "PhoneValidator",
    "PhonenumbersParser",
    "Settings",
    "build_validator",
    "classify_national_number",
    "is_valid_phone",
    "load_settings",
    "validate_without_parser",
]
