"""Domain layer: value objects and numbering-plan rules. No dependencies on outer layers."""

from egphone.domain.entities import (
    EGYPT_CALLING_CODE_PREFIX,
    EGYPT_REGION,
    KIND_ALEXANDRIA,
    KIND_CAIRO,
    KIND_MOBILE,
    KIND_OTHER_CITY,
    ParsedPhoneNumber,
)
from egphone.domain.numbering_plan import (
    classify_national_number,
    clean_phone,
    is_valid_national_number,
    validate_without_parser,
)

__all__ = [
    "EGYPT_CALLING_CODE_PREFIX",
    "EGYPT_REGION",
    "KIND_ALEXANDRIA",
    "KIND_CAIRO",
    "KIND_MOBILE",
    "KIND_OTHER_CITY",
    "ParsedPhoneNumber",
    "classify_national_number",
    "clean_phone",
    "is_valid_national_number",
    "validate_without_parser",
]
