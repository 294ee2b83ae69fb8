"""Application layer: validator use case, ports, and DTOs. Depends only on domain."""

from egphone.application.dto import ParseFailure
from egphone.application.phone_validator import PhoneValidator
from egphone.application.ports import PhoneNumberParser

__all__ = [
    "ParseFailure",
    "PhoneNumberParser",
    "PhoneValidator",
]
