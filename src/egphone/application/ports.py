"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from egphone.application.dto import ParseFailure
from egphone.domain import ParsedPhoneNumber


class PhoneNumberParser(Protocol):
    """Parses phone strings and checks them against an international numbering database."""

    def parse(self, phone: str) -> ParsedPhoneNumber | ParseFailure:
        """Return the structured number, or ParseFailure. Must not raise for string input."""
        ...

    def is_generally_valid(self, phone: str) -> bool:
        """Return True if the number is valid for its region under the generic rules."""
        ...
