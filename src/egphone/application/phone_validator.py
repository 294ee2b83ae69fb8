"""Phone validation: strict rules for Egypt, generic parser check for everything else."""

import logging

from egphone.application.dto import ParseFailure
from egphone.application.ports import PhoneNumberParser
from egphone.domain import is_valid_national_number, validate_without_parser

logger = logging.getLogger(__name__)


class PhoneValidator:
    """Stateless predicate over phone strings. Safe to share between threads."""

    def __init__(self, parser: PhoneNumberParser) -> None:
        self._parser = parser

    def is_valid(self, phone: str | None) -> bool:
        """Return True if phone looks like a real number.

        Egyptian numbers must match the national plan (mobile or landline with exact
        length); other regions use the parser's generic check. When the parser
        cannot read the input, fall back to matching common Egyptian formats by hand.
        """
        if not phone:
            return False
        phone = str(phone)

        result = self._parser.parse(phone)
        if isinstance(result, ParseFailure):
            logger.error("Phone parsing error: %s", result.reason)
            return validate_without_parser(phone)

        if not result.is_egyptian:
            return self._parser.is_generally_valid(phone)

        return is_valid_national_number(result.national_number)
