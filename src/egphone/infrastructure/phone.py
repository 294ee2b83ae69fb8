"""PhoneNumberParser backed by the phonenumbers library (libphonenumber metadata)."""

import logging

import phonenumbers

from egphone.application.dto import ParseFailure
from egphone.domain import ParsedPhoneNumber

logger = logging.getLogger(__name__)


class PhonenumbersParser:
    """Implements the PhoneNumberParser port.

    Use default_region when input may lack a leading + (e.g. "010 1234 5678"
    with default_region "EG"). If the number already includes a country code,
    default_region is ignored. With None, only international input parses.
    """

    def __init__(self, default_region: str | None = None) -> None:
        self._default_region = default_region

    def _parse(self, phone: str) -> phonenumbers.PhoneNumber:
        return phonenumbers.parse(str(phone).strip(), self._default_region)

    def parse(self, phone: str) -> ParsedPhoneNumber | ParseFailure:
        try:
            parsed = self._parse(phone)
        except phonenumbers.NumberParseException as e:
            return ParseFailure(reason=str(e))
        # Calling codes shared by several regions resolve only for valid numbers.
        country = phonenumbers.region_code_for_number(parsed)
        logger.debug("Parsed phone: country_code=%s region=%s", parsed.country_code, country)
        return ParsedPhoneNumber(
            country=country,
            national_number=phonenumbers.national_significant_number(parsed),
        )

    def is_generally_valid(self, phone: str) -> bool:
        try:
            parsed = self._parse(phone)
        except phonenumbers.NumberParseException:
            return False
        return phonenumbers.is_valid_number(parsed)
