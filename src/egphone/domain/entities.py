"""Domain value objects: ParsedPhoneNumber and Egyptian numbering-plan constants."""

from dataclasses import dataclass

# Region and calling code handled by the strict rules.
EGYPT_REGION = "EG"
EGYPT_CALLING_CODE_PREFIX = "+20"

# Trunk digit dialed domestically, dropped after the country code.
TRUNK_PREFIX = "0"

KIND_MOBILE = "mobile"
KIND_CAIRO = "cairo_landline"
KIND_ALEXANDRIA = "alexandria_landline"
KIND_OTHER_CITY = "other_city_landline"


@dataclass(frozen=True)
class ParsedPhoneNumber:
    """
    Structured result of parsing a phone string.
    country is an ISO 3166 alpha-2 region code, or None when the parser cannot tell.
    national_number holds digits only: no country code, no trunk zero.
    """

    country: str | None
    national_number: str

    def __post_init__(self):
        object.__setattr__(self, "national_number", (self.national_number or "").strip())

    @property
    def is_egyptian(self) -> bool:
        return self.country == EGYPT_REGION
