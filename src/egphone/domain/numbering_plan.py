"""Egyptian numbering plan: prefix and fixed-length rules, plus parser-free fallback.

Mobile:      1[0125] + 8 digits        (national significant number, 10 digits)
Cairo:       02 + 8 digits             (10 digits with trunk zero)
Alexandria:  03 + 7 digits             (9 digits with trunk zero)
Other city:  0[4-9] + 7 digits         (9 digits with trunk zero)

Landline rules restore a missing trunk zero, so the "+20" fallback accepts the
zero-less remainder ("+20212345678") as well as "+200212345678".
"""

from egphone.domain.entities import (
    EGYPT_CALLING_CODE_PREFIX,
    KIND_ALEXANDRIA,
    KIND_CAIRO,
    KIND_MOBILE,
    KIND_OTHER_CITY,
    TRUNK_PREFIX,
)

MOBILE_OPERATOR_DIGITS = "0125"
OTHER_CITY_AREA_DIGITS = "456789"

# Characters dropped before manual matching (whitespace is handled separately).
_SEPARATORS = "-()"


def _is_digits(value: str) -> bool:
    # str.isdigit alone accepts superscripts and other non-ASCII digits.
    return value.isascii() and value.isdigit()


def is_mobile(number: str) -> bool:
    """National significant number of a mobile line: 1[0125] followed by 8 digits."""
    return (
        len(number) == 10
        and _is_digits(number)
        and number[0] == "1"
        and number[1] in MOBILE_OPERATOR_DIGITS
    )


def is_cairo_landline(number: str) -> bool:
    return len(number) == 10 and _is_digits(number) and number.startswith("02")


def is_alexandria_landline(number: str) -> bool:
    return len(number) == 9 and _is_digits(number) and number.startswith("03")


def is_other_city_landline(number: str) -> bool:
    return (
        len(number) == 9
        and _is_digits(number)
        and number[0] == TRUNK_PREFIX
        and number[1] in OTHER_CITY_AREA_DIGITS
    )


def _with_trunk_prefix(number: str) -> str:
    if number.startswith(TRUNK_PREFIX):
        return number
    return TRUNK_PREFIX + number


def classify_national_number(number: str | None) -> str | None:
    """Return the kind of Egyptian number (KIND_* constant), or None if no rule matches.

    Mobile is checked on the number as given. Landline area codes are written with
    the trunk zero, so landline rules see the number with the zero restored.
    """
    if not number:
        return None
    if is_mobile(number):
        return KIND_MOBILE
    landline = _with_trunk_prefix(number)
    if is_cairo_landline(landline):
        return KIND_CAIRO
    if is_alexandria_landline(landline):
        return KIND_ALEXANDRIA
    if is_other_city_landline(landline):
        return KIND_OTHER_CITY
    return None


def is_valid_national_number(number: str | None) -> bool:
    return classify_national_number(number) is not None


def clean_phone(raw: str) -> str:
    """Drop whitespace, hyphens and parentheses."""
    return "".join(ch for ch in raw if not ch.isspace() and ch not in _SEPARATORS)


def validate_without_parser(raw: str | None) -> bool:
    """Recognize common Egyptian formats by hand, without a parsing library.

    Accepts "+20" followed by a national number, or the 11-digit trunk-prefixed
    mobile form "01[0125]XXXXXXXX". Anything else is rejected, since other
    countries cannot be checked without the parser.
    """
    if not raw:
        return False
    cleaned = clean_phone(raw)
    if cleaned.startswith(EGYPT_CALLING_CODE_PREFIX):
        return is_valid_national_number(cleaned[len(EGYPT_CALLING_CODE_PREFIX):])
    if cleaned.startswith(TRUNK_PREFIX + "1"):
        return len(cleaned) == 11 and is_mobile(cleaned[1:])
    return False
