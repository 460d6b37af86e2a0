"""Field extraction from Estonian personal ID codes (isikukood)"""

from datetime import date
from typing import Dict

from loan_gateway.domain.exceptions import InvalidPersonalCodeError

# First digit encodes century and sex: odd = male, even = female
CENTURY_BY_IDENTIFIER: Dict[str, int] = {
    "1": 1800,
    "2": 1800,
    "3": 1900,
    "4": 1900,
    "5": 2000,
    "6": 2000,
}

PERSONAL_CODE_LENGTH = 11


def is_well_formed(personal_code: str) -> bool:
    """Exactly eleven ASCII digits, with no separators or padding"""
    return (
        len(personal_code) == PERSONAL_CODE_LENGTH
        and personal_code.isascii()
        and personal_code.isdigit()
    )


def century_of(identifier: str) -> int:
    """Map the century/sex identifier digit to the first year of its century"""
    try:
        return CENTURY_BY_IDENTIFIER[identifier]
    except KeyError:
        raise InvalidPersonalCodeError(
            "Invalid identifier for century in Estonian personal ID code!"
        ) from None


def parse_birth_date(personal_code: str) -> date:
    """
    Parse the birth date encoded in a personal code.

    Layout: G YYMMDD SSS C
    - G: century/sex identifier (see CENTURY_BY_IDENTIFIER)
    - YYMMDD: birth date within that century
    - SSS: serial number, C: checksum

    Raises:
        InvalidPersonalCodeError: Unknown identifier or impossible calendar date
    """
    if len(personal_code) < 7 or not personal_code[:7].isdigit():
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    century = century_of(personal_code[0])
    year = century + int(personal_code[1:3])
    month = int(personal_code[3:5])
    day = int(personal_code[5:7])

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidPersonalCodeError("Invalid birth date in personal ID code!") from e


def segment_number(personal_code: str) -> int:
    """Last four digits of the personal code, used to pick the credit segment"""
    digits = personal_code[-4:]
    if len(digits) != 4 or not digits.isdigit():
        raise InvalidPersonalCodeError("Invalid personal ID code!")
    return int(digits)
