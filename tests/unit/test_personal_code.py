"""Unit tests for personal code parsing"""

from datetime import date

import pytest

from loan_gateway.domain.exceptions import InvalidPersonalCodeError
from loan_gateway.domain.models import FailureKind
from loan_gateway.domain.personal_code import century_of, is_well_formed, parse_birth_date, segment_number


def test_parse_birth_date(segment_1_code: str, birth_date: date):
    assert parse_birth_date(segment_1_code) == birth_date


@pytest.mark.parametrize(
    "personal_code, expected",
    [
        ("19912310000", date(1899, 12, 31)),
        ("20001010000", date(1800, 1, 1)),
        ("39002010000", date(1990, 2, 1)),
        ("40002280000", date(1900, 2, 28)),
        ("50102150000", date(2001, 2, 15)),
        ("60002290000", date(2000, 2, 29)),
    ],
)
def test_parse_birth_date_centuries(personal_code: str, expected: date):
    """Test century table: 1-2 -> 1800s, 3-4 -> 1900s, 5-6 -> 2000s"""
    assert parse_birth_date(personal_code) == expected


def test_century_of_unknown_identifier():
    for identifier in ["0", "7", "8", "9"]:
        with pytest.raises(InvalidPersonalCodeError) as exc_info:
            century_of(identifier)
        assert exc_info.value.kind == FailureKind.INVALID_PERSONAL_CODE


def test_parse_birth_date_impossible_date():
    """Test calendar validation (1900 was not a leap year)"""
    with pytest.raises(InvalidPersonalCodeError):
        parse_birth_date("30002290000")
    with pytest.raises(InvalidPersonalCodeError):
        parse_birth_date("49013010000")


def test_parse_birth_date_malformed():
    with pytest.raises(InvalidPersonalCodeError):
        parse_birth_date("4900")
    with pytest.raises(InvalidPersonalCodeError):
        parse_birth_date("4ab02010000")


def test_segment_number(segment_1_code: str):
    assert segment_number(segment_1_code) == 3455
    assert segment_number("49002010965") == 965


def test_segment_number_malformed():
    with pytest.raises(InvalidPersonalCodeError):
        segment_number("12a4")


def test_is_well_formed(segment_1_code: str):
    """Test only eleven ASCII digits are accepted"""
    assert is_well_formed(segment_1_code) is True

    for code in ["4900201 3455", " 49002013455", "490020134550", "4900201345", "", "４9002013455"]:
        assert is_well_formed(code) is False
