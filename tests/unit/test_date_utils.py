"""Unit tests for date utilities"""

from datetime import date

from loan_gateway.utils.date_utils import calculate_age


def test_calculate_age_birthday_reached():
    assert calculate_age(date(1990, 2, 1), date(2026, 2, 1)) == 36
    assert calculate_age(date(1990, 2, 1), date(2026, 10, 18)) == 36


def test_calculate_age_birthday_pending():
    """Test year is not counted until the birthday"""
    assert calculate_age(date(1990, 2, 1), date(2026, 1, 31)) == 35


def test_calculate_age_leap_day():
    """Test leap-day birthdays turn a year older on 1 March in common years"""
    born = date(2000, 2, 29)
    assert calculate_age(born, date(2023, 2, 28)) == 22
    assert calculate_age(born, date(2023, 3, 1)) == 23
    assert calculate_age(born, date(2024, 2, 29)) == 24


def test_calculate_age_same_day():
    assert calculate_age(date(2026, 10, 18), date(2026, 10, 18)) == 0
