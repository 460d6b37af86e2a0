"""Date manipulation utilities"""

from datetime import date


def calculate_age(birth_date: date, on_date: date) -> int:
    """Whole years between birth_date and on_date, counting a year only once the birthday is reached"""
    birthday_pending = (on_date.month, on_date.day) < (birth_date.month, birth_date.day)
    return on_date.year - birth_date.year - (1 if birthday_pending else 0)
