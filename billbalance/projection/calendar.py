"""Calendar arithmetic used by the balance projector."""

from datetime import date


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(day: date) -> int:
    """Number of days in the month containing `day`."""
    if day.month == 2:
        return 29 if is_leap_year(day.year) else 28
    if day.month in (4, 6, 9, 11):
        return 30
    return 31


def modulo(a: int, b: int) -> int:
    """
    Mathematical modulo: result is always in [0, b) for positive b.

    Python's % already floors toward negative infinity, so
    modulo(-17, 31) == 14 rather than -17.
    """
    return a % b
