"""
Module: core.calendar_math

Purpose:
    Pure Gregorian calendar helpers. No state.

Key Functions:
    - is_leap_year(year): Gregorian leap year rule
    - days_in_month(year, month): Length of a month, February aware
    - clamp_day(year, month, day): Cap a day to the month's length

Used By:
    - core.models.instant
    - engine.propagation
"""

from __future__ import annotations

from .errors import InvalidArgument

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """
    Check the Gregorian leap year rule.

    Example:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month.

    Args:
        year: Calendar year (any integer)
        month: Month 1-12

    Returns:
        28-31

    Raises:
        InvalidArgument: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise InvalidArgument(f"month must be in 1..12: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Cap day at the length of the given month."""
    return min(day, days_in_month(year, month))
