"""Gregorian calendar rules: leap years, month lengths, next-day rollover.

All functions are pure. ``days_in_month`` and ``next_day`` assume their
input already passed validation; see :mod:`nextday.domain.validation`.
"""

from __future__ import annotations

from nextday.domain.types import Date, Range

MONTHS_IN_YEAR = 12
FEBRUARY = 2

# February is resolved per year by days_in_month().
MONTH_LENGTHS: dict[int, int] = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def is_in_range(bounds: Range, value: int) -> bool:
    """Return True if *value* lies within *bounds* inclusively."""
    return bounds.contains(value)


def is_leap_year(year: int) -> bool:
    """Check whether *year* is a leap year in the Gregorian calendar.

    Century years are leap only when divisible by 400; every other
    year is leap when divisible by 4.
    """
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in *month* of *year*.

    Raises:
        ValueError: If *month* is outside 1..12.
    """
    if month not in MONTH_LENGTHS:
        msg = f"month must be in 1..{MONTHS_IN_YEAR}, got {month}"
        raise ValueError(msg)
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month]


def next_day(date: Date) -> Date:
    """Return the date one day after *date*.

    Month and year advance only when the day rolls over to 1. A mid-December
    date stays in December: ``15.12.2023`` becomes ``16.12.2023``.
    """
    if date.day < days_in_month(date.month, date.year):
        return date.model_copy(update={"day": date.day + 1})
    if date.month == MONTHS_IN_YEAR:
        return Date(day=1, month=1, year=date.year + 1)
    return Date(day=1, month=date.month + 1, year=date.year)
