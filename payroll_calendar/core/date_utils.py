"""
Calendar-day helpers shared by the holiday and payday calculators.

Weekdays are numbered 0 = Sunday .. 6 = Saturday throughout, matching the
Sunday-first month grids.
"""

import calendar
from datetime import date
from typing import Optional

SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6


def sunday_weekday(d: date) -> int:
    """Return the weekday of ``d`` with 0 = Sunday."""
    return (d.weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def last_of_month(year: int, month: int) -> date:
    return date(year, month, days_in_month(year, month))


def nth_weekday_of_month(year: int, month: int, weekday: int, nth: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year.
        month: Month number (1 = January).
        weekday: Weekday, 0 = Sunday .. 6 = Saturday.
        nth: 1-based occurrence.

    Returns:
        The date of the occurrence.

    Raises:
        ValueError: If the month has no such occurrence (e.g. a 6th Monday).
    """
    first_weekday = sunday_weekday(first_of_month(year, month))
    day = 1 + ((7 + weekday - first_weekday) % 7) + (nth - 1) * 7
    return date(year, month, day)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """
    Get the last occurrence of a weekday in a month.

    Args:
        year: Year.
        month: Month number (1 = January).
        weekday: Weekday, 0 = Sunday .. 6 = Saturday.

    Returns:
        The date of the last occurrence.
    """
    last = last_of_month(year, month)
    diff = (7 + sunday_weekday(last) - weekday) % 7
    return date(year, month, last.day - diff)


def iso_key(d: date) -> str:
    """Format a date as a ``YYYY-MM-DD`` key."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_input(value: Optional[str]) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` date as entered by a user.

    Missing or malformed input yields None so callers can fall back to
    "no paydays" instead of failing.
    """
    if not value:
        return None
    parts = str(value).strip().split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None
