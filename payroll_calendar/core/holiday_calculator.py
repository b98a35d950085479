"""
US public holidays shown on the payroll calendar.

Fixed holidays keep their calendar date; floating holidays follow an
ordinal weekday rule. Holidays falling on a weekend are not moved to an
observed weekday.
"""

from datetime import date
from typing import Dict, List

from payroll_calendar.core.date_utils import (
    MONDAY,
    THURSDAY,
    iso_key,
    last_weekday_of_month,
    nth_weekday_of_month,
)
from payroll_calendar.data.schemas import Holiday


def holidays_for(year: int) -> Dict[str, str]:
    """
    Get the holidays observed in a year.

    Args:
        year: Year to compute holidays for.

    Returns:
        Mapping of ISO date key to holiday name, always 8 entries.
    """
    result: Dict[str, str] = {}

    def add(d: date, name: str) -> None:
        result[iso_key(d)] = name

    add(date(year, 1, 1), "New Year's Day")
    add(nth_weekday_of_month(year, 1, MONDAY, 3), "MLK Day")
    add(last_weekday_of_month(year, 5, MONDAY), "Memorial Day")
    add(date(year, 7, 4), "Independence Day")
    add(nth_weekday_of_month(year, 9, MONDAY, 1), "Labor Day")
    add(nth_weekday_of_month(year, 11, THURSDAY, 4), "Thanksgiving")
    add(date(year, 12, 25), "Christmas")
    add(date(year, 6, 19), "Juneteenth")
    return result


def holiday_list(year: int) -> List[Holiday]:
    """Get the holidays of a year as models, sorted by date."""
    return sorted(
        (
            Holiday(holiday_date=date.fromisoformat(key), name=name)
            for key, name in holidays_for(year).items()
        ),
        key=lambda h: h.holiday_date,
    )


def is_holiday(check_date: date) -> bool:
    """Check if a specific date is one of the calendar's holidays."""
    return iso_key(check_date) in holidays_for(check_date.year)
