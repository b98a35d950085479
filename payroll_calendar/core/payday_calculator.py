"""
Payday calculation for a single month.

Periodic frequencies treat the anchor (the last known payday) as one point
on an endless sequence of dates spaced by the pay period, extending both
into the past and the future. Monthly pay reuses the anchor's day of month.
"""

import logging
from datetime import date
from typing import List, Optional, Set, Union

from payroll_calendar.core.date_utils import first_of_month, iso_key, last_of_month
from payroll_calendar.data.schemas import Frequency

logger = logging.getLogger(__name__)

STEP_DAYS = {
    Frequency.WEEKLY: 7,
    Frequency.BIWEEKLY: 14,
}


def _as_frequency(frequency: Union[Frequency, str, None]) -> Optional[Frequency]:
    if isinstance(frequency, Frequency):
        return frequency
    try:
        return Frequency(frequency)
    except ValueError:
        return None


def payday_dates_in(
    year: int,
    month: int,
    frequency: Union[Frequency, str],
    anchor: Optional[date],
) -> List[date]:
    """
    Get the paydays falling within a month, in date order.

    Args:
        year: Year of the month.
        month: Month number (1 = January).
        frequency: Pay frequency.
        anchor: Known payday the schedule is anchored at. None means no
            schedule is known.

    Returns:
        Sorted list of payday dates inside the month (bounds inclusive).
    """
    if anchor is None:
        return []

    freq = _as_frequency(frequency)
    if freq is None:
        logger.debug(f"Unknown pay frequency {frequency!r}, no paydays computed")
        return []

    if freq == Frequency.MONTHLY:
        # Months too short for the anchor's day are skipped, not clamped
        try:
            return [date(year, month, anchor.day)]
        except ValueError:
            return []

    start = first_of_month(year, month)
    end = last_of_month(year, month)
    step = STEP_DAYS[freq]
    # First member of the anchor's sequence on or after the 1st
    first = start.toordinal() + (anchor.toordinal() - start.toordinal()) % step
    return [date.fromordinal(o) for o in range(first, end.toordinal() + 1, step)]


def paydays_in(
    year: int,
    month: int,
    frequency: Union[Frequency, str],
    anchor: Optional[date],
) -> Set[str]:
    """
    Get the paydays falling within a month as ISO date keys.

    Args:
        year: Year of the month.
        month: Month number (1 = January).
        frequency: Pay frequency.
        anchor: Known payday the schedule is anchored at, or None.

    Returns:
        Set of ``YYYY-MM-DD`` keys; empty when no anchor is given.
    """
    return {iso_key(d) for d in payday_dates_in(year, month, frequency, anchor)}


def month_total(amount: float, payday_count: int) -> float:
    """Amount paid in a month with ``payday_count`` paydays."""
    if amount <= 0:
        return 0.0
    return amount * payday_count
