"""
Builds month grids annotated with holidays, paydays and totals.
"""

import calendar
import logging
from datetime import date
from typing import List, Optional

from payroll_calendar.core.date_utils import days_in_month, first_of_month, iso_key, sunday_weekday
from payroll_calendar.core.holiday_calculator import holidays_for
from payroll_calendar.core.payday_calculator import month_total, paydays_in
from payroll_calendar.data.schemas import (
    CalendarRequest,
    CalendarSummary,
    Config,
    DayCell,
    MonthCalendar,
    RenderState,
)

logger = logging.getLogger(__name__)


class CalendarBuilder:
    """Builds payroll calendar months for the scroll and print views."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the calendar builder.

        Args:
            config: Configuration (defaults are used if not provided).
        """
        self.config = config or Config()

    def build_month(self, year: int, month: int, request: CalendarRequest) -> MonthCalendar:
        """
        Build a single month.

        Args:
            year: Year of the month.
            month: Month number (1 = January).
            request: Frequency, anchor and amount to render with.

        Returns:
            MonthCalendar with one cell per day of the month.
        """
        holidays = holidays_for(year)
        paydays = paydays_in(year, month, request.frequency, request.last_payment)

        cells = []
        for day in range(1, days_in_month(year, month) + 1):
            current = date(year, month, day)
            key = iso_key(current)
            cells.append(
                DayCell(
                    day_date=current,
                    day=day,
                    holiday=holidays.get(key),
                    is_payday=key in paydays,
                )
            )

        payday_count = len(paydays)
        return MonthCalendar(
            year=year,
            month=month,
            month_name=calendar.month_name[month],
            first_weekday=sunday_weekday(first_of_month(year, month)),
            days_in_month=len(cells),
            days=cells,
            payday_count=payday_count,
            month_total=month_total(request.amount, payday_count),
        )

    def build_year(self, year: int, request: CalendarRequest) -> List[MonthCalendar]:
        """Build all twelve months of a year."""
        return [self.build_month(year, month, request) for month in range(1, 13)]

    def render_scroll(
        self,
        state: RenderState,
        request: CalendarRequest,
        start_year: Optional[int] = None,
    ) -> List[MonthCalendar]:
        """
        Reset the scroll view and render the first batch of years.

        Args:
            state: Scroll state to reset and fill.
            request: Frequency, anchor and amount to render with.
            start_year: First year to render (default: current year).

        Returns:
            All months now held by the state.
        """
        if start_year is None:
            start_year = date.today().year
        state.reset(start_year)
        self._append_years(state, start_year, request)
        return state.months

    def load_more(self, state: RenderState, request: CalendarRequest) -> List[MonthCalendar]:
        """
        Append the next batch of years after the last rendered one.

        Years already present in the state are skipped.
        """
        if state.last_rendered_year is None:
            return self.render_scroll(state, request)
        self._append_years(state, state.last_rendered_year + 1, request)
        return state.months

    def render_year(self, year: int, request: CalendarRequest) -> List[MonthCalendar]:
        """Render a single year for printing, independent of any scroll state."""
        logger.debug(f"Rendering print view for {year}")
        return self.build_year(year, request)

    def _append_years(self, state: RenderState, start_year: int, request: CalendarRequest) -> None:
        for year in range(start_year, start_year + self.config.scroll_years):
            if year in state.rendered_years:
                continue
            state.months.extend(self.build_year(year, request))
            state.rendered_years.add(year)
            state.last_rendered_year = year
            logger.debug(f"Rendered {year} into scroll view")

    @staticmethod
    def summarize(months: List[MonthCalendar]) -> CalendarSummary:
        """Count the rendered months and sum their totals."""
        return CalendarSummary(
            rendered_months=len(months),
            total=sum(m.month_total for m in months),
        )

    def print_year_choices(self, today: Optional[date] = None) -> List[int]:
        """Years offered for the print view, centered on the current year."""
        current = (today or date.today()).year
        span = self.config.print_year_span
        return list(range(current - span, current + span + 1))
