"""
Data models and schemas for the payroll calendar.
"""

from payroll_calendar.data.schemas import (
    CalendarRequest,
    CalendarSummary,
    Config,
    DayCell,
    Frequency,
    Holiday,
    MonthCalendar,
    RenderState,
)

__all__ = [
    "CalendarRequest",
    "CalendarSummary",
    "Config",
    "DayCell",
    "Frequency",
    "Holiday",
    "MonthCalendar",
    "RenderState",
]
