"""
Core calendar math for paydays and holidays.
"""

from payroll_calendar.core.calendar_builder import CalendarBuilder
from payroll_calendar.core.holiday_calculator import holiday_list, holidays_for, is_holiday
from payroll_calendar.core.payday_calculator import month_total, payday_dates_in, paydays_in

__all__ = [
    "CalendarBuilder",
    "holiday_list",
    "holidays_for",
    "is_holiday",
    "month_total",
    "payday_dates_in",
    "paydays_in",
]
