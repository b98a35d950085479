"""
Data models for the payroll calendar using Pydantic.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, Field, field_validator


class Frequency(str, Enum):
    """Pay frequencies supported by the payday calculator."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Holiday(BaseModel):
    """Represents a public holiday."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Display name of the holiday")


class CalendarRequest(BaseModel):
    """Inputs for rendering a payroll calendar."""

    frequency: Frequency = Field(default=Frequency.BIWEEKLY, description="Pay frequency")
    last_payment: Optional[date] = Field(
        default=None, description="Reference payday the sequence is anchored at"
    )
    amount: float = Field(default=0.0, ge=0.0, description="Amount paid on each payday")


class DayCell(BaseModel):
    """A single day in a month grid."""

    day_date: date = Field(..., description="Calendar date of the cell")
    day: int = Field(..., ge=1, le=31, description="Day of month")
    holiday: Optional[str] = Field(default=None, description="Holiday name, if any")
    is_payday: bool = Field(default=False, description="Whether a payday falls on this day")


class MonthCalendar(BaseModel):
    """A rendered month with its holidays, paydays and total."""

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12, description="Month number, 1 = January")
    month_name: str = Field(..., description="Month name in the host locale")
    first_weekday: int = Field(
        ..., ge=0, le=6, description="Weekday of the 1st, 0 = Sunday (leading blank cells)"
    )
    days_in_month: int = Field(..., ge=28, le=31)
    days: List[DayCell] = Field(default_factory=list)
    payday_count: int = Field(default=0, ge=0)
    month_total: float = Field(default=0.0, ge=0.0, description="Amount x paydays in the month")

    @property
    def title(self) -> str:
        return f"{self.month_name} {self.year}"

    @property
    def holidays(self) -> List[DayCell]:
        return [cell for cell in self.days if cell.holiday]

    @property
    def paydays(self) -> List[DayCell]:
        return [cell for cell in self.days if cell.is_payday]


class CalendarSummary(BaseModel):
    """Totals across the currently rendered months."""

    rendered_months: int = Field(default=0, ge=0)
    total: float = Field(default=0.0, ge=0.0, description="Sum of month totals")


class RenderState(BaseModel):
    """Scroll-view state owned by the caller of the calendar builder."""

    rendered_years: Set[int] = Field(default_factory=set)
    last_rendered_year: Optional[int] = Field(default=None)
    months: List[MonthCalendar] = Field(default_factory=list)

    def reset(self, year: int) -> None:
        """Forget everything rendered so far."""
        self.rendered_years.clear()
        self.months.clear()
        self.last_rendered_year = year


class Config(BaseModel):
    """Configuration for the payroll calendar."""

    default_frequency: Frequency = Field(
        default=Frequency.BIWEEKLY, description="Frequency used when none is given"
    )
    default_amount: float = Field(default=0.0, ge=0.0, description="Amount used when none is given")
    scroll_years: int = Field(default=3, ge=1, le=50, description="Years appended per scroll batch")
    print_year_span: int = Field(
        default=5, ge=0, le=50, description="Years offered around the current year for printing"
    )
    currency_symbol: str = Field(default="$", description="Prefix for formatted amounts")
    output_format: str = Field(default="console", description="Default output: console, json, csv or html")
    output_directory: str = Field(default="results", description="Directory for output files")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Only the supported output formats are accepted."""
        if v not in ("console", "json", "csv", "html"):
            raise ValueError("output_format must be one of: console, json, csv, html")
        return v
