"""
Tests for the holiday calculator and the date helpers it relies on.
"""

from datetime import date

import holidays
import pytest

from payroll_calendar.core.date_utils import (
    FRIDAY,
    MONDAY,
    SUNDAY,
    THURSDAY,
    days_in_month,
    iso_key,
    last_weekday_of_month,
    nth_weekday_of_month,
    parse_date_input,
    sunday_weekday,
)
from payroll_calendar.core.holiday_calculator import holiday_list, holidays_for, is_holiday


def holiday_date(year: int, name: str) -> date:
    """Look up the date of a named holiday."""
    for key, value in holidays_for(year).items():
        if value == name:
            return date.fromisoformat(key)
    raise KeyError(name)


class TestDateUtils:
    """Tests for weekday and month helpers."""

    def test_sunday_weekday(self):
        """Test that weekdays are numbered from Sunday."""
        assert sunday_weekday(date(2024, 9, 1)) == SUNDAY
        assert sunday_weekday(date(2024, 1, 1)) == MONDAY
        assert sunday_weekday(date(2024, 1, 5)) == FRIDAY

    def test_days_in_month(self):
        """Test month lengths including leap February."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 4) == 30
        assert days_in_month(2024, 12) == 31

    def test_nth_weekday_of_month(self):
        """Test ordinal weekday rule."""
        assert nth_weekday_of_month(2024, 1, MONDAY, 3) == date(2024, 1, 15)
        assert nth_weekday_of_month(2024, 9, MONDAY, 1) == date(2024, 9, 2)
        assert nth_weekday_of_month(2024, 11, THURSDAY, 4) == date(2024, 11, 28)

    def test_nth_weekday_when_month_starts_on_it(self):
        """Test that the 1st counts as the first occurrence."""
        # January 2024 starts on a Monday
        assert nth_weekday_of_month(2024, 1, MONDAY, 1) == date(2024, 1, 1)

    def test_last_weekday_of_month(self):
        """Test last-weekday rule."""
        assert last_weekday_of_month(2024, 5, MONDAY) == date(2024, 5, 27)
        # May 2021 ends on a Monday
        assert last_weekday_of_month(2021, 5, MONDAY) == date(2021, 5, 31)

    def test_iso_key(self):
        """Test zero-padded ISO keys."""
        assert iso_key(date(2024, 3, 7)) == "2024-03-07"

    @pytest.mark.parametrize(
        "value",
        [None, "", "2024-01", "2024/01/05", "abcd-ef-gh", "2024-02-31", "2024-13-01"],
    )
    def test_parse_date_input_malformed(self, value):
        """Test that malformed dates degrade to None."""
        assert parse_date_input(value) is None

    def test_parse_date_input(self):
        """Test parsing a well-formed date."""
        assert parse_date_input("2024-01-05") == date(2024, 1, 5)
        assert parse_date_input(" 2024-1-5 ") == date(2024, 1, 5)


class TestHolidaysFor:
    """Tests for holidays_for."""

    def test_known_dates_2024(self):
        """Test the documented 2024 holidays."""
        result = holidays_for(2024)

        assert result["2024-01-15"] == "MLK Day"
        assert result["2024-11-28"] == "Thanksgiving"
        assert result["2024-05-27"] == "Memorial Day"
        assert result["2024-09-02"] == "Labor Day"
        assert result["2024-01-01"] == "New Year's Day"
        assert result["2024-06-19"] == "Juneteenth"
        assert result["2024-07-04"] == "Independence Day"
        assert result["2024-12-25"] == "Christmas"

    @pytest.mark.parametrize("year", [1, 1899, 1970, 2000, 2023, 2024, 2100, 9999])
    def test_always_eight_distinct_entries(self, year):
        """Test that every year has exactly 8 holidays with distinct keys."""
        result = holidays_for(year)

        assert len(result) == 8
        assert len(set(result.values())) == 8
        assert all(key.startswith(f"{year:04d}-") for key in result)

    @pytest.mark.parametrize("year", range(2000, 2040))
    def test_floating_holiday_weekdays(self, year):
        """Test that floating holidays land on their weekday."""
        assert sunday_weekday(holiday_date(year, "MLK Day")) == MONDAY
        assert sunday_weekday(holiday_date(year, "Memorial Day")) == MONDAY
        assert sunday_weekday(holiday_date(year, "Labor Day")) == MONDAY
        assert sunday_weekday(holiday_date(year, "Thanksgiving")) == THURSDAY

    @pytest.mark.parametrize("year", range(2000, 2040))
    def test_floating_holiday_ranges(self, year):
        """Test that ordinal rules stay inside their week of the month."""
        assert 15 <= holiday_date(year, "MLK Day").day <= 21
        assert 25 <= holiday_date(year, "Memorial Day").day <= 31
        assert 1 <= holiday_date(year, "Labor Day").day <= 7
        assert 22 <= holiday_date(year, "Thanksgiving").day <= 28

    @pytest.mark.parametrize("year", range(2021, 2036))
    def test_matches_holidays_library(self, year):
        """Test every date against the holidays library's US calendar."""
        us_holidays = holidays.US(years=year)

        for key in holidays_for(year):
            assert date.fromisoformat(key) in us_holidays

    def test_weekend_holidays_not_shifted(self):
        """Test that a Saturday Independence Day stays on the 4th."""
        # July 4th 2026 is a Saturday
        assert "2026-07-04" in holidays_for(2026)
        assert "2026-07-03" not in holidays_for(2026)

    def test_idempotent(self):
        """Test that repeated calls give identical results."""
        assert holidays_for(2025) == holidays_for(2025)


class TestHolidayHelpers:
    """Tests for holiday_list and is_holiday."""

    def test_holiday_list_sorted(self):
        """Test that holidays are returned in date order."""
        result = holiday_list(2024)

        assert len(result) == 8
        assert [h.holiday_date for h in result] == sorted(h.holiday_date for h in result)
        assert result[0].name == "New Year's Day"
        assert result[-1].name == "Christmas"

    def test_is_holiday(self):
        """Test holiday membership."""
        assert is_holiday(date(2024, 11, 28)) is True
        assert is_holiday(date(2024, 11, 29)) is False
