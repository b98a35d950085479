"""
Tests for console formatting and file exports.
"""

import csv
import json
from datetime import date

import pytest
from rich.console import Console

from payroll_calendar.core.calendar_builder import CalendarBuilder
from payroll_calendar.core.holiday_calculator import holiday_list
from payroll_calendar.data.schemas import CalendarRequest, CalendarSummary, Frequency
from payroll_calendar.output.exporter import ResultExporter
from payroll_calendar.output.formatter import ConsoleFormatter, format_money, summary_line


@pytest.fixture
def calendar_request():
    """Weekly pay of 100 anchored at 2024-01-05."""
    return CalendarRequest(frequency=Frequency.WEEKLY, last_payment=date(2024, 1, 5), amount=100.0)


@pytest.fixture
def months(calendar_request):
    """All months of 2024."""
    return CalendarBuilder().render_year(2024, calendar_request)


@pytest.fixture
def summary(months):
    """Summary of the 2024 months."""
    return CalendarBuilder.summarize(months)


class TestFormatting:
    """Tests for money and summary formatting."""

    def test_format_money(self):
        """Test two-decimal amounts."""
        assert format_money(0) == "$0.00"
        assert format_money(1234.5) == "$1234.50"
        assert format_money(10, "EUR ") == "EUR 10.00"

    def test_summary_line(self):
        """Test the summary sentence."""
        line = summary_line(CalendarSummary(rendered_months=12, total=5200.0))
        assert line == (
            "Rendered months: 12. Current displayed total (sum of month totals): $5200.00."
        )


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    @pytest.fixture
    def formatter(self):
        """Formatter writing to a recording console."""
        return ConsoleFormatter(console=Console(record=True, width=160))

    def test_month_table_rows(self, formatter, months):
        """Test that February 2024 spans five weeks."""
        table = formatter.month_table(months[1])

        assert len(table.columns) == 7
        assert table.row_count == 5

    def test_print_month(self, formatter, months):
        """Test that paydays, holidays and totals are printed."""
        formatter.print_month(months[0])
        text = formatter.console.export_text()

        assert "January 2024" in text
        assert "Payday" in text
        assert "MLK Day" in text
        assert "Month total: $400.00" in text

    def test_print_summary(self, formatter, summary):
        """Test the summary panel."""
        formatter.print_summary(summary)
        assert "Rendered months: 12." in formatter.console.export_text()

    def test_print_paydays_empty(self, formatter):
        """Test the message for a month without paydays."""
        month = CalendarBuilder().build_month(2024, 2, CalendarRequest())
        formatter.print_paydays(month)

        assert "No paydays in February 2024" in formatter.console.export_text()

    def test_print_holidays(self, formatter):
        """Test the holiday table."""
        formatter.print_holidays(2024, holiday_list(2024))
        text = formatter.console.export_text()

        assert "2024-11-28" in text
        assert "Thursday" in text


class TestResultExporter:
    """Tests for ResultExporter."""

    def test_export_json(self, tmp_path, months, summary, calendar_request):
        """Test the JSON structure."""
        exporter = ResultExporter(output_directory=str(tmp_path))
        path = exporter.export_json(months, summary, calendar_request)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data["request"] == {"frequency": "weekly", "last_payment": "2024-01-05", "amount": 100.0}
        assert len(data["months"]) == 12
        assert data["months"][0]["paydays"] == ["2024-01-05", "2024-01-12", "2024-01-19", "2024-01-26"]
        assert data["months"][10]["holidays"] == {"2024-11-28": "Thanksgiving"}
        assert data["summary"] == {"rendered_months": 12, "total": 5200.0}

    def test_export_csv(self, tmp_path, months):
        """Test one CSV row per month."""
        path = tmp_path / "calendar.csv"
        ResultExporter().export_csv(months, str(path))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[0][0] == "Year"
        assert len(rows) == 13
        assert rows[1][3] == "4"
        assert rows[1][6] == "400.00"

    def test_export_holidays_csv(self, tmp_path):
        """Test the holiday CSV."""
        path = ResultExporter(output_directory=str(tmp_path)).export_holidays_csv(holiday_list(2024))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[0] == ["Date", "Name"]
        assert ["2024-01-15", "MLK Day"] in rows
        assert len(rows) == 9

    def test_export_html(self, tmp_path, months, summary):
        """Test the printable page."""
        path = tmp_path / "print" / "calendar.html"
        ResultExporter().export_html(months, summary, "Payroll Calendar 2024", str(path))
        page = path.read_text(encoding="utf-8")

        assert page.startswith("<!DOCTYPE html>")
        assert page.count('<article class="month">') == 12
        assert "@media print" in page
        assert "New Year&#x27;s Day" in page
        assert page.count('<div class="paylabel">Payday</div>') == 52
        assert "Month total: $400.00" in page
        assert "Rendered months: 12." in page

    def test_html_leading_blanks(self, months, summary):
        """Test that each grid starts on the right weekday."""
        page = ResultExporter().render_html(months[1:2], summary, "February")

        # February 2024 starts on a Thursday: four blank cells before the 1st
        grid = page.split('<div class="grid">')[1]
        assert grid.count('<div class="daycell"></div>') == 4
