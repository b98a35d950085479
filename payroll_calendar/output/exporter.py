"""
Export functionality for payroll calendars.
"""

import csv
import html
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from payroll_calendar.data.schemas import CalendarRequest, CalendarSummary, Holiday, MonthCalendar
from payroll_calendar.output.formatter import DAY_TITLES, format_money, summary_line

logger = logging.getLogger(__name__)

PRINT_CSS = """
body { font-family: Arial, Helvetica, sans-serif; margin: 16px; color: #222; }
h1 { font-size: 20px; }
.calendar { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; }
.month { border: 1px solid #ccc; padding: 8px; break-inside: avoid; }
.month h3 { margin: 0 0 6px 0; font-size: 14px; }
.grid { display: grid; grid-template-columns: repeat(7, 1fr); gap: 2px; }
.daytitle { font-weight: bold; text-align: center; font-size: 11px; }
.daycell { min-height: 44px; border: 1px solid #eee; font-size: 10px; padding: 2px; }
.daycell .date { font-weight: bold; }
.holiday { background: #fde2e2; }
.payday { background: #e2f5e2; }
.paylabel { color: #1a7f1a; font-weight: bold; }
.totals { margin-top: 6px; font-size: 12px; text-align: right; }
.summary { margin-top: 16px; font-size: 13px; }
@media print {
  body { margin: 0; }
  .calendar { grid-template-columns: repeat(3, 1fr); }
}
"""


class ResultExporter:
    """Exports payroll calendars to various formats."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
        currency_symbol: str = "$",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
            currency_symbol: Prefix for formatted amounts.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format
        self.currency_symbol = currency_symbol

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(
        self,
        months: List[MonthCalendar],
        summary: CalendarSummary,
        request: CalendarRequest,
        output_path: Optional[str] = None,
    ) -> str:
        """
        Export a calendar to JSON file.

        Args:
            months: Months to export.
            summary: Summary of the months.
            request: Inputs the calendar was rendered with.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "payroll_calendar", "json")

        result_dict = {
            "request": {
                "frequency": request.frequency.value,
                "last_payment": request.last_payment.isoformat() if request.last_payment else None,
                "amount": request.amount,
            },
            "months": [self._month_to_dict(m) for m in months],
            "summary": {
                "rendered_months": summary.rendered_months,
                "total": summary.total,
            },
            "metadata": {
                "generated_at": datetime.now().isoformat(),
            },
        }

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(result_dict, f, indent=2, ensure_ascii=False)

        logger.info(f"Exported {len(months)} months to: {file_path}")
        return str(file_path)

    def export_csv(self, months: List[MonthCalendar], output_path: Optional[str] = None) -> str:
        """
        Export month totals to CSV file, one row per month.

        Args:
            months: Months to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "payroll_calendar", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Year", "Month", "Month Name", "Paydays", "Payday Dates", "Holidays", "Month Total"])

            for month in months:
                writer.writerow([
                    month.year,
                    month.month,
                    month.month_name,
                    month.payday_count,
                    " ".join(cell.day_date.isoformat() for cell in month.paydays),
                    "; ".join(f"{cell.day_date.isoformat()} {cell.holiday}" for cell in month.holidays),
                    f"{month.month_total:.2f}",
                ])

        logger.info(f"Exported {len(months)} months to: {file_path}")
        return str(file_path)

    def export_holidays_csv(self, holidays: List[Holiday], output_path: Optional[str] = None) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "holidays", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name"])
            for holiday in holidays:
                writer.writerow([holiday.holiday_date.isoformat(), holiday.name])

        logger.info(f"Exported {len(holidays)} holidays to: {file_path}")
        return str(file_path)

    def export_html(
        self,
        months: List[MonthCalendar],
        summary: CalendarSummary,
        title: str = "Payroll Calendar",
        output_path: Optional[str] = None,
    ) -> str:
        """
        Export a printable HTML page with one grid per month.

        Args:
            months: Months to export.
            summary: Summary shown below the grids.
            title: Page heading.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "payroll_calendar", "html")

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.render_html(months, summary, title))

        logger.info(f"Exported printable calendar to: {file_path}")
        return str(file_path)

    def render_html(self, months: List[MonthCalendar], summary: CalendarSummary, title: str) -> str:
        """Build the printable HTML page as a string."""
        page = f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{html.escape(title)}</title>
    <style>{PRINT_CSS}</style>
</head>
<body>
    <h1>{html.escape(title)}</h1>
    <section class="calendar">
"""
        for month in months:
            page += self._month_html(month)

        page += f"""    </section>
    <div class="summary">{html.escape(summary_line(summary, self.currency_symbol))}</div>
</body>
</html>
"""
        return page

    def _month_html(self, month: MonthCalendar) -> str:
        cells = [f'<div class="daytitle">{d}</div>' for d in DAY_TITLES]
        cells.extend('<div class="daycell"></div>' for _ in range(month.first_weekday))

        for cell in month.days:
            classes = ["daycell"]
            content = f'<div class="date">{cell.day}</div>'
            if cell.holiday:
                classes.append("holiday")
                content += f'<div style="margin-top: 20px">{html.escape(cell.holiday)}</div>'
            if cell.is_payday:
                classes.append("payday")
                content += '<div class="paylabel">Payday</div>'
            cells.append(f'<div class="{" ".join(classes)}">{content}</div>')

        total = format_money(month.month_total, self.currency_symbol)
        return (
            f'        <article class="month">\n'
            f"            <h3>{html.escape(month.title)}</h3>\n"
            f'            <div class="grid">{"".join(cells)}</div>\n'
            f'            <div class="totals">Month total: {html.escape(total)}</div>\n'
            f"        </article>\n"
        )

    def _month_to_dict(self, month: MonthCalendar) -> dict:
        """
        Convert a MonthCalendar to a JSON-serializable dictionary.

        Args:
            month: MonthCalendar to convert.

        Returns:
            Dictionary representation.
        """
        return {
            "year": month.year,
            "month": month.month,
            "month_name": month.month_name,
            "first_weekday": month.first_weekday,
            "days_in_month": month.days_in_month,
            "holidays": {cell.day_date.isoformat(): cell.holiday for cell in month.holidays},
            "paydays": [cell.day_date.isoformat() for cell in month.paydays],
            "payday_count": month.payday_count,
            "month_total": month.month_total,
        }
