"""
Console output formatting using Rich.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from payroll_calendar.data.schemas import CalendarSummary, Holiday, MonthCalendar

DAY_TITLES = ["S", "M", "T", "W", "T", "F", "S"]
WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def format_money(value: float, symbol: str = "$") -> str:
    """Format an amount with two decimals, e.g. ``$1250.00``."""
    return f"{symbol}{value:.2f}"


def summary_line(summary: CalendarSummary, symbol: str = "$") -> str:
    """Sentence describing the rendered months and their combined total."""
    return (
        f"Rendered months: {summary.rendered_months}. "
        f"Current displayed total (sum of month totals): {format_money(summary.total, symbol)}."
    )


class ConsoleFormatter:
    """Formats payroll calendars for console display using Rich."""

    def __init__(self, console: Optional[Console] = None, currency_symbol: str = "$"):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to (a new one if not provided).
            currency_symbol: Prefix for formatted amounts.
        """
        self.console = console or Console()
        self.currency_symbol = currency_symbol

    def month_table(self, month: MonthCalendar) -> Table:
        """
        Build the Sunday-first grid of a month.

        Holidays are shown in red with their name, paydays in green.
        """
        table = Table(title=f"[bold]{month.title}[/bold]", show_lines=True)
        for title in DAY_TITLES:
            table.add_column(title, justify="left", width=12)

        row: List[Text] = [Text("") for _ in range(month.first_weekday)]
        for cell in month.days:
            text = Text(str(cell.day), style="bold")
            if cell.holiday:
                text.stylize("red")
                text.append(f"\n{cell.holiday}", style="red")
            if cell.is_payday:
                text.stylize("green")
                text.append("\nPayday", style="bold green")
            row.append(text)
            if len(row) == 7:
                table.add_row(*row)
                row = []
        if row:
            row.extend(Text("") for _ in range(7 - len(row)))
            table.add_row(*row)

        table.caption = f"Month total: {format_money(month.month_total, self.currency_symbol)}"
        return table

    def print_month(self, month: MonthCalendar) -> None:
        """
        Print a single month grid.

        Args:
            month: MonthCalendar to display.
        """
        self.console.print(self.month_table(month))
        self.console.print()

    def print_calendar(self, months: List[MonthCalendar], title: str) -> None:
        """
        Print a run of months under a heading.

        Args:
            months: Months to display, in order.
            title: Heading for the calendar.
        """
        self.console.print()
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print()

        for month in months:
            self.print_month(month)

    def print_summary(self, summary: CalendarSummary) -> None:
        """Print the rendered-months summary."""
        self.console.print(
            Panel(summary_line(summary, self.currency_symbol), title="[bold]Summary[/bold]")
        )

    def print_holidays(self, year: int, holidays: List[Holiday]) -> None:
        """
        Print a table of holidays for a year.

        Args:
            year: Year the holidays belong to.
            holidays: Holidays to display.
        """
        table = Table(title=f"[bold]Holidays {year}[/bold]")
        table.add_column("Date", style="cyan", width=12)
        table.add_column("Day", style="dim", width=12)
        table.add_column("Name", style="white")

        for holiday in holidays:
            table.add_row(
                holiday.holiday_date.isoformat(),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
            )

        self.console.print(table)

    def print_paydays(self, month: MonthCalendar) -> None:
        """
        Print the paydays of a month with the month total.

        Args:
            month: MonthCalendar whose paydays are listed.
        """
        if not month.paydays:
            self.console.print(f"[dim]No paydays in {month.title}.[/dim]")
            return

        table = Table(title=f"[bold]Paydays {month.title}[/bold]")
        table.add_column("Date", style="cyan", width=12)
        table.add_column("Day", style="dim", width=12)
        table.add_column("Note", style="white")

        for cell in month.paydays:
            table.add_row(
                cell.day_date.isoformat(),
                WEEKDAY_NAMES[cell.day_date.weekday()],
                cell.holiday or "",
            )

        self.console.print(table)
        self.console.print(
            Text(
                f"Month total: {format_money(month.month_total, self.currency_symbol)}",
                style="bold green",
            )
        )

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
