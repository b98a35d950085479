"""
CLI interface for the payroll calendar.
"""

import logging
import sys
from datetime import date
from typing import List, Optional

import click

from payroll_calendar.config.manager import ConfigManager
from payroll_calendar.core.calendar_builder import CalendarBuilder
from payroll_calendar.core.date_utils import parse_date_input
from payroll_calendar.core.holiday_calculator import holiday_list
from payroll_calendar.data.schemas import (
    CalendarRequest,
    CalendarSummary,
    Config,
    Frequency,
    MonthCalendar,
    RenderState,
)
from payroll_calendar.output.exporter import ResultExporter
from payroll_calendar.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def pay_options(func):
    """Options shared by every command that renders paydays."""
    options = [
        click.option(
            "--frequency", "-f",
            type=click.Choice([f.value for f in Frequency], case_sensitive=False),
            default=None,
            help="Pay frequency (default: from config)",
        ),
        click.option(
            "--last-payment", "-l",
            default=None,
            help="Last payment date (YYYY-MM-DD) the schedule is anchored at",
        ),
        click.option(
            "--amount", "-a",
            type=click.FloatRange(min=0),
            default=None,
            help="Amount paid on each payday (default: from config)",
        ),
        click.option(
            "--config", "-c",
            type=click.Path(exists=True),
            help="Path to config file (optional)",
        ),
        click.option(
            "--verbose", "-v",
            is_flag=True,
            default=False,
            help="Enable debug logging",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def output_options(func):
    """Options for choosing where a rendered calendar goes."""
    func = click.option(
        "--output", "-o",
        type=click.Path(),
        help="Output file path (optional)",
    )(func)
    func = click.option(
        "--format", "output_format",
        type=click.Choice(["console", "json", "csv", "html"]),
        default=None,
        help="Output format (default: from config)",
    )(func)
    return func


def build_request(
    cfg: Config,
    formatter: ConsoleFormatter,
    frequency: Optional[str],
    last_payment: Optional[str],
    amount: Optional[float],
) -> CalendarRequest:
    """Combine command-line values with configured defaults."""
    anchor = parse_date_input(last_payment)
    if last_payment and anchor is None:
        formatter.console.print(
            f"[yellow]Warning:[/yellow] Ignoring invalid last payment date {last_payment!r}, "
            f"no paydays will be shown."
        )

    return CalendarRequest(
        frequency=Frequency(frequency.lower()) if frequency else cfg.default_frequency,
        last_payment=anchor,
        amount=cfg.default_amount if amount is None else amount,
    )


def emit_calendar(
    months: List[MonthCalendar],
    summary: CalendarSummary,
    request: CalendarRequest,
    title: str,
    output_format: str,
    output: Optional[str],
    cfg: Config,
    formatter: ConsoleFormatter,
) -> None:
    """Print or export a rendered calendar."""
    if output_format == "console":
        formatter.print_calendar(months, title)
        formatter.print_summary(summary)
        return

    exporter = ResultExporter(
        output_directory=cfg.output_directory,
        currency_symbol=cfg.currency_symbol,
    )
    if output_format == "json":
        path = exporter.export_json(months, summary, request, output)
    elif output_format == "csv":
        path = exporter.export_csv(months, output)
    else:
        path = exporter.export_html(months, summary, title, output)
    formatter.print_success(f"Calendar saved to {path}")


@click.group()
@click.version_option(version="0.1.0", prog_name="payroll-calendar")
def main():
    """Payroll Calendar - Month grids with paydays, holidays and totals."""
    pass


@main.command()
@pay_options
@output_options
@click.option(
    "--start-year", "-s",
    type=int,
    default=None,
    help="First year of the scroll view (default: current year)",
)
@click.option(
    "--batches", "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of batches of years to render (each batch loads more years)",
)
def scroll(frequency, last_payment, amount, config, verbose, output_format, output, start_year, batches):
    """Render consecutive years, one batch at a time."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        cfg = ConfigManager(config).load_config()
        formatter = ConsoleFormatter(currency_symbol=cfg.currency_symbol)
        request = build_request(cfg, formatter, frequency, last_payment, amount)

        builder = CalendarBuilder(cfg)
        state = RenderState()
        builder.render_scroll(state, request, start_year)
        for _ in range(batches - 1):
            builder.load_more(state, request)

        years = sorted(state.rendered_years)
        title = f"Payroll Calendar {years[0]}-{years[-1]}"
        emit_calendar(
            state.months,
            builder.summarize(state.months),
            request,
            title,
            output_format or cfg.output_format,
            output,
            cfg,
            formatter,
        )

    except ValueError as e:
        ConsoleFormatter().print_error(str(e))
        sys.exit(1)
    except Exception as e:
        ConsoleFormatter().print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@pay_options
@output_options
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to render (default: current year)",
)
@click.option(
    "--any-year",
    is_flag=True,
    default=False,
    help="Allow years outside the configured print range",
)
def year(frequency, last_payment, amount, config, verbose, output_format, output, year, any_year):
    """Render the twelve months of one year for printing."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        cfg = ConfigManager(config).load_config()
        formatter = ConsoleFormatter(currency_symbol=cfg.currency_symbol)
        builder = CalendarBuilder(cfg)

        if year is None:
            year = date.today().year
        choices = builder.print_year_choices()
        if not any_year and year not in choices:
            formatter.print_error(
                f"Year must be between {choices[0]} and {choices[-1]} (use --any-year to override)"
            )
            sys.exit(1)

        request = build_request(cfg, formatter, frequency, last_payment, amount)
        months = builder.render_year(year, request)
        emit_calendar(
            months,
            builder.summarize(months),
            request,
            f"Payroll Calendar {year}",
            output_format or cfg.output_format,
            output,
            cfg,
            formatter,
        )

    except ValueError as e:
        ConsoleFormatter().print_error(str(e))
        sys.exit(1)
    except Exception as e:
        ConsoleFormatter().print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, output, config):
    """List the holidays of a year."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year

        cfg = ConfigManager(config).load_config()
        holiday_entries = holiday_list(year)
        formatter.print_holidays(year, holiday_entries)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays_csv(holiday_entries, output)
            formatter.print_success(f"Holidays saved to {path}")

    except Exception as e:
        formatter.print_error(f"Error: {e}")
        sys.exit(1)


@main.command()
@pay_options
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year of the month (default: current year)",
)
@click.option(
    "--month", "-m",
    type=click.IntRange(1, 12),
    default=None,
    help="Month number 1-12 (default: current month)",
)
def paydays(frequency, last_payment, amount, config, verbose, year, month):
    """List the paydays of one month with the month total."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        today = date.today()
        cfg = ConfigManager(config).load_config()
        formatter = ConsoleFormatter(currency_symbol=cfg.currency_symbol)
        request = build_request(cfg, formatter, frequency, last_payment, amount)

        builder = CalendarBuilder(cfg)
        month_calendar = builder.build_month(year or today.year, month or today.month, request)
        formatter.print_paydays(month_calendar)

    except ValueError as e:
        ConsoleFormatter().print_error(str(e))
        sys.exit(1)
    except Exception as e:
        ConsoleFormatter().print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


if __name__ == "__main__":
    main()
