"""
Output formatting and export functionality.
"""

from payroll_calendar.output.formatter import ConsoleFormatter
from payroll_calendar.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
