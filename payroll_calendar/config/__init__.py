"""
Configuration loading for the payroll calendar.
"""

from payroll_calendar.config.manager import ConfigManager

__all__ = ["ConfigManager"]
