"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from payroll_calendar.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

        logger.debug(f"Loaded config from: {config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        if "pay" in config:
            pay = config["pay"] or {}
            if "frequency" in pay:
                result["default_frequency"] = pay["frequency"]
            if "amount" in pay:
                result["default_amount"] = pay["amount"]
            if "currency_symbol" in pay:
                result["currency_symbol"] = pay["currency_symbol"]

        if "calendar" in config:
            cal = config["calendar"] or {}
            if "scroll_years" in cal:
                result["scroll_years"] = cal["scroll_years"]
            if "print_year_span" in cal:
                result["print_year_span"] = cal["print_year_span"]

        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - PAYROLL_CALENDAR_FREQUENCY -> default_frequency
        - PAYROLL_CALENDAR_AMOUNT -> default_amount
        - PAYROLL_CALENDAR_SCROLL_YEARS -> scroll_years
        - PAYROLL_CALENDAR_YEAR_SPAN -> print_year_span
        - PAYROLL_CALENDAR_CURRENCY -> currency_symbol
        - PAYROLL_CALENDAR_OUTPUT_FORMAT -> output_format
        - PAYROLL_CALENDAR_OUTPUT_DIRECTORY -> output_directory

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "PAYROLL_CALENDAR_FREQUENCY": "default_frequency",
            "PAYROLL_CALENDAR_AMOUNT": ("default_amount", float),
            "PAYROLL_CALENDAR_SCROLL_YEARS": ("scroll_years", int),
            "PAYROLL_CALENDAR_YEAR_SPAN": ("print_year_span", int),
            "PAYROLL_CALENDAR_CURRENCY": "currency_symbol",
            "PAYROLL_CALENDAR_OUTPUT_FORMAT": "output_format",
            "PAYROLL_CALENDAR_OUTPUT_DIRECTORY": "output_directory",
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
                    continue
            else:
                config_dict[mapping] = env_value
            logger.debug(f"Override from env: {env_var}")

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "pay": {
                "frequency": config.default_frequency.value,
                "amount": config.default_amount,
                "currency_symbol": config.currency_symbol,
            },
            "calendar": {
                "scroll_years": config.scroll_years,
                "print_year_span": config.print_year_span,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved configuration to: {output_path}")
