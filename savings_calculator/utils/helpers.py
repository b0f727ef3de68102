"""Utility functions for configuration, logging, and number formatting."""

import logging
import math
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the main configuration file.

    Args:
        config_path: Optional path to config file. If not provided,
                     uses default config/config.yaml

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        config_path = get_project_root() / "config" / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Read a YAML mapping from disk.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed mapping (empty if the file is empty)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}, got {type(data).__name__}")
    return data


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Optional custom log format
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger("savings_calculator")
    logger.setLevel(getattr(logging, level.upper()))

    # Repeated calls (Streamlit reruns) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    return logger


def format_number(value: float, max_decimals: int = 2) -> str:
    """Format a number with thousands separators and at most N decimals.

    Trailing zeros in the fraction are dropped, so 7500.0 renders as
    "7,500" and 1275.5 as "1,275.5".

    Args:
        value: Number to format
        max_decimals: Maximum number of fraction digits

    Returns:
        Formatted number string
    """
    text = f"{value:,.{max_decimals}f}"
    if max_decimals > 0:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_currency(amount: float, symbol: str = "$", max_decimals: int = 2) -> str:
    """Format a number as currency.

    Args:
        amount: Amount to format
        symbol: Currency symbol prefix
        max_decimals: Maximum number of fraction digits

    Returns:
        Formatted currency string, e.g. "$6,915"
    """
    return f"{symbol}{format_number(amount, max_decimals)}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage value that is already on the 0-100 scale.

    Args:
        value: Percentage value (e.g. 40.58)
        decimals: Number of decimal places

    Returns:
        Formatted percentage string, e.g. "40.6%"
    """
    return f"{value:.{decimals}f}%"


def safe_percentage(part: float, whole: float) -> float:
    """Return part / whole * 100, or 0 when whole is not positive."""
    return (part / whole * 100) if whole > 0 else 0.0


def is_finite_number(value: Any) -> bool:
    """Check that a value is a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def format_long_date(day: date) -> str:
    """Format a date as 'October 19, 2026'."""
    return f"{day:%B} {day.day}, {day.year}"
