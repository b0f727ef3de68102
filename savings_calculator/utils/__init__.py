"""Utility functions."""

from .helpers import format_currency, format_percentage, load_config, setup_logging

__all__ = ["format_currency", "format_percentage", "load_config", "setup_logging"]
