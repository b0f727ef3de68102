"""Assumptions configuration."""

from .assumptions import (
    DEFAULT_ASSUMPTIONS,
    Assumptions,
    AssumptionsError,
    get_assumptions,
    load_assumptions,
)

__all__ = [
    "DEFAULT_ASSUMPTIONS",
    "Assumptions",
    "AssumptionsError",
    "get_assumptions",
    "load_assumptions",
]
