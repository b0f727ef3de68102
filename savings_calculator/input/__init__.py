"""Input handling for the calculator form."""

from .form import INPUT_FIELDS, can_calculate, missing_fields, parse_merchant_input, parse_number

__all__ = ["INPUT_FIELDS", "can_calculate", "missing_fields", "parse_merchant_input", "parse_number"]
