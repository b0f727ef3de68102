"""Coerce raw form values into merchant input."""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from ..cost.calculator import MerchantInput

logger = logging.getLogger(__name__)

# Leading decimal number, same prefix rule as a browser number field
_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True)
class InputField:
    """Presentation metadata for one input field."""

    key: str
    label: str
    placeholder: str
    step: float


INPUT_FIELDS: Dict[str, InputField] = {
    "warehouse_size": InputField(
        key="warehouse_size",
        label="Warehouse Size (sqm)",
        placeholder="e.g., 500",
        step=1.0,
    ),
    "orders_per_month": InputField(
        key="orders_per_month",
        label="Orders per Month",
        placeholder="e.g., 1000",
        step=1.0,
    ),
    "average_items_per_order": InputField(
        key="average_items_per_order",
        label="Average Items per Order",
        placeholder="e.g., 2",
        step=0.1,
    ),
}


def parse_number(value: Any) -> float:
    """Convert a form value to a finite float, falling back to 0.

    Strings are read up to the first character that cannot be part of
    a number ("12.5 sqm" -> 12.5). Empty, non-numeric, NaN and infinite
    values become 0.

    Args:
        value: Raw value from a form or command line

    Returns:
        Parsed number
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value).strip())
        if not match:
            return 0.0
        number = float(match.group(0))

    if not math.isfinite(number):
        return 0.0
    return number


def parse_merchant_input(raw: Mapping[str, Any]) -> MerchantInput:
    """Build a MerchantInput from raw field values.

    Args:
        raw: Mapping keyed by INPUT_FIELDS keys; missing keys count as 0

    Returns:
        MerchantInput
    """
    merchant_input = MerchantInput(
        warehouse_size=parse_number(raw.get("warehouse_size")),
        orders_per_month=parse_number(raw.get("orders_per_month")),
        average_items_per_order=parse_number(raw.get("average_items_per_order")),
    )
    logger.debug(f"Parsed merchant input: {merchant_input.to_dict()}")
    return merchant_input


def can_calculate(merchant_input: MerchantInput) -> bool:
    """Whether the Calculate action is allowed (all fields positive)."""
    return (
        merchant_input.warehouse_size > 0
        and merchant_input.orders_per_month > 0
        and merchant_input.average_items_per_order > 0
    )


def missing_fields(merchant_input: MerchantInput) -> List[str]:
    """Labels of the fields that still block the Calculate action."""
    values = merchant_input.to_dict()
    return [field.label for key, field in INPUT_FIELDS.items() if not values[key] > 0]
