"""Tests for form input handling."""

import pytest

from savings_calculator.cost.calculator import MerchantInput
from savings_calculator.input.form import (
    INPUT_FIELDS,
    can_calculate,
    missing_fields,
    parse_merchant_input,
    parse_number,
)


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize("raw,expected", [
        ("500", 500.0),
        ("2.5", 2.5),
        (" 12 ", 12.0),
        ("12.5 sqm", 12.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-4", -4.0),
        (7, 7.0),
        (1.25, 1.25),
    ])
    def test_valid_values(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "sqm 12", None, True, float("nan"), float("inf"), "inf"])
    def test_invalid_values_become_zero(self, raw):
        assert parse_number(raw) == 0.0


class TestParseMerchantInput:
    """Tests for parse_merchant_input."""

    def test_full_form(self):
        merchant_input = parse_merchant_input({
            "warehouse_size": "500",
            "orders_per_month": "1000",
            "average_items_per_order": "2",
        })

        assert merchant_input == MerchantInput(500, 1000, 2)
        assert merchant_input.total_items == 2000

    def test_missing_fields_default_to_zero(self):
        merchant_input = parse_merchant_input({"warehouse_size": "250"})

        assert merchant_input.warehouse_size == 250
        assert merchant_input.orders_per_month == 0
        assert merchant_input.average_items_per_order == 0


class TestCanCalculate:
    """Tests for the Calculate gate."""

    def test_all_positive(self):
        assert can_calculate(MerchantInput(500, 1000, 2)) is True

    @pytest.mark.parametrize("values", [(0, 1000, 2), (500, 0, 2), (500, 1000, 0), (0, 0, 0)])
    def test_any_zero_blocks(self, values):
        assert can_calculate(MerchantInput(*values)) is False

    def test_negative_blocks(self):
        assert can_calculate(MerchantInput(-1, 1000, 2)) is False

    def test_missing_fields_lists_labels(self):
        assert missing_fields(MerchantInput(500, 0, 0)) == [
            INPUT_FIELDS["orders_per_month"].label,
            INPUT_FIELDS["average_items_per_order"].label,
        ]
        assert missing_fields(MerchantInput(1, 1, 1)) == []
