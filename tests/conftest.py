"""Shared fixtures for calculator tests."""

from datetime import date

import pytest

from savings_calculator.config.assumptions import DEFAULT_ASSUMPTIONS
from savings_calculator.cost.calculator import MerchantInput, SavingsCalculator, compute_savings
from savings_calculator.cost.packages import PackageType


@pytest.fixture
def sample_input():
    """500 sqm, 1000 orders/month, 2 items/order."""
    return MerchantInput(warehouse_size=500, orders_per_month=1000, average_items_per_order=2)


@pytest.fixture
def calculator():
    return SavingsCalculator(DEFAULT_ASSUMPTIONS)


@pytest.fixture
def fulfillment_result(sample_input):
    return compute_savings(sample_input, PackageType.FULFILLMENT, DEFAULT_ASSUMPTIONS)


@pytest.fixture
def report_date():
    return date(2026, 10, 19)
