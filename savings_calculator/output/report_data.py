"""Tabular views of comparison results for charts and spreadsheets."""

from typing import Dict, List

import pandas as pd

from ..cost.calculator import CostComparisonResult, SavingsCalculator
from ..cost.packages import PackageType
from ..utils.helpers import safe_percentage

BREAKDOWN_COLUMNS = ["Service", "Your Cost", "Roots Cost", "Savings", "Savings %"]


def build_breakdown_frame(
    result: CostComparisonResult,
    include_totals: bool = False
) -> pd.DataFrame:
    """Per-service comparison for one package.

    Args:
        result: Comparison result
        include_totals: Append Overhead and Total rows

    Returns:
        DataFrame with BREAKDOWN_COLUMNS
    """
    rows = [
        {
            "Service": line.service.label,
            "Your Cost": line.merchant_cost,
            "Roots Cost": line.alternate_cost,
            "Savings": line.savings,
            "Savings %": line.savings_pct,
        }
        for line in result.service_savings()
    ]

    if include_totals:
        overhead_savings = result.merchant.overhead - result.alternate.overhead
        rows.append({
            "Service": "Overhead",
            "Your Cost": result.merchant.overhead,
            "Roots Cost": result.alternate.overhead,
            "Savings": overhead_savings,
            "Savings %": safe_percentage(overhead_savings, result.merchant.overhead),
        })
        rows.append({
            "Service": "Total",
            "Your Cost": result.merchant.total,
            "Roots Cost": result.alternate.total,
            "Savings": result.savings.monthly,
            "Savings %": result.savings.percentage,
        })

    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def build_package_frame(
    calculator: SavingsCalculator,
    results: Dict[PackageType, CostComparisonResult]
) -> pd.DataFrame:
    """One row per package with totals and savings."""
    return pd.DataFrame(calculator.get_package_summary(results))


def build_timeline_frame(timeline: List[Dict[str, float]]) -> pd.DataFrame:
    """Cumulative savings projection as a DataFrame."""
    return pd.DataFrame(timeline, columns=["month", "monthly_savings", "cumulative_savings"])
