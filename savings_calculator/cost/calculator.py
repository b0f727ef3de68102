"""Merchant vs. Roots fulfillment cost comparison."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..config.assumptions import Assumptions, get_assumptions
from ..utils.helpers import safe_percentage
from .packages import PackageConfig, PackageType, ServiceType, resolve_package

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class MerchantInput:
    """Warehouse metrics entered by the merchant."""

    warehouse_size: float = 0.0  # sqm
    orders_per_month: float = 0.0
    average_items_per_order: float = 0.0

    @property
    def total_items(self) -> float:
        """Items handled per month."""
        return self.orders_per_month * self.average_items_per_order

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            "warehouse_size": self.warehouse_size,
            "orders_per_month": self.orders_per_month,
            "average_items_per_order": self.average_items_per_order,
        }


@dataclass(frozen=True)
class PartyCost:
    """Monthly cost breakdown for one party."""

    service_costs: Dict[ServiceType, float]
    overhead: float
    total: float

    @property
    def subtotal(self) -> float:
        return sum(self.service_costs.values())

    def cost_of(self, service: ServiceType) -> float:
        return self.service_costs.get(service, 0.0)

    @property
    def storage(self) -> float:
        return self.cost_of(ServiceType.STORAGE)

    @property
    def handling_in(self) -> float:
        return self.cost_of(ServiceType.HANDLING_IN)

    @property
    def handling_out(self) -> float:
        return self.cost_of(ServiceType.HANDLING_OUT)

    @property
    def delivery(self) -> float:
        return self.cost_of(ServiceType.DELIVERY)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        result = {service.value: round(cost, 2) for service, cost in self.service_costs.items()}
        result["overhead"] = round(self.overhead, 2)
        result["total"] = round(self.total, 2)
        return result


@dataclass(frozen=True)
class SavingsSummary:
    """Savings of the alternate provider relative to the merchant."""

    monthly: float
    yearly: float
    percentage: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            "monthly": round(self.monthly, 2),
            "yearly": round(self.yearly, 2),
            "percentage": round(self.percentage, 1),
        }


@dataclass(frozen=True)
class ServiceSavings:
    """Cost comparison for a single included service."""

    service: ServiceType
    merchant_cost: float
    alternate_cost: float

    @property
    def savings(self) -> float:
        return self.merchant_cost - self.alternate_cost

    @property
    def savings_pct(self) -> float:
        return safe_percentage(self.savings, self.merchant_cost)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "service": self.service.value,
            "label": self.service.label,
            "merchant_cost": round(self.merchant_cost, 2),
            "alternate_cost": round(self.alternate_cost, 2),
            "savings": round(self.savings, 2),
            "savings_pct": round(self.savings_pct, 1),
        }


@dataclass(frozen=True)
class CostComparisonResult:
    """Full comparison for one package."""

    package: PackageType
    merchant: PartyCost
    alternate: PartyCost
    savings: SavingsSummary

    @property
    def package_config(self) -> PackageConfig:
        return self.package.config

    def service_savings(self) -> List[ServiceSavings]:
        """Per-service comparison for included services, in package order."""
        return [
            ServiceSavings(
                service=service,
                merchant_cost=self.merchant.cost_of(service),
                alternate_cost=self.alternate.cost_of(service),
            )
            for service in self.package.services
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "package": self.package.value,
            "package_label": self.package.label,
            "merchant_cost": self.merchant.to_dict(),
            "roots_cost": self.alternate.to_dict(),
            "savings": self.savings.to_dict(),
            "services": [s.to_dict() for s in self.service_savings()],
        }


# Each returns (merchant cost, Roots cost) for one month.
ServiceCostFunction = Callable[[MerchantInput, Assumptions], Tuple[float, float]]


def _storage_cost(merchant_input: MerchantInput, assumptions: Assumptions) -> Tuple[float, float]:
    storage = assumptions.storage
    base = merchant_input.warehouse_size * storage.cost_per_sqm
    return base * storage.merchant_overhead_multiplier, base


def _handling_in_cost(merchant_input: MerchantInput, assumptions: Assumptions) -> Tuple[float, float]:
    handling = assumptions.handling_in
    total_items = merchant_input.total_items

    merchant_minutes = total_items * handling.merchant_time_per_item
    roots_minutes = total_items * handling.roots_time_per_item

    return (
        merchant_minutes * handling.labor_cost_per_minute,
        roots_minutes * handling.labor_cost_per_minute * handling.roots_efficiency_multiplier,
    )


def _handling_out_cost(merchant_input: MerchantInput, assumptions: Assumptions) -> Tuple[float, float]:
    handling = assumptions.handling_out
    orders = merchant_input.orders_per_month

    merchant_minutes = orders * handling.merchant_time_per_order
    roots_minutes = orders * handling.roots_time_per_order

    return (
        merchant_minutes * handling.labor_cost_per_minute,
        roots_minutes * handling.labor_cost_per_minute * handling.roots_efficiency_multiplier,
    )


def _delivery_cost(merchant_input: MerchantInput, assumptions: Assumptions) -> Tuple[float, float]:
    delivery = assumptions.delivery
    orders = merchant_input.orders_per_month
    return orders * delivery.merchant_cost_per_order, orders * delivery.roots_cost_per_order


SERVICE_COST_FUNCTIONS: Dict[ServiceType, ServiceCostFunction] = {
    ServiceType.STORAGE: _storage_cost,
    ServiceType.HANDLING_IN: _handling_in_cost,
    ServiceType.HANDLING_OUT: _handling_out_cost,
    ServiceType.DELIVERY: _delivery_cost,
}


def compute_savings(
    merchant_input: MerchantInput,
    package: Union[PackageType, str],
    assumptions: Assumptions
) -> CostComparisonResult:
    """Compare merchant and Roots monthly costs for a package.

    Services outside the package cost 0 for both parties. Merchant
    overhead is a rate on its subtotal; Roots overhead is a flat amount
    because Roots unit prices already include it.

    Args:
        merchant_input: Warehouse metrics
        package: Package to evaluate
        assumptions: Unit economics to apply

    Returns:
        CostComparisonResult
    """
    package = resolve_package(package)

    merchant_costs = {service: 0.0 for service in ServiceType}
    roots_costs = {service: 0.0 for service in ServiceType}

    for service in package.services:
        merchant_cost, roots_cost = SERVICE_COST_FUNCTIONS[service](merchant_input, assumptions)
        merchant_costs[service] = merchant_cost
        roots_costs[service] = roots_cost

    merchant_subtotal = sum(merchant_costs.values())
    merchant_overhead = merchant_subtotal * assumptions.overhead.merchant_overhead_rate
    merchant_total = merchant_subtotal + merchant_overhead

    roots_subtotal = sum(roots_costs.values())
    roots_overhead = assumptions.overhead.roots_overhead
    roots_total = roots_subtotal + roots_overhead

    monthly_savings = merchant_total - roots_total

    result = CostComparisonResult(
        package=package,
        merchant=PartyCost(
            service_costs=merchant_costs,
            overhead=merchant_overhead,
            total=merchant_total,
        ),
        alternate=PartyCost(
            service_costs=roots_costs,
            overhead=roots_overhead,
            total=roots_total,
        ),
        savings=SavingsSummary(
            monthly=monthly_savings,
            yearly=monthly_savings * MONTHS_PER_YEAR,
            percentage=safe_percentage(monthly_savings, merchant_total),
        ),
    )

    logger.debug(
        f"{package.value}: merchant ${merchant_total:,.2f} vs Roots ${roots_total:,.2f} "
        f"({result.savings.percentage:.1f}% savings)"
    )
    return result


class SavingsCalculator:
    """Evaluate packages against a bound assumptions table.

    Thin wrapper around ``compute_savings`` for front ends that compare
    every package at once.
    """

    def __init__(self, assumptions: Optional[Assumptions] = None):
        """Initialize the calculator.

        Args:
            assumptions: Assumptions table (defaults to the compiled-in table)
        """
        self.assumptions = assumptions if assumptions is not None else get_assumptions()

    def calculate(
        self,
        merchant_input: MerchantInput,
        package: Union[PackageType, str] = PackageType.FULFILLMENT
    ) -> CostComparisonResult:
        """Compare costs for a single package."""
        return compute_savings(merchant_input, package, self.assumptions)

    def compare_packages(self, merchant_input: MerchantInput) -> Dict[PackageType, CostComparisonResult]:
        """Compare costs for every package.

        Args:
            merchant_input: Warehouse metrics

        Returns:
            Results keyed by package, in catalogue order
        """
        return {package: self.calculate(merchant_input, package) for package in PackageType}

    def get_package_summary(
        self,
        results: Dict[PackageType, CostComparisonResult]
    ) -> List[Dict[str, Any]]:
        """Summarize totals and savings per package.

        Args:
            results: Output of compare_packages

        Returns:
            One row per package
        """
        rows = []
        for package, result in results.items():
            rows.append({
                "package": package.value,
                "label": package.label,
                "merchant_total": round(result.merchant.total, 2),
                "roots_total": round(result.alternate.total, 2),
                "monthly_savings": round(result.savings.monthly, 2),
                "yearly_savings": round(result.savings.yearly, 2),
                "savings_pct": round(result.savings.percentage, 1),
            })
        return rows

    def generate_timeline(
        self,
        result: CostComparisonResult,
        months: int = MONTHS_PER_YEAR
    ) -> List[Dict[str, Any]]:
        """Generate a cumulative savings projection.

        Args:
            result: Comparison result for a package
            months: Number of months to project

        Returns:
            List of monthly projections
        """
        timeline = []
        cumulative = 0.0

        for month in range(1, months + 1):
            cumulative += result.savings.monthly
            timeline.append({
                "month": month,
                "monthly_savings": round(result.savings.monthly, 2),
                "cumulative_savings": round(cumulative, 2),
            })

        return timeline
