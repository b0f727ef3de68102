"""Cost comparison modules."""

from .calculator import (
    CostComparisonResult,
    MerchantInput,
    PartyCost,
    SavingsCalculator,
    SavingsSummary,
    ServiceSavings,
    compute_savings,
)
from .packages import PACKAGES, PackageConfig, PackageType, ServiceType

__all__ = [
    "CostComparisonResult",
    "MerchantInput",
    "PartyCost",
    "SavingsCalculator",
    "SavingsSummary",
    "ServiceSavings",
    "compute_savings",
    "PACKAGES",
    "PackageConfig",
    "PackageType",
    "ServiceType",
]
