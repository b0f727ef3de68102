"""Operational assumptions used by the savings calculator.

All unit economics live here so they can be updated (or swapped for a YAML
file) without touching the calculation logic. The calculator never reads
these values from module state; callers pass an ``Assumptions`` instance in.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..utils.helpers import get_project_root, is_finite_number, load_yaml_file

logger = logging.getLogger(__name__)


class AssumptionsError(ValueError):
    """Raised when an assumptions table is malformed."""


@dataclass(frozen=True)
class StorageAssumptions:
    """Storage unit economics."""

    cost_per_sqm: float  # USD per sqm per month
    merchant_overhead_multiplier: float  # 1.25 = 25% overhead


@dataclass(frozen=True)
class HandlingInAssumptions:
    """Inbound handling unit economics (per item)."""

    labor_cost_per_minute: float
    merchant_time_per_item: float  # minutes
    roots_time_per_item: float  # minutes
    roots_efficiency_multiplier: float  # 0.85 = 15% cost reduction


@dataclass(frozen=True)
class HandlingOutAssumptions:
    """Outbound handling unit economics (per order)."""

    labor_cost_per_minute: float
    merchant_time_per_order: float  # minutes
    roots_time_per_order: float  # minutes
    roots_efficiency_multiplier: float


@dataclass(frozen=True)
class DeliveryAssumptions:
    """Flat delivery rates per order (Amman, 24 hours)."""

    merchant_cost_per_order: float
    roots_cost_per_order: float


@dataclass(frozen=True)
class OverheadAssumptions:
    """Overhead applied on top of each party's subtotal."""

    merchant_overhead_rate: float  # fraction of subtotal
    roots_overhead: float  # flat; usually 0 since Roots pricing includes it


@dataclass(frozen=True)
class Assumptions:
    """Complete, immutable assumptions table."""

    storage: StorageAssumptions
    handling_in: HandlingInAssumptions
    handling_out: HandlingOutAssumptions
    delivery: DeliveryAssumptions
    overhead: OverheadAssumptions

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Convert to nested dictionary."""
        return asdict(self)

    def merged_with(self, overrides: Dict[str, Any]) -> "Assumptions":
        """Return a copy with the given nested overrides applied.

        Args:
            overrides: Mapping of section name to a mapping of field overrides,
                       e.g. ``{"storage": {"cost_per_sqm": 15}}``

        Returns:
            New Assumptions instance

        Raises:
            AssumptionsError: On unknown sections/fields or non-numeric values
        """
        section_names = {f.name for f in fields(self)}
        updated = {}

        for section, values in overrides.items():
            if section not in section_names:
                raise AssumptionsError(f"Unknown assumptions section: {section}")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise AssumptionsError(f"Section '{section}' must be a mapping")

            current = getattr(self, section)
            allowed = {f.name for f in fields(current)}
            changes = {}
            for key, value in values.items():
                if key not in allowed:
                    raise AssumptionsError(f"Unknown field '{key}' in section '{section}'")
                if not is_finite_number(value):
                    raise AssumptionsError(
                        f"{section}.{key} must be a finite number, got {value!r}"
                    )
                changes[key] = float(value)
            updated[section] = replace(current, **changes)

        return replace(self, **updated)


DEFAULT_ASSUMPTIONS = Assumptions(
    storage=StorageAssumptions(
        cost_per_sqm=12,
        merchant_overhead_multiplier=1.25,
    ),
    handling_in=HandlingInAssumptions(
        labor_cost_per_minute=0.5,
        merchant_time_per_item=2,
        roots_time_per_item=1,
        roots_efficiency_multiplier=0.85,
    ),
    handling_out=HandlingOutAssumptions(
        labor_cost_per_minute=0.5,
        merchant_time_per_order=5,
        roots_time_per_order=3,
        roots_efficiency_multiplier=0.85,
    ),
    delivery=DeliveryAssumptions(
        merchant_cost_per_order=2.2,
        roots_cost_per_order=2.0,
    ),
    overhead=OverheadAssumptions(
        merchant_overhead_rate=0.2,
        roots_overhead=0,
    ),
)


def get_assumptions() -> Assumptions:
    """Get the compiled-in assumptions table."""
    return DEFAULT_ASSUMPTIONS


def load_assumptions(
    assumptions_path: Optional[Union[str, Path]] = None,
    base: Assumptions = DEFAULT_ASSUMPTIONS
) -> Assumptions:
    """Load an assumptions table from YAML, overlaid on a base table.

    Args:
        assumptions_path: Path to YAML file. If not provided, uses
                          config/assumptions.yaml when present
        base: Table that supplies values missing from the file

    Returns:
        Assumptions instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        AssumptionsError: If the file content is invalid
    """
    if assumptions_path is None:
        default_path = get_project_root() / "config" / "assumptions.yaml"
        if not default_path.exists():
            logger.debug("No assumptions file found, using compiled-in defaults")
            return base
        assumptions_path = default_path

    try:
        data = load_yaml_file(Path(assumptions_path))
    except ValueError as e:
        raise AssumptionsError(str(e)) from e

    assumptions = base.merged_with(data)
    logger.info(f"Loaded assumptions from {assumptions_path}")
    return assumptions
