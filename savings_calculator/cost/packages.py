"""Service and package catalogue."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class ServiceType(Enum):
    """Fulfillment cost category."""

    STORAGE = "storage"
    HANDLING_IN = "handling_in"
    HANDLING_OUT = "handling_out"
    DELIVERY = "delivery"

    @property
    def label(self) -> str:
        """Display label, e.g. 'Handling In'."""
        return self.value.replace("_", " ").title()


class PackageType(Enum):
    """Named bundle of services offered by the provider."""

    FULFILLMENT = "fulfillment"
    STORE_PACK = "store-pack"
    SORT_PACK = "sort-pack"

    @property
    def config(self) -> "PackageConfig":
        return PACKAGES[self]

    @property
    def services(self) -> Tuple[ServiceType, ...]:
        return PACKAGES[self].services

    @property
    def label(self) -> str:
        return PACKAGES[self].label

    @property
    def short_label(self) -> str:
        """Tab label, e.g. 'Store & Pack'."""
        return PACKAGES[self].label.replace(" Package", "")


@dataclass(frozen=True)
class PackageConfig:
    """Definition of a package."""

    label: str
    description: str
    services: Tuple[ServiceType, ...]

    def includes(self, service: ServiceType) -> bool:
        return service in self.services


PACKAGES: Dict[PackageType, PackageConfig] = {
    PackageType.FULFILLMENT: PackageConfig(
        label="Fulfillment Package",
        description="Complete end-to-end service",
        services=(
            ServiceType.STORAGE,
            ServiceType.HANDLING_IN,
            ServiceType.HANDLING_OUT,
            ServiceType.DELIVERY,
        ),
    ),
    PackageType.STORE_PACK: PackageConfig(
        label="Store & Pack Package",
        description="Storage and packaging services",
        services=(
            ServiceType.STORAGE,
            ServiceType.HANDLING_IN,
            ServiceType.HANDLING_OUT,
        ),
    ),
    PackageType.SORT_PACK: PackageConfig(
        label="Sort & Pack Package",
        description="Sorting, packaging and delivery",
        services=(
            ServiceType.HANDLING_IN,
            ServiceType.HANDLING_OUT,
            ServiceType.DELIVERY,
        ),
    ),
}


def resolve_package(package: Union[PackageType, str]) -> PackageType:
    """Coerce a package identifier to PackageType.

    Raises:
        ValueError: If the identifier is not a known package
    """
    if isinstance(package, PackageType):
        return package
    return PackageType(package)
