"""Domain layer - core business logic and models."""

from gasoprice.domain.models import (
    Coordinate,
    FuelType,
    Municipality,
    Province,
    StationRecord,
)
from gasoprice.domain.ports import (
    FuelPriceRepository,
    LocationProvider,
)

__all__ = [
    "Coordinate",
    "FuelPriceRepository",
    "FuelType",
    "LocationProvider",
    "Municipality",
    "Province",
    "StationRecord",
]
