"""Ports (interfaces) for the ports-and-adapters architecture."""

from gasoprice.domain.ports.fuel_price_repository import FuelPriceRepository
from gasoprice.domain.ports.location_provider import LocationProvider

__all__ = [
    "FuelPriceRepository",
    "LocationProvider",
]
