"""Ministry fuel price API adapter."""

from gasoprice.adapters.minetur_api.fuel_price_repository import MineturFuelPriceRepository
from gasoprice.adapters.minetur_api.http_client import MineturHttpClient
from gasoprice.adapters.minetur_api.station_parser import StationParser

__all__ = ["MineturFuelPriceRepository", "MineturHttpClient", "StationParser"]
