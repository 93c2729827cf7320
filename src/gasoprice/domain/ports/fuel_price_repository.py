"""Fuel price repository port."""

from typing import Protocol

from gasoprice.domain.models.region import Municipality, Province
from gasoprice.domain.models.station import StationRecord
from gasoprice.domain.models.station_feed import StationFeed


class FuelPriceRepository(Protocol):
    """Port for retrieving stations and administrative regions.

    Every network operation raises FetchError on failure and is never retried.
    """

    async def fetch_stations(self) -> list[StationRecord]:
        """Fetch the full national station list."""
        ...

    async def fetch_station_feed(self) -> StationFeed:
        """Fetch the full station list together with the raw response body."""
        ...

    async def fetch_provinces(self) -> list[Province]:
        """Fetch all provinces."""
        ...

    async def fetch_municipalities(self, province_id: str) -> list[Municipality]:
        """Fetch the municipalities of a province."""
        ...

    async def fetch_stations_by_municipality(self, municipality_id: str) -> list[StationRecord]:
        """Fetch the stations of a single municipality."""
        ...

    def decode_stations(self, raw: bytes) -> list[StationRecord]:
        """Decode a raw station-list response body."""
        ...
