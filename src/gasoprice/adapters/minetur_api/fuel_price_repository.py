"""Fuel price repository adapter for the Ministry REST API."""

import logging

import aiohttp

from gasoprice.adapters.minetur_api.constants import (
    AGGREGATOR_STATIONS_PATH,
    MUNICIPALITIES_PATH,
    PROVINCES_PATH,
    STATIONS_BY_MUNICIPALITY_PATH,
    STATIONS_PATH,
)
from gasoprice.adapters.minetur_api.http_client import MineturHttpClient
from gasoprice.adapters.minetur_api.station_parser import StationParser
from gasoprice.domain.models.region import Municipality, Province
from gasoprice.domain.models.station import StationRecord
from gasoprice.domain.models.station_feed import StationFeed
from gasoprice.domain.ports.fuel_price_repository import FuelPriceRepository

logger = logging.getLogger(__name__)


class MineturFuelPriceRepository(FuelPriceRepository):
    """Adapter for the Ministry fuel price API, optionally behind a caching endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        aggregator_url: str | None = None,
        timeout_seconds: float = 60.0,
    ) -> None:
        """Initialize with an aiohttp session and endpoint URLs.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Ministry service base URL (no trailing slash).
            aggregator_url: Optional caching endpoint serving /fuel_stations.
                When set, the full station list is read from it.
            timeout_seconds: Total per-request timeout in seconds.
        """
        self._http_client = MineturHttpClient(session, timeout_seconds=timeout_seconds)
        self._base_url = base_url.rstrip("/")
        self._aggregator_url = aggregator_url.rstrip("/") if aggregator_url else None

    @property
    def stations_url(self) -> str:
        """URL of the full station list."""
        if self._aggregator_url:
            return f"{self._aggregator_url}{AGGREGATOR_STATIONS_PATH}"
        return f"{self._base_url}{STATIONS_PATH}"

    async def fetch_station_feed(self) -> StationFeed:
        """Fetch the full station list together with the raw body."""
        raw = await self._http_client.get(self.stations_url)
        stations = StationParser.parse_stations(raw)
        logger.info(f"Fetched {len(stations)} stations from {self.stations_url}")
        return StationFeed(stations=stations, raw=raw)

    async def fetch_stations(self) -> list[StationRecord]:
        """Fetch the full station list."""
        feed = await self.fetch_station_feed()
        return feed.stations

    async def fetch_provinces(self) -> list[Province]:
        """Fetch all provinces."""
        raw = await self._http_client.get(f"{self._base_url}{PROVINCES_PATH}")
        provinces = StationParser.parse_provinces(raw)
        logger.info(f"Fetched {len(provinces)} provinces")
        return provinces

    async def fetch_municipalities(self, province_id: str) -> list[Municipality]:
        """Fetch the municipalities of a province.

        Args:
            province_id: Province code (e.g. "28").
        """
        url = f"{self._base_url}{MUNICIPALITIES_PATH.format(province_id=province_id)}"
        raw = await self._http_client.get(url)
        municipalities = StationParser.parse_municipalities(raw, province_id)
        logger.info(f"Fetched {len(municipalities)} municipalities for province {province_id}")
        return municipalities

    async def fetch_stations_by_municipality(self, municipality_id: str) -> list[StationRecord]:
        """Fetch the stations of a municipality.

        Args:
            municipality_id: Municipality code (e.g. "4354").
        """
        path = STATIONS_BY_MUNICIPALITY_PATH.format(municipality_id=municipality_id)
        raw = await self._http_client.get(f"{self._base_url}{path}")
        stations = StationParser.parse_stations(raw)
        logger.info(f"Fetched {len(stations)} stations for municipality {municipality_id}")
        return stations

    def decode_stations(self, raw: bytes) -> list[StationRecord]:
        """Decode a cached station-list body."""
        return StationParser.parse_stations(raw)
