"""Tests for the Ministry API HTTP client and repository."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from sample_data import api_station, station_list_body

from gasoprice.adapters.minetur_api import MineturFuelPriceRepository, MineturHttpClient
from gasoprice.domain.errors import DecodeError, NetworkError
from gasoprice.domain.models import Municipality, Province

BASE_URL = "https://example.test/PreciosCarburantes"


def _response_context(status: int, body: bytes) -> MagicMock:
    """Async context manager yielding a fake aiohttp response."""
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "application/json"}
    response.read = AsyncMock(return_value=body)
    response.text = AsyncMock(return_value=body.decode("utf-8", errors="replace"))

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def _session(routes: dict[str, tuple[int, bytes]]) -> MagicMock:
    """Session whose get() answers from a URL -> (status, body) table."""
    session = MagicMock()
    session.get = MagicMock(side_effect=lambda url, **_: _response_context(*routes[url]))
    return session


class TestMineturHttpClient:
    """Tests for MineturHttpClient."""

    @pytest.mark.asyncio
    async def test_when_ok_then_returns_body(self) -> None:
        """Given a 200 response, when getting, then returns the raw body."""
        session = _session({f"{BASE_URL}/x": (200, b"payload")})
        client = MineturHttpClient(session, timeout_seconds=5)

        body = await client.get(f"{BASE_URL}/x")

        assert body == b"payload"
        _, kwargs = session.get.call_args
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["timeout"].total == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 500, 503])
    async def test_when_error_status_then_raises_network_error(self, status: int) -> None:
        """Given a non-2xx response, when getting, then raises NetworkError with the status."""
        client = MineturHttpClient(_session({"u": (status, b"Service Unavailable")}))

        with pytest.raises(NetworkError) as exc_info:
            await client.get("u")

        assert exc_info.value.status_code == status
        assert f"HTTP {status}" in exc_info.value.cause

    @pytest.mark.asyncio
    async def test_when_connection_fails_then_raises_network_error(self) -> None:
        """Given a connection error, when getting, then raises NetworkError without status."""
        session = MagicMock()
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client = MineturHttpClient(session)

        with pytest.raises(NetworkError, match="Could not reach") as exc_info:
            await client.get("u")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_when_timeout_then_raises_network_error(self) -> None:
        """Given a timeout, when getting, then raises NetworkError."""
        context = MagicMock()
        context.__aenter__ = AsyncMock(side_effect=asyncio.TimeoutError())
        context.__aexit__ = AsyncMock(return_value=False)
        session = MagicMock()
        session.get = MagicMock(return_value=context)
        client = MineturHttpClient(session)

        with pytest.raises(NetworkError, match="Timed out"):
            await client.get("u")


class TestMineturFuelPriceRepository:
    """Tests for MineturFuelPriceRepository."""

    @pytest.mark.asyncio
    async def test_fetch_station_feed_returns_stations_and_raw(self, madrid_body: bytes) -> None:
        """Given the station endpoint, when fetching the feed, then returns decoded and raw."""
        session = _session({f"{BASE_URL}/EstacionesTerrestres/": (200, madrid_body)})
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        feed = await repository.fetch_station_feed()

        assert feed.raw == madrid_body
        assert [s.name for s in feed.stations][:2] == ["CEPSA SOL", "REPSOL RETIRO"]
        assert len(await repository.fetch_stations()) == 4

    @pytest.mark.asyncio
    async def test_aggregator_url_is_used_for_station_list(self, madrid_body: bytes) -> None:
        """Given an aggregator URL, when fetching stations, then reads /fuel_stations from it."""
        session = _session({"https://cache.example.test/fuel_stations": (200, madrid_body)})
        repository = MineturFuelPriceRepository(
            session, base_url=BASE_URL, aggregator_url="https://cache.example.test/"
        )

        stations = await repository.fetch_stations()

        assert len(stations) == 4
        assert repository.stations_url == "https://cache.example.test/fuel_stations"

    @pytest.mark.asyncio
    async def test_when_body_malformed_then_raises_decode_error(self) -> None:
        """Given a non-JSON body, when fetching, then raises DecodeError."""
        session = _session({f"{BASE_URL}/EstacionesTerrestres/": (200, b"<html>")})
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        with pytest.raises(DecodeError):
            await repository.fetch_station_feed()

    @pytest.mark.asyncio
    async def test_fetch_provinces(self) -> None:
        """Given the province endpoint, when fetching, then returns provinces."""
        body = json.dumps([{"IDPovincia": "28", "Provincia": "MADRID"}]).encode()
        session = _session({f"{BASE_URL}/Listados/Provincias/": (200, body)})
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        assert await repository.fetch_provinces() == [Province(id="28", name="MADRID")]

    @pytest.mark.asyncio
    async def test_fetch_municipalities(self) -> None:
        """Given a province id, when fetching municipalities, then uses the province path."""
        body = json.dumps([{"IDMunicipio": "4354", "Municipio": "Madrid"}]).encode()
        session = _session({f"{BASE_URL}/Listados/MunicipiosPorProvincia/28": (200, body)})
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        municipalities = await repository.fetch_municipalities("28")

        assert municipalities == [Municipality(id="4354", name="Madrid", province_id="28")]

    @pytest.mark.asyncio
    async def test_fetch_stations_by_municipality(self) -> None:
        """Given a municipality id, when fetching stations, then uses the filter path."""
        body = station_list_body(api_station("GALP", "40,4", "-3,7"), bom=True)
        session = _session(
            {f"{BASE_URL}/EstacionesTerrestres/FiltroMunicipio/4354": (200, body)}
        )
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        stations = await repository.fetch_stations_by_municipality("4354")

        assert [s.name for s in stations] == ["GALP"]

    @pytest.mark.asyncio
    async def test_http_failure_propagates(self) -> None:
        """Given a 503, when fetching provinces, then NetworkError propagates."""
        session = _session({f"{BASE_URL}/Listados/Provincias/": (503, b"")})
        repository = MineturFuelPriceRepository(session, base_url=BASE_URL)

        with pytest.raises(NetworkError):
            await repository.fetch_provinces()

    def test_decode_stations(self, madrid_body: bytes) -> None:
        """Given a cached body, when decoding, then returns stations without network."""
        repository = MineturFuelPriceRepository(MagicMock(), base_url=BASE_URL)

        assert len(repository.decode_stations(madrid_body)) == 4


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_provinces_and_madrid_municipalities() -> None:
    """Fetch provinces and the municipalities of Madrid from the live service."""
    from gasoprice.adapters.config import AppConfig

    config = AppConfig.for_testing()
    async with aiohttp.ClientSession() as session:
        repository = MineturFuelPriceRepository(session, base_url=config.api_base_url)

        provinces = await repository.fetch_provinces()
        assert any(p.id == "28" for p in provinces)

        municipalities = await repository.fetch_municipalities("28")
        assert any(m.name == "Madrid" for m in municipalities)
