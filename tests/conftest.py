"""Shared fixtures."""

from typing import Any

import pytest
from sample_data import SOL, api_station, station_list_body

from gasoprice.domain.models import Coordinate


@pytest.fixture
def sol() -> Coordinate:
    return SOL


@pytest.fixture
def madrid_entries() -> list[dict[str, Any]]:
    """Three stations at roughly 0.2 km, 2.5 km and 7 km from Sol, plus one unlocatable."""
    return [
        api_station("CEPSA SOL", "40,418000", "-3,705000", diesel="1,499"),
        api_station("REPSOL RETIRO", "40,410000", "-3,676000", diesel="1,389"),
        api_station("BP HORTALEZA", "40,470000", "-3,660000", diesel="1,429"),
        api_station("SIN COORDENADAS", "", "", diesel="1,299"),
    ]


@pytest.fixture
def madrid_body(madrid_entries: list[dict[str, Any]]) -> bytes:
    return station_list_body(*madrid_entries)
