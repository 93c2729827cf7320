"""Tests for StationParser."""

import json

import pytest
from sample_data import api_station, make_station, station_list_body

from gasoprice.adapters.minetur_api import StationParser
from gasoprice.adapters.minetur_api.constants import STATION_FIELD_MAP
from gasoprice.domain.errors import DecodeError, FetchError
from gasoprice.domain.models import Municipality, Province


class TestParseStations:
    """Tests for station-list decoding."""

    def test_when_valid_body_then_maps_api_fields(self) -> None:
        """Given a station-list body, when parsing, then API keys map to record fields."""
        body = station_list_body(api_station("CEPSA", "40,418000", "-3,705000", diesel="1,499"))

        stations = StationParser.parse_stations(body)

        assert len(stations) == 1
        station = stations[0]
        assert station.name == "CEPSA"
        assert station.address == "CALLE CEPSA, 1"
        assert station.hours == "L-D: 24H"
        assert station.lat == "40,418000"
        assert station.lon == "-3,705000"
        assert station.diesel_a == "1,499"
        assert station.diesel_plus == "1,529"
        assert station.gas95 == "1,599"
        assert station.gas98 == "1,729"
        assert station.lpg == ""

    def test_when_body_has_bom_then_bom_is_ignored(self) -> None:
        """Given a body prefixed with a UTF-8 BOM, when parsing, then decodes normally."""
        body = station_list_body(api_station("BP", "40,4", "-3,7"), bom=True)

        assert [s.name for s in StationParser.parse_stations(body)] == ["BP"]

    def test_when_empty_list_then_returns_empty(self) -> None:
        """Given an empty station array, when parsing, then returns an empty list."""
        assert StationParser.parse_stations(station_list_body()) == []

    def test_when_price_missing_or_null_then_empty_string(self) -> None:
        """Given absent or null prices, when parsing, then they become empty strings."""
        entry = api_station("SHELL", "40,4", "-3,7")
        del entry["Precio Gasolina 98 E5"]
        entry["Precio Hidrogeno"] = None

        station = StationParser.parse_stations(station_list_body(entry))[0]

        assert station.gas98 == ""
        assert station.h2 == ""

    def test_each_decode_assigns_fresh_ids(self, madrid_body: bytes) -> None:
        """Given the same body decoded twice, when comparing, then records match but ids differ."""
        first = StationParser.parse_stations(madrid_body)
        second = StationParser.parse_stations(madrid_body)

        assert first == second
        assert {s.id for s in first}.isdisjoint({s.id for s in second})

    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"",
            b'{"Fecha": "x"}',
            b'{"ListaEESSPrecio": "nope"}',
            b'{"ListaEESSPrecio": [{"Direcci\\u00f3n": "x"}]}',
        ],
    )
    def test_when_malformed_then_raises_decode_error(self, body: bytes) -> None:
        """Given malformed bodies, when parsing, then raises DecodeError."""
        with pytest.raises(DecodeError, match="Unexpected station list response"):
            StationParser.parse_stations(body)

    def test_decode_error_is_a_fetch_error(self) -> None:
        """Given a decode failure, when caught as FetchError, then it is handled."""
        with pytest.raises(FetchError):
            StationParser.parse_stations(b"[]")


class TestEncodeStations:
    """Tests for re-encoding to the API shape."""

    def test_encode_uses_api_field_names(self) -> None:
        """Given a station, when encoding, then every mapped API key is present."""
        encoded = StationParser.encode_station(make_station("A", "40,4", "-3,7", "1,389"))

        assert set(encoded) == set(STATION_FIELD_MAP)
        assert encoded["Rótulo"] == "A"
        assert encoded["Precio Gasoleo A"] == "1,389"
        assert encoded["Longitud (WGS84)"] == "-3,7"

    def test_reencoded_list_decodes_to_equal_records(self, madrid_body: bytes) -> None:
        """Given decoded stations, when re-encoding and decoding, then records are equal."""
        stations = StationParser.parse_stations(madrid_body)

        body = StationParser.encode_station_list(stations)

        assert StationParser.parse_stations(body) == stations
        assert json.loads(body)["ListaEESSPrecio"][0]["Rótulo"] == "CEPSA SOL"


class TestParseRegions:
    """Tests for province and municipality lists."""

    def test_parse_provinces(self) -> None:
        """Given a province list, when parsing, then reads the API's IDPovincia key."""
        body = json.dumps(
            [
                {"CCAA": "Comunidad de Madrid", "IDCCAA": "13", "IDPovincia": "28",
                 "Provincia": "MADRID"},
                {"CCAA": "Andalucía", "IDCCAA": "01", "IDPovincia": "29", "Provincia": "MÁLAGA"},
            ]
        ).encode()

        provinces = StationParser.parse_provinces(body)

        assert provinces == [Province(id="28", name="MADRID"), Province(id="29", name="MÁLAGA")]

    def test_parse_municipalities(self) -> None:
        """Given a municipality list, when parsing, then each belongs to its province."""
        body = json.dumps(
            [
                {"IDMunicipio": "4354", "IDProvincia": "28", "Municipio": "Madrid"},
                {"IDMunicipio": "4280", "Municipio": "Alcalá de Henares"},
            ]
        ).encode()

        municipalities = StationParser.parse_municipalities(body, "28")

        assert municipalities == [
            Municipality(id="4354", name="Madrid", province_id="28"),
            Municipality(id="4280", name="Alcalá de Henares", province_id="28"),
        ]

    def test_when_region_body_malformed_then_raises_decode_error(self) -> None:
        """Given a non-list body, when parsing regions, then raises DecodeError."""
        with pytest.raises(DecodeError, match="province list"):
            StationParser.parse_provinces(b'{"IDPovincia": "28"}')
        with pytest.raises(DecodeError, match="municipality list"):
            StationParser.parse_municipalities(b"[{}]", "28")
