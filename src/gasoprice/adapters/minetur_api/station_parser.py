"""Parser for Ministry API response bodies."""

import codecs
import logging
from dataclasses import asdict
from typing import Any

from pydantic import TypeAdapter, ValidationError

from gasoprice.adapters.minetur_api.schemas import (
    MunicipalityPayload,
    ProvincePayload,
    StationListPayload,
    StationPayload,
)
from gasoprice.domain.errors import DecodeError
from gasoprice.domain.models.region import Municipality, Province
from gasoprice.domain.models.station import StationRecord

logger = logging.getLogger(__name__)

_PROVINCE_LIST = TypeAdapter(list[ProvincePayload])
_MUNICIPALITY_LIST = TypeAdapter(list[MunicipalityPayload])


def _strip_bom(raw: bytes) -> bytes:
    """The Ministry service prefixes some bodies with a UTF-8 BOM."""
    return raw.removeprefix(codecs.BOM_UTF8)


def _describe(error: ValidationError) -> str:
    """First validation problem, for a short human-readable cause."""
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {first.get('msg', 'invalid')}{extra}"


class StationParser:
    """Decodes Ministry API bodies into domain objects and back."""

    @staticmethod
    def parse_stations(raw: bytes) -> list[StationRecord]:
        """Parse a station-list body ({"ListaEESSPrecio": [...]}).

        Args:
            raw: Response body bytes.

        Returns:
            Freshly built StationRecords, each with a new local id.

        Raises:
            DecodeError: If the body is not JSON or does not match the schema.
        """
        try:
            payload = StationListPayload.model_validate_json(_strip_bom(raw))
        except ValidationError as e:
            raise DecodeError(f"Unexpected station list response: {_describe(e)}") from e

        stations = [StationParser.to_station(entry) for entry in payload.stations]
        logger.debug(f"Decoded {len(stations)} stations")
        return stations

    @staticmethod
    def parse_provinces(raw: bytes) -> list[Province]:
        """Parse a /Listados/Provincias/ body.

        Raises:
            DecodeError: If the body is not JSON or does not match the schema.
        """
        try:
            entries = _PROVINCE_LIST.validate_json(_strip_bom(raw))
        except ValidationError as e:
            raise DecodeError(f"Unexpected province list response: {_describe(e)}") from e
        return [Province(id=entry.id, name=entry.name) for entry in entries]

    @staticmethod
    def parse_municipalities(raw: bytes, province_id: str) -> list[Municipality]:
        """Parse a /Listados/MunicipiosPorProvincia/{id} body.

        Args:
            raw: Response body bytes.
            province_id: The province that was requested; used when an entry
                does not name its province.

        Raises:
            DecodeError: If the body is not JSON or does not match the schema.
        """
        try:
            entries = _MUNICIPALITY_LIST.validate_json(_strip_bom(raw))
        except ValidationError as e:
            raise DecodeError(f"Unexpected municipality list response: {_describe(e)}") from e
        return [
            Municipality(id=entry.id, name=entry.name, province_id=entry.province_id or province_id)
            for entry in entries
        ]

    @staticmethod
    def to_station(entry: StationPayload) -> StationRecord:
        """Build a StationRecord from a validated payload entry."""
        return StationRecord(**entry.model_dump())

    @staticmethod
    def encode_station(station: StationRecord) -> dict[str, Any]:
        """Encode a StationRecord back to the API's field names."""
        fields = asdict(station)
        fields.pop("id")
        return StationPayload.model_validate(fields).model_dump(by_alias=True)

    @staticmethod
    def encode_station_list(stations: list[StationRecord]) -> bytes:
        """Encode stations as a station-list body."""
        payload = StationListPayload.model_validate(
            {"ListaEESSPrecio": [StationParser.encode_station(s) for s in stations]}
        )
        return payload.model_dump_json(by_alias=True).encode("utf-8")
