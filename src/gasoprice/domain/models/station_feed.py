"""Station feed domain model."""

from dataclasses import dataclass

from gasoprice.domain.models.station import StationRecord


@dataclass(frozen=True)
class StationFeed:
    """Decoded stations together with the raw response body they came from."""

    stations: list[StationRecord]
    raw: bytes
