"""Published station list state."""

from dataclasses import dataclass
from datetime import datetime

from gasoprice.domain.models.coordinate import Coordinate
from gasoprice.domain.models.error_details import ErrorDetails
from gasoprice.domain.models.location_event import AuthorizationStatus
from gasoprice.domain.models.region import Municipality, Province
from gasoprice.domain.models.selection import SelectionState
from gasoprice.domain.models.station import StationRecord


@dataclass(frozen=True)
class StationListSnapshot:
    """Immutable view of everything an observer needs to render the list.

    A new value is published on every change; observers never see a list
    being mutated.
    """

    stations: tuple[StationRecord, ...]
    selection: SelectionState
    provinces: tuple[Province, ...] = ()
    municipalities: tuple[Municipality, ...] = ()
    user_location: Coordinate | None = None
    authorization: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED
    last_update: datetime | None = None
    api_status: str = "unknown"  # "unknown", "success" or "error"
    error: ErrorDetails | None = None
