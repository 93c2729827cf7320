"""Domain models for fuel station prices."""

from gasoprice.domain.models.cache_snapshot import CacheSnapshot
from gasoprice.domain.models.coordinate import Coordinate, parse_coordinate, parse_decimal
from gasoprice.domain.models.error_details import ErrorDetails
from gasoprice.domain.models.fuel_type import SORTABLE_FUEL_TYPES, FuelType, parse_price
from gasoprice.domain.models.location_event import (
    AuthorizationChange,
    AuthorizationStatus,
    LocationEvent,
    LocationUpdate,
)
from gasoprice.domain.models.region import Municipality, Province
from gasoprice.domain.models.selection import SelectionState, SortCriterion, SortKey
from gasoprice.domain.models.station import StationRecord
from gasoprice.domain.models.station_feed import StationFeed
from gasoprice.domain.models.station_list_snapshot import StationListSnapshot

__all__ = [
    "SORTABLE_FUEL_TYPES",
    "AuthorizationChange",
    "AuthorizationStatus",
    "CacheSnapshot",
    "Coordinate",
    "ErrorDetails",
    "FuelType",
    "LocationEvent",
    "LocationUpdate",
    "Municipality",
    "Province",
    "SelectionState",
    "SortCriterion",
    "SortKey",
    "StationFeed",
    "StationListSnapshot",
    "StationRecord",
    "parse_coordinate",
    "parse_decimal",
    "parse_price",
]
