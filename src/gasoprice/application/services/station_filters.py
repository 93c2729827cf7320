"""Pure geofilter and sort functions over station lists."""

import logging
from collections.abc import Sequence

from gasoprice.domain.models import Coordinate, SortCriterion, SortKey, StationRecord

logger = logging.getLogger(__name__)


def stations_within_radius(
    stations: Sequence[StationRecord], center: Coordinate, radius_m: float
) -> list[StationRecord]:
    """Keep stations whose great-circle distance from center is <= radius_m.

    Stations whose coordinates do not parse are dropped. Input order is kept.
    """
    nearby: list[StationRecord] = []
    unparsable = 0
    for station in stations:
        coordinate = station.coordinate
        if coordinate is None:
            unparsable += 1
            continue
        if center.distance_to(coordinate) <= radius_m:
            nearby.append(station)

    if unparsable:
        logger.debug(f"Skipped {unparsable} stations without a usable coordinate")
    logger.debug(f"{len(nearby)} of {len(stations)} stations within {radius_m:.0f} m")
    return nearby


def sort_by_distance(
    stations: Sequence[StationRecord], origin: Coordinate, descending: bool = False
) -> list[StationRecord]:
    """Order stations by distance from origin.

    Stations without a coordinate go last in both directions and keep their
    relative order.
    """
    located: list[tuple[float, StationRecord]] = []
    unlocated: list[StationRecord] = []
    for station in stations:
        coordinate = station.coordinate
        if coordinate is None:
            unlocated.append(station)
        else:
            located.append((origin.distance_to(coordinate), station))

    located.sort(key=lambda pair: pair[0], reverse=descending)
    return [station for _, station in located] + unlocated


def sort_stations(
    stations: Sequence[StationRecord],
    criterion: SortCriterion,
    origin: Coordinate | None = None,
) -> list[StationRecord]:
    """Stable sort of stations by criterion.

    Price sorting treats a missing price as 0.0, so stations that do not sell
    the fuel come first ascending and last descending.

    Raises:
        ValueError: If distance sorting is requested without an origin, or price
            sorting without a fuel type.
    """
    if criterion.key is SortKey.DISTANCE:
        if origin is None:
            raise ValueError("distance sorting requires a known location")
        return sort_by_distance(stations, origin, descending=criterion.descending)

    fuel_type = criterion.fuel_type
    if fuel_type is None:
        raise ValueError("price sorting requires a fuel type")
    return sorted(stations, key=lambda s: s.price(fuel_type), reverse=criterion.descending)
