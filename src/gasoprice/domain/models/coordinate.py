"""Coordinate domain model and great-circle distance."""

import math
from dataclasses import dataclass

from gasoprice.domain.errors import CoordinateParseError

# Mean Earth radius (IUGG), meters
EARTH_RADIUS_M = 6_371_008.8


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees."""

    latitude: float
    longitude: float

    def distance_to(self, other: "Coordinate") -> float:
        """Great-circle (haversine) distance to another coordinate in meters."""
        p1 = math.radians(self.latitude)
        p2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)
        a = math.sin(dlat / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dlon / 2) ** 2
        return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


def parse_decimal(value: str) -> float:
    """Parse a locale-formatted decimal string, accepting comma as separator.

    Raises:
        ValueError: If the string is empty or not a finite number.
    """
    text = value.strip().replace(",", ".")
    if not text:
        raise ValueError("empty decimal string")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"non-finite decimal: {value!r}")
    return number


def parse_coordinate(latitude: str, longitude: str) -> Coordinate:
    """Parse latitude/longitude strings as transmitted by the API.

    Raises:
        CoordinateParseError: If either value is not a valid coordinate.
    """
    try:
        lat = parse_decimal(latitude)
        lon = parse_decimal(longitude)
    except (ValueError, AttributeError) as e:
        raise CoordinateParseError(
            f"Invalid coordinate ({latitude!r}, {longitude!r}): {e}"
        ) from e

    if not -90.0 <= lat <= 90.0 or not -180.0 <= lon <= 180.0:
        raise CoordinateParseError(f"Coordinate out of range: ({lat}, {lon})")
    return Coordinate(latitude=lat, longitude=lon)
