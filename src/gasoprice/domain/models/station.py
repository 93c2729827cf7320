"""Station domain model."""

from dataclasses import dataclass, field
from uuid import uuid4

from gasoprice.domain.errors import CoordinateParseError
from gasoprice.domain.models.coordinate import Coordinate, parse_coordinate
from gasoprice.domain.models.fuel_type import FuelType, parse_price


def _new_station_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class StationRecord:
    """A fuel station as listed by the API.

    Prices and coordinates are kept as the locale-formatted strings the API
    sends (e.g. "1,459", "40,416775"). The id is assigned locally on decode
    and does not take part in equality.
    """

    name: str
    address: str
    hours: str = ""
    lat: str = ""
    lon: str = ""
    diesel_a: str = ""
    diesel_plus: str = ""
    gas95: str = ""
    gas98: str = ""
    biodiesel: str = ""
    bioethanol: str = ""
    cng: str = ""
    lng: str = ""
    lpg: str = ""
    h2: str = ""
    id: str = field(default_factory=_new_station_id, compare=False)

    @property
    def coordinate(self) -> Coordinate | None:
        """Parsed position, or None if lat/lon do not parse."""
        try:
            return parse_coordinate(self.lat, self.lon)
        except CoordinateParseError:
            return None

    def price_text(self, fuel_type: FuelType) -> str:
        """Raw price string for a fuel type."""
        return getattr(self, fuel_type.value)

    def price(self, fuel_type: FuelType) -> float:
        """Numeric price for a fuel type; 0.0 when not sold here."""
        return parse_price(self.price_text(fuel_type))

    def has_price(self, fuel_type: FuelType) -> bool:
        """Whether the station sells the given fuel."""
        return self.price(fuel_type) > 0.0
