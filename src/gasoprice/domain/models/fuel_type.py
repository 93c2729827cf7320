"""Fuel types and price parsing."""

from enum import Enum

from gasoprice.domain.models.coordinate import parse_decimal


class FuelType(str, Enum):
    """Fuel types priced by the API. Values are StationRecord attribute names."""

    DIESEL_A = "diesel_a"
    DIESEL_PLUS = "diesel_plus"
    GAS95 = "gas95"
    GAS98 = "gas98"
    BIODIESEL = "biodiesel"
    BIOETHANOL = "bioethanol"
    CNG = "cng"
    LNG = "lng"
    LPG = "lpg"
    H2 = "h2"

    @property
    def label(self) -> str:
        """Short human-readable label."""
        return FUEL_LABELS[self]


FUEL_LABELS: dict[FuelType, str] = {
    FuelType.DIESEL_A: "Diesel",
    FuelType.DIESEL_PLUS: "Diesel+",
    FuelType.GAS95: "Gas 95",
    FuelType.GAS98: "Gas 98",
    FuelType.BIODIESEL: "Biodiesel",
    FuelType.BIOETHANOL: "Bioethanol",
    FuelType.CNG: "CNG",
    FuelType.LNG: "LNG",
    FuelType.LPG: "LPG",
    FuelType.H2: "H2",
}

# Fuels offered for price sorting
SORTABLE_FUEL_TYPES: tuple[FuelType, ...] = (
    FuelType.DIESEL_A,
    FuelType.DIESEL_PLUS,
    FuelType.GAS95,
    FuelType.GAS98,
)


def parse_price(value: str | None) -> float:
    """Parse a price string such as "1,459".

    Empty or placeholder values mean "not sold here" and parse as 0.0.
    """
    if value is None:
        return 0.0
    try:
        return parse_decimal(value)
    except ValueError:
        return 0.0
