"""Selection, filter and sort state."""

from dataclasses import dataclass
from enum import Enum

from gasoprice.domain.models.fuel_type import SORTABLE_FUEL_TYPES, FuelType


class SortKey(str, Enum):
    """What a station list can be ordered by."""

    DISTANCE = "distance"
    PRICE = "price"


@dataclass(frozen=True)
class SortCriterion:
    """A requested ordering of the station list."""

    key: SortKey
    descending: bool = False
    fuel_type: FuelType | None = None

    def __post_init__(self) -> None:
        if self.key is SortKey.PRICE:
            if self.fuel_type is None:
                raise ValueError("price sorting requires a fuel_type")
            if self.fuel_type not in SORTABLE_FUEL_TYPES:
                raise ValueError(f"{self.fuel_type.value} is not a sortable fuel type")

    @classmethod
    def by_distance(cls, descending: bool = False) -> "SortCriterion":
        return cls(key=SortKey.DISTANCE, descending=descending)

    @classmethod
    def by_price(cls, fuel_type: FuelType, descending: bool = False) -> "SortCriterion":
        return cls(key=SortKey.PRICE, descending=descending, fuel_type=fuel_type)


@dataclass(frozen=True)
class SelectionState:
    """Current region selection, search radius and sort criterion."""

    radius_m: float
    province_id: str | None = None
    municipality_id: str | None = None
    sort: SortCriterion | None = None

    def __post_init__(self) -> None:
        if self.municipality_id is not None and self.province_id is None:
            raise ValueError("municipality_id requires a selected province")
