"""Location provider events."""

from dataclasses import dataclass
from enum import Enum

from gasoprice.domain.models.coordinate import Coordinate


class AuthorizationStatus(Enum):
    """Whether the app may read the device location."""

    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"


@dataclass(frozen=True)
class LocationUpdate:
    """A new device position."""

    coordinate: Coordinate


@dataclass(frozen=True)
class AuthorizationChange:
    """The location authorization state changed."""

    status: AuthorizationStatus


LocationEvent = LocationUpdate | AuthorizationChange
