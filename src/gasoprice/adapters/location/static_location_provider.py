"""Location provider for a fixed, user-supplied position."""

import logging
from collections.abc import AsyncIterator

from gasoprice.domain.models.coordinate import Coordinate
from gasoprice.domain.models.location_event import (
    AuthorizationChange,
    AuthorizationStatus,
    LocationEvent,
    LocationUpdate,
)
from gasoprice.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)


class StaticLocationProvider(LocationProvider):
    """Reports a single known coordinate, e.g. from command-line arguments."""

    def __init__(self, coordinate: Coordinate) -> None:
        self._coordinate = coordinate

    async def updates(self) -> AsyncIterator[LocationEvent]:
        """Yield an authorization grant followed by the fixed coordinate."""
        logger.debug(f"Static location: {self._coordinate}")
        yield AuthorizationChange(status=AuthorizationStatus.AUTHORIZED)
        yield LocationUpdate(coordinate=self._coordinate)
