"""Location provider port."""

from collections.abc import AsyncIterator
from typing import Protocol

from gasoprice.domain.models.location_event import LocationEvent


class LocationProvider(Protocol):
    """Port for receiving device location events."""

    def updates(self) -> AsyncIterator[LocationEvent]:
        """Subscribe to location events.

        The iterator raises LocationError when a position cannot be obtained.
        Calling updates() again restarts the subscription.
        """
        ...
