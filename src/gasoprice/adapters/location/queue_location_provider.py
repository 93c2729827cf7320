"""Push-fed location provider backed by an asyncio queue."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from gasoprice.domain.errors import LocationError, LocationErrorKind
from gasoprice.domain.models.coordinate import Coordinate
from gasoprice.domain.models.location_event import (
    AuthorizationChange,
    AuthorizationStatus,
    LocationEvent,
    LocationUpdate,
)
from gasoprice.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)

_CLOSED = object()


class QueueLocationProvider(LocationProvider):
    """Location provider fed by the host application.

    The host pushes positions, authorization changes and failures; the
    pipeline consumes them through updates(). A failure ends the current
    subscription with LocationError, and a new updates() call resumes
    reading whatever was pushed afterwards.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[object] = asyncio.Queue()

    def push_location(self, coordinate: Coordinate) -> None:
        """Report a new device position."""
        self._queue.put_nowait(LocationUpdate(coordinate=coordinate))

    def push_authorization(self, status: AuthorizationStatus) -> None:
        """Report an authorization change. DENIED also fails the subscription."""
        self._queue.put_nowait(AuthorizationChange(status=status))

    def fail(self, kind: LocationErrorKind, message: str = "") -> None:
        """Fail the current subscription (e.g. position unknown)."""
        self._queue.put_nowait(LocationError(kind, message))

    def close(self) -> None:
        """End the stream; updates() returns once the queue drains."""
        self._queue.put_nowait(_CLOSED)

    async def updates(self) -> AsyncIterator[LocationEvent]:
        """Yield pushed events until closed.

        Raises:
            LocationError: When a failure was pushed or authorization was denied.
        """
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                logger.debug("Location stream closed")
                return
            if isinstance(item, LocationError):
                raise item
            if isinstance(item, (LocationUpdate, AuthorizationChange)):
                yield item
                if (
                    isinstance(item, AuthorizationChange)
                    and item.status is AuthorizationStatus.DENIED
                ):
                    raise LocationError(LocationErrorKind.DENIED, "Location permission denied")
