"""Broadcaster for station list updates."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from gasoprice.domain.contracts.state_broadcaster import StateBroadcasterProtocol

if TYPE_CHECKING:
    from gasoprice.domain.models.station_list_snapshot import StationListSnapshot

logger = logging.getLogger(__name__)


class StateBroadcaster(StateBroadcasterProtocol):
    """Delivers station list snapshots to in-process subscribers.

    Each subscriber has a one-slot queue: a slow subscriber only ever sees
    the newest snapshot, never a backlog.
    """

    def __init__(self) -> None:
        self._subscribers: list[asyncio.Queue[StationListSnapshot]] = []
        self.latest: StationListSnapshot | None = None

    def subscribe(self) -> asyncio.Queue[StationListSnapshot]:
        """Register a subscriber. The latest snapshot, if any, is delivered at once."""
        queue: asyncio.Queue[StationListSnapshot] = asyncio.Queue(maxsize=1)
        if self.latest is not None:
            queue.put_nowait(self.latest)
        self._subscribers.append(queue)
        logger.debug(f"Subscriber added ({len(self._subscribers)} total)")
        return queue

    def unsubscribe(self, queue: asyncio.Queue[StationListSnapshot]) -> None:
        """Remove a subscriber."""
        if queue in self._subscribers:
            self._subscribers.remove(queue)
            logger.debug(f"Subscriber removed ({len(self._subscribers)} remaining)")

    async def snapshots(self) -> AsyncIterator[StationListSnapshot]:
        """Iterate over snapshots as they are published."""
        queue = self.subscribe()
        try:
            while True:
                yield await queue.get()
        finally:
            self.unsubscribe(queue)

    async def broadcast_update(self, snapshot: StationListSnapshot) -> None:
        """Deliver a new snapshot to all subscribers.

        Args:
            snapshot: The new immutable station list state.
        """
        self.latest = snapshot
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(snapshot)
        logger.debug(
            f"Broadcasted snapshot with {len(snapshot.stations)} stations "
            f"to {len(self._subscribers)} subscriber(s)"
        )
