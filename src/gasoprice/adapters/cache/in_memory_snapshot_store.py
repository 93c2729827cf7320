"""In-memory snapshot store implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from gasoprice.domain.contracts.snapshot_cache import SnapshotCacheProtocol
from gasoprice.domain.models.cache_snapshot import CacheSnapshot

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class InMemorySnapshotStore(SnapshotCacheProtocol):
    """Single-slot, process-local cache for the raw station list."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        """Initialize the cache.

        Args:
            clock: Returns the current time; stamped on every put.
        """
        self._clock = clock
        self._snapshot: CacheSnapshot | None = None

    def put(self, raw: bytes) -> CacheSnapshot:
        """Replace the stored snapshot.

        Args:
            raw: The raw response body.

        Returns:
            The stored snapshot.
        """
        self._snapshot = CacheSnapshot(raw=bytes(raw), created_at=self._clock())
        logger.debug(f"Cached {len(raw)} bytes in memory")
        return self._snapshot

    def get_latest(self) -> CacheSnapshot | None:
        """Get the stored snapshot, or None if empty."""
        return self._snapshot
