"""Protocol for the single-slot station list cache."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gasoprice.domain.models.cache_snapshot import CacheSnapshot


class SnapshotCacheProtocol(Protocol):
    """Protocol for storing the most recent raw station-list response."""

    def put(self, raw: bytes) -> "CacheSnapshot":
        """Replace the stored snapshot with raw, timestamped now.

        Args:
            raw: The raw response body.

        Returns:
            The snapshot that was stored.
        """
        ...

    def get_latest(self) -> "CacheSnapshot | None":
        """Get the stored snapshot.

        Returns:
            The snapshot, or None if nothing has been stored yet.
        """
        ...
