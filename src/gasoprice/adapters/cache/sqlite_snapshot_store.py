"""Durable single-row snapshot store backed by SQLite."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from gasoprice.adapters.cache.in_memory_snapshot_store import utc_now
from gasoprice.domain.contracts.snapshot_cache import SnapshotCacheProtocol
from gasoprice.domain.errors import CacheStoreError
from gasoprice.domain.models.cache_snapshot import CacheSnapshot

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS station_snapshot (
    json_data BLOB NOT NULL,
    timestamp TEXT NOT NULL
)
"""


class SqliteSnapshotStore(SnapshotCacheProtocol):
    """Keeps the latest raw station list and its timestamp across restarts.

    The table never holds more than one row: put deletes and inserts inside
    a single transaction.
    """

    def __init__(self, path: str | Path, clock: Callable[[], datetime] = utc_now) -> None:
        """Open (and create if needed) the store.

        Args:
            path: Database file, or ":memory:".
            clock: Returns the current time; stamped on every put.

        Raises:
            CacheStoreError: If the database cannot be opened or initialized.
        """
        self._clock = clock
        self._path = str(path)
        try:
            if self._path != ":memory:":
                Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self._path)
            with self._conn:
                self._conn.execute(_SCHEMA)
        except (sqlite3.Error, OSError) as e:
            raise CacheStoreError(f"Cannot open snapshot store at {self._path}: {e}") from e
        logger.debug(f"Opened snapshot store at {self._path}")

    def put(self, raw: bytes) -> CacheSnapshot:
        """Atomically replace the stored snapshot.

        Args:
            raw: The raw response body.

        Returns:
            The stored snapshot.

        Raises:
            CacheStoreError: If the write fails; the previous snapshot is kept.
        """
        snapshot = CacheSnapshot(raw=bytes(raw), created_at=self._clock())
        try:
            with self._conn:
                self._conn.execute("DELETE FROM station_snapshot")
                self._conn.execute(
                    "INSERT INTO station_snapshot (json_data, timestamp) VALUES (?, ?)",
                    (sqlite3.Binary(snapshot.raw), snapshot.created_at.isoformat()),
                )
        except sqlite3.Error as e:
            raise CacheStoreError(f"Failed to write snapshot: {e}") from e
        logger.info(f"Cached {len(raw)} bytes at {snapshot.created_at.isoformat()}")
        return snapshot

    def get_latest(self) -> CacheSnapshot | None:
        """Get the stored snapshot, or None if empty or unreadable."""
        try:
            row = self._conn.execute(
                "SELECT json_data, timestamp FROM station_snapshot "
                "ORDER BY timestamp DESC LIMIT 1"
            ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Error reading snapshot: {e}")
            return None

        if row is None:
            return None
        return CacheSnapshot(raw=bytes(row[0]), created_at=datetime.fromisoformat(row[1]))

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> SqliteSnapshotStore:
        return self

    def __exit__(self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object) -> None:
        self.close()
