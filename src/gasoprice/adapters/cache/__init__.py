"""Snapshot cache adapters."""

from gasoprice.adapters.cache.in_memory_snapshot_store import InMemorySnapshotStore
from gasoprice.adapters.cache.sqlite_snapshot_store import SqliteSnapshotStore

__all__ = ["InMemorySnapshotStore", "SqliteSnapshotStore"]
