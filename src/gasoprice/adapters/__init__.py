"""Adapters layer - external system integrations."""

from gasoprice.adapters.broadcasters import StateBroadcaster
from gasoprice.adapters.cache import InMemorySnapshotStore, SqliteSnapshotStore
from gasoprice.adapters.config import AppConfig
from gasoprice.adapters.location import QueueLocationProvider, StaticLocationProvider
from gasoprice.adapters.minetur_api import MineturFuelPriceRepository

__all__ = [
    "AppConfig",
    "InMemorySnapshotStore",
    "MineturFuelPriceRepository",
    "QueueLocationProvider",
    "SqliteSnapshotStore",
    "StateBroadcaster",
    "StaticLocationProvider",
]
