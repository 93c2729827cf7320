"""Contracts (protocols) implemented by adapters and used by the pipeline."""

from gasoprice.domain.contracts.snapshot_cache import SnapshotCacheProtocol
from gasoprice.domain.contracts.state_broadcaster import StateBroadcasterProtocol

__all__ = ["SnapshotCacheProtocol", "StateBroadcasterProtocol"]
