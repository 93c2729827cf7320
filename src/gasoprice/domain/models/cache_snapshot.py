"""Cache snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class CacheSnapshot:
    """The single cached raw station-list response and when it was stored."""

    raw: bytes
    created_at: datetime

    def age(self, now: datetime) -> timedelta:
        """Time elapsed since the snapshot was stored."""
        return now - self.created_at

    def is_stale(self, now: datetime, max_age: timedelta) -> bool:
        """Whether the snapshot is older than max_age."""
        return self.age(now) >= max_age
