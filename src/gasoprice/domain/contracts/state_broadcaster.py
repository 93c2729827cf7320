"""Protocol for broadcasting station list updates."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gasoprice.domain.models.station_list_snapshot import StationListSnapshot


class StateBroadcasterProtocol(Protocol):
    """Protocol for delivering station list snapshots to subscribers."""

    async def broadcast_update(self, snapshot: "StationListSnapshot") -> None:
        """Deliver a new snapshot to all subscribers.

        Args:
            snapshot: The new immutable station list state.
        """
        ...
