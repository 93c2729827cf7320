"""Broadcasters for station list state."""

from gasoprice.adapters.broadcasters.state_broadcaster import StateBroadcaster

__all__ = ["StateBroadcaster"]
