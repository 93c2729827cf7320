"""Location provider adapters."""

from gasoprice.adapters.location.queue_location_provider import QueueLocationProvider
from gasoprice.adapters.location.static_location_provider import StaticLocationProvider

__all__ = ["QueueLocationProvider", "StaticLocationProvider"]
