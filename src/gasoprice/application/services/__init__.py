"""Application services (use cases) for station listing."""

from gasoprice.application.services.station_filters import (
    sort_by_distance,
    sort_stations,
    stations_within_radius,
)
from gasoprice.application.services.station_pipeline import (
    PipelineServices,
    PipelineSettings,
    StationPipeline,
)

__all__ = [
    "PipelineServices",
    "PipelineSettings",
    "StationPipeline",
    "sort_by_distance",
    "sort_stations",
    "stations_within_radius",
]
