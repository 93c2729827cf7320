"""Composition root: logging setup and pipeline wiring."""

import logging
import sys
from datetime import timedelta

import aiohttp

from gasoprice.adapters.broadcasters import StateBroadcaster
from gasoprice.adapters.cache import SqliteSnapshotStore
from gasoprice.adapters.config import AppConfig
from gasoprice.adapters.minetur_api import MineturFuelPriceRepository
from gasoprice.application.services import PipelineServices, PipelineSettings, StationPipeline
from gasoprice.domain.contracts import SnapshotCacheProtocol
from gasoprice.domain.ports import LocationProvider

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def pipeline_settings(config: AppConfig) -> PipelineSettings:
    """Translate configuration into pipeline settings."""
    return PipelineSettings(
        staleness=timedelta(minutes=config.staleness_minutes),
        default_radius_m=config.default_radius_m,
        min_radius_m=config.min_radius_m,
        max_radius_m=config.max_radius_m,
        location_retry_seconds=config.location_retry_seconds,
    )


def build_pipeline(
    config: AppConfig,
    session: aiohttp.ClientSession,
    location_provider: LocationProvider,
    cache: SnapshotCacheProtocol | None = None,
    broadcaster: StateBroadcaster | None = None,
) -> StationPipeline:
    """Wire the pipeline with the Ministry API, the snapshot store and a location source.

    Raises:
        CacheStoreError: If the snapshot store cannot be opened. Not recoverable.
    """
    repository = MineturFuelPriceRepository(
        session,
        base_url=config.api_base_url,
        aggregator_url=config.aggregator_url,
        timeout_seconds=config.api_timeout_seconds,
    )
    if cache is None:
        cache = SqliteSnapshotStore(config.resolved_cache_path)
        logger.debug(f"Using snapshot store at {config.resolved_cache_path}")

    services = PipelineServices(
        repository=repository,
        cache=cache,
        location_provider=location_provider,
        broadcaster=broadcaster or StateBroadcaster(),
    )
    return StationPipeline(services, settings=pipeline_settings(config))
