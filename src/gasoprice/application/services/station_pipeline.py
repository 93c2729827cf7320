"""Station list pipeline: fetch-if-stale, cache, geofilter, sort, publish."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from gasoprice.application.services.station_filters import sort_stations, stations_within_radius
from gasoprice.domain.errors import CacheStoreError, DecodeError, FetchError, LocationError
from gasoprice.domain.models import (
    AuthorizationChange,
    AuthorizationStatus,
    Coordinate,
    ErrorDetails,
    LocationEvent,
    LocationUpdate,
    Municipality,
    Province,
    SelectionState,
    SortCriterion,
    SortKey,
    StationListSnapshot,
    StationRecord,
)

if TYPE_CHECKING:
    from gasoprice.domain.contracts import SnapshotCacheProtocol, StateBroadcasterProtocol
    from gasoprice.domain.ports import FuelPriceRepository, LocationProvider

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class PipelineSettings:
    """Tunables for StationPipeline."""

    staleness: timedelta = timedelta(minutes=30)
    default_radius_m: float = 4000.0
    min_radius_m: float = 1000.0
    max_radius_m: float = 10_000_000.0
    location_retry_seconds: float = 5.0


@dataclass(frozen=True)
class PipelineServices:
    """Collaborators injected into StationPipeline."""

    repository: FuelPriceRepository
    cache: SnapshotCacheProtocol
    location_provider: LocationProvider
    broadcaster: StateBroadcasterProtocol


class StationPipeline:
    """Turns API responses into the station list shown to the user.

    Runs on a single event loop. The station list is replaced, never mutated,
    and every change is published as a new StationListSnapshot.

    The geofilter narrows the *current* list: once a station has been
    filtered out, only a new fetch brings it back, however wide the radius
    later becomes.
    """

    def __init__(
        self,
        services: PipelineServices,
        settings: PipelineSettings | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the pipeline.

        Args:
            services: Repository, cache store, location provider and broadcaster.
            settings: Staleness window, radius bounds and location retry delay.
            clock: Returns the current time.
        """
        self._repository = services.repository
        self._cache = services.cache
        self._location_provider = services.location_provider
        self._broadcaster = services.broadcaster
        self._settings = settings or PipelineSettings()
        self._clock = clock

        self._stations: tuple[StationRecord, ...] = ()
        self._provinces: tuple[Province, ...] = ()
        self._municipalities: tuple[Municipality, ...] = ()
        self._selection = SelectionState(
            radius_m=self._clamp_radius(self._settings.default_radius_m)
        )
        self._user_location: Coordinate | None = None
        self._authorization = AuthorizationStatus.NOT_DETERMINED
        self._last_update: datetime | None = None
        self._api_status = "unknown"
        self._error: ErrorDetails | None = None
        self._location_task: asyncio.Task[None] | None = None

    @property
    def stations(self) -> tuple[StationRecord, ...]:
        """The current station list."""
        return self._stations

    @property
    def selection(self) -> SelectionState:
        """The current selection, radius and sort criterion."""
        return self._selection

    @property
    def user_location(self) -> Coordinate | None:
        """Last known device position."""
        return self._user_location

    @property
    def snapshot(self) -> StationListSnapshot:
        """Immutable view of the current state."""
        return StationListSnapshot(
            stations=self._stations,
            selection=self._selection,
            provinces=self._provinces,
            municipalities=self._municipalities,
            user_location=self._user_location,
            authorization=self._authorization,
            last_update=self._last_update,
            api_status=self._api_status,
            error=self._error,
        )

    async def _publish(self) -> None:
        await self._broadcaster.broadcast_update(self.snapshot)

    async def _record_error(self, error: FetchError) -> None:
        """Publish a failed fetch without touching the station list."""
        self._api_status = "error"
        self._error = ErrorDetails.from_fetch_error(error, occurred_at=self._clock())
        await self._publish()

    def _clamp_radius(self, meters: float) -> float:
        if not math.isfinite(meters):
            raise ValueError(f"Radius must be a finite number of meters, got {meters}")
        return min(max(meters, self._settings.min_radius_m), self._settings.max_radius_m)

    def _sorted(self, stations: Sequence[StationRecord]) -> tuple[StationRecord, ...]:
        """Apply the selected sort criterion, if it can be applied."""
        criterion = self._selection.sort
        if criterion is None:
            return tuple(stations)
        if criterion.key is SortKey.DISTANCE and self._user_location is None:
            return tuple(stations)
        return tuple(sort_stations(stations, criterion, origin=self._user_location))

    # App lifecycle

    async def start(self) -> None:
        """App start: load stations and provinces, then follow the device location.

        Fetch failures are logged and published, not raised.
        """
        await self._publish()

        try:
            await self.fetch_if_needed()
        except FetchError as e:
            logger.error(f"Initial station fetch failed: {e}")

        try:
            await self.load_provinces()
        except FetchError as e:
            logger.error(f"Province list fetch failed: {e}")

        self.start_location_updates()

    def start_location_updates(self) -> None:
        """Start consuming location events in the background."""
        if self._location_task is not None and not self._location_task.done():
            logger.warning("Location updates already running")
            return

        self._location_task = asyncio.create_task(self.follow_location())
        logger.info("Started location updates")

    async def stop(self) -> None:
        """Stop consuming location events.

        A task that already died is reaped and its exception logged.
        """
        task = self._location_task
        if task is None:
            return
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                logger.error(f"Location updates failed: {task.exception()!r}")
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Location updates cancelled")
        logger.info("Stopped location updates")

    async def follow_location(self) -> None:
        """Consume location events until the stream ends.

        A LocationError restarts the subscription after location_retry_seconds.
        """
        while True:
            try:
                async for event in self._location_provider.updates():
                    await self._handle_location_event(event)
                logger.info("Location stream ended")
                return
            except LocationError as e:
                delay = self._settings.location_retry_seconds
                logger.warning(
                    f"Location error ({e.kind.value}): {e}; restarting updates in {delay:.0f}s"
                )
                await asyncio.sleep(delay)

    async def _handle_location_event(self, event: LocationEvent) -> None:
        if isinstance(event, LocationUpdate):
            await self.on_location_update(event.coordinate)
        elif isinstance(event, AuthorizationChange):
            logger.info(f"Location authorization: {event.status.value}")
            self._authorization = event.status
            await self._publish()

    # Station list

    async def fetch_if_needed(self) -> bool:
        """Fetch the station list unless the cached snapshot is still fresh.

        On a fresh cache the list is seeded from the cached bytes only when it
        is currently empty; an unreadable snapshot counts as stale.

        Returns:
            Whether a network fetch was issued.

        Raises:
            FetchError: If a fetch was needed and failed.
        """
        cached = self._cache.get_latest()
        now = self._clock()

        if cached is None:
            logger.info("No cached station list, fetching")
        elif cached.is_stale(now, self._settings.staleness):
            logger.info(f"Cached station list is {cached.age(now)} old, fetching")
        else:
            logger.info(f"Cached station list is fresh ({cached.age(now)} old), skipping fetch")
            if self._stations:
                return False
            try:
                stations = self._repository.decode_stations(cached.raw)
            except DecodeError as e:
                logger.warning(f"Cached station list is unreadable ({e}), fetching")
            else:
                self._last_update = cached.created_at
                await self._load_station_list(stations)
                return False

        await self.refresh()
        return True

    async def refresh(self) -> tuple[StationRecord, ...]:
        """Fetch the full station list regardless of cache age.

        On success the list is replaced, the raw body is cached and, if the
        location is known, the geofilter is applied. On failure the current
        list is left as it was.

        Raises:
            FetchError: If the fetch failed.
        """
        try:
            feed = await self._repository.fetch_station_feed()
        except FetchError as e:
            logger.error(f"Station fetch failed: {e}")
            await self._record_error(e)
            raise

        try:
            snapshot = self._cache.put(feed.raw)
            self._last_update = snapshot.created_at
        except CacheStoreError as e:
            logger.error(f"Could not cache station list: {e}")
            self._last_update = self._clock()

        self._api_status = "success"
        self._error = None
        await self._load_station_list(feed.stations)
        return self._stations

    async def _load_station_list(self, stations: Sequence[StationRecord]) -> None:
        """Replace the list with a freshly decoded one and narrow it to the location."""
        self._stations = tuple(stations)
        logger.info(f"Loaded {len(self._stations)} stations")
        if self._user_location is not None:
            await self.apply_geofilter(self._user_location, self._selection.radius_m)
        else:
            self._stations = self._sorted(self._stations)
            await self._publish()

    async def on_location_update(self, coordinate: Coordinate) -> None:
        """Record a new device position and geofilter the current list around it."""
        self._user_location = coordinate
        await self.apply_geofilter(coordinate, self._selection.radius_m)

    async def apply_geofilter(
        self, coordinate: Coordinate, radius_m: float
    ) -> tuple[StationRecord, ...]:
        """Keep only stations within radius_m of coordinate.

        Narrows the current list in place of the full one; stations without a
        parsable coordinate are dropped.

        Returns:
            The new station list.

        Raises:
            ValueError: If radius_m is NaN or infinite; the list is left as it was.
        """
        if not math.isfinite(radius_m):
            raise ValueError(f"Radius must be a finite number of meters, got {radius_m}")
        before = len(self._stations)
        nearby = stations_within_radius(self._stations, coordinate, radius_m)
        self._stations = self._sorted(nearby)
        logger.info(f"Geofilter kept {len(self._stations)} of {before} stations")
        await self._publish()
        return self._stations

    async def apply_region_filter(self, municipality_id: str) -> tuple[StationRecord, ...]:
        """Replace the list with the stations of a municipality.

        Raises:
            FetchError: If the fetch failed; the list is left as it was.
        """
        try:
            stations = await self._repository.fetch_stations_by_municipality(municipality_id)
        except FetchError as e:
            logger.error(f"Stations for municipality {municipality_id} failed: {e}")
            await self._record_error(e)
            raise

        self._stations = self._sorted(stations)
        self._api_status = "success"
        self._error = None
        self._last_update = self._clock()
        await self._publish()
        return self._stations

    async def sort(self, criterion: SortCriterion) -> tuple[StationRecord, ...]:
        """Order the current list and remember the criterion.

        Distance sorting needs a known location; without one the list is left
        unchanged.
        """
        if criterion.key is SortKey.DISTANCE and self._user_location is None:
            logger.warning("Cannot sort by distance without a known location")
            return self._stations

        self._selection = replace(self._selection, sort=criterion)
        self._stations = tuple(sort_stations(self._stations, criterion, self._user_location))
        await self._publish()
        return self._stations

    # Regions and filters

    async def load_provinces(self) -> tuple[Province, ...]:
        """Fetch the province list.

        Raises:
            FetchError: If the fetch failed.
        """
        try:
            provinces = await self._repository.fetch_provinces()
        except FetchError as e:
            await self._record_error(e)
            raise

        self._provinces = tuple(provinces)
        await self._publish()
        return self._provinces

    async def select_province(self, province_id: str | None) -> tuple[Municipality, ...]:
        """Select a province (or clear it) and load its municipalities.

        The municipality selection is always cleared.

        Raises:
            FetchError: If the municipality list could not be fetched.
        """
        self._selection = replace(self._selection, province_id=province_id, municipality_id=None)
        self._municipalities = ()

        if province_id is not None:
            try:
                municipalities = await self._repository.fetch_municipalities(province_id)
            except FetchError as e:
                logger.error(f"Municipalities for province {province_id} failed: {e}")
                await self._record_error(e)
                raise
            self._municipalities = tuple(municipalities)

        await self._publish()
        return self._municipalities

    async def select_municipality(self, municipality_id: str | None) -> None:
        """Select a municipality of the current province, or clear it.

        Raises:
            ValueError: If no province is selected.
        """
        if municipality_id is not None and self._selection.province_id is None:
            raise ValueError("Select a province before selecting a municipality")

        self._selection = replace(self._selection, municipality_id=municipality_id)
        await self._publish()

    async def set_radius(self, meters: float) -> float:
        """Set the search radius, clamped to the configured range.

        Returns:
            The radius actually applied.

        Raises:
            ValueError: If the radius is NaN or infinite.
        """
        radius = self._clamp_radius(meters)
        if radius != meters:
            logger.debug(f"Radius {meters} clamped to {radius}")
        self._selection = replace(self._selection, radius_m=radius)
        await self._publish()
        return radius

    async def apply_filters(self) -> tuple[StationRecord, ...]:
        """Apply the current selection.

        A selected municipality lists its stations; otherwise the current list
        is geofiltered around the known location.
        """
        municipality_id = self._selection.municipality_id
        if municipality_id is not None:
            return await self.apply_region_filter(municipality_id)

        if self._user_location is None:
            logger.warning("No location known yet, nothing to filter")
            return self._stations

        return await self.apply_geofilter(self._user_location, self._selection.radius_m)
