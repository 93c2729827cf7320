"""Command-line front end for the fuel station pipeline."""

import argparse
import asyncio
import json
import sys
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from dataclasses import asdict
from datetime import UTC, datetime
from typing import Any

import aiohttp

from gasoprice.adapters.cache import SqliteSnapshotStore
from gasoprice.adapters.config import AppConfig
from gasoprice.adapters.location import QueueLocationProvider, StaticLocationProvider
from gasoprice.application.services import StationPipeline
from gasoprice.domain.errors import CacheStoreError
from gasoprice.domain.models import (
    SORTABLE_FUEL_TYPES,
    Coordinate,
    FuelType,
    SortCriterion,
    StationRecord,
)
from gasoprice.domain.ports import LocationProvider
from gasoprice.main import build_pipeline, configure_logging

# Fuels shown on each list row
ROW_FUELS = (FuelType.DIESEL_A, FuelType.GAS95)


def station_to_dict(station: StationRecord, origin: Coordinate | None = None) -> dict[str, Any]:
    """Station as a JSON-friendly dict, with distance in meters when origin is known."""
    data: dict[str, Any] = asdict(station)
    coordinate = station.coordinate
    data["distance_m"] = (
        round(origin.distance_to(coordinate)) if origin and coordinate is not None else None
    )
    return data


def format_station(station: StationRecord, origin: Coordinate | None = None) -> str:
    """Render a station as a few lines of text."""
    lines = [station.name, f"  {station.address}"]
    prices = "  ".join(
        f"{fuel.label}: {station.price_text(fuel) or '-'}" for fuel in ROW_FUELS
    )
    lines.append(f"  {prices}")
    lines.append(f"  Hours: {station.hours}")
    coordinate = station.coordinate
    if origin is not None and coordinate is not None:
        lines.append(f"  Distance: {origin.distance_to(coordinate) / 1000:.1f} km")
    return "\n".join(lines)


def _print_stations(
    stations: tuple[StationRecord, ...],
    origin: Coordinate | None,
    limit: int | None,
    as_json: bool,
) -> None:
    shown = stations[:limit] if limit is not None else stations
    if as_json:
        print(json.dumps([station_to_dict(s, origin) for s in shown], indent=2, ensure_ascii=False))
        return
    if not stations:
        print("No stations found", file=sys.stderr)
        return
    print(f"\n{len(stations)} station(s):\n")
    for station in shown:
        print(format_station(station, origin))
        print()


def _sort_criterion(args: argparse.Namespace) -> SortCriterion | None:
    if args.sort == "distance":
        return SortCriterion.by_distance(descending=args.desc)
    if args.sort == "price":
        return SortCriterion.by_price(FuelType(args.fuel), descending=args.desc)
    return None


@contextmanager
def _open_store(config: AppConfig) -> Iterator[SqliteSnapshotStore]:
    """Open the snapshot store for one command and close it afterwards."""
    try:
        store = SqliteSnapshotStore(config.resolved_cache_path)
    except CacheStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    with store:
        yield store


@asynccontextmanager
async def _open_pipeline(
    config: AppConfig, location_provider: LocationProvider
) -> AsyncIterator[StationPipeline]:
    async with aiohttp.ClientSession() as session:
        with _open_store(config) as store:
            yield build_pipeline(config, session, location_provider, cache=store)


async def _handle_nearby_command(args: argparse.Namespace, config: AppConfig) -> None:
    """List stations around a coordinate."""
    origin = Coordinate(latitude=args.lat, longitude=args.lon)
    async with _open_pipeline(config, StaticLocationProvider(origin)) as pipeline:
        if args.radius is not None:
            await pipeline.set_radius(args.radius * 1000)

        if args.refresh:
            await pipeline.refresh()
        else:
            await pipeline.fetch_if_needed()
        await pipeline.follow_location()

        criterion = _sort_criterion(args)
        if criterion is not None:
            await pipeline.sort(criterion)

        _print_stations(pipeline.stations, origin, args.limit, args.json)


async def _handle_stations_command(args: argparse.Namespace, config: AppConfig) -> None:
    """List the stations of a municipality."""
    async with _open_pipeline(config, QueueLocationProvider()) as pipeline:
        await pipeline.apply_region_filter(args.municipality_id)

        criterion = _sort_criterion(args)
        if criterion is not None:
            await pipeline.sort(criterion)

        _print_stations(pipeline.stations, None, args.limit, args.json)


async def _handle_provinces_command(args: argparse.Namespace, config: AppConfig) -> None:
    """List provinces."""
    async with _open_pipeline(config, QueueLocationProvider()) as pipeline:
        provinces = await pipeline.load_provinces()

    if args.json:
        print(json.dumps([asdict(p) for p in provinces], indent=2, ensure_ascii=False))
        return
    for province in provinces:
        print(f"  {province.id:>3}  {province.name}")


async def _handle_municipalities_command(args: argparse.Namespace, config: AppConfig) -> None:
    """List the municipalities of a province."""
    async with _open_pipeline(config, QueueLocationProvider()) as pipeline:
        municipalities = await pipeline.select_province(args.province_id)

    if args.json:
        print(json.dumps([asdict(m) for m in municipalities], indent=2, ensure_ascii=False))
        return
    if not municipalities:
        print(f"No municipalities found for province '{args.province_id}'", file=sys.stderr)
        sys.exit(1)
    for municipality in municipalities:
        print(f"  {municipality.id:>5}  {municipality.name}")


def _handle_cache_command(config: AppConfig) -> None:
    """Show the cached snapshot's age and size."""
    with _open_store(config) as store:
        snapshot = store.get_latest()
    if snapshot is None:
        print(f"No cached station list at {config.resolved_cache_path}")
        return

    age = snapshot.age(datetime.now(UTC))
    fresh = age.total_seconds() < config.staleness_minutes * 60
    print(f"Cache: {config.resolved_cache_path}")
    print(f"  Stored:  {snapshot.created_at.isoformat()}")
    print(f"  Age:     {int(age.total_seconds() // 60)} min ({'fresh' if fresh else 'stale'})")
    print(f"  Size:    {len(snapshot.raw)} bytes")


def _add_sort_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sort", choices=["distance", "price"], help="Sort order")
    parser.add_argument(
        "--fuel",
        choices=[fuel.value for fuel in SORTABLE_FUEL_TYPES],
        default=FuelType.DIESEL_A.value,
        help="Fuel used for price sorting (default: diesel_a)",
    )
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--limit", type=int, help="Show at most this many stations")
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Spanish fuel station prices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stations within 5 km of Puerta del Sol, cheapest diesel first
  gasoprice nearby --lat 40.4168 --lon -3.7038 --radius 5 --sort price --fuel diesel_a

  # List provinces, then the municipalities of Madrid (28)
  gasoprice provinces
  gasoprice municipalities 28

  # Stations of a municipality
  gasoprice stations 4354 --sort price --fuel gas95

  # Inspect the local cache
  gasoprice cache
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    nearby_parser = subparsers.add_parser("nearby", help="Stations around a coordinate")
    nearby_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    nearby_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    nearby_parser.add_argument("--radius", type=float, help="Search radius in km (default: 4)")
    nearby_parser.add_argument(
        "--refresh", action="store_true", help="Fetch even if the cache is fresh"
    )
    _add_sort_arguments(nearby_parser)

    stations_parser = subparsers.add_parser("stations", help="Stations of a municipality")
    stations_parser.add_argument("municipality_id", help="Municipality ID (e.g., 4354)")
    _add_sort_arguments(stations_parser)

    provinces_parser = subparsers.add_parser("provinces", help="List provinces")
    provinces_parser.add_argument("--json", action="store_true", help="Output as JSON")

    municipalities_parser = subparsers.add_parser(
        "municipalities", help="List municipalities of a province"
    )
    municipalities_parser.add_argument("province_id", help="Province ID (e.g., 28)")
    municipalities_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("cache", help="Show the cached station list's age")

    return parser


async def _execute_command(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "nearby":
        await _handle_nearby_command(args, config)
    elif args.command == "stations":
        await _handle_stations_command(args, config)
    elif args.command == "provinces":
        await _handle_provinces_command(args, config)
    elif args.command == "municipalities":
        await _handle_municipalities_command(args, config)
    elif args.command == "cache":
        _handle_cache_command(config)


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        await _execute_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
