#!/usr/bin/env python3
"""Helper script to find municipality IDs by name."""

import asyncio
import sys
import unicodedata

import aiohttp

from gasoprice.adapters.config import AppConfig
from gasoprice.adapters.minetur_api import MineturFuelPriceRepository
from gasoprice.domain.models import Municipality, Province


def _fold(text: str) -> str:
    """Lower-case and strip accents so "Malaga" matches "Málaga"."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _print_match(province: Province, municipality: Municipality) -> None:
    print(f"  {municipality.id:>5}  {municipality.name} ({province.name}, province {province.id})")


async def find_municipality(name: str, province_name: str | None = None) -> None:
    """Search every province (or one) for municipalities whose name contains name."""
    config = AppConfig()
    needle = _fold(name)

    async with aiohttp.ClientSession() as session:
        repository = MineturFuelPriceRepository(
            session, base_url=config.api_base_url, timeout_seconds=config.api_timeout_seconds
        )
        provinces = await repository.fetch_provinces()
        if province_name:
            provinces = [p for p in provinces if _fold(province_name) in _fold(p.name)]
            if not provinces:
                print(f"Province not found: {province_name}")
                sys.exit(1)

        print(f"Searching {len(provinces)} province(s) for: {name}")
        found = 0
        for province in provinces:
            for municipality in await repository.fetch_municipalities(province.id):
                if needle in _fold(municipality.name):
                    _print_match(province, municipality)
                    found += 1

    if not found:
        print(f"No municipality matches: {name}")
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_municipality.py <municipality_name> [province_name]")
        print('Example: python find_municipality.py "Alcalá" Madrid')
        sys.exit(1)

    municipality_name = sys.argv[1]
    province = sys.argv[2] if len(sys.argv) > 2 else None

    asyncio.run(find_municipality(municipality_name, province))
