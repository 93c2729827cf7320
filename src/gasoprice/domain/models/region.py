"""Administrative region domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Province:
    """A Spanish province, identified by its API code (e.g. "28")."""

    id: str
    name: str


@dataclass(frozen=True)
class Municipality:
    """A municipality. Always belongs to exactly one province."""

    id: str
    name: str
    province_id: str
