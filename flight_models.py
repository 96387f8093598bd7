# flight_models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence


# --- coordinates --------------------------------------------------------

@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass(frozen=True)
class Waypoint:
    """A route stop: coordinate plus an opaque identifier (airport code)."""
    lat: float
    lon: float
    code: str
    name: str = ""
    city: str = ""
    type: str = ""

    @property
    def label(self) -> str:
        return f"{self.code} - {self.city or self.name}"


Route = Sequence[Waypoint]


# --- landmarks ----------------------------------------------------------

@dataclass(frozen=True)
class Landmark:
    id: str
    lat: float
    lon: float
    tier: int
    name: str = ""
    description: str = ""
    image_url: str = ""
    wiki_url: str = ""
    # display metadata the engine never looks at
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


def landmark_id(lat: float, lon: float, name: str) -> str:
    # same record always yields the same id
    return f"{float(lat)}_{float(lon)}_{name}"


# --- bounds -------------------------------------------------------------

@dataclass(frozen=True)
class BoundingBox:
    """Lat/lon rectangle. ``wraps`` is set when it crosses the antimeridian,
    in which case ``east < west`` and the covered longitudes are
    ``[west, 180] + [-180, east]``."""
    north: float
    south: float
    east: float
    west: float
    wraps: bool = False

    @classmethod
    def from_bounds(cls, south: float, west: float, north: float, east: float) -> "BoundingBox":
        # map widgets report raw SW/NE corners
        return cls(north=north, south=south, east=east, west=west, wraps=east < west)


__all__ = [
    "Coordinate",
    "Waypoint",
    "Route",
    "Landmark",
    "landmark_id",
    "BoundingBox",
]
