"""Immutable domain models for netdraw.

Geographic and planar value types plus the records exchanged between the
auxiliary readers and the rendering service. These models have no
external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

# A special value representing infinity.
INFTY = (2**31 - 1) // 2

# Special value representing an invalid (vertex/edge) ID.
INVALID_ID = -1

# Radius used by the spherical web Mercator projection, in meters.
WEB_MERCATOR_RADIUS = 6378137.0


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the projected plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class LatLng:
    """A geographic coordinate in degrees."""

    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def in_range(self) -> bool:
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def web_mercator_projection(self) -> Point:
        """Project onto the web Mercator plane (EPSG:3857), in meters."""
        x = WEB_MERCATOR_RADIUS * math.radians(self.longitude)
        y = WEB_MERCATOR_RADIUS * math.log(
            math.tan(math.pi / 4 + math.radians(self.latitude) / 2)
        )
        return Point(x, y)


@dataclass(slots=True)
class Rectangle:
    """An axis-aligned box that grows to enclose the points it is given."""

    south_west: Optional[Point] = None
    north_east: Optional[Point] = None

    @property
    def is_empty(self) -> bool:
        return self.south_west is None or self.north_east is None

    def extend(self, point: Point) -> None:
        if self.south_west is None or self.north_east is None:
            self.south_west = point
            self.north_east = point
            return
        self.south_west = Point(
            min(self.south_west.x, point.x), min(self.south_west.y, point.y)
        )
        self.north_east = Point(
            max(self.north_east.x, point.x), max(self.north_east.y, point.y)
        )


@dataclass(frozen=True, slots=True)
class ODPair:
    """An origin-destination pair of internal vertex ids."""

    origin: int
    destination: int


@dataclass
class Area:
    """A set of polygonal faces read from an OSM POLY file.

    Each face is a ring of (longitude, latitude) pairs.
    """

    name: str = ""
    faces: list[list[tuple[float, float]]] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[tuple[float, float]]]:
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)

    def bounding_box(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return ((min_lon, min_lat), (max_lon, max_lat)) over all faces."""
        lons = [lon for face in self.faces for lon, _ in face]
        lats = [lat for face in self.faces for _, lat in face]
        if not lons:
            raise ValueError("area has no vertices")
        return (min(lons), min(lats)), (max(lons), max(lats))
