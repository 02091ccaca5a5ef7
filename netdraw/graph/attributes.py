"""Vertex and edge attribute kinds with their defaults and formulas.

Importers answer ``value_of(kind)`` for every kind below. A kind the
source format does not carry resolves to its entry in DEFAULT_VALUES, so
different sources can feed the same graph-building code.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

from ..domain.models import INFTY, INVALID_ID, LatLng, Point


class AttributeKind(Enum):
    """Attribute slots known to the road graph."""

    COORDINATE = "coordinate"
    LAT_LNG = "lat_lng"
    VERTEX_ID = "vertex_id"
    CAPACITY = "capacity"
    FREE_FLOW_SPEED = "free_flow_speed"
    LENGTH = "length"
    TRAVEL_TIME = "travel_time"
    ROAD_GEOMETRY = "road_geometry"
    NUM_LANES = "num_lanes"
    EDGE_ID = "edge_id"


VERTEX_KINDS = (AttributeKind.COORDINATE, AttributeKind.LAT_LNG, AttributeKind.VERTEX_ID)

EDGE_KINDS = (
    AttributeKind.CAPACITY,
    AttributeKind.FREE_FLOW_SPEED,
    AttributeKind.LENGTH,
    AttributeKind.TRAVEL_TIME,
    AttributeKind.ROAD_GEOMETRY,
    AttributeKind.NUM_LANES,
    AttributeKind.EDGE_ID,
)

DEFAULT_VALUES: Mapping[AttributeKind, Any] = {
    AttributeKind.COORDINATE: Point(),
    AttributeKind.LAT_LNG: LatLng(),
    AttributeKind.VERTEX_ID: INVALID_ID,
    AttributeKind.CAPACITY: 0,
    AttributeKind.FREE_FLOW_SPEED: 0,
    AttributeKind.LENGTH: 0,
    AttributeKind.TRAVEL_TIME: 0,
    AttributeKind.ROAD_GEOMETRY: (),
    AttributeKind.NUM_LANES: 1,
    AttributeKind.EDGE_ID: INVALID_ID,
}


def default_value(kind: AttributeKind) -> Any:
    """Return the value used when a source does not provide ``kind``."""
    return DEFAULT_VALUES[kind]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def capacity_per_period(raw_capacity: int, analysis_period: float) -> int:
    """Convert a per-hour capacity into vehicles per analysis period."""
    return round_half_away(raw_capacity / analysis_period)


def rounded_length(parsed_length: float) -> int:
    return round_half_away(parsed_length)


def free_flow_travel_time(length: int, free_flow_speed: int) -> int:
    """Time to traverse an edge in free flow.

    With the length in meters and the speed in km/h, ``36 * length / speed``
    is the travel time in tenths of a second. An edge with zero speed can
    never be traversed and gets INFTY.
    """
    if free_flow_speed == 0:
        return INFTY
    return round_half_away(36.0 * length / free_flow_speed)
