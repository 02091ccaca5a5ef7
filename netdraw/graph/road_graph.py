"""Dense in-memory road graph.

Vertices are numbered 0..N-1 and edges 0..M-1. Edges keep the order in
which they were added; that order is the graph's edge-iteration order,
which the flow file relies on.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..domain.models import LatLng, Point
from .attributes import EDGE_KINDS, VERTEX_KINDS, AttributeKind, default_value


class RoadGraph:
    """A static directed graph with per-vertex and per-edge attribute slots."""

    def __init__(self) -> None:
        self._vertex_attrs: Dict[AttributeKind, List[Any]] = {k: [] for k in VERTEX_KINDS}
        self._edge_attrs: Dict[AttributeKind, List[Any]] = {k: [] for k in EDGE_KINDS}
        self._tails: List[int] = []
        self._heads: List[int] = []
        # Analysis period the capacities were rescaled to, None while they
        # are still per import period.
        self.capacity_period: Optional[float] = None

    def __repr__(self) -> str:
        return f"RoadGraph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"

    @property
    def num_vertices(self) -> int:
        return len(self._vertex_attrs[AttributeKind.LAT_LNG])

    @property
    def num_edges(self) -> int:
        return len(self._tails)

    def add_vertex(self, attrs: Optional[Mapping[AttributeKind, Any]] = None) -> int:
        """Append a vertex; missing attributes take their default value."""
        attrs = attrs or {}
        for kind, values in self._vertex_attrs.items():
            values.append(attrs.get(kind, default_value(kind)))
        return self.num_vertices - 1

    def add_edge(
        self,
        tail: int,
        head: int,
        attrs: Optional[Mapping[AttributeKind, Any]] = None,
    ) -> int:
        """Append an edge between two existing vertices."""
        for v in (tail, head):
            if not 0 <= v < self.num_vertices:
                raise IndexError(f"vertex {v} out of range")
        attrs = attrs or {}
        self._tails.append(tail)
        self._heads.append(head)
        for kind, values in self._edge_attrs.items():
            values.append(attrs.get(kind, default_value(kind)))
        return self.num_edges - 1

    def vertices(self) -> range:
        return range(self.num_vertices)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield (tail, edge) pairs in edge-iteration order."""
        for e, tail in enumerate(self._tails):
            yield tail, e

    def edge_tail(self, e: int) -> int:
        return self._tails[e]

    def edge_head(self, e: int) -> int:
        return self._heads[e]

    def lat_lng(self, v: int) -> LatLng:
        return self._vertex_attrs[AttributeKind.LAT_LNG][v]

    def coordinate(self, v: int) -> Point:
        return self._vertex_attrs[AttributeKind.COORDINATE][v]

    def vertex_id(self, v: int) -> int:
        return self._vertex_attrs[AttributeKind.VERTEX_ID][v]

    def capacity(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.CAPACITY][e]

    def set_capacity(self, e: int, value: int) -> None:
        self._edge_attrs[AttributeKind.CAPACITY][e] = value

    def free_flow_speed(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.FREE_FLOW_SPEED][e]

    def length(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.LENGTH][e]

    def travel_time(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.TRAVEL_TIME][e]

    def road_geometry(self, e: int) -> Sequence[LatLng]:
        return self._edge_attrs[AttributeKind.ROAD_GEOMETRY][e]

    def num_lanes(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.NUM_LANES][e]

    def edge_id(self, e: int) -> int:
        return self._edge_attrs[AttributeKind.EDGE_ID][e]

    def set_edge_id(self, e: int, value: int) -> None:
        self._edge_attrs[AttributeKind.EDGE_ID][e] = value

    def extract_vertex_induced_subgraph(self, keep: Sequence[bool]) -> None:
        """Keep only the vertices flagged in ``keep`` and the edges between them.

        Kept vertices are renumbered densely in their old order. Surviving
        edges keep their order and all attribute values, including edge_id.
        """
        if len(keep) != self.num_vertices:
            raise ValueError(
                f"mask has {len(keep)} entries for {self.num_vertices} vertices"
            )
        new_ids: List[int] = []
        next_id = 0
        for flag in keep:
            new_ids.append(next_id if flag else -1)
            next_id += 1 if flag else 0

        for values in self._vertex_attrs.values():
            values[:] = [value for value, flag in zip(values, keep) if flag]

        kept_edges = [
            e for e in range(self.num_edges)
            if keep[self._tails[e]] and keep[self._heads[e]]
        ]
        self._tails = [new_ids[self._tails[e]] for e in kept_edges]
        self._heads = [new_ids[self._heads[e]] for e in kept_edges]
        for values in self._edge_attrs.values():
            values[:] = [values[e] for e in kept_edges]
