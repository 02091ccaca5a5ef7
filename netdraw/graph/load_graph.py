"""Graph building from an importer.

An importer is read in two phases: first every vertex, then every edge.
For each record the requested attribute kinds are fetched through the
importer's ``value_of``, which answers a default for kinds the source
format does not carry.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from ..domain.errors import FormatViolationError
from .attributes import EDGE_KINDS, VERTEX_KINDS, AttributeKind
from .road_graph import RoadGraph

logger = logging.getLogger(__name__)


class GraphImporter(Protocol):
    """What build_graph needs from an importer."""

    def next_vertex(self) -> bool: ...

    def vertex_id(self) -> int: ...

    def next_edge(self) -> bool: ...

    def edge_tail(self) -> int: ...

    def edge_head(self) -> int: ...

    def value_of(self, kind: AttributeKind) -> Any: ...


def build_graph(
    importer: GraphImporter,
    vertex_kinds: Sequence[AttributeKind] = VERTEX_KINDS,
    edge_kinds: Sequence[AttributeKind] = EDGE_KINDS,
) -> RoadGraph:
    """Read every vertex and edge from ``importer`` into a new RoadGraph.

    Edge ids are assigned once the whole graph is loaded.
    """
    graph = RoadGraph()

    while importer.next_vertex():
        v = graph.add_vertex({kind: importer.value_of(kind) for kind in vertex_kinds})
        if v != importer.vertex_id():
            raise FormatViolationError(
                f"importer returned vertex id {importer.vertex_id()}, expected {v}"
            )

    while importer.next_edge():
        graph.add_edge(
            importer.edge_tail(),
            importer.edge_head(),
            {kind: importer.value_of(kind) for kind in edge_kinds},
        )

    assign_edge_ids(graph)
    logger.info(
        "Graph built",
        extra={"vertices": graph.num_vertices, "edges": graph.num_edges},
    )
    return graph


def assign_edge_ids(graph: RoadGraph) -> None:
    """Number the edges 0..M-1 in edge-iteration order."""
    for edge_id, (_, e) in enumerate(graph.edges()):
        graph.set_edge_id(e, edge_id)
