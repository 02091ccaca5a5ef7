"""Region-specific data cleaning.

These routines patch known defects of particular network snapshots. They
are not part of the general import pipeline and are only run on request.
"""

from __future__ import annotations

import logging
from typing import List

import networkx as nx

from ..domain.errors import RegionCleanupError
from .road_graph import RoadGraph

logger = logging.getLogger(__name__)

STUTTGART_NUM_VERTICES = 134663
STUTTGART_NUM_EDGES = 307759

# Highway stubs towards Basle, Frankfurt, Zurich, Nuremberg and Munich.
STUTTGART_OUTLIERS = (121490, 121491, 121492, 121494, 121510)


def largest_scc_mask(graph: RoadGraph) -> List[bool]:
    """Flag the vertices of the largest strongly connected component."""
    digraph = nx.DiGraph()
    digraph.add_nodes_from(graph.vertices())
    digraph.add_edges_from((u, graph.edge_head(e)) for u, e in graph.edges())
    mask = [False] * graph.num_vertices
    if graph.num_vertices == 0:
        return mask
    for v in max(nx.strongly_connected_components(digraph), key=len):
        mask[v] = True
    return mask


def remove_stuttgart_outliers(graph: RoadGraph) -> None:
    """Cut off the highway stubs of the Stuttgart network and keep its largest SCC.

    Raises:
        RegionCleanupError: If the graph is not the expected Stuttgart snapshot.
    """
    expected = (STUTTGART_NUM_VERTICES, STUTTGART_NUM_EDGES)
    actual = (graph.num_vertices, graph.num_edges)
    if actual != expected:
        raise RegionCleanupError(
            "unrecognized Stuttgart network",
            expected=expected,
            actual=actual,
        )

    keep = [True] * graph.num_vertices
    for v in STUTTGART_OUTLIERS:
        keep[v] = False
    graph.extract_vertex_induced_subgraph(keep)
    graph.extract_vertex_induced_subgraph(largest_scc_mask(graph))
    logger.info(
        "Stuttgart outliers removed",
        extra={"vertices": graph.num_vertices, "edges": graph.num_edges},
    )
