"""Classification of edges into congestion bands.

A band is ``floor(5 * flow / capacity)``: five equal bins of width 0.2
cover the flow/capacity ratio from 0 to 1, and every over-capacity edge
falls into the top band.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..graph.road_graph import RoadGraph

BINS_PER_CAPACITY = 100 // 20
TOP_BAND = BINS_PER_CAPACITY
NUM_BANDS = TOP_BAND + 1


def classify(flow: float, capacity: float) -> int:
    """Return the congestion band of an edge carrying ``flow``."""
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    band = math.floor(BINS_PER_CAPACITY * flow / capacity)
    return max(0, min(band, TOP_BAND))


def partition_by_band(graph: RoadGraph, flows: Sequence[float]) -> List[List[Tuple[int, int]]]:
    """Group the (tail, edge) pairs of ``graph`` by congestion band.

    ``flows`` is indexed by edge id. Within a band, edges keep the graph's
    edge-iteration order.
    """
    levels: List[List[Tuple[int, int]]] = [[] for _ in range(NUM_BANDS)]
    for u, e in graph.edges():
        levels[classify(flows[graph.edge_id(e)], graph.capacity(e))].append((u, e))
    return levels
