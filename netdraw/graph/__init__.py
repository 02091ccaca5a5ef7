"""Graph-related utilities for representing the road network.

This subpackage contains the dense road graph, the attribute catalog
shared by importers, the identifier remapper and the graph builder.
"""

from .attributes import AttributeKind
from .load_graph import assign_edge_ids, build_graph
from .remapper import IdentifierRemapper
from .road_graph import RoadGraph

__all__ = ["AttributeKind", "IdentifierRemapper", "RoadGraph", "assign_edge_ids", "build_graph"]
