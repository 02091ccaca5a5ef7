"""Network drawing service - Sequences the drawing passes over a graph.

Two modes are supported:
1. Network only: every edge once, optionally overlaid with boundary
   polygons and origin-destination lines.
2. Flow patterns: one page per retained iteration of a flow file, edges
   colored by congestion band, the most congested drawn last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..domain.errors import FormatViolationError
from ..domain.models import Area, LatLng, ODPair, Point
from ..flow.congestion import NUM_BANDS, partition_by_band
from ..flow.flow_file import FlowSamples
from ..graph.attributes import round_half_away
from ..graph.road_graph import RoadGraph
from ..ports.canvas import CanvasPort
from ..viz.palette import KIT_BLACK, KIT_BLACK_15, KIT_GREEN, REDS_9CLASS, LineWidth

# Band b is drawn with REDS_9CLASS[b + BAND_COLOR_OFFSET], so the top band
# gets the darkest red.
BAND_COLOR_OFFSET = len(REDS_9CLASS) - NUM_BANDS

DEMAND_ALPHA = 3


def draw_edge(canvas: CanvasPort, width: float, graph: RoadGraph, u: int, e: int) -> None:
    """Draw edge ``e`` leaving ``u`` as a polyline through its road geometry."""
    canvas.set_line_width(graph.num_lanes(e) * width)
    v = graph.edge_head(e)
    points = [graph.lat_lng(u).web_mercator_projection()]
    points.extend(p.web_mercator_projection() for p in graph.road_geometry(e))
    points.append(graph.lat_lng(v).web_mercator_projection())
    canvas.draw_polyline(points)


def is_retained(iteration: int, last_iteration: int, draw_intermediates: bool) -> bool:
    """Whether the flow pattern after ``iteration`` gets its own page."""
    return draw_intermediates or iteration == 1 or iteration == last_iteration


def rescale_capacities(graph: RoadGraph, analysis_period: float) -> bool:
    """Scale every capacity by the analysis period, keeping it at least 1.

    A graph is rescaled at most once; later calls leave it unchanged and
    return False.
    """
    if graph.capacity_period is not None:
        return False
    for _, e in graph.edges():
        graph.set_capacity(e, max(round_half_away(analysis_period * graph.capacity(e)), 1))
    graph.capacity_period = analysis_period
    return True


@dataclass
class NetworkDrawingService:
    """Draws a road network, or flow patterns on it, onto a canvas.

    Attributes:
        canvas: The drawing backend
        graph: The network to draw
    """

    canvas: CanvasPort
    graph: RoadGraph

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def draw_network(
        self,
        boundaries: Optional[Area] = None,
        od_pairs: Optional[Sequence[ODPair]] = None,
        origin_coordinates: Optional[Sequence[Point]] = None,
    ) -> None:
        """Draw every edge once, then the optional overlays.

        Args:
            boundaries: Polygons drawn on top of the network.
            od_pairs: Travel demand, each pair drawn as a straight line.
            origin_coordinates: Projected vertex coordinates the OD pairs
                refer to; defaults to the coordinates of the graph.
        """
        canvas, graph = self.canvas, self.graph

        self._logger.info("Drawing network", extra={"edges": graph.num_edges})
        if boundaries is not None or od_pairs is not None:
            canvas.set_color(KIT_BLACK_15)
        for u, e in graph.edges():
            draw_edge(canvas, LineWidth.VERY_THIN, graph, u, e)
        canvas.set_line_width(LineWidth.THIN)

        if boundaries is not None:
            self._logger.info("Drawing boundaries", extra={"faces": len(boundaries)})
            canvas.set_color(KIT_BLACK)
            for face in boundaries:
                canvas.draw_polygon(
                    [LatLng(lat, lon).web_mercator_projection() for lon, lat in face]
                )

        if od_pairs is not None:
            self._logger.info("Drawing travel demand", extra={"pairs": len(od_pairs)})
            if origin_coordinates is None:
                origin_coordinates = [
                    graph.lat_lng(v).web_mercator_projection() for v in graph.vertices()
                ]
            canvas.set_color(KIT_GREEN.with_alpha(DEMAND_ALPHA))
            for pair in od_pairs:
                for v in (pair.origin, pair.destination):
                    if not 0 <= v < len(origin_coordinates):
                        raise FormatViolationError(
                            f"OD pair refers to unknown vertex {v}"
                        )
                canvas.draw_line(
                    origin_coordinates[pair.origin], origin_coordinates[pair.destination]
                )

    def draw_flow_patterns(
        self,
        samples: FlowSamples,
        analysis_period: float = 1.0,
        draw_intermediates: bool = False,
    ) -> list[int]:
        """Draw the retained flow patterns, each on its own page.

        Capacities of the graph are rescaled by ``analysis_period`` once,
        before the first pattern is drawn.

        Returns:
            The iterations that were drawn.
        """
        canvas, graph = self.canvas, self.graph
        # Edge ids survive subgraph extraction, so the graph may have fewer
        # edges than the samples but never an id beyond them.
        for _, e in graph.edges():
            if not 0 <= graph.edge_id(e) < samples.num_edges:
                raise FormatViolationError(
                    f"edge id {graph.edge_id(e)} has no flow sample "
                    f"({samples.num_edges} edges per iteration)"
                )

        rescaled = rescale_capacities(graph, analysis_period)
        if not rescaled and graph.capacity_period != analysis_period:
            self._logger.warning(
                "Capacities already rescaled, ignoring analysis period",
                extra={"period": graph.capacity_period, "ignored": analysis_period},
            )

        drawn: list[int] = []
        last = samples.num_iterations
        for i in range(1, last + 1):
            if not is_retained(i, last, draw_intermediates):
                continue
            self._logger.info("Drawing flow pattern", extra={"iteration": i})
            if i != 1:
                canvas.new_page()
            levels = partition_by_band(graph, samples.iteration(i))
            for band, level in enumerate(levels):
                canvas.set_color(REDS_9CLASS[band + BAND_COLOR_OFFSET])
                for u, e in level:
                    draw_edge(canvas, LineWidth.THIN, graph, u, e)
            drawn.append(i)
        return drawn
