"""CSV network importer adapter.

Input description:
- vertices.csv: vert_id, xcoord (latitude), ycoord (longitude)
- edges.csv: edge_tail, edge_head, length, capacity, speed
- analysis period: unit is 1h
- length: in meters
- capacity: cars per hour
- speed: speed in free flow (km/h)

The graph builder first calls next_vertex() repeatedly and fetches the
vertex attributes, then calls next_edge() repeatedly and fetches the edge
attributes. Extra columns in either file are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from ...config import ImportConfig
from ...domain.errors import ConfigurationError, FormatViolationError, ImportOrderError
from ...domain.models import LatLng
from ...graph.attributes import (
    AttributeKind,
    capacity_per_period,
    default_value,
    free_flow_travel_time,
    rounded_length,
)
from ...graph.remapper import IdentifierRemapper
from ...ports.rows import RowSourcePort
from ..rows.csv_rows import CsvRowSource

VERTEX_COLUMNS = ("vert_id", "xcoord", "ycoord")
EDGE_COLUMNS = ("edge_tail", "edge_head", "length", "capacity", "speed")


@dataclass
class _VertexRecord:
    id: int
    lat_lng: LatLng


@dataclass
class _EdgeRecord:
    tail: int
    head: int
    length: int
    capacity: int
    free_flow_speed: int


class CsvNetworkImporter:
    """Importer for networks stored as a pair of CSV files in one directory.

    Vertices get sequential ids 0..n-1 in file order. All vertices must be
    read before the first edge.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        analysis_period: float = 1.0,
        vertices_file: str = "vertices.csv",
        edges_file: str = "edges.csv",
    ) -> None:
        if not analysis_period > 0:
            raise ConfigurationError(
                f"analysis period must be positive, got {analysis_period}",
                setting_name="analysis_period",
                expected_type="float > 0",
            )
        self.analysis_period = analysis_period
        self._logger = logging.getLogger(__name__)

        directory = Path(directory)
        self._vertex_reader: RowSourcePort = CsvRowSource(directory / vertices_file, VERTEX_COLUMNS)
        try:
            self._edge_reader: RowSourcePort = CsvRowSource(directory / edges_file, EDGE_COLUMNS)
        except BaseException:
            self._vertex_reader.close()
            raise

        self._remapper = IdentifierRemapper()
        self._current_vertex: Optional[_VertexRecord] = None
        self._current_edge: Optional[_EdgeRecord] = None

        self._accessors: Dict[AttributeKind, Callable[[], Any]] = {
            AttributeKind.LAT_LNG: lambda: self._vertex().lat_lng,
            AttributeKind.VERTEX_ID: lambda: self._vertex().id,
            AttributeKind.CAPACITY: lambda: capacity_per_period(
                self._edge().capacity, self.analysis_period
            ),
            AttributeKind.FREE_FLOW_SPEED: lambda: self._edge().free_flow_speed,
            AttributeKind.LENGTH: lambda: self._edge().length,
            AttributeKind.TRAVEL_TIME: lambda: free_flow_travel_time(
                self._edge().length, self._edge().free_flow_speed
            ),
        }

    @classmethod
    def from_config(cls, directory: Union[str, Path], config: ImportConfig) -> CsvNetworkImporter:
        return cls(
            directory,
            analysis_period=config.analysis_period,
            vertices_file=config.vertices_file,
            edges_file=config.edges_file,
        )

    def __enter__(self) -> CsvNetworkImporter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _vertex(self) -> _VertexRecord:
        if self._current_vertex is None:
            raise ImportOrderError("no current vertex")
        return self._current_vertex

    def _edge(self) -> _EdgeRecord:
        if self._current_edge is None:
            raise ImportOrderError("no current edge")
        return self._current_edge

    def next_vertex(self) -> bool:
        """Read the next vertex. Returns False if there are no more vertices."""
        if self._remapper.vertices_complete:
            return False
        reader = self._vertex_reader
        row = reader.next_row()
        if row is None:
            self._remapper.mark_vertices_complete()
            self._current_vertex = None
            self._logger.info(
                "Vertices read",
                extra={"path": reader.path, "vertices": self._remapper.num_vertices},
            )
            return False

        id_field, x_field, y_field = row
        external_id = reader.parse_int("vert_id", id_field)
        lat_lng = LatLng(reader.parse_float("xcoord", x_field), reader.parse_float("ycoord", y_field))
        if not lat_lng.in_range:
            raise FormatViolationError(
                f"latitude out of range {lat_lng.latitude}"
                if not -90.0 <= lat_lng.latitude <= 90.0
                else f"longitude out of range {lat_lng.longitude}",
                file_path=reader.path,
                line_number=reader.line_number,
            )
        try:
            self._remapper.register_vertex(external_id)
        except FormatViolationError as e:
            e.file_path, e.line_number = reader.path, reader.line_number
            raise
        self._current_vertex = _VertexRecord(external_id, lat_lng)
        return True

    def vertex_id(self) -> int:
        """Return the internal id of the current vertex."""
        return self._remapper.num_vertices - 1

    def next_edge(self) -> bool:
        """Read the next edge. Returns False if there are no more edges."""
        if not self._remapper.vertices_complete:
            raise ImportOrderError("edges requested before all vertices were read")
        reader = self._edge_reader
        row = reader.next_row()
        if row is None:
            self._current_edge = None
            return False

        tail_field, head_field, length_field, capacity_field, speed_field = row
        tail = reader.parse_int("edge_tail", tail_field)
        head = reader.parse_int("edge_head", head_field)
        capacity = reader.parse_int("capacity", capacity_field)
        if capacity < 0:
            raise FormatViolationError(
                f"negative capacity {capacity}",
                file_path=reader.path,
                line_number=reader.line_number,
            )
        speed = reader.parse_int("speed", speed_field)
        if speed < 0:
            raise FormatViolationError(
                f"negative free-flow speed {speed}",
                file_path=reader.path,
                line_number=reader.line_number,
            )
        try:
            tail = self._remapper.resolve(tail)
            head = self._remapper.resolve(head)
        except FormatViolationError as e:
            e.file_path, e.line_number = reader.path, reader.line_number
            raise
        length = rounded_length(reader.parse_float("length", length_field))
        if length < 0:
            raise FormatViolationError(
                f"negative length {length}",
                file_path=reader.path,
                line_number=reader.line_number,
            )
        self._current_edge = _EdgeRecord(tail, head, length, capacity, speed)
        return True

    def edge_tail(self) -> int:
        return self._edge().tail

    def edge_head(self) -> int:
        return self._edge().head

    def value_of(self, kind: AttributeKind) -> Any:
        """Return ``kind`` for the current vertex/edge, or its default value
        if the attribute is not part of the file format."""
        accessor = self._accessors.get(kind)
        if accessor is None:
            return default_value(kind)
        return accessor()

    def close(self) -> None:
        self._vertex_reader.close()
        self._edge_reader.close()
