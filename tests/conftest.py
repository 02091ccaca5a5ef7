"""Shared fixtures: small networks written to temporary CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from netdraw.config import reset_config

VERTICES_HEADER = "vert_id,xcoord,ycoord"
EDGES_HEADER = "edge_tail,edge_head,length,capacity,speed"

# A triangle near Stuttgart with one two-way street.
TRIANGLE_VERTICES = [
    "17,48.7758,9.1829",
    "42,48.7800,9.1900",
    "5,48.7700,9.2000",
]
TRIANGLE_EDGES = [
    "17,42,123.4,100,50",
    "42,5,250.0,200,30",
    "5,17,80.6,1800,100",
    "42,17,123.4,100,50",
]


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_network(tmp_path: Path) -> Callable[..., Path]:
    """Write vertices.csv and edges.csv into a fresh directory."""

    def write(
        vertices: Sequence[str],
        edges: Sequence[str],
        vertices_header: str = VERTICES_HEADER,
        edges_header: str = EDGES_HEADER,
        name: str = "network",
    ) -> Path:
        directory = tmp_path / name
        directory.mkdir()
        (directory / "vertices.csv").write_text(
            "\n".join([vertices_header, *vertices]) + "\n", encoding="utf-8"
        )
        (directory / "edges.csv").write_text(
            "\n".join([edges_header, *edges]) + "\n", encoding="utf-8"
        )
        return directory

    return write


@pytest.fixture
def triangle_dir(write_network) -> Path:
    return write_network(TRIANGLE_VERTICES, TRIANGLE_EDGES)


@pytest.fixture
def write_flows(tmp_path: Path) -> Callable[[Sequence[str]], Path]:
    """Write a flow file with the given data lines."""

    def write(lines: Sequence[str], name: str = "flows.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(["iteration,edge_flow", *lines]) + "\n", encoding="utf-8")
        return path

    return write
