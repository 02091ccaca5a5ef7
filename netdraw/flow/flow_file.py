"""Reading the per-edge flow patterns written by a traffic assignment run.

The flow file is a CSV file with the columns ``iteration`` and
``edge_flow``. Iterations are numbered 1, 2, ... without gaps, and each
iteration contributes exactly one row per edge, in the graph's edge order.
Lines starting with '#' are comments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from ..adapters.rows.csv_rows import CsvRowSource
from ..domain.errors import FlowFileCorruptError

logger = logging.getLogger(__name__)

FLOW_COLUMNS = ("iteration", "edge_flow")


@dataclass(frozen=True)
class FlowSamples:
    """Flow values of every iteration, stored as one flat read-only array."""

    flows: np.ndarray
    num_iterations: int
    num_edges: int

    def iteration(self, i: int) -> np.ndarray:
        """Return the flows of 1-based iteration ``i``, indexed by edge id."""
        if not 1 <= i <= self.num_iterations:
            raise IndexError(f"iteration {i} out of range 1..{self.num_iterations}")
        first = (i - 1) * self.num_edges
        return self.flows[first:first + self.num_edges]


def read_flow_samples(path: Union[str, Path], num_edges: int) -> FlowSamples:
    """Read and validate a flow file for a graph with ``num_edges`` edges.

    Raises:
        FlowFileCorruptError: If an iteration is not positive, a flow is
            negative, an iteration is skipped, or an iteration does not
            hold exactly ``num_edges`` rows.
        FieldParseError: If a field is not numeric.
    """
    edge_flows: list[float] = []
    iteration = 0

    with CsvRowSource(path, FLOW_COLUMNS, comment_char="#") as reader:
        def corrupt(message: str) -> FlowFileCorruptError:
            return FlowFileCorruptError(
                f"flow file corrupt: {message}",
                file_path=reader.path,
                line_number=reader.line_number,
                iteration=iteration,
            )

        while (row := reader.next_row()) is not None:
            row_iteration = reader.parse_int("iteration", row[0])
            flow = reader.parse_float("edge_flow", row[1])
            if row_iteration <= 0:
                raise corrupt(f"non-positive iteration {row_iteration}")
            if flow < 0:
                raise corrupt(f"negative flow {flow}")

            if row_iteration != iteration:
                if row_iteration != iteration + 1:
                    raise corrupt(f"iteration {row_iteration} follows {iteration}")
                if len(edge_flows) != iteration * num_edges:
                    raise corrupt(
                        f"iteration {iteration} has {len(edge_flows) - (iteration - 1) * num_edges} "
                        f"rows, expected {num_edges}"
                    )
                iteration = row_iteration
            edge_flows.append(flow)

        if iteration == 0:
            raise corrupt("no flow samples")
        if len(edge_flows) != iteration * num_edges:
            raise corrupt(
                f"iteration {iteration} has {len(edge_flows) - (iteration - 1) * num_edges} "
                f"rows, expected {num_edges}"
            )

    flows = np.asarray(edge_flows, dtype=np.float64)
    flows.setflags(write=False)
    logger.info(
        "Flow patterns read",
        extra={"path": str(path), "iterations": iteration, "edges": num_edges},
    )
    return FlowSamples(flows=flows, num_iterations=iteration, num_edges=num_edges)
