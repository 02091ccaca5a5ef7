"""Mapping from external vertex identifiers to dense internal ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..domain.errors import DuplicateVertexError, ImportOrderError, UnknownEndpointError


@dataclass
class IdentifierRemapper:
    """Assigns internal ids 0, 1, 2, ... to vertices in first-seen order.

    The remapper has two phases. While vertices are being registered no
    endpoint may be resolved; once mark_vertices_complete() is called no
    further vertex may be registered.
    """

    _orig_to_new: Dict[int, int] = field(default_factory=dict, repr=False)
    _vertices_complete: bool = field(default=False, repr=False)

    @property
    def num_vertices(self) -> int:
        return len(self._orig_to_new)

    @property
    def vertices_complete(self) -> bool:
        return self._vertices_complete

    def register_vertex(self, external_id: int) -> int:
        """Register ``external_id`` and return its new internal id.

        Raises:
            DuplicateVertexError: If ``external_id`` is already registered.
            ImportOrderError: If the vertex phase is already closed.
        """
        if self._vertices_complete:
            raise ImportOrderError(
                f"vertex {external_id} registered after the vertex phase was closed"
            )
        if external_id in self._orig_to_new:
            raise DuplicateVertexError(
                f"duplicate vertex {external_id}",
                external_id=external_id,
            )
        internal_id = len(self._orig_to_new)
        self._orig_to_new[external_id] = internal_id
        return internal_id

    def mark_vertices_complete(self) -> None:
        self._vertices_complete = True

    def resolve(self, external_id: int) -> int:
        """Return the internal id of a registered vertex.

        Raises:
            ImportOrderError: If vertices are still being registered.
            UnknownEndpointError: If ``external_id`` was never registered.
        """
        if not self._vertices_complete:
            raise ImportOrderError(
                f"endpoint {external_id} resolved before all vertices were read"
            )
        try:
            return self._orig_to_new[external_id]
        except KeyError:
            raise UnknownEndpointError(
                f"unknown endpoint {external_id}",
                external_id=external_id,
            ) from None
