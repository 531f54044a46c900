from __future__ import annotations

from dataclasses import dataclass

from kargraph.domain.exceptions import (
    EdgeAlreadyExists,
    EdgeDoesNotExist,
    VertexAlreadyExists,
    VertexDoesNotExist,
)

from .directional_graph import DirectionalGraph
from .sparse_index import SparseIndex


@dataclass(slots=True)
class _Neighbor:
    target: int
    weight: float


class AdjacencyListGraph(DirectionalGraph):
    """Directed graph stored as one list of outgoing edges per vertex.

    Memory is O(V + E). With ``d`` the out-degree of the source vertex:

    - has_vertex, add_vertex, add_edge lookup: O(1) / O(d)
    - get_edge, set_edge, remove_edge: O(d)
    - get_neighbors: O(d)
    - remove_vertex: O(E), every list is scanned for edges into the vertex

    Prefer this representation for large sparse graphs.
    """

    def __init__(self) -> None:
        self._adjacency: SparseIndex[list[_Neighbor]] = SparseIndex()

    def _out_edges(self, x: int) -> list[_Neighbor]:
        out = self._adjacency[x]
        if out is None:
            raise VertexDoesNotExist(x)
        return out

    @staticmethod
    def _find(out: list[_Neighbor], y: int) -> _Neighbor | None:
        return next((n for n in out if n.target == y), None)

    def has_vertex(self, x: int) -> bool:
        return self._adjacency[x] is not None

    def get_edge(self, x: int, y: int) -> float | None:
        found = self._find(self._out_edges(x), y)
        return found.weight if found is not None else None

    def get_vertices(self) -> list[int]:
        return self._adjacency.indices()

    def get_neighbors(self, x: int) -> list[int]:
        return [n.target for n in self._out_edges(x)]

    def add_vertex(self, x: int) -> None:
        self._validate_vertex_id(x)
        if self.has_vertex(x):
            raise VertexAlreadyExists(x)
        self._adjacency[x] = []

    def remove_vertex(self, x: int) -> bool:
        for out in self._adjacency.values():
            out[:] = [n for n in out if n.target != x]

        if not self.has_vertex(x):
            return False
        del self._adjacency[x]
        return True

    def add_edge(self, x: int, y: int, weight: float) -> None:
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        out = self._out_edges(x)
        if self._find(out, y) is not None:
            raise EdgeAlreadyExists(x, y)
        out.append(_Neighbor(y, weight))

    def set_edge(self, x: int, y: int, weight: float) -> None:
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        found = self._find(self._out_edges(x), y)
        if found is None:
            raise EdgeDoesNotExist(x, y)
        found.weight = weight

    def remove_edge(self, x: int, y: int) -> bool:
        # Both endpoints must exist, as for add_edge/set_edge. Older releases
        # inverted this check for the list representation and raised
        # VertexDoesNotExist precisely when the vertex did exist.
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        out = self._out_edges(x)
        found = self._find(out, y)
        if found is None:
            return False
        out.remove(found)
        return True

    def clear(self) -> None:
        self._adjacency.clear()
