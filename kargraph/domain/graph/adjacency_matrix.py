from __future__ import annotations

from kargraph.domain.exceptions import (
    EdgeAlreadyExists,
    EdgeDoesNotExist,
    VertexAlreadyExists,
    VertexDoesNotExist,
)

from .directional_graph import DirectionalGraph
from .sparse_index import SparseIndex


class AdjacencyMatrixGraph(DirectionalGraph):
    """Directed graph stored as one row of weights per vertex, indexed by target.

    Memory is O(V^2) in the worst case.

    - get_edge, add_edge, set_edge, remove_edge: O(1)
    - get_neighbors: row scan
    - remove_vertex: O(V), the column is cleared in every row

    Prefer this representation for small or dense graphs.
    """

    def __init__(self) -> None:
        self._matrix: SparseIndex[SparseIndex[float]] = SparseIndex()

    def _row(self, x: int) -> SparseIndex[float]:
        row = self._matrix[x]
        if row is None:
            raise VertexDoesNotExist(x)
        return row

    def has_vertex(self, x: int) -> bool:
        return self._matrix[x] is not None

    def get_edge(self, x: int, y: int) -> float | None:
        return self._row(x)[y]

    def get_vertices(self) -> list[int]:
        return self._matrix.indices()

    def get_neighbors(self, x: int) -> list[int]:
        return self._row(x).indices()

    def add_vertex(self, x: int) -> None:
        self._validate_vertex_id(x)
        if self.has_vertex(x):
            raise VertexAlreadyExists(x)
        self._matrix[x] = SparseIndex()

    def remove_vertex(self, x: int) -> bool:
        for row in self._matrix.values():
            del row[x]

        if not self.has_vertex(x):
            return False
        del self._matrix[x]
        return True

    def add_edge(self, x: int, y: int, weight: float) -> None:
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        row = self._row(x)
        if row[y] is not None:
            raise EdgeAlreadyExists(x, y)
        row[y] = weight

    def set_edge(self, x: int, y: int, weight: float) -> None:
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        row = self._row(x)
        if row[y] is None:
            raise EdgeDoesNotExist(x, y)
        row[y] = weight

    def remove_edge(self, x: int, y: int) -> bool:
        self._check_has_vertex(x)
        self._check_has_vertex(y)

        row = self._row(x)
        if row[y] is None:
            return False
        del row[y]
        return True

    def clear(self) -> None:
        self._matrix.clear()
