from __future__ import annotations

from kargraph.domain.exceptions import MissingCoordinates
from kargraph.domain.models import Coords

from .directional_graph import DirectionalGraph
from .sparse_index import SparseIndex


class CoordsGraph(DirectionalGraph):
    """Decorator attaching optional 3D coordinates to the vertices of a graph.

    Every graph operation is forwarded to the wrapped graph. Edges added
    without a weight get the Euclidean distance between their endpoints.
    The wrapped graph is owned by the decorator and should not be mutated
    behind its back, otherwise coordinates of removed vertices linger.
    """

    def __init__(self, graph: DirectionalGraph) -> None:
        self._graph = graph
        self._coords: SparseIndex[Coords] = SparseIndex()

    @property
    def graph(self) -> DirectionalGraph:
        return self._graph

    def has_vertex(self, x: int) -> bool:
        return self._graph.has_vertex(x)

    def get_edge(self, x: int, y: int) -> float | None:
        return self._graph.get_edge(x, y)

    def get_vertices(self) -> list[int]:
        return self._graph.get_vertices()

    def get_neighbors(self, x: int) -> list[int]:
        return self._graph.get_neighbors(x)

    def add_vertex(self, x: int, coords: Coords | None = None) -> None:
        self._graph.add_vertex(x)
        if coords is not None:
            self.set_vertex_coords(x, coords)

    def remove_vertex(self, x: int) -> bool:
        removed = self._graph.remove_vertex(x)
        del self._coords[x]
        return removed

    def add_edge(self, x: int, y: int, weight: float | None = None) -> None:
        if weight is None:
            weight = self.distance(x, y)
        self._graph.add_edge(x, y, weight)

    def set_edge(self, x: int, y: int, weight: float) -> None:
        self._graph.set_edge(x, y, weight)

    def remove_edge(self, x: int, y: int) -> bool:
        return self._graph.remove_edge(x, y)

    def clear(self) -> None:
        self._coords.clear()
        self._graph.clear()

    def get_vertex_coords(self, x: int) -> Coords | None:
        self._check_has_vertex(x)
        return self._coords[x]

    def set_vertex_coords(self, x: int, coords: Coords) -> None:
        self._check_has_vertex(x)
        self._coords[x] = coords

    def distance(self, x: int, y: int) -> float:
        """Euclidean distance between two vertices that both have coordinates."""

        a = self.get_vertex_coords(x)
        if a is None:
            raise MissingCoordinates(x)
        b = self.get_vertex_coords(y)
        if b is None:
            raise MissingCoordinates(y)
        return a.distance_to(b)
