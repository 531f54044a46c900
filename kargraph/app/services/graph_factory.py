from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence, TypeVar

from kargraph.config import GraphRuntimeConfig
from kargraph.domain.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    CoordsGraph,
    DirectionalGraph,
)
from kargraph.domain.models import Coords

logger = logging.getLogger(__name__)

Edge = tuple[int, int, float]
CoordsEdge = tuple[int, int, float | None]

G = TypeVar("G", bound=DirectionalGraph)


def prefers_matrix(
    vertex_count: int, edge_count: int, config: GraphRuntimeConfig | None = None
) -> bool:
    """Whether the adjacency matrix is the better representation.

    The matrix costs O(V^2) memory but does every edge operation in O(1).
    That memory is negligible for small graphs, and for near-complete
    graphs the adjacency list would need about as much anyway.
    """

    cfg = config or GraphRuntimeConfig.from_env()
    return vertex_count < cfg.matrix_max_vertices or edge_count >= vertex_count * (
        vertex_count - cfg.density_offset
    )


def select_representation(
    vertex_count: int, edge_count: int, config: GraphRuntimeConfig | None = None
) -> Callable[[], DirectionalGraph]:
    use_matrix = prefers_matrix(vertex_count, edge_count, config)
    logger.debug(
        "Selected graph representation",
        extra={
            "vertex_count": vertex_count,
            "edge_count": edge_count,
            "representation": "matrix" if use_matrix else "list",
        },
    )
    return AdjacencyMatrixGraph if use_matrix else AdjacencyListGraph


def init_graph(graph: G, vertices: Iterable[int], edges: Iterable[Edge] = ()) -> G:
    """Add ``vertices`` then ``edges`` to ``graph``.

    Not transactional: if an insertion fails, everything before it stays.
    """

    for x in vertices:
        graph.add_vertex(x)
    for x, y, weight in edges:
        graph.add_edge(x, y, weight)
    return graph


def create_adjacency_list_graph(
    vertex_count: int, edges: Sequence[Edge] = ()
) -> AdjacencyListGraph:
    return init_graph(AdjacencyListGraph(), range(vertex_count), edges)


def create_adjacency_matrix_graph(
    vertex_count: int, edges: Sequence[Edge] = ()
) -> AdjacencyMatrixGraph:
    return init_graph(AdjacencyMatrixGraph(), range(vertex_count), edges)


def create_graph(
    vertex_count: int,
    edges: Sequence[Edge] = (),
    *,
    config: GraphRuntimeConfig | None = None,
) -> DirectionalGraph:
    """Build a graph with vertices ``0..vertex_count-1`` in the cheaper representation."""

    factory = select_representation(vertex_count, len(edges), config)
    return init_graph(factory(), range(vertex_count), edges)


def init_coords_graph(
    graph: DirectionalGraph,
    vertex_coords: Sequence[Coords],
    edges: Iterable[CoordsEdge] = (),
) -> CoordsGraph:
    """Wrap ``graph`` (cleared first) with vertices ``0..n-1`` placed at ``vertex_coords``.

    Edges without a weight get the distance between their endpoints.
    """

    graph.clear()
    result = CoordsGraph(graph)
    for x, coords in enumerate(vertex_coords):
        result.add_vertex(x, coords)
    for x, y, weight in edges:
        result.add_edge(x, y, weight)
    return result


def create_adjacency_list_coords_graph(
    vertex_coords: Sequence[Coords], edges: Sequence[CoordsEdge] = ()
) -> CoordsGraph:
    return init_coords_graph(AdjacencyListGraph(), vertex_coords, edges)


def create_adjacency_matrix_coords_graph(
    vertex_coords: Sequence[Coords], edges: Sequence[CoordsEdge] = ()
) -> CoordsGraph:
    return init_coords_graph(AdjacencyMatrixGraph(), vertex_coords, edges)


def create_coords_graph(
    vertex_coords: Sequence[Coords],
    edges: Sequence[CoordsEdge] = (),
    *,
    config: GraphRuntimeConfig | None = None,
) -> CoordsGraph:
    factory = select_representation(len(vertex_coords), len(edges), config)
    return init_coords_graph(factory(), vertex_coords, edges)
