from __future__ import annotations

import random

import networkx as nx
import pytest

from kargraph.adapters.networkx_adapter import to_networkx
from kargraph.app.services.graph_factory import init_graph
from kargraph.domain.algorithms import PathResult, min_path
from kargraph.domain.exceptions import EndpointNotInGraph, VertexDoesNotExist
from kargraph.domain.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    CoordsGraph,
    DirectionalGraph,
)
from kargraph.domain.models import Coords


@pytest.fixture(params=[AdjacencyListGraph, AdjacencyMatrixGraph])
def graph(request: pytest.FixtureRequest) -> DirectionalGraph:
    return init_graph(
        request.param(),
        [0, 1, 2, 3],
        [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0), (2, 3, 1.0)],
    )


def test_prefers_cheaper_indirect_route(graph: DirectionalGraph) -> None:
    assert min_path(graph, 0, 2) == (3.0, [1, 2])
    assert min_path(graph, 0, 3) == (4.0, [1, 2, 3])


def test_result_is_named(graph: DirectionalGraph) -> None:
    result = min_path(graph, 0, 3)
    assert isinstance(result, PathResult)
    assert result.cost == 4.0
    assert result.path == [1, 2, 3]


def test_edges_are_one_directional(graph: DirectionalGraph) -> None:
    assert min_path(graph, 3, 0) is None


def test_same_source_and_target(graph: DirectionalGraph) -> None:
    assert min_path(graph, 0, 0) == (0.0, [])


def test_missing_endpoint_fails(graph: DirectionalGraph) -> None:
    with pytest.raises(EndpointNotInGraph) as exc_info:
        min_path(graph, 9, 0)
    assert exc_info.value.vertex == 9
    assert "doesn't have a vertex 9" in str(exc_info.value)

    with pytest.raises(VertexDoesNotExist):
        min_path(graph, 0, 9)

    # Checked before the source == target shortcut.
    with pytest.raises(EndpointNotInGraph):
        min_path(graph, 9, 9)


def test_custom_cost_function(graph: DirectionalGraph) -> None:
    # Count hops instead of summing weights.
    assert min_path(graph, 0, 2, cost=lambda x, y: 1.0) == (1.0, [2])


def test_sparse_ids() -> None:
    g = init_graph(
        AdjacencyListGraph(),
        [100, 7, 3000],
        [(100, 7, 2.0), (7, 3000, 2.0), (100, 3000, 10.0)],
    )
    assert min_path(g, 100, 3000) == (4.0, [7, 3000])


def test_ties_go_to_first_enumerated_vertex() -> None:
    g = init_graph(
        AdjacencyMatrixGraph(),
        [0, 1, 2, 3],
        [(0, 2, 1.0), (0, 1, 1.0), (1, 3, 1.0), (2, 3, 1.0)],
    )
    # Both 1 and 2 are at distance 1; vertex 1 is enumerated first and
    # relaxes 3 before 2 gets a chance with an equal candidate.
    assert min_path(g, 0, 3) == (2.0, [1, 3])


def test_zero_weight_edges() -> None:
    g = init_graph(AdjacencyListGraph(), [0, 1, 2], [(0, 1, 0.0), (1, 2, 0.0)])
    assert min_path(g, 0, 2) == (0.0, [1, 2])


def test_coordinate_weights() -> None:
    g = CoordsGraph(AdjacencyListGraph())
    g.add_vertex(0, Coords(0.0, 0.0))
    g.add_vertex(1, Coords(3.0, 4.0))
    g.add_vertex(2, Coords(6.0, 0.0))
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(0, 2, 20.0)

    assert min_path(g, 0, 2) == (10.0, [1, 2])


@pytest.mark.parametrize("seed", range(5))
def test_costs_match_networkx(seed: int) -> None:
    rng = random.Random(seed)
    g = AdjacencyListGraph()
    for v in range(25):
        g.add_vertex(v)
    for _ in range(80):
        x, y = rng.randrange(25), rng.randrange(25)
        if g.get_edge(x, y) is None:
            g.add_edge(x, y, float(rng.randint(1, 20)))

    oracle = to_networkx(g)
    for target in range(1, 25):
        result = min_path(g, 0, target)
        if not nx.has_path(oracle, 0, target):
            assert result is None
            continue
        assert result is not None
        assert result.cost == nx.dijkstra_path_length(oracle, 0, target)
        assert result.path[-1] == target
        hops = [0, *result.path]
        assert sum(g.get_edge(a, b) for a, b in zip(hops, hops[1:])) == result.cost


def test_search_stops_once_target_is_selected() -> None:
    g = init_graph(AdjacencyListGraph(), [0, 1, 2], [(0, 1, 1.0), (1, 2, 1.0)])
    calls: list[tuple[int, int]] = []

    def recording_cost(x: int, y: int) -> float:
        calls.append((x, y))
        return 1.0

    assert min_path(g, 0, 1, cost=recording_cost) == (1.0, [1])
    # The target's outgoing edge 1 -> 2 is never priced.
    assert calls == [(0, 1)]
