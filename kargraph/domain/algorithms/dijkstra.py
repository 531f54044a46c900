from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, cast

from kargraph.domain.exceptions import EdgeDoesNotExist, EndpointNotInGraph
from kargraph.domain.graph import DirectionalGraph

logger = logging.getLogger(__name__)

EdgeCost = Callable[[int, int], float]


class PathResult(NamedTuple):
    cost: float
    # Vertices after the source, ending at the target.
    path: list[int]


def _stored_weight(graph: DirectionalGraph) -> EdgeCost:
    def weight(x: int, y: int) -> float:
        value = graph.get_edge(x, y)
        if value is None:
            raise EdgeDoesNotExist(x, y)
        return value

    return weight


@dataclass(slots=True)
class _VertexState:
    distance: float | None = None
    visited: bool = False
    path: list[int] = field(default_factory=list)


def min_path(
    graph: DirectionalGraph,
    source: int,
    target: int,
    cost: EdgeCost | None = None,
) -> PathResult | None:
    """Find a cheapest path from ``source`` to ``target`` with Dijkstra's algorithm.

    ``cost(x, y)`` prices the edge ``x -> y`` and defaults to its stored
    weight. Costs must be non-negative.

    The next vertex is chosen by a linear scan over ``graph.get_vertices()``
    (O(V^2) overall); among equal distances the vertex enumerated first
    wins. The search stops as soon as the target is selected.

    Returns ``None`` if the target is unreachable.
    """

    if not graph.has_vertex(source):
        raise EndpointNotInGraph(source)
    if not graph.has_vertex(target):
        raise EndpointNotInGraph(target)
    if source == target:
        return PathResult(0.0, [])

    edge_cost = cost if cost is not None else _stored_weight(graph)

    order = graph.get_vertices()
    state: dict[int, _VertexState] = {v: _VertexState() for v in order}
    state[source].distance = 0.0

    while True:
        current: int | None = None
        best: float | None = None
        for v in order:
            s = state[v]
            if s.visited or s.distance is None:
                continue
            if best is None or s.distance < best:
                current, best = v, s.distance

        if current is None or current == target:
            break

        selected = state[current]
        selected.visited = True
        distance = cast(float, best)

        for neighbor in graph.get_neighbors(current):
            n = state[neighbor]
            if n.visited:
                continue
            candidate = distance + edge_cost(current, neighbor)
            if n.distance is None or candidate < n.distance:
                n.distance = candidate
                n.path = [*selected.path, neighbor]

    reached = state[target]
    if reached.distance is None:
        logger.debug("No path found", extra={"source": source, "target": target})
        return None

    logger.debug(
        "Path found",
        extra={"source": source, "target": target, "cost": reached.distance},
    )
    return PathResult(reached.distance, reached.path)
