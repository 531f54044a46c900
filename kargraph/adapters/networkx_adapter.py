from __future__ import annotations

from typing import Any

import networkx as nx

from kargraph.domain.graph import AdjacencyListGraph, CoordsGraph, DirectionalGraph
from kargraph.domain.models import Coords


def to_networkx(graph: DirectionalGraph, *, weight: str = "weight") -> nx.DiGraph:
    """Copy ``graph`` into a ``networkx.DiGraph``.

    Edge weights go to the ``weight`` attribute. Vertices of a ``CoordsGraph``
    that have coordinates carry ``x``/``y``/``z`` node attributes.
    """

    out = nx.DiGraph()
    for v in graph.get_vertices():
        attrs: dict[str, Any] = {}
        if isinstance(graph, CoordsGraph):
            coords = graph.get_vertex_coords(v)
            if coords is not None:
                attrs = {"x": coords.x, "y": coords.y, "z": coords.z}
        out.add_node(v, **attrs)

    for x, y, w in graph.edges():
        out.add_edge(x, y, **{weight: w})
    return out


def _node_coords(data: dict[str, Any]) -> Coords | None:
    x = data.get("x")
    y = data.get("y")
    if x is None or y is None:
        return None
    z = data.get("z")
    return Coords(float(x), float(y), float(z) if z is not None else 0.0)


def from_networkx(
    source: nx.Graph,
    graph: DirectionalGraph | None = None,
    *,
    weight: str = "weight",
    default_weight: float = 1.0,
) -> DirectionalGraph:
    """Copy a networkx graph into ``graph`` (cleared first, default: a new adjacency list).

    Nodes must be non-negative ints. Undirected graphs produce an edge in
    each direction. Edges lacking ``weight`` get ``default_weight``. When the
    target is a ``CoordsGraph``, nodes with ``x``/``y`` (and optionally
    ``z``) attributes get coordinates.
    """

    if source.is_multigraph():
        raise ValueError("Multigraphs are not supported")

    target = graph if graph is not None else AdjacencyListGraph()
    target.clear()

    for node, data in source.nodes(data=True):
        target.add_vertex(node)
        if isinstance(target, CoordsGraph):
            coords = _node_coords(data)
            if coords is not None:
                target.set_vertex_coords(node, coords)

    for x, y, data in source.edges(data=True):
        w = float(data.get(weight, default_weight))
        if source.is_directed():
            target.add_edge(x, y, w)
        elif x == y:
            target.add_edge(x, x, w)
        else:
            target.add_bidirectional_edge(x, y, w)
    return target
