from __future__ import annotations

import io
import logging
import struct
from typing import Callable

from kargraph.app.services.graph_factory import init_graph, select_representation
from kargraph.domain.exceptions import EdgeDoesNotExist, GraphFormatError
from kargraph.domain.graph import DirectionalGraph

logger = logging.getLogger(__name__)

MAGIC = b"kar"
VERSION = 0

# All fields are big-endian.
_HEADER = struct.Struct(">3sB")
_INT = struct.Struct(">i")
_EDGE = struct.Struct(">id")


def serialize(graph: DirectionalGraph) -> bytes:
    """Encode the vertices and edges of ``graph``.

    Layout: ``b"kar"``, a version byte, the vertex count (i32), then for each
    vertex its id (i32), its out-degree M (i32) and M pairs of neighbor id
    (i32) and weight (f64). Coordinates of a ``CoordsGraph`` are not stored.
    """

    out = io.BytesIO()
    out.write(_HEADER.pack(MAGIC, VERSION))

    vertices = graph.get_vertices()
    try:
        out.write(_INT.pack(len(vertices)))
        for x in vertices:
            neighbors = graph.get_neighbors(x)
            out.write(_INT.pack(x))
            out.write(_INT.pack(len(neighbors)))
            for y in neighbors:
                weight = graph.get_edge(x, y)
                if weight is None:
                    raise EdgeDoesNotExist(x, y)
                out.write(_EDGE.pack(y, weight))
    except struct.error as exc:
        raise GraphFormatError(f"Graph cannot be encoded: {exc}") from exc

    data = out.getvalue()
    logger.debug(
        "Serialized graph", extra={"vertex_count": len(vertices), "size": len(data)}
    )
    return data


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._offset = 0

    def read(self, fmt: struct.Struct) -> tuple:
        end = self._offset + fmt.size
        if end > len(self._data):
            raise GraphFormatError(
                f"Unexpected end of data at offset {self._offset} "
                f"({len(self._data)} bytes available)"
            )
        values = fmt.unpack_from(self._data, self._offset)
        self._offset = end
        return values

    def read_byte(self) -> int:
        if self._offset >= len(self._data):
            raise GraphFormatError(f"Unexpected end of data at offset {self._offset}")
        value = self._data[self._offset]
        self._offset += 1
        return value

    def read_int(self) -> int:
        return self.read(_INT)[0]


def deserialize(
    data: bytes,
    graph: DirectionalGraph | None = None,
    *,
    factory: Callable[[], DirectionalGraph] | None = None,
) -> DirectionalGraph:
    """Decode ``data`` into a graph.

    The target is ``graph`` (cleared first) when given, else ``factory()``,
    else whichever representation the selector picks for the decoded
    vertex and edge counts. Vertex ids are preserved as encoded; edges are
    replayed in the order they appear.
    """

    reader = _Reader(data)

    for expected in MAGIC:
        found = reader.read_byte()
        if found != expected:
            raise GraphFormatError(
                f"Invalid file format: {chr(expected)!r} expected, got {found:#04x}"
            )

    version = reader.read_byte()
    if version != VERSION:
        raise GraphFormatError(f"Wrong version {version} ({VERSION} expected)")

    vertices: list[int] = []
    edges: list[tuple[int, int, float]] = []
    seen_vertices: set[int] = set()
    seen_edges: set[tuple[int, int]] = set()

    # Everything is validated before the target is touched.
    vertex_count = reader.read_int()
    for _ in range(vertex_count):
        x = reader.read_int()
        if x < 0:
            raise GraphFormatError(f"Negative vertex id {x}")
        if x in seen_vertices:
            raise GraphFormatError(f"Vertex {x} is encoded twice")
        seen_vertices.add(x)
        vertices.append(x)
        for _ in range(reader.read_int()):
            y, weight = reader.read(_EDGE)
            if (x, y) in seen_edges:
                raise GraphFormatError(f"Edge {x}->{y} is encoded twice")
            seen_edges.add((x, y))
            edges.append((x, y, weight))

    for x, y, _ in edges:
        if y not in seen_vertices:
            raise GraphFormatError(f"Edge {x}->{y} points to an unknown vertex")

    if graph is None:
        if factory is None:
            factory = select_representation(len(vertices), len(edges))
        graph = factory()
    graph.clear()

    logger.debug(
        "Deserialized graph",
        extra={"vertex_count": len(vertices), "edge_count": len(edges)},
    )
    return init_graph(graph, vertices, edges)
