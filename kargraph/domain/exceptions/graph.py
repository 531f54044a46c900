from __future__ import annotations


class GraphError(Exception):
    """Base exception for graph operations."""


class VertexDoesNotExist(GraphError, LookupError):
    """Raised when an operation references a vertex that is not in the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} does not exist")
        self.vertex = vertex


class EndpointNotInGraph(VertexDoesNotExist):
    """Raised by path searches when an endpoint is missing from the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(vertex)
        self.args = (f"The graph doesn't have a vertex {vertex}",)


class VertexAlreadyExists(GraphError):
    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} already exists")
        self.vertex = vertex


class EdgeAlreadyExists(GraphError):
    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"Edge {source}->{target} already exists")
        self.source = source
        self.target = target


class EdgeDoesNotExist(GraphError, LookupError):
    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"Edge {source}->{target} does not exist")
        self.source = source
        self.target = target


class MissingCoordinates(GraphError, LookupError):
    """Raised when a distance is needed for a vertex without coordinates."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} has no coordinates")
        self.vertex = vertex


class GraphFormatError(GraphError, ValueError):
    """Raised when serialized graph data is malformed."""
