from .graph import (
    EdgeAlreadyExists,
    EdgeDoesNotExist,
    EndpointNotInGraph,
    GraphError,
    GraphFormatError,
    MissingCoordinates,
    VertexAlreadyExists,
    VertexDoesNotExist,
)

__all__ = [
    "EdgeAlreadyExists",
    "EdgeDoesNotExist",
    "EndpointNotInGraph",
    "GraphError",
    "GraphFormatError",
    "MissingCoordinates",
    "VertexAlreadyExists",
    "VertexDoesNotExist",
]
