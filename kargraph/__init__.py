"""Directed weighted graphs with list/matrix storage, coordinates, a binary format and Dijkstra."""

import logging

from kargraph.adapters.networkx_adapter import from_networkx, to_networkx
from kargraph.adapters.persistence import LocalGraphRepository
from kargraph.adapters.serialization import deserialize, serialize
from kargraph.app.services import (
    create_adjacency_list_coords_graph,
    create_adjacency_list_graph,
    create_adjacency_matrix_coords_graph,
    create_adjacency_matrix_graph,
    create_coords_graph,
    create_graph,
    init_graph,
)
from kargraph.config import GraphRuntimeConfig
from kargraph.domain.algorithms import PathResult, min_path
from kargraph.domain.exceptions import (
    EdgeAlreadyExists,
    EdgeDoesNotExist,
    EndpointNotInGraph,
    GraphError,
    GraphFormatError,
    MissingCoordinates,
    VertexAlreadyExists,
    VertexDoesNotExist,
)
from kargraph.domain.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    CoordsGraph,
    DirectionalGraph,
)
from kargraph.domain.models import Coords

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "Coords",
    "CoordsGraph",
    "DirectionalGraph",
    "EdgeAlreadyExists",
    "EdgeDoesNotExist",
    "EndpointNotInGraph",
    "GraphError",
    "GraphFormatError",
    "GraphRuntimeConfig",
    "LocalGraphRepository",
    "MissingCoordinates",
    "PathResult",
    "VertexAlreadyExists",
    "VertexDoesNotExist",
    "create_adjacency_list_coords_graph",
    "create_adjacency_list_graph",
    "create_adjacency_matrix_coords_graph",
    "create_adjacency_matrix_graph",
    "create_coords_graph",
    "create_graph",
    "deserialize",
    "from_networkx",
    "init_graph",
    "min_path",
    "serialize",
    "to_networkx",
]
