from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .coords_graph import CoordsGraph
from .directional_graph import DirectionalGraph
from .sparse_index import SparseIndex

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "CoordsGraph",
    "DirectionalGraph",
    "SparseIndex",
]
