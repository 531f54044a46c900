from .graph_factory import (
    create_adjacency_list_coords_graph,
    create_adjacency_list_graph,
    create_adjacency_matrix_coords_graph,
    create_adjacency_matrix_graph,
    create_coords_graph,
    create_graph,
    init_coords_graph,
    init_graph,
    prefers_matrix,
    select_representation,
)

__all__ = [
    "create_adjacency_list_coords_graph",
    "create_adjacency_list_graph",
    "create_adjacency_matrix_coords_graph",
    "create_adjacency_matrix_graph",
    "create_coords_graph",
    "create_graph",
    "init_coords_graph",
    "init_graph",
    "prefers_matrix",
    "select_representation",
]
