from .local_graph_repository import LocalGraphRepository

__all__ = [
    "LocalGraphRepository",
]
