from .dijkstra import EdgeCost, PathResult, min_path

__all__ = [
    "EdgeCost",
    "PathResult",
    "min_path",
]
