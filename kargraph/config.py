from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class GraphRuntimeConfig:
    """Tuning knobs for graph construction and persistence.

    Env vars:
      - KARGRAPH_MATRIX_MAX_VERTICES: below this vertex count the adjacency
        matrix is always used (default: 500)
      - KARGRAPH_DENSITY_OFFSET: above the vertex limit the matrix is used when
        edges >= V * (V - offset) (default: 100)
      - KARGRAPH_GRAPH_PATH: file used by the local graph repository
        (default: data/graph.kar)
    """

    matrix_max_vertices: int = 500
    density_offset: int = 100
    graph_path: str = "data/graph.kar"

    @staticmethod
    def from_env() -> "GraphRuntimeConfig":
        graph_path = (os.getenv("KARGRAPH_GRAPH_PATH") or "").strip()
        return GraphRuntimeConfig(
            matrix_max_vertices=_env_int("KARGRAPH_MATRIX_MAX_VERTICES", 500),
            density_offset=_env_int("KARGRAPH_DENSITY_OFFSET", 100),
            graph_path=graph_path or "data/graph.kar",
        )
