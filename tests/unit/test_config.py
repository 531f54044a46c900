from __future__ import annotations

import pytest

from kargraph.config import GraphRuntimeConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "KARGRAPH_MATRIX_MAX_VERTICES",
        "KARGRAPH_DENSITY_OFFSET",
        "KARGRAPH_GRAPH_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = GraphRuntimeConfig.from_env()

    assert cfg == GraphRuntimeConfig()
    assert cfg.matrix_max_vertices == 500
    assert cfg.density_offset == 100
    assert cfg.graph_path == "data/graph.kar"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KARGRAPH_MATRIX_MAX_VERTICES", " 64 ")
    monkeypatch.setenv("KARGRAPH_DENSITY_OFFSET", "8")
    monkeypatch.setenv("KARGRAPH_GRAPH_PATH", "/tmp/g.kar")

    cfg = GraphRuntimeConfig.from_env()

    assert cfg.matrix_max_vertices == 64
    assert cfg.density_offset == 8
    assert cfg.graph_path == "/tmp/g.kar"


def test_invalid_integer_names_the_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KARGRAPH_DENSITY_OFFSET", "lots")
    with pytest.raises(ValueError, match="KARGRAPH_DENSITY_OFFSET"):
        GraphRuntimeConfig.from_env()
