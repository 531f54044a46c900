from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def graph_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the repository at a fresh file under the test's temp dir."""

    path = tmp_path / "graphs" / "network.kar"
    monkeypatch.setenv("KARGRAPH_GRAPH_PATH", str(path))
    return path
