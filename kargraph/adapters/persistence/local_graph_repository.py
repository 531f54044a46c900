from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from kargraph.adapters.serialization import deserialize, serialize
from kargraph.app.ports.output import IGraphRepository
from kargraph.config import GraphRuntimeConfig
from kargraph.domain.graph import DirectionalGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalGraphRepository(IGraphRepository):
    """Stores a graph in the binary ``kar`` format on the local file system.

    Env vars:
      - KARGRAPH_GRAPH_PATH: file to read/write (default: data/graph.kar)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or GraphRuntimeConfig.from_env().graph_path
        return Path(value)

    def exists(self) -> bool:
        return self._path().is_file()

    def save(self, graph: DirectionalGraph) -> None:
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)

        data = serialize(graph)
        # Readers see either the previous file or the complete new one.
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_bytes(data)
        tmp.replace(path)

        logger.info("Saved graph", extra={"path": str(path), "size": len(data)})

    def load(self, graph: DirectionalGraph | None = None) -> DirectionalGraph:
        path = self._path()
        data = path.read_bytes()
        result = deserialize(data, graph)
        logger.info("Loaded graph", extra={"path": str(path), "size": len(data)})
        return result
