from __future__ import annotations

from abc import ABC, abstractmethod

from kargraph.domain.graph import DirectionalGraph


class IGraphRepository(ABC):
    """Persistence port for storing and reloading graphs."""

    @abstractmethod
    def save(self, graph: DirectionalGraph) -> None:
        """Persist the vertices and edges of ``graph``."""

    @abstractmethod
    def load(self, graph: DirectionalGraph | None = None) -> DirectionalGraph:
        """Load the stored graph, into ``graph`` when one is given."""

    @abstractmethod
    def exists(self) -> bool:
        raise NotImplementedError
