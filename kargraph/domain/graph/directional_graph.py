from __future__ import annotations

from abc import ABC, abstractmethod

from kargraph.domain.exceptions import VertexDoesNotExist


class DirectionalGraph(ABC):
    """Directed weighted graph over non-negative integer vertex ids.

    Concrete representations implement the abstract operations; everything
    else here (bidirectional helpers, dumps, serialization) is built only on
    top of them, so it works the same for every representation.

    At most one edge exists per ordered ``(source, target)`` pair. Weights
    are stored as given, without validation.
    """

    @abstractmethod
    def has_vertex(self, x: int) -> bool:
        """Return whether ``x`` is a vertex. Never raises."""

    @abstractmethod
    def get_edge(self, x: int, y: int) -> float | None:
        """Return the weight of ``x -> y``, or ``None`` when there is no such edge.

        Raises ``VertexDoesNotExist`` if ``x`` is not a vertex.
        """

    @abstractmethod
    def get_vertices(self) -> list[int]:
        """Return all vertex ids in a deterministic order."""

    @abstractmethod
    def get_neighbors(self, x: int) -> list[int]:
        """Return every ``y`` such that ``x -> y`` exists."""

    @abstractmethod
    def add_vertex(self, x: int) -> None:
        """Create ``x`` without edges. Raises ``VertexAlreadyExists`` if present."""

    @abstractmethod
    def remove_vertex(self, x: int) -> bool:
        """Remove every edge incident to ``x``, then ``x`` itself.

        Returns whether ``x`` was a vertex before the call.
        """

    @abstractmethod
    def add_edge(self, x: int, y: int, weight: float) -> None:
        """Insert ``x -> y``. Raises ``EdgeAlreadyExists`` if it is present."""

    @abstractmethod
    def set_edge(self, x: int, y: int, weight: float) -> None:
        """Overwrite the weight of ``x -> y``. Raises ``EdgeDoesNotExist`` if absent."""

    @abstractmethod
    def remove_edge(self, x: int, y: int) -> bool:
        """Remove ``x -> y`` and return whether it was present."""

    @abstractmethod
    def clear(self) -> None:
        """Drop all vertices and edges."""

    def _check_has_vertex(self, x: int) -> None:
        if not self.has_vertex(x):
            raise VertexDoesNotExist(x)

    @staticmethod
    def _validate_vertex_id(x: int) -> None:
        if isinstance(x, bool) or not isinstance(x, int):
            raise TypeError(f"Vertex id must be an int, got {type(x).__name__}")
        if x < 0:
            raise ValueError(f"Vertex id must be non-negative, got {x}")

    def add_bidirectional_edge(
        self, x: int, y: int, weight: float, *, atomic: bool = False
    ) -> None:
        """Add ``x -> y`` and ``y -> x`` with the same weight.

        Without ``atomic`` this is two independent calls: if the second one
        fails, ``x -> y`` stays in the graph. With ``atomic`` the first edge
        is removed again before the error propagates.
        """

        self.add_edge(x, y, weight)
        try:
            self.add_edge(y, x, weight)
        except Exception:
            if atomic:
                self.remove_edge(x, y)
            raise

    def set_bidirectional_edge(
        self, x: int, y: int, weight: float, *, atomic: bool = False
    ) -> None:
        """Set both ``x -> y`` and ``y -> x`` to ``weight``.

        Same partial-failure semantics as ``add_bidirectional_edge``; with
        ``atomic`` the previous weight of ``x -> y`` is restored.
        """

        previous = self.get_edge(x, y) if atomic else None
        self.set_edge(x, y, weight)
        try:
            self.set_edge(y, x, weight)
        except Exception:
            if atomic and previous is not None:
                self.set_edge(x, y, previous)
            raise

    def edges(self) -> list[tuple[int, int, float]]:
        """All edges as ``(source, target, weight)`` in vertex/neighbor order."""

        out: list[tuple[int, int, float]] = []
        for x in self.get_vertices():
            for y in self.get_neighbors(x):
                weight = self.get_edge(x, y)
                if weight is not None:
                    out.append((x, y, weight))
        return out

    def edge_count(self) -> int:
        return sum(len(self.get_neighbors(x)) for x in self.get_vertices())

    def dump(self) -> str:
        lines: list[str] = []
        for x in self.get_vertices():
            lines.append(f"{x}\n")
            for y in self.get_neighbors(x):
                lines.append(f" ---{self.get_edge(x, y)}--->{y}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.dump()

    def serialize(self) -> bytes:
        """Encode this graph in the binary ``kar`` format."""

        from kargraph.adapters.serialization.binary_codec import serialize

        return serialize(self)
