from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class SparseIndex(Generic[T]):
    """Growable storage keyed by non-negative integers.

    Unset indices read as ``None``. Backed by a dict so very sparse id
    spaces cost memory proportional to the number of set indices only.
    Storing ``None`` is the same as deleting the index.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[int, T] = {}

    def __getitem__(self, index: int) -> T | None:
        return self._items.get(index)

    def __setitem__(self, index: int, value: T | None) -> None:
        if value is None:
            self._items.pop(index, None)
        else:
            self._items[index] = value

    def __delitem__(self, index: int) -> None:
        self._items.pop(index, None)

    def indices(self) -> list[int]:
        """Set indices in ascending order."""

        return sorted(self._items)

    def values(self) -> list[T]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()
