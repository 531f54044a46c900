from __future__ import annotations

from kargraph.domain.graph import SparseIndex


def test_unset_indices_read_as_none() -> None:
    index: SparseIndex[str] = SparseIndex()
    assert index[0] is None
    assert index[10_000_000] is None
    assert index[-1] is None
    assert index.indices() == []


def test_set_get_and_sorted_indices() -> None:
    index: SparseIndex[str] = SparseIndex()
    index[7] = "seven"
    index[2] = "two"
    index[1_000_000] = "million"

    assert index[7] == "seven"
    assert index[3] is None
    assert index.indices() == [2, 7, 1_000_000]
    assert sorted(index.values()) == ["million", "seven", "two"]


def test_storing_none_or_deleting_unsets_the_index() -> None:
    index: SparseIndex[int] = SparseIndex()
    index[1] = 10
    index[2] = 20

    index[1] = None
    del index[2]
    del index[99]  # unset indices are ignored

    assert index.indices() == []


def test_clear() -> None:
    index: SparseIndex[int] = SparseIndex()
    index[0] = 0
    index.clear()
    assert index[0] is None
    assert index.values() == []
