from __future__ import annotations

import math

import pytest

from kargraph.domain.models import Coords


def test_coords_defaults_z_to_zero() -> None:
    c = Coords(1.0, 2.0)
    assert (c.x, c.y, c.z) == (1.0, 2.0, 0.0)


def test_coords_vector_arithmetic() -> None:
    a = Coords(1.0, 2.0, 3.0)
    b = Coords(0.5, -1.0, 2.0)

    assert a + b == Coords(1.5, 1.0, 5.0)
    assert a - b == Coords(0.5, 3.0, 1.0)
    assert -a == Coords(-1.0, -2.0, -3.0)
    assert a * 2.0 == Coords(2.0, 4.0, 6.0)
    assert 2.0 * a == Coords(2.0, 4.0, 6.0)
    assert a / 2.0 == Coords(0.5, 1.0, 1.5)


def test_coords_distance_is_euclidean_and_symmetric() -> None:
    a = Coords(0.0, 0.0, 0.0)
    b = Coords(3.0, 4.0, 0.0)
    c = Coords(1.0, 2.0, 2.0)

    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0
    assert a.distance_to(c) == 3.0
    assert math.isclose(b.distance_to(c), math.sqrt(4.0 + 4.0 + 4.0))


def test_coords_is_immutable() -> None:
    c = Coords(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        c.x = 5.0  # type: ignore[misc]
