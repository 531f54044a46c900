from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coords:
    """Immutable point in 3D space."""

    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Coords) -> Coords:
        return Coords(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coords) -> Coords:
        return Coords(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Coords:
        return Coords(-self.x, -self.y, -self.z)

    def __mul__(self, value: float) -> Coords:
        return Coords(self.x * value, self.y * value, self.z * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Coords:
        return Coords(self.x / value, self.y / value, self.z / value)

    def distance_to(self, other: Coords) -> float:
        """Euclidean distance."""

        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )
