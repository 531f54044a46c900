from .coords import Coords

__all__ = [
    "Coords",
]
