from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Vector2D:
    """Integer 2D vector used both as a grid cell and as a displacement.

    Attributes
    ----------
    x : int
        East-west component (East positive).
    y : int
        North-south component (North positive).
    """

    x: int
    y: int

    def add(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    __add__ = add
    __sub__ = subtract

    def manhattan(self, other: Vector2D) -> int:
        """L1 distance between two cells."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Vector2D:
        """Build from an (x, y) pair, e.g. a JSON/YAML list."""
        items = list(values)
        if len(items) != 2:
            raise ValueError(f"Expected an (x, y) pair, got {items!r}")
        return cls(int(items[0]), int(items[1]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
