from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .vector import Vector2D


class Direction(Enum):
    """Cardinal facing of a rover.

    Members are declared in clockwise order, so a right turn is a step
    forward through the declaration order and a left turn a step back.
    """

    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"

    def turn_right(self) -> Direction:
        return _RIGHT_OF[self]

    def turn_left(self) -> Direction:
        return _LEFT_OF[self]

    def to_unit_vector(self) -> Vector2D:
        """Unit displacement for one step in this facing (North = +y)."""
        return _UNIT_VECTORS[self]

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a full name ("north", "North") or a single letter (N/E/S/W)."""
        key = str(text).strip().upper()
        for member in cls:
            if key == member.name or key == member.name[0]:
                return member
        raise ValueError(f"Unknown direction: {text!r}")

    def __str__(self) -> str:
        return self.value


_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

_RIGHT_OF: Mapping[Direction, Direction] = MappingProxyType(
    {d: _CLOCKWISE[(i + 1) % 4] for i, d in enumerate(_CLOCKWISE)}
)
_LEFT_OF: Mapping[Direction, Direction] = MappingProxyType(
    {d: _CLOCKWISE[(i - 1) % 4] for i, d in enumerate(_CLOCKWISE)}
)
_UNIT_VECTORS: Mapping[Direction, Vector2D] = MappingProxyType(
    {
        Direction.NORTH: Vector2D(0, 1),
        Direction.EAST: Vector2D(1, 0),
        Direction.SOUTH: Vector2D(0, -1),
        Direction.WEST: Vector2D(-1, 0),
    }
)
