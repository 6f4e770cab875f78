from __future__ import annotations

import pytest

from rover_grid.direction import Direction
from rover_grid.vector import Vector2D


def test_turn_right_is_four_cycle() -> None:
    for d in Direction:
        turned = d
        for _ in range(4):
            turned = turned.turn_right()
        assert turned is d


def test_turn_left_inverts_turn_right() -> None:
    for d in Direction:
        assert d.turn_right().turn_left() is d
        assert d.turn_left().turn_right() is d


def test_clockwise_order() -> None:
    assert Direction.NORTH.turn_right() is Direction.EAST
    assert Direction.EAST.turn_right() is Direction.SOUTH
    assert Direction.SOUTH.turn_right() is Direction.WEST
    assert Direction.WEST.turn_right() is Direction.NORTH
    assert Direction.NORTH.turn_left() is Direction.WEST


def test_unit_vectors() -> None:
    assert Direction.NORTH.to_unit_vector() == Vector2D(0, 1)
    assert Direction.EAST.to_unit_vector() == Vector2D(1, 0)
    assert Direction.SOUTH.to_unit_vector() == Vector2D(0, -1)
    assert Direction.WEST.to_unit_vector() == Vector2D(-1, 0)


def test_parse_names_and_letters() -> None:
    assert Direction.parse("North") is Direction.NORTH
    assert Direction.parse("west") is Direction.WEST
    assert Direction.parse("S") is Direction.SOUTH
    assert str(Direction.EAST) == "East"
    with pytest.raises(ValueError):
        Direction.parse("up")
