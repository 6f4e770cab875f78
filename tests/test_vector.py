from __future__ import annotations

import pytest

from rover_grid.vector import Vector2D


def test_add_and_subtract() -> None:
    v1 = Vector2D(10, 10)
    v2 = Vector2D(1, 2)
    assert v1.add(v2) == Vector2D(11, 12)
    assert v1.subtract(v2) == Vector2D(9, 8)
    assert v1 + v2 == Vector2D(11, 12)
    assert v1 - v2 == Vector2D(9, 8)


def test_hashable_as_set_key() -> None:
    cells = {Vector2D(1, 2), Vector2D(1, 2), Vector2D(2, 1)}
    assert len(cells) == 2
    assert Vector2D(2, 1) in cells


def test_str_and_parsing() -> None:
    assert str(Vector2D(-1, 2)) == "(-1, 2)"
    assert Vector2D.from_iterable([3, -4]) == Vector2D(3, -4)
    assert Vector2D(0, 0).manhattan(Vector2D(3, -4)) == 7
    with pytest.raises(ValueError):
        Vector2D.from_iterable([1, 2, 3])
