from __future__ import annotations

import pytest

from rover_grid.direction import Direction
from rover_grid.fleet import move_all, run_fleet
from rover_grid.rover import Rover
from rover_grid.vector import Vector2D


def _head_on():
    return [Rover.at(0, 0, Direction.EAST), Rover.at(2, 0, Direction.WEST)]


def test_first_mover_wins() -> None:
    moved = move_all(_head_on(), ["F", "F"], frozenset())
    assert moved == [Rover.at(1, 0, Direction.EAST), Rover.at(2, 0, Direction.WEST)]


def test_order_decides_winner() -> None:
    rovers = list(reversed(_head_on()))
    moved = move_all(rovers, "FF", frozenset())
    assert moved == [Rover.at(1, 0, Direction.WEST), Rover.at(0, 0, Direction.EAST)]


def test_obstacle_blocks_both() -> None:
    moved = move_all(_head_on(), "FF", {Vector2D(1, 0)})
    assert moved == _head_on()


def test_blocked_by_unmoved_rover() -> None:
    rovers = [Rover.at(0, 0, Direction.EAST), Rover.at(1, 0, Direction.EAST)]
    moved = move_all(rovers, "FF", frozenset())
    # The front rover has not moved yet when the rear one tries its step.
    assert moved == [Rover.at(0, 0, Direction.EAST), Rover.at(2, 0, Direction.EAST)]


def test_follow_when_leader_moves_first() -> None:
    rovers = [Rover.at(1, 0, Direction.EAST), Rover.at(0, 0, Direction.EAST)]
    moved = move_all(rovers, "FF", frozenset())
    assert moved == [Rover.at(2, 0, Direction.EAST), Rover.at(1, 0, Direction.EAST)]


def test_turns_and_unknown_commands() -> None:
    rovers = _head_on()
    moved = move_all(rovers, ["L", "?"], frozenset())
    assert moved == [Rover.at(0, 0, Direction.NORTH), Rover.at(2, 0, Direction.WEST)]


def test_caller_obstacles_untouched() -> None:
    obstacles = {Vector2D(5, 5)}
    move_all(_head_on(), "FF", obstacles)
    assert obstacles == {Vector2D(5, 5)}


def test_length_mismatch() -> None:
    with pytest.raises(ValueError):
        move_all(_head_on(), "F", frozenset())


def test_run_fleet_pads_short_programs() -> None:
    seen = []
    history = run_fleet(
        _head_on(),
        ["FFL", "R"],
        frozenset(),
        on_step=lambda i, rovers: seen.append(i),
    )
    assert len(history) == 4
    assert history[0] == _head_on()
    assert history[-1] == [Rover.at(1, 0, Direction.NORTH), Rover.at(2, 0, Direction.NORTH)]
    assert seen == [1, 2, 3]


def test_head_on_map_file() -> None:
    import os

    from rover_grid.world import GridWorld

    root = os.path.dirname(os.path.dirname(__file__))
    world = GridWorld.from_map_file(os.path.join(root, "rover_grid", "maps", "head_on.json"))
    moved = move_all(world.rovers, "FF", world.obstacle_set())
    assert [str(r) for r in moved] == ["(1, 0) East", "(2, 0) West"]
