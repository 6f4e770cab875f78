from __future__ import annotations

import os

import pytest

from rover_grid.direction import Direction
from rover_grid.map_generator import MapGeneratorConfig, generate_random_map, generate_walled_room
from rover_grid.pathfinder import SearchLimitExceeded, find_path
from rover_grid.rover import Rover
from rover_grid.vector import Vector2D
from rover_grid.world import GridWorld

MAPS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "rover_grid", "maps")


def test_open_grid_prefers_left_turn() -> None:
    start = Rover.at(0, 0, Direction.NORTH)
    assert find_path(start, Vector2D(3, 0), frozenset()) == "LBBB"


def test_detour_around_obstacle() -> None:
    start = Rover.at(0, 0, Direction.NORTH)
    obstacles = frozenset({Vector2D(2, 0)})
    path = find_path(start, Vector2D(3, 0), obstacles)
    assert path == "FLBBBLF"
    result = start.process_sequence(path, obstacles)
    assert result.ok
    assert result.rover.position == Vector2D(3, 0)


def test_already_at_target() -> None:
    start = Rover.at(2, 2, Direction.EAST)
    assert find_path(start, Vector2D(2, 2), frozenset()) == ""


def test_straight_ahead_and_behind() -> None:
    start = Rover.at(0, 0, Direction.NORTH)
    assert find_path(start, Vector2D(0, 2)) == "FF"
    assert find_path(start, Vector2D(0, -1)) == "B"


def test_unreachable_enclosed_target_returns_empty() -> None:
    world = GridWorld.from_map_file(os.path.join(MAPS_DIR, "enclosed_target.json"))
    start = world.rovers[0]
    assert world.target is not None
    assert find_path(start, world.target, world.obstacle_set()) == ""


def test_start_boxed_in_returns_empty() -> None:
    start = Rover.at(0, 0, Direction.NORTH)
    obstacles = frozenset({Vector2D(0, 1), Vector2D(0, -1), Vector2D(1, 0), Vector2D(-1, 0)})
    assert find_path(start, Vector2D(5, 5), obstacles) == ""


def test_search_limit_on_open_grid() -> None:
    start = Rover.at(0, 0, Direction.NORTH)
    target = Vector2D(10, 10)
    walls = frozenset(
        {target + Vector2D(1, 0), target + Vector2D(-1, 0), target + Vector2D(0, 1), target + Vector2D(0, -1)}
    )
    with pytest.raises(SearchLimitExceeded):
        find_path(start, target, walls, max_states=500)


def test_obstacles_are_not_modified() -> None:
    obstacles = {Vector2D(2, 0)}
    find_path(Rover.at(0, 0, Direction.NORTH), Vector2D(3, 0), obstacles)
    assert obstacles == {Vector2D(2, 0)}


def test_shortest_inside_room() -> None:
    walls = generate_walled_room(6, 6)
    start = Rover.at(1, 1, Direction.EAST)
    path = find_path(start, Vector2D(4, 4), walls)
    # Three cells east, one turn, three cells north.
    assert len(path) == 7
    assert start.process_sequence(path, walls).rover.position == Vector2D(4, 4)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_path_round_trip_on_random_maps(seed: int) -> None:
    cfg = MapGeneratorConfig(width=10, height=8, density=0.25, seed=seed, keep_clear=[(1, 1), (8, 6)])
    world = generate_random_map(cfg)
    start = world.rovers[0]
    assert world.target is not None
    obstacles = world.obstacle_set()
    path = find_path(start, world.target, obstacles)
    if path:
        result = start.process_sequence(path, obstacles)
        assert result.ok
        assert result.rover.position == world.target


def test_blocked_east_map_file() -> None:
    world = GridWorld.from_map_file(os.path.join(MAPS_DIR, "blocked_east.json"))
    assert world.target is not None
    assert find_path(world.rovers[0], world.target, world.obstacle_set()) == "FLBBBLF"
