"""
Procedural obstacle layouts for grid rover scenarios.

Generates scattered clutter, walled rooms and corridors. Output is a
GridWorld, and ``save_map`` writes files that GridWorld.from_map_file() reads
back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple
import json
import os

import numpy as np

from .direction import Direction
from .rover import Rover
from .vector import Vector2D
from .world import GridWorld


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass
class MapGeneratorConfig:
    """Parameters for procedural map generation.

    The generated box spans x in [0, width) and y in [0, height).
    """

    width: int = 10
    height: int = 10
    density: float = 0.2
    walled: bool = True
    seed: Optional[int] = None
    keep_clear: List[Tuple[int, int]] = field(default_factory=lambda: [(1, 1)])


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def generate_walled_room(width: int, height: int) -> Set[Vector2D]:
    """Border cells of a ``width x height`` box.

    A rover starting inside can never leave, so every path search from
    inside terminates even when the target is unreachable.
    """
    if width < 3 or height < 3:
        raise ValueError(f"Room needs at least 3x3 cells, got {width}x{height}")
    walls: Set[Vector2D] = set()
    for x in range(width):
        walls.add(Vector2D(x, 0))
        walls.add(Vector2D(x, height - 1))
    for y in range(height):
        walls.add(Vector2D(0, y))
        walls.add(Vector2D(width - 1, y))
    return walls


def generate_clutter(
    width: int,
    height: int,
    density: float,
    rng: np.random.Generator,
    keep_clear: Iterable[Vector2D] = (),
) -> Set[Vector2D]:
    """Scatter single-cell obstacles with probability ``density`` per cell."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density}")
    mask = rng.random((height, width)) < density
    for cell in keep_clear:
        if 0 <= cell.x < width and 0 <= cell.y < height:
            mask[cell.y, cell.x] = False
    return {Vector2D(int(x), int(y)) for y, x in np.argwhere(mask)}


def generate_corridor(length: int, gap_every: int = 0) -> Set[Vector2D]:
    """Two parallel walls along y=1 and y=-1 for x in [0, length).

    With ``gap_every`` > 0 the upper wall gets an opening every that many
    cells.
    """
    walls: Set[Vector2D] = set()
    for x in range(length):
        walls.add(Vector2D(x, -1))
        if gap_every <= 0 or x % gap_every != 0:
            walls.add(Vector2D(x, 1))
    return walls


# ---------------------------------------------------------------------------
# Full maps
# ---------------------------------------------------------------------------


def generate_random_map(cfg: MapGeneratorConfig) -> GridWorld:
    """Random clutter inside an (optionally walled) box.

    The first ``keep_clear`` cell receives a North-facing rover; the last
    one, if distinct, becomes the target.
    """
    rng = np.random.default_rng(cfg.seed)
    keep_clear = [Vector2D(int(x), int(y)) for x, y in cfg.keep_clear]

    obstacles = generate_clutter(cfg.width, cfg.height, cfg.density, rng, keep_clear)
    if cfg.walled:
        obstacles |= generate_walled_room(cfg.width, cfg.height)
        obstacles.difference_update(keep_clear)

    world = GridWorld(obstacles=obstacles, name="random")
    if keep_clear:
        start = keep_clear[0]
        world.rovers.append(Rover(start, Direction.NORTH))
        if len(keep_clear) > 1:
            world.target = keep_clear[-1]
    return world


def save_map(world: GridWorld, path: str) -> None:
    """Write ``world`` as JSON readable by GridWorld.from_map_file()."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(world.to_dict(), f, indent=2)
