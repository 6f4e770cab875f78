from __future__ import annotations

from typing import Dict, List, Optional

from .direction import Direction
from .vector import Vector2D
from .world import GridWorld

ROVER_GLYPHS: Dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}
OBSTACLE = "#"
TARGET = "X"
FREE = "."


def render_ascii(world: GridWorld, padding: int = 1) -> str:
    """Draw the world as text, North at the top.

    Obstacles are ``#``, the target ``X``, rovers an arrow for their facing
    and free cells ``.``. A rover standing on the target hides it.
    """
    bounds = world.bounds()
    if bounds is None:
        return ""
    xmin, ymin, xmax, ymax = bounds
    xmin, ymin = xmin - padding, ymin - padding
    xmax, ymax = xmax + padding, ymax + padding

    cells: Dict[Vector2D, str] = {o: OBSTACLE for o in world.obstacles}
    if world.target is not None:
        cells[world.target] = TARGET
    for rover in world.rovers:
        cells[rover.position] = ROVER_GLYPHS[rover.direction]

    lines: List[str] = []
    for y in range(ymax, ymin - 1, -1):
        lines.append("".join(cells.get(Vector2D(x, y), FREE) for x in range(xmin, xmax + 1)))
    return "\n".join(lines)


def describe(world: GridWorld, title: Optional[str] = None) -> str:
    """Rover summary lines followed by the ASCII map."""
    header = [title] if title else []
    header += [f"rover {i}: {r}" for i, r in enumerate(world.rovers)]
    return "\n".join(header + [render_ascii(world)])
