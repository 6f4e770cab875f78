from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple
import json

from .rover import Rover
from .vector import Vector2D


def _parse_cell(item: Any) -> Vector2D:
    if isinstance(item, dict):
        return Vector2D(int(item["x"]), int(item["y"]))
    return Vector2D.from_iterable(item)


@dataclass
class GridWorld:
    """Grid with static obstacle cells, a group of rovers and an optional target.

    Coordinates follow the rover convention:
    - x increases to the East
    - y increases to the North

    Attributes
    ----------
    obstacles : set[Vector2D]
        Blocked cells.
    rovers : list[Rover]
        Rovers in processing order (matters for fleet stepping).
    target : Vector2D or None
        Goal cell for path planning.
    name : str or None
        Map name, if loaded from a file.
    """

    obstacles: Set[Vector2D] = field(default_factory=set)
    rovers: List[Rover] = field(default_factory=list)
    target: Optional[Vector2D] = None
    name: Optional[str] = None

    # ------------------------------------------------------------------
    # Map loading / saving
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any], name: Optional[str] = None) -> GridWorld:
        """Create a world from a dict describing obstacles, rovers and target.

        Obstacles may be given as ``[x, y]`` pairs or ``{"x": .., "y": ..}``
        dicts. Rovers are ``{"x", "y", "direction"}`` dicts.
        """
        try:
            obstacles = {_parse_cell(o) for o in data.get("obstacles", [])}
            rovers = [Rover.from_dict(r) for r in data.get("rovers", [])]
            target_data = data.get("target")
            target = _parse_cell(target_data) if target_data is not None else None
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed map data: {exc}") from exc
        return cls(obstacles=obstacles, rovers=rovers, target=target, name=name or data.get("name"))

    @classmethod
    def from_map_file(cls, path: str) -> GridWorld:
        """Create a world from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize world description to a Python dict."""
        data: Dict[str, Any] = {
            "obstacles": [list(o.as_tuple()) for o in sorted(self.obstacles, key=Vector2D.as_tuple)],
            "rovers": [r.to_dict() for r in self.rovers],
        }
        if self.target is not None:
            data["target"] = {"x": self.target.x, "y": self.target.y}
        if self.name is not None:
            data["name"] = self.name
        return data

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------
    def clear_obstacles(self) -> None:
        self.obstacles.clear()

    def add_obstacle(self, cell: Vector2D) -> None:
        self.obstacles.add(cell)

    def add_obstacles(self, cells: Iterable[Vector2D]) -> None:
        self.obstacles.update(cells)

    def is_blocked(self, cell: Vector2D) -> bool:
        """Return True if ``cell`` holds a static obstacle."""
        return cell in self.obstacles

    def obstacle_set(self) -> FrozenSet[Vector2D]:
        """Read-only snapshot of the obstacles to pass into planners."""
        return frozenset(self.obstacles)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Return (xmin, ymin, xmax, ymax) enclosing every known cell, or None."""
        cells = list(self.obstacles) + [r.position for r in self.rovers]
        if self.target is not None:
            cells.append(self.target)
        if not cells:
            return None
        xs = [c.x for c in cells]
        ys = [c.y for c in cells]
        return (min(xs), min(ys), max(xs), max(ys))
