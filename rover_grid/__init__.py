"""
Top-level package for the grid rover simulator.

Components:
- direction: cardinal facings and their rotations
- vector: integer 2D vectors for cells and displacements
- commands: the F/B/L/R command alphabet
- rover: immutable rover state, single-step moves and command sequences
- pathfinder: breadth-first search for shortest command sequences
- fleet: lock-step multi-rover stepping with collision avoidance
- world: obstacle maps, rovers and targets (dict/JSON I/O)
- map_generator: procedural obstacle layouts
- render: ASCII map rendering
"""

from .direction import Direction
from .vector import Vector2D
from .commands import Command
from .rover import Failure, MoveError, MoveResult, Rover
from .pathfinder import SearchLimitExceeded, find_path
from .fleet import move_all, run_fleet
from .world import GridWorld

__all__ = [
    "Direction",
    "Vector2D",
    "Command",
    "Failure",
    "MoveError",
    "MoveResult",
    "Rover",
    "SearchLimitExceeded",
    "find_path",
    "move_all",
    "run_fleet",
    "GridWorld",
]
