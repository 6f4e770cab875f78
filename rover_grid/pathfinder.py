"""
Shortest command sequences between rover states.

Breadth-first search over (position, direction) states. Each state has up to
four successors, generated in the fixed order L, R, F, B; moves into blocked
cells are skipped. Because the graph is unweighted the first goal state
dequeued is reached by a minimum number of commands, and among equally short
programs the one that prefers L < R < F < B at the earliest divergence wins.

The search only terminates on its own when the free space reachable from the
start is finite or the target is reachable. On open grids with an
unreachable target pass ``max_states`` to bound it.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Set, Tuple

from .commands import Command
from .rover import NO_OBSTACLES, ObstacleSet, Rover
from .vector import Vector2D

# Path prefixes are shared between branches as (command, parent) cons cells.
_PathNode = Optional[Tuple[str, "_PathNode"]]


class SearchLimitExceeded(RuntimeError):
    """Raised when a bounded search expands more states than allowed."""

    def __init__(self, max_states: int) -> None:
        super().__init__(f"Path search gave up after expanding {max_states} states")
        self.max_states = max_states


def _materialize(node: _PathNode) -> str:
    chars = []
    while node is not None:
        ch, node = node
        chars.append(ch)
    return "".join(reversed(chars))


def _successors(rover: Rover, obstacles: ObstacleSet):
    yield Command.TURN_LEFT.value, rover.turn_left()
    yield Command.TURN_RIGHT.value, rover.turn_right()
    ahead = rover.forward(obstacles)
    if ahead.ok:
        yield Command.FORWARD.value, ahead.rover
    behind = rover.backward(obstacles)
    if behind.ok:
        yield Command.BACKWARD.value, behind.rover


def find_path(
    start: Rover,
    target: Vector2D,
    obstacles: ObstacleSet = NO_OBSTACLES,
    max_states: Optional[int] = None,
) -> str:
    """Return a shortest command string that brings ``start`` onto ``target``.

    The facing at the target is unconstrained. Returns "" when the start
    already sits on the target or when the target cannot be reached.

    Parameters
    ----------
    start : Rover
        Initial rover state.
    target : Vector2D
        Cell to reach.
    obstacles : set of Vector2D
        Cells the rover may not enter. Not modified.
    max_states : int, optional
        Upper bound on expanded states; exceeding it raises
        SearchLimitExceeded. None means unbounded.
    """
    queue: Deque[Tuple[Rover, _PathNode]] = deque([(start, None)])
    visited: Set[Rover] = set()

    while queue:
        rover, path = queue.popleft()
        if rover.position == target:
            return _materialize(path)
        if rover in visited:
            continue
        visited.add(rover)
        if max_states is not None and len(visited) > max_states:
            raise SearchLimitExceeded(max_states)
        for ch, nxt in _successors(rover, obstacles):
            queue.append((nxt, (ch, path)))

    return ""
