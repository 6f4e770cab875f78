from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import AbstractSet, Any, Dict, Optional

from .commands import Command
from .direction import Direction
from .vector import Vector2D

ObstacleSet = AbstractSet[Vector2D]

NO_OBSTACLES: ObstacleSet = frozenset()


class Failure(Enum):
    """Why a move or a command sequence did not complete."""

    BLOCKED = "blocked"
    INVALID_COMMAND = "invalid_command"


class MoveError(Exception):
    """Raised by MoveResult.unwrap() on a failed result."""

    def __init__(self, result: MoveResult) -> None:
        super().__init__(f"{result.failure.value} at {result.rover}")
        self.result = result


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single move or of a whole command sequence.

    Both outcomes carry a rover. On success it is the new state. On failure
    which state is carried depends on the failure kind, see
    ``Rover.process_sequence``.

    Attributes
    ----------
    rover : Rover
        Resulting rover state.
    failure : Failure or None
        None on success.
    index : int or None
        Position of the failing command within the sequence, if known.
    """

    rover: Rover
    failure: Optional[Failure] = None
    index: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> Rover:
        if self.failure is not None:
            raise MoveError(self)
        return self.rover


@dataclass(frozen=True)
class Rover:
    """Immutable rover state on the integer grid.

    Every operation returns a new Rover; none mutate.
    """

    position: Vector2D
    direction: Direction

    @classmethod
    def at(cls, x: int, y: int, direction: Direction) -> Rover:
        return cls(Vector2D(int(x), int(y)), direction)

    # ------------------------------------------------------------------
    # Single-step transitions
    # ------------------------------------------------------------------
    def forward(self, obstacles: ObstacleSet = NO_OBSTACLES) -> MoveResult:
        """Step one cell along the facing, unless the cell is blocked."""
        return self._move_to(self.position + self.direction.to_unit_vector(), obstacles)

    def backward(self, obstacles: ObstacleSet = NO_OBSTACLES) -> MoveResult:
        """Step one cell against the facing, unless the cell is blocked."""
        return self._move_to(self.position - self.direction.to_unit_vector(), obstacles)

    def turn_left(self) -> Rover:
        return replace(self, direction=self.direction.turn_left())

    def turn_right(self) -> Rover:
        return replace(self, direction=self.direction.turn_right())

    def _move_to(self, candidate: Vector2D, obstacles: ObstacleSet) -> MoveResult:
        if candidate in obstacles:
            return MoveResult(self, Failure.BLOCKED)
        return MoveResult(replace(self, position=candidate))

    def apply(self, command: Command, obstacles: ObstacleSet = NO_OBSTACLES) -> MoveResult:
        """Apply one command; turns always succeed, moves may be blocked."""
        if command is Command.FORWARD:
            return self.forward(obstacles)
        if command is Command.BACKWARD:
            return self.backward(obstacles)
        if command is Command.TURN_LEFT:
            return MoveResult(self.turn_left())
        return MoveResult(self.turn_right())

    # ------------------------------------------------------------------
    # Command sequences
    # ------------------------------------------------------------------
    def process_sequence(
        self,
        sequence: str,
        obstacles: ObstacleSet = NO_OBSTACLES,
    ) -> MoveResult:
        """Run a command string left to right.

        Valid commands are F (forward), B (backward), L (turn left) and
        R (turn right).

        - An empty string succeeds with this rover unchanged.
        - On the first unknown character the result fails with
          INVALID_COMMAND and carries *this* (the starting) rover, discarding
          any progress made so far.
        - On the first blocked move the result fails with BLOCKED and carries
          the rover as it was just before the blocked step.
        """
        current = self
        for i, ch in enumerate(sequence):
            command = Command.from_char(ch)
            if command is None:
                return MoveResult(self, Failure.INVALID_COMMAND, i)
            result = current.apply(command, obstacles)
            if not result.ok:
                return MoveResult(result.rover, result.failure, i)
            current = result.rover
        return MoveResult(current)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Serialize rover state to a dict for logging/telemetry."""
        return {
            "x": self.position.x,
            "y": self.position.y,
            "direction": self.direction.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Rover:
        try:
            return cls.at(data["x"], data["y"], Direction.parse(data["direction"]))
        except KeyError as exc:
            raise ValueError(f"Rover entry is missing {exc.args[0]!r}: {data!r}") from exc

    def __str__(self) -> str:
        return f"{self.position} {self.direction}"
