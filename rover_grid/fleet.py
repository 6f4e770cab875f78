from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Set

from .commands import Command
from .rover import NO_OBSTACLES, ObstacleSet, Rover
from .vector import Vector2D

# Command used to pad exhausted programs in run_fleet; outside the alphabet,
# so the rover holds its state for that round.
IDLE = " "


def move_all(
    rovers: Sequence[Rover],
    commands: Sequence[str],
    obstacles: ObstacleSet = NO_OBSTACLES,
) -> List[Rover]:
    """Advance every rover by one command in a single synchronized round.

    Rovers are processed in input order against a shared occupancy set made
    of the static obstacles plus every rover's position. Each rover lifts
    its own cell before moving and drops its new cell afterwards, so a move
    is blocked by obstacles, by rovers that have not moved yet and by the
    new cells of rovers that already moved (first mover wins).

    ``commands`` holds one character per rover (a str works). F/B may be
    blocked, L/R always turn and any other character leaves the rover as it
    is. The caller's obstacle set is not modified.
    """
    if len(rovers) != len(commands):
        raise ValueError(
            f"Expected one command per rover, got {len(commands)} commands "
            f"for {len(rovers)} rovers"
        )

    occupied: Set[Vector2D] = set(obstacles)
    occupied.update(r.position for r in rovers)

    moved: List[Rover] = []
    for rover, ch in zip(rovers, commands):
        occupied.discard(rover.position)
        command = Command.from_char(ch)
        if command is not None:
            rover = rover.apply(command, occupied).rover
        occupied.add(rover.position)
        moved.append(rover)
    return moved


def run_fleet(
    rovers: Sequence[Rover],
    programs: Sequence[str],
    obstacles: ObstacleSet = NO_OBSTACLES,
    on_step: Optional[Callable[[int, List[Rover]], None]] = None,
) -> List[List[Rover]]:
    """Drive ``move_all`` through per-rover command programs.

    Round ``i`` feeds character ``i`` of each program; rovers whose program
    is already exhausted idle. Returns the fleet state before the first
    round followed by the state after every round.
    """
    if len(rovers) != len(programs):
        raise ValueError(
            f"Expected one program per rover, got {len(programs)} programs "
            f"for {len(rovers)} rovers"
        )

    states = list(rovers)
    history = [states]
    rounds = max((len(p) for p in programs), default=0)
    for i in range(rounds):
        step = [p[i] if i < len(p) else IDLE for p in programs]
        states = move_all(states, step, obstacles)
        history.append(states)
        if on_step is not None:
            on_step(i + 1, states)
    return history
