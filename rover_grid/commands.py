"""
Command alphabet understood by a rover.

Each command is a single case-sensitive character:
- F: move forward one cell in the current facing
- B: move backward one cell against the current facing
- L: turn left (counter-clockwise) in place
- R: turn right (clockwise) in place
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class Command(Enum):
    FORWARD = "F"
    BACKWARD = "B"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> Optional[Command]:
        """Return the command for ``char`` or None if it is not in the alphabet."""
        try:
            return cls(char)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


VALID_COMMANDS = frozenset(c.value for c in Command)


def is_valid_sequence(sequence: str) -> bool:
    """True if every character of ``sequence`` is a known command."""
    return all(ch in VALID_COMMANDS for ch in sequence)


def parse_sequence(sequence: str) -> List[Command]:
    """Parse a command string, raising ValueError on the first unknown character."""
    parsed: List[Command] = []
    for i, ch in enumerate(sequence):
        cmd = Command.from_char(ch)
        if cmd is None:
            raise ValueError(f"Invalid command {ch!r} at index {i}")
        parsed.append(cmd)
    return parsed
