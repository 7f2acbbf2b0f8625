"""Orientation and command vocabulary shared by robots and the engine."""

from enum import Enum
from typing import Dict, Tuple


class Orientation(Enum):
    """Compass heading of a robot."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Command(Enum):
    """Single movement instruction."""
    LEFT = "L"
    FORWARD = "F"
    RIGHT = "R"


# Forward deltas, (dx, dy) with y growing northwards
MOVE_VECTORS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}

# Clockwise order N -> E -> S -> W -> N
_CLOCKWISE = [Orientation.NORTH, Orientation.EAST,
              Orientation.SOUTH, Orientation.WEST]

RIGHT_OF: Dict[Orientation, Orientation] = {
    o: _CLOCKWISE[(i + 1) % 4] for i, o in enumerate(_CLOCKWISE)
}
LEFT_OF: Dict[Orientation, Orientation] = {
    o: _CLOCKWISE[(i - 1) % 4] for i, o in enumerate(_CLOCKWISE)
}

VALID_ORIENTATIONS = frozenset(o.value for o in Orientation)
VALID_COMMANDS = frozenset(c.value for c in Command)


def rotate(orientation: Orientation, command: Command) -> Orientation:
    """Return the heading after a LEFT or RIGHT turn."""
    if command is Command.RIGHT:
        return RIGHT_OF[orientation]
    if command is Command.LEFT:
        return LEFT_OF[orientation]
    return orientation
