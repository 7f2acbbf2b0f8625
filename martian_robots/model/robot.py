"""Robot placement and the movement state machine."""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidCommandSequence, InvalidPlacement
from .orientation import (Command, MOVE_VECTORS, Orientation,
                          VALID_COMMANDS, VALID_ORIENTATIONS, rotate)
from .surface import Surface
from .validation import (MAX_COMMAND_LENGTH, MAX_COORDINATE, RawToken,
                         normalize_token, parse_int)

logger = logging.getLogger(__name__)


class RobotState(Enum):
    """Possible states for a robot."""
    ACTIVE = "active"
    LOST = "lost"


def parse_commands(raw_commands: Optional[str]) -> List[Command]:
    """
    Validate a whole command sequence before any of it is applied.

    An empty sequence is valid. Raises InvalidCommandSequence naming the
    first offending character and its index.
    """
    if raw_commands is None:
        raise InvalidCommandSequence(raw_commands, "cannot be null")

    if len(raw_commands) > MAX_COMMAND_LENGTH:
        raise InvalidCommandSequence(
            raw_commands,
            f"has a length of {len(raw_commands)}; "
            f"the maximum is {MAX_COMMAND_LENGTH}")

    commands = []
    for index, char in enumerate(raw_commands):
        if char not in VALID_COMMANDS:
            raise InvalidCommandSequence(
                raw_commands, f"{char!r} is not one of 'L', 'F', 'R'", index=index)
        commands.append(Command(char))
    return commands


class Robot:
    """
    A single robot on the surface.

    The robot never holds on to the surface it stands on; every operation
    that touches the grid receives it explicitly.
    """

    def __init__(self, robot_id: int, x: int, y: int, orientation: Orientation):
        self.id = robot_id
        self.x = x
        self.y = y
        self.orientation = orientation
        self.state = RobotState.ACTIVE
        self.moves_made = 0

        # Kept for exports
        self.start = (x, y, orientation)
        self.commands = ""

    @classmethod
    def place(cls, surface: Surface, raw_x: RawToken, raw_y: RawToken,
              raw_orientation: RawToken, robot_id: int = 1) -> "Robot":
        """
        Validate raw placement tokens and put a new robot on the surface.

        Checks run in order and the first failure is raised as
        InvalidPlacement: non-empty, integer coordinates, coordinates not
        above MAX_COORDINATE, coordinates on the surface, orientation one of
        N, E, S, W. The start cell is marked walked on success.
        """
        tokens = (('x', raw_x), ('y', raw_y), ('orientation', raw_orientation))
        for name, raw in tokens:
            if normalize_token(raw) is None:
                raise InvalidPlacement(name, raw, "cannot be empty")

        coords = {}
        for name, raw in tokens[:2]:
            value = parse_int(normalize_token(raw))
            if value is None:
                raise InvalidPlacement(name, raw, "cannot be parsed into an integer")
            coords[name] = value

        for name in ('x', 'y'):
            if coords[name] > MAX_COORDINATE:
                raise InvalidPlacement(
                    name, coords[name],
                    f"is above the maximum ({MAX_COORDINATE})")

        limits = {'x': surface.width, 'y': surface.height}
        for name in ('x', 'y'):
            if not 0 <= coords[name] <= limits[name]:
                raise InvalidPlacement(name, coords[name], "is outside of the surface")

        heading = normalize_token(raw_orientation)
        if heading not in VALID_ORIENTATIONS:
            raise InvalidPlacement(
                'orientation', raw_orientation,
                "is not a valid orientation ('N', 'S', 'E', 'W')")

        robot = cls(robot_id, coords['x'], coords['y'], Orientation(heading))
        surface.mark_walked(robot.x, robot.y)
        logger.debug("Placed %r", robot)
        return robot

    @property
    def lost(self) -> bool:
        return self.state is RobotState.LOST

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def execute(self, surface: Surface, raw_commands: Optional[str]) -> None:
        """
        Run a command sequence against the surface.

        The sequence is fully validated first, so a malformed one changes
        nothing. A lost robot ignores every further command.
        """
        commands = parse_commands(raw_commands)
        if self.lost:
            return
        self.commands = raw_commands

        for command in commands:
            if command is Command.FORWARD:
                self._advance(surface)
                if self.lost:
                    break
            else:
                self.orientation = rotate(self.orientation, command)

    def _advance(self, surface: Surface) -> None:
        """Move one cell forward, or fall off the edge."""
        dx, dy = MOVE_VECTORS[self.orientation]
        nx, ny = self.x + dx, self.y + dy

        if not surface.in_bounds(nx, ny):
            if surface.is_scented(self.x, self.y):
                logger.debug("Robot %d ignored move off scented cell %s",
                             self.id, self.position)
                return
            surface.mark_scented(self.x, self.y)
            self.state = RobotState.LOST
            logger.debug("Robot %d lost at %s facing %s",
                         self.id, self.position, self.orientation.value)
            return

        self.x, self.y = nx, ny
        surface.mark_walked(nx, ny)
        self.moves_made += 1

    def result(self) -> str:
        """Final position in the '{x} {y} {orientation}[ LOST]' format."""
        suffix = " LOST" if self.lost else ""
        return f"{self.x} {self.y} {self.orientation.value}{suffix}"

    def __str__(self) -> str:
        return self.result()

    def __repr__(self) -> str:
        return (f"Robot(id={self.id}, pos={self.position}, "
                f"orientation={self.orientation.value}, state={self.state.value})")
