"""Simulation engine for the Martian Robots fleet."""

import logging
from typing import List, Optional

from .surface import Surface
from .robot import Robot
from .state import FleetStatistics, RobotSnapshot, SimulationState
from .validation import RawToken

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns one surface and the ordered fleet of robots placed on it.

    Every mutation goes through the simulation:
    1. Surface construction (validated)
    2. Robot placement (validated, start cell marked walked)
    3. Command execution against the shared surface
    4. Statistics and state snapshots
    """

    # Grid legend for render_grid()
    WALKED_CHAR = 'W'
    SCENT_CHAR = '!'
    EMPTY_CHAR = '.'

    def __init__(self, surface: Surface):
        self.surface = surface
        self.robots: List[Robot] = []

    @classmethod
    def create(cls, raw_width: RawToken, raw_height: RawToken) -> "Simulation":
        """Build a simulation on a freshly validated surface."""
        return cls(Surface.create(raw_width, raw_height))

    def place_robot(self, raw_x: RawToken, raw_y: RawToken,
                    raw_orientation: RawToken) -> Robot:
        """Validate and place a robot, appending it to the fleet."""
        robot = Robot.place(self.surface, raw_x, raw_y, raw_orientation,
                            robot_id=len(self.robots) + 1)
        self.robots.append(robot)
        return robot

    def move_robot(self, robot: Robot, raw_commands: Optional[str]) -> str:
        """Run a command sequence for a robot of this fleet; returns its result line."""
        if robot not in self.robots:
            raise ValueError(f"Robot {robot.id} was not placed on this simulation")
        robot.execute(self.surface, raw_commands)
        if robot.lost:
            logger.info("Robot %d lost at (%d, %d)", robot.id, robot.x, robot.y)
        return robot.result()

    def run_robot(self, raw_x: RawToken, raw_y: RawToken,
                  raw_orientation: RawToken,
                  raw_commands: Optional[str]) -> Robot:
        """Place a robot and run its commands in one go."""
        robot = self.place_robot(raw_x, raw_y, raw_orientation)
        self.move_robot(robot, raw_commands)
        return robot

    @property
    def alive_count(self) -> int:
        return sum(1 for r in self.robots if not r.lost)

    @property
    def dead_count(self) -> int:
        return len(self.robots) - self.alive_count

    def statistics(self) -> FleetStatistics:
        """Aggregate fleet and surface counters."""
        total_cells = self.surface.total_cells
        walked_cells = self.surface.walked_count()
        alive = self.alive_count

        return FleetStatistics(
            total_robots=len(self.robots),
            alive_count=alive,
            dead_count=len(self.robots) - alive,
            total_cells=total_cells,
            walked_cells=walked_cells,
            scented_cells=self.surface.scented_count(),
            walked_percentage=round(walked_cells / total_cells * 100, 2),
            total_moves=sum(r.moves_made for r in self.robots),
        )

    def snapshot(self) -> SimulationState:
        """Create immutable snapshot of current simulation state."""
        robot_snapshots = [
            RobotSnapshot(
                robot_id=r.id,
                start_x=r.start[0],
                start_y=r.start[1],
                start_orientation=r.start[2].value,
                commands=r.commands,
                x=r.x,
                y=r.y,
                orientation=r.orientation.value,
                lost=r.lost,
                moves_made=r.moves_made,
            )
            for r in self.robots
        ]

        return SimulationState(
            step=len(self.robots),
            robots=robot_snapshots,
            walked=self.surface.walked.copy(),
            scent=self.surface.scent.copy(),
            statistics=self.statistics(),
        )

    def results(self) -> List[str]:
        """Result line of every robot, in placement order."""
        return [r.result() for r in self.robots]

    def render_grid(self) -> str:
        """Text map of the surface, top row first; scent wins over walked."""
        rows = []
        for y in range(self.surface.height, -1, -1):
            row = []
            for x in range(self.surface.width + 1):
                if self.surface.is_scented(x, y):
                    row.append(self.SCENT_CHAR)
                elif self.surface.is_walked(x, y):
                    row.append(self.WALKED_CHAR)
                else:
                    row.append(self.EMPTY_CHAR)
            rows.append(''.join(row))
        return '\n'.join(rows)
