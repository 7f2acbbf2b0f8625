"""State snapshot dataclasses for the Martian Robots simulation."""

from dataclasses import dataclass
from typing import List, Dict
import numpy as np


@dataclass(frozen=True)
class RobotSnapshot:
    """Immutable snapshot of a robot after its command sequence."""
    robot_id: int
    start_x: int
    start_y: int
    start_orientation: str
    commands: str
    x: int
    y: int
    orientation: str
    lost: bool
    moves_made: int

    def result(self) -> str:
        suffix = " LOST" if self.lost else ""
        return f"{self.x} {self.y} {self.orientation}{suffix}"


@dataclass(frozen=True)
class FleetStatistics:
    """Aggregated fleet and surface counters."""
    total_robots: int
    alive_count: int
    dead_count: int
    total_cells: int
    walked_cells: int
    scented_cells: int
    walked_percentage: float
    total_moves: int


@dataclass
class SimulationState:
    """Complete snapshot of the simulation after a robot has run."""
    step: int
    robots: List[RobotSnapshot]
    walked: np.ndarray  # Copy of walked layer, [y, x]
    scent: np.ndarray   # Copy of scent layer, [y, x]
    statistics: FleetStatistics

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [
            {
                "robot_id": r.robot_id,
                "start_x": r.start_x,
                "start_y": r.start_y,
                "start_orientation": r.start_orientation,
                "commands": r.commands,
                "x": r.x,
                "y": r.y,
                "orientation": r.orientation,
                "lost": r.lost,
                "moves_made": r.moves_made,
            }
            for r in self.robots
        ]
