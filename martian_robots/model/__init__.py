"""Model package for the Martian Robots simulation."""

from .errors import (SimulationError, InvalidDimension, InvalidPlacement,
                     InvalidCommandSequence)
from .orientation import Orientation, Command
from .state import RobotSnapshot, FleetStatistics, SimulationState
from .surface import Surface
from .robot import Robot, RobotState
from .engine import Simulation

__all__ = [
    'SimulationError',
    'InvalidDimension',
    'InvalidPlacement',
    'InvalidCommandSequence',
    'Orientation',
    'Command',
    'RobotSnapshot',
    'FleetStatistics',
    'SimulationState',
    'Surface',
    'Robot',
    'RobotState',
    'Simulation',
]
