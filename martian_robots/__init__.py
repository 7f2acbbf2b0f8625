"""Martian Robots: fleet simulation on a bounded grid with edge scents."""

from .model import (Simulation, Surface, Robot, Orientation, Command,
                    SimulationError, InvalidDimension, InvalidPlacement,
                    InvalidCommandSequence)

__version__ = "0.1.0"

__all__ = [
    'Simulation',
    'Surface',
    'Robot',
    'Orientation',
    'Command',
    'SimulationError',
    'InvalidDimension',
    'InvalidPlacement',
    'InvalidCommandSequence',
]
