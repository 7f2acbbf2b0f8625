"""Interactive line-based prompt around a single simulation."""

import logging
from typing import Callable, Optional

from .export.reporter import Reporter
from .model.engine import Simulation
from .model.errors import SimulationError
from .model.robot import Robot
from .parsing import split_placement_line, split_size_line

logger = logging.getLogger(__name__)


class InteractiveSession:
    """
    Drives one simulation from prompted input.

    Every invalid answer is reported and asked again; nothing is kept
    outside the session's own simulation handle.
    """

    def __init__(self, simulation: Optional[Simulation] = None,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.simulation = simulation
        self._input = input_fn
        self._output = output_fn

    def run(self) -> Simulation:
        """Full session: size, robots until the user stops, final report."""
        self._output("Welcome to Mars!")
        if self.simulation is None:
            self.simulation = self.ask_surface()

        self._output("Excellent! It's now time to move some little robots around.")
        self.ask_robot()
        while self._confirm("Add another robot? Type 'y' to do so, "
                            "or anything else to view the final results: "):
            self.ask_robot()

        self._output(Reporter().generate_summary(self.simulation))
        return self.simulation

    def ask_surface(self) -> Simulation:
        """Prompt for 'width height' until a valid surface is given."""
        while True:
            line = self._input("Surface size 'X Y': ")
            try:
                return Simulation.create(*split_size_line(line))
            except SimulationError as e:
                self._report(e)

    def ask_robot(self) -> Robot:
        """Prompt for a placement, then for commands, and print the result."""
        while True:
            line = self._input("Starting position 'X Y O' (e.g. '3 2 S'): ")
            try:
                robot = self.simulation.place_robot(*split_placement_line(line))
                break
            except SimulationError as e:
                self._report(e)

        while True:
            line = self._input("Movement commands (L, F, R): ")
            try:
                result = self.simulation.move_robot(robot, line.strip())
                break
            except SimulationError as e:
                self._report(e)

        self._output(result)
        return robot

    def _confirm(self, prompt: str) -> bool:
        try:
            answer = self._input(prompt)
        except EOFError:
            return False
        return answer.strip().lower() == 'y'

    def _report(self, error: SimulationError) -> None:
        logger.debug("Rejected input: %s", error)
        self._output(f"Oops. That didn't look right. Please try again! {error}")
