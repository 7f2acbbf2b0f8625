"""Shared fixtures for the Martian Robots tests."""

import pytest

from martian_robots.model import Simulation


SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF
3 2 N
FRRFLLFFRRFLL
0 3 W
LLFFFRFLFL
"""

SAMPLE_OUTPUT = ["1 1 E", "3 3 N LOST", "4 2 N"]


@pytest.fixture
def simulation():
    """A 5x3 simulation with no robots."""
    return Simulation.create("5", "3")


@pytest.fixture
def sample_simulation(simulation):
    """The three reference robots run in order on a shared 5x3 surface."""
    simulation.run_robot("1", "1", "E", "RFRFRFRF")
    simulation.run_robot("3", "2", "N", "FRRFLLFFRRFLL")
    simulation.run_robot("0", "3", "W", "LLFFFRFLFL")
    return simulation


@pytest.fixture
def sample_file(tmp_path):
    """The reference input written to an input folder."""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    path = input_dir / "sample.txt"
    path.write_text(SAMPLE_INPUT)
    return path
