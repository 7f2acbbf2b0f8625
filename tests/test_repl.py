"""Tests for the interactive prompt."""

import pytest

from martian_robots.model import Simulation
from martian_robots.repl import InteractiveSession


class ScriptedIO:
    """Feeds canned answers and records everything printed."""

    def __init__(self, answers):
        self._answers = iter(answers)
        self.prompts = []
        self.printed = []

    def input(self, prompt):
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError

    def output(self, text):
        self.printed.append(text)

    def session(self, simulation=None):
        return InteractiveSession(simulation, input_fn=self.input, output_fn=self.output)


def test_full_session_with_retries():
    io = ScriptedIO([
        "0 0",          # rejected size
        "5 3",
        "1 1",          # rejected placement
        "1 1 E",
        "RFRFRFRX",     # rejected commands
        "RFRFRFRF",
        "y",
        "3 2 N",
        "FRRFLLFFRRFLL",
        "n",
    ])

    simulation = io.session().run()

    assert simulation.results() == ["1 1 E", "3 3 N LOST"]
    assert "1 1 E" in io.printed
    assert "3 3 N LOST" in io.printed
    errors = [line for line in io.printed if line.startswith("Oops")]
    assert len(errors) == 3
    assert "index 7" in errors[2]


def test_final_report_printed():
    io = ScriptedIO(["5 3", "0 0 S", "F", "N"])

    io.session().run()

    report = io.printed[-1]
    assert "Alive robots:" in report
    assert "0/1" in report
    assert "!" in report


def test_end_of_input_stops_adding_robots():
    io = ScriptedIO(["2 2", "1 1 N", "F"])

    simulation = io.session().run()

    assert simulation.results() == ["1 2 N"]


def test_existing_simulation_skips_size_prompt():
    simulation = Simulation.create("5", "5")
    io = ScriptedIO(["5 5 N", "F", "no"])

    io.session(simulation).run()

    assert not any("Surface size" in p for p in io.prompts)
    assert simulation.surface.is_scented(5, 5)


def test_ask_surface_repeats_until_valid():
    io = ScriptedIO(["", "a b", "51 1", "3 4"])

    simulation = io.session().ask_surface()

    assert (simulation.surface.width, simulation.surface.height) == (3, 4)
    assert len(io.printed) == 3


def test_interrupted_input_propagates():
    io = ScriptedIO(["5 3"])
    with pytest.raises(EOFError):
        io.session().run()
