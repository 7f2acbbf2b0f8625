"""Tests for the fleet simulation and its statistics."""

import numpy as np
import pytest

from martian_robots.model import (Simulation, Robot, InvalidDimension,
                                  InvalidPlacement, InvalidCommandSequence)

from .conftest import SAMPLE_OUTPUT


def test_create_validates_surface():
    with pytest.raises(InvalidDimension):
        Simulation.create("0", "0")


def test_reference_scenarios_on_shared_surface(sample_simulation):
    assert sample_simulation.results() == SAMPLE_OUTPUT


def test_scent_from_earlier_robot_saves_later_robot(simulation):
    first = simulation.run_robot("3", "2", "N", "FRRFLLFFRRFLL")
    second = simulation.run_robot("3", "3", "N", "F")
    assert first.lost
    assert not second.lost
    assert second.result() == "3 3 N"


def test_pre_scented_corner_not_lost():
    simulation = Simulation.create("5", "5")
    simulation.surface.mark_scented(5, 5)
    robot = simulation.run_robot("5", "5", "N", "F")
    assert robot.result() == "5 5 N"


def test_corner_loss_scents_cell():
    simulation = Simulation.create("5", "5")
    robot = simulation.run_robot("5", "5", "N", "F")
    assert robot.lost
    assert simulation.surface.is_scented(5, 5)


def test_fleet_keeps_insertion_order(simulation):
    for x in ("4", "0", "2"):
        simulation.place_robot(x, "0", "N")
    assert [r.id for r in simulation.robots] == [1, 2, 3]
    assert [r.x for r in simulation.robots] == [4, 0, 2]


def test_failed_placement_not_added_to_fleet(simulation):
    with pytest.raises(InvalidPlacement):
        simulation.place_robot("9", "0", "N")
    assert simulation.robots == []
    assert simulation.surface.walked_count() == 0


def test_failed_move_keeps_robot_in_fleet(simulation):
    robot = simulation.place_robot("1", "1", "N")
    with pytest.raises(InvalidCommandSequence):
        simulation.move_robot(robot, "FFK")
    assert simulation.robots == [robot]
    assert robot.result() == "1 1 N"


def test_move_rejects_foreign_robot(simulation):
    other = Simulation.create("5", "3")
    robot = other.place_robot("1", "1", "N")
    with pytest.raises(ValueError):
        simulation.move_robot(robot, "F")


def test_move_returns_result_line(simulation):
    robot = simulation.place_robot("0", "0", "S")
    assert simulation.move_robot(robot, "F") == "0 0 S LOST"


def test_statistics_of_reference_run(sample_simulation):
    stats = sample_simulation.statistics()
    assert stats.total_robots == 3
    assert stats.alive_count == 2
    assert stats.dead_count == 1
    assert stats.total_cells == 24
    assert stats.walked_cells == 10
    assert stats.scented_cells == 1
    assert stats.walked_percentage == 41.67
    assert stats.total_moves == 12


def test_statistics_of_empty_fleet():
    simulation = Simulation.create("0", "1")
    stats = simulation.statistics()
    assert stats.total_robots == 0
    assert stats.alive_count == 0
    assert stats.dead_count == 0
    assert stats.total_cells == 2
    assert stats.walked_percentage == 0.0


def test_fully_walked_surface():
    simulation = Simulation.create("1", "0")
    simulation.run_robot("0", "0", "E", "F")
    stats = simulation.statistics()
    assert stats.walked_cells == 2
    assert stats.walked_percentage == 100.0


def test_alive_and_dead_counts(simulation):
    simulation.run_robot("0", "0", "S", "F")
    simulation.run_robot("0", "0", "W", "F")
    simulation.run_robot("2", "2", "N", "")
    assert simulation.alive_count == 2
    assert simulation.dead_count == 1


def test_snapshot_copies_layers(sample_simulation):
    state = sample_simulation.snapshot()
    assert state.step == 3
    assert [r.result() for r in state.robots] == SAMPLE_OUTPUT
    assert state.robots[1].start_x == 3
    assert state.robots[1].start_orientation == "N"
    assert state.robots[1].commands == "FRRFLLFFRRFLL"

    sample_simulation.surface.mark_scented(0, 0)
    assert not state.scent[0, 0]
    assert np.count_nonzero(state.walked) == 10


def test_render_grid_top_row_first(sample_simulation):
    assert sample_simulation.render_grid().splitlines() == [
        "WWW!..",
        "...WW.",
        "WW....",
        "WW....",
    ]


def test_robot_class_is_exposed():
    simulation = Simulation.create("1", "1")
    assert isinstance(simulation.place_robot("0", "0", "N"), Robot)
