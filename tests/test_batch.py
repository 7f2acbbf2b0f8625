"""Tests for batch file processing."""

import csv

import pytest

from martian_robots.batch import (BatchInputError, output_path_for,
                                  process_directory, process_file)
from martian_robots.config import ExportConfig

from .conftest import SAMPLE_INPUT, SAMPLE_OUTPUT


def test_process_file_writes_result_lines(sample_file, tmp_path):
    output_dir = tmp_path / "output"

    result = process_file(sample_file, output_dir)

    assert result.ok
    assert result.output_path == output_dir / "sample_output.txt"
    assert result.output_path.read_text().splitlines() == SAMPLE_OUTPUT
    assert result.results == SAMPLE_OUTPUT
    assert result.statistics.dead_count == 1


def test_byte_order_mark_ignored(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_text("\ufeff" + SAMPLE_INPUT, encoding="utf-8")

    result = process_file(path, tmp_path / "output")

    assert result.ok
    assert result.results == SAMPLE_OUTPUT


def test_output_path_for():
    assert output_path_for("in/mission.txt", "out").name == "mission_output.txt"
    assert output_path_for("in/mission.txt", "out", "_done").name == "mission_done.txt"


def test_empty_file_skipped(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n")

    result = process_file(path, tmp_path / "output")

    assert result.ok
    assert result.output_path is None
    assert not (tmp_path / "output" / "empty_output.txt").exists()


def test_trailing_placement_without_commands(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("5 3\n1 1 E\nF\n2 2 S\n")

    result = process_file(path, tmp_path / "output")

    assert result.results == ["2 1 E", "2 2 S"]


def test_empty_command_line_is_valid(tmp_path):
    path = tmp_path / "idle.txt"
    path.write_text("5 3\n1 1 E\n\n2 2 S\nF\n")

    result = process_file(path, tmp_path / "output")

    assert result.results == ["1 1 E", "2 1 S"]


@pytest.mark.parametrize("content, line_number", [
    ("0 0\n1 1 E\nF\n", 1),
    ("5\n", 1),
    ("5 3\n1 1 E\nF\n9 9 N\nF\n", 4),
    ("5 3\n1 1 E\nFQ\n", 3),
    ("5 3\n1 1\nF\n", 2),
])
def test_invalid_input_reports_line(tmp_path, content, line_number):
    path = tmp_path / "bad.txt"
    path.write_text(content)

    with pytest.raises(BatchInputError) as excinfo:
        process_file(path, tmp_path / "output")

    assert excinfo.value.line_number == line_number
    assert "bad.txt" in str(excinfo.value)


def test_exports_written(sample_file, tmp_path):
    output_dir = tmp_path / "output"
    export = ExportConfig(csv=True, snapshot=False, gif=False, report=True)

    process_file(sample_file, output_dir, export)

    with open(output_dir / "sample_robots.csv", newline='') as f:
        rows = list(csv.DictReader(f))
    assert [row["robot_id"] for row in rows] == ["1", "2", "3"]
    assert rows[1]["lost"] == "True"
    assert rows[2]["commands"] == "LLFFFRFLFL"

    report = (output_dir / "sample_report.txt").read_text()
    assert "Alive robots:" in report
    assert "2/3" in report
    assert "WWW!.." in report


def test_image_exports_written(sample_file, tmp_path):
    output_dir = tmp_path / "output"
    export = ExportConfig(csv=False, snapshot=True, gif=True, report=False)

    process_file(sample_file, output_dir, export)

    assert (output_dir / "sample_surface.png").stat().st_size > 0
    assert (output_dir / "sample_fleet.gif").stat().st_size > 0


def test_process_directory_mixed_results(tmp_path):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "a.txt").write_text(SAMPLE_INPUT)
    (input_dir / "b.txt").write_text("5 3\n7 7 N\nF\n")
    (input_dir / "ignored.csv").write_text("not an input")

    results = process_directory(input_dir, tmp_path / "output", workers=1)

    assert [r.input_path.name for r in results] == ["a.txt", "b.txt"]
    assert results[0].ok
    assert not results[1].ok
    assert "line 2" in results[1].error
    assert (tmp_path / "output" / "a_output.txt").exists()
    assert not (tmp_path / "output" / "b_output.txt").exists()


def test_process_directory_in_parallel(tmp_path):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    for name in ("one", "two", "three"):
        (input_dir / f"{name}.txt").write_text(SAMPLE_INPUT)

    results = process_directory(input_dir, tmp_path / "output", workers=2)

    assert [r.input_path.name for r in results] == ["one.txt", "three.txt", "two.txt"]
    assert all(r.ok for r in results)
    for name in ("one", "two", "three"):
        output = tmp_path / "output" / f"{name}_output.txt"
        assert output.read_text().splitlines() == SAMPLE_OUTPUT


def test_missing_input_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        process_directory(tmp_path / "missing", tmp_path / "output")


def test_no_matching_files(tmp_path):
    assert process_directory(tmp_path, tmp_path / "output", pattern="*.dat") == []
