"""Batch processing of simulation input files."""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import ExportConfig
from .export.csv_writer import CSVWriter
from .export.reporter import Reporter
from .export.visualizer import Visualizer
from .model.engine import Simulation
from .model.errors import SimulationError
from .model.state import FleetStatistics
from .parsing import (clean_command_line, pair_robot_lines,
                      split_placement_line, split_size_line)

logger = logging.getLogger(__name__)


class BatchInputError(ValueError):
    """A validation failure tied to a line of a batch input file."""

    def __init__(self, path: Path, line_number: int, message: str):
        self.path = Path(path)
        self.line_number = line_number
        self.message = message
        super().__init__(f"{self.path.name} [line {line_number}]: {message}")


@dataclass
class BatchResult:
    """Outcome of processing one input file."""
    input_path: Path
    output_path: Optional[Path] = None
    results: List[str] = field(default_factory=list)
    statistics: Optional[FleetStatistics] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def output_path_for(input_path: Path, output_dir: Path,
                    suffix: str = "_output") -> Path:
    return Path(output_dir) / f"{Path(input_path).stem}{suffix}.txt"


def run_lines(lines: List[str], path: Path) -> Simulation:
    """Run one simulation from the lines of a batch file."""
    try:
        simulation = Simulation.create(*split_size_line(lines[0]))
    except SimulationError as e:
        raise BatchInputError(path, 1, str(e)) from e

    for line_number, placement, commands in pair_robot_lines(lines):
        try:
            robot = simulation.place_robot(*split_placement_line(placement))
        except SimulationError as e:
            raise BatchInputError(path, line_number, str(e)) from e
        try:
            simulation.move_robot(robot, clean_command_line(commands))
        except SimulationError as e:
            raise BatchInputError(path, line_number + 1, str(e)) from e

    return simulation


def process_file(input_path: Path, output_dir: Path,
                 export: Optional[ExportConfig] = None,
                 suffix: str = "_output") -> BatchResult:
    """
    Simulate one input file and write its result lines.

    Line 1 is the surface size; the following lines alternate placement
    and command lines. Empty files produce no output.
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    export = export or ExportConfig(csv=False, report=False)

    lines = input_path.read_text(encoding="utf-8-sig").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        logger.info("Skipping empty file %s", input_path.name)
        return BatchResult(input_path=input_path)

    simulation = run_lines(lines, input_path)
    state = simulation.snapshot()

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_path_for(input_path, output_dir, suffix)
    output_path.write_text("\n".join(simulation.results()))

    stem = input_path.stem
    if export.csv:
        with CSVWriter(output_dir / f"{stem}_robots.csv") as writer:
            writer.append(state)

    if export.snapshot or export.gif:
        _render(simulation, lines, input_path, output_dir, export)

    if export.report:
        report = Reporter(str(input_path)).generate_summary(simulation)
        (output_dir / f"{stem}_report.txt").write_text(report)

    logger.info("Processed %s: %d robots, %d lost", input_path.name,
                state.statistics.total_robots, state.statistics.dead_count)

    return BatchResult(
        input_path=input_path,
        output_path=output_path,
        results=simulation.results(),
        statistics=state.statistics,
    )


def _render(simulation: Simulation, lines: List[str], input_path: Path,
            output_dir: Path, export: ExportConfig) -> None:
    """Write the PNG snapshot and/or the per-robot GIF for a finished run."""
    surface = simulation.surface
    visualizer = Visualizer(surface.width, surface.height)
    stem = input_path.stem

    if export.gif:
        # Replay the file, buffering one frame after each robot
        replay = Simulation.create(surface.width, surface.height)
        for _, placement, commands in pair_robot_lines(lines):
            robot = replay.place_robot(*split_placement_line(placement))
            replay.move_robot(robot, clean_command_line(commands))
            visualizer.buffer_frame(replay.snapshot())
        visualizer.generate_gif(output_dir / f"{stem}_fleet.gif")

    if export.snapshot:
        visualizer.save_snapshot(simulation.snapshot(),
                                 output_dir / f"{stem}_surface.png")


def _process_safely(input_path: Path, output_dir: Path,
                    export: Optional[ExportConfig], suffix: str) -> BatchResult:
    """Worker entry point; validation failures come back as a failed result."""
    try:
        return process_file(input_path, output_dir, export, suffix)
    except (BatchInputError, OSError, UnicodeDecodeError) as e:
        return BatchResult(input_path=Path(input_path), error=str(e))


def process_directory(input_dir: Path, output_dir: Path,
                      pattern: str = "*.txt", workers: int = 4,
                      export: Optional[ExportConfig] = None,
                      suffix: str = "_output") -> List[BatchResult]:
    """
    Process every matching file in input_dir, one simulation per file.

    Files run concurrently on a process pool; each worker owns its
    simulation end-to-end. Results come back sorted by input file name.
    """
    input_dir = Path(input_dir)
    output_dir = Path(output_dir)

    if not input_dir.is_dir():
        raise FileNotFoundError(f"The input path '{input_dir}' doesn't exist")
    output_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(p for p in input_dir.glob(pattern) if p.is_file())
    if not files:
        logger.warning("No files matching %s in %s", pattern, input_dir)
        return []

    results: List[BatchResult] = []
    if workers <= 1 or len(files) == 1:
        for path in files:
            results.append(_process_safely(path, output_dir, export, suffix))
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = {pool.submit(_process_safely, path, output_dir, export, suffix): path
                       for path in files}
            for future in as_completed(futures):
                results.append(future.result())

    for result in results:
        if not result.ok:
            logger.error("Failed %s: %s", result.input_path.name, result.error)

    return sorted(results, key=lambda r: r.input_path.name)
