"""Summary report generation for the Martian Robots simulation."""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.engine import Simulation


class Reporter:
    """Generates the mission summary as a formatted text report."""

    def __init__(self, source: Optional[str] = None):
        self.source = source

    def statistics_lines(self, simulation: "Simulation") -> List[str]:
        stats = simulation.statistics()
        return [
            f"Total robots placed:   {stats.total_robots} robots",
            f"Alive robots:          {stats.alive_count}/{stats.total_robots}",
            f"Cells explored:        {stats.walked_cells}/{stats.total_cells} "
            f"({stats.walked_percentage:.2f}%)",
            f"Scented cells:         {stats.scented_cells}",
            f"Total moves made:      {stats.total_moves}",
        ]

    def generate_summary(self, simulation: "Simulation",
                         include_grid: bool = True) -> str:
        """Returns formatted text report."""
        surface = simulation.surface
        lines = [
            "",
            "=" * 60,
            "                 MARTIAN ROBOTS MISSION REPORT",
            "=" * 60,
        ]
        if self.source:
            lines.append(f"Input: {self.source}")
        lines += [
            f"Surface: {surface.width} x {surface.height}",
            "",
            "FLEET STATISTICS",
            "-" * 40,
        ]
        lines += self.statistics_lines(simulation)
        lines += [
            "",
            "FINAL POSITIONS",
            "-" * 40,
        ]
        lines += [f"Robot {r.id:>3}: {r.result()}" for r in simulation.robots]

        if include_grid:
            lines += [
                "",
                "SURFACE",
                "-" * 40,
                f"{simulation.WALKED_CHAR} = a robot walked here",
                f"{simulation.SCENT_CHAR} = a robot was lost here",
                "",
                simulation.render_grid(),
            ]

        lines.append("=" * 60)
        return "\n".join(lines)
