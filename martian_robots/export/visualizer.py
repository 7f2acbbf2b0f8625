"""Visualization and export for the Martian Robots simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Visualizer:
    """
    Renders the surface with matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation (one frame per robot run)
    """

    # Color scheme
    COLORS = {
        'ground': '#D9A066',    # Sand
        'walked': '#8E5B3A',    # Dark rust
        'scent': '#C0392B',     # Red
        'alive': '#27AE60',     # Green
        'lost': '#2C3E50',      # Dark blue-gray
    }

    # Marker per heading
    MARKERS = {'N': '^', 'E': '>', 'S': 'v', 'W': '<'}

    def __init__(self, surface_width: int, surface_height: int):
        self.width = surface_width + 1
        self.height = surface_height + 1
        self.frames: List[Image.Image] = []

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        aspect = self.width / self.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # Base layer: ground, walked, scent
        base = np.ones((self.height, self.width, 3))
        base[:, :] = to_rgb(self.COLORS['ground'])
        base[state.walked] = to_rgb(self.COLORS['walked'])
        base[state.scent] = to_rgb(self.COLORS['scent'])

        ax.imshow(base, origin='lower', aspect='equal',
                  extent=[-0.5, self.width - 0.5, -0.5, self.height - 0.5])

        # Draw robots at their final positions
        for robot in state.robots:
            color = self.COLORS['lost'] if robot.lost else self.COLORS['alive']
            ax.plot(robot.x, robot.y, self.MARKERS[robot.orientation],
                    color=color, markersize=9,
                    markeredgecolor='white', markeredgewidth=0.5)

        stats = state.statistics
        ax.set_title(f'Robots: {stats.total_robots} | Alive: {stats.alive_count} | '
                     f'Explored: {stats.walked_percentage:.2f}%')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(-0.5, self.height - 0.5)

        legend_elements = [
            plt.Line2D([0], [0], marker='s', color='w', label='Walked',
                       markerfacecolor=self.COLORS['walked'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Scent',
                       markerfacecolor=self.COLORS['scent'], markersize=8),
            plt.Line2D([0], [0], marker='^', color='w', label='Alive',
                       markerfacecolor=self.COLORS['alive'], markersize=8),
            plt.Line2D([0], [0], marker='^', color='w', label='Lost',
                       markerfacecolor=self.COLORS['lost'], markersize=8),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 2) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
