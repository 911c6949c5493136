"""Visualization and export for grid traversal results."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.grid import Coord, Grid
    from ..model.regions import Region
    from ..model.state import PatrolResult, WalkState


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots with highlighted coordinates
    - Region colouring for garden maps
    - Animated GIF compilation of a patrol walk
    """

    # Color scheme
    COLORS = {
        'obstacle': '#2C3E50',  # Dark blue-gray
        'floor': '#ECF0F1',     # Light gray
        'marker': '#BDC3C7',    # Mid gray for other symbols
        'visited': '#3498DB',   # Blue
        'loop': '#E74C3C',      # Red
        'antinode': '#F39C12',  # Orange
        'summit': '#27AE60',    # Green
        'walker': '#8E44AD',    # Purple
    }

    def __init__(self, grid: "Grid", obstacle: Optional[str] = None,
                 background: str = '.'):
        self.grid = grid
        self.width = grid.width
        self.height = grid.height
        self.obstacle = obstacle
        self.background = background
        self.frames: List[Image.Image] = []

    def _base_layer(self, regions: Optional[Sequence["Region"]] = None) -> np.ndarray:
        """RGB array of the grid itself, before any highlights."""
        base = np.ones((self.height, self.width, 3))

        if regions:
            labels = np.zeros((self.height, self.width), dtype=np.int32)
            for region_id, region in enumerate(regions):
                for row, col in region.cells:
                    labels[row, col] = region_id
            cmap = matplotlib.colormaps['tab20']
            return cmap(labels % cmap.N)[:, :, :3]

        cells = self.grid.cells
        if np.issubdtype(cells.dtype, np.integer):
            heights = np.where(cells >= 0, cells, 0).astype(np.float64)
            peak = heights.max() if heights.max() > 0 else 1.0
            base = matplotlib.colormaps['terrain'](heights / peak)[:, :, :3]
            base[cells < 0] = to_rgb(self.COLORS['obstacle'])
            return base

        base[:, :] = to_rgb(self.COLORS['floor'])
        base[cells != self.background] = to_rgb(self.COLORS['marker'])
        if self.obstacle is not None:
            base[cells == self.obstacle] = to_rgb(self.COLORS['obstacle'])
        return base

    def _create_figure(self, title: str,
                       highlights: Optional[Dict[str, Iterable["Coord"]]] = None,
                       regions: Optional[Sequence["Region"]] = None,
                       walker: Optional["WalkState"] = None) -> plt.Figure:
        """Create matplotlib figure for the grid and its overlays."""
        aspect = self.width / self.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        ax.imshow(self._base_layer(regions), origin='upper', aspect='equal',
                  extent=[-0.5, self.width - 0.5, self.height - 0.5, -0.5])

        legend_elements = []
        for kind, coords in (highlights or {}).items():
            coords = list(coords)
            if not coords:
                continue
            color = self.COLORS.get(kind, '#95A5A6')
            rows = [r for r, _ in coords]
            cols = [c for _, c in coords]
            ax.plot(cols, rows, 's', color=color, markersize=5, alpha=0.7,
                    markeredgecolor='black', markeredgewidth=0.3)
            legend_elements.append(
                plt.Line2D([0], [0], marker='s', color='w', label=kind.title(),
                           markerfacecolor=color, markersize=8)
            )

        if walker is not None:
            row, col = walker.position
            ax.plot(col, row, 'o', color=self.COLORS['walker'], markersize=7,
                    markeredgecolor='white', markeredgewidth=0.5)
            ax.arrow(col, row, walker.heading.dcol * 0.6, walker.heading.drow * 0.6,
                     color=self.COLORS['walker'], head_width=0.3,
                     length_includes_head=True)

        ax.set_title(title)
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')
        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(self.height - 0.5, -0.5)

        if legend_elements:
            ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def save_snapshot(self, output_path: Path, title: str,
                      highlights: Optional[Dict[str, Iterable["Coord"]]] = None,
                      regions: Optional[Sequence["Region"]] = None) -> None:
        """Save single PNG image of the grid."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(title, highlights, regions)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def buffer_frame(self, title: str, walker: "WalkState",
                     visited: Iterable["Coord"]) -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(title, {'visited': visited}, walker=walker)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def buffer_walk(self, result: "PatrolResult", every: int = 5) -> None:
        """Buffer one frame per ``every`` states of a patrol path, plus the last."""
        visited: List["Coord"] = []
        seen = set()
        last = len(result.path) - 1
        for index, state in enumerate(result.path):
            if state.position not in seen:
                seen.add(state.position)
                visited.append(state.position)
            if index % every == 0 or index == last:
                self.buffer_frame(f'Step {index} | Visited: {len(visited)}',
                                  state, list(visited))

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
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
