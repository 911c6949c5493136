"""Input file loading for grid puzzles."""

from pathlib import Path
from typing import List

from .model.grid import Grid


def load_lines(input_path: Path) -> List[str]:
    """Read a text file, stripping each line and skipping blank ones."""
    with open(input_path, encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def load_grid(input_path: Path, numeric: bool = False) -> Grid:
    """Read a text file into a Grid, one cell per character."""
    return Grid.from_lines(load_lines(input_path), numeric=numeric)
