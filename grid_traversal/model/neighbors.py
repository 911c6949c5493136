"""Four-neighborhood classification relative to a sameness predicate."""

from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .directions import CARDINAL
from .grid import Coord, Grid

Predicate = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Neighborhood:
    """Axis-aligned neighbors of one cell, split by a predicate."""
    same: Tuple[Coord, ...]
    different: Tuple[Coord, ...]


def same_value(current: Any, neighbor: Any) -> bool:
    """Region discovery rule: neighbor holds the same value."""
    return current == neighbor


def one_step_up(current: Any, neighbor: Any) -> bool:
    """Trail rule: neighbor is exactly one higher than the current cell."""
    return neighbor == current + 1


def classify(grid: Grid, coord: Coord, predicate: Predicate) -> Neighborhood:
    """
    Partition the up/down/left/right neighbors of coord.

    Off-grid neighbors are always placed in ``different``.
    """
    current = grid.at(coord)
    same = []
    different = []
    for direction in CARDINAL:
        neighbor = direction.apply(coord)
        if grid.in_bounds(neighbor) and predicate(current, grid.at(neighbor)):
            same.append(neighbor)
        else:
            different.append(neighbor)
    return Neighborhood(same=tuple(same), different=tuple(different))
