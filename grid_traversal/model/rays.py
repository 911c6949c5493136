"""Line projection across the grid and antenna antinode placement."""

from itertools import combinations, count, takewhile
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from .grid import Coord, Grid

Vector = Tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def step_vector(a: Coord, b: Coord) -> Vector:
    """
    Displacement pointing from b through a and beyond.

    Each axis is the absolute distance between a and b, signed by how a
    compares to b on that axis.
    """
    return (
        _sign(a[0] - b[0]) * abs(a[0] - b[0]),
        _sign(a[1] - b[1]) * abs(a[1] - b[1]),
    )


def project_line(origin: Coord, step: Vector) -> Iterator[Coord]:
    """Lazily yield origin + k * step for k = 1, 2, ... without bound."""
    if step == (0, 0):
        raise ValueError("Cannot project along a zero step vector")
    for k in count(1):
        yield (origin[0] + step[0] * k, origin[1] + step[1] * k)


def clip(grid: Grid, points: Iterable[Coord]) -> Iterator[Coord]:
    """Stop consuming points at the first one outside the grid."""
    return takewhile(grid.in_bounds, points)


def antenna_positions(grid: Grid, background: str = '.') -> Dict[str, List[Coord]]:
    """Group antenna coordinates by frequency (cell value)."""
    positions: Dict[str, List[Coord]] = {}
    for coord in grid.coordinates():
        value = grid.at(coord)
        if value != background:
            positions.setdefault(value, []).append(coord)
    return positions


def antenna_pairs(grid: Grid, background: str = '.') -> List[Tuple[Coord, Coord]]:
    """Every unordered pair of distinct antennas sharing a frequency."""
    pairs = []
    for coords in antenna_positions(grid, background).values():
        pairs.extend(combinations(coords, 2))
    return pairs


def antinodes(grid: Grid, background: str = '.') -> Set[Coord]:
    """One point beyond each antenna of every pair, kept when on the grid."""
    found: Set[Coord] = set()
    for a, b in antenna_pairs(grid, background):
        for origin, other in ((a, b), (b, a)):
            first = next(project_line(origin, step_vector(origin, other)))
            if grid.in_bounds(first):
                found.add(first)
    return found


def resonant_antinodes(grid: Grid, background: str = '.') -> Set[Coord]:
    """
    Every on-grid point colinear with a pair at whole multiples of its
    spacing, in both directions, including the antennas themselves.
    """
    found: Set[Coord] = set()
    for a, b in antenna_pairs(grid, background):
        found.update((a, b))
        for origin, other in ((a, b), (b, a)):
            found.update(clip(grid, project_line(origin, step_vector(origin, other))))
    return found
