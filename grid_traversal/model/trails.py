"""Uphill trail enumeration over a numeric height map."""

from typing import List

from .grid import Coord, Grid
from .neighbors import classify, one_step_up

Trail = List[Coord]


def trailheads(grid: Grid, start: int = 0) -> List[Coord]:
    """Every cell at the starting height, in row-major order."""
    if start < 0:
        # Negative heights mark impassable cells
        return []
    return grid.find_all(start)


def find_trails(grid: Grid, head: Coord, summit: int = 9) -> List[Trail]:
    """
    Enumerate every path from head that climbs exactly one per step and
    ends on a cell at the summit height.

    Depth first; neighbors are explored up, down, left, right.
    """
    trails: List[Trail] = []
    stack = [[head]]
    while stack:
        path = stack.pop()
        current = path[-1]
        if grid.at(current) == summit:
            trails.append(path)
            continue
        uphill = classify(grid, current, one_step_up).same
        # Reversed so the first neighbor is popped first
        for neighbor in reversed(uphill):
            stack.append(path + [neighbor])
    return trails


def score(grid: Grid, head: Coord, summit: int = 9) -> int:
    """Number of distinct summits reachable from head."""
    return len({trail[-1] for trail in find_trails(grid, head, summit)})


def rating(grid: Grid, head: Coord, summit: int = 9) -> int:
    """Number of distinct trails from head."""
    return len(find_trails(grid, head, summit))


def score_map(grid: Grid, start: int = 0, summit: int = 9) -> int:
    return sum(score(grid, head, summit) for head in trailheads(grid, start))


def rate_map(grid: Grid, start: int = 0, summit: int = 9) -> int:
    return sum(rating(grid, head, summit) for head in trailheads(grid, start))
