"""Breadth-first discovery of maximal same-value regions."""

from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Set, Tuple

from .grid import Coord, Grid
from .neighbors import Neighborhood, classify, same_value


@dataclass(frozen=True)
class Region:
    """
    Maximal 4-connected set of cells sharing one value.

    ``cells`` keeps discovery order; ``neighborhoods`` maps every member to
    its classified neighbors (off-grid counts as different).
    """
    value: Any
    cells: Tuple[Coord, ...]
    neighborhoods: Mapping[Coord, Neighborhood] = field(repr=False, hash=False)
    members: FrozenSet[Coord] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'neighborhoods', MappingProxyType(dict(self.neighborhoods)))
        object.__setattr__(self, 'members', frozenset(self.cells))

    def __contains__(self, coord: object) -> bool:
        return coord in self.members

    def __len__(self) -> int:
        return len(self.cells)


def discover_region(grid: Grid, start: Coord, assigned: Set[Coord]) -> Region:
    """
    Flood fill from start through same-valued neighbors.

    Every visited coordinate is added to ``assigned``.
    """
    cells: List[Coord] = []
    neighborhoods: Dict[Coord, Neighborhood] = {}
    queue = deque([start])
    assigned.add(start)

    while queue:
        coord = queue.popleft()
        cells.append(coord)
        neighborhood = classify(grid, coord, same_value)
        neighborhoods[coord] = neighborhood
        for neighbor in neighborhood.same:
            if neighbor not in assigned:
                assigned.add(neighbor)
                queue.append(neighbor)

    return Region(
        value=grid.at(start),
        cells=tuple(cells),
        neighborhoods=neighborhoods
    )


def discover_all(grid: Grid) -> List[Region]:
    """Partition the whole grid into regions, enumerated in row-major order."""
    assigned: Set[Coord] = set()
    regions = []
    for coord in grid.coordinates():
        if coord in assigned:
            continue
        regions.append(discover_region(grid, coord, assigned))
    return regions
