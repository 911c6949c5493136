"""Area, perimeter and corner metrics for discovered regions."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .directions import Direction
from .regions import Region

# Each corner check pairs one diagonal with its two orthogonal adjacents
CORNER_CHECKS: Tuple[Tuple[Direction, Tuple[Direction, Direction]], ...] = (
    (Direction.UP_LEFT, (Direction.UP, Direction.LEFT)),
    (Direction.UP_RIGHT, (Direction.UP, Direction.RIGHT)),
    (Direction.DOWN_LEFT, (Direction.DOWN, Direction.LEFT)),
    (Direction.DOWN_RIGHT, (Direction.DOWN, Direction.RIGHT)),
)


def area(region: Region) -> int:
    return len(region.cells)


def perimeter(region: Region) -> int:
    """Count member edges facing a different value or the grid edge."""
    return sum(len(n.different) for n in region.neighborhoods.values())


def count_corners(region: Region) -> int:
    """
    Count boundary corners of a region, which equals its number of sides.

    For every member and every diagonal check:
    - outer: diagonal outside, both adjacents outside
    - inner: diagonal inside, both adjacents outside
    - transitional: diagonal outside, both adjacents inside
    Checks are independent across the four diagonals of a cell.
    """
    corners = 0
    for coord in region.cells:
        for diagonal, adjacents in CORNER_CHECKS:
            diag_in = diagonal.apply(coord) in region
            adj_in = [d.apply(coord) in region for d in adjacents]

            if not diag_in and not any(adj_in):
                corners += 1
            elif diag_in and not any(adj_in):
                corners += 1
            elif not diag_in and all(adj_in):
                corners += 1
    return corners


@dataclass(frozen=True)
class RegionMetrics:
    """Fencing metrics derived from one region."""
    region_id: int
    value: Any
    area: int
    perimeter: int
    corners: int

    @property
    def price(self) -> int:
        return self.area * self.perimeter

    @property
    def sides(self) -> int:
        return self.corners

    @property
    def bulk_price(self) -> int:
        return self.area * self.corners

    @classmethod
    def from_region(cls, region_id: int, region: Region) -> "RegionMetrics":
        return cls(
            region_id=region_id,
            value=region.value,
            area=area(region),
            perimeter=perimeter(region),
            corners=count_corners(region)
        )

    def to_csv_row(self) -> Dict:
        """Convert to CSV-compatible format."""
        return {
            "region_id": self.region_id,
            "value": self.value,
            "area": self.area,
            "perimeter": self.perimeter,
            "price": self.price,
            "corners": self.corners,
            "bulk_price": self.bulk_price,
        }


def measure_all(regions: Iterable[Region]) -> List[RegionMetrics]:
    """Compute metrics for every region, keeping enumeration order."""
    return [RegionMetrics.from_region(i, r) for i, r in enumerate(regions)]


def total_price(metrics: Iterable[RegionMetrics]) -> int:
    return sum(m.price for m in metrics)


def total_bulk_price(metrics: Iterable[RegionMetrics]) -> int:
    return sum(m.bulk_price for m in metrics)
