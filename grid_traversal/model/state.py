"""State snapshot dataclasses for patrol simulation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List

from .directions import Direction
from .grid import Coord


@dataclass(frozen=True)
class WalkState:
    """Immutable (position, heading) pair; the key for loop detection."""
    position: Coord
    heading: Direction


class WalkOutcome(Enum):
    """Result of a bounded simulation run."""
    TERMINATES = "terminates"
    LOOP = "loop"


@dataclass
class PatrolResult:
    """Complete record of one patrol analysis."""
    start: WalkState
    path: List[WalkState]
    visited: FrozenSet[Coord]
    escaped: bool
    loop_obstacles: List[Coord] = field(default_factory=list)

    @property
    def visited_count(self) -> int:
        return len(self.visited)

    @property
    def steps(self) -> int:
        return len(self.path) - 1

    def to_csv_rows(self) -> List[Dict]:
        """Convert the walk path to CSV-compatible format."""
        return [
            {
                "step": index,
                "row": state.position[0],
                "col": state.position[1],
                "heading": state.heading.name.lower()
            }
            for index, state in enumerate(self.path)
        ]
