"""Fixed direction vector tables for grid traversal."""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """
    Unit step on the grid as a (drow, dcol) vector.

    Row 0 is the top of the grid, so UP decreases the row index.
    """
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    def apply(self, coord: Tuple[int, int], times: int = 1) -> Tuple[int, int]:
        """Return the coordinate reached by taking ``times`` steps from coord."""
        return (coord[0] + self.drow * times, coord[1] + self.dcol * times)

    def turn_right(self) -> "Direction":
        """Rotate a cardinal heading 90 degrees clockwise."""
        try:
            return _CLOCKWISE[self]
        except KeyError:
            raise ValueError(f"Cannot turn a diagonal heading: {self.name}")

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by symbolic name ("up", "down_left", ...)."""
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown direction: {name}")

    @classmethod
    def from_marker(cls, marker: str) -> "Direction":
        """Look up a cardinal heading from its map marker (^, v, <, >)."""
        try:
            return HEADING_MARKERS[marker]
        except KeyError:
            raise ValueError(f"Unknown heading marker: {marker!r}")


CARDINAL: Tuple[Direction, ...] = (
    Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT
)

DIAGONAL: Tuple[Direction, ...] = (
    Direction.UP_LEFT, Direction.UP_RIGHT,
    Direction.DOWN_LEFT, Direction.DOWN_RIGHT
)

ALL_DIRECTIONS: Tuple[Direction, ...] = CARDINAL + DIAGONAL

# up -> right -> down -> left -> up
_CLOCKWISE: Dict[Direction, Direction] = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

HEADING_MARKERS: Dict[str, Direction] = {
    '^': Direction.UP,
    'v': Direction.DOWN,
    '<': Direction.LEFT,
    '>': Direction.RIGHT,
}
