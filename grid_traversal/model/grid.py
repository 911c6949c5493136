"""Grid map management for grid traversal puzzles."""

import numpy as np
from typing import Any, Iterable, Iterator, List, Optional, Tuple

Coord = Tuple[int, int]

# Height maps store impassable (non-digit) cells with this value
IMPASSABLE = -1


class OutOfBoundsError(IndexError):
    """Raised when a coordinate outside the grid extents is dereferenced."""

    def __init__(self, coord: Coord, dimensions: Tuple[int, int]):
        self.coord = coord
        self.dimensions = dimensions
        super().__init__(
            f"Coordinate {coord} outside grid of size "
            f"{dimensions[0]}x{dimensions[1]}"
        )


class MalformedInputError(ValueError):
    """Raised when puzzle input cannot be turned into a usable grid."""


class Grid:
    """
    Rectangular 2D lattice of cell values.

    Coordinate convention: (row, col), row 0 at the top, for both the API
    and the underlying numpy array. Height and width never change after
    construction; cell mutation is in place.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2 or cells.size == 0:
            raise MalformedInputError("Grid must be a non-empty 2D array")
        self.cells = cells
        self.height, self.width = cells.shape

    @classmethod
    def from_lines(cls, lines: Iterable[str], numeric: bool = False) -> "Grid":
        """
        Build a grid from text rows, one cell per character.

        With ``numeric`` every digit becomes an int cell and anything else
        becomes IMPASSABLE. Rows of unequal length are rejected.
        """
        rows = [line.strip() for line in lines]
        rows = [row for row in rows if row]
        if not rows:
            raise MalformedInputError("Grid input contains no rows")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInputError(
                    f"Row {index} has length {len(row)}, expected {width}"
                )

        if numeric:
            cells = np.array(
                [[int(ch) if ch.isdigit() else IMPASSABLE for ch in row]
                 for row in rows],
                dtype=np.int32
            )
        else:
            cells = np.array([list(row) for row in rows], dtype='<U1')
        return cls(cells)

    @classmethod
    def from_text(cls, text: str, numeric: bool = False) -> "Grid":
        """Build a grid from a newline-delimited text blob."""
        return cls.from_lines(text.splitlines(), numeric=numeric)

    def dimensions(self) -> Tuple[int, int]:
        """Return (height, width)."""
        return self.height, self.width

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def at(self, coord: Coord) -> Any:
        """Return the value stored at coord as a plain Python scalar."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.dimensions())
        return self.cells[coord[0], coord[1]].item()

    def set(self, coord: Coord, value: Any) -> None:
        """Overwrite the value stored at coord."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.dimensions())
        self.cells[coord[0], coord[1]] = value

    def coordinates(self) -> Iterator[Coord]:
        """Iterate every coordinate in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def find(self, values: Iterable[Any]) -> Optional[Coord]:
        """Return the first coordinate (row-major) holding any of values."""
        wanted = set(values)
        for coord in self.coordinates():
            if self.at(coord) in wanted:
                return coord
        return None

    def find_all(self, value: Any) -> List[Coord]:
        """Return every coordinate holding value, in row-major order."""
        rows, cols = np.where(self.cells == value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> "Grid":
        return Grid(self.cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(value) for value in row) for row in self.cells.tolist()
        )

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"
