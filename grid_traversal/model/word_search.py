"""Straight-line and X-shaped word search over a letter grid."""

from .directions import ALL_DIRECTIONS, Direction
from .grid import Coord, Grid


def reads_word(grid: Grid, start: Coord, direction: Direction, word: str) -> bool:
    """Check whether word is spelled from start along direction."""
    for index, letter in enumerate(word):
        coord = direction.apply(start, index)
        if not grid.in_bounds(coord) or grid.at(coord) != letter:
            return False
    return True


def count_word(grid: Grid, word: str) -> int:
    """Occurrences of word in any of the eight directions."""
    if not word:
        return 0
    if len(word) == 1:
        # Every direction reads the same single cell
        return len(grid.find_all(word))
    return sum(
        reads_word(grid, coord, direction, word)
        for coord in grid.coordinates()
        if grid.at(coord) == word[0]
        for direction in ALL_DIRECTIONS
    )


def _diagonal(grid: Grid, center: Coord, first: Direction, second: Direction) -> str:
    ends = (first.apply(center), second.apply(center))
    if not all(grid.in_bounds(end) for end in ends):
        return ""
    return grid.at(ends[0]) + grid.at(center) + grid.at(ends[1])


def count_x_pattern(grid: Grid, word: str) -> int:
    """
    Count cells where both diagonals through the cell spell a three-letter
    word, forwards or backwards, crossing at its middle letter.
    """
    if len(word) != 3:
        raise ValueError(f"X pattern needs a three-letter word, got {word!r}")
    spellings = {word, word[::-1]}
    found = 0
    for coord in grid.find_all(word[1]):
        falling = _diagonal(grid, coord, Direction.UP_LEFT, Direction.DOWN_RIGHT)
        rising = _diagonal(grid, coord, Direction.UP_RIGHT, Direction.DOWN_LEFT)
        if falling in spellings and rising in spellings:
            found += 1
    return found
