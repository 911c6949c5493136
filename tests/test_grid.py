"""Tests for grid_traversal.model.grid and directions."""

import numpy as np
import pytest

from grid_traversal.model.directions import (
    ALL_DIRECTIONS, CARDINAL, DIAGONAL, Direction
)
from grid_traversal.model.grid import (
    IMPASSABLE, Grid, MalformedInputError, OutOfBoundsError
)


class TestGrid:
    def test_dimensions_and_lookup(self, garden_grid):
        assert garden_grid.dimensions() == (10, 10)
        assert garden_grid.at((0, 0)) == 'R'
        assert garden_grid.at((9, 9)) == 'E'

    def test_at_returns_plain_python_values(self, garden_grid, trail_grid):
        assert type(garden_grid.at((0, 0))) is str
        assert type(trail_grid.at((0, 0))) is int
        assert trail_grid.at((0, 0)) == 8

    def test_rows_are_stripped_and_blank_lines_skipped(self):
        grid = Grid.from_lines(["", "  ab  ", "cd", "   "])
        assert grid.dimensions() == (2, 2)
        assert str(grid) == "ab\ncd"

    def test_ragged_rows_rejected(self):
        with pytest.raises(MalformedInputError, match="Row 1"):
            Grid.from_lines(["abc", "ab"])

    def test_empty_input_rejected(self):
        with pytest.raises(MalformedInputError):
            Grid.from_lines(["", "  "])

    def test_numeric_non_digits_are_impassable(self):
        grid = Grid.from_lines(["0.2"], numeric=True)
        assert grid.at((0, 1)) == IMPASSABLE
        assert grid.at((0, 2)) == 2

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (10, 0), (0, 10)])
    def test_out_of_bounds_access_raises(self, garden_grid, coord):
        assert not garden_grid.in_bounds(coord)
        with pytest.raises(OutOfBoundsError):
            garden_grid.at(coord)
        with pytest.raises(OutOfBoundsError):
            garden_grid.set(coord, 'X')

    def test_out_of_bounds_is_an_index_error(self, garden_grid):
        with pytest.raises(IndexError):
            garden_grid.at((99, 99))

    def test_set_mutates_in_place(self, garden_grid):
        garden_grid.set((1, 1), 'Z')
        assert garden_grid.at((1, 1)) == 'Z'
        assert garden_grid.dimensions() == (10, 10)

    def test_copy_is_independent(self, garden_grid):
        clone = garden_grid.copy()
        clone.set((0, 0), 'Z')
        assert garden_grid.at((0, 0)) == 'R'
        assert clone != garden_grid

    def test_coordinates_are_row_major(self):
        grid = Grid.from_lines(["ab", "cd"])
        assert list(grid.coordinates()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_find_and_find_all(self, patrol_grid):
        assert patrol_grid.find('^<>v') == (6, 4)
        assert patrol_grid.find('@') is None
        assert patrol_grid.find_all('#')[:2] == [(0, 4), (1, 9)]
        assert len(patrol_grid.find_all('#')) == 8

    def test_backing_array_shape(self, word_grid):
        assert isinstance(word_grid.cells, np.ndarray)
        assert word_grid.cells.shape == (10, 10)


class TestDirections:
    def test_vectors(self):
        assert Direction.UP.value == (-1, 0)
        assert Direction.DOWN_RIGHT.value == (1, 1)
        assert Direction.LEFT.apply((3, 3)) == (3, 2)
        assert Direction.UP_RIGHT.apply((3, 3), times=2) == (1, 5)

    def test_tables(self):
        assert len(CARDINAL) == 4
        assert len(DIAGONAL) == 4
        assert set(ALL_DIRECTIONS) == set(Direction)

    def test_turn_right_cycles_clockwise(self):
        heading = Direction.UP
        seen = []
        for _ in range(4):
            heading = heading.turn_right()
            seen.append(heading)
        assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]

    def test_diagonal_cannot_turn(self):
        with pytest.raises(ValueError):
            Direction.UP_LEFT.turn_right()

    def test_lookup_by_name_and_marker(self):
        assert Direction.from_name("down-left") is Direction.DOWN_LEFT
        assert Direction.from_name("up") is Direction.UP
        assert Direction.from_marker('>') is Direction.RIGHT
        with pytest.raises(ValueError):
            Direction.from_name("sideways")
        with pytest.raises(ValueError):
            Direction.from_marker('x')
