"""Tests for straight-line and X-pattern word search."""

import pytest

from grid_traversal.model.directions import Direction
from grid_traversal.model.grid import Grid
from grid_traversal.model.word_search import count_word, count_x_pattern, reads_word


def test_counts_xmas_in_all_directions(word_grid):
    assert count_word(word_grid, 'XMAS') == 18


def test_counts_x_mas(word_grid):
    assert count_x_pattern(word_grid, 'MAS') == 9


def test_reads_word_along_diagonal():
    grid = Grid.from_lines(["X...", ".M..", "..A.", "...S"])
    assert reads_word(grid, (0, 0), Direction.DOWN_RIGHT, 'XMAS')
    assert reads_word(grid, (3, 3), Direction.UP_LEFT, 'SAMX')
    assert not reads_word(grid, (0, 0), Direction.RIGHT, 'XMAS')


def test_word_running_off_grid():
    grid = Grid.from_lines(["XMA"])
    assert count_word(grid, 'XMAS') == 0


def test_palindrome_counted_once_per_direction():
    grid = Grid.from_lines(["ABA"])
    # Forwards from (0, 0) and backwards from (0, 2)
    assert count_word(grid, 'ABA') == 2


def test_x_pattern_needs_three_letters(word_grid):
    with pytest.raises(ValueError):
        count_x_pattern(word_grid, 'XMAS')


def test_x_pattern_at_edges_ignored():
    grid = Grid.from_lines(["M.S", ".A.", "M.S"])
    assert count_x_pattern(grid, 'MAS') == 1
    assert count_x_pattern(Grid.from_lines(["A"]), 'MAS') == 0


def test_single_letter_word_counted_once_per_cell():
    assert count_word(Grid.from_lines(["X"]), 'X') == 1
    assert count_word(Grid.from_lines(["XAX", "AXA"]), 'X') == 3
