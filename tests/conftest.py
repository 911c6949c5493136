"""Shared example grids for the test suite."""

import pytest

from grid_traversal.model.grid import Grid

PATROL_MAP = """
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

GARDEN_MAP = """
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

ANTENNA_MAP = """
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

TRAIL_MAP = """
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

WORD_MAP = """
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


@pytest.fixture
def patrol_grid() -> Grid:
    return Grid.from_text(PATROL_MAP)


@pytest.fixture
def garden_grid() -> Grid:
    return Grid.from_text(GARDEN_MAP)


@pytest.fixture
def antenna_grid() -> Grid:
    return Grid.from_text(ANTENNA_MAP)


@pytest.fixture
def trail_grid() -> Grid:
    return Grid.from_text(TRAIL_MAP, numeric=True)


@pytest.fixture
def word_grid() -> Grid:
    return Grid.from_text(WORD_MAP)
