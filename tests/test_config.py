"""Tests for YAML configuration loading and input loading."""

from pathlib import Path

import pytest

from grid_traversal.config import load_config, parse_config, validate_puzzle
from grid_traversal.loader import load_grid, load_lines
from grid_traversal.model.grid import MalformedInputError

ROOT = Path(__file__).resolve().parents[1]


def test_load_shipped_patrol_config():
    config = load_config(ROOT / 'configs' / 'patrol.yaml')
    assert config.puzzle == 'patrol'
    assert config.patrol.obstacle == '#'
    assert config.patrol.find_loops is True
    assert config.patrol.workers == 1
    assert config.csv_enabled is True
    assert config.input_path.resolve() == (ROOT / 'inputs' / 'patrol.txt').resolve()


def test_defaults_when_sections_missing():
    config = parse_config({'puzzle': 'garden'})
    assert config.input_path is None
    assert config.antennas.background == '.'
    assert config.trails.summit == 9
    assert config.words.word == 'XMAS'
    assert not config.csv_enabled
    assert not config.snapshot_enabled


def test_relative_input_resolves_against_config_dir(tmp_path):
    config_file = tmp_path / 'run.yaml'
    config_file.write_text("puzzle: trails\ninput: maps/trail.txt\n")
    config = load_config(config_file)
    assert config.input_path == tmp_path / 'maps' / 'trail.txt'


@pytest.mark.parametrize("raw", [
    {},
    {'puzzle': 'robots'},
    {'puzzle': 'patrol', 'patrol': {'obstacle': '##'}},
    {'puzzle': 'patrol', 'patrol': {'workers': 0}},
    {'puzzle': 'trails', 'trails': {'trailhead': 5, 'summit': 5}},
    {'puzzle': 'trails', 'trails': {'trailhead': -1}},
])
def test_invalid_config_rejected(raw):
    with pytest.raises(ValueError):
        parse_config(raw)


def test_puzzle_name_normalised():
    assert validate_puzzle(' Garden ') == 'garden'


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'nope.yaml')


def test_load_lines_skips_blank_lines(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text("ab \n\n  cd\n\n")
    assert load_lines(path) == ['ab', 'cd']


def test_load_grid(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text("012\n345\n")
    grid = load_grid(path, numeric=True)
    assert grid.dimensions() == (2, 3)
    assert grid.at((1, 2)) == 5


def test_load_ragged_grid(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text("....\n...\n")
    with pytest.raises(MalformedInputError):
        load_grid(path)
