"""Configuration dataclasses and YAML loader for grid traversal runs."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path
import yaml

PUZZLES = ('patrol', 'garden', 'antennas', 'trails', 'words')


@dataclass
class PatrolConfig:
    obstacle: str = '#'
    find_loops: bool = True
    workers: int = 1


@dataclass
class AntennaConfig:
    background: str = '.'


@dataclass
class TrailConfig:
    trailhead: int = 0
    summit: int = 9


@dataclass
class WordSearchConfig:
    word: str = 'XMAS'
    x_word: str = 'MAS'


@dataclass
class RunConfig:
    puzzle: str
    input_path: Optional[Path] = None
    patrol: PatrolConfig = field(default_factory=PatrolConfig)
    antennas: AntennaConfig = field(default_factory=AntennaConfig)
    trails: TrailConfig = field(default_factory=TrailConfig)
    words: WordSearchConfig = field(default_factory=WordSearchConfig)

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = False
    snapshot_enabled: bool = False
    gif_enabled: bool = False
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def validate_puzzle(puzzle: str) -> str:
    """Normalise a puzzle name, rejecting unknown ones."""
    name = str(puzzle).strip().lower()
    if name not in PUZZLES:
        raise ValueError(
            f"Unknown puzzle: {puzzle} (expected one of {', '.join(PUZZLES)})"
        )
    return name


def _parse_patrol(raw: Dict[str, Any]) -> PatrolConfig:
    """Parse patrol settings from raw YAML data."""
    config = PatrolConfig(
        obstacle=str(raw.get('obstacle', '#')),
        find_loops=bool(raw.get('find_loops', True)),
        workers=int(raw.get('workers', 1))
    )
    if len(config.obstacle) != 1:
        raise ValueError(f"Obstacle marker must be one character: {config.obstacle!r}")
    if config.workers < 1:
        raise ValueError(f"Worker count must be at least 1: {config.workers}")
    return config


def _parse_trails(raw: Dict[str, Any]) -> TrailConfig:
    """Parse trail settings from raw YAML data."""
    config = TrailConfig(
        trailhead=int(raw.get('trailhead', 0)),
        summit=int(raw.get('summit', 9))
    )
    if config.trailhead < 0:
        raise ValueError(f"Trailhead height must be non-negative: {config.trailhead}")
    if config.summit <= config.trailhead:
        raise ValueError(
            f"Summit ({config.summit}) must be above trailhead ({config.trailhead})"
        )
    return config


def parse_config(raw: Dict[str, Any], base_dir: Optional[Path] = None) -> RunConfig:
    """Build a RunConfig from an already-parsed mapping."""
    if not isinstance(raw, dict) or 'puzzle' not in raw:
        raise ValueError("Configuration must be a mapping with a 'puzzle' key")

    input_path = None
    if raw.get('input'):
        input_path = Path(raw['input'])
        # Relative inputs resolve against the config file's directory
        if base_dir is not None and not input_path.is_absolute():
            input_path = base_dir / input_path

    antennas_raw = raw.get('antennas') or {}
    words_raw = raw.get('words') or {}
    export_raw = raw.get('export') or {}

    return RunConfig(
        puzzle=validate_puzzle(raw['puzzle']),
        input_path=input_path,
        patrol=_parse_patrol(raw.get('patrol') or {}),
        antennas=AntennaConfig(background=str(antennas_raw.get('background', '.'))),
        trails=_parse_trails(raw.get('trails') or {}),
        words=WordSearchConfig(
            word=str(words_raw.get('word', 'XMAS')),
            x_word=str(words_raw.get('x_word', 'MAS'))
        ),
        csv_enabled=export_raw.get('csv', False),
        snapshot_enabled=export_raw.get('snapshot', False),
        gif_enabled=export_raw.get('gif', False)
    )


def load_config(config_path: Path) -> RunConfig:
    """Load and validate YAML configuration file."""
    config_path = Path(config_path)
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return parse_config(raw, base_dir=config_path.parent)
