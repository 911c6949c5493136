"""Model package for grid traversal puzzles."""

from .directions import Direction, CARDINAL, DIAGONAL, ALL_DIRECTIONS, HEADING_MARKERS
from .grid import Grid, Coord, OutOfBoundsError, MalformedInputError, IMPASSABLE
from .neighbors import Neighborhood, classify, same_value, one_step_up
from .regions import Region, discover_all
from .metrics import RegionMetrics, measure_all, total_price, total_bulk_price
from .state import WalkState, WalkOutcome, PatrolResult
from .agent import Walker, WalkerState
from .engine import PatrolEngine

__all__ = [
    'Direction',
    'CARDINAL',
    'DIAGONAL',
    'ALL_DIRECTIONS',
    'HEADING_MARKERS',
    'Grid',
    'Coord',
    'OutOfBoundsError',
    'MalformedInputError',
    'IMPASSABLE',
    'Neighborhood',
    'classify',
    'same_value',
    'one_step_up',
    'Region',
    'discover_all',
    'RegionMetrics',
    'measure_all',
    'total_price',
    'total_bulk_price',
    'WalkState',
    'WalkOutcome',
    'PatrolResult',
    'Walker',
    'WalkerState',
    'PatrolEngine',
]
