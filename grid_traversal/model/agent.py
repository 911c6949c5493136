"""Directed walker that turns right whenever it faces an obstacle."""

from enum import Enum
from typing import AbstractSet, Any

from .directions import Direction
from .grid import Coord, Grid
from .state import WalkState


class WalkerState(Enum):
    """Possible states for a walker after a step."""
    MOVING = "moving"
    TURNING = "turning"
    ESCAPED = "escaped"


class Walker:
    """
    Agent patrolling a grid.

    Each step looks at the cell ahead:
    - off the grid: the walker escapes (terminal)
    - an obstacle: the walker stays put and turns 90 degrees clockwise
    - anything else: the walker moves onto it
    The grid itself is never modified; position is tracked here.
    """

    def __init__(self, position: Coord, heading: Direction):
        self.position = position
        self.heading = heading
        self.state = WalkerState.MOVING
        self.steps_taken = 0

    def target(self) -> Coord:
        """Coordinate of the cell the walker is facing."""
        return self.heading.apply(self.position)

    def step(self, grid: Grid, obstacle: Any,
             extra_obstacles: AbstractSet[Coord] = frozenset()) -> WalkerState:
        """Advance one transition and return the new state."""
        if self.state == WalkerState.ESCAPED:
            return self.state

        target = self.target()
        if not grid.in_bounds(target):
            self.state = WalkerState.ESCAPED
        elif target in extra_obstacles or grid.at(target) == obstacle:
            self.heading = self.heading.turn_right()
            self.state = WalkerState.TURNING
        else:
            self.position = target
            self.state = WalkerState.MOVING
            self.steps_taken += 1
        return self.state

    def snapshot(self) -> WalkState:
        return WalkState(position=self.position, heading=self.heading)

    def is_escaped(self) -> bool:
        return self.state == WalkerState.ESCAPED

    def __repr__(self) -> str:
        return (f"Walker(pos={self.position}, heading={self.heading.name}, "
                f"state={self.state.value})")
