"""Patrol simulation engine with loop detection."""

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import AbstractSet, Callable, Dict, List, Optional, Set, Tuple

from .agent import Walker, WalkerState
from .directions import Direction, HEADING_MARKERS
from .grid import Coord, Grid, MalformedInputError
from .state import PatrolResult, WalkOutcome, WalkState

ProgressCallback = Callable[[int, int], None]

# Per-process engine for the obstacle sweep, built once by _init_worker
_worker_engine: Optional["PatrolEngine"] = None


def _init_worker(grid: Grid, obstacle: str) -> None:
    global _worker_engine
    _worker_engine = PatrolEngine(grid, obstacle)


def _simulate_candidate(candidate: Coord) -> WalkOutcome:
    return _worker_engine.simulate(candidate)


class PatrolEngine:
    """
    Drives a Walker over a static grid.

    Implements:
    1. Locating the agent marker (the only full-grid scan)
    2. The unobstructed walk, recording path and visited cells
    3. Bounded simulation with one hypothetical extra obstacle
    4. The sweep over candidate obstacles, optionally on a process pool

    The base grid is never modified. Hypothetical obstacles live in a
    sparse overlay passed to the walker, so every run is isolated.
    """

    def __init__(self, grid: Grid, obstacle: str = '#'):
        self.grid = grid
        self.obstacle = obstacle
        self.start = self._locate_agent()
        # Upper bound on distinct (position, heading) states
        self.max_steps = grid.height * grid.width * len(HEADING_MARKERS)

    def _locate_agent(self) -> WalkState:
        """Scan the grid once for the agent's heading marker."""
        position = self.grid.find(HEADING_MARKERS.keys())
        if position is None:
            raise MalformedInputError(
                f"No agent marker ({''.join(HEADING_MARKERS)}) found in grid"
            )
        heading = Direction.from_marker(self.grid.at(position))
        return WalkState(position=position, heading=heading)

    def _new_walker(self) -> Walker:
        return Walker(self.start.position, self.start.heading)

    def walk(self) -> Tuple[List[WalkState], bool]:
        """
        Run the unobstructed walk.

        Returns the path of logged states (start included) and whether the
        walker escaped. A walk that revisits a state stops there instead.
        """
        walker = self._new_walker()
        path = [walker.snapshot()]
        seen = {path[0]}

        for _ in range(self.max_steps):
            if walker.step(self.grid, self.obstacle) == WalkerState.ESCAPED:
                return path, True
            state = walker.snapshot()
            if state in seen:
                return path, False
            seen.add(state)
            path.append(state)
        return path, False

    def simulate(self, extra_obstacle: Optional[Coord] = None) -> WalkOutcome:
        """
        Bounded run from the initial start with a fresh visited-state set.

        Reports LOOP as soon as a (position, heading) state repeats and
        TERMINATES once the walker leaves the grid.
        """
        extra: AbstractSet[Coord] = frozenset()
        if extra_obstacle is not None:
            if extra_obstacle == self.start.position:
                raise ValueError("Cannot place an obstacle on the start cell")
            extra = frozenset([extra_obstacle])

        walker = self._new_walker()
        seen: Set[WalkState] = {walker.snapshot()}

        for _ in range(self.max_steps):
            if walker.step(self.grid, self.obstacle, extra) == WalkerState.ESCAPED:
                return WalkOutcome.TERMINATES
            state = walker.snapshot()
            if state in seen:
                return WalkOutcome.LOOP
            seen.add(state)
        # Pigeonhole: more steps than distinct states means a repeat
        return WalkOutcome.LOOP

    def obstacle_candidates(self, path: List[WalkState]) -> List[Coord]:
        """Distinct positions along the walk, in walk order, minus the start."""
        ordered = dict.fromkeys(state.position for state in path)
        ordered.pop(self.start.position, None)
        return list(ordered)

    def find_loop_obstacles(self, path: Optional[List[WalkState]] = None,
                            workers: int = 1,
                            progress: Optional[ProgressCallback] = None
                            ) -> List[Coord]:
        """
        Return every candidate that traps the walker in a loop.

        Candidates are evaluated independently. With ``workers > 1`` they are
        spread over a process pool that receives the grid once per worker.
        Results are merged by candidate index so the output matches the
        sequential order exactly.
        """
        if path is None:
            path, _ = self.walk()
        candidates = self.obstacle_candidates(path)
        total = len(candidates)
        outcomes: Dict[int, WalkOutcome] = {}

        if workers <= 1:
            for index, candidate in enumerate(candidates):
                outcomes[index] = self.simulate(candidate)
                if progress:
                    progress(index + 1, total)
        else:
            with ProcessPoolExecutor(
                max_workers=workers,
                initializer=_init_worker,
                initargs=(self.grid, self.obstacle)
            ) as executor:
                futures = {
                    executor.submit(_simulate_candidate, candidate): index
                    for index, candidate in enumerate(candidates)
                }
                for done, future in enumerate(as_completed(futures), start=1):
                    outcomes[futures[future]] = future.result()
                    if progress:
                        progress(done, total)

        return [
            candidates[index] for index in sorted(outcomes)
            if outcomes[index] == WalkOutcome.LOOP
        ]

    def run(self, find_loops: bool = True, workers: int = 1,
            progress: Optional[ProgressCallback] = None) -> PatrolResult:
        """Full analysis: unobstructed walk plus the optional obstacle sweep."""
        path, escaped = self.walk()
        loop_obstacles: List[Coord] = []
        if find_loops:
            loop_obstacles = self.find_loop_obstacles(path, workers, progress)
        return PatrolResult(
            start=self.start,
            path=path,
            visited=frozenset(state.position for state in path),
            escaped=escaped,
            loop_obstacles=loop_obstacles
        )
