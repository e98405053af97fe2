"""
Spin cycles, cycle detection and projection.

A spin cycle tilts north, west, south then east. The order matters: the
period found by the detector depends on it.

Because a grid holds a fixed number of round objects among a fixed set of
free cells, the sequence of post-cycle states must eventually repeat.
CycleDetector finds the first repeat, and project() uses the period to
reach a huge cycle count (e.g. 1e9) in at most `period` further cycles.

Indexing convention: state 0 is the initial grid before any cycle. The
history records each state BEFORE the cycle at that step is applied, so
`start` is the index at which the repeated state was first produced.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from tiltsim.core.errors import InvalidProjection, NoCycleFound
from tiltsim.core.grid import SPIN_ORDER, Grid
from tiltsim.core.tilt import TiltEngine, tilt

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100_000
"""Spin-cycle ceiling for detection; far above periods seen on real inputs."""

DEFAULT_TARGET_CYCLES = 1_000_000_000
"""Reference cycle count for the long-run projection."""


def spin_cycle(grid: Grid) -> Grid:
    """One spin cycle: tilt north, west, south, east."""
    for direction in SPIN_ORDER:
        grid = tilt(grid, direction)
    return grid


def run_cycles(grid: Grid, n_cycles: int) -> Grid:
    """Apply `n_cycles` spin cycles by direct simulation."""
    if n_cycles < 0:
        raise ValueError(f"n_cycles must be >= 0, got {n_cycles}")
    for _ in range(n_cycles):
        grid = spin_cycle(grid)
    return grid


def iter_cycles(grid: Grid) -> Iterator[Grid]:
    """Yield the state after 1, 2, 3, ... spin cycles (never terminates)."""
    while True:
        grid = spin_cycle(grid)
        yield grid


@dataclass
class CycleRunner:
    """
    Drives a TiltEngine through spin cycles.

    Keeps counters of the cycles run so callers can report how much
    simulation a projection actually needed.
    """

    engine: TiltEngine = field(default_factory=TiltEngine)
    n_cycles: int = field(default=0, init=False)

    def cycle(self, grid: Grid) -> Grid:
        """Apply one spin cycle."""
        for direction in SPIN_ORDER:
            grid = self.engine.tilt(grid, direction)
        self.n_cycles += 1
        return grid

    def run(self, grid: Grid, n_cycles: int) -> Grid:
        """Apply `n_cycles` spin cycles."""
        if n_cycles < 0:
            raise ValueError(f"n_cycles must be >= 0, got {n_cycles}")
        for _ in range(n_cycles):
            grid = self.cycle(grid)
        return grid


@dataclass(frozen=True)
class CycleResult:
    """
    Outcome of cycle detection.

    `grid` is the state at both index `start` and `start + period`.
    Unpacks as (grid, start, period).
    """

    grid: Grid
    start: int
    period: int

    def __iter__(self):
        return iter((self.grid, self.start, self.period))


@dataclass(frozen=True)
class CycleDetectorConfig:
    """Configuration for cycle detection."""

    max_iterations: int = DEFAULT_MAX_ITERATIONS  # Ceiling before NoCycleFound

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")


def _run_until_repeat(
    grid: Grid,
    step: Callable[[Grid], Grid],
    max_iterations: int,
    stop_at: int | None = None,
) -> tuple[Grid, int, int | None]:
    """
    Apply `step` until a state repeats or index `stop_at` is reached.

    Returns (grid, i, start): the grid at index `i`, and the index at which
    it was first seen, or None when the loop stopped at `stop_at`.

    Raises:
        NoCycleFound: if neither happens within `max_iterations` steps
    """
    history: dict[Grid, int] = {}
    for i in range(max_iterations + 1):
        if i == stop_at:
            return grid, i, None
        start = history.get(grid)
        if start is not None:
            return grid, i, start
        history[grid] = i
        if i and i % 1000 == 0:
            logger.debug("Cycle detection: %d distinct states recorded", len(history))
        if i < max_iterations:
            grid = step(grid)

    logger.error(
        "No repeated state after %d spin cycles; last grid:\n%s",
        max_iterations, grid,
    )
    raise NoCycleFound(iterations=max_iterations, last_grid=grid)


@dataclass
class CycleDetector:
    """
    Finds the first repeated post-cycle state.

    The history mapping is local to find_cycle() and discarded on return.
    """

    config: CycleDetectorConfig = field(default_factory=CycleDetectorConfig)
    runner: CycleRunner = field(default_factory=CycleRunner)

    def find_cycle(self, grid: Grid) -> CycleResult:
        """
        Run spin cycles until a state repeats.

        Args:
            grid: Initial grid (state index 0)

        Returns:
            CycleResult(grid, start, period)

        Raises:
            NoCycleFound: if no state repeats within config.max_iterations cycles
        """
        grid, i, start = _run_until_repeat(
            grid, self.runner.cycle, self.config.max_iterations
        )
        period = i - start
        logger.info(
            "Cycle found: state first seen at %d reappears at %d (period %d)",
            start, i, period,
        )
        return CycleResult(grid=grid, start=start, period=period)


def find_cycle(grid: Grid, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> CycleResult:
    """Detect the spin-cycle period of `grid`. See CycleDetector.find_cycle."""
    detector = CycleDetector(config=CycleDetectorConfig(max_iterations=max_iterations))
    return detector.find_cycle(grid)


def project(repeated_grid: Grid, start: int, period: int, target: int) -> Grid:
    """
    State after `target` spin cycles, using a detected cycle.

    Valid because the state sequence is periodic with `period` from index
    `start` on, and `repeated_grid` is the state at `start`.

    Args:
        repeated_grid: State at index `start` (as returned by find_cycle)
        start: Index at which the repeated state was first produced
        period: Cycle length, > 0
        target: Cycle count to reach, >= start

    Raises:
        InvalidProjection: if period <= 0 or target < start
    """
    if period <= 0:
        raise InvalidProjection(f"period must be > 0, got {period}")
    if target < start:
        raise InvalidProjection(f"target {target} precedes cycle start {start}")
    offset = (target - start) % period
    logger.debug("Projecting to %d: %d extra cycles from start %d", target, offset, start)
    return run_cycles(repeated_grid, offset)


def state_after(
    grid: Grid,
    n_cycles: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Grid:
    """
    State after `n_cycles` spin cycles.

    Simulates until either `n_cycles` is reached or a state repeats; in the
    latter case the remainder is projected. A target beyond the ceiling with
    no repeat in sight raises NoCycleFound.
    """
    if n_cycles < 0:
        raise ValueError(f"n_cycles must be >= 0, got {n_cycles}")
    grid, i, start = _run_until_repeat(grid, spin_cycle, max_iterations, stop_at=n_cycles)
    if start is None:
        return grid
    return project(grid, start, i - start, n_cycles)
