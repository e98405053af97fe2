"""
Load scoring: the scalar metric read off a grid.

Each round object at row r (0 = north edge) of an R-row grid contributes
R - r, i.e. its distance from the south edge counting its own row.
Fixed and empty cells contribute nothing.
"""

from __future__ import annotations
from itertools import islice

import numpy as np

from tiltsim.core.cycle import iter_cycles
from tiltsim.core.grid import Cell, Grid


def row_weights(n_rows: int) -> np.ndarray:
    """Per-row weight R - r for r = 0..R-1."""
    return np.arange(n_rows, 0, -1, dtype=np.int64)


def load_profile(grid: Grid) -> np.ndarray:
    """Load contributed by each row, north to south."""
    round_per_row = np.count_nonzero(grid.cells == Cell.ROUND, axis=1)
    return round_per_row * row_weights(grid.n_rows)


def load(grid: Grid) -> int:
    """Total load on the north support beams."""
    return int(load_profile(grid).sum())


def load_history(grid: Grid, n_cycles: int) -> np.ndarray:
    """
    Load after each of the first `n_cycles` spin cycles.

    Returns:
        int64 array of length n_cycles; element k is the load after k+1 cycles
    """
    if n_cycles < 0:
        raise ValueError(f"n_cycles must be >= 0, got {n_cycles}")
    return np.fromiter(
        (load(g) for g in islice(iter_cycles(grid), n_cycles)),
        dtype=np.int64,
        count=n_cycles,
    )
