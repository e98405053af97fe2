"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def reference_grid():
    """The 10x10 reference platform."""
    from tiltsim.io import REFERENCE_GRID, parse_grid
    return parse_grid(REFERENCE_GRID)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def random_grid(rng):
    """Factory for random grids with given shape and cell densities."""
    from tiltsim.core import Cell, Grid

    def make(n_rows=8, n_cols=8, p_fixed=0.15, p_round=0.3):
        cells = rng.choice(
            [Cell.EMPTY, Cell.FIXED, Cell.ROUND],
            size=(n_rows, n_cols),
            p=[1.0 - p_fixed - p_round, p_fixed, p_round],
        )
        return Grid(cells)

    return make


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a test's capture."""
    import logging
    yield
    logger = logging.getLogger("tiltsim")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
