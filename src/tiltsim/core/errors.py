"""
Error types raised by the simulator.

Input problems (bad glyphs, ragged grids, bad projection arguments) are
ValueErrors. NoCycleFound is an internal-invariant violation and is kept
separate from them.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tiltsim.core.grid import Grid


class TiltSimError(Exception):
    """Base class for all tiltsim errors."""


class InvalidGrid(TiltSimError, ValueError):
    """Grid has zero rows, zero columns, ragged rows or unknown cell codes."""


class ParseError(TiltSimError, ValueError):
    """An input character is not one of the recognized glyphs."""

    def __init__(self, char: str, row: int, col: int):
        self.char = char
        self.row = row
        self.col = col
        super().__init__(f"unrecognized glyph {char!r} at row {row}, column {col}")


class InvalidProjection(TiltSimError, ValueError):
    """Projection requested with a non-positive period or a target before the cycle start."""


class NoCycleFound(TiltSimError, RuntimeError):
    """
    Cycle detection hit its iteration ceiling without a repeated state.

    The state space is finite, so reaching this means a bug, not bad input.
    """

    def __init__(self, iterations: int, last_grid: "Grid"):
        self.iterations = iterations
        self.last_grid = last_grid
        super().__init__(
            f"no repeated grid state after {iterations} spin cycles "
            f"({last_grid.n_rows}x{last_grid.n_cols} grid, "
            f"{last_grid.count_round()} round objects)"
        )
