"""
Tilt engine: directional compaction of round objects.

Tilting toward an edge slides every round object as far as it can go in
that direction. A round object stops at the grid boundary, at a fixed
object, or against a round object that already stopped. Round objects
never pass each other, and fixed/empty cells never move.

Each line perpendicular to the tilt is compacted in one pass with a cursor
marking the next free slot, so a tilt costs O(rows * cols) regardless of
how many round objects there are.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from tiltsim.core.grid import Cell, Direction, Grid

_FIXED = int(Cell.FIXED)
_ROUND = int(Cell.ROUND)


def as_direction(direction: Direction | str) -> Direction:
    """Coerce a Direction or its one-letter value ("N", "W", "S", "E")."""
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(str(direction).upper())
    except ValueError:
        raise ValueError(
            f"unknown tilt direction {direction!r}; expected one of "
            f"{[d.value for d in Direction]}"
        ) from None


def _lines(arr: np.ndarray, direction: Direction) -> np.ndarray:
    """
    View of arr whose rows are the lines to compact.

    Each row of the view is ordered in the direction of travel, so index 0
    is the cell against the target edge. Writes through the view land in arr.
    """
    if direction is Direction.NORTH:
        return arr.T
    if direction is Direction.SOUTH:
        return arr[::-1].T
    if direction is Direction.WEST:
        return arr
    return arr[:, ::-1]  # EAST


def _compact_into(src: np.ndarray, dst: np.ndarray) -> None:
    """Compact the round objects of every src line into the matching dst line."""
    for i, line in enumerate(src.tolist()):
        cursor = 0
        for j, value in enumerate(line):
            if value == _FIXED:
                cursor = j + 1
            elif value == _ROUND:
                dst[i, cursor] = _ROUND
                cursor += 1


def tilt(grid: Grid, direction: Direction | str) -> Grid:
    """
    Return a new grid with every round object slid toward `direction`.

    Args:
        grid: Grid to tilt (left untouched)
        direction: Target edge, a Direction or "N"/"W"/"S"/"E"

    Returns:
        The tilted grid
    """
    direction = as_direction(direction)
    out = grid.cells.copy()
    out[out == _ROUND] = Cell.EMPTY
    _compact_into(_lines(grid.cells, direction), _lines(out, direction))
    return Grid._wrap(out)


def north(grid: Grid) -> Grid:
    return tilt(grid, Direction.NORTH)


def south(grid: Grid) -> Grid:
    return tilt(grid, Direction.SOUTH)


def east(grid: Grid) -> Grid:
    return tilt(grid, Direction.EAST)


def west(grid: Grid) -> Grid:
    return tilt(grid, Direction.WEST)


@dataclass
class TiltEngine:
    """
    Stateless tilt operations plus a running count of tilts performed.

    The counter is diagnostic only; grids are never mutated.
    """

    n_tilts: int = field(default=0, init=False)

    def tilt(self, grid: Grid, direction: Direction | str) -> Grid:
        self.n_tilts += 1
        return tilt(grid, direction)

    def reset_statistics(self):
        """Reset the tilt counter."""
        self.n_tilts = 0
