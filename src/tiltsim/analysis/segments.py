"""
Segment inspection: is a grid fully settled toward an edge?

A line splits into segments bounded by fixed cells and the grid edges.
After a tilt, the round objects of each segment must form one contiguous
block flush against the edge the segment faces.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

from tiltsim.core.grid import Cell, Direction, Grid
from tiltsim.core.tilt import as_direction


@dataclass(frozen=True)
class Segment:
    """A maximal run of non-fixed cells within one line."""

    start: int  # First index (inclusive)
    stop: int  # Last index (exclusive)
    n_round: int  # Round objects inside the run

    @property
    def length(self) -> int:
        return self.stop - self.start


def round_segments(line: Sequence[Cell]) -> Iterator[Segment]:
    """
    Split a line into maximal runs bounded by fixed cells or the line ends.

    Empty runs between adjacent fixed cells are skipped.
    """
    start = 0
    n_round = 0
    for i, cell in enumerate(line):
        if cell == Cell.FIXED:
            if i > start:
                yield Segment(start, i, n_round)
            start = i + 1
            n_round = 0
        elif cell == Cell.ROUND:
            n_round += 1
    if len(line) > start:
        yield Segment(start, len(line), n_round)


def _travel_lines(grid: Grid, direction: Direction) -> list[list[Cell]]:
    """Lines of the grid ordered in the direction of travel (index 0 at the target edge)."""
    if direction is Direction.NORTH:
        return [list(grid.col(c)) for c in range(grid.n_cols)]
    if direction is Direction.SOUTH:
        return [list(grid.col_rev(c)) for c in range(grid.n_cols)]
    if direction is Direction.WEST:
        return [list(grid.row(r)) for r in range(grid.n_rows)]
    return [list(grid.row_rev(r)) for r in range(grid.n_rows)]


def is_settled(grid: Grid, direction: Direction | str) -> bool:
    """
    True if no round object could move further toward `direction`.

    Every segment's round objects must fill its first n_round slots.
    """
    direction = as_direction(direction)
    for line in _travel_lines(grid, direction):
        for seg in round_segments(line):
            block = line[seg.start:seg.start + seg.n_round]
            if any(cell != Cell.ROUND for cell in block):
                return False
    return True
