"""
Text format for grids: parsing puzzle input and rendering results.

One line per grid row, one glyph per cell:
    .  empty
    #  fixed object
    O  round object
"""

from __future__ import annotations
from pathlib import Path

import numpy as np

from tiltsim.core.errors import InvalidGrid, ParseError
from tiltsim.core.grid import CELL_DTYPE, GLYPH_CELLS, Grid

REFERENCE_GRID = """\
O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def parse_grid(text: str) -> Grid:
    """
    Parse grid text into a Grid.

    Rows are separated by "\\n" only; one trailing "\\r" per row is dropped
    so CRLF files parse. Trailing blank lines are ignored.

    Raises:
        ParseError: on any character other than '.', '#' or 'O'
        InvalidGrid: on empty input or rows of unequal length
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    while lines and not lines[-1].strip(" \t"):
        lines.pop()
    if not lines:
        raise InvalidGrid("grid text is empty")

    width = len(lines[0])
    cells = np.empty((len(lines), width), dtype=CELL_DTYPE)
    for r, line in enumerate(lines):
        if len(line) != width:
            raise InvalidGrid(f"row {r} has length {len(line)}, expected {width}")
        for c, ch in enumerate(line):
            cell = GLYPH_CELLS.get(ch)
            if cell is None:
                raise ParseError(ch, r, c)
            cells[r, c] = cell
    return Grid(cells)


def load_grid(path: str | Path) -> Grid:
    """Read and parse a grid from a text file."""
    return parse_grid(Path(path).read_text(encoding="utf-8"))


def render_grid(grid: Grid) -> str:
    """Render a grid as text, each row terminated by a newline."""
    return grid.render()


def report(label: str, value: Grid | int) -> str:
    """
    Deterministic textual form of a labelled result.

    A grid renders as the label line followed by the grid; anything else
    renders as "label: value".
    """
    if isinstance(value, Grid):
        return f"{label}:\n{render_grid(value)}"
    return f"{label}: {value}"
