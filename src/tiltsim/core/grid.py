"""
Grid: the immutable rectangular platform of cells.

The grid stores ONLY cell tags:
- ROUND cells move when the platform is tilted
- FIXED cells never move and block round objects
- EMPTY cells are free space

Row 0 is the north edge, column 0 the west edge. Every tilt builds a new
Grid; the backing array is flagged read-only so a grid can be used as a
dictionary key without aliasing hazards.
"""

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Iterator, Sequence

import numpy as np

from tiltsim.core.errors import InvalidGrid


class Cell(IntEnum):
    """Cell tag. Values are the codes stored in the grid array."""

    EMPTY = 0
    FIXED = 1
    ROUND = 2


class Direction(Enum):
    """Tilt direction: the edge the round objects slide toward."""

    NORTH = "N"
    WEST = "W"
    SOUTH = "S"
    EAST = "E"


# One spin cycle tilts in exactly this order
SPIN_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)

CELL_GLYPHS = {
    Cell.EMPTY: ".",
    Cell.FIXED: "#",
    Cell.ROUND: "O",
}

GLYPH_CELLS = {glyph: cell for cell, glyph in CELL_GLYPHS.items()}

CELL_DTYPE = np.uint8


class Grid:
    """
    A rectangular, immutable arrangement of cells.

    Equality is full structural equality. The hash covers the shape and the
    complete serialized cell sequence, and dict lookups confirm hash matches
    with __eq__, so a collision can never make two different grids look equal.
    """

    __slots__ = ("_cells", "_hash")

    def __init__(self, cells: np.ndarray):
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise InvalidGrid(f"grid must be 2-dimensional, got {arr.ndim} dimension(s)")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidGrid(f"grid must have at least one row and one column, got shape {arr.shape}")
        if arr.dtype.kind not in "iub":
            raise InvalidGrid(f"cell codes must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > max(Cell):
            bad = arr.min() if arr.min() < 0 else arr.max()
            raise InvalidGrid(f"unknown cell code {int(bad)}")
        arr = arr.astype(CELL_DTYPE, copy=True)
        arr.flags.writeable = False
        self._cells = arr
        self._hash: int | None = None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Grid:
        """Build a grid from a sequence of rows of Cell tags."""
        rows = [list(row) for row in rows]
        if not rows:
            raise InvalidGrid("grid must have at least one row")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(f"row {r} has length {len(row)}, expected {width}")
        return cls(np.array(rows).reshape(len(rows), width))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> Grid:
        """Adopt a freshly built array without copying or re-validating it."""
        grid = cls.__new__(cls)
        arr.flags.writeable = False
        grid._cells = arr
        grid._hash = None
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Read-only (n_rows, n_cols) array of cell codes."""
        return self._cells

    @property
    def shape(self) -> tuple[int, int]:
        """Return (n_rows, n_cols)."""
        return self._cells.shape

    @property
    def n_rows(self) -> int:
        return self._cells.shape[0]

    @property
    def n_cols(self) -> int:
        return self._cells.shape[1]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        r, c = pos
        return Cell(int(self._cells[r, c]))

    def row(self, r: int) -> Iterator[Cell]:
        """Cells of row r, west to east."""
        return (Cell(int(v)) for v in self._cells[r])

    def row_rev(self, r: int) -> Iterator[Cell]:
        """Cells of row r, east to west."""
        return (Cell(int(v)) for v in self._cells[r, ::-1])

    def col(self, c: int) -> Iterator[Cell]:
        """Cells of column c, north to south."""
        return (Cell(int(v)) for v in self._cells[:, c])

    def col_rev(self, c: int) -> Iterator[Cell]:
        """Cells of column c, south to north."""
        return (Cell(int(v)) for v in self._cells[::-1, c])

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        return tuple(tuple(self.row(r)) for r in range(self.n_rows))

    def count(self, cell: Cell) -> int:
        """Number of cells holding the given tag."""
        return int(np.count_nonzero(self._cells == cell))

    def count_round(self) -> int:
        return self.count(Cell.ROUND)

    def positions(self, cell: Cell) -> list[tuple[int, int]]:
        """(row, col) of every cell holding the given tag, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == cell)]

    def without_round(self) -> Grid:
        """Copy of this grid with every round object removed."""
        arr = self._cells.copy()
        arr[arr == Cell.ROUND] = Cell.EMPTY
        return Grid._wrap(arr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        if self is other:
            return True
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.shape, self._cells.tobytes()))
        return self._hash

    def render(self) -> str:
        """Glyph text of the grid, each row terminated by a newline."""
        glyphs = np.array([CELL_GLYPHS[cell] for cell in sorted(CELL_GLYPHS)])
        return "".join("".join(row) + "\n" for row in glyphs[self._cells].tolist())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape}, round={self.count_round()}, fixed={self.count(Cell.FIXED)})"
