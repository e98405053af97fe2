"""
2D visualization of grids and load sequences.

Provides:
- grid images (empty / fixed / round cells)
- side-by-side snapshots of several grids
- load over spin cycles, with the detected cycle window marked

All plots use matplotlib. The core never imports this module.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap, BoundaryNorm
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from tiltsim.core.grid import Cell

if TYPE_CHECKING:
    from tiltsim.core.grid import Grid


# Colours indexed by cell code: empty (warm white), fixed (slate), round (amber)
CELL_COLORS = [
    (0.993, 0.978, 0.925),
    (0.267, 0.290, 0.329),
    (0.855, 0.545, 0.114),
]
CMAP_CELLS = ListedColormap(CELL_COLORS, name="cells")
NORM_CELLS = BoundaryNorm(np.arange(len(Cell) + 1) - 0.5, len(Cell))


def plot_grid(
    grid: "Grid",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (6, 6),
) -> tuple[Figure, Axes]:
    """
    Draw a grid as a cell image, north edge at the top.

    Args:
        grid: Grid to draw
        title: Plot title
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(
        grid.cells,
        origin="upper",
        cmap=CMAP_CELLS,
        norm=NORM_CELLS,
        interpolation="nearest",
        aspect="equal",
    )
    ax.set_title(title)
    ax.set_xlabel("column")
    ax.set_ylabel("row")

    return fig, ax


def plot_grids(
    grids: Sequence["Grid"],
    titles: Sequence[str] | None = None,
    figsize: tuple[float, float] | None = None,
) -> Figure:
    """Side-by-side snapshots, e.g. the four tilts of one spin cycle."""
    n = len(grids)
    if n == 0:
        raise ValueError("need at least one grid to plot")
    if titles is None:
        titles = [""] * n
    if figsize is None:
        figsize = (4 * n, 4)

    fig, axes = plt.subplots(1, n, figsize=figsize, squeeze=False)
    for ax, grid, title in zip(axes[0], grids, titles):
        plot_grid(grid, title=title, ax=ax)

    plt.tight_layout()
    return fig


def plot_load_history(
    loads: np.ndarray,
    start: int | None = None,
    period: int | None = None,
    title: str = "Load after each spin cycle",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 4),
) -> tuple[Figure, Axes]:
    """
    Plot load against cycle count.

    loads[k] is the load after k+1 cycles. When start and period are given,
    the first full repetition window [start, start + period] is shaded.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cycles = np.arange(1, len(loads) + 1)
    ax.plot(cycles, loads, "o-", markersize=3, linewidth=1, color=CELL_COLORS[2])

    if start is not None and period is not None:
        ax.axvspan(start, start + period, alpha=0.15, color=CELL_COLORS[1],
                   label=f"cycle: start {start}, period {period}")
        ax.legend(loc="upper right")

    ax.set_title(title)
    ax.set_xlabel("spin cycles")
    ax.set_ylabel("load")
    ax.grid(True, alpha=0.3)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
