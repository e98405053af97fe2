"""
Visualization utilities.

- Grid images
- Spin-cycle snapshots
- Load over cycles
"""

from tiltsim.viz.grid import (
    plot_grid,
    plot_grids,
    plot_load_history,
    save_figure,
)

__all__ = [
    "plot_grid",
    "plot_grids",
    "plot_load_history",
    "save_figure",
]
