"""
Core simulator primitives.

This layer knows NOTHING about scoring, file input or plotting.
It only knows:
- Grids of round, fixed and empty cells
- Tilting toward an edge (directional compaction)
- Spin cycles (N, W, S, E)
- Detecting when the cycle sequence repeats
- Projecting to a huge cycle count using the period
- Rendering a grid as glyph text
"""

from tiltsim.core.errors import (
    TiltSimError,
    InvalidGrid,
    ParseError,
    InvalidProjection,
    NoCycleFound,
)
from tiltsim.core.grid import Cell, Direction, Grid, SPIN_ORDER, CELL_GLYPHS, GLYPH_CELLS
from tiltsim.core.tilt import TiltEngine, tilt, north, south, east, west
from tiltsim.core.cycle import (
    CycleRunner,
    CycleResult,
    CycleDetector,
    CycleDetectorConfig,
    spin_cycle,
    run_cycles,
    iter_cycles,
    find_cycle,
    project,
    state_after,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TARGET_CYCLES,
)

__all__ = [
    "TiltSimError",
    "InvalidGrid",
    "ParseError",
    "InvalidProjection",
    "NoCycleFound",
    "Cell",
    "Direction",
    "Grid",
    "SPIN_ORDER",
    "CELL_GLYPHS",
    "GLYPH_CELLS",
    "TiltEngine",
    "tilt",
    "north",
    "south",
    "east",
    "west",
    "CycleRunner",
    "CycleResult",
    "CycleDetector",
    "CycleDetectorConfig",
    "spin_cycle",
    "run_cycles",
    "iter_cycles",
    "find_cycle",
    "project",
    "state_after",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TARGET_CYCLES",
]
