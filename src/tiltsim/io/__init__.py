"""
Text input/output: grid parsing and result reporting.
"""

from tiltsim.io.text import REFERENCE_GRID, parse_grid, load_grid, render_grid, report

__all__ = [
    "REFERENCE_GRID",
    "parse_grid",
    "load_grid",
    "render_grid",
    "report",
]
