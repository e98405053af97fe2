"""
Analysis layer: quantities read off grids.

IMPORTANT: The core never imports from here. One-way derivation only.

- load: the north-beam load score
- load_profile / load_history: per-row and per-cycle breakdowns
- round_segments / is_settled: inspect compaction along lines
"""

from tiltsim.analysis.load import load, load_profile, load_history, row_weights
from tiltsim.analysis.segments import Segment, round_segments, is_settled

__all__ = [
    "load",
    "load_profile",
    "load_history",
    "row_weights",
    "Segment",
    "round_segments",
    "is_settled",
]
