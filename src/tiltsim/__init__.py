"""
tiltsim: platform-tilting simulator for round and fixed objects.

A rectangular grid holds round objects that roll and fixed objects that
do not. Tilting the platform slides every round object toward one edge.

Core concepts:
- Tilt: directional compaction of round objects toward an edge
- Spin cycle: tilt north, west, south, then east
- Cycle detection: the post-cycle state sequence must repeat
- Projection: reach 1e9 cycles in at most one period of extra work
- Load: sum of each round object's distance from the south edge
"""

__version__ = "0.1.0"
