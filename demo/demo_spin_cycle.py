#!/usr/bin/env python3
"""
Demo: Spin Cycles on the Reference Grid

Walks through the reference 10x10 platform:
1. Tilt north once and score the load
2. Show the four tilts of the first spin cycle
3. Detect the spin-cycle period
4. Project to one billion cycles and score the load

Output: output/demo_spin_cycle/spin_cycle.png
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path

from tiltsim.analysis import load, load_history
from tiltsim.core import (
    DEFAULT_TARGET_CYCLES, SPIN_ORDER, find_cycle, project, tilt
)
from tiltsim.io import REFERENCE_GRID, parse_grid, report
from tiltsim.viz import plot_grids, plot_load_history


def main():
    print("=" * 60)
    print("  SPIN CYCLES ON THE REFERENCE GRID")
    print("=" * 60)

    grid = parse_grid(REFERENCE_GRID)
    print(f"\n1. Initial grid ({grid.n_rows}x{grid.n_cols}, {grid.count_round()} round objects):")
    print(report("initial", grid))

    tilted = tilt(grid, "N")
    print(report("north tilt", tilted))
    print(f"   {report('north load', load(tilted))}")

    print("\n2. First spin cycle, one tilt at a time...")
    snapshots = []
    state = grid
    for direction in SPIN_ORDER:
        state = tilt(state, direction)
        snapshots.append(state)
        print(f"   after {direction.name:<5}: load={load(state)}")

    print("\n3. Detecting the cycle...")
    result = find_cycle(grid)
    print(f"   State first produced at cycle {result.start} repeats every {result.period} cycles")

    loads = load_history(grid, result.start + 2 * result.period)
    print(f"   Loads: {loads.tolist()}")

    print(f"\n4. Projecting to {DEFAULT_TARGET_CYCLES:,} cycles...")
    offset = (DEFAULT_TARGET_CYCLES - result.start) % result.period
    final = project(result.grid, result.start, result.period, DEFAULT_TARGET_CYCLES)
    print(f"   Extra cycles simulated: {offset}")
    print(f"   {report('projected load', load(final))}")

    fig = plot_grids(snapshots, titles=[d.name.title() for d in SPIN_ORDER])
    output_dir = Path("output/demo_spin_cycle")
    output_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_dir / "spin_cycle.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    fig, _ = plot_load_history(loads, result.start, result.period)
    fig.savefig(output_dir / "load_history.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n   Saved: {output_dir}/spin_cycle.png, {output_dir}/load_history.png")

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"  • North load: {load(tilted)}")
    print(f"  • Cycle: start {result.start}, period {result.period}")
    print(f"  • Load after {DEFAULT_TARGET_CYCLES:,} cycles: {load(final)}")
    print("=" * 60)


if __name__ == "__main__":
    main()
