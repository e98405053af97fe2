"""
Command line: north load and long-run load for a grid.

    python -m tiltsim [input] [--cycles N] [--max-iterations N]
                      [--show-grids] [--plot PATH] [-v]

Without an input file the bundled reference grid is used.
"""

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import dataclass

from tiltsim.analysis import load, load_history
from tiltsim.core import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TARGET_CYCLES,
    CycleDetector,
    CycleDetectorConfig,
    Direction,
    Grid,
    InvalidGrid,
    NoCycleFound,
    ParseError,
    project,
    run_cycles,
    tilt,
)
from tiltsim.io import REFERENCE_GRID, load_grid, parse_grid, report
from tiltsim.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 1
EXIT_NO_CYCLE = 2


@dataclass(frozen=True)
class RunConfig:
    """Knobs for one command-line run."""

    cycles: int = DEFAULT_TARGET_CYCLES
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    show_grids: bool = False
    plot_path: str | None = None

    def __post_init__(self) -> None:
        if self.cycles < 0:
            raise ValueError("cycles must be >= 0")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiltsim",
        description="Tilt a grid of round and fixed objects and score the load.",
    )
    parser.add_argument("input", nargs="?", default=None,
                        help="grid text file (default: bundled reference grid)")
    parser.add_argument("--cycles", type=int, default=DEFAULT_TARGET_CYCLES,
                        help="spin cycles to project to (default: %(default)s)")
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS,
                        help="cycle-detection ceiling (default: %(default)s)")
    parser.add_argument("--show-grids", action="store_true",
                        help="also print the tilted and projected grids")
    parser.add_argument("--plot", dest="plot_path", default=None, metavar="PATH",
                        help="save a figure of the final grid and load history")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(grid: Grid, config: RunConfig) -> tuple[int, int]:
    """
    Compute (north load, load after config.cycles spin cycles).

    Prints both results through the reporter.
    """
    tilted = tilt(grid, Direction.NORTH)
    north_load = load(tilted)
    if config.show_grids:
        print(report("north tilt", tilted))
    print(report("north load", north_load))

    detector = CycleDetector(config=CycleDetectorConfig(max_iterations=config.max_iterations))
    result = detector.find_cycle(grid)
    if config.cycles < result.start:
        final = run_cycles(grid, config.cycles)
    else:
        final = project(result.grid, result.start, result.period, config.cycles)
    final_load = load(final)
    if config.show_grids:
        print(report(f"after {config.cycles} cycles", final))
    print(report(f"load after {config.cycles} cycles", final_load))

    if config.plot_path:
        _save_plot(grid, final, result.start, result.period, config)

    return north_load, final_load


def _save_plot(grid: Grid, final: Grid, start: int, period: int, config: RunConfig) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from tiltsim.viz import plot_grid, plot_load_history, save_figure

    fig, (ax_grid, ax_load) = plt.subplots(
        1, 2, figsize=(14, 5), gridspec_kw={"width_ratios": [1, 2]}
    )
    plot_grid(final, title=f"After {config.cycles} cycles", ax=ax_grid)
    plot_load_history(load_history(grid, start + 2 * period), start, period, ax=ax_load)
    save_figure(fig, config.plot_path)
    plt.close(fig)
    logger.info("Saved figure to %s", config.plot_path)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = RunConfig(
        cycles=args.cycles,
        max_iterations=args.max_iterations,
        show_grids=args.show_grids,
        plot_path=args.plot_path,
    )
    try:
        grid = parse_grid(REFERENCE_GRID) if args.input is None else load_grid(args.input)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {args.input}: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except (ParseError, InvalidGrid) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        run(grid, config)
    except NoCycleFound as exc:
        print(f"internal error: {exc}", file=sys.stderr)
        return EXIT_NO_CYCLE
    return 0


if __name__ == "__main__":
    sys.exit(main())
