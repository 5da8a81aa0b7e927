"""Command-line entry point.

Example usage (the classic question: 26501365 steps on a repeating map):

    python -m gardenwalk examples/maps/open_9x9.txt --steps 26501365

Prints the count on stdout. Failures print a ``[!]`` diagnostic on stderr and
exit with a code per error class so scripts can decide whether to retry with
another strategy.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import STRATEGIES, Config
from .environment import GardenGrid
from .errors import (
    CountOverflowError,
    InvalidOriginError,
    MalformedInputError,
    NonPeriodicStepCountError,
    StepBudgetExceededError,
    UnsupportedGeometryError,
)
from .logging_utils import log_error, log_info, log_success, verbose_enabled
from .solver import GardenSolver

EXIT_CODES = {
    MalformedInputError: 2,
    InvalidOriginError: 2,
    UnsupportedGeometryError: 3,
    NonPeriodicStepCountError: 4,
    CountOverflowError: 5,
    StepBudgetExceededError: 6,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gardenwalk",
        description="Count garden plots reachable in exactly N steps on a repeating map",
    )
    parser.add_argument("map", help="Path to the map file ('.' plot, '#' rock, 'S' start)")
    parser.add_argument(
        "--steps",
        type=int,
        default=Config.STEP_COUNT,
        help=f"Exact number of steps to walk (default {Config.STEP_COUNT})",
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=Config.STRATEGY,
        help="Counting strategy (default from GARDENWALK_STRATEGY, 'auto')",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the tile regularity report as JSON instead of a count",
    )
    parser.add_argument("--verbose", action="store_true", help="Print BFS and classification diagnostics")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        os.environ["GARDENWALK_VERBOSE"] = "1"

    try:
        Config.validate()
    except ValueError as exc:
        log_error(str(exc))
        return 1

    if verbose_enabled():
        log_info(Config.display())

    try:
        map_text = Path(args.map).read_text()
    except OSError as exc:
        log_error(f"Cannot read map: {exc}")
        return 1

    try:
        solver = GardenSolver(GardenGrid.from_text(map_text))
        if args.report:
            print(solver.report.model_dump_json(indent=2))
            return 0
        result = solver.solve(args.steps, args.strategy)
    except tuple(EXIT_CODES) as exc:
        log_error(str(exc))
        return EXIT_CODES[type(exc)]
    except ValueError as exc:
        log_error(str(exc))
        return 1

    if verbose_enabled():
        log_success(f"{result.count} plots reachable in {result.step_count} steps ({result.strategy})")
    print(result.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
