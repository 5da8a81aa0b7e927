"""Compare the periodic fast path against brute-force simulation.

Example usage (first five periodic step counts of the bundled 9x9 garden):

    python -m examples.garden.run --map garden_9x9.txt --repeats 5

For every k in 1..repeats the script counts plots reachable in R + k * W
steps with both strategies and prints them side by side. Brute force is
skipped once the step count passes GARDENWALK_BRUTE_FORCE_LIMIT.
"""

from __future__ import annotations

import argparse
import sys

from gardenwalk import GardenGrid, GardenSolver, StepBudgetExceededError
from gardenwalk.config import Config
from gardenwalk.logging_utils import log_error, log_info, log_success


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fast path vs brute force on periodic step counts")
    parser.add_argument("--map", default="garden_9x9.txt", help="Map file name inside examples/maps")
    parser.add_argument("--repeats", type=int, default=5, help="Largest k to evaluate")
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    grid = GardenGrid.from_file(Config.MAPS_DIR / args.map)
    solver = GardenSolver(grid)
    report = solver.report

    log_info(
        f"{grid.width}x{grid.height} tile, R={report.half_width}, "
        f"{report.even_cells} even / {report.odd_cells} odd plots"
    )
    if not report.fast_path_ready:
        for violation in report.violations:
            log_error(violation)
        return 1

    mismatches = 0
    for k in range(1, args.repeats + 1):
        steps = report.half_width + k * report.width
        fast = solver.count_fast(steps)
        try:
            brute = solver.count_brute_force(steps)
        except StepBudgetExceededError:
            print(f"k={k:3d} steps={steps:6d} fast={fast:10d} brute=(skipped)")
            continue
        marker = "" if fast == brute else "  <-- mismatch"
        mismatches += fast != brute
        print(f"k={k:3d} steps={steps:6d} fast={fast:10d} brute={brute:10d}{marker}")

    if mismatches:
        log_error(f"{mismatches} mismatches")
        return 1
    log_success("Fast path matches simulation")
    return 0


if __name__ == "__main__":
    sys.exit(main(parse_args()))
