"""Extrapolation of per-zone copy counts into a total reachable-plot count."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .environment import Coordinate
from .errors import CountOverflowError
from .logging_utils import log_debug
from .schemas import PerZoneCounts, RegularityReport

# Results must fit a signed 64-bit integer
MAX_COUNT = 2**63 - 1

FrontierCounter = Callable[[Coordinate, int], int]


def checked_add(left: int, right: int, *, operation: str, limit: int = MAX_COUNT) -> int:
    result = left + right
    if result > limit:
        raise CountOverflowError(operation=operation, limit=limit)
    return result


def checked_mul(left: int, right: int, *, operation: str, limit: int = MAX_COUNT) -> int:
    result = left * right
    if result > limit:
        raise CountOverflowError(operation=operation, limit=limit)
    return result


class ExtrapolationEngine:
    """Combine saturated and frontier copies into the final count.

    Saturated copies contribute the centre field's even or odd plot count.
    Frontier copies are counted by BFS from their entry cell with the residual
    budget, via ``frontier_count(origin, budget)``, memoised per
    ``(origin, budget)``.
    """

    def __init__(
        self,
        report: RegularityReport,
        frontier_count: FrontierCounter,
        *,
        limit: int = MAX_COUNT,
    ):
        self.report = report
        self.frontier_count = frontier_count
        self.limit = limit
        self._frontier_cache: Dict[Tuple[Coordinate, int], int] = {}

    def _frontier(self, origin: Coordinate, budget: int) -> int:
        key = (origin, budget)
        if key not in self._frontier_cache:
            self._frontier_cache[key] = self.frontier_count(origin, budget)
        return self._frontier_cache[key]

    def total(self, per_zone: PerZoneCounts, step_count: int) -> int:
        if per_zone.step_count != step_count:
            raise ValueError(
                f"Zone counts were classified for {per_zone.step_count} steps, not {step_count}"
            )

        even_cells, odd_cells = self.report.even_cells, self.report.odd_cells
        total = 0
        for band in per_zone.bands:
            label = band.zone.value
            contribution = checked_add(
                checked_mul(band.full_even, even_cells, operation=f"{label} even copies", limit=self.limit),
                checked_mul(band.full_odd, odd_cells, operation=f"{label} odd copies", limit=self.limit),
                operation=f"{label} saturated copies",
                limit=self.limit,
            )
            for frontier in band.frontier:
                partial = checked_mul(
                    frontier.copies,
                    self._frontier(frontier.origin, frontier.budget),
                    operation=f"{label} {frontier.flavor.value} crust",
                    limit=self.limit,
                )
                contribution = checked_add(contribution, partial, operation=f"{label} frontier", limit=self.limit)

            log_debug(f"[Extrapolation] {label}: {contribution}")
            total = checked_add(total, contribution, operation="total", limit=self.limit)

        return total
