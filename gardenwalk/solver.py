"""
Query entry point for reachable-plot counts.

GardenSolver owns one parsed tile and everything derived from it: a cache of
BFS distance fields keyed by origin (at most nine are ever needed: the start,
four edge midpoints and four corners), the regularity report, the zone
classifier and the extrapolation engine. Queries differ only by step count
and strategy:

- ``single-tile``: walk inside one copy of the tile, no repetition
- ``fast-periodic``: closed-form extrapolation over the infinite plane
- ``brute-force``: BFS over the infinite plane, capped by the configured limit
- ``auto``: fast path, falling back to brute force when the fast path's
  preconditions fail and the step count is within the brute-force limit

Usage:
    solver = GardenSolver(GardenGrid.from_file("input.txt"))
    result = solver.solve(26501365)
    print(result.count)
"""

from __future__ import annotations

from typing import Dict, Optional

from .analysis import analyze_regularity
from .config import STRATEGIES, Config
from .environment import (
    Coordinate,
    DistanceField,
    GardenGrid,
    build_distance_field,
    simulate_tiled_reachability,
)
from .errors import NonPeriodicStepCountError, StepBudgetExceededError, UnsupportedGeometryError
from .extrapolation import ExtrapolationEngine
from .logging_utils import log_debug, log_deterministic
from .schemas import PerZoneCounts, ReachabilityResult, RegularityReport, Strategy, ZoneClass
from .zones import ZoneClassifier


class GardenSolver:
    """Answer "how many plots can be reached in exactly N steps" for one tile."""

    def __init__(self, grid: GardenGrid, *, brute_force_limit: Optional[int] = None):
        self.grid = grid
        self.brute_force_limit = (
            Config.BRUTE_FORCE_LIMIT if brute_force_limit is None else brute_force_limit
        )
        self._fields: Dict[Coordinate, DistanceField] = {}
        self._report: Optional[RegularityReport] = None
        self._classifier: Optional[ZoneClassifier] = None
        self._engine: Optional[ExtrapolationEngine] = None

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "GardenSolver":
        return cls(GardenGrid.from_text(text), **kwargs)

    # ------------------------------------------------------------------
    # Distance fields
    # ------------------------------------------------------------------

    def field_from(self, origin: Coordinate) -> DistanceField:
        """BFS distance field rooted at ``origin``, built once per solver."""
        if origin not in self._fields:
            log_deterministic(f"[BFS] Building distance field from {origin}")
            self._fields[origin] = build_distance_field(self.grid, origin)
        return self._fields[origin]

    def warm_fields(self) -> None:
        """Build every reference field up front (start plus walkable zone origins)."""
        self.field_from(self.grid.start())
        for zone in ZoneClass:
            x, y = zone.reference_origin(self.grid.width)
            if self.grid.is_walkable(x, y):
                self.field_from((x, y))

    # ------------------------------------------------------------------
    # Derived components
    # ------------------------------------------------------------------

    @property
    def report(self) -> RegularityReport:
        if self._report is None:
            self._report = analyze_regularity(self.grid, self.field_from)
        return self._report

    @property
    def classifier(self) -> ZoneClassifier:
        if self._classifier is None:
            self._classifier = ZoneClassifier(self.report)
        return self._classifier

    @property
    def engine(self) -> ExtrapolationEngine:
        if self._engine is None:
            self._engine = ExtrapolationEngine(
                self.report,
                lambda origin, budget: self.field_from(origin).count_reachable(budget),
            )
        return self._engine

    # ------------------------------------------------------------------
    # Counting strategies
    # ------------------------------------------------------------------

    def count_in_tile(self, steps: int) -> int:
        """Plots reachable in exactly ``steps`` without leaving the tile."""
        return self.field_from(self.grid.start()).count_reachable(steps)

    def classify(self, steps: int) -> PerZoneCounts:
        return self.classifier.classify(steps)

    def count_fast(self, steps: int) -> int:
        """Closed-form count on the infinite plane.

        Raises:
            UnsupportedGeometryError: Tile shape breaks a fast-path precondition
            NonPeriodicStepCountError: ``steps`` is not aligned to a tile boundary
            CountOverflowError: Result exceeds the signed 64-bit range
        """
        per_zone = self.classify(steps)
        return self.engine.total(per_zone, steps)

    def count_brute_force(self, steps: int) -> int:
        """Simulated count on the infinite plane; refuses steps above the limit."""
        if steps > self.brute_force_limit:
            raise StepBudgetExceededError(step_count=steps, limit=self.brute_force_limit)
        log_deterministic(f"[BFS] Simulating {steps} steps over the tiled plane")
        return simulate_tiled_reachability(self.grid, steps)

    def solve(self, steps: int, strategy: Strategy = "auto") -> ReachabilityResult:
        """Count plots reachable in exactly ``steps`` using ``strategy``."""
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{strategy}'; expected one of {', '.join(STRATEGIES)}")
        if steps < 0:
            raise ValueError("Step count must be non-negative")

        if strategy == "single-tile":
            return ReachabilityResult(step_count=steps, strategy=strategy, count=self.count_in_tile(steps))
        if strategy == "brute-force":
            return ReachabilityResult(step_count=steps, strategy=strategy, count=self.count_brute_force(steps))
        if strategy == "fast-periodic":
            return ReachabilityResult(step_count=steps, strategy=strategy, count=self.count_fast(steps))

        try:
            count = self.count_fast(steps)
        except (UnsupportedGeometryError, NonPeriodicStepCountError) as exc:
            # Only these two mean "fast path not applicable"; anything else propagates
            if steps > self.brute_force_limit:
                raise
            reason = str(exc).splitlines()[0]
            log_debug(f"[Solver] Fast path unavailable ({reason}); simulating instead")
            return ReachabilityResult(
                step_count=steps,
                strategy="brute-force",
                count=self.count_brute_force(steps),
                fallback_reason=reason,
            )
        return ReachabilityResult(step_count=steps, strategy="fast-periodic", count=count)


def count_garden_plots(text: str, steps: int, strategy: Strategy = "auto") -> int:
    """Parse ``text`` and return the number of plots reachable in exactly ``steps``."""
    return GardenSolver.from_text(text).solve(steps, strategy).count
