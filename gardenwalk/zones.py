"""
Zone classification for the periodic fast path.

For N = R + k * W the walk ends exactly on a tile boundary and the copies of
the tile it touches form a diamond of radius k + 1 (in copies):

- Copies at copy distance m <= k - 1 are saturated: every reachable plot is an
  endpoint iff its distance from the start has the parity of N + m
- Ring m = k holds the four spoke tips (entered with W - 1 steps left) and
  k - 1 inner crust copies per quadrant (entered with W + R - 1 steps left)
- Ring m = k + 1 holds k outer crust copies per quadrant (entered with R - 1
  steps left)

Saturated copies are tallied per zone in closed form, split by parity. Spokes
contribute one copy per distance j, quadrants m - 1 copies on diagonal layer
m, so quadrant tallies are triangular numbers in k.
"""

from __future__ import annotations

from typing import List, Tuple

from .analysis import require_fast_path
from .errors import NonPeriodicStepCountError, UnsupportedGeometryError
from .logging_utils import log_debug
from .schemas import (
    FrontierBand,
    FrontierFlavor,
    PerZoneCounts,
    RegularityReport,
    RepeatBand,
    ZoneClass,
    ZoneKind,
)


def _matching_terms(lo: int, hi: int, parity: int) -> Tuple[int, int]:
    """Return ``(count, total)`` of integers m in [lo, hi] with ``m % 2 == parity``."""
    first = lo if lo % 2 == parity else lo + 1
    if first > hi:
        return 0, 0
    count = (hi - first) // 2 + 1
    # first + (first + 2) + ... over ``count`` terms
    return count, count * first + count * (count - 1)


def spoke_parity_split(step_count: int, repeats: int) -> Tuple[int, int]:
    """Saturated copies along one spoke, as ``(even_class, odd_class)``.

    Copy j (1 <= j <= k - 1) is in the even class when N + j is even.
    """
    even, _ = _matching_terms(1, repeats - 1, step_count % 2)
    odd, _ = _matching_terms(1, repeats - 1, (step_count + 1) % 2)
    return even, odd


def quadrant_parity_split(step_count: int, repeats: int) -> Tuple[int, int]:
    """Saturated copies in one quadrant, as ``(even_class, odd_class)``.

    Diagonal layer m (2 <= m <= k - 1) holds m - 1 copies, all in the even
    class when N + m is even. Together they sum to (k - 2)(k - 1) / 2.
    """
    split = []
    for parity in (step_count % 2, (step_count + 1) % 2):
        count, total = _matching_terms(2, repeats - 1, parity)
        split.append(total - count)
    return split[0], split[1]


class ZoneClassifier:
    """Split the copies reached in N steps into saturated and frontier copies.

    Built once per tile from its ``RegularityReport``; ``classify`` is then
    O(1) per step count.
    """

    def __init__(self, report: RegularityReport):
        self.report = report

    def _reject(self, step_count: int, reason: str) -> NonPeriodicStepCountError:
        return NonPeriodicStepCountError(
            step_count=step_count,
            half_width=self.report.half_width,
            tile_width=self.report.width,
            reason=reason,
        )

    def check_step_count(self, step_count: int) -> int:
        """Validate periodic alignment and stabilisation; return k."""
        report = self.report
        width, half = report.width, report.half_width

        if step_count < half:
            raise self._reject(step_count, f"shorter than the half width {half}")
        if not report.is_periodic(step_count):
            remainder = (step_count - half) % width
            raise self._reject(step_count, f"({step_count} - {half}) % {width} = {remainder}, not 0")

        repeats = report.tile_repeats(step_count)
        if repeats < 1:
            raise self._reject(step_count, "the walk never leaves the start tile (k = 0)")
        if report.max_center_distance is not None and report.max_center_distance > step_count:
            raise self._reject(
                step_count,
                f"start tile needs {report.max_center_distance} steps to saturate; pattern not yet stable",
            )
        return repeats

    def check_saturation(self, repeats: int) -> None:
        """Copies counted as saturated must really be fully explored."""
        width, half = self.report.width, self.report.half_width
        violations: List[str] = []
        for zone, max_distance in self.report.origin_max_distances.items():
            if zone.kind is ZoneKind.SPOKE and repeats >= 2:
                budget = 2 * width - 1
            elif zone.kind is ZoneKind.QUADRANT and repeats >= 3:
                budget = 2 * width + half - 1
            else:
                continue
            if max_distance > budget:
                violations.append(
                    f"{zone.value} copies need {max_distance} steps to saturate but get {budget}"
                )
        if violations:
            raise UnsupportedGeometryError(violations=violations)

    def classify(self, step_count: int) -> PerZoneCounts:
        """Classify every copy reached by a walk of exactly ``step_count`` steps.

        Raises:
            UnsupportedGeometryError: Tile breaks a fast-path precondition
            NonPeriodicStepCountError: ``step_count`` is not R + k * W with k >= 1,
                or the start tile is not yet saturated
        """
        require_fast_path(self.report)
        repeats = self.check_step_count(step_count)
        self.check_saturation(repeats)

        width, half = self.report.width, self.report.half_width
        bands = [self._band(zone, step_count, repeats, width, half) for zone in ZoneClass]

        log_debug(
            f"[Zones] N={step_count} k={repeats}: "
            + ", ".join(
                f"{band.zone.value}(full={band.full_copies}, frontier={band.frontier_copies})"
                for band in bands
            )
        )
        return PerZoneCounts(
            step_count=step_count,
            tile_width=width,
            half_width=half,
            tile_repeats=repeats,
            bands=bands,
        )

    @staticmethod
    def _band(zone: ZoneClass, step_count: int, repeats: int, width: int, half: int) -> RepeatBand:
        origin = zone.reference_origin(width)

        if zone.kind is ZoneKind.CENTER:
            if step_count % 2 == 0:
                return RepeatBand(zone=zone, full_even=1)
            return RepeatBand(zone=zone, full_odd=1)

        if zone.kind is ZoneKind.SPOKE:
            even, odd = spoke_parity_split(step_count, repeats)
            tip = FrontierBand(flavor=FrontierFlavor.TIP, origin=origin, budget=width - 1, copies=1)
            return RepeatBand(zone=zone, full_even=even, full_odd=odd, frontier=[tip])

        even, odd = quadrant_parity_split(step_count, repeats)
        frontier = [
            FrontierBand(
                flavor=FrontierFlavor.INNER, origin=origin, budget=width + half - 1, copies=repeats - 1
            ),
            FrontierBand(flavor=FrontierFlavor.OUTER, origin=origin, budget=half - 1, copies=repeats),
        ]
        return RepeatBand(
            zone=zone,
            full_even=even,
            full_odd=odd,
            frontier=[band for band in frontier if band.copies],
        )
