"""
Pydantic schemas for the gardenwalk reachability engine.

Design Philosophy:
- Analysis results are typed reports, not console output, so every
  precondition can be asserted in tests and dumped as JSON from the CLI
- Zone classes are a closed enum; each member knows its own copy direction
  and the tile cell through which copies in that direction are first entered
- Per-query classification results are plain values, rebuilt for every step
  count and never cached
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

Strategy = Literal["auto", "fast-periodic", "brute-force", "single-tile"]


# ============================================================================
# Zone Classes
# ============================================================================


class ZoneKind(str, Enum):
    """Structural role of a zone in the diamond of tile copies."""

    CENTER = "center"
    SPOKE = "spoke"        # copies straight along an axis
    QUADRANT = "quadrant"  # copies strictly between two axes


class ZoneClass(str, Enum):
    """The nine directions tile copies can lie in relative to the start tile."""

    CENTER = "center"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTH_EAST = "north_east"
    NORTH_WEST = "north_west"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"

    @property
    def direction(self) -> Tuple[int, int]:
        """Copy offset sign as ``(dx, dy)``; north is towards row 0."""
        return _ZONE_DIRECTIONS[self]

    @property
    def kind(self) -> ZoneKind:
        dx, dy = self.direction
        if dx == 0 and dy == 0:
            return ZoneKind.CENTER
        if dx == 0 or dy == 0:
            return ZoneKind.SPOKE
        return ZoneKind.QUADRANT

    def reference_origin(self, tile_width: int) -> Tuple[int, int]:
        """Tile cell where copies in this direction are entered first.

        Copies to the east are entered through their west edge, copies to the
        south through their north edge, and so on; spokes enter at an edge
        midpoint and quadrants at a corner. The centre zone uses the start.
        """
        edge = tile_width - 1
        half = edge // 2
        entry = {1: 0, 0: half, -1: edge}
        dx, dy = self.direction
        return entry[dx], entry[dy]


_ZONE_DIRECTIONS: Dict[ZoneClass, Tuple[int, int]] = {
    ZoneClass.CENTER: (0, 0),
    ZoneClass.NORTH: (0, -1),
    ZoneClass.SOUTH: (0, 1),
    ZoneClass.EAST: (1, 0),
    ZoneClass.WEST: (-1, 0),
    ZoneClass.NORTH_EAST: (1, -1),
    ZoneClass.NORTH_WEST: (-1, -1),
    ZoneClass.SOUTH_EAST: (1, 1),
    ZoneClass.SOUTH_WEST: (-1, 1),
}


class FrontierFlavor(str, Enum):
    """Partially reached copies on the advancing edge of the diamond."""

    TIP = "tip"      # last copy along a spoke
    INNER = "inner"  # quadrant copies the frontier has mostly covered
    OUTER = "outer"  # quadrant copies the frontier has only just entered


# ============================================================================
# Analysis Reports
# ============================================================================


class RegularityReport(BaseModel):
    """Structural facts about a tile that decide whether the fast path is exact.

    ``fast_path_ready`` is True only when ``violations`` is empty. The
    ``diamond_consistent`` flag is informational and never a violation.
    """

    width: int
    height: int
    half_width: int = Field(..., description="R in W = 2R + 1")
    start: Tuple[int, int]
    is_square: bool
    odd_width: bool
    centered_start: bool
    border_clear: bool = Field(..., description="Every border tile is a garden plot")
    spokes_clear: bool = Field(
        False, description="Start reaches each edge midpoint in exactly R steps",
    )
    diamond_consistent: bool = Field(
        False, description="Every plot R steps away (Manhattan) is reached in exactly R steps",
    )
    max_center_distance: Optional[int] = None
    even_cells: int = Field(0, ge=0, description="Reachable plots at even distance from the start")
    odd_cells: int = Field(0, ge=0, description="Reachable plots at odd distance from the start")
    origin_max_distances: Dict[ZoneClass, int] = Field(
        default_factory=dict,
        description="Largest BFS distance inside the tile from each zone's reference origin",
    )
    violations: List[str] = Field(default_factory=list)

    @property
    def fast_path_ready(self) -> bool:
        return not self.violations

    @property
    def tile_width(self) -> int:
        return self.width

    def is_periodic(self, step_count: int) -> bool:
        """True when ``step_count`` ends exactly on a tile boundary."""
        return step_count >= self.half_width and (step_count - self.half_width) % self.width == 0

    def tile_repeats(self, step_count: int) -> int:
        """Number of whole tile widths walked after leaving the start tile."""
        return (step_count - self.half_width) // self.width


# ============================================================================
# Zone Classification
# ============================================================================


class FrontierBand(BaseModel):
    """A group of identical partially reached copies."""

    flavor: FrontierFlavor
    origin: Tuple[int, int] = Field(..., description="Entry cell used as the BFS origin")
    budget: int = Field(..., description="Steps left on arrival at the entry cell")
    copies: int = Field(..., ge=0)


class RepeatBand(BaseModel):
    """How one zone contributes for a given step count."""

    zone: ZoneClass
    full_even: int = Field(0, ge=0, description="Saturated copies where even-distance plots are endpoints")
    full_odd: int = Field(0, ge=0, description="Saturated copies where odd-distance plots are endpoints")
    frontier: List[FrontierBand] = Field(default_factory=list)

    @property
    def full_copies(self) -> int:
        return self.full_even + self.full_odd

    @property
    def frontier_copies(self) -> int:
        return sum(band.copies for band in self.frontier)


class PerZoneCounts(BaseModel):
    """Classification of every tile copy touched by a walk of ``step_count``."""

    step_count: int = Field(..., ge=0)
    tile_width: int
    half_width: int
    tile_repeats: int = Field(..., ge=0, description="k in N = R + k * W")
    bands: List[RepeatBand] = Field(default_factory=list)

    def band(self, zone: ZoneClass) -> RepeatBand:
        for band in self.bands:
            if band.zone is zone:
                return band
        raise KeyError(f"No band for zone '{zone.value}'")

    @property
    def full_copies(self) -> int:
        return sum(band.full_copies for band in self.bands)


class ReachabilityResult(BaseModel):
    """Final answer for one query."""

    step_count: int = Field(..., ge=0)
    strategy: Strategy = Field(..., description="Strategy that produced the count")
    count: int = Field(..., ge=0)
    fallback_reason: Optional[str] = Field(
        None, description="Why auto mode left the fast path, if it did",
    )
