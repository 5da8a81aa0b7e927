"""
Regularity analysis for garden tiles.

The periodic fast path only gives exact counts when the tile has a specific
shape. This module turns those assumptions into checks that return a typed
``RegularityReport``:

- Square tile with odd width W = 2R + 1, start at the exact centre (R, R)
- Border ring entirely garden plots, so a walker can slide along the edge of
  any copy at Manhattan speed
- Clear spokes: the start reaches each edge midpoint in exactly R steps, so
  every copy is first entered at its nearest corner/midpoint at the Manhattan
  distance from the start
- Optional: the Manhattan diamond of radius R is reached in exactly R steps
  everywhere (a confidence signal only)

Usage:
    report = analyze_regularity(grid)
    require_fast_path(report)  # raises UnsupportedGeometryError with all violations
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List

from .environment import Coordinate, DistanceField, GardenGrid, build_distance_field
from .errors import UnsupportedGeometryError
from .logging_utils import log_debug, log_deterministic
from .schemas import RegularityReport, ZoneClass

FieldBuilder = Callable[[Coordinate], DistanceField]


def border_cells(grid: GardenGrid) -> List[Coordinate]:
    """Every coordinate on the outer ring of the tile, each once."""
    last_x, last_y = grid.width - 1, grid.height - 1
    ring = {(x, y) for x in range(grid.width) for y in (0, last_y)}
    ring.update((x, y) for y in range(grid.height) for x in (0, last_x))
    return sorted(ring)


def manhattan_ring(center: Coordinate, radius: int) -> List[Coordinate]:
    """Coordinates exactly ``radius`` Manhattan steps from ``center``."""
    cx, cy = center
    if radius == 0:
        return [center]
    ring: List[Coordinate] = []
    for dx in range(-radius, radius + 1):
        dy = radius - abs(dx)
        ring.append((cx + dx, cy + dy))
        if dy:
            ring.append((cx + dx, cy - dy))
    return ring


def analyze_regularity(grid: GardenGrid, field_for: FieldBuilder | None = None) -> RegularityReport:
    """Inspect ``grid`` and report every fast-path precondition.

    Args:
        grid: Parsed garden tile
        field_for: Origin -> DistanceField builder; pass a caching builder to
            reuse BFS runs (defaults to a fresh ``build_distance_field``)

    Returns:
        RegularityReport; ``violations`` lists every failed requirement
    """
    if field_for is None:
        field_for = partial(build_distance_field, grid)

    half = (grid.width - 1) // 2
    start = grid.start()
    violations: List[str] = []

    is_square = grid.width == grid.height
    odd_width = grid.width % 2 == 1
    centered_start = start == (half, half)
    border_clear = all(grid.is_walkable(x, y) for x, y in border_cells(grid))

    if not is_square:
        violations.append(f"tile is {grid.width}x{grid.height}, not square")
    if not odd_width:
        violations.append(f"tile width {grid.width} is even, so there is no centre tile")
    elif not centered_start:
        violations.append(f"start {start} is not at the tile centre {(half, half)}")
    if not border_clear:
        violations.append("border ring contains rocks")

    center_field = field_for(start)
    even_cells, odd_cells = center_field.parity_counts()
    log_deterministic(
        f"[Analysis] Centre BFS: {even_cells + odd_cells} plots reachable, "
        f"max distance {center_field.max_distance}"
    )

    spokes_clear = False
    diamond_consistent = False
    origin_max: Dict[ZoneClass, int] = {}

    geometry_ok = is_square and odd_width and centered_start
    if geometry_ok:
        midpoints = [(half, 0), (half, grid.height - 1), (0, half), (grid.width - 1, half)]
        spokes_clear = all(center_field.distance(x, y) == half for x, y in midpoints)
        if not spokes_clear:
            violations.append(
                f"start does not reach every edge midpoint in {half} steps (row/column blocked)"
            )

        diamond = [(x, y) for x, y in manhattan_ring(start, half) if grid.is_walkable(x, y)]
        diamond_consistent = all(center_field.distance(x, y) == half for x, y in diamond)
        log_debug(f"[Analysis] Diamond of radius {half} consistent: {diamond_consistent}")

    if geometry_ok and border_clear:
        for zone in ZoneClass:
            origin = zone.reference_origin(grid.width)
            field = center_field if origin == start else field_for(origin)
            origin_max[zone] = field.max_distance
        log_debug(
            "[Analysis] Max distance per origin: "
            + ", ".join(f"{zone.value}={value}" for zone, value in origin_max.items())
        )

    return RegularityReport(
        width=grid.width,
        height=grid.height,
        half_width=half,
        start=start,
        is_square=is_square,
        odd_width=odd_width,
        centered_start=centered_start,
        border_clear=border_clear,
        spokes_clear=spokes_clear,
        diamond_consistent=diamond_consistent,
        max_center_distance=center_field.max_distance,
        even_cells=even_cells,
        odd_cells=odd_cells,
        origin_max_distances=origin_max,
        violations=violations,
    )


def require_fast_path(report: RegularityReport) -> None:
    """Raise ``UnsupportedGeometryError`` unless every precondition holds."""
    if not report.fast_path_ready:
        raise UnsupportedGeometryError(violations=report.violations)
