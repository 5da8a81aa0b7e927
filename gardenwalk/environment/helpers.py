"""Breadth-first distance fields and reachability counting on garden tiles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import InvalidOriginError
from .grid import Coordinate, GardenGrid
from .schemas import DistanceFieldSummary

# Four-directional movement (east, west, south, north). Diagonal steps are not allowed.
DIRECTIONS: Tuple[Coordinate, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def is_reachable_in_exactly(distance: Optional[int], steps: int) -> bool:
    """Parity law for "exactly ``steps`` steps".

    A plot first reached after ``distance`` steps can be revisited every second
    step by stepping off and back on, so it is a valid endpoint whenever the
    remaining budget is non-negative and even.
    """
    if distance is None or distance > steps:
        return False
    return (steps - distance) % 2 == 0


@dataclass(frozen=True)
class DistanceField:
    """Shortest step counts from one origin to every plot of a single tile.

    ``None`` marks plots that cannot be reached without leaving the tile
    through a rock.
    """

    origin: Coordinate
    width: int
    height: int
    distances: Tuple[Tuple[Optional[int], ...], ...]

    def distance(self, x: int, y: int) -> Optional[int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.distances[y][x]

    def finite_distances(self) -> Iterator[int]:
        for row in self.distances:
            for value in row:
                if value is not None:
                    yield value

    @property
    def reachable_cells(self) -> int:
        return sum(1 for _ in self.finite_distances())

    @property
    def max_distance(self) -> int:
        return max(self.finite_distances())

    def parity_counts(self) -> Tuple[int, int]:
        """Return ``(even, odd)`` counts of reachable plots by distance parity."""
        even = odd = 0
        for value in self.finite_distances():
            if value % 2 == 0:
                even += 1
            else:
                odd += 1
        return even, odd

    def count_reachable(self, steps: int) -> int:
        """Plots on this tile that are endpoints of walks of exactly ``steps``."""
        if steps < 0:
            return 0
        return sum(1 for value in self.finite_distances() if is_reachable_in_exactly(value, steps))

    def summary(self) -> DistanceFieldSummary:
        even, odd = self.parity_counts()
        return DistanceFieldSummary(
            origin=self.origin,
            reachable_cells=even + odd,
            max_distance=self.max_distance,
            even_cells=even,
            odd_cells=odd,
        )


def build_distance_field(grid: GardenGrid, origin: Coordinate) -> DistanceField:
    """Level-order BFS over the 4-connected plots of one tile.

    Every edge costs one step, so the first time BFS enqueues a plot is its
    shortest distance. Runs in O(width * height) time and space.

    Raises:
        InvalidOriginError: If ``origin`` is outside the tile or on a rock.
    """
    ox, oy = origin
    if not grid.in_bounds(ox, oy):
        raise InvalidOriginError(origin=origin, reason=f"outside the {grid.width}x{grid.height} tile")
    if not grid.is_walkable(ox, oy):
        raise InvalidOriginError(origin=origin, reason="tile is a rock")

    distances: List[List[Optional[int]]] = [[None] * grid.width for _ in range(grid.height)]
    distances[oy][ox] = 0
    queue: deque[Coordinate] = deque([origin])

    while queue:
        x, y = queue.popleft()
        next_distance = distances[y][x] + 1
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            # Marking on enqueue keeps each plot in the queue at most once
            if grid.is_walkable(nx, ny) and distances[ny][nx] is None:
                distances[ny][nx] = next_distance
                queue.append((nx, ny))

    return DistanceField(
        origin=origin,
        width=grid.width,
        height=grid.height,
        distances=tuple(tuple(row) for row in distances),
    )


def count_reachable(field: DistanceField, steps: int) -> int:
    """Single-tile answer: plots reachable in exactly ``steps`` without wrapping."""
    return field.count_reachable(steps)


def simulate_tiled_reachability(grid: GardenGrid, steps: int) -> int:
    """Brute-force count over the infinitely repeating plane.

    BFS from the start across wrapped tiles, never expanding past ``steps``,
    so the search stays inside the ``(2 * steps + 1)`` square around the
    start. Cost grows with ``steps ** 2``; callers cap ``steps``.
    """
    if steps < 0:
        return 0

    start = grid.start()
    seen: Dict[Coordinate, int] = {start: 0}
    queue: deque[Coordinate] = deque([start])
    count = 0

    while queue:
        x, y = queue.popleft()
        distance = seen[(x, y)]
        if (steps - distance) % 2 == 0:
            count += 1
        if distance == steps:
            continue
        for dx, dy in DIRECTIONS:
            neighbour = (x + dx, y + dy)
            if neighbour in seen or not grid.is_walkable_wrapped(*neighbour):
                continue
            seen[neighbour] = distance + 1
            queue.append(neighbour)

    return count
