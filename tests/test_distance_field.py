"""Tests for BFS distance fields and the parity law."""

import heapq

import pytest

from gardenwalk.config import Config
from gardenwalk.environment import (
    GardenGrid,
    build_distance_field,
    count_reachable,
    is_reachable_in_exactly,
)
from gardenwalk.errors import InvalidOriginError


def load(name: str) -> GardenGrid:
    return GardenGrid.from_file(Config.MAPS_DIR / name)


def reference_distances(grid: GardenGrid, origin):
    """Dijkstra with unit weights, independent of the BFS under test."""
    best = {origin: 0}
    heap = [(0, origin)]
    while heap:
        distance, (x, y) = heapq.heappop(heap)
        if distance > best[(x, y)]:
            continue
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if grid.is_walkable(nx, ny) and distance + 1 < best.get((nx, ny), float("inf")):
                best[(nx, ny)] = distance + 1
                heapq.heappush(heap, (distance + 1, (nx, ny)))
    return best


@pytest.mark.parametrize("name", ["sample_11x11.txt", "garden_9x9.txt"])
def test_bfs_matches_shortest_paths(name):
    grid = load(name)
    for origin in [grid.start(), (0, 0), (grid.width - 1, grid.height // 2)]:
        field = build_distance_field(grid, origin)
        expected = reference_distances(grid, origin)
        for y in range(grid.height):
            for x in range(grid.width):
                assert field.distance(x, y) == expected.get((x, y))


def test_bfs_is_deterministic():
    grid = load("sample_11x11.txt")
    first = build_distance_field(grid, grid.start())
    second = build_distance_field(grid, grid.start())
    assert first == second
    assert first.summary() == second.summary()


def test_unreachable_cells_have_no_distance():
    grid = GardenGrid.from_text(
        """
.....
.###.
.#.#.
.###.
S....
"""
    )
    field = build_distance_field(grid, grid.start())
    assert field.distance(2, 2) is None  # walled in
    assert field.distance(0, 4) == 0
    assert field.distance(4, 0) == 8
    assert field.reachable_cells == 16
    assert field.max_distance == 8


def test_distance_outside_tile_is_none():
    grid = load("garden_9x9.txt")
    field = build_distance_field(grid, grid.start())
    assert field.distance(-1, 0) is None
    assert field.distance(0, 9) is None


def test_invalid_origin_raises():
    grid = load("garden_9x9.txt")
    with pytest.raises(InvalidOriginError):
        build_distance_field(grid, (1, 1))  # rock
    with pytest.raises(InvalidOriginError):
        build_distance_field(grid, (9, 0))  # outside


def test_parity_law():
    assert is_reachable_in_exactly(0, 0)
    assert is_reachable_in_exactly(2, 6)
    assert not is_reachable_in_exactly(3, 6)
    assert not is_reachable_in_exactly(8, 6)
    assert not is_reachable_in_exactly(None, 6)


def test_count_reachable_follows_parity_law():
    grid = load("sample_11x11.txt")
    field = build_distance_field(grid, grid.start())
    for steps in range(0, 30):
        expected = sum(
            1
            for y in range(grid.height)
            for x in range(grid.width)
            if field.distance(x, y) is not None
            and field.distance(x, y) <= steps
            and (steps - field.distance(x, y)) % 2 == 0
        )
        assert count_reachable(field, steps) == expected
    assert count_reachable(field, -1) == 0


def test_single_tile_sample_reaches_sixteen_plots_in_six_steps():
    grid = load("sample_11x11.txt")
    field = build_distance_field(grid, grid.start())
    assert count_reachable(field, 6) == 16


def test_parity_counts_cover_every_reachable_cell():
    grid = load("garden_9x9.txt")
    field = build_distance_field(grid, grid.start())
    even, odd = field.parity_counts()
    assert even + odd == field.reachable_cells
    # Rocks: 16 on the 9x9 tile, every remaining plot is reachable
    assert field.reachable_cells == 81 - 16
