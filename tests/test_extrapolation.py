"""Tests for the extrapolation engine and the fast path end to end."""

import pytest

from gardenwalk.config import Config
from gardenwalk.environment import GardenGrid, simulate_tiled_reachability
from gardenwalk.errors import CountOverflowError
from gardenwalk.extrapolation import MAX_COUNT, ExtrapolationEngine, checked_add, checked_mul
from gardenwalk.solver import GardenSolver


def load(name: str) -> GardenGrid:
    return GardenGrid.from_file(Config.MAPS_DIR / name)


def lattice_tile(width: int) -> GardenGrid:
    """Tile with isolated rocks, clear border and clear centre row/column."""
    half = width // 2
    rows = []
    for y in range(width):
        row = []
        for x in range(width):
            if (x, y) == (half, half):
                row.append("S")
            elif x in (0, half, width - 1) or y in (0, half, width - 1):
                row.append(".")
            elif (7 * x + 13 * y) % 11 == 0:
                row.append("#")
            else:
                row.append(".")
        rows.append("".join(row))
    return GardenGrid.from_text("\n".join(rows))


def open_tile(width: int) -> GardenGrid:
    half = width // 2
    rows = ["." * width for _ in range(width)]
    rows[half] = "." * half + "S" + "." * half
    return GardenGrid.from_text("\n".join(rows))


@pytest.mark.parametrize("repeats", [1, 2, 3, 4])
def test_fast_path_matches_brute_force_on_symmetric_garden(repeats):
    grid = load("garden_9x9.txt")
    solver = GardenSolver(grid)
    steps = 4 + 9 * repeats

    assert solver.count_fast(steps) == simulate_tiled_reachability(grid, steps)


@pytest.mark.parametrize("repeats", [1, 2, 3])
def test_fast_path_matches_brute_force_on_lattice_tile(repeats):
    grid = lattice_tile(21)
    solver = GardenSolver(grid)
    assert solver.report.fast_path_ready
    steps = 10 + 21 * repeats

    assert solver.count_fast(steps) == simulate_tiled_reachability(grid, steps)


@pytest.mark.parametrize("width, repeats", [(3, 1), (3, 2), (9, 1), (9, 5), (131, 3), (131, 202300)])
def test_open_tile_reaches_full_checkerboard_diamond(width, repeats):
    # Without rocks, N steps reach every plot of matching parity within Manhattan distance N
    steps = width // 2 + width * repeats
    assert GardenSolver(open_tile(width)).count_fast(steps) == (steps + 1) ** 2


def test_counts_grow_strictly_with_periodic_step_counts():
    solver = GardenSolver(load("garden_9x9.txt"))
    counts = [solver.count_fast(4 + 9 * k) for k in range(1, 12)]
    assert all(later > earlier for earlier, later in zip(counts, counts[1:]))


def test_overflow_is_reported_instead_of_wrapping():
    solver = GardenSolver(load("garden_9x9.txt"))
    steps = 4 + 9 * 10**10

    with pytest.raises(CountOverflowError) as excinfo:
        solver.count_fast(steps)
    assert excinfo.value.limit == MAX_COUNT
    assert isinstance(excinfo.value, OverflowError)


def test_engine_honours_custom_limit():
    solver = GardenSolver(load("garden_9x9.txt"))
    per_zone = solver.classify(4 + 9 * 3)
    exact = solver.engine.total(per_zone, 4 + 9 * 3)

    tight = ExtrapolationEngine(
        solver.report,
        lambda origin, budget: solver.field_from(origin).count_reachable(budget),
        limit=exact - 1,
    )
    with pytest.raises(CountOverflowError):
        tight.total(per_zone, 4 + 9 * 3)


def test_engine_rejects_counts_for_another_step_count():
    solver = GardenSolver(load("garden_9x9.txt"))
    per_zone = solver.classify(4 + 9 * 2)
    with pytest.raises(ValueError):
        solver.engine.total(per_zone, 4 + 9 * 3)


def test_frontier_counts_are_memoised_per_origin_and_budget():
    solver = GardenSolver(load("garden_9x9.txt"))
    calls = []

    def frontier_count(origin, budget):
        calls.append((origin, budget))
        return solver.field_from(origin).count_reachable(budget)

    engine = ExtrapolationEngine(solver.report, frontier_count)
    engine.total(solver.classify(4 + 9 * 3), 4 + 9 * 3)
    engine.total(solver.classify(4 + 9 * 5), 4 + 9 * 5)

    # 4 tips + 4 inner + 4 outer crusts, shared by both queries
    assert len(calls) == 12
    assert len(set(calls)) == 12


def test_checked_arithmetic():
    assert checked_add(2, 3, operation="sum") == 5
    assert checked_mul(2**31, 2**31, operation="product") == 2**62
    with pytest.raises(CountOverflowError):
        checked_add(MAX_COUNT, 1, operation="sum")
    with pytest.raises(CountOverflowError):
        checked_mul(2**32, 2**32, operation="product")
