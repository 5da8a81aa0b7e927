"""Tests for garden map parsing and the grid model."""

import pytest

from gardenwalk.config import Config
from gardenwalk.environment import GardenGrid, GardenGridState
from gardenwalk.errors import MalformedInputError

SMALL_MAP = """
...
.S#
...
"""


def test_from_text_parses_walkable_mask_and_start():
    grid = GardenGrid.from_text(SMALL_MAP)

    assert grid.width == 3
    assert grid.height == 3
    assert grid.start() == (1, 1)
    assert grid.is_walkable(1, 1) is True  # start is a garden plot
    assert grid.is_walkable(2, 1) is False
    assert grid.is_walkable(0, 0) is True


def test_is_walkable_out_of_bounds_is_false():
    grid = GardenGrid.from_text(SMALL_MAP)
    assert grid.is_walkable(-1, 0) is False
    assert grid.is_walkable(0, 3) is False


def test_is_walkable_wrapped_repeats_tile():
    grid = GardenGrid.from_text(SMALL_MAP)
    # (2, 1) is the rock; its copies one tile away in every direction are rocks too
    assert grid.is_walkable_wrapped(5, 1) is False
    assert grid.is_walkable_wrapped(-1, 1) is False
    assert grid.is_walkable_wrapped(2, -2) is False
    assert grid.is_walkable_wrapped(3, 1) is True


def test_cells_lists_every_plot():
    grid = GardenGrid.from_text(SMALL_MAP)
    cells = list(grid.cells())
    assert len(cells) == 8
    assert (2, 1) not in cells


def test_trailing_whitespace_and_crlf_are_ignored():
    grid = GardenGrid.from_text("...  \r\n.S.\r\n...\r\n\r\n")
    assert grid.width == 3
    assert grid.start() == (1, 1)


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("", "no rows"),
        ("...\n.S\n...", "width"),
        ("...\n...\n...", "exactly one start"),
        ("S..\n.S.\n...", "exactly one start"),
        ("...\n.S.", "square"),
        ("...\n.Sx\n...", "unrecognized"),
    ],
)
def test_malformed_maps_are_rejected(text, fragment):
    with pytest.raises(MalformedInputError) as excinfo:
        GardenGrid.from_text(text)
    assert fragment in str(excinfo.value)


def test_malformed_input_is_a_value_error_with_line_number():
    with pytest.raises(ValueError) as excinfo:
        GardenGrid.from_text("...\n.S\n...")
    assert excinfo.value.line == 2


def test_state_round_trip_and_render():
    grid = GardenGrid.from_text(SMALL_MAP)
    state = grid.to_state()

    assert isinstance(state, GardenGridState)
    assert state.rocks == [(2, 1)]
    assert GardenGrid.from_state(state) == grid
    assert grid.render() == SMALL_MAP.strip()


def test_from_file_reads_bundled_map():
    grid = GardenGrid.from_file(Config.MAPS_DIR / "sample_11x11.txt")
    assert grid.width == 11
    assert grid.start() == (5, 5)
