"""Garden tile grid.

A garden map is one square tile of garden plots (walkable) and rocks
(blocked) that repeats forever in both axes. Coordinates are ``(x, y)`` with
``x`` the column and ``y`` the row, row 0 being the first line of the map.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Tuple

from ..errors import MalformedInputError
from .schemas import GardenGridState

Coordinate = Tuple[int, int]


class TileKind(Enum):
    """Map symbols."""

    GARDEN = "."
    ROCK = "#"
    START = "S"

    @property
    def walkable(self) -> bool:
        return self is not TileKind.ROCK


@dataclass(frozen=True)
class GardenGrid:
    """Immutable walkable mask plus the start position."""

    width: int
    height: int
    walkable: Tuple[Tuple[bool, ...], ...]
    start_position: Coordinate

    @classmethod
    def from_text(cls, text: str) -> "GardenGrid":
        """Parse map text.

        Blank lines around the map and trailing whitespace on each row are
        ignored. Raises ``MalformedInputError`` for empty maps, ragged rows,
        unknown symbols, a missing or repeated start, or a non-square tile.
        """
        lines = [line.rstrip() for line in text.strip("\n").splitlines()]
        while lines and not lines[-1]:
            lines.pop()
        if not lines or not lines[0]:
            raise MalformedInputError("map contains no rows")

        width = len(lines[0])
        rows: List[Tuple[bool, ...]] = []
        starts: List[Coordinate] = []

        for y, line in enumerate(lines):
            if len(line) != width:
                raise MalformedInputError(
                    f"row has width {len(line)}, expected {width}", line=y + 1
                )
            row: List[bool] = []
            for x, symbol in enumerate(line):
                try:
                    kind = TileKind(symbol)
                except ValueError:
                    raise MalformedInputError(f"unrecognized tile {symbol!r}", line=y + 1) from None
                if kind is TileKind.START:
                    starts.append((x, y))
                row.append(kind.walkable)
            rows.append(tuple(row))

        if len(starts) != 1:
            raise MalformedInputError(f"expected exactly one start tile 'S', found {len(starts)}")

        height = len(rows)
        if height != width:
            raise MalformedInputError(f"tile must be square, got {width}x{height}")

        return cls(width=width, height=height, walkable=tuple(rows), start_position=starts[0])

    @classmethod
    def from_file(cls, path: Path | str) -> "GardenGrid":
        return cls.from_text(Path(path).read_text())

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.walkable[y][x]

    def is_walkable_wrapped(self, x: int, y: int) -> bool:
        """Walkability on the infinitely tiled plane."""
        return self.walkable[y % self.height][x % self.width]

    def start(self) -> Coordinate:
        return self.start_position

    def cells(self) -> Iterator[Coordinate]:
        """Yield every walkable coordinate in row-major order."""
        for y, row in enumerate(self.walkable):
            for x, open_cell in enumerate(row):
                if open_cell:
                    yield x, y

    def to_state(self) -> GardenGridState:
        rocks = [
            (x, y)
            for y, row in enumerate(self.walkable)
            for x, open_cell in enumerate(row)
            if not open_cell
        ]
        return GardenGridState(
            width=self.width,
            height=self.height,
            start=self.start_position,
            rocks=rocks,
        )

    @classmethod
    def from_state(cls, state: GardenGridState) -> "GardenGrid":
        rocks = set(state.rocks)
        rows = tuple(
            tuple((x, y) not in rocks for x in range(state.width))
            for y in range(state.height)
        )
        return cls(width=state.width, height=state.height, walkable=rows, start_position=state.start)

    def render(self) -> str:
        """Render back to map text."""
        lines = []
        for y, row in enumerate(self.walkable):
            symbols = []
            for x, open_cell in enumerate(row):
                if (x, y) == self.start_position:
                    symbols.append(TileKind.START.value)
                else:
                    symbols.append(TileKind.GARDEN.value if open_cell else TileKind.ROCK.value)
            lines.append("".join(symbols))
        return "\n".join(lines)
