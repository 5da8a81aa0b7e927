"""Garden tile model and BFS helpers."""

from .grid import Coordinate, GardenGrid, TileKind
from .schemas import DistanceFieldSummary, GardenGridState
from .helpers import (
    DIRECTIONS,
    DistanceField,
    build_distance_field,
    count_reachable,
    is_reachable_in_exactly,
    simulate_tiled_reachability,
)

__all__ = [
    "Coordinate",
    "GardenGrid",
    "TileKind",
    "DistanceFieldSummary",
    "GardenGridState",
    "DIRECTIONS",
    "DistanceField",
    "build_distance_field",
    "count_reachable",
    "is_reachable_in_exactly",
    "simulate_tiled_reachability",
]
