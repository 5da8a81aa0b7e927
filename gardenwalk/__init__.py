"""
Gardenwalk - count garden plots reachable in exactly N steps on a repeating map.

BFS over one tile, a regularity analysis of that tile, and a closed-form
extrapolation over the infinite plane. Brute-force simulation is kept as the
fallback and as the reference the fast path is tested against.
"""

__version__ = "0.1.0"

from .errors import (
    GardenWalkError,
    MalformedInputError,
    InvalidOriginError,
    UnsupportedGeometryError,
    NonPeriodicStepCountError,
    CountOverflowError,
    StepBudgetExceededError,
)
from .environment import (
    Coordinate,
    GardenGrid,
    GardenGridState,
    TileKind,
    DistanceField,
    DistanceFieldSummary,
    build_distance_field,
    count_reachable,
    simulate_tiled_reachability,
)
from .schemas import (
    FrontierBand,
    FrontierFlavor,
    PerZoneCounts,
    ReachabilityResult,
    RegularityReport,
    RepeatBand,
    ZoneClass,
    ZoneKind,
)
from .analysis import analyze_regularity, require_fast_path
from .zones import ZoneClassifier
from .extrapolation import MAX_COUNT, ExtrapolationEngine
from .solver import GardenSolver, count_garden_plots

__all__ = [
    # Errors
    "GardenWalkError",
    "MalformedInputError",
    "InvalidOriginError",
    "UnsupportedGeometryError",
    "NonPeriodicStepCountError",
    "CountOverflowError",
    "StepBudgetExceededError",
    # Grid model and BFS
    "Coordinate",
    "GardenGrid",
    "GardenGridState",
    "TileKind",
    "DistanceField",
    "DistanceFieldSummary",
    "build_distance_field",
    "count_reachable",
    "simulate_tiled_reachability",
    # Schemas
    "FrontierBand",
    "FrontierFlavor",
    "PerZoneCounts",
    "ReachabilityResult",
    "RegularityReport",
    "RepeatBand",
    "ZoneClass",
    "ZoneKind",
    # Engine
    "analyze_regularity",
    "require_fast_path",
    "ZoneClassifier",
    "MAX_COUNT",
    "ExtrapolationEngine",
    "GardenSolver",
    "count_garden_plots",
]
