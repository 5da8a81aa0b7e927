"""Exception taxonomy for gardenwalk.

Every failure the reachability engine can detect gets its own class so callers
can tell "the map is broken" apart from "the fast path does not apply here".
Only the latter two (unsupported geometry, non-periodic step count) are
recoverable by switching to brute-force simulation; the solver relies on that
distinction when ``strategy="auto"``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple


class GardenWalkError(Exception):
    """Base class for all gardenwalk errors."""


class MalformedInputError(GardenWalkError, ValueError):
    """Raised when map text cannot be parsed into a square garden tile."""

    def __init__(self, reason: str, *, line: Optional[int] = None) -> None:
        self.reason = reason
        self.line = line
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"Malformed garden map{location}: {reason}")


class InvalidOriginError(GardenWalkError, ValueError):
    """Raised when a BFS origin is outside the tile or on a rock."""

    def __init__(self, *, origin: Tuple[int, int], reason: str) -> None:
        self.origin = origin
        self.reason = reason
        super().__init__(f"Invalid BFS origin {origin}: {reason}")


class UnsupportedGeometryError(GardenWalkError):
    """Raised when the tile breaks a precondition of the periodic fast path.

    Carries the list of violated preconditions so the caller can report all of
    them at once rather than fixing one and hitting the next.
    """

    def __init__(self, *, violations: List[str]) -> None:
        self.violations = list(violations)
        message_lines = ["Tile geometry is not supported by the periodic fast path:"]
        for violation in self.violations:
            message_lines.append(f"  - {violation}")
        message_lines.extend(
            [
                "\nRemediation tips:",
                "  - Use --strategy brute-force for small step counts",
                "  - The fast path needs an odd, square tile with the start at its centre",
                "  - The border ring and the start's row/column must be free of rocks",
            ]
        )
        super().__init__("\n".join(message_lines))


class NonPeriodicStepCountError(GardenWalkError):
    """Raised when a step count does not land exactly on a tile boundary."""

    def __init__(self, *, step_count: int, half_width: int, tile_width: int, reason: str) -> None:
        self.step_count = step_count
        self.half_width = half_width
        self.tile_width = tile_width
        self.reason = reason
        message = (
            f"Step count {step_count} cannot use the periodic fast path: {reason}\n\n"
            "Remediation tips:\n"
            f"  - Fast-path step counts have the form {half_width} + {tile_width} * k with k >= 1\n"
            "  - Use --strategy brute-force for small step counts"
        )
        super().__init__(message)


class CountOverflowError(GardenWalkError, OverflowError):
    """Raised when a reachable-tile count leaves the signed 64-bit range."""

    def __init__(self, *, operation: str, limit: int) -> None:
        self.operation = operation
        self.limit = limit
        super().__init__(f"Reachable count overflow while computing {operation} (limit {limit})")


class StepBudgetExceededError(GardenWalkError):
    """Raised when brute-force simulation is requested for too many steps."""

    def __init__(self, *, step_count: int, limit: int) -> None:
        self.step_count = step_count
        self.limit = limit
        message = (
            f"Brute-force simulation refused for {step_count} steps (limit {limit}).\n\n"
            "Remediation tips:\n"
            "  - Raise GARDENWALK_BRUTE_FORCE_LIMIT if you really want to wait\n"
            "  - Pick a step count the periodic fast path accepts"
        )
        super().__init__(message)
