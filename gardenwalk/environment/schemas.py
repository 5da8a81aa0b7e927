"""Pydantic schemas for garden tiles and distance fields.

These models mirror the lightweight dataclasses in ``grid.py`` and
``helpers.py`` but keep snapshots serializable for reports and fixtures.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field


class GardenGridState(BaseModel):
    """Sparse representation of a garden tile: dimensions, start and rocks."""

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    start: Tuple[int, int] = Field(..., description="Start tile as (x, y)")
    rocks: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Blocked tiles as (x, y); everything else is a garden plot",
    )


class DistanceFieldSummary(BaseModel):
    """Aggregate view of one BFS run."""

    origin: Tuple[int, int]
    reachable_cells: int = Field(..., ge=0)
    max_distance: int = Field(..., ge=0, description="Largest finite distance from the origin")
    even_cells: int = Field(..., ge=0, description="Reachable cells at even distance")
    odd_cells: int = Field(..., ge=0, description="Reachable cells at odd distance")
