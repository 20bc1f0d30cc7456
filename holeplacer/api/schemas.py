"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from holeplacer.models import (
    Wall, Level, CenterlineCurve, HostCatalog,
    PlacementParams, PlacementConfig, OpeningPlacement, PlacementSummary,
)
from holeplacer.services.sink import OpeningInstance


class PlaceOpeningsRequest(BaseModel):
    """Request body for the /openings endpoint."""
    walls: list[Wall]
    levels: list[Level]
    elements: list[CenterlineCurve]
    catalog: HostCatalog
    params: PlacementParams = PlacementParams()
    config: PlacementConfig = PlacementConfig()


class PlaceOpeningsResponse(BaseModel):
    """Response from the /openings endpoint."""
    placements: list[OpeningPlacement]
    instances: list[OpeningInstance]
    summary: PlacementSummary
    message: str
