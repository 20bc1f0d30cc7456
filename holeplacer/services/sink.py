"""In-memory opening sink that records the instances a host would create."""

from __future__ import annotations
from pydantic import BaseModel

from holeplacer.models import (
    OpeningPlacement, FamilySymbolInfo, PlacementParams, Point3D,
)
from holeplacer.core.base import OpeningSink


class OpeningInstance(BaseModel):
    """A placed opening family instance."""
    id: str
    symbol_id: str
    point: Point3D
    wall_id: str
    level_id: str
    source_element_id: str
    parameters: dict[str, float] = {}


class InMemoryOpeningSink(OpeningSink):
    """Collects created instances instead of writing to a document."""

    def __init__(self) -> None:
        self.instances: list[OpeningInstance] = []
        self.activated: list[str] = []

    def activate(self, symbol: FamilySymbolInfo) -> None:
        self.activated.append(symbol.id)

    def create_opening(
        self,
        placement: OpeningPlacement,
        symbol: FamilySymbolInfo,
        params: PlacementParams,
    ) -> None:
        self.instances.append(OpeningInstance(
            id=f"opening-{len(self.instances) + 1}",
            symbol_id=symbol.id,
            point=placement.point,
            wall_id=placement.wall_id,
            level_id=placement.level_id,
            source_element_id=placement.element_id,
            parameters={
                params.width_parameter: placement.width,
                params.height_parameter: placement.height,
            },
        ))
