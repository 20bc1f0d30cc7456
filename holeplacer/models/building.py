"""Architectural model elements: walls, levels and wall references."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D


class WallReference(BaseModel):
    """
    Identity of a wall as seen by a ray query.

    Equal iff both the element id and the linked-document id match.
    ``linked_id=None`` means the wall lives in the host document and
    never compares equal to a wall from any linked document.
    """
    model_config = ConfigDict(frozen=True)

    element_id: str
    linked_id: str | None = None


class Level(BaseModel):
    """A building storey that owns walls."""
    id: str
    name: str = ""
    elevation: float = 0.0


class Wall(BaseModel):
    """A straight wall: baseline on the floor plane, extruded up from its base."""
    id: str
    level_id: str
    start: Point2D
    end: Point2D
    thickness: float = Field(0.2, gt=0)        # Meters, centered on the baseline
    base_elevation: float = 0.0                 # Meters
    height: float = Field(3.0, gt=0)            # Meters
    linked_id: str | None = None                # Linked document the wall comes from

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def reference(self) -> WallReference:
        return WallReference(element_id=self.id, linked_id=self.linked_id)
