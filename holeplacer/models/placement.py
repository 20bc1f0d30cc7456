"""Ray hits and opening placement output models."""

from __future__ import annotations
from pydantic import BaseModel, Field, computed_field

from .building import WallReference
from .geometry import Point3D
from .mechanical import ElementKind


class RayHit(BaseModel):
    """A single wall crossing found along a ray."""
    distance: float = Field(ge=0)   # Distance from the ray origin
    reference: WallReference


class OpeningPlacement(BaseModel):
    """Where and how large one opening is, ready for instance creation."""
    element_id: str
    element_kind: ElementKind
    point: Point3D
    reference: WallReference
    wall_id: str
    level_id: str
    width: float
    height: float


class PlacementSummary(BaseModel):
    """Counters for end-of-run reporting."""
    duct_openings: int = 0
    pipe_openings: int = 0
    skipped_elements: int = 0       # Centerline could not be reduced to a line
    skipped_placements: int = 0     # Wall or level no longer resolvable

    @computed_field
    @property
    def total(self) -> int:
        return self.duct_openings + self.pipe_openings

    @classmethod
    def from_placements(
        cls,
        placements: list[OpeningPlacement],
        skipped_elements: int = 0,
        skipped_placements: int = 0,
    ) -> PlacementSummary:
        ducts = sum(1 for p in placements if p.element_kind == ElementKind.DUCT)
        pipes = sum(1 for p in placements if p.element_kind == ElementKind.PIPE)
        return cls(
            duct_openings=ducts,
            pipe_openings=pipes,
            skipped_elements=skipped_elements,
            skipped_placements=skipped_placements,
        )


class PlacementResult(BaseModel):
    """All placements computed in one batch run."""
    placements: list[OpeningPlacement]
    summary: PlacementSummary | None = None   # Derived from placements when omitted

    def model_post_init(self, __context: object) -> None:
        if self.summary is None:
            self.summary = PlacementSummary.from_placements(self.placements)
