"""Turns surviving ray hits into opening placement records."""

from __future__ import annotations
import logging

from holeplacer.errors import ResolutionError
from holeplacer.models import LinearElement, RayHit, OpeningPlacement
from holeplacer.core.base import WallResolver

logger = logging.getLogger(__name__)


class PlacementComputer:
    """
    Computes point, host wall, level and size for each hit.

    Openings are square and sized to the element diameter, with no
    clearance margin. Hits whose wall or level cannot be resolved are
    dropped and counted; they never fail the element.
    """

    def __init__(self, resolver: WallResolver) -> None:
        self.resolver = resolver

    def compute(
        self, element: LinearElement, hits: list[RayHit],
    ) -> tuple[list[OpeningPlacement], int]:
        """Return the placements for ``hits`` and the number skipped."""
        placements: list[OpeningPlacement] = []
        skipped = 0
        for hit in hits:
            try:
                placements.append(self.place(element, hit))
            except ResolutionError as exc:
                skipped += 1
                logger.warning(
                    "Skipping opening for %s %s: %s",
                    element.kind.value, element.id, exc.message,
                )
        return placements, skipped

    def place(self, element: LinearElement, hit: RayHit) -> OpeningPlacement:
        wall = self.resolver.resolve_wall(hit.reference)
        if wall is None:
            raise ResolutionError(
                "Wall reference no longer resolves",
                {"wall_id": hit.reference.element_id},
            )
        level = self.resolver.resolve_level(wall)
        if level is None:
            raise ResolutionError(
                "Host wall has no resolvable level",
                {"wall_id": wall.id, "level_id": wall.level_id},
            )

        return OpeningPlacement(
            element_id=element.id,
            element_kind=element.kind,
            point=element.point_at(hit.distance),
            reference=hit.reference,
            wall_id=wall.id,
            level_id=level.id,
            width=element.diameter,
            height=element.diameter,
        )
