"""Opening pipeline: cast, deduplicate and place for a batch of elements."""

from __future__ import annotations
import logging
from typing import TypeVar

from holeplacer.errors import GeometryError
from holeplacer.models import (
    CenterlineCurve, LinearElement, ElementKind, OpeningPlacement,
    PlacementConfig, PlacementResult, PlacementSummary,
)
from holeplacer.core.base import WallGeometryProvider, WallResolver
from holeplacer.core.centerline import reduce_centerline
from holeplacer.core.dedup import HitDeduplicator
from holeplacer.core.placement import PlacementComputer
from holeplacer.core.raycaster import RayCaster

logger = logging.getLogger(__name__)

E = TypeVar("E", CenterlineCurve, LinearElement)


class OpeningPipeline:
    """
    Stateless placement pipeline.

    Each element runs through RayCaster, HitDeduplicator and
    PlacementComputer on its own; no state carries over between
    elements or between runs.
    """

    def __init__(
        self,
        provider: WallGeometryProvider,
        resolver: WallResolver,
        config: PlacementConfig | None = None,
    ) -> None:
        if config is None:
            config = PlacementConfig()
        self.config = config
        self.caster = RayCaster(provider, config.direction_tolerance)
        self.deduplicator = HitDeduplicator()
        self.computer = PlacementComputer(resolver)

    def place_element(self, element: LinearElement) -> tuple[list[OpeningPlacement], int]:
        hits = self.caster.cast_element(element)
        unique = self.deduplicator.deduplicate(hits)
        return self.computer.compute(element, unique)

    def run(self, curves: list[CenterlineCurve]) -> PlacementResult:
        """Reduce each curve to a straight element, then place its openings."""
        elements: list[LinearElement] = []
        skipped_elements = 0
        for curve in self._selected(curves):
            try:
                elements.append(reduce_centerline(curve, self.config.min_length))
            except GeometryError as exc:
                skipped_elements += 1
                logger.warning("Skipping %s %s: %s", curve.kind.value, curve.id, exc.message)

        return self._place_all(elements, skipped_elements)

    def run_elements(self, elements: list[LinearElement]) -> PlacementResult:
        return self._place_all(elements, 0)

    def _place_all(
        self, elements: list[LinearElement], skipped_elements: int,
    ) -> PlacementResult:
        placements: list[OpeningPlacement] = []
        skipped_placements = 0

        for element in self._selected(elements):
            try:
                element_placements, skipped = self.place_element(element)
            except GeometryError as exc:
                skipped_elements += 1
                logger.warning("Skipping %s %s: %s", element.kind.value, element.id, exc.message)
                continue
            placements.extend(element_placements)
            skipped_placements += skipped

        summary = PlacementSummary.from_placements(
            placements, skipped_elements, skipped_placements,
        )
        logger.info(
            "Computed %d duct and %d pipe openings (%d elements, %d placements skipped)",
            summary.duct_openings, summary.pipe_openings,
            summary.skipped_elements, summary.skipped_placements,
        )
        return PlacementResult(placements=placements, summary=summary)

    def _selected(self, items: list[E]) -> list[E]:
        kinds = set()
        if self.config.include_ducts:
            kinds.add(ElementKind.DUCT)
        if self.config.include_pipes:
            kinds.add(ElementKind.PIPE)
        return [item for item in items if item.kind in kinds]
