"""High-level placement service — facade for the API layer."""

from __future__ import annotations
import logging

from holeplacer.models import (
    ArchitecturalModel, CenterlineCurve, HostCatalog,
    PlacementParams, PlacementConfig, PlacementResult, PlacementSummary,
)
from holeplacer.core.base import OpeningSink
from holeplacer.core.configuration import resolve_configuration
from holeplacer.core.intersector import WallIntersector
from holeplacer.core.pipeline import OpeningPipeline
from holeplacer.core.resolver import ModelResolver
from holeplacer.services.sink import InMemoryOpeningSink

logger = logging.getLogger(__name__)


class PlacementService:
    """Checks host configuration, runs the pipeline, hands openings to the sink."""

    def __init__(self, sink: OpeningSink | None = None) -> None:
        self.sink = sink or InMemoryOpeningSink()

    def place(
        self,
        model: ArchitecturalModel,
        curves: list[CenterlineCurve],
        catalog: HostCatalog,
        params: PlacementParams | None = None,
        config: PlacementConfig | None = None,
    ) -> PlacementResult:
        if params is None:
            params = PlacementParams()
        if config is None:
            config = PlacementConfig()

        # Raises before anything is written to the sink
        resolved = resolve_configuration(catalog, params)

        pipeline = OpeningPipeline(WallIntersector(model.walls), ModelResolver(model), config)
        result = pipeline.run(curves)

        if not resolved.symbol.is_active:
            self.sink.activate(resolved.symbol)

        for placement in result.placements:
            self.sink.create_opening(placement, resolved.symbol, params)

        logger.info("Created %d openings for elements of %s", result.summary.total, resolved.companion.title)
        return result

    @staticmethod
    def summary_message(summary: PlacementSummary) -> str:
        return (
            "Openings created:\n"
            f"  for ducts - {summary.duct_openings};\n"
            f"  for pipes - {summary.pipe_openings}."
        )
