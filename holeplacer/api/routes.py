"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter
from loguru import logger

from holeplacer.models import ArchitecturalModel
from holeplacer.services.placement_service import PlacementService
from holeplacer.services.sink import InMemoryOpeningSink
from holeplacer.api.schemas import PlaceOpeningsRequest, PlaceOpeningsResponse

router = APIRouter()


@router.post("/openings", response_model=PlaceOpeningsResponse)
async def place_openings(request: PlaceOpeningsRequest) -> PlaceOpeningsResponse:
    """Compute and create openings for every duct and pipe crossing a wall."""
    sink = InMemoryOpeningSink()
    service = PlacementService(sink)
    model = ArchitecturalModel(walls=request.walls, levels=request.levels)

    result = service.place(
        model, request.elements, request.catalog, request.params, request.config,
    )
    logger.info(
        "Placed {ducts} duct and {pipes} pipe openings",
        ducts=result.summary.duct_openings,
        pipes=result.summary.pipe_openings,
    )

    return PlaceOpeningsResponse(
        placements=result.placements,
        instances=sink.instances,
        summary=result.summary,
        message=PlacementService.summary_message(result.summary),
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
