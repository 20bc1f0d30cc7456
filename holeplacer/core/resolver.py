"""Wall and level lookup against an in-memory architectural model."""

from __future__ import annotations

from holeplacer.models import ArchitecturalModel, Wall, Level, WallReference
from holeplacer.core.base import WallResolver


class ModelResolver(WallResolver):
    """Resolves references by value against an ``ArchitecturalModel``."""

    def __init__(self, model: ArchitecturalModel) -> None:
        self.model = model

    def resolve_wall(self, reference: WallReference) -> Wall | None:
        return self.model.get_wall(reference)

    def resolve_level(self, wall: Wall) -> Level | None:
        return self.model.get_level(wall.level_id)
