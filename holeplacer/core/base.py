"""Abstract interfaces the placer consumes from the host application.

The core never touches a live document. It queries wall geometry,
resolves references and hands finished placements over through these
three seams.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from holeplacer.models import (
    Wall, Level, WallReference, RayHit, Point3D, Vector3D,
    OpeningPlacement, FamilySymbolInfo, PlacementParams,
)


class WallGeometryProvider(ABC):
    """Read-only spatial query against the wall surfaces of a model."""

    @abstractmethod
    def find_intersections(
        self, origin: Point3D, direction: Vector3D, max_distance: float,
    ) -> list[RayHit]:
        """
        Return every wall-surface crossing along the ray, ordered by distance.

        Crossings farther than ``max_distance`` from ``origin`` are omitted.
        """
        ...


class WallResolver(ABC):
    """Looks up walls and their levels from ray-query references."""

    @abstractmethod
    def resolve_wall(self, reference: WallReference) -> Wall | None:
        ...

    @abstractmethod
    def resolve_level(self, wall: Wall) -> Level | None:
        ...


class OpeningSink(ABC):
    """
    Creates opening instances in the host model.

    Calls mutate a single shared model and are always made one at a time.
    """

    @abstractmethod
    def activate(self, symbol: FamilySymbolInfo) -> None:
        """Make an inactive family symbol placeable."""
        ...

    @abstractmethod
    def create_opening(
        self,
        placement: OpeningPlacement,
        symbol: FamilySymbolInfo,
        params: PlacementParams,
    ) -> None:
        """Insert an instance and set both its width and height parameters."""
        ...
