from __future__ import annotations

import pytest

from holeplacer.core.base import WallGeometryProvider, WallResolver
from holeplacer.models import (
    Wall, Level, WallReference, RayHit, Point2D, Point3D, Vector3D,
    LinearElement, ElementKind, ArchitecturalModel,
)


class StubProvider(WallGeometryProvider):
    """Returns a fixed hit list and ignores the distance cap."""

    def __init__(self, hits: list[RayHit]) -> None:
        self.hits = hits
        self.calls: list[float] = []

    def find_intersections(self, origin, direction, max_distance):
        self.calls.append(max_distance)
        return list(self.hits)


class StubResolver(WallResolver):
    """Resolves every reference to a wall on level L1 unless told otherwise."""

    def __init__(self, missing_walls=(), missing_levels=()) -> None:
        self.missing_walls = set(missing_walls)
        self.missing_levels = set(missing_levels)

    def resolve_wall(self, reference):
        if reference.element_id in self.missing_walls:
            return None
        return Wall(
            id=reference.element_id,
            level_id="L1",
            start=Point2D(x=0, z=0),
            end=Point2D(x=1, z=0),
            linked_id=reference.linked_id,
        )

    def resolve_level(self, wall):
        if wall.id in self.missing_levels:
            return None
        return Level(id=wall.level_id, name="Level 1")


def hit(distance: float, wall_id: str, linked_id: str | None = None) -> RayHit:
    return RayHit(
        distance=distance,
        reference=WallReference(element_id=wall_id, linked_id=linked_id),
    )


def x_axis_element(
    length: float = 5.0,
    diameter: float = 0.2,
    kind: ElementKind = ElementKind.DUCT,
    element_id: str = "D1",
) -> LinearElement:
    return LinearElement(
        id=element_id,
        kind=kind,
        start=Point3D(x=0, y=0, z=0),
        direction=Vector3D(x=1, y=0, z=0),
        length=length,
        diameter=diameter,
    )


def cross_wall(wall_id: str, x: float, thickness: float = 0.2, **kwargs) -> Wall:
    """A wall across the X axis, centered on ``x``, spanning z in [-2, 2]."""
    return Wall(
        id=wall_id,
        level_id=kwargs.pop("level_id", "L1"),
        start=Point2D(x=x, z=-2),
        end=Point2D(x=x, z=2),
        thickness=thickness,
        base_elevation=kwargs.pop("base_elevation", -1.0),
        height=kwargs.pop("height", 3.0),
        **kwargs,
    )


@pytest.fixture
def two_wall_model() -> ArchitecturalModel:
    return ArchitecturalModel(
        walls=[cross_wall("W1", 1.0), cross_wall("W2", 3.0)],
        levels=[Level(id="L1", name="Level 1")],
    )
