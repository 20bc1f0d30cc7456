"""Ray casting along element centerlines."""

from __future__ import annotations
import math

from holeplacer.errors import GeometryError
from holeplacer.models import LinearElement, RayHit, Point3D, Vector3D
from holeplacer.core.base import WallGeometryProvider


class RayCaster:
    """
    Casts a ray from an element's start point along its direction.

    Only crossings within the element's own length are kept; the bound
    is inclusive, so a wall touched exactly at the element end counts.
    """

    def __init__(
        self, provider: WallGeometryProvider, direction_tolerance: float = 1e-6,
    ) -> None:
        self.provider = provider
        self.direction_tolerance = direction_tolerance

    def cast(self, origin: Point3D, direction: Vector3D, length: float) -> list[RayHit]:
        if not math.isfinite(length) or length < 0:
            raise GeometryError(
                "Ray length must be finite and not negative",
                {"length": str(length)},
            )
        if not direction.is_unit(self.direction_tolerance):
            raise GeometryError(
                "Ray direction must be normalized",
                {"direction_length": f"{direction.length():.9f}"},
            )

        hits = self.provider.find_intersections(origin, direction, length)
        in_range = [h for h in hits if h.distance <= length]
        in_range.sort(key=lambda h: h.distance)
        return in_range

    def cast_element(self, element: LinearElement) -> list[RayHit]:
        return self.cast(element.start, element.direction, element.length)
