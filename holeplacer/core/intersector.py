"""In-memory wall geometry provider: rays against oriented wall boxes."""

from __future__ import annotations
import math

from holeplacer.models import Wall, RayHit, Point3D, Vector3D
from holeplacer.core.base import WallGeometryProvider


PARALLEL_TOLERANCE = 1e-12  # Direction components below this are treated as zero
MIN_WALL_LENGTH = 1e-9


class WallIntersector(WallGeometryProvider):
    """
    Finds wall crossings by slab-testing each wall's bounding box.

    A wall is the box spanned by its baseline (along), its thickness
    centered on the baseline (across) and its base elevation plus height
    (vertical). A ray passing through reports one hit on the face it
    enters and one on the face it leaves. Both hits carry the wall's
    reference, so a single wall shows up twice until deduplicated.
    """

    def __init__(self, walls: list[Wall]) -> None:
        self.walls = walls

    def find_intersections(
        self, origin: Point3D, direction: Vector3D, max_distance: float,
    ) -> list[RayHit]:
        hits: list[RayHit] = []
        for wall in self.walls:
            interval = self._box_interval(wall, origin, direction)
            if interval is None:
                continue
            t_near, t_far = interval
            distances = [t for t in (t_near, t_far) if 0.0 <= t <= max_distance]
            if len(distances) == 2 and distances[0] == distances[1]:
                distances = distances[:1]  # Grazing an edge
            for t in distances:
                hits.append(RayHit(distance=t, reference=wall.reference))

        hits.sort(key=lambda h: h.distance)
        return hits

    def _box_interval(
        self, wall: Wall, origin: Point3D, direction: Vector3D,
    ) -> tuple[float, float] | None:
        """Parametric entry/exit distances of the ray through the wall box."""
        length = wall.length
        if length < MIN_WALL_LENGTH:
            return None

        # Wall-local axes on the floor plane
        ux = (wall.end.x - wall.start.x) / length
        uz = (wall.end.z - wall.start.z) / length
        nx, nz = -uz, ux

        rx = origin.x - wall.start.x
        rz = origin.z - wall.start.z
        half = wall.thickness / 2

        slabs = [
            (rx * ux + rz * uz, direction.x * ux + direction.z * uz, 0.0, length),
            (rx * nx + rz * nz, direction.x * nx + direction.z * nz, -half, half),
            (origin.y, direction.y, wall.base_elevation, wall.base_elevation + wall.height),
        ]

        t_near = -math.inf
        t_far = math.inf
        for o, d, lo, hi in slabs:
            if abs(d) < PARALLEL_TOLERANCE:
                if o < lo or o > hi:
                    return None
                continue
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return None

        if t_far < 0.0:
            return None
        return t_near, t_far
