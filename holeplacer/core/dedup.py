"""Duplicate-hit removal, one hit per physical wall."""

from __future__ import annotations

from holeplacer.models import RayHit, WallReference


class HitDeduplicator:
    """
    Keeps the nearest hit for each distinct wall reference.

    A ray can register several faces of one wall (entry and exit, or the
    layers of a composite wall). References compare by value, so a hit
    on a linked wall never collapses with a host wall of the same id.
    Equal distances keep the hit that came first.
    """

    def deduplicate(self, hits: list[RayHit]) -> list[RayHit]:
        seen: set[WallReference] = set()
        unique: list[RayHit] = []
        for hit in sorted(hits, key=lambda h: h.distance):
            if hit.reference in seen:
                continue
            seen.add(hit.reference)
            unique.append(hit)
        return unique
