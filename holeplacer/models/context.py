"""Snapshot of the walls and levels a placement run queries."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Wall, Level, WallReference


class ArchitecturalModel(BaseModel):
    """
    Read-only view of the host document for a single placement pass.

    The intersector casts rays against ``walls``; the resolver looks
    walls and their levels back up from the references the rays return.
    """
    walls: list[Wall] = []
    levels: list[Level] = []

    def get_wall(self, reference: WallReference) -> Wall | None:
        for w in self.walls:
            if w.reference == reference:
                return w
        return None

    def get_level(self, level_id: str) -> Level | None:
        for lv in self.levels:
            if lv.id == level_id:
                return lv
        return None
