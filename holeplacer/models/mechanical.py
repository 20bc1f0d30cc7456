"""Mechanical model elements: ducts and pipes."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Point3D, Vector3D


class ElementKind(str, Enum):
    DUCT = "duct"
    PIPE = "pipe"


class CurveType(str, Enum):
    LINE = "line"
    ARC = "arc"


class CenterlineCurve(BaseModel):
    """A duct or pipe location curve as read from the mechanical model."""
    id: str
    kind: ElementKind
    curve_type: CurveType = CurveType.LINE
    start: Point3D
    end: Point3D
    diameter: float = Field(gt=0)   # Nominal diameter (meters)


class LinearElement(BaseModel):
    """
    A straight duct or pipe segment, ready for ray casting.

    ``direction`` should be a unit vector; RayCaster checks it against the
    configured tolerance and rejects the element otherwise.
    """
    id: str
    kind: ElementKind
    start: Point3D
    direction: Vector3D
    length: float = Field(ge=0)     # True centerline length, not a search radius
    diameter: float = Field(gt=0)

    def point_at(self, distance: float) -> Point3D:
        return self.start + self.direction * distance
