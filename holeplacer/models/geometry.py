"""Geometric primitives used throughout the placer."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the floor plane (X-Z, Y is up)."""
    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)


class Point3D(BaseModel):
    """Point in 3D space."""
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Vector3D:
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)


class Vector3D(BaseModel):
    """3D vector for ray directions."""
    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def is_unit(self, tolerance: float = 1e-6) -> bool:
        return abs(self.length() - 1.0) <= tolerance

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)

