from .geometry import Point2D, Point3D, Vector3D
from .building import Wall, Level, WallReference
from .mechanical import LinearElement, CenterlineCurve, ElementKind, CurveType
from .placement import RayHit, OpeningPlacement, PlacementSummary, PlacementResult
from .parameters import PlacementParams, PlacementConfig
from .catalog import (
    DocumentInfo, FamilySymbolInfo, View3DInfo, HostCatalog, ResolvedConfiguration,
)
from .context import ArchitecturalModel

__all__ = [
    "Point2D", "Point3D", "Vector3D",
    "Wall", "Level", "WallReference",
    "LinearElement", "CenterlineCurve", "ElementKind", "CurveType",
    "RayHit", "OpeningPlacement", "PlacementSummary", "PlacementResult",
    "PlacementParams", "PlacementConfig",
    "DocumentInfo", "FamilySymbolInfo", "View3DInfo", "HostCatalog",
    "ResolvedConfiguration",
    "ArchitecturalModel",
]
