"""Host application resources the placer needs before it can run."""

from __future__ import annotations
from pydantic import BaseModel


class DocumentInfo(BaseModel):
    title: str


class FamilySymbolInfo(BaseModel):
    id: str
    family_name: str
    category: str = "generic_model"
    is_active: bool = True


class View3DInfo(BaseModel):
    id: str
    name: str = ""
    is_template: bool = False


class HostCatalog(BaseModel):
    """Documents, family symbols and 3D views open in the host application."""
    documents: list[DocumentInfo] = []
    symbols: list[FamilySymbolInfo] = []
    views: list[View3DInfo] = []


class ResolvedConfiguration(BaseModel):
    """The exactly-one matches for every required host resource."""
    companion: DocumentInfo
    symbol: FamilySymbolInfo
    view: View3DInfo
