"""Placement parameters and configuration."""

from __future__ import annotations
from pydantic import BaseModel


class PlacementParams(BaseModel):
    """Names used to find host resources and fill in the opening family."""
    companion_suffix: str = "_OV"       # Title suffix of the mechanical model
    family_name: str = "Opening"        # Generic-model family used for holes
    width_parameter: str = "width"
    height_parameter: str = "height"


class PlacementConfig(BaseModel):
    """Controls which elements are processed and numeric tolerances."""
    include_ducts: bool = True
    include_pipes: bool = True
    direction_tolerance: float = 1e-6   # Allowed deviation of |direction| from 1
    min_length: float = 1e-9            # Shorter centerlines have no direction
