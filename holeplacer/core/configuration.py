"""Strict lookup of the host resources a placement run needs.

Each resource must match exactly once. Zero matches and several matches
are both configuration errors; there is no tie-break.
"""

from __future__ import annotations
from typing import Callable, TypeVar

from holeplacer.errors import ConfigurationError
from holeplacer.models import (
    HostCatalog, PlacementParams, ResolvedConfiguration,
)

T = TypeVar("T")

GENERIC_MODEL = "generic_model"


def single_match(candidates: list[T], predicate: Callable[[T], bool], what: str) -> T:
    """Return the only candidate satisfying ``predicate``."""
    matches = [c for c in candidates if predicate(c)]
    if not matches:
        raise ConfigurationError(f"{what} not found")
    if len(matches) > 1:
        raise ConfigurationError(
            f"{what} is ambiguous",
            {"matches": str(len(matches))},
        )
    return matches[0]


def resolve_configuration(
    catalog: HostCatalog, params: PlacementParams,
) -> ResolvedConfiguration:
    companion = single_match(
        catalog.documents,
        lambda d: d.title.endswith(params.companion_suffix),
        f"Mechanical model ending with '{params.companion_suffix}'",
    )
    symbol = single_match(
        catalog.symbols,
        lambda s: s.category == GENERIC_MODEL and s.family_name == params.family_name,
        f"Family '{params.family_name}'",
    )
    view = single_match(
        catalog.views,
        lambda v: not v.is_template,
        "3D view",
    )
    return ResolvedConfiguration(companion=companion, symbol=symbol, view=view)
