"""Reduction of mechanical-model location curves to straight elements."""

from __future__ import annotations
import math

from holeplacer.errors import GeometryError
from holeplacer.models import CenterlineCurve, CurveType, LinearElement


def reduce_centerline(curve: CenterlineCurve, min_length: float = 1e-9) -> LinearElement:
    """
    Turn a line location curve into a ``LinearElement``.

    Arcs are rejected rather than approximated, as are lines too short
    to have a direction and lines whose length is not a finite number.
    """
    if curve.curve_type != CurveType.LINE:
        raise GeometryError(
            "Centerline is not a straight line",
            {"element_id": curve.id, "curve_type": curve.curve_type.value},
        )

    vector = curve.end - curve.start
    length = vector.length()
    if not math.isfinite(length):
        raise GeometryError(
            "Centerline length is not finite",
            {"element_id": curve.id},
        )
    if length < min_length:
        raise GeometryError(
            "Centerline has zero length",
            {"element_id": curve.id},
        )

    direction = vector.normalized()
    if not direction.is_unit():
        raise GeometryError(
            "Centerline direction cannot be normalized",
            {"element_id": curve.id},
        )

    return LinearElement(
        id=curve.id,
        kind=curve.kind,
        start=curve.start,
        direction=direction,
        length=length,
        diameter=curve.diameter,
    )
