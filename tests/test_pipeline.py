"""End-to-end tests for OpeningPipeline."""

import pytest

from holeplacer.core.intersector import WallIntersector
from holeplacer.core.pipeline import OpeningPipeline
from holeplacer.core.resolver import ModelResolver
from holeplacer.models import (
    CenterlineCurve, CurveType, ElementKind, PlacementConfig, PlacementResult,
    Point3D, Vector3D,
)

from conftest import StubProvider, StubResolver, hit, x_axis_element


def _pipeline(hits, **config) -> OpeningPipeline:
    return OpeningPipeline(StubProvider(hits), StubResolver(), PlacementConfig(**config))


def _points(result):
    return [(p.point.x, p.point.y, p.point.z) for p in result.placements]


def test_two_distinct_walls():
    result = _pipeline([hit(1.0, "W1"), hit(3.0, "W2")]).run_elements([x_axis_element()])

    assert _points(result) == [(1.0, 0.0, 0.0), (3.0, 0.0, 0.0)]
    assert all(p.width == 0.2 and p.height == 0.2 for p in result.placements)
    assert result.summary.duct_openings == 2


def test_duplicate_hits_on_one_wall():
    result = _pipeline([hit(1.0, "W"), hit(1.0001, "W")]).run_elements([x_axis_element()])
    assert _points(result) == [(1.0, 0.0, 0.0)]


def test_crossing_beyond_element_end():
    result = _pipeline([hit(6.0, "W1")]).run_elements([x_axis_element(length=5.0)])
    assert result.placements == []


def test_crossing_at_element_end():
    result = _pipeline([hit(5.0, "W1")]).run_elements([x_axis_element(length=5.0)])
    assert _points(result) == [(5.0, 0.0, 0.0)]


def test_no_walls():
    result = _pipeline([]).run_elements([x_axis_element()])
    assert result.placements == []
    assert result.summary.total == 0


def test_idempotent():
    pipeline = _pipeline([hit(3.0, "W2"), hit(1.0, "W1"), hit(1.2, "W1")])
    elements = [x_axis_element(), x_axis_element(kind=ElementKind.PIPE, element_id="P1")]
    assert pipeline.run_elements(elements) == pipeline.run_elements(elements)


def test_counts_split_by_element_kind():
    elements = [
        x_axis_element(element_id="D1"),
        x_axis_element(kind=ElementKind.PIPE, element_id="P1"),
        x_axis_element(kind=ElementKind.PIPE, element_id="P2"),
    ]
    result = _pipeline([hit(1.0, "W1")]).run_elements(elements)
    assert result.summary.duct_openings == 1
    assert result.summary.pipe_openings == 2


def test_unresolvable_hits_do_not_block_the_batch():
    pipeline = OpeningPipeline(
        StubProvider([hit(1.0, "GONE"), hit(3.0, "W2")]),
        StubResolver(missing_walls={"GONE"}),
    )
    result = pipeline.run_elements([x_axis_element(element_id="D1"), x_axis_element(element_id="D2")])
    assert len(result.placements) == 2
    assert result.summary.skipped_placements == 2


def test_pipes_can_be_excluded():
    elements = [x_axis_element(), x_axis_element(kind=ElementKind.PIPE, element_id="P1")]
    result = _pipeline([hit(1.0, "W1")], include_pipes=False).run_elements(elements)
    assert [p.element_id for p in result.placements] == ["D1"]


def _curve(curve_id, kind=ElementKind.DUCT, curve_type=CurveType.LINE):
    return CenterlineCurve(
        id=curve_id,
        kind=kind,
        curve_type=curve_type,
        start=Point3D(x=0, y=0, z=0),
        end=Point3D(x=5, y=0, z=0),
        diameter=0.2,
    )


def test_arc_curves_are_skipped_and_counted():
    curves = [_curve("D1"), _curve("D2", curve_type=CurveType.ARC), _curve("P1", ElementKind.PIPE)]
    result = _pipeline([hit(1.0, "W1")]).run(curves)

    assert [p.element_id for p in result.placements] == ["D1", "P1"]
    assert result.summary.skipped_elements == 1


def test_real_geometry(two_wall_model):
    pipeline = OpeningPipeline(WallIntersector(two_wall_model.walls), ModelResolver(two_wall_model))
    result = pipeline.run([_curve("D1")])

    assert [p.wall_id for p in result.placements] == ["W1", "W2"]
    assert [p.point.x for p in result.placements] == [pytest.approx(0.9), pytest.approx(2.9)]
    assert all(p.level_id == "L1" for p in result.placements)


def test_real_geometry_short_element_stops_at_its_end(two_wall_model):
    curve = _curve("D1").model_copy(update={"end": Point3D(x=2.0, y=0, z=0)})
    pipeline = OpeningPipeline(WallIntersector(two_wall_model.walls), ModelResolver(two_wall_model))
    result = pipeline.run([curve])
    assert [p.wall_id for p in result.placements] == ["W1"]


def test_overflowing_centerline_is_skipped_and_the_batch_continues():
    curves = [
        _curve("D1"),
        _curve("D2").model_copy(update={"end": Point3D(x=2e200, y=0, z=0)}),
    ]
    result = _pipeline([hit(1.0, "W1")]).run(curves)

    assert [p.element_id for p in result.placements] == ["D1"]
    assert result.summary.skipped_elements == 1


def _off_unit_element():
    return x_axis_element().model_copy(update={"direction": Vector3D(x=1.00001, y=0, z=0)})


def test_off_unit_direction_is_skipped_with_default_tolerance():
    result = _pipeline([hit(1.0, "W1")]).run_elements([_off_unit_element(), x_axis_element(element_id="D2")])

    assert [p.element_id for p in result.placements] == ["D2"]
    assert result.summary.skipped_elements == 1


def test_configured_direction_tolerance_is_honored():
    result = _pipeline([hit(1.0, "W1")], direction_tolerance=1e-4).run_elements([_off_unit_element()])

    assert [p.element_id for p in result.placements] == ["D1"]
    assert result.summary.skipped_elements == 0


def test_result_summary_derived_when_omitted():
    placements = _pipeline([hit(1.0, "W1")]).run_elements([x_axis_element()]).placements
    result = PlacementResult(placements=placements)

    assert result.summary is not None
    assert result.summary.duct_openings == 1
