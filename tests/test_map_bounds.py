import math

import pytest

from mapgeo.crs import PyprojReprojector
from mapgeo.envelope import ReferencedEnvelope
from mapgeo.map_bounds import BBoxMapBounds, CenterScaleMapBounds
from mapgeo.project_types import PaintArea
from mapgeo.scale import Scale
from mapgeo.units import DistanceUnit


def test_bbox_bounds_center(web_mercator):
    bounds = BBoxMapBounds(ReferencedEnvelope(-10.0, 30.0, 0.0, 100.0, web_mercator))
    assert bounds.center == (10.0, 50.0)
    assert bounds.projection == web_mercator


def test_bbox_bounds_planar_scale(web_mercator):
    envelope = ReferencedEnvelope(0.0, 8000.0, 0.0, 6000.0, web_mercator)
    scale = BBoxMapBounds(envelope).scale(PaintArea(800, 600), dpi=72)
    assert scale.unit is DistanceUnit.M
    assert math.isclose(scale.resolution, 10.0, rel_tol=1e-12)


def test_bbox_bounds_geodetic_scale_at_equator(web_mercator):
    envelope = ReferencedEnvelope(-4000.0, 4000.0, -3000.0, 3000.0, web_mercator)
    bounds = BBoxMapBounds(envelope)
    planar = bounds.scale(PaintArea(800, 600), dpi=72)
    geodetic = bounds.scale(PaintArea(800, 600), dpi=72, geodetic=True)
    assert math.isclose(geodetic.denominator, planar.denominator, rel_tol=1e-6)


def test_bbox_bounds_geodetic_scale_at_60_degrees(web_mercator, wgs84):
    center_y = PyprojReprojector().reproject((0.0, 60.0), wgs84, web_mercator)[1]
    envelope = ReferencedEnvelope(-4000.0, 4000.0, center_y - 3000.0, center_y + 3000.0, web_mercator)
    bounds = BBoxMapBounds(envelope)
    planar = bounds.scale(PaintArea(800, 600), dpi=72)
    geodetic = bounds.scale(PaintArea(800, 600), dpi=72, geodetic=True)
    assert 1.99 < planar.denominator / geodetic.denominator < 2.0


def test_center_scale_planar_envelope(web_mercator):
    scale = Scale.from_resolution(10.0)
    bounds = CenterScaleMapBounds(web_mercator, 1000.0, 2000.0, scale)
    envelope = bounds.to_referenced_envelope(PaintArea(800, 600))
    assert envelope.crs == web_mercator
    assert envelope.min_x == pytest.approx(-3000.0)
    assert envelope.max_x == pytest.approx(5000.0)
    assert envelope.min_y == pytest.approx(-1000.0)
    assert envelope.max_y == pytest.approx(5000.0)


def test_center_scale_geodetic_envelope(web_mercator, wgs84):
    center_y = PyprojReprojector().reproject((0.0, 60.0), wgs84, web_mercator)[1]
    bounds = CenterScaleMapBounds(web_mercator, 0.0, center_y, Scale.from_resolution(10.0))
    planar = bounds.to_referenced_envelope(PaintArea(800, 600))
    geodetic = bounds.to_referenced_envelope(PaintArea(800, 600), geodetic=True)
    assert geodetic.height == pytest.approx(planar.height)
    # 8 km of ground spans about twice as many Mercator metres at 60 degrees
    assert 1.99 < geodetic.width / planar.width < 2.01


def test_center_scale_geodetic_ignored_outside_web_mercator(utm_31n):
    bounds = CenterScaleMapBounds(utm_31n, 500000.0, 5000000.0, Scale.from_resolution(10.0))
    planar = bounds.to_referenced_envelope(PaintArea(800, 600))
    assert bounds.to_referenced_envelope(PaintArea(800, 600), geodetic=True) == planar


def test_center_scale_scale_follows_dpi(web_mercator):
    scale = Scale(25000, DistanceUnit.M, 72)
    bounds = CenterScaleMapBounds(web_mercator, 0.0, 0.0, scale)
    assert bounds.scale(PaintArea(800, 600)) is scale
    assert bounds.scale(PaintArea(800, 600), dpi=300) == Scale(25000, DistanceUnit.M, 300)
