import math
import random

from pytest import approx

from geovector import GeoVector
from geovector._geometry import *
from geovector.conversion import to_radians

from tests.functions import assert_vectors_equal


def _assert_encloses(center, radius, points):
    for p in points:
        assert center.distance(p) <= radius + 1e-9


def test_is_counter_clockwise():
    points = [GeoVector(1., 0., 0.), GeoVector(0., 1., 0.), GeoVector(0., 0., 1.)]
    assert is_counter_clockwise(points)
    assert not is_counter_clockwise(list(reversed(points)))


def test_circle_for_triangle():
    assert circle_for_triangle([]) == (None, None)

    p = GeoVector.from_geodetic(1., 2.)
    assert circle_for_triangle([p]) == (p, 0.)

    ctr, rad = circle_for_triangle([GeoVector.from_geodetic(0., -1.), GeoVector.from_geodetic(0., 1.)])
    assert_vectors_equal(ctr, GeoVector(1., 0., 0.))
    assert rad == approx(to_radians(1.))

    # Obtuse triangle; the longest side is the diameter
    ctr, rad = circle_for_triangle([
        GeoVector.from_geodetic(0., -10.),
        GeoVector.from_geodetic(0., 10.),
        GeoVector.from_geodetic(1., 0.),
    ])
    assert_vectors_equal(ctr, GeoVector(1., 0., 0.))
    assert rad == approx(to_radians(10.))

    # Acute triangle; circumcenter, regardless of winding order
    points = [GeoVector(1., 0., 0.), GeoVector(0., 1., 0.), GeoVector(0., 0., 1.)]
    for ordering in (points, list(reversed(points))):
        ctr, rad = circle_for_triangle(ordering)
        assert_vectors_equal(ctr, GeoVector(1., 1., 1.).normalize())
        assert rad == approx(math.acos(1 / math.sqrt(3)))


def test_enclosing_circle():
    points = [
        GeoVector.from_geodetic(lat, lon)
        for lat, lon in [(0., 0.), (0., 4.), (4., 0.), (4., 4.), (2., 2.), (1., 3.)]
    ]
    ctr, rad = enclosing_circle(points)
    _assert_encloses(ctr, rad, points)

    # Roughly half the square's diagonal
    assert to_radians(2.7) < rad < to_radians(2.9)
    assert ctr.latitude == approx(2., abs=0.05)
    assert ctr.longitude == approx(2., abs=0.05)


def test_enclosing_circle_collinear():
    points = [GeoVector.from_geodetic(0., lon) for lon in (0., 1., 2., 3., 4., 5.)]
    ctr, rad = enclosing_circle(points)
    _assert_encloses(ctr, rad, points)
    assert rad == approx(to_radians(2.5))
    assert ctr.to_geodetic() == approx((0., 2.5))


def test_enclosing_circle_single_point():
    p = GeoVector.from_geodetic(45., 45.)
    assert enclosing_circle([p]) == (p, 0.)


def test_enclosing_circle_many_points():
    rng = random.Random(8)
    points = [
        GeoVector.from_geodetic(rng.uniform(0., 5.), rng.uniform(0., 5.))
        for _ in range(2000)
    ]
    ctr, rad = enclosing_circle(points)
    _assert_encloses(ctr, rad, points)

    # Never larger than the circle through the box corners
    assert rad < to_radians(3.6)
