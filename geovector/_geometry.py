"""
Internal module defining the minimal enclosing circle used by geovector shapes
"""
import random
from typing import List, Optional, Tuple

import numpy as np
from numpy.linalg import norm

from geovector.vector import GeoVector

# Absorbs rounding error when testing whether a point lies on a circle's edge
_RADIUS_TOLERANCE = 1e-12


def is_counter_clockwise(points: List[GeoVector]) -> bool:
    """
    Tests whether three vectors wind counterclockwise when viewed from outside
    the sphere, i.e. whether their triple product is positive.

    Args:
        points:
            A list of three GeoVectors, in order

    Returns:
        bool
    """
    a, b, c = (p.to_array() for p in points)
    return float(np.dot(a, np.cross(b, c))) > 0


def circle_for_triangle(
    points: List[GeoVector]
) -> Tuple[Optional[GeoVector], Optional[float]]:
    """
    Supporting function for enclosing_circle().

    Can be called with up to three points to return the center and radius of the
    enclosing circle.

    Zero points returns None center and radius (will fail check in calling function).

    One point returns itself as center and zero radius.

    Two points returns the midpoint as center and half the distance as radius.

    Three points checks every point pair as a possible diameter for the circle. If no
    pair qualifies, uses the spherical circumcenter, normalize(a×b + b×c + c×a),
    with the points ordered counterclockwise.

    Args:
        points:
            A list of GeoVectors. Will error if more than three.

    Returns:
        (GeoVector, float) tuple of (center, radius in radians)
    """
    assert len(points) <= 3
    if len(points) == 0:
        return None, None

    if len(points) == 1:
        return points[0], 0.0

    if len(points) == 2:
        ctr = points[0].midpoint(points[1])
        return ctr, ctr.distance(points[0])

    # Test for trivial circle
    for i in range(3):
        p = points[i]
        other_p = points[:i] + points[i+1:]
        ctr = other_p[0].midpoint(other_p[1])
        rad = ctr.distance(other_p[0])
        # If this is true, the midpoint of one side is the center
        # (i.e. any obtuse/right triangle) and we are done
        if rad + _RADIUS_TOLERANCE >= ctr.distance(p):
            return ctr, rad

    if not is_counter_clockwise(points):
        points = list(reversed(points))

    [a, b, c] = [p.to_array() for p in points]
    cc_num = np.cross(a, b) + np.cross(b, c) + np.cross(c, a)
    ctr = GeoVector.from_array(cc_num / norm(cc_num))
    return ctr, ctr.distance(points[0])


def _covers(ctr: GeoVector, rad: float, p: GeoVector) -> bool:
    return rad + _RADIUS_TOLERANCE >= ctr.distance(p)


def enclosing_circle(
    all_points: List[GeoVector],
) -> Tuple[Optional[GeoVector], Optional[float]]:
    """
    Implements Welzl's algorithm to determine the smallest circle enclosing a set
    of points. The points should span less than a hemisphere.

    The points are shuffled once. Each point found outside the current circle
    must lie on the edge of the circle enclosing everything seen so far, so the
    circle is rebuilt from one, two and finally three edge points. Iterative, so
    vertex counts are not bounded by the recursion limit.

    Args:
        all_points:
            A list of GeoVectors.

    Returns:
        (GeoVector, float) tuple of (center, radius in radians)
    """
    points = list(all_points)
    if not points:
        return circle_for_triangle([])

    random.shuffle(points)
    ctr, rad = circle_for_triangle(points[:1])
    for i, p in enumerate(points):
        if _covers(ctr, rad, p):
            continue

        ctr, rad = circle_for_triangle([p])
        for j, q in enumerate(points[:i]):
            if _covers(ctr, rad, q):
                continue

            ctr, rad = circle_for_triangle([p, q])
            for r in points[:j]:
                if not _covers(ctr, rad, r):
                    ctr, rad = circle_for_triangle([p, q, r])

    return ctr, rad
