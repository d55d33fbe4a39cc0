""" Spherical calculations over GeoVectors and geodetic coordinates """

__all__ = [
    'angle', 'area', 'distance', 'distance_km', 'distance_nm',
    'is_inside_degrees', 'segments_within'
]

import math
from typing import Iterable

from geovector.conversion import radians_to_km, radians_to_nm
from geovector.vector import GeoVector


def angle(p0: GeoVector, p1: GeoVector, p2: GeoVector) -> float:
    """
    Given 3 points on a sphere, returns the angle at p1 (in radians) formed by the
    great circle arcs p0-p1 and p1-p2.

    The normals of the two great circle planes are separated by the turn angle at p1,
    so the angle between the arcs is its supplement.

    Args:
        p0:
            The first point

        p1:
            The vertex

        p2:
            The last point

    Returns:
        (float) the angle in radians
    """
    return math.pi - p0.cross(p1).distance(p1.cross(p2))


def area(vertices: Iterable[GeoVector]) -> float:
    """
    Computes the area of a polygon on the surface of a unit sphere using its
    spherical excess (Girard's theorem). For a non-unit sphere, multiply the result
    by the radius squared.

    The vertices are consumed in a single pass, so a one-shot iterator may be
    provided. The polygon is implicitly closed (do not repeat the first vertex) and
    the vertices must follow one consistent winding order. Self-intersecting
    polygons are not detected.

    Args:
        vertices:
            An iterable of at least three GeoVectors

    Raises:
        ValueError: if fewer than three vertices are provided

    Returns:
        (float) the area, in steradians
    """
    vertices = iter(vertices)
    try:
        v0, v1 = next(vertices), next(vertices)
    except StopIteration as exc:
        raise ValueError('Polygon area requires at least three vertices.') from exc

    count, total = 0, 0.0
    p0, p1 = v0, v1
    for p2 in vertices:
        count += 1
        total += angle(p0, p1, p2)
        p0, p1 = p1, p2

    if count == 0:
        raise ValueError('Polygon area requires at least three vertices.')

    # Closing vertices
    total += angle(p0, p1, v0)
    total += angle(p1, v0, v1)
    count += 2

    return total - (count - 2) * math.pi


def segments_within(
    v1: GeoVector,
    v2: GeoVector,
    radius: float,
    p1: GeoVector,
    p2: GeoVector
) -> bool:
    """
    Do the segments v1-v2 and p1-p2 come within radius (radians) of each other?

    This is an approximation: it only tests whether any endpoint of either segment
    lies within radius of the other segment. Segments whose closest approach is
    between their interiors, e.g. two segments that cross far from all four
    endpoints, are reported as not within radius.

    Args:
        v1:
            The start of the first segment

        v2:
            The end of the first segment

        radius:
            The angular distance, in radians

        p1:
            The start of the second segment

        p2:
            The end of the second segment

    Returns:
        bool
    """
    return (
        v1.is_inside(v2, radius, p1) or
        v1.is_inside(v2, radius, p2) or
        p1.is_inside(p2, radius, v1) or
        p1.is_inside(p2, radius, v2)
    )


def is_inside_degrees(
    lat1: float, lon1: float,
    lat2: float, lon2: float,
    radius: float,
    lat3: float, lon3: float
) -> bool:
    """
    Is the point (lat3, lon3) within radius (radians) of the great circle segment
    from (lat1, lon1) to (lat2, lon2)? Coordinates are in decimal degrees.
    """
    return GeoVector.from_geodetic(lat1, lon1).is_inside(
        GeoVector.from_geodetic(lat2, lon2),
        radius,
        GeoVector.from_geodetic(lat3, lon3)
    )


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Angular distance, in radians, between two lat/lon points (decimal degrees)"""
    return GeoVector.from_geodetic(lat1, lon1).distance(GeoVector.from_geodetic(lat2, lon2))


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometers between two lat/lon points (decimal degrees)"""
    return radians_to_km(distance(lat1, lon1, lat2, lon2))


def distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in nautical miles between two lat/lon points (decimal degrees)"""
    return radians_to_nm(distance(lat1, lon1, lat2, lon2))
