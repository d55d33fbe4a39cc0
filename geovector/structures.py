"""
Geographic shapes built from GeoVectors, each able to produce a bounding circle
"""

__all__ = ['GeoLineString', 'GeoPoint', 'GeoPolygon']

from functools import cached_property
from typing import List, Sequence, Tuple

from geovector._base import BoundingCircle, GeoExtent
from geovector._const import EARTH_RADIUS_KM
from geovector._geometry import enclosing_circle
from geovector import calc
from geovector.conversion import radians_to_km, radians_to_nm
from geovector.vector import GeoVector


def _path_length(vertices: Sequence[GeoVector]) -> float:
    return sum(a.distance(b) for a, b in zip(vertices, vertices[1:]))


def _bounding_circle(vertices: List[GeoVector]) -> BoundingCircle:
    center, radius = enclosing_circle(vertices)
    return BoundingCircle(center, radius)


class GeoPoint(GeoExtent):
    """A single location"""

    def __init__(self, point: GeoVector):
        self.point = point

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.point == other.point

    def __hash__(self):
        return hash(self.point)

    def __repr__(self):
        lat, lon = self.point.to_geodetic()
        return f'<GeoPoint at ({lat}, {lon})>'

    @classmethod
    def from_geodetic(cls, lat: float, lon: float) -> 'GeoPoint':
        return cls(GeoVector.from_geodetic(lat, lon))

    def bounding_circle(self) -> BoundingCircle:
        return BoundingCircle(self.point, 0.0)


class GeoLineString(GeoExtent):
    """
    A path of great circle segments connecting two or more vertices.

    Args:
        vertices:
            The GeoVectors along the path, in order
    """

    def __init__(self, vertices: Sequence[GeoVector]):
        if len(vertices) < 2:
            raise ValueError('A GeoLineString requires at least two vertices.')

        self.vertices = list(vertices)

    def __eq__(self, other):
        if not isinstance(other, GeoLineString):
            return False

        return self.vertices == other.vertices

    def __hash__(self):
        return hash(tuple(self.vertices))

    def __repr__(self):
        return f'<GeoLineString with {len(self.vertices)} vertices>'

    @classmethod
    def from_geodetic(cls, coords: Sequence[Tuple[float, float]]) -> 'GeoLineString':
        """Create a GeoLineString from a sequence of (latitude, longitude) pairs"""
        return cls([GeoVector.from_geodetic(lat, lon) for lat, lon in coords])

    @property
    def segments(self) -> List[Tuple[GeoVector, GeoVector]]:
        """The (start, end) pairs of each segment along the path"""
        return list(zip(self.vertices, self.vertices[1:]))

    def approaches(self, other: 'GeoLineString', radius: float) -> bool:
        """
        Test whether any segment of this path comes within radius (radians) of any
        segment of another. Subject to the same approximation as
        geovector.calc.segments_within.
        """
        return any(
            calc.segments_within(v1, v2, radius, p1, p2)
            for v1, v2 in self.segments
            for p1, p2 in other.segments
        )

    def bounding_circle(self) -> BoundingCircle:
        return _bounding_circle(self.vertices)

    def is_near(self, point: GeoVector, radius: float) -> bool:
        """Test whether a point lies within radius (radians) of any segment of the path"""
        return any(v1.is_inside(v2, radius, point) for v1, v2 in self.segments)

    def length(self) -> float:
        """The length of the path, in radians"""
        return _path_length(self.vertices)

    def length_km(self) -> float:
        return radians_to_km(self.length())

    def length_nm(self) -> float:
        return radians_to_nm(self.length())


class GeoPolygon(GeoExtent):
    """
    A polygon on the sphere, bounded by great circle edges.

    The outline may optionally repeat its first vertex at the end; the repeated
    vertex is dropped. Vertices should follow one consistent winding order.

    Args:
        outline:
            The GeoVectors of the polygon's boundary, in order
    """

    def __init__(self, outline: Sequence[GeoVector]):
        outline = list(outline)
        if len(outline) > 1 and outline[0] == outline[-1]:
            outline = outline[:-1]

        if len(outline) < 3:
            raise ValueError('A GeoPolygon requires at least three distinct vertices.')

        self.outline = outline

    def __eq__(self, other):
        if not isinstance(other, GeoPolygon):
            return False

        return self.outline == other.outline

    def __hash__(self):
        return hash(tuple(self.outline))

    def __repr__(self):
        return f'<GeoPolygon with {len(self.outline)} vertices>'

    @classmethod
    def from_geodetic(cls, coords: Sequence[Tuple[float, float]]) -> 'GeoPolygon':
        """Create a GeoPolygon from a sequence of (latitude, longitude) pairs"""
        return cls([GeoVector.from_geodetic(lat, lon) for lat, lon in coords])

    @cached_property
    def area(self) -> float:
        """The area of the polygon on the unit sphere, in steradians"""
        return calc.area(self.outline)

    @property
    def area_km2(self) -> float:
        """The area of the polygon on the mean earth sphere, in square kilometers"""
        return self.area * EARTH_RADIUS_KM ** 2

    @property
    def edges(self) -> List[Tuple[GeoVector, GeoVector]]:
        """The (start, end) pairs of each edge, including the closing edge"""
        return list(zip(self.outline, [*self.outline[1:], self.outline[0]]))

    def bounding_circle(self) -> BoundingCircle:
        return _bounding_circle(self.outline)

    def perimeter(self) -> float:
        """The perimeter of the polygon, in radians"""
        return _path_length([*self.outline, self.outline[0]])
