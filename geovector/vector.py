"""
Representation of a point on earth as a three dimensional vector
"""

__all__ = ['GeoVector', 'NORTH']

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from typing_extensions import Self

from geovector._const import TWO_PI
from geovector.conversion import (
    geocentric_latitude, geographic_latitude, radians_to_km,
    radians_to_nm, to_degrees, to_radians
)
from geovector.exceptions import DegenerateGeometryError
from geovector.utils.functions import maybe_round
from geovector.utils.logging import warn_once


class GeoVector:
    """
    A point on the earth represented as a three dimensional vector rather than a
    latitude/longitude pair.

    Vectors created from geodetic coordinates are unit length. Results of the vector
    algebra (add, subtract, scale) generally are not; call .normalize() wherever a
    point on the sphere is required.

    Values are treated as immutable everywhere except .overwrite(), which replaces
    the components in place. Do not overwrite a vector that another thread may be
    reading, or one that has been placed in a set or used as a dict key.
    """

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x: float, y: float, z: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    def __eq__(self, other):
        if not isinstance(other, GeoVector):
            return False

        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self):
        return hash((self._x, self._y, self._z))

    def __repr__(self):
        return f'<GeoVector({self._x}, {self._y}, {self._z})>'

    def __add__(self, other: 'GeoVector') -> 'GeoVector':
        return self.add(other)

    def __sub__(self, other: 'GeoVector') -> 'GeoVector':
        return self.subtract(other)

    def __mul__(self, s: float) -> 'GeoVector':
        return self.scale(s)

    __rmul__ = __mul__

    def __neg__(self) -> 'GeoVector':
        return self.antipode()

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def xyz(self) -> Tuple[float, float, float]:
        """The vector components as an (x, y, z) tuple"""
        return self._x, self._y, self._z

    @staticmethod
    def _geodetic_components(lat: float, lon: float) -> Tuple[float, float, float]:
        """Unit vector components for a geographic lat/lon pair, in radians"""
        if abs(lat) - math.pi / 2 > 1e-12:
            warn_once(
                'Latitude outside of [-90, 90] degrees; vector will be computed as given. '
                '(this warning will not repeat)'
            )

        rlat = geocentric_latitude(lat)
        c = math.cos(rlat)
        return c * math.cos(lon), c * math.sin(lon), math.sin(rlat)

    @classmethod
    def from_geodetic(cls, lat: float, lon: float) -> Self:
        """
        Creates a unit vector from a geographic latitude/longitude pair.

        The geographic latitude is first corrected to a geocentric latitude using the
        WGS84 flattening, then embedded on the unit sphere.

        Args:
            lat:
                Latitude, in decimal degrees

            lon:
                Longitude, in decimal degrees

        Returns:
            GeoVector
        """
        return cls(*cls._geodetic_components(to_radians(lat), to_radians(lon)))

    @classmethod
    def from_radians(cls, lat: float, lon: float) -> Self:
        """Creates a unit vector from a geographic latitude/longitude pair in radians"""
        return cls(*cls._geodetic_components(lat, lon))

    @classmethod
    def from_array(cls, arr: Union[np.ndarray, Sequence[float]]) -> Self:
        """Creates a vector from any length-3 array-like of (x, y, z)"""
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f'Expected an array of shape (3,), received {arr.shape}')

        return cls(*arr.tolist())

    def copy(self) -> 'GeoVector':
        return GeoVector(self._x, self._y, self._z)

    def overwrite(
        self,
        *args: Union['GeoVector', float],
        radians: bool = False,
    ) -> Self:
        """
        Replaces this vector's components in place. This is the only operation that
        mutates a GeoVector.

        Accepts either another GeoVector, whose components are copied, or a
        latitude/longitude pair (decimal degrees, or radians if radians=True).

        Args:
            *args:
                A GeoVector, or latitude and longitude

        Keyword Args:
            radians: (bool) (Default False)
                Whether latitude and longitude are given in radians

        Returns:
            This GeoVector
        """
        if len(args) == 1 and isinstance(args[0], GeoVector):
            self._x, self._y, self._z = args[0].xyz
            return self

        if len(args) != 2:
            raise ValueError('overwrite() accepts a GeoVector or a latitude/longitude pair.')

        lat, lon = float(args[0]), float(args[1])  # type: ignore[arg-type]
        if not radians:
            lat, lon = to_radians(lat), to_radians(lon)

        self._x, self._y, self._z = self._geodetic_components(lat, lon)
        return self

    @property
    def latitude_radians(self) -> float:
        """Geographic latitude, in radians"""
        return geographic_latitude(math.atan2(self._z, math.sqrt(self._x ** 2 + self._y ** 2)))

    @property
    def longitude_radians(self) -> float:
        """Longitude, in radians"""
        return math.atan2(self._y, self._x)

    @property
    def latitude(self) -> float:
        """Geographic latitude, in decimal degrees"""
        return to_degrees(self.latitude_radians)

    @property
    def longitude(self) -> float:
        """Longitude, in decimal degrees"""
        return to_degrees(self.longitude_radians)

    def to_array(self) -> np.ndarray:
        """The vector components as a numpy array"""
        return np.array(self.xyz)

    def to_geodetic(self, precision: Optional[int] = None) -> Tuple[float, float]:
        """
        Converts the vector back to a geographic (latitude, longitude) pair.

        Args:
            precision:
                (Default None) If provided, rounds both values to this many decimals

        Returns:
            Tuple of (latitude, longitude) in decimal degrees
        """
        return maybe_round(self.latitude, precision), maybe_round(self.longitude, precision)

    # Vector algebra

    def dot(self, other: 'GeoVector') -> float:
        """Dot product"""
        return self._x * other._x + self._y * other._y + self._z * other._z

    def length(self) -> float:
        """Euclidean length"""
        return math.sqrt(self.dot(self))

    def scale(self, s: float) -> 'GeoVector':
        """Multiply each component by s"""
        return GeoVector(self._x * s, self._y * s, self._z * s)

    def normalize(self) -> 'GeoVector':
        """
        Returns a unit length vector parallel to this one.

        Raises:
            DegenerateGeometryError: if this is the zero vector
        """
        length = self.length()
        if length == 0.0:
            raise DegenerateGeometryError('Cannot normalize a zero-length vector.')

        return self.scale(1.0 / length)

    def _cross_components(self, other: 'GeoVector') -> Tuple[float, float, float]:
        return (
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def cross(self, other: 'GeoVector') -> 'GeoVector':
        """Vector cross product"""
        return GeoVector(*self._cross_components(other))

    def cross_length(self, other: 'GeoVector') -> float:
        """Equivalent to self.cross(other).length()"""
        return math.sqrt(sum(c * c for c in self._cross_components(other)))

    def cross_normalize(self, other: 'GeoVector') -> 'GeoVector':
        """
        Equivalent to self.cross(other).normalize(); the unit normal of the plane
        through both vectors.

        Raises:
            DegenerateGeometryError: if the vectors are parallel
        """
        x, y, z = self._cross_components(other)
        length = math.sqrt(x * x + y * y + z * z)
        if length == 0.0:
            raise DegenerateGeometryError('Cannot normalize the cross product of parallel vectors.')

        return GeoVector(x / length, y / length, z / length)

    def add(self, other: 'GeoVector') -> 'GeoVector':
        return GeoVector(self._x + other._x, self._y + other._y, self._z + other._z)

    def subtract(self, other: 'GeoVector') -> 'GeoVector':
        return GeoVector(self._x - other._x, self._y - other._y, self._z - other._z)

    def antipode(self) -> 'GeoVector':
        """The point opposite this one on the earth"""
        return self.scale(-1.0)

    # Distance and bearing

    def distance(self, other: 'GeoVector') -> float:
        """
        Angular distance, in radians, between this and another vector. Always within
        [0, pi].
        """
        return math.atan2(other.cross_length(self), other.dot(self))

    def distance_km(self, other: 'GeoVector') -> float:
        """Distance in kilometers"""
        return radians_to_km(self.distance(other))

    def distance_nm(self, other: 'GeoVector') -> float:
        """Distance in nautical miles"""
        return radians_to_nm(self.distance(other))

    def azimuth(self, other: 'GeoVector') -> float:
        """
        Initial bearing, in radians clockwise from north within [0, 2pi), of the
        great circle path from this vector to another.

        Args:
            other:
                The destination vector

        Returns:
            (float) the azimuth in radians
        """
        # n1 is the plane of this point's meridian, n2 the plane of the path. The
        # azimuth is the angle between them, with the cross products specialized.
        n1 = NORTH.cross(self)
        n2 = other.cross(self)
        az = math.atan2(-NORTH.dot(n2), n1.dot(n2))
        if az < 0.0:
            az += TWO_PI

        return az if az < TWO_PI else 0.0

    def azimuth_degrees(self, other: 'GeoVector', **kwargs) -> float:
        """
        Initial bearing in degrees, within [0, 360).

        Keyword Args:
            precision: (int) (Default None)
                The decimal precision to round the resulting bearing to
        """
        # Rounding can carry a bearing just short of 360 up to 360
        return maybe_round(to_degrees(self.azimuth(other)), kwargs.get('precision')) % 360.0

    def midpoint(self, other: 'GeoVector') -> 'GeoVector':
        """
        The midpoint of the great circle arc between this and another vector.

        Raises:
            DegenerateGeometryError: if the vectors are antipodes
        """
        return self.add(other).normalize()

    def interpolate(self, other: 'GeoVector', t: float) -> 'GeoVector':
        """
        The point on the great circle arc weighted t toward this vector and (1 - t)
        toward the other, i.e. t=1 returns this point and t=0 the other.

        Raises:
            DegenerateGeometryError: if the vectors are antipodes
        """
        return self.scale(t).add(other.scale(1 - t)).normalize()

    # Containment

    def is_inside(self, v2: 'GeoVector', radius: float, p: 'GeoVector') -> bool:
        """
        Is the point p within radius (radians) of the great circle segment between
        this and v2? The segment has rounded caps at both ends.

        Args:
            v2:
                The other endpoint of the segment

            radius:
                The angular distance, in radians

            p:
                The point to test

        Returns:
            bool

        Raises:
            DegenerateGeometryError: if the endpoints are antipodes and p lies
                outside both end caps, since the great circle is undefined
        """
        if radius < 0:
            warn_once('Containment tested with a negative radius; nothing will be contained.')

        # Endpoint caps. distance(p, p) is exactly zero, so the endpoints themselves
        # are always contained.
        if self.distance(p) <= radius or v2.distance(p) <= radius:
            return True

        if self == v2:
            return False

        # |gc . p| is the projection of p onto the segment's plane normal. If it
        # exceeds that of a vector radius away from the plane, p is too far away.
        gc = self.cross_normalize(v2)
        if abs(gc.dot(p)) > math.cos((math.pi / 2.0) - radius):
            return False

        # The projection of (p - self) onto the segment direction must land on
        # the chord between the endpoints
        d = v2.subtract(self)
        size = d.normalize().dot(p.subtract(self))
        return 0 <= size <= d.length()

    def in_bubble(
        self,
        v2: 'GeoVector',
        forward_radius: float,
        back_radius: float,
        p: 'GeoVector'
    ) -> bool:
        """
        Is p inside the bubble around this point oriented along the segment from this
        to v2, looking forward forward_radius and backward back_radius (radians)?

        Args:
            v2:
                The vector giving the forward direction

            forward_radius:
                The radius applied to points ahead of this one

            back_radius:
                The radius applied to points at or behind this one

            p:
                The point to test

        Returns:
            bool
        """
        ahead = v2.subtract(self).normalize().dot(p.subtract(self)) > 0.0
        return self.distance(p) <= (forward_radius if ahead else back_radius)

    # Intersection

    def intersect(self, q: 'GeoVector', r: 'GeoVector') -> 'GeoVector':
        """
        Find the intersection of the great circle between this and q with the great
        circle normal to r.

        That is, find the point y = normalize(x * self + (1 - x) * q) with y . r = 0.
        Since x * a + (1 - x) * b = 0 with a = self . r and b = q . r,
        x = -b / (a - b).

        If both great circles are the same circle, this point is returned. If
        a == b (the interpolation parameter diverges) the limit point
        normalize(self - q) is returned.

        Args:
            q:
                The second point on the first great circle; must be less than 180
                degrees from this one

            r:
                The normal of the second great circle

        Raises:
            DegenerateGeometryError: if this and q are antipodes, in which case both
                y and -y are valid intersections

        Returns:
            GeoVector
        """
        a = self.dot(r)
        b = q.dot(r)
        if a == b:
            if a == 0.0:
                return self.copy()

            return self.subtract(q).normalize()

        x = -b / (a - b)
        try:
            return self.scale(x).add(q.scale(1.0 - x)).normalize()
        except DegenerateGeometryError as exc:
            raise DegenerateGeometryError(
                'Intersection is ambiguous for points 180 degrees apart.'
            ) from exc


# North pole
NORTH = GeoVector(0.0, 0.0, 1.0)
