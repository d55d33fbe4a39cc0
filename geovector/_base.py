"""
Base class declarations for geovector shapes
"""

from __future__ import annotations

__all__ = ['BoundingCircle', 'GeoExtent']

from abc import abstractmethod, ABC

from pydantic import NonNegativeFloat, validate_call

from geovector.conversion import radians_to_km, radians_to_nm
from geovector.vector import GeoVector


class BoundingCircle:
    """A circle on the sphere, guaranteed to enclose some geographic shape"""

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, center: GeoVector, radius: NonNegativeFloat):
        """
        Args:
            center:
                The center of the circle, a unit GeoVector

            radius:
                The angular radius of the circle, in radians
        """
        self.center = center
        self.radius = radius

    def __contains__(self, point: GeoVector) -> bool:
        return self.contains(point)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundingCircle):
            return False

        return self.center == other.center and self.radius == other.radius

    def __hash__(self) -> int:
        return hash((self.center, self.radius))

    def __repr__(self):
        lat, lon = self.center.to_geodetic()
        return f'<BoundingCircle at ({lat}, {lon}); radius {self.radius} rad>'

    @property
    def radius_km(self) -> float:
        """The radius, in kilometers"""
        return radians_to_km(self.radius)

    @property
    def radius_nm(self) -> float:
        """The radius, in nautical miles"""
        return radians_to_nm(self.radius)

    def contains(self, point: GeoVector) -> bool:
        """Test whether a point falls within (or on the edge of) the circle"""
        return self.center.distance(point) <= self.radius


class GeoExtent(ABC):
    """
    An object with some geographical representation on the earth. Can be a point,
    line or area-type thing, i.e. anything that could be plotted on a map.
    """

    @abstractmethod
    def __repr__(self):
        """REPL representation of this object"""

    @abstractmethod
    def bounding_circle(self) -> BoundingCircle:
        """
        Produces a circle that entirely encompasses the shape

        Returns:
            (BoundingCircle)
        """
