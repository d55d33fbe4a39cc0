from geovector._version import __version__  # noqa: F401
from geovector.utils.logging import LOGGER
from geovector.exceptions import DegenerateGeometryError
from geovector.vector import GeoVector, NORTH
from geovector._base import BoundingCircle, GeoExtent
from geovector.structures import GeoLineString, GeoPoint, GeoPolygon


__all__ = [
    'BoundingCircle',
    'DegenerateGeometryError',
    'GeoExtent',
    'GeoLineString',
    'GeoPoint',
    'GeoPolygon',
    'GeoVector',
    'NORTH',
    'LOGGER',
]
