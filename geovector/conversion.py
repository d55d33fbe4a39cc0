"""
Module for angle and length unit conversions
"""
__all__ = [
    'ANGLE_UNITS', 'convert_angle', 'geocentric_latitude', 'geographic_latitude',
    'km_to_radians', 'nm_to_radians', 'npd_at_lat', 'radians_to_km', 'radians_to_nm',
    'to_degrees', 'to_radians',
]

import math
from typing import Literal

from pydantic import validate_call

from geovector._const import (
    EARTH_RADIUS_KM, EARTH_RADIUS_NM, FLATTENING_C,
    NPD_LTERM1, NPD_LTERM2, NPD_LTERM3
)

AngleUnit = Literal['deg', 'rad', 'km', 'nmi']

# Number of radians represented by one of each unit, on the mean earth sphere
ANGLE_UNITS = {
    'deg': math.pi / 180.0,
    'rad': 1.0,
    'km': 1.0 / EARTH_RADIUS_KM,
    'nmi': 1.0 / EARTH_RADIUS_NM,
}


def to_radians(degrees: float) -> float:
    """Convert from degrees to radians."""
    return degrees * ANGLE_UNITS['deg']


def to_degrees(radians: float) -> float:
    """Convert from radians to degrees."""
    return radians / ANGLE_UNITS['deg']


def radians_to_km(radians: float) -> float:
    """Convert an angle (radians) to kilometers along the earth's surface."""
    return radians * EARTH_RADIUS_KM


def km_to_radians(km: float) -> float:
    """Convert kilometers along the earth's surface to an angle (radians)."""
    return km / EARTH_RADIUS_KM


def radians_to_nm(radians: float) -> float:
    """Convert an angle (radians) to nautical miles along the earth's surface."""
    return radians * EARTH_RADIUS_NM


def nm_to_radians(nm: float) -> float:
    """Convert nautical miles along the earth's surface to an angle (radians)."""
    return nm / EARTH_RADIUS_NM


def geocentric_latitude(geographic_lat: float) -> float:
    """Convert from geographic to geocentric latitude (radians)"""
    return math.atan(math.tan(geographic_lat) * FLATTENING_C)


def geographic_latitude(geocentric_lat: float) -> float:
    """Convert from geocentric to geographic latitude (radians)"""
    return math.atan(math.tan(geocentric_lat) / FLATTENING_C)


def npd_at_lat(lat_degrees: float) -> float:
    """
    Nautical miles per degree of longitude at a given latitude, using the
    three-term cosine series published by NIMA.

    Args:
        lat_degrees:
            The latitude, in decimal degrees

    Returns:
        (float) nautical miles per degree
    """
    lat = to_radians(lat_degrees)
    return (
        NPD_LTERM1 * math.cos(lat) +
        NPD_LTERM2 * math.cos(3 * lat) +
        NPD_LTERM3 * math.cos(5 * lat)
    )


@validate_call
def convert_angle(value: float, from_unit: AngleUnit, to_unit: AngleUnit) -> float:
    """
    Converts a great-circle distance between any two of the recognized units.

    Args:
        value (float): The distance value.
        from_unit (str): The unit of the value (degrees = 'deg', radians = 'rad',
            kilometers = 'km', nautical miles = 'nmi').
        to_unit (str): The unit to convert to, one of the above.

    Returns:
        float: The distance in the target unit.
    """
    return value * ANGLE_UNITS[from_unit] / ANGLE_UNITS[to_unit]
