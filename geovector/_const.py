"""
Constants declarations for geovector
"""
import math

# WGS84 Ellipsoid Constants
WGS84_F = 1 / 298.257223563  # Flattening
FLATTENING_C = (1 - WGS84_F) * (1 - WGS84_F)

# Mean Earth Radius
EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_NM = 1852
EARTH_RADIUS_KM = EARTH_RADIUS_METERS / 1000
EARTH_RADIUS_NM = EARTH_RADIUS_METERS / METERS_PER_NM

# NIMA nautical miles per degree of longitude, cosine series terms
NPD_LTERM1 = 111412.84 / METERS_PER_NM
NPD_LTERM2 = -93.5 / METERS_PER_NM
NPD_LTERM3 = 0.118 / METERS_PER_NM

TWO_PI = 2.0 * math.pi
