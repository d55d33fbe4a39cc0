"""Exceptions raised by geovector"""

__all__ = ['DegenerateGeometryError']


class DegenerateGeometryError(ValueError):
    """
    Raised when a geometric result is mathematically undefined for the given
    inputs, e.g. normalizing a zero-length vector or finding the midpoint of two
    antipodes.
    """
