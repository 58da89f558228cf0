"""
Coordinates Module
==================

Reference ellipsoid geometry and frame rotations.
"""

from .ellipsoid import geodetic_to_ecef, geodetic_to_geocentric, geocentric_to_geodetic
from .frames import Frame, geocentric_to_geodetic_vector, ned_to_ecef_matrix, ecef_to_eci_matrix

__all__ = [
    'geodetic_to_ecef',
    'geodetic_to_geocentric',
    'geocentric_to_geodetic',
    'Frame',
    'geocentric_to_geodetic_vector',
    'ned_to_ecef_matrix',
    'ecef_to_eci_matrix',
]
