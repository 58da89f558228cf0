"""
Reference Frames
================

Frame tags and vector rotations between local and global frames.
"""

from enum import Enum

import numpy as np


class Frame(Enum):
    """Position/field representation of a geomagnetic evaluation."""
    GEOCENTRIC = "geocentric"
    GEODETIC = "geodetic"


def rotation_y(angle: float) -> np.ndarray:
    """
    Direction cosine matrix of a rotation about the Y axis.

    Args:
        angle: Rotation angle [rad]

    Returns:
        3x3 matrix that expresses a vector in the rotated axes
    """
    c = np.cos(angle)
    s = np.sin(angle)

    return np.array([
        [c, 0.0, -s],
        [0.0, 1.0, 0.0],
        [s, 0.0, c]
    ])


def geocentric_to_geodetic_vector(b_gc: np.ndarray,
                                  geocentric_latitude: float,
                                  latitude: float) -> np.ndarray:
    """
    Express a local (north, east, down) vector in geodetic axes.

    The geocentric and geodetic local frames share the east axis; they differ
    by a rotation about it of (geocentric_latitude - latitude).

    Args:
        b_gc: Vector in geocentric north/east/down axes
        geocentric_latitude: Geocentric latitude [rad]
        latitude: Geodetic latitude [rad]

    Returns:
        Vector in geodetic north/east/down axes
    """
    return rotation_y(geocentric_latitude - latitude) @ np.asarray(b_gc, dtype=float)


def ned_to_ecef_matrix(latitude: float, longitude: float) -> np.ndarray:
    """
    Rotation from local NED axes to ECEF axes.

    Args:
        latitude: Latitude of the local frame [rad]
        longitude: Longitude [rad]

    Returns:
        3x3 matrix R such that v_ecef = R @ v_ned
    """
    sin_lat, cos_lat = np.sin(latitude), np.cos(latitude)
    sin_lon, cos_lon = np.sin(longitude), np.cos(longitude)

    R_ned_ecef = np.array([
        [-sin_lat*cos_lon, -sin_lat*sin_lon, cos_lat],
        [-sin_lon, cos_lon, 0],
        [-cos_lat*cos_lon, -cos_lat*sin_lon, -sin_lat]
    ])

    return R_ned_ecef.T


def ecef_to_eci_matrix(gmst_rad: float) -> np.ndarray:
    """
    Earth rotation about Z (no precession, nutation or polar motion).

    Args:
        gmst_rad: Greenwich Mean Sidereal Time [rad]

    Returns:
        3x3 matrix R such that v_eci = R @ v_ecef
    """
    cos_gmst = np.cos(gmst_rad)
    sin_gmst = np.sin(gmst_rad)

    R_ecef_eci = np.array([
        [cos_gmst, sin_gmst, 0],
        [-sin_gmst, cos_gmst, 0],
        [0, 0, 1]
    ])

    return R_ecef_eci.T
