"""
Reference Ellipsoid
===================

WGS-84 ellipsoid geometry shared by the toolbox.

Angles are in radians and distances in metres.
"""

import numpy as np
from typing import Tuple

# WGS-84 defining parameters
WGS84_A = 6378137.0  # m - semi-major axis
WGS84_F = 1 / 298.257223563  # flattening
WGS84_B = WGS84_A * (1 - WGS84_F)  # m - semi-minor axis
WGS84_E2 = WGS84_F * (2 - WGS84_F)  # first eccentricity squared


def geodetic_to_ecef(latitude: float, longitude: float, height: float) -> np.ndarray:
    """
    Convert geodetic coordinates to an ECEF position.

    Args:
        latitude: Geodetic latitude [rad]
        longitude: Longitude [rad]
        height: Height above the ellipsoid [m]

    Returns:
        Position [x, y, z] in ECEF [m]
    """
    sin_lat = np.sin(latitude)
    cos_lat = np.cos(latitude)

    # Radius of curvature in the prime vertical
    N = WGS84_A / np.sqrt(1 - WGS84_E2 * sin_lat**2)

    return np.array([
        (N + height) * cos_lat * np.cos(longitude),
        (N + height) * cos_lat * np.sin(longitude),
        (N * (1 - WGS84_E2) + height) * sin_lat,
    ])


def geodetic_to_geocentric(latitude: float, height: float) -> Tuple[float, float]:
    """
    Convert geodetic latitude and height to geocentric latitude and radius.

    Args:
        latitude: Geodetic latitude [rad]
        height: Height above the ellipsoid [m]

    Returns:
        (geocentric_latitude [rad], radius [m])
    """
    sin_lat = np.sin(latitude)
    N = WGS84_A / np.sqrt(1 - WGS84_E2 * sin_lat**2)

    rho = (N + height) * np.cos(latitude)
    z = (N * (1 - WGS84_E2) + height) * sin_lat
    r = np.hypot(rho, z)

    return float(np.arcsin(z / r)), float(r)


def geocentric_to_geodetic(geocentric_latitude: float,
                           radius: float,
                           tol: float = 1e-12,
                           max_iter: int = 10) -> Tuple[float, float]:
    """
    Convert geocentric latitude and radius to geodetic latitude and height.

    Fixed-point iteration on the geodetic latitude; converges to machine
    precision in a few steps for points near the Earth.

    Args:
        geocentric_latitude: Geocentric latitude [rad]
        radius: Distance from the Earth center [m]
        tol: Convergence tolerance on latitude [rad]
        max_iter: Maximum number of iterations

    Returns:
        (geodetic_latitude [rad], height [m])
    """
    rho = radius * np.cos(geocentric_latitude)
    z = radius * np.sin(geocentric_latitude)

    # Poles: the iteration below divides by cos(latitude)
    if rho < 1e-9:
        return float(np.copysign(np.pi / 2, z)), float(abs(z) - WGS84_B)

    lat = np.arctan2(z, rho * (1 - WGS84_E2))
    for _ in range(max_iter):
        sin_lat = np.sin(lat)
        N = WGS84_A / np.sqrt(1 - WGS84_E2 * sin_lat**2)
        lat_new = np.arctan2(z + N * WGS84_E2 * sin_lat, rho)
        converged = abs(lat_new - lat) < tol
        lat = lat_new
        if converged:
            break

    sin_lat = np.sin(lat)
    N = WGS84_A / np.sqrt(1 - WGS84_E2 * sin_lat**2)
    height = rho / np.cos(lat) - N

    return float(lat), float(height)
