"""
Magnetic Field Model
====================

Earth's magnetic field for attitude simulation, backed by the IGRF model.
"""

import logging
import numpy as np
from datetime import datetime

from ..coordinates.frames import Frame, ecef_to_eci_matrix, ned_to_ecef_matrix
from ..core.config import GeomagneticConfig
from ..core.exceptions import DomainError
from ..core.time_manager import decimal_year
from .igrf import IGRF, REFERENCE_RADIUS_KM
from .igrf_coefficients import CoefficientTable

logger = logging.getLogger(__name__)

NT_TO_T = 1e-9


class MagneticFieldModel:
    """
    Wrapper for magnetic field calculations.

    Provides NED, ECEF, ECI and body-frame magnetic field in Tesla at a fixed
    date.
    """

    def __init__(self, date: datetime = None, config: GeomagneticConfig = None):
        """
        Initialize magnetic field model.

        Args:
            date: Reference date (default: current)
            config: Model configuration

        Raises:
            DomainError: date outside the validity interval of the coefficients
        """
        self.config = config or GeomagneticConfig()

        coefficients = None
        if self.config.coefficients_file is not None:
            coefficients = CoefficientTable.from_igrf_file(self.config.coefficients_file)
            logger.info("Using coefficient table %s", coefficients)

        self.igrf = IGRF(coefficients)
        self.set_date(date or datetime.now())

    def set_date(self, date: datetime):
        """
        Update the evaluation date.

        Raises:
            DomainError: date outside the validity interval of the coefficients
        """
        year = decimal_year(date)
        table = self.igrf.coefficients

        if year < table.first_epoch or year > table.valid_until:
            raise DomainError(
                f"Date {date:%Y-%m-%d} is outside the {table.name} validity interval "
                f"[{table.first_epoch:.0f}, {table.valid_until:.0f}]")

        self.date = date
        self.year = year

    def field_ned(self, lat_deg: float, lon_deg: float, alt_km: float) -> np.ndarray:
        """
        Calculate field in local NED frame.

        With the default geodetic configuration the altitude is measured above
        the WGS-84 ellipsoid; with a geocentric configuration it is measured
        above the IGRF reference sphere.

        Args:
            lat_deg: Latitude [deg]
            lon_deg: Longitude [deg]
            alt_km: Altitude [km]

        Returns:
            (B_north, B_east, B_down) in Tesla
        """
        lat = np.radians(lat_deg)
        lon = np.radians(lon_deg)

        if self.config.frame is Frame.GEODETIC:
            position = (alt_km * 1000.0, lat, lon)
        else:
            position = ((REFERENCE_RADIUS_KM + alt_km) * 1000.0, lat, lon)

        b_ned = self.igrf.field(self.year, position, self.config.frame,
                                show_warnings=self.config.show_warnings)

        return b_ned * NT_TO_T

    def field_ecef(self, position_km: np.ndarray) -> np.ndarray:
        """
        Calculate magnetic field in ECEF frame.

        Args:
            position_km: Position in ECEF [km]

        Returns:
            Magnetic field in ECEF [T]
        """
        r = np.linalg.norm(position_km)

        if r < 1e-6:
            return np.zeros(3)

        # Geocentric latitude and longitude
        x, y, z = position_km
        lat = np.arcsin(z / r)
        lon = np.arctan2(y, x)

        b_ned = self.igrf.field(self.year, (r * 1000.0, lat, lon), Frame.GEOCENTRIC,
                                show_warnings=self.config.show_warnings)

        return ned_to_ecef_matrix(lat, lon) @ b_ned * NT_TO_T

    def field_eci(self, position_km: np.ndarray, gmst_rad: float) -> np.ndarray:
        """
        Calculate magnetic field in ECI frame.

        Args:
            position_km: Position in ECI [km]
            gmst_rad: Greenwich Mean Sidereal Time [rad]

        Returns:
            Magnetic field in ECI [T]
        """
        R_eci_ecef = ecef_to_eci_matrix(gmst_rad)

        position_ecef = R_eci_ecef.T @ position_km
        b_ecef = self.field_ecef(position_ecef)

        return R_eci_ecef @ b_ecef

    def get_field_body(self,
                       position_eci: np.ndarray,
                       quaternion: np.ndarray,
                       gmst_rad: float) -> np.ndarray:
        """
        Get magnetic field in body frame.

        Args:
            position_eci: Position in ECI [km]
            quaternion: Attitude quaternion [w, x, y, z]
            gmst_rad: GMST [rad]

        Returns:
            Magnetic field in body frame [T]
        """
        B_eci = self.field_eci(position_eci, gmst_rad)

        R_bi = self._quaternion_to_matrix_inverse(quaternion)
        return R_bi @ B_eci

    def get_field_body_uT(self,
                          position_eci: np.ndarray,
                          quaternion: np.ndarray,
                          gmst_rad: float) -> np.ndarray:
        """Get magnetic field in body frame [µT]."""
        return self.get_field_body(position_eci, quaternion, gmst_rad) * 1e6

    @staticmethod
    def _quaternion_to_matrix_inverse(q: np.ndarray) -> np.ndarray:
        """Convert quaternion to rotation matrix (inertial to body)."""
        w, x, y, z = q

        R = np.array([
            [1-2*(y*y+z*z), 2*(x*y-w*z), 2*(x*z+w*y)],
            [2*(x*y+w*z), 1-2*(x*x+z*z), 2*(y*z-w*x)],
            [2*(x*z-w*y), 2*(y*z+w*x), 1-2*(x*x+y*y)]
        ])

        return R.T  # Transpose for inertial to body
