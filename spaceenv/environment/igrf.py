"""
IGRF Geomagnetic Field Model
============================

Spherical harmonic synthesis of the International Geomagnetic Reference
Field.

The field is the negative gradient of the internal potential

    V = a * sum_n (a/r)^(n+1) * sum_m (g_nm cos(m phi) + h_nm sin(m phi)) P_nm(cos theta)

where the Gauss coefficients g_nm, h_nm are interpolated from the epoch table
to the requested date and P_nm are the Schmidt quasi-normalized associated
Legendre functions.

References:
    https://www.ngdc.noaa.gov/IAGA/vmod/igrf.html
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from ..coordinates.ellipsoid import geodetic_to_geocentric
from ..coordinates.frames import Frame, geocentric_to_geodetic_vector
from ..core.exceptions import AccuracyAdvisory, DomainError
from ..numerics.legendre import legendre_schmidt
from .igrf_coefficients import (
    EPOCH_STEP_YEARS,
    IGRF12,
    CoefficientTable,
    coefficient_row,
)

logger = logging.getLogger(__name__)

# IGRF reference radius [km]
REFERENCE_RADIUS_KM = 6371.2

# First epoch of the degree-13 expansion
HIGH_DEGREE_EPOCH = 1995
LOW_MAX_DEGREE = 10
HIGH_MAX_DEGREE = 13


@dataclass
class InterpolatedCoefficients:
    """Gauss coefficients interpolated to a date."""
    epoch_index: int  # 1-based column of the selected epoch
    epoch_year: float
    delta_t: float  # Years elapsed since the selected epoch
    max_degree: int
    g: np.ndarray  # [nT]
    h: np.ndarray  # [nT]

    def gh(self, n: int, m: int) -> Tuple[float, float]:
        """Return (g_nm, h_nm)."""
        row = coefficient_row(n, m)
        return self.g[row], self.h[row]


def select_epoch(table: CoefficientTable, date: float) -> Tuple[int, float, float, int]:
    """
    Select the epoch used to evaluate the model at ``date``.

    Dates after the extrapolation start reuse the last tabulated epoch, so the
    elapsed time can exceed the epoch step.

    Args:
        table: Coefficient table
        date: Fractional year A.D.

    Returns:
        (epoch_index, epoch_year, delta_t, max_degree); epoch_index is 1-based.
    """
    if date < table.extrapolation_start:
        idx = int(np.floor((date - table.first_epoch) / EPOCH_STEP_YEARS)) + 1
    else:
        idx = table.num_epochs

    epoch_year = table.first_epoch + (idx - 1) * EPOCH_STEP_YEARS
    delta_t = date - epoch_year

    # The degree depends on the selected epoch, not on the date
    max_degree = LOW_MAX_DEGREE if epoch_year < HIGH_DEGREE_EPOCH else HIGH_MAX_DEGREE
    max_degree = min(max_degree, table.max_degree)

    return idx, epoch_year, delta_t, max_degree


def interpolate_coefficients(table: CoefficientTable, date: float) -> InterpolatedCoefficients:
    """
    Interpolate the Gauss coefficients to ``date``.

    Before the last epoch the rate is the difference to the next epoch divided
    by the epoch step. From the last epoch on, the rate is the tabulated
    secular variation.

    Args:
        table: Coefficient table
        date: Fractional year A.D.

    Returns:
        Interpolated coefficients
    """
    idx, epoch_year, delta_t, max_degree = select_epoch(table, date)
    col = idx - 1

    g0 = table.g[:, col]
    h0 = table.h[:, col]

    if date < table.last_epoch:
        dg = (table.g[:, col + 1] - g0) / EPOCH_STEP_YEARS
        dh = (table.h[:, col + 1] - h0) / EPOCH_STEP_YEARS
    else:
        dg = table.g[:, -1]
        dh = table.h[:, -1]

    logger.debug("IGRF %.4f: epoch %.0f (index %d), dt=%.4f years, n_max=%d",
                 date, epoch_year, idx, delta_t, max_degree)

    return InterpolatedCoefficients(
        epoch_index=idx,
        epoch_year=epoch_year,
        delta_t=delta_t,
        max_degree=max_degree,
        g=g0 + dg * delta_t,
        h=h0 + dh * delta_t,
    )


def synthesize(theta: float,
               phi: float,
               r_km: float,
               coefficients: InterpolatedCoefficients,
               P: np.ndarray,
               dP: np.ndarray) -> Tuple[float, float, float]:
    """
    Sum the spherical harmonic expansion of the potential gradient.

    Args:
        theta: Colatitude [rad]
        phi: East longitude [rad]
        r_km: Geocentric distance [km]
        coefficients: Gauss coefficients interpolated to the date
        P: Schmidt quasi-normalized Legendre functions at theta
        dP: Derivatives of P with respect to theta

    Returns:
        (dV/dr, dV/dtheta, dV/dphi) scaled by the reference radius
    """
    a = REFERENCE_RADIUS_KM
    n_max = coefficients.max_degree
    g = coefficients.g
    h = coefficients.h

    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    ratio = a / r_km
    fact = ratio

    # At the pole sin(theta) = 0 and P_nm = 0 for m >= 1; the phi term is
    # taken from the colatitude derivative instead.
    at_pole = theta == 0

    dVr = 0.0
    dVtheta = 0.0
    dVphi = 0.0

    for n in range(1, n_max + 1):
        aux_dVr = 0.0
        aux_dVtheta = 0.0
        aux_dVphi = 0.0

        fact_dVr = (n + 1) / r_km

        row = coefficient_row(n, 0)
        aux_dVr += -fact_dVr * g[row] * P[n, 0]
        aux_dVtheta += g[row] * dP[n, 0]

        # sin/cos of (m-1)*phi and (m-2)*phi for the angle-addition recurrence
        sin_m_1phi = 0.0
        sin_m_2phi = -sin_phi
        cos_m_1phi = 1.0
        cos_m_2phi = cos_phi

        for m in range(1, n + 1):
            sin_mphi = 2 * cos_phi * sin_m_1phi - sin_m_2phi
            cos_mphi = 2 * cos_phi * cos_m_1phi - cos_m_2phi

            g_nm = g[row + m]
            h_nm = h[row + m]

            gc_hs = g_nm * cos_mphi + h_nm * sin_mphi
            gs_hc = g_nm * sin_mphi - h_nm * cos_mphi

            aux_dVr += -fact_dVr * gc_hs * P[n, m]
            aux_dVtheta += gc_hs * dP[n, m]
            if at_pole:
                aux_dVphi += -m * gs_hc * dP[n, m]
            else:
                aux_dVphi += -m * gs_hc * P[n, m]

            sin_m_2phi = sin_m_1phi
            sin_m_1phi = sin_mphi
            cos_m_2phi = cos_m_1phi
            cos_m_1phi = cos_mphi

        # fact = (a/r)^(n+1)
        fact *= ratio

        dVr += aux_dVr * fact
        dVtheta += aux_dVtheta * fact
        dVphi += aux_dVphi * fact

    return dVr * a, dVtheta * a, dVphi * a


def assemble_field(theta: float,
                   r_km: float,
                   dVr: float,
                   dVtheta: float,
                   dVphi: float) -> np.ndarray:
    """
    Build the (north, east, down) field vector from the potential gradient.

    Args:
        theta: Colatitude [rad]
        r_km: Geocentric distance [km]
        dVr, dVtheta, dVphi: Output of :func:`synthesize`

    Returns:
        Field vector [nT] in geocentric north/east/down axes
    """
    north = dVtheta / r_km
    if theta == 0:
        east = -dVphi / r_km
    else:
        east = -dVphi / (r_km * np.sin(theta))
    down = dVr

    return np.array([north, east, down])


def field_elements(b_ned: Sequence[float]) -> dict:
    """
    Derive the magnetic elements from a north/east/down field vector.

    Args:
        b_ned: Field vector [nT]

    Returns:
        Dictionary with horizontal and total intensity [nT], declination and
        inclination [deg]
    """
    north, east, down = b_ned
    horizontal = np.hypot(north, east)

    return {
        'horizontal_intensity_nT': float(horizontal),
        'total_intensity_nT': float(np.sqrt(horizontal**2 + down**2)),
        'declination_deg': float(np.degrees(np.arctan2(east, north))),
        'inclination_deg': float(np.degrees(np.arctan2(down, horizontal))),
    }


class IGRF:
    """
    International Geomagnetic Reference Field.

    Evaluations are stateless; the coefficient table is shared and never
    modified, so one instance can be used from several threads.

    Example:
        >>> model = IGRF()
        >>> model.field(2004.26, (6378140.0, 0.0, 0.0))  # [nT]
    """

    def __init__(self, coefficients: CoefficientTable = None):
        """
        Initialize IGRF model.

        Args:
            coefficients: Gauss coefficient table (default: IGRF-12)
        """
        self.coefficients = coefficients or IGRF12

    def validate(self, date: float, latitude: float, longitude: float,
                 show_warnings: bool = True):
        """
        Check that a request lies inside the model domain.

        Raises:
            DomainError: date, latitude or longitude out of range
        """
        table = self.coefficients

        if date < table.first_epoch or date > table.valid_until:
            raise DomainError(
                f"This IGRF version will not work for years outside the interval "
                f"[{table.first_epoch:.0f}, {table.valid_until:.0f}], got {date}")

        if latitude < -np.pi / 2 or latitude > np.pi / 2:
            raise DomainError(f"The latitude must be between -pi/2 and +pi/2 rad, got {latitude}")

        if longitude < -np.pi or longitude > np.pi:
            raise DomainError(f"The longitude must be between -pi and +pi rad, got {longitude}")

        if show_warnings and date > table.extrapolation_start:
            warnings.warn(
                f"The magnetic field computed with this IGRF version may be of reduced "
                f"accuracy for years greater than {table.extrapolation_start:.0f}.",
                AccuracyAdvisory,
                stacklevel=3,
            )

    def field(self,
              date: float,
              position: Sequence[float],
              frame: Union[Frame, str] = Frame.GEOCENTRIC,
              show_warnings: bool = True) -> np.ndarray:
        """
        Compute the geomagnetic field vector.

        With ``Frame.GEOCENTRIC`` the position is (distance from the Earth
        center [m], geocentric latitude [rad], longitude [rad]) and the vector
        is returned in geocentric north/east/down axes. With
        ``Frame.GEODETIC`` the position is (height above the WGS-84 ellipsoid
        [m], geodetic latitude [rad], longitude [rad]) and the X axis is
        tangent to the ellipsoid, pointing north.

        Args:
            date: Fractional year A.D., within [1900, 2025] for IGRF-12
            position: (radius or height, latitude, longitude)
            frame: Position and output representation
            show_warnings: Warn when the date needs secular extrapolation

        Returns:
            Field vector [nT] (north, east, down)
        """
        frame = Frame(frame)
        r, lat, lon = position

        self.validate(date, lat, lon, show_warnings)

        if frame is Frame.GEODETIC:
            lat_gc, r = geodetic_to_geocentric(lat, r)
            b_gc = self._geocentric_field(date, r, lat_gc, lon)
            # NOTE: differs by ~0.01 nT from igrf12syn; same result as the
            # MATLAB reference implementation.
            return geocentric_to_geodetic_vector(b_gc, lat_gc, lat)

        return self._geocentric_field(date, r, lat, lon)

    def potential(self, date: float, position: Sequence[float],
                  show_warnings: bool = True) -> float:
        """
        Compute the scalar magnetic potential at a geocentric position.

        Args:
            date: Fractional year A.D.
            position: (distance from Earth center [m], geocentric latitude [rad],
                longitude [rad])
            show_warnings: Warn when the date needs secular extrapolation

        Returns:
            Potential [nT km]
        """
        r, lat, lon = position
        self.validate(date, lat, lon, show_warnings)

        theta, phi, r_km = self._spherical(r, lat, lon)
        coefficients = interpolate_coefficients(self.coefficients, date)
        P, _ = legendre_schmidt(theta, coefficients.max_degree)

        a = REFERENCE_RADIUS_KM
        V = 0.0
        for n in range(1, coefficients.max_degree + 1):
            V_n = 0.0
            for m in range(n + 1):
                g_nm, h_nm = coefficients.gh(n, m)
                V_n += (g_nm * np.cos(m * phi) + h_nm * np.sin(m * phi)) * P[n, m]
            V += (a / r_km)**(n + 1) * V_n

        return a * V

    def _geocentric_field(self, date: float, r: float, lat: float, lon: float) -> np.ndarray:
        theta, phi, r_km = self._spherical(r, lat, lon)

        coefficients = interpolate_coefficients(self.coefficients, date)
        P, dP = legendre_schmidt(theta, coefficients.max_degree)

        dVr, dVtheta, dVphi = synthesize(theta, phi, r_km, coefficients, P, dP)

        return assemble_field(theta, r_km, dVr, dVtheta, dVphi)

    @staticmethod
    def _spherical(r: float, lat: float, lon: float) -> Tuple[float, float, float]:
        """Colatitude, east longitude [0, 2pi) and radius [km]."""
        theta = np.pi / 2 - lat
        phi = lon if lon >= 0 else 2 * np.pi + lon
        return theta, phi, r / 1000.0

    def __repr__(self) -> str:
        return f"IGRF({self.coefficients!r})"


# Process-wide model on the built-in table
_DEFAULT_MODEL = IGRF()


def igrf(date: float,
         position: Sequence[float],
         frame: Union[Frame, str] = Frame.GEOCENTRIC,
         show_warnings: bool = True) -> np.ndarray:
    """
    Compute the geomagnetic field vector with the built-in IGRF-12 table.

    See :meth:`IGRF.field` for the meaning of the arguments.

    Returns:
        Field vector [nT] (north, east, down)
    """
    return _DEFAULT_MODEL.field(date, position, frame, show_warnings)
