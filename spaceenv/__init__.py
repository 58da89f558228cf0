"""
spaceenv Space Environment Toolbox
==================================

Python toolbox of space environment models for spacecraft simulation.

Components:
- IGRF geomagnetic field model (IGRF-12 coefficients, degree 13)
- Schmidt quasi-normalized associated Legendre functions
- WGS-84 geodetic/geocentric conversions
- Local and global frame rotations (NED, ECEF, ECI)
- Simulation wrapper giving the field in ECEF/ECI/body axes
"""

__version__ = "1.0.0"

from spaceenv.coordinates.frames import Frame
from spaceenv.core.exceptions import AccuracyAdvisory, DomainError
from spaceenv.environment.igrf import IGRF, igrf
from spaceenv.environment.magnetic_field import MagneticFieldModel

__all__ = [
    'Frame',
    'AccuracyAdvisory',
    'DomainError',
    'IGRF',
    'igrf',
    'MagneticFieldModel',
]
