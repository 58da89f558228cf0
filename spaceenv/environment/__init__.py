"""
Environment Module
==================

Space environment models for simulation.
"""

from .igrf import IGRF, igrf, field_elements
from .igrf_coefficients import IGRF12, CoefficientTable
from .magnetic_field import MagneticFieldModel

__all__ = [
    'IGRF',
    'igrf',
    'field_elements',
    'IGRF12',
    'CoefficientTable',
    'MagneticFieldModel',
]
