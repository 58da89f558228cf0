"""
Toolbox Core Module
===================

Configuration, errors, logging and time helpers.
"""

from .config import GeomagneticConfig
from .exceptions import AccuracyAdvisory, DomainError
from .logging_utils import setup_logging
from .time_manager import decimal_year, datetime_to_jd, gmst

__all__ = [
    'GeomagneticConfig',
    'AccuracyAdvisory',
    'DomainError',
    'setup_logging',
    'decimal_year',
    'datetime_to_jd',
    'gmst',
]
