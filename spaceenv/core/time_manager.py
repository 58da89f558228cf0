"""
Time Helpers
============

Conversions between calendar dates and the time scales used by the
environment models (decimal year, Julian date, sidereal time).
"""

import numpy as np
from datetime import datetime


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def decimal_year(dt: datetime) -> float:
    """
    Convert datetime to fractional year A.D.

    Args:
        dt: datetime object (naive, UTC)

    Returns:
        Year with the elapsed fraction of the year, e.g. 2004.2596
    """
    start = datetime(dt.year, 1, 1)
    days_in_year = 366.0 if is_leap_year(dt.year) else 365.0
    elapsed = (dt - start).total_seconds() / 86400.0
    return dt.year + elapsed / days_in_year


def datetime_to_jd(dt: datetime) -> float:
    """
    Convert datetime to Julian Date.

    Args:
        dt: datetime object

    Returns:
        Julian Date
    """
    year = dt.year
    month = dt.month
    day = dt.day
    hour = dt.hour
    minute = dt.minute
    second = dt.second + dt.microsecond / 1e6

    if month <= 2:
        year -= 1
        month += 12

    A = int(year / 100)
    B = 2 - A + int(A / 4)

    jd = int(365.25 * (year + 4716)) + \
         int(30.6001 * (month + 1)) + \
         day + B - 1524.5 + \
         (hour + minute / 60 + second / 3600) / 24

    return jd


def gmst(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time.

    Args:
        jd: Julian Date (UT1 ~ UTC)

    Returns:
        GMST in radians [0, 2pi)
    """
    jd0 = np.floor(jd - 0.5) + 0.5  # previous 0h UT
    t = (jd0 - 2451545.0) / 36525.0  # Julian centuries since J2000

    # GMST in seconds at 0h UT
    gmst_sec = 24110.54841 + \
               8640184.812866 * t + \
               0.093104 * t**2 - \
               6.2e-6 * t**3

    # Add rotation for time of day
    gmst_sec += 86400.0 * 1.00273790935 * (jd - jd0)

    return (gmst_sec / 86400.0 * 2 * np.pi) % (2 * np.pi)
