#!/usr/bin/env python3
"""
IGRF Field Report
=================

Example script printing the geomagnetic field at a few locations.

Usage:
  python3 -m spaceenv.examples.field_report
  python3 -m spaceenv.examples.field_report --date 2010.5 --lat -23.55 --lon -46.63 --alt 0.76
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from spaceenv.coordinates.frames import Frame
from spaceenv.core.config import GeomagneticConfig
from spaceenv.core.logging_utils import setup_logging
from spaceenv.environment.igrf import IGRF, field_elements
from spaceenv.environment.igrf_coefficients import CoefficientTable

logger = logging.getLogger(__name__)

SAMPLE_SITES = [
    ("Equator / Greenwich", 0.0, 0.0),
    ("Sao Paulo", -23.55, -46.63),
    ("Tromso", 69.65, 18.96),
    ("North Pole", 90.0, 0.0),
]


def print_site(model: IGRF, date: float, name: str, lat_deg: float, lon_deg: float,
               alt_km: float, frame: Frame, show_warnings: bool = True):
    """Print field vector and magnetic elements for one site."""
    position = (alt_km * 1000.0, np.radians(lat_deg), np.radians(lon_deg))
    b = model.field(date, position, frame, show_warnings)
    elements = field_elements(b)

    print(f"\n{name} ({lat_deg:.2f}°, {lon_deg:.2f}°, {alt_km:.1f} km):")
    print(f"  North: {b[0]:10.1f} nT")
    print(f"  East:  {b[1]:10.1f} nT")
    print(f"  Down:  {b[2]:10.1f} nT")
    print(f"  Total intensity: {elements['total_intensity_nT']:.1f} nT")
    print(f"  Declination: {elements['declination_deg']:.2f}°")
    print(f"  Inclination: {elements['inclination_deg']:.2f}°")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="IGRF field report")
    parser.add_argument('--date', type=float, default=2015.0, help='Fractional year')
    parser.add_argument('--lat', type=float, help='Geodetic latitude [deg]')
    parser.add_argument('--lon', type=float, default=0.0, help='Longitude [deg]')
    parser.add_argument('--alt', type=float, default=0.0, help='Altitude above WGS-84 [km]')
    parser.add_argument('--coefficients', type=Path, help='IAGA coefficient file')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    config = GeomagneticConfig(coefficients_file=args.coefficients, verbose=args.verbose)
    setup_logging(config.verbose)

    if config.coefficients_file is not None:
        model = IGRF(CoefficientTable.from_igrf_file(config.coefficients_file))
    else:
        model = IGRF()
    logger.info("Evaluating %r at %.3f", model, args.date)

    print("=" * 60)
    print(f"IGRF Field Report - {args.date:.3f}")
    print("=" * 60)

    if args.lat is not None:
        sites = [("Requested site", args.lat, args.lon)]
    else:
        sites = SAMPLE_SITES

    for name, lat_deg, lon_deg in sites:
        print_site(model, args.date, name, lat_deg, lon_deg, args.alt, config.frame,
                   config.show_warnings)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
