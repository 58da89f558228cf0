"""
Toolbox Configuration
=====================

Parameters of the environment models.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..coordinates.frames import Frame


@dataclass
class GeomagneticConfig:
    """Geomagnetic field model configuration."""
    # Warn when the date relies on secular extrapolation
    show_warnings: bool = True

    # Representation of positions and output vectors
    frame: Frame = Frame.GEODETIC

    # IAGA coefficient file; None uses the built-in IGRF-12 table
    coefficients_file: Optional[Path] = None

    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        self.frame = Frame(self.frame)
        if self.coefficients_file is not None:
            self.coefficients_file = Path(self.coefficients_file)
            assert self.coefficients_file.is_file(), \
                f"Coefficient file not found: {self.coefficients_file}"


def create_default_config() -> GeomagneticConfig:
    """Create configuration with geodetic inputs and warnings enabled."""
    return GeomagneticConfig()


def create_geocentric_config(show_warnings: bool = True) -> GeomagneticConfig:
    """Create configuration for geocentric positions and axes."""
    return GeomagneticConfig(
        show_warnings=show_warnings,
        frame=Frame.GEOCENTRIC,
    )
