from datetime import datetime

import numpy as np
import pytest

from spaceenv.coordinates.frames import Frame
from spaceenv.core.config import (
    GeomagneticConfig,
    create_default_config,
    create_geocentric_config,
)
from spaceenv.core.time_manager import datetime_to_jd, decimal_year, gmst, is_leap_year


def test_leap_years():
    assert is_leap_year(2004)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert not is_leap_year(2015)


def test_decimal_year():
    assert decimal_year(datetime(2015, 1, 1)) == 2015.0
    assert decimal_year(datetime(2015, 7, 2, 12)) == pytest.approx(2015.5)

    # Leap year: 183 days elapsed out of 366
    assert decimal_year(datetime(2004, 7, 2)) == pytest.approx(2004.5)


def test_julian_date_at_j2000():
    assert datetime_to_jd(datetime(2000, 1, 1, 12)) == pytest.approx(2451545.0)
    assert datetime_to_jd(datetime(2000, 1, 1, 0)) == pytest.approx(2451544.5)


def test_gmst_at_j2000():
    # 280.46061837 deg
    assert gmst(2451545.0) == pytest.approx(4.894961213, abs=1e-6)


def test_gmst_advances_one_sidereal_turn_per_sidereal_day():
    sidereal_day = 1.0 / 1.00273790935
    start = gmst(2455000.25)

    quarter_turn = gmst(2455000.25 + 0.25 * sidereal_day)
    assert quarter_turn == pytest.approx((start + np.pi / 2) % (2 * np.pi), abs=1e-6)


def test_default_config():
    config = create_default_config()

    assert config.frame is Frame.GEODETIC
    assert config.show_warnings
    assert config.coefficients_file is None


def test_geocentric_config():
    config = create_geocentric_config(show_warnings=False)

    assert config.frame is Frame.GEOCENTRIC
    assert not config.show_warnings


def test_frame_string_is_converted():
    assert GeomagneticConfig(frame="geocentric").frame is Frame.GEOCENTRIC


def test_missing_coefficient_file_is_rejected(tmp_path):
    with pytest.raises(AssertionError):
        GeomagneticConfig(coefficients_file=tmp_path / "missing.txt")
