from datetime import datetime

import numpy as np
import pytest

from spaceenv.coordinates.frames import Frame, ned_to_ecef_matrix
from spaceenv.core.config import GeomagneticConfig, create_geocentric_config
from spaceenv.core.exceptions import DomainError
from spaceenv.environment import magnetic_field
from spaceenv.environment.igrf import igrf
from spaceenv.environment.magnetic_field import MagneticFieldModel


@pytest.fixture
def model():
    return MagneticFieldModel(datetime(2010, 1, 1))


def test_date_is_converted_to_decimal_year(model):
    assert model.year == 2010.0

    model.set_date(datetime(2012, 7, 2))
    assert 2012.49 < model.year < 2012.51


def test_field_ned_is_geodetic_igrf_in_tesla(model):
    b = model.field_ned(30.0, 45.0, 400.0)
    expected = igrf(2010.0, (400e3, np.radians(30.0), np.radians(45.0)), Frame.GEODETIC)

    np.testing.assert_allclose(b, expected * 1e-9)

    # LEO field strength is tens of microtesla
    assert 10e-6 < np.linalg.norm(b) < 70e-6


def test_geocentric_configuration_uses_reference_sphere():
    model = MagneticFieldModel(datetime(2010, 1, 1), create_geocentric_config())

    b = model.field_ned(30.0, 45.0, 400.0)
    expected = igrf(2010.0, (6771.2e3, np.radians(30.0), np.radians(45.0)), Frame.GEOCENTRIC)

    np.testing.assert_allclose(b, expected * 1e-9)


def test_field_ecef_rotates_geocentric_ned(model):
    position_km = np.array([4000.0, -3000.0, 4500.0])

    b_ecef = model.field_ecef(position_km)

    r = np.linalg.norm(position_km)
    lat = np.arcsin(position_km[2] / r)
    lon = np.arctan2(position_km[1], position_km[0])
    b_ned = igrf(2010.0, (r * 1000.0, lat, lon)) * 1e-9

    assert np.linalg.norm(b_ecef) == pytest.approx(np.linalg.norm(b_ned))
    np.testing.assert_allclose(ned_to_ecef_matrix(lat, lon).T @ b_ecef, b_ned)


def test_field_ecef_at_origin_is_zero(model):
    np.testing.assert_array_equal(model.field_ecef(np.zeros(3)), np.zeros(3))


def test_field_eci_without_earth_rotation_equals_ecef(model):
    position_km = np.array([6800.0, 500.0, -200.0])

    np.testing.assert_allclose(model.field_eci(position_km, 0.0), model.field_ecef(position_km))


def test_field_eci_rotates_with_gmst(model):
    position_eci = np.array([0.0, 7000.0, 0.0])

    # At GMST = 90 deg the ECI Y axis is the ECEF X axis
    b_eci = model.field_eci(position_eci, np.pi / 2)
    b_ecef = model.field_ecef(np.array([7000.0, 0.0, 0.0]))

    np.testing.assert_allclose(b_eci, [-b_ecef[1], b_ecef[0], b_ecef[2]], atol=1e-18)


def test_body_field_with_identity_attitude(model):
    position = np.array([7000.0, 0.0, 0.0])
    q = np.array([1.0, 0.0, 0.0, 0.0])

    b_body = model.get_field_body(position, q, 0.3)

    np.testing.assert_allclose(b_body, model.field_eci(position, 0.3))
    np.testing.assert_allclose(model.get_field_body_uT(position, q, 0.3), b_body * 1e6)


def test_body_field_keeps_magnitude(model):
    position = np.array([5000.0, 4000.0, 2000.0])
    q = np.array([0.7, 0.1, -0.5, 0.3])
    q = q / np.linalg.norm(q)

    b_body = model.get_field_body(position, q, 1.1)

    assert np.linalg.norm(b_body) == pytest.approx(np.linalg.norm(model.field_eci(position, 1.1)))


def test_coefficient_file_from_config(tmp_path):
    path = tmp_path / "dipole.txt"
    path.write_text(
        "c/s deg ord IGRF IGRF SV\n"
        "g/h n m 2010.0 2015.0 2015-20\n"
        "g 1 0 -29496.6 -29442.0 10.3\n"
        "g 1 1 -1586.4 -1501.0 18.1\n"
        "h 1 1 4944.3 4797.1 -26.6\n",
        encoding="utf-8",
    )

    model = MagneticFieldModel(datetime(2012, 1, 1), GeomagneticConfig(coefficients_file=path))

    assert model.igrf.coefficients.max_degree == 1
    assert model.igrf.coefficients.name == "dipole"

    # Axial dipole term at the pole: B_down = -2 * g10 on the reference sphere
    b = model.field_ned(90.0, 0.0, 0.0)
    assert np.all(np.isfinite(b))
    assert b[2] > 0


def _freeze_now(monkeypatch, now):
    class FrozenDatetime(datetime):
        @classmethod
        def now(cls, tz=None):
            return cls(now.year, now.month, now.day)

    monkeypatch.setattr(magnetic_field, "datetime", FrozenDatetime)


def test_default_date_is_current_time(monkeypatch):
    _freeze_now(monkeypatch, datetime(2012, 3, 1))

    model = MagneticFieldModel()

    assert 2012.16 < model.year < 2012.17
    assert np.all(np.isfinite(model.field_ned(10.0, 20.0, 500.0)))


def test_current_time_past_validity_is_rejected_at_construction(monkeypatch):
    _freeze_now(monkeypatch, datetime(2026, 10, 18))

    with pytest.raises(DomainError, match=r"2026-10-18 .*\[1900, 2025\]"):
        MagneticFieldModel()


def test_set_date_outside_validity_keeps_previous_date(model):
    with pytest.raises(DomainError):
        model.set_date(datetime(1899, 6, 1))

    assert model.year == 2010.0
    assert model.date == datetime(2010, 1, 1)
