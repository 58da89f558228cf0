import numpy as np
import pytest

from spaceenv.coordinates.ellipsoid import (
    WGS84_A,
    WGS84_B,
    geocentric_to_geodetic,
    geodetic_to_ecef,
    geodetic_to_geocentric,
)
from spaceenv.coordinates.frames import (
    Frame,
    ecef_to_eci_matrix,
    geocentric_to_geodetic_vector,
    ned_to_ecef_matrix,
    rotation_y,
)


def test_equator_is_on_semi_major_axis():
    lat_gc, r = geodetic_to_geocentric(0.0, 0.0)

    assert lat_gc == 0.0
    assert r == pytest.approx(WGS84_A)


def test_pole_is_on_semi_minor_axis():
    lat_gc, r = geodetic_to_geocentric(np.pi / 2, 0.0)

    assert lat_gc == pytest.approx(np.pi / 2)
    assert r == pytest.approx(WGS84_B)
    assert r == pytest.approx(6356752.314, abs=1e-3)


def test_geocentric_latitude_is_smaller_in_magnitude():
    for lat in (0.3, -0.3, 0.8, -1.2):
        lat_gc, _ = geodetic_to_geocentric(lat, 0.0)
        assert abs(lat_gc) < abs(lat)
        assert np.sign(lat_gc) == np.sign(lat)


@pytest.mark.parametrize("lat, h", [
    (0.0, 0.0),
    (0.5, 400e3),
    (-0.9, 35786e3),
    (1.5, -100.0),
    (np.pi / 2, 500e3),
])
def test_geocentric_round_trip(lat, h):
    lat_gc, r = geodetic_to_geocentric(lat, h)
    lat_back, h_back = geocentric_to_geodetic(lat_gc, r)

    assert lat_back == pytest.approx(lat, abs=1e-10)
    assert h_back == pytest.approx(h, abs=1e-4)


def test_ecef_radius_matches_geocentric_radius():
    lat, lon, h = 0.7, -2.1, 1200.0

    position = geodetic_to_ecef(lat, lon, h)
    lat_gc, r = geodetic_to_geocentric(lat, h)

    assert np.linalg.norm(position) == pytest.approx(r)
    assert np.arcsin(position[2] / r) == pytest.approx(lat_gc)
    assert np.arctan2(position[1], position[0]) == pytest.approx(lon)


def test_rotation_y_is_orthonormal():
    R = rotation_y(0.37)

    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-15)
    assert np.linalg.det(R) == pytest.approx(1.0)
    np.testing.assert_allclose(rotation_y(0.0), np.eye(3))


def test_vector_rotation_keeps_east_and_norm():
    b = np.array([20000.0, -3000.0, 40000.0])

    b_gd = geocentric_to_geodetic_vector(b, 0.80, 0.81)

    assert b_gd[1] == b[1]
    assert np.linalg.norm(b_gd) == pytest.approx(np.linalg.norm(b))


def test_ned_axes_at_equator_and_greenwich():
    R = ned_to_ecef_matrix(0.0, 0.0)

    np.testing.assert_allclose(R @ [1, 0, 0], [0, 0, 1], atol=1e-15)  # north -> +Z
    np.testing.assert_allclose(R @ [0, 1, 0], [0, 1, 0], atol=1e-15)  # east -> +Y
    np.testing.assert_allclose(R @ [0, 0, 1], [-1, 0, 0], atol=1e-15)  # down -> -X


def test_ned_down_points_to_earth_center():
    lat, lon = 0.6, 2.2
    down = ned_to_ecef_matrix(lat, lon) @ [0, 0, 1]
    position = geodetic_to_ecef(lat, lon, 0.0)

    # Geocentric axes: down is anti-parallel to the position vector
    unit = np.array([np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)])
    np.testing.assert_allclose(down, -unit, atol=1e-15)
    assert np.dot(down, position) < 0


def test_earth_rotation_matrix():
    np.testing.assert_allclose(ecef_to_eci_matrix(0.0), np.eye(3))

    R = ecef_to_eci_matrix(np.pi / 2)
    np.testing.assert_allclose(R @ [1, 0, 0], [0, 1, 0], atol=1e-15)
    np.testing.assert_allclose(R @ [0, 0, 1], [0, 0, 1], atol=1e-15)


def test_frame_from_string():
    assert Frame("geodetic") is Frame.GEODETIC
    assert Frame("geocentric") is Frame.GEOCENTRIC

    with pytest.raises(ValueError):
        Frame("body")
