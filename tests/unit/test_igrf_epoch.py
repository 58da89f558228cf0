import numpy as np
import pytest

from spaceenv.environment.igrf import interpolate_coefficients, select_epoch
from spaceenv.environment.igrf_coefficients import IGRF12, coefficient_row

G10 = coefficient_row(1, 0)
G11 = coefficient_row(1, 1)


@pytest.mark.parametrize("date, index, epoch, max_degree", [
    (1900.0, 1, 1900.0, 10),
    (1994.99, 19, 1990.0, 10),
    (1995.0, 20, 1995.0, 13),
    (2004.26, 21, 2000.0, 13),
    (2015.0, 24, 2015.0, 13),
    (2019.9, 24, 2015.0, 13),
    (2022.0, 24, 2015.0, 13),
    (2025.0, 24, 2015.0, 13),
])
def test_epoch_selection(date, index, epoch, max_degree):
    idx, epoch_year, delta_t, n_max = select_epoch(IGRF12, date)

    assert idx == index
    assert epoch_year == epoch
    assert delta_t == pytest.approx(date - epoch)
    assert n_max == max_degree


def test_extrapolation_elapsed_time_exceeds_epoch_step():
    _, epoch_year, delta_t, _ = select_epoch(IGRF12, 2024.5)

    assert epoch_year == 2015.0
    assert delta_t == pytest.approx(9.5)


def test_coefficients_match_table_at_epoch_boundaries():
    for column, year in enumerate(IGRF12.epochs[:-1]):
        coeffs = interpolate_coefficients(IGRF12, float(year))

        np.testing.assert_allclose(coeffs.g, IGRF12.g[:, column])
        np.testing.assert_allclose(coeffs.h, IGRF12.h[:, column])


def test_coefficients_are_linear_between_epochs():
    mid = interpolate_coefficients(IGRF12, 2002.5)

    assert mid.gh(1, 0)[0] == pytest.approx((-29619.4 + -29554.63) / 2)
    np.testing.assert_allclose(mid.g, 0.5 * (IGRF12.g[:, 20] + IGRF12.g[:, 21]), atol=1e-9)

    # Approaching the next epoch reaches its tabulated value
    late = interpolate_coefficients(IGRF12, 2004.999999)
    np.testing.assert_allclose(late.g, IGRF12.g[:, 21], atol=1e-3)


def test_secular_variation_after_last_epoch():
    for date in (2016.0, 2021.0, 2023.5):
        coeffs = interpolate_coefficients(IGRF12, date)
        dt = date - 2015.0

        np.testing.assert_allclose(coeffs.g, IGRF12.g[:, 23] + IGRF12.g[:, -1] * dt)
        np.testing.assert_allclose(coeffs.h, IGRF12.h[:, 23] + IGRF12.h[:, -1] * dt)


def test_extrapolated_values_are_consistent_between_dates():
    d1 = interpolate_coefficients(IGRF12, 2021.0)
    d2 = interpolate_coefficients(IGRF12, 2023.0)

    assert d1.g[G10] == pytest.approx(-29442.0 + 10.3 * 6)
    assert d2.h[G11] == pytest.approx(4797.1 - 26.6 * 8)
    np.testing.assert_allclose((d2.g - d1.g) / 2.0, IGRF12.g[:, -1], atol=1e-9)
