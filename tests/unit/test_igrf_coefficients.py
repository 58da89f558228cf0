import numpy as np
import pytest

from spaceenv.environment.igrf_coefficients import (
    IGRF12,
    CoefficientTable,
    coefficient_row,
    rows_for_degree,
)


def test_builtin_table_layout():
    assert IGRF12.max_degree == 13
    assert IGRF12.g.shape == IGRF12.h.shape == (104, 25)
    assert IGRF12.first_epoch == 1900.0
    assert IGRF12.last_epoch == 2015.0
    assert IGRF12.extrapolation_start == 2020.0
    assert IGRF12.valid_until == 2025.0


def test_builtin_table_known_values():
    # g10, g11, h11 of the first and last epochs
    assert IGRF12.coefficient(1, 0, 0)[0] == -31543.0
    assert IGRF12.coefficient(1, 1, 0) == (-2298.0, 5922.0)
    assert IGRF12.coefficient(1, 0, 23)[0] == -29442.0
    assert IGRF12.coefficient(1, 1, 23) == (-1501.0, 4797.1)

    # Secular variation column
    assert IGRF12.coefficient(1, 0, -1)[0] == 10.3
    assert IGRF12.coefficient(1, 1, -1) == (18.1, -26.6)
    assert IGRF12.coefficient(8, 8, -1) == (0.3, 0.0)


def test_builtin_table_high_degrees():
    # Degrees 11 to 13 start with the 2000 epoch (column 20)
    assert IGRF12.coefficient(11, 0, 20)[0] == 2.7
    assert IGRF12.coefficient(11, 0, 22)[0] == 3.05
    assert IGRF12.coefficient(11, 1, 21) == (-1.60, 0.26)
    assert IGRF12.coefficient(13, 13, 23) == (-0.3, -0.8)
    assert IGRF12.coefficient(10, 8, 20)[1] == 0.2

    high_rows = slice(coefficient_row(11, 0), None)
    assert np.all(IGRF12.g[high_rows, :20] == 0.0)
    assert np.all(IGRF12.g[high_rows, -1] == 0.0)
    assert np.any(IGRF12.g[high_rows, 20:24] != 0.0)


def test_dgrf_2010_keeps_two_decimals():
    assert IGRF12.coefficient(1, 0, 22)[0] == -29496.57
    assert IGRF12.coefficient(1, 1, 22) == (-1586.42, 4944.26)


def test_h_is_zero_for_zonal_terms():
    for n in range(1, 14):
        assert np.all(IGRF12.h[coefficient_row(n, 0)] == 0.0)


def test_table_is_read_only():
    with pytest.raises(ValueError):
        IGRF12.g[0, 0] = 0.0


def test_row_layout():
    assert coefficient_row(1, 0) == 0
    assert coefficient_row(1, 1) == 1
    assert coefficient_row(2, 0) == 2
    assert coefficient_row(13, 13) == 103
    assert rows_for_degree(10) == 65
    assert rows_for_degree(13) == 104


def test_constructor_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        CoefficientTable(np.zeros((5, 3)), np.zeros((5, 4)))

    with pytest.raises(ValueError):
        CoefficientTable(np.zeros((4, 3)), np.zeros((4, 3)))


def test_load_iaga_coefficient_file(tmp_path):
    path = tmp_path / "igrf_test_coeffs.txt"
    path.write_text(
        "# Test coefficients\n"
        "c/s deg ord IGRF IGRF SV\n"
        "g/h n m 2010.0 2015.0 2015-20\n"
        "g 1 0 -29496.6 -29442.0 10.3\n"
        "g 1 1 -1586.4 -1501.0 18.1\n"
        "h 1 1 4944.3 4797.1 -26.6\n",
        encoding="utf-8",
    )

    table = CoefficientTable.from_igrf_file(path)

    assert table.name == "igrf_test_coeffs"
    assert table.max_degree == 1
    assert table.first_epoch == 2010.0
    assert table.last_epoch == 2015.0
    assert table.coefficient(1, 1, 1) == (-1501.0, 4797.1)
    assert table.coefficient(1, 0, 2) == (10.3, 0.0)


def test_load_rejects_file_without_header(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("g 1 0 -29496.6 -29442.0 10.3\n", encoding="utf-8")

    with pytest.raises(ValueError):
        CoefficientTable.from_igrf_file(path)
