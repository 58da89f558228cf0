"""
IGRF Coefficient Table
======================

Gauss coefficients of the International Geomagnetic Reference Field.

The default table (``IGRF12``) holds the IGRF-12 coefficients for the epochs
1900 to 2015 plus the 2015-2020 secular variation. Rows are ordered by degree
``n`` and order ``m`` (n = 1..13, m = 0..n), columns by epoch, and the last
column is the secular variation [nT/year] of the latest epoch.

Epochs before 2000 are defined up to degree 10 and the secular variation up
to degree 8; the remaining rows are zero, as in the IAGA file. Other
generations can be loaded with ``CoefficientTable.from_igrf_file``.
"""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

logger = logging.getLogger(__name__)

EPOCH_STEP_YEARS = 5
IGRF_MAX_DEGREE = 13


def coefficient_row(n: int, m: int) -> int:
    """Row of the coefficient (n, m) in a table."""
    return n * (n + 1) // 2 - 1 + m


def rows_for_degree(max_degree: int) -> int:
    """Number of (n, m) rows needed up to ``max_degree``."""
    return max_degree * (max_degree + 3) // 2


class CoefficientTable:
    """
    Immutable Gauss coefficient table.

    Attributes:
        g: Cosine coefficients [nT], shape (rows, epochs + 1)
        h: Sine coefficients [nT], same shape as ``g``
        first_epoch: Year of the first column
        name: Model name
    """

    def __init__(self,
                 g: np.ndarray,
                 h: np.ndarray,
                 first_epoch: float = 1900.0,
                 name: str = "custom"):
        g = np.array(g, dtype=np.float64)
        h = np.array(h, dtype=np.float64)

        if g.shape != h.shape:
            raise ValueError(f"G and H shapes differ: {g.shape} != {h.shape}")

        if g.ndim != 2 or g.shape[1] < 2:
            raise ValueError("Table needs at least one epoch and the secular variation column")

        max_degree = 0
        while rows_for_degree(max_degree) < g.shape[0]:
            max_degree += 1

        if rows_for_degree(max_degree) != g.shape[0]:
            raise ValueError(f"{g.shape[0]} rows do not match a complete degree/order layout")

        # H is not defined for m = 0
        for n in range(1, max_degree + 1):
            h[coefficient_row(n, 0), :] = 0.0

        g.flags.writeable = False
        h.flags.writeable = False

        self.g = g
        self.h = h
        self.first_epoch = float(first_epoch)
        self.name = name
        self.max_degree = max_degree

    @property
    def num_epochs(self) -> int:
        """Number of tabulated epochs (secular column excluded)."""
        return self.g.shape[1] - 1

    @property
    def last_epoch(self) -> float:
        """Year of the last tabulated epoch."""
        return self.first_epoch + (self.num_epochs - 1) * EPOCH_STEP_YEARS

    @property
    def extrapolation_start(self) -> float:
        """Date after which the field relies on secular extrapolation."""
        return self.last_epoch + EPOCH_STEP_YEARS

    @property
    def valid_until(self) -> float:
        """Last date accepted by the model."""
        return self.last_epoch + 2 * EPOCH_STEP_YEARS

    @property
    def epochs(self) -> np.ndarray:
        """Years of the tabulated epochs."""
        return self.first_epoch + EPOCH_STEP_YEARS * np.arange(self.num_epochs)

    def coefficient(self, n: int, m: int, column: int) -> tuple:
        """Return (g, h) of degree ``n`` and order ``m`` in a column."""
        row = coefficient_row(n, m)
        return self.g[row, column], self.h[row, column]

    @classmethod
    def from_igrf_file(cls, path: Union[str, Path], name: str = None) -> "CoefficientTable":
        """
        Load a table from an IAGA coefficient file (igrfNNcoeffs.txt).

        The header line starting with ``g/h`` lists the epochs; the last
        column is the secular variation. Data lines read
        ``g|h  n  m  value_1 ... value_k  sv``.

        Args:
            path: Coefficient file
            name: Model name (default: file stem)

        Returns:
            Coefficient table
        """
        path = Path(path)
        epochs: List[float] = []
        entries = []

        with path.open("r", encoding="utf-8") as f:
            for line in f:
                tokens = line.split()
                if not tokens or tokens[0].startswith("#") or tokens[0] == "c/s":
                    continue

                if tokens[0] == "g/h":
                    epochs = [float(t) for t in tokens[3:-1]]
                    continue

                if tokens[0] not in ("g", "h"):
                    raise ValueError(f"Unexpected line in {path.name}: {line.strip()!r}")

                entries.append((tokens[0], int(tokens[1]), int(tokens[2]),
                                [float(t) for t in tokens[3:]]))

        if not epochs:
            raise ValueError(f"No 'g/h' header with epochs found in {path.name}")

        max_degree = max(n for _, n, _, _ in entries)
        g = np.zeros((rows_for_degree(max_degree), len(epochs) + 1))
        h = np.zeros_like(g)

        for kind, n, m, values in entries:
            if len(values) != len(epochs) + 1:
                raise ValueError(f"Coefficient {kind}({n},{m}) has {len(values)} values, "
                                 f"expected {len(epochs) + 1}")
            target = g if kind == "g" else h
            target[coefficient_row(n, m), :] = values

        logger.debug("Loaded %d coefficients up to degree %d from %s",
                     len(entries), max_degree, path)

        return cls(g, h, first_epoch=epochs[0], name=name or path.stem)

    def __repr__(self) -> str:
        return (f"CoefficientTable(name={self.name!r}, epochs={self.first_epoch:.0f}-"
                f"{self.last_epoch:.0f}, max_degree={self.max_degree})")


# Cosine coefficients per epoch [nT], degrees 1 to 10 (1 to 13 from 2000)
_G_EPOCHS = {
    1900: (
        -31543.0, -2298.0, -677.0, 2905.0, 924.0, 1022.0, -1469.0, 1256.0,
        572.0, 876.0, 628.0, 660.0, -361.0, 134.0, -184.0, 328.0,
        264.0, 5.0, -86.0, -16.0, 63.0, 61.0, -11.0, -217.0,
        -58.0, 59.0, -90.0, 70.0, -55.0, 0.0, 34.0, -41.0,
        -21.0, 18.0, 6.0, 11.0, 8.0, -4.0, -9.0, 1.0,
        2.0, -9.0, 5.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, -1.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 2.0, 2.0,
        0.0,
    ),
    1905: (
        -31464.0, -2298.0, -728.0, 2928.0, 1041.0, 1037.0, -1494.0, 1239.0,
        635.0, 880.0, 643.0, 653.0, -380.0, 146.0, -192.0, 328.0,
        259.0, -1.0, -93.0, -26.0, 62.0, 60.0, -11.0, -221.0,
        -57.0, 57.0, -92.0, 70.0, -54.0, 0.0, 33.0, -41.0,
        -20.0, 18.0, 6.0, 11.0, 8.0, -4.0, -9.0, 1.0,
        2.0, -8.0, 5.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, 0.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 2.0, 2.0,
        0.0,
    ),
    1910: (
        -31354.0, -2297.0, -769.0, 2948.0, 1176.0, 1058.0, -1524.0, 1223.0,
        705.0, 884.0, 660.0, 644.0, -400.0, 160.0, -201.0, 327.0,
        253.0, -9.0, -102.0, -38.0, 62.0, 58.0, -11.0, -224.0,
        -54.0, 54.0, -95.0, 71.0, -54.0, 1.0, 32.0, -40.0,
        -19.0, 18.0, 6.0, 11.0, 8.0, -4.0, -9.0, 1.0,
        2.0, -8.0, 5.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, 0.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 2.0, 2.0,
        0.0,
    ),
    1915: (
        -31212.0, -2306.0, -802.0, 2956.0, 1309.0, 1084.0, -1559.0, 1212.0,
        778.0, 887.0, 678.0, 631.0, -416.0, 178.0, -211.0, 327.0,
        245.0, -16.0, -111.0, -51.0, 61.0, 57.0, -10.0, -228.0,
        -51.0, 49.0, -98.0, 72.0, -54.0, 2.0, 31.0, -38.0,
        -18.0, 19.0, 6.0, 11.0, 8.0, -4.0, -9.0, 2.0,
        3.0, -8.0, 6.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, 0.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 1.0, 2.0,
        0.0,
    ),
    1920: (
        -31060.0, -2317.0, -839.0, 2959.0, 1407.0, 1111.0, -1600.0, 1205.0,
        839.0, 889.0, 695.0, 616.0, -424.0, 199.0, -221.0, 326.0,
        236.0, -23.0, -119.0, -62.0, 61.0, 55.0, -10.0, -233.0,
        -46.0, 44.0, -101.0, 73.0, -54.0, 2.0, 29.0, -37.0,
        -16.0, 19.0, 6.0, 11.0, 7.0, -3.0, -9.0, 2.0,
        4.0, -7.0, 6.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, 0.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 1.0, 3.0,
        0.0,
    ),
    1925: (
        -30926.0, -2318.0, -893.0, 2969.0, 1471.0, 1140.0, -1645.0, 1202.0,
        881.0, 891.0, 711.0, 601.0, -426.0, 217.0, -230.0, 326.0,
        226.0, -28.0, -125.0, -69.0, 61.0, 54.0, -9.0, -238.0,
        -40.0, 39.0, -103.0, 73.0, -54.0, 3.0, 27.0, -35.0,
        -14.0, 19.0, 6.0, 11.0, 7.0, -3.0, -9.0, 2.0,
        4.0, -7.0, 7.0, 8.0, 8.0, 10.0, 1.0, -11.0,
        12.0, 1.0, -2.0, 2.0, 0.0, -1.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 1.0, 3.0,
        0.0,
    ),
    1930: (
        -30805.0, -2316.0, -951.0, 2980.0, 1517.0, 1172.0, -1692.0, 1205.0,
        907.0, 896.0, 727.0, 584.0, -422.0, 234.0, -237.0, 327.0,
        218.0, -32.0, -131.0, -74.0, 60.0, 53.0, -9.0, -242.0,
        -32.0, 32.0, -104.0, 74.0, -54.0, 4.0, 25.0, -34.0,
        -12.0, 18.0, 6.0, 11.0, 7.0, -3.0, -9.0, 2.0,
        5.0, -6.0, 8.0, 8.0, 8.0, 10.0, 1.0, -12.0,
        12.0, 1.0, -2.0, 3.0, 0.0, -2.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 1.0, 3.0,
        0.0,
    ),
    1935: (
        -30715.0, -2306.0, -1018.0, 2984.0, 1550.0, 1206.0, -1740.0, 1215.0,
        918.0, 903.0, 744.0, 565.0, -415.0, 249.0, -241.0, 329.0,
        211.0, -33.0, -136.0, -76.0, 59.0, 53.0, -8.0, -246.0,
        -25.0, 25.0, -106.0, 74.0, -53.0, 4.0, 23.0, -33.0,
        -11.0, 18.0, 6.0, 11.0, 7.0, -3.0, -9.0, 1.0,
        6.0, -6.0, 8.0, 7.0, 8.0, 10.0, 1.0, -12.0,
        11.0, 1.0, -2.0, 3.0, 0.0, -2.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 2.0, 3.0,
        0.0,
    ),
    1940: (
        -30654.0, -2292.0, -1106.0, 2981.0, 1566.0, 1240.0, -1790.0, 1232.0,
        916.0, 914.0, 762.0, 550.0, -405.0, 265.0, -241.0, 334.0,
        208.0, -33.0, -141.0, -76.0, 57.0, 54.0, -7.0, -249.0,
        -18.0, 18.0, -107.0, 74.0, -53.0, 4.0, 20.0, -31.0,
        -9.0, 17.0, 5.0, 11.0, 7.0, -3.0, -10.0, 1.0,
        6.0, -5.0, 9.0, 7.0, 8.0, 10.0, 1.0, -12.0,
        11.0, 1.0, -2.0, 3.0, 1.0, -2.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 6.0, 4.0, 0.0, 2.0, 3.0,
        0.0,
    ),
    1945: (
        -30594.0, -2285.0, -1244.0, 2990.0, 1578.0, 1282.0, -1834.0, 1255.0,
        913.0, 944.0, 776.0, 544.0, -421.0, 304.0, -253.0, 346.0,
        194.0, -20.0, -142.0, -82.0, 59.0, 57.0, 6.0, -246.0,
        -25.0, 21.0, -104.0, 70.0, -40.0, 0.0, 0.0, -29.0,
        -10.0, 15.0, 29.0, 13.0, 7.0, -8.0, -5.0, 9.0,
        7.0, -10.0, 7.0, 2.0, 5.0, -21.0, 1.0, -11.0,
        3.0, 16.0, -3.0, -4.0, -3.0, -4.0, -3.0, 11.0,
        1.0, 2.0, -5.0, -1.0, 8.0, -1.0, -3.0, 5.0,
        -2.0,
    ),
    1950: (
        -30554.0, -2250.0, -1341.0, 2998.0, 1576.0, 1297.0, -1889.0, 1274.0,
        896.0, 954.0, 792.0, 528.0, -408.0, 303.0, -240.0, 349.0,
        211.0, -20.0, -147.0, -76.0, 54.0, 57.0, 4.0, -247.0,
        -16.0, 12.0, -105.0, 65.0, -55.0, 2.0, 1.0, -40.0,
        -7.0, 5.0, 19.0, 22.0, 15.0, -4.0, -1.0, 11.0,
        15.0, -13.0, 5.0, -1.0, 3.0, -7.0, -1.0, -25.0,
        10.0, 5.0, -5.0, -2.0, 3.0, 8.0, -8.0, 4.0,
        -1.0, 13.0, -4.0, 4.0, 12.0, 3.0, 2.0, 10.0,
        3.0,
    ),
    1955: (
        -30500.0, -2215.0, -1440.0, 3003.0, 1581.0, 1302.0, -1944.0, 1288.0,
        882.0, 958.0, 796.0, 510.0, -397.0, 290.0, -229.0, 360.0,
        230.0, -23.0, -152.0, -69.0, 47.0, 57.0, 3.0, -247.0,
        -8.0, 7.0, -107.0, 65.0, -56.0, 2.0, 10.0, -32.0,
        -11.0, 9.0, 18.0, 11.0, 9.0, -6.0, -14.0, 6.0,
        10.0, -7.0, 6.0, 9.0, 4.0, 9.0, -4.0, -5.0,
        2.0, 4.0, 1.0, 2.0, 2.0, 5.0, -3.0, -5.0,
        -1.0, 2.0, -3.0, 7.0, 4.0, -2.0, 6.0, -2.0,
        0.0,
    ),
    1960: (
        -30421.0, -2169.0, -1555.0, 3002.0, 1590.0, 1302.0, -1992.0, 1289.0,
        878.0, 957.0, 800.0, 504.0, -394.0, 269.0, -222.0, 362.0,
        242.0, -26.0, -156.0, -63.0, 46.0, 58.0, 1.0, -237.0,
        -1.0, -2.0, -113.0, 67.0, -56.0, 5.0, 15.0, -32.0,
        -7.0, 17.0, 8.0, 15.0, 6.0, -4.0, -11.0, 2.0,
        10.0, -5.0, 10.0, 8.0, 4.0, 6.0, 0.0, -9.0,
        1.0, 4.0, -1.0, -2.0, 3.0, -1.0, 1.0, -3.0,
        4.0, 0.0, -1.0, 4.0, 6.0, 1.0, -1.0, 2.0,
        0.0,
    ),
    1965: (
        -30334.0, -2119.0, -1662.0, 2997.0, 1594.0, 1297.0, -2038.0, 1292.0,
        856.0, 957.0, 804.0, 479.0, -390.0, 252.0, -219.0, 358.0,
        254.0, -31.0, -157.0, -62.0, 45.0, 61.0, 8.0, -228.0,
        4.0, 1.0, -111.0, 75.0, -57.0, 4.0, 13.0, -26.0,
        -6.0, 13.0, 1.0, 13.0, 5.0, -4.0, -14.0, 0.0,
        8.0, -1.0, 11.0, 4.0, 8.0, 10.0, 2.0, -13.0,
        10.0, -1.0, -1.0, 5.0, 1.0, -2.0, -2.0, -3.0,
        2.0, -5.0, -2.0, 4.0, 4.0, 0.0, 2.0, 2.0,
        0.0,
    ),
    1970: (
        -30220.0, -2068.0, -1781.0, 3000.0, 1611.0, 1287.0, -2091.0, 1278.0,
        838.0, 952.0, 800.0, 461.0, -395.0, 234.0, -216.0, 359.0,
        262.0, -42.0, -160.0, -56.0, 43.0, 64.0, 15.0, -212.0,
        2.0, 3.0, -112.0, 72.0, -57.0, 1.0, 14.0, -22.0,
        -2.0, 13.0, -2.0, 14.0, 6.0, -2.0, -13.0, -3.0,
        5.0, 0.0, 11.0, 3.0, 8.0, 10.0, 2.0, -12.0,
        10.0, -1.0, 0.0, 3.0, 1.0, -1.0, -3.0, -3.0,
        2.0, -5.0, -1.0, 6.0, 4.0, 1.0, 0.0, 3.0,
        -1.0,
    ),
    1975: (
        -30100.0, -2013.0, -1902.0, 3010.0, 1632.0, 1276.0, -2144.0, 1260.0,
        830.0, 946.0, 791.0, 438.0, -405.0, 216.0, -218.0, 356.0,
        264.0, -59.0, -159.0, -49.0, 45.0, 66.0, 28.0, -198.0,
        1.0, 6.0, -111.0, 71.0, -56.0, 1.0, 16.0, -14.0,
        0.0, 12.0, -5.0, 14.0, 6.0, -1.0, -12.0, -8.0,
        4.0, 0.0, 10.0, 1.0, 7.0, 10.0, 2.0, -12.0,
        10.0, -1.0, -1.0, 4.0, 1.0, -2.0, -3.0, -3.0,
        2.0, -5.0, -2.0, 5.0, 4.0, 1.0, 0.0, 3.0,
        -1.0,
    ),
    1980: (
        -29992.0, -1956.0, -1997.0, 3027.0, 1663.0, 1281.0, -2180.0, 1251.0,
        833.0, 938.0, 782.0, 398.0, -419.0, 199.0, -218.0, 357.0,
        261.0, -74.0, -162.0, -48.0, 48.0, 66.0, 42.0, -192.0,
        4.0, 14.0, -108.0, 72.0, -59.0, 2.0, 21.0, -12.0,
        1.0, 11.0, -2.0, 18.0, 6.0, 0.0, -11.0, -7.0,
        4.0, 3.0, 6.0, -1.0, 5.0, 10.0, 1.0, -12.0,
        9.0, -3.0, -1.0, 7.0, 2.0, -5.0, -4.0, -4.0,
        2.0, -5.0, -2.0, 5.0, 3.0, 1.0, 2.0, 3.0,
        0.0,
    ),
    1985: (
        -29873.0, -1905.0, -2072.0, 3044.0, 1687.0, 1296.0, -2208.0, 1247.0,
        829.0, 936.0, 780.0, 361.0, -424.0, 170.0, -214.0, 355.0,
        253.0, -93.0, -164.0, -46.0, 53.0, 65.0, 51.0, -185.0,
        4.0, 16.0, -102.0, 74.0, -62.0, 3.0, 24.0, -6.0,
        4.0, 10.0, 0.0, 21.0, 6.0, 0.0, -11.0, -9.0,
        4.0, 4.0, 4.0, -4.0, 5.0, 10.0, 1.0, -12.0,
        9.0, -3.0, -1.0, 7.0, 1.0, -5.0, -4.0, -4.0,
        3.0, -5.0, -2.0, 5.0, 3.0, 1.0, 2.0, 3.0,
        0.0,
    ),
    1990: (
        -29775.0, -1848.0, -2131.0, 3059.0, 1686.0, 1314.0, -2239.0, 1248.0,
        802.0, 939.0, 780.0, 325.0, -423.0, 141.0, -214.0, 353.0,
        245.0, -109.0, -165.0, -36.0, 61.0, 65.0, 59.0, -178.0,
        3.0, 18.0, -96.0, 77.0, -64.0, 2.0, 26.0, -1.0,
        5.0, 9.0, 0.0, 23.0, 5.0, -1.0, -10.0, -12.0,
        3.0, 4.0, 2.0, -6.0, 4.0, 9.0, 1.0, -12.0,
        9.0, -4.0, -2.0, 7.0, 1.0, -6.0, -3.0, -4.0,
        2.0, -5.0, -2.0, 4.0, 3.0, 1.0, 3.0, 3.0,
        0.0,
    ),
    1995: (
        -29692.0, -1784.0, -2200.0, 3070.0, 1681.0, 1335.0, -2267.0, 1249.0,
        759.0, 940.0, 780.0, 290.0, -418.0, 122.0, -214.0, 352.0,
        235.0, -118.0, -166.0, -17.0, 68.0, 67.0, 68.0, -170.0,
        -1.0, 19.0, -93.0, 77.0, -72.0, 1.0, 28.0, 5.0,
        4.0, 8.0, -2.0, 25.0, 6.0, -6.0, -9.0, -14.0,
        9.0, 6.0, -5.0, -7.0, 4.0, 9.0, 3.0, -10.0,
        8.0, -8.0, -1.0, 10.0, -2.0, -8.0, -3.0, -6.0,
        2.0, -4.0, -1.0, 4.0, 2.0, 2.0, 5.0, 1.0,
        0.0,
    ),
    2000: (
        -29619.4, -1728.2, -2267.7, 3068.4, 1670.9, 1339.6, -2288.0, 1252.1,
        714.5, 932.3, 786.8, 250.0, -403.0, 111.3, -218.8, 351.4,
        222.3, -130.4, -168.6, -12.9, 72.3, 68.2, 74.2, -160.9,
        -5.9, 16.9, -90.4, 79.0, -74.0, 0.0, 33.3, 9.1,
        6.9, 7.3, -1.2, 24.4, 6.6, -9.2, -7.9, -16.6,
        9.1, 7.0, -7.9, -7.0, 5.0, 9.4, 3.0, -8.4,
        6.3, -8.9, -1.5, 9.3, -4.3, -8.2, -2.6, -6.0,
        1.7, -3.1, -0.5, 3.7, 1.0, 2.0, 4.2, 0.3,
        -1.1, 2.7, -1.7, -1.9, 1.5, -0.1, 0.1, -0.7,
        0.7, 1.7, 0.1, 1.2, 4.0, -2.2, -0.3, 0.2,
        0.9, -0.2, 0.9, -0.5, 0.3, -0.3, -0.4, -0.1,
        -0.2, -0.4, -0.2, -0.9, 0.3, 0.1, -0.4, 1.3,
        -0.4, 0.7, -0.4, 0.3, -0.1, 0.4, 0.0, 0.1,
    ),
    2005: (
        -29554.63, -1669.05, -2337.24, 3047.69, 1657.76, 1336.30, -2305.83, 1246.39,
        672.51, 920.55, 797.96, 210.65, -379.86, 100.00, -227.00, 354.41,
        208.95, -136.54, -168.05, -13.55, 73.60, 69.56, 76.74, -151.34,
        -14.58, 14.58, -86.36, 79.88, -74.46, -1.65, 38.73, 12.30,
        9.37, 5.42, 1.94, 24.80, 7.62, -11.73, -6.88, -18.11,
        10.17, 9.36, -11.25, -4.87, 5.58, 9.76, 3.58, -6.94,
        5.01, -10.76, -1.25, 8.76, -6.66, -9.22, -2.17, -6.12,
        1.42, -2.35, -0.15, 3.06, 0.29, 2.06, 3.77, -0.21,
        -2.09, 2.95, -1.60, -1.88, 1.44, -0.31, 0.29, -0.79,
        0.53, 1.80, 0.16, 0.96, 3.99, -2.15, -0.29, 0.21,
        0.89, -0.38, 0.96, -0.30, 0.46, -0.35, -0.36, 0.08,
        -0.49, -0.08, -0.16, -0.88, 0.30, 0.28, -0.43, 1.18,
        -0.37, 0.75, -0.26, 0.35, -0.05, 0.41, -0.10, -0.18,
    ),
    2010: (
        -29496.57, -1586.42, -2396.06, 3026.34, 1668.17, 1339.85, -2326.54, 1232.10,
        633.73, 912.66, 808.97, 166.58, -356.83, 89.40, -230.87, 357.29,
        200.26, -141.05, -163.17, -8.03, 72.78, 68.69, 75.92, -141.40,
        -22.83, 13.10, -78.09, 80.44, -75.00, -4.55, 45.24, 14.00,
        10.46, 1.64, 4.92, 24.41, 8.21, -14.50, -5.59, -19.34,
        11.61, 10.85, -14.05, -3.54, 5.50, 9.45, 3.45, -5.27,
        3.13, -12.38, -0.76, 8.43, -8.42, -10.08, -1.94, -6.24,
        0.89, -1.07, -0.16, 2.45, -0.33, 2.13, 3.09, -1.03,
        -2.80, 3.05, -1.48, -2.03, 1.65, -0.51, 0.54, -0.79,
        0.37, 1.79, 0.12, 0.75, 3.75, -2.12, -0.21, 0.30,
        1.04, -0.63, 0.95, -0.11, 0.52, -0.39, -0.37, 0.21,
        -0.77, 0.04, -0.09, -0.89, 0.31, 0.42, -0.45, 1.08,
        -0.31, 0.78, -0.18, 0.38, 0.02, 0.42, -0.26, -0.26,
    ),
    2015: (
        -29442.0, -1501.0, -2445.1, 3012.9, 1676.7, 1350.7, -2352.3, 1225.6,
        582.0, 907.6, 813.7, 120.4, -334.9, 70.4, -232.6, 360.1,
        192.4, -140.9, -157.5, 4.1, 70.0, 67.7, 72.7, -129.9,
        -28.9, 13.2, -70.9, 81.6, -76.1, -6.8, 51.8, 15.0,
        9.4, -2.8, 6.8, 24.2, 8.8, -16.9, -3.2, -20.6,
        13.4, 11.7, -15.9, -2.0, 5.4, 8.8, 3.1, -3.3,
        0.7, -13.3, -0.1, 8.7, -9.1, -10.5, -1.9, -6.3,
        0.1, 0.5, -0.5, 1.8, -0.7, 2.1, 2.4, -1.8,
        -3.6, 3.1, -1.5, -2.3, 2.0, -0.8, 0.6, -0.7,
        0.2, 1.7, -0.2, 0.4, 3.5, -1.9, -0.2, 0.4,
        1.2, -0.8, 0.9, 0.1, 0.5, -0.3, -0.4, 0.2,
        -0.9, 0.0, 0.0, -0.9, 0.4, 0.5, -0.5, 1.0,
        -0.2, 0.8, -0.1, 0.3, 0.1, 0.5, -0.4, -0.3,
    ),
}

# Sine coefficients per epoch [nT], same layout
_H_EPOCHS = {
    1900: (
        0.0, 5922.0, 0.0, -1061.0, 1121.0, 0.0, -330.0, 3.0,
        523.0, 0.0, 195.0, -69.0, -210.0, -75.0, 0.0, -210.0,
        53.0, -33.0, -124.0, 3.0, 0.0, -9.0, 83.0, 2.0,
        -35.0, 36.0, -69.0, 0.0, -45.0, -13.0, -10.0, -1.0,
        28.0, -12.0, -22.0, 0.0, 8.0, -14.0, 7.0, -13.0,
        5.0, 16.0, -5.0, -18.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 8.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1905: (
        0.0, 5909.0, 0.0, -1086.0, 1065.0, 0.0, -357.0, 34.0,
        480.0, 0.0, 203.0, -77.0, -201.0, -65.0, 0.0, -193.0,
        56.0, -32.0, -125.0, 11.0, 0.0, -7.0, 86.0, 4.0,
        -32.0, 32.0, -67.0, 0.0, -46.0, -14.0, -11.0, 0.0,
        28.0, -12.0, -22.0, 0.0, 8.0, -15.0, 7.0, -13.0,
        5.0, 16.0, -5.0, -18.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 8.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1910: (
        0.0, 5898.0, 0.0, -1128.0, 1000.0, 0.0, -389.0, 62.0,
        425.0, 0.0, 211.0, -90.0, -189.0, -55.0, 0.0, -172.0,
        57.0, -33.0, -126.0, 21.0, 0.0, -5.0, 89.0, 5.0,
        -29.0, 28.0, -65.0, 0.0, -47.0, -14.0, -12.0, 1.0,
        28.0, -13.0, -22.0, 0.0, 8.0, -15.0, 6.0, -13.0,
        5.0, 16.0, -5.0, -18.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 8.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1915: (
        0.0, 5875.0, 0.0, -1191.0, 917.0, 0.0, -421.0, 84.0,
        360.0, 0.0, 218.0, -109.0, -173.0, -51.0, 0.0, -148.0,
        58.0, -34.0, -126.0, 32.0, 0.0, -2.0, 93.0, 8.0,
        -26.0, 23.0, -62.0, 0.0, -48.0, -14.0, -12.0, 2.0,
        28.0, -15.0, -22.0, 0.0, 8.0, -15.0, 6.0, -13.0,
        5.0, 16.0, -5.0, -18.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 8.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1920: (
        0.0, 5845.0, 0.0, -1259.0, 823.0, 0.0, -445.0, 103.0,
        293.0, 0.0, 220.0, -134.0, -153.0, -57.0, 0.0, -122.0,
        58.0, -38.0, -125.0, 43.0, 0.0, 0.0, 96.0, 11.0,
        -22.0, 18.0, -57.0, 0.0, -49.0, -14.0, -13.0, 4.0,
        28.0, -16.0, -22.0, 0.0, 8.0, -15.0, 6.0, -14.0,
        5.0, 17.0, -5.0, -19.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 9.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1925: (
        0.0, 5817.0, 0.0, -1334.0, 728.0, 0.0, -462.0, 119.0,
        229.0, 0.0, 216.0, -163.0, -130.0, -70.0, 0.0, -96.0,
        58.0, -44.0, -122.0, 51.0, 0.0, 3.0, 99.0, 14.0,
        -18.0, 13.0, -52.0, 0.0, -50.0, -14.0, -14.0, 5.0,
        29.0, -17.0, -21.0, 0.0, 8.0, -15.0, 6.0, -14.0,
        5.0, 17.0, -5.0, -19.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 9.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1930: (
        0.0, 5808.0, 0.0, -1424.0, 644.0, 0.0, -480.0, 133.0,
        166.0, 0.0, 205.0, -195.0, -109.0, -90.0, 0.0, -72.0,
        60.0, -53.0, -118.0, 58.0, 0.0, 4.0, 102.0, 19.0,
        -16.0, 8.0, -46.0, 0.0, -51.0, -15.0, -14.0, 6.0,
        29.0, -18.0, -20.0, 0.0, 8.0, -15.0, 5.0, -14.0,
        5.0, 18.0, -5.0, -19.0, 0.0, -20.0, 14.0, 5.0,
        -3.0, -2.0, 9.0, 10.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 4.0, 0.0,
        -6.0,
    ),
    1935: (
        0.0, 5812.0, 0.0, -1520.0, 586.0, 0.0, -494.0, 146.0,
        101.0, 0.0, 188.0, -226.0, -90.0, -114.0, 0.0, -51.0,
        64.0, -64.0, -115.0, 64.0, 0.0, 4.0, 104.0, 25.0,
        -15.0, 4.0, -40.0, 0.0, -52.0, -17.0, -14.0, 7.0,
        29.0, -19.0, -19.0, 0.0, 8.0, -15.0, 5.0, -15.0,
        5.0, 18.0, -5.0, -19.0, 0.0, -20.0, 15.0, 5.0,
        -3.0, -3.0, 9.0, 11.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -1.0, 4.0, 0.0,
        -6.0,
    ),
    1940: (
        0.0, 5821.0, 0.0, -1614.0, 528.0, 0.0, -499.0, 163.0,
        43.0, 0.0, 169.0, -252.0, -72.0, -141.0, 0.0, -33.0,
        71.0, -75.0, -113.0, 69.0, 0.0, 4.0, 105.0, 33.0,
        -15.0, 0.0, -33.0, 0.0, -52.0, -18.0, -14.0, 7.0,
        29.0, -20.0, -19.0, 0.0, 8.0, -14.0, 5.0, -15.0,
        5.0, 19.0, -5.0, -19.0, 0.0, -21.0, 15.0, 5.0,
        -3.0, -3.0, 9.0, 11.0, -2.0, 2.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -1.0, 4.0, 0.0,
        -6.0,
    ),
    1945: (
        0.0, 5810.0, 0.0, -1702.0, 477.0, 0.0, -499.0, 186.0,
        -11.0, 0.0, 144.0, -276.0, -55.0, -178.0, 0.0, -12.0,
        95.0, -67.0, -119.0, 82.0, 0.0, 6.0, 100.0, 16.0,
        -9.0, -16.0, -39.0, 0.0, -45.0, -18.0, 2.0, 6.0,
        28.0, -17.0, -22.0, 0.0, 12.0, -21.0, -12.0, -7.0,
        2.0, 18.0, 3.0, -11.0, 0.0, -27.0, 17.0, 29.0,
        -9.0, 4.0, 9.0, 6.0, 1.0, 8.0, 0.0, 5.0,
        1.0, -20.0, -1.0, -6.0, 6.0, -4.0, -2.0, 0.0,
        -2.0,
    ),
    1950: (
        0.0, 5815.0, 0.0, -1810.0, 381.0, 0.0, -476.0, 206.0,
        -46.0, 0.0, 136.0, -278.0, -37.0, -210.0, 0.0, 3.0,
        103.0, -87.0, -122.0, 80.0, 0.0, -1.0, 99.0, 33.0,
        -12.0, -12.0, -30.0, 0.0, -35.0, -17.0, 0.0, 10.0,
        36.0, -18.0, -16.0, 0.0, 5.0, -22.0, 0.0, -21.0,
        -8.0, 17.0, -4.0, -17.0, 0.0, -24.0, 19.0, 12.0,
        2.0, 2.0, 8.0, 8.0, -11.0, -7.0, 0.0, 13.0,
        -2.0, -10.0, 2.0, -3.0, 6.0, -3.0, 6.0, 11.0,
        8.0,
    ),
    1955: (
        0.0, 5820.0, 0.0, -1898.0, 291.0, 0.0, -462.0, 216.0,
        -83.0, 0.0, 133.0, -274.0, -23.0, -230.0, 0.0, 15.0,
        110.0, -98.0, -121.0, 78.0, 0.0, -9.0, 96.0, 48.0,
        -16.0, -12.0, -24.0, 0.0, -50.0, -24.0, -4.0, 8.0,
        28.0, -20.0, -18.0, 0.0, 10.0, -15.0, 5.0, -23.0,
        3.0, 23.0, -4.0, -13.0, 0.0, -11.0, 12.0, 7.0,
        6.0, -2.0, 10.0, 7.0, -6.0, 5.0, 0.0, -4.0,
        0.0, -8.0, -2.0, -4.0, 1.0, -3.0, 7.0, -1.0,
        -3.0,
    ),
    1960: (
        0.0, 5791.0, 0.0, -1967.0, 206.0, 0.0, -414.0, 224.0,
        -130.0, 0.0, 135.0, -278.0, 3.0, -255.0, 0.0, 16.0,
        125.0, -117.0, -114.0, 81.0, 0.0, -10.0, 99.0, 60.0,
        -20.0, -11.0, -17.0, 0.0, -55.0, -28.0, -6.0, 7.0,
        23.0, -18.0, -17.0, 0.0, 11.0, -14.0, 7.0, -18.0,
        4.0, 23.0, 1.0, -20.0, 0.0, -18.0, 12.0, 2.0,
        0.0, -3.0, 9.0, 8.0, 0.0, 5.0, 0.0, 4.0,
        1.0, 0.0, 2.0, -5.0, 1.0, -1.0, 6.0, 0.0,
        -7.0,
    ),
    1965: (
        0.0, 5776.0, 0.0, -2016.0, 114.0, 0.0, -404.0, 240.0,
        -165.0, 0.0, 148.0, -269.0, 13.0, -269.0, 0.0, 19.0,
        128.0, -126.0, -97.0, 81.0, 0.0, -11.0, 100.0, 68.0,
        -32.0, -8.0, -7.0, 0.0, -61.0, -27.0, -2.0, 6.0,
        26.0, -23.0, -12.0, 0.0, 7.0, -12.0, 9.0, -16.0,
        4.0, 24.0, -3.0, -17.0, 0.0, -22.0, 15.0, 7.0,
        -4.0, -5.0, 10.0, 10.0, -4.0, 1.0, 0.0, 2.0,
        1.0, 2.0, 6.0, -4.0, 0.0, -2.0, 3.0, 0.0,
        -6.0,
    ),
    1970: (
        0.0, 5737.0, 0.0, -2047.0, 25.0, 0.0, -366.0, 251.0,
        -196.0, 0.0, 167.0, -266.0, 26.0, -279.0, 0.0, 26.0,
        139.0, -139.0, -91.0, 83.0, 0.0, -12.0, 100.0, 72.0,
        -37.0, -6.0, 1.0, 0.0, -70.0, -27.0, -4.0, 8.0,
        23.0, -23.0, -11.0, 0.0, 7.0, -15.0, 6.0, -17.0,
        6.0, 21.0, -6.0, -16.0, 0.0, -21.0, 16.0, 6.0,
        -4.0, -5.0, 10.0, 11.0, -2.0, 1.0, 0.0, 1.0,
        1.0, 3.0, 4.0, -4.0, 0.0, -1.0, 3.0, 1.0,
        -4.0,
    ),
    1975: (
        0.0, 5675.0, 0.0, -2067.0, -68.0, 0.0, -333.0, 262.0,
        -223.0, 0.0, 191.0, -265.0, 39.0, -288.0, 0.0, 31.0,
        148.0, -152.0, -83.0, 88.0, 0.0, -13.0, 99.0, 75.0,
        -41.0, -4.0, 11.0, 0.0, -77.0, -26.0, -5.0, 10.0,
        22.0, -23.0, -12.0, 0.0, 6.0, -16.0, 4.0, -19.0,
        6.0, 18.0, -10.0, -17.0, 0.0, -21.0, 16.0, 7.0,
        -4.0, -5.0, 10.0, 11.0, -3.0, 1.0, 0.0, 1.0,
        1.0, 3.0, 4.0, -4.0, -1.0, -1.0, 3.0, 1.0,
        -5.0,
    ),
    1980: (
        0.0, 5604.0, 0.0, -2129.0, -200.0, 0.0, -336.0, 271.0,
        -252.0, 0.0, 212.0, -257.0, 53.0, -297.0, 0.0, 46.0,
        150.0, -151.0, -78.0, 92.0, 0.0, -15.0, 93.0, 71.0,
        -43.0, -2.0, 17.0, 0.0, -82.0, -27.0, -5.0, 16.0,
        18.0, -23.0, -10.0, 0.0, 7.0, -18.0, 4.0, -22.0,
        9.0, 16.0, -13.0, -15.0, 0.0, -21.0, 16.0, 9.0,
        -5.0, -6.0, 9.0, 10.0, -6.0, 2.0, 0.0, 1.0,
        0.0, 3.0, 6.0, -4.0, 0.0, -1.0, 4.0, 0.0,
        -6.0,
    ),
    1985: (
        0.0, 5500.0, 0.0, -2197.0, -306.0, 0.0, -310.0, 284.0,
        -297.0, 0.0, 232.0, -249.0, 69.0, -297.0, 0.0, 47.0,
        150.0, -154.0, -75.0, 95.0, 0.0, -16.0, 88.0, 69.0,
        -48.0, -1.0, 21.0, 0.0, -83.0, -27.0, -2.0, 20.0,
        17.0, -23.0, -7.0, 0.0, 8.0, -19.0, 5.0, -23.0,
        11.0, 14.0, -15.0, -11.0, 0.0, -21.0, 15.0, 9.0,
        -6.0, -6.0, 9.0, 9.0, -7.0, 2.0, 0.0, 1.0,
        0.0, 3.0, 6.0, -4.0, 0.0, -1.0, 4.0, 0.0,
        -6.0,
    ),
    1990: (
        0.0, 5406.0, 0.0, -2279.0, -373.0, 0.0, -284.0, 293.0,
        -352.0, 0.0, 247.0, -240.0, 84.0, -299.0, 0.0, 46.0,
        154.0, -153.0, -69.0, 97.0, 0.0, -16.0, 82.0, 69.0,
        -52.0, 1.0, 24.0, 0.0, -80.0, -26.0, 0.0, 21.0,
        17.0, -23.0, -4.0, 0.0, 10.0, -19.0, 6.0, -22.0,
        12.0, 12.0, -16.0, -10.0, 0.0, -20.0, 15.0, 11.0,
        -7.0, -7.0, 9.0, 8.0, -7.0, 2.0, 0.0, 2.0,
        1.0, 3.0, 6.0, -4.0, 0.0, -2.0, 3.0, -1.0,
        -6.0,
    ),
    1995: (
        0.0, 5306.0, 0.0, -2366.0, -413.0, 0.0, -262.0, 302.0,
        -427.0, 0.0, 262.0, -236.0, 97.0, -306.0, 0.0, 46.0,
        165.0, -143.0, -55.0, 107.0, 0.0, -17.0, 72.0, 67.0,
        -58.0, 1.0, 36.0, 0.0, -69.0, -25.0, 4.0, 24.0,
        17.0, -24.0, -6.0, 0.0, 11.0, -21.0, 8.0, -23.0,
        15.0, 11.0, -16.0, -4.0, 0.0, -20.0, 15.0, 12.0,
        -6.0, -8.0, 8.0, 5.0, -8.0, 3.0, 0.0, 1.0,
        0.0, 4.0, 5.0, -5.0, -1.0, -2.0, 1.0, -2.0,
        -7.0,
    ),
    2000: (
        0.0, 5186.1, 0.0, -2481.6, -458.0, 0.0, -227.6, 293.4,
        -491.1, 0.0, 272.6, -231.9, 119.8, -303.8, 0.0, 43.8,
        171.9, -133.1, -39.3, 106.3, 0.0, -17.4, 63.7, 65.1,
        -61.2, 0.7, 43.8, 0.0, -64.6, -24.2, 6.2, 24.0,
        14.8, -25.4, -5.8, 0.0, 11.9, -21.5, 8.5, -21.5,
        15.5, 8.9, -14.9, -2.1, 0.0, -19.7, 13.4, 12.5,
        -6.2, -8.4, 8.4, 3.8, -8.2, 4.8, 0.0, 1.7,
        0.0, 4.0, 4.9, -5.9, -1.2, -2.9, 0.2, -2.2,
        -7.4, 0.0, 0.1, 1.3, -0.9, -2.6, 0.9, -0.7,
        -2.8, -0.9, -1.2, -1.9, -0.9, 0.0, -0.4, 0.3,
        2.5, -2.6, 0.7, 0.3, 0.0, 0.0, 0.3, -0.9,
        -0.4, 0.8, 0.0, -0.9, 0.2, 1.8, -0.4, -1.0,
        -0.1, 0.7, 0.3, 0.6, 0.3, -0.2, -0.5, -0.9,
    ),
    2005: (
        0.0, 5077.99, 0.0, -2594.50, -515.43, 0.0, -198.86, 269.72,
        -524.72, 0.0, 282.07, -225.23, 145.15, -305.36, 0.0, 42.72,
        180.25, -123.45, -19.57, 103.85, 0.0, -20.33, 54.75, 63.63,
        -63.53, 0.24, 50.94, 0.0, -61.14, -22.57, 6.82, 25.35,
        10.93, -26.32, -4.64, 0.0, 11.20, -20.88, 9.83, -19.71,
        16.22, 7.61, -12.76, -0.06, 0.0, -20.11, 12.69, 12.67,
        -6.72, -8.16, 8.10, 2.92, -7.73, 6.01, 0.0, 2.19,
        0.10, 4.46, 4.76, -6.58, -1.01, -3.47, -0.86, -2.31,
        -7.93, 0.0, 0.26, 1.44, -0.77, -2.27, 0.90, -0.58,
        -2.69, -1.08, -1.58, -1.90, -1.39, 0.0, -0.55, 0.23,
        2.38, -2.63, 0.61, 0.40, 0.01, 0.02, 0.28, -0.87,
        -0.34, 0.88, 0.0, -0.76, 0.33, 1.72, -0.54, -1.07,
        -0.04, 0.63, 0.21, 0.53, 0.38, -0.22, -0.57, -0.82,
    ),
    2010: (
        0.0, 4944.26, 0.0, -2708.54, -575.73, 0.0, -160.40, 251.75,
        -537.03, 0.0, 286.48, -211.03, 164.46, -309.72, 0.0, 44.58,
        189.01, -118.06, -0.01, 101.04, 0.0, -20.90, 44.18, 61.54,
        -66.26, 3.02, 55.40, 0.0, -57.80, -21.20, 6.54, 24.96,
        7.03, -27.61, -3.28, 0.0, 10.84, -20.03, 11.83, -17.41,
        16.71, 6.96, -10.74, 1.64, 0.0, -20.54, 11.51, 12.75,
        -7.14, -7.42, 7.97, 2.14, -6.08, 7.01, 0.0, 2.73,
        -0.10, 4.71, 4.44, -7.22, -0.96, -3.95, -1.99, -1.97,
        -8.31, 0.0, 0.13, 1.67, -0.66, -1.76, 0.85, -0.39,
        -2.51, -1.27, -2.11, -1.94, -1.86, 0.0, -0.87, 0.27,
        2.13, -2.49, 0.49, 0.59, 0.00, 0.13, 0.27, -0.86,
        -0.23, 0.87, 0.0, -0.87, 0.30, 1.66, -0.59, -1.14,
        -0.07, 0.54, 0.10, 0.49, 0.44, -0.25, -0.53, -0.79,
    ),
    2015: (
        0.0, 4797.1, 0.0, -2845.6, -641.9, 0.0, -115.3, 244.9,
        -538.4, 0.0, 283.3, -188.7, 180.9, -329.5, 0.0, 47.3,
        197.0, -119.3, 16.0, 100.2, 0.0, -20.8, 33.2, 58.9,
        -66.7, 7.3, 62.6, 0.0, -54.1, -19.5, 5.7, 24.4,
        3.4, -27.4, -2.2, 0.0, 10.1, -18.3, 13.3, -14.6,
        16.2, 5.7, -9.1, 2.1, 0.0, -21.6, 10.8, 11.8,
        -6.8, -6.9, 7.8, 1.0, -4.0, 8.4, 0.0, 3.2,
        -0.4, 4.6, 4.4, -7.9, -0.6, -4.2, -2.8, -1.2,
        -8.7, 0.0, -0.1, 2.0, -0.7, -1.1, 0.8, -0.2,
        -2.2, -1.4, -2.5, -2.0, -2.4, 0.0, -1.1, 0.4,
        1.9, -2.2, 0.3, 0.7, -0.1, 0.3, 0.2, -0.9,
        -0.1, 0.7, 0.0, -0.9, 0.4, 1.6, -0.5, -1.2,
        -0.1, 0.4, -0.1, 0.4, 0.5, -0.3, -0.4, -0.8,
    ),
}

# Secular variation 2015-2020, degrees 1 to 8 [nT/year]
_G_SV = (
    10.3, 18.1, -8.7, -3.3, 2.1, 3.4, -5.5, -0.7,
    -10.1, -0.7, 0.2, -9.1, 4.1, -4.3, -0.2, 0.5,
    -1.3, -0.1, 1.4, 3.9, -0.3, -0.1, -0.7, 2.1,
    -1.2, 0.3, 1.6, 0.3, -0.2, -0.5, 1.3, 0.1,
    -0.6, -0.8, 0.2, 0.2, 0.0, -0.6, 0.5, -0.2,
    0.4, 0.1, -0.4, 0.3,
)

_H_SV = (
    0.0, -26.6, 0.0, -27.4, -14.1, 0.0, 8.2, -0.4,
    1.8, 0.0, -1.3, 5.3, 2.9, -5.2, 0.0, 0.6,
    1.7, -1.2, 3.4, 0.0, 0.0, 0.0, -2.1, -0.7,
    0.2, 0.9, 1.0, 0.0, 0.8, 0.4, -0.2, -0.3,
    -0.6, 0.1, -0.2, 0.0, -0.3, 0.3, 0.1, 0.5,
    -0.2, -0.3, 0.3, 0.0,
)


def _build_igrf12() -> CoefficientTable:
    epochs = sorted(_G_EPOCHS)
    g = np.zeros((rows_for_degree(IGRF_MAX_DEGREE), len(epochs) + 1))
    h = np.zeros_like(g)

    for column, year in enumerate(epochs):
        g[:len(_G_EPOCHS[year]), column] = _G_EPOCHS[year]
        h[:len(_H_EPOCHS[year]), column] = _H_EPOCHS[year]

    g[:len(_G_SV), -1] = _G_SV
    h[:len(_H_SV), -1] = _H_SV

    return CoefficientTable(g, h, first_epoch=epochs[0], name="IGRF-12")


IGRF12 = _build_igrf12()
