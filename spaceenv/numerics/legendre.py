"""
Associated Legendre Functions
=============================

Schmidt quasi-normalized associated Legendre functions for spherical harmonic
field models.
"""

import numpy as np
from typing import Tuple


def legendre_schmidt(theta: float, n_max: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute Schmidt quasi-normalized associated Legendre functions.

    Uses the Gauss-normalized recursion from Wertz (Spacecraft Attitude
    Determination and Control) followed by the Schmidt scaling. The
    Condon-Shortley phase is not applied.

    Args:
        theta: Colatitude [rad]
        n_max: Maximum degree

    Returns:
        (P, dP): arrays of shape (n_max+1, n_max+1) holding P[n, m](cos theta)
        and dP[n, m]/dtheta. Entries with m > n are zero.
    """
    if n_max < 1:
        raise ValueError(f"n_max must be at least 1, got {n_max}")

    size = n_max + 1
    P = np.zeros((size, size))
    dP = np.zeros((size, size))
    S = np.zeros((size, size))

    sin_t = np.sin(theta)
    cos_t = np.cos(theta)

    P[0, 0] = 1.0
    S[0, 0] = 1.0

    for n in range(1, size):
        for m in range(n + 1):
            if n == m:
                P[n, n] = sin_t * P[n - 1, n - 1]
                dP[n, n] = sin_t * dP[n - 1, n - 1] + cos_t * P[n - 1, n - 1]
            elif n == 1:
                P[n, m] = cos_t * P[n - 1, m]
                dP[n, m] = cos_t * dP[n - 1, m] - sin_t * P[n - 1, m]
            else:
                k_nm = ((n - 1)**2 - m**2) / ((2*n - 1) * (2*n - 3))
                P[n, m] = cos_t * P[n - 1, m] - k_nm * P[n - 2, m]
                dP[n, m] = cos_t * dP[n - 1, m] - sin_t * P[n - 1, m] - k_nm * dP[n - 2, m]

            # Schmidt normalization factors
            if m == 0:
                S[n, 0] = S[n - 1, 0] * (2.0*n - 1) / n
            else:
                S[n, m] = S[n, m - 1] * np.sqrt((n - m + 1) * (int(m == 1) + 1.0) / (n + m))

    return P * S, dP * S
