# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Spectral helpers for the Wavelet Variance package.

Provides the autocovariance of a sequence computed through the discrete
Fourier transform, used by the diagonal covariance approximation of the
wavelet variance estimator.
"""

import numpy as np

from .errors import EmptyLevelError


def mod_squared(z: np.ndarray) -> np.ndarray:
    """Squared modulus ``x^2 + y^2`` of each complex element ``x + iy``."""
    z = np.asarray(z)
    return np.real(z) ** 2 + np.imag(z) ** 2


def modulus(z: np.ndarray) -> np.ndarray:
    """Modulus ``sqrt(x^2 + y^2)`` of each complex element ``x + iy``."""
    return np.sqrt(mod_squared(z))


def dft_acf(x: np.ndarray) -> np.ndarray:
    """Biased autocovariance of a sequence via the discrete Fourier transform

    The sequence is zero padded to twice its length so the circular
    correlation computed in the frequency domain does not alias.

    Parameters
    ----------
    x : np.ndarray
        Real-valued input sequence of length n

    Returns
    -------
    np.ndarray
        Autocovariance at lags 0..n-1, normalised by n

    Raises
    ------
    EmptyLevelError
        If ``x`` is empty
    """
    x = np.asarray(x, dtype=float)
    n = len(x)
    if n == 0:
        raise EmptyLevelError("Cannot compute the autocovariance of an empty sequence")

    padded = np.zeros(2 * n)
    padded[:n] = x

    spectrum = np.fft.fft(padded)
    power = mod_squared(spectrum)
    acf = np.real(np.fft.ifft(power)) / n

    return acf[:n]
