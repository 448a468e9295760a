# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet variance analysis of a signal.

Ties the filter catalog, MODWT, boundary removal and variance estimators
into a single entry point.
"""

import logging
import time
from enum import Enum
from typing import NamedTuple, Optional, Union

import numpy as np

from .boundary import TransformMethod, brick_wall
from .config import DEFAULT_COMPUTE_V, DEFAULT_FILTER, DEFAULT_TAIL_PROBABILITY
from .errors import (
    InvalidDecompositionError,
    UnsupportedCovarianceModeError,
    coerce_enum,
)
from .filters import FilterName
from .variance import CIType, diagonal_covariance, gaussian_ci, wave_variance
from .wavelet import BoundaryMode, MaximalOverlapDWT

logger = logging.getLogger(__name__)


class CovarianceMode(Enum):
    """Enum defining how the asymptotic covariance matrix is computed."""
    NO = "no"
    DIAG = "diag"
    FULL = "full"


class WaveletVarianceResult(NamedTuple):
    """
    Result of a wavelet variance analysis.

    Attributes:
        variance (numpy.ndarray): Wavelet variance at each scale
        low (numpy.ndarray): Lower eta3 confidence bound
        high (numpy.ndarray): Upper eta3 confidence bound
        scales (numpy.ndarray): Scales 2^j, j = 1..J
        V (numpy.ndarray): Asymptotic covariance matrix (identity when not computed)
        up_gauss (numpy.ndarray): Upper Gaussian bound (NaN when not computed)
        dw_gauss (numpy.ndarray): Lower Gaussian bound (NaN when not computed)
        wavelet (str): Name of the filter used
    """
    variance: np.ndarray
    low: np.ndarray
    high: np.ndarray
    scales: np.ndarray
    V: np.ndarray
    up_gauss: np.ndarray
    dw_gauss: np.ndarray
    wavelet: str

    def to_dict(self):
        """Return the result as a plain dictionary."""
        return dict(self._asdict())

    def plot(self, ax=None, show_gaussian=True):
        """Plot the wavelet variance against scale, see ``plot_wavelet_variance``."""
        from .visualization import plot_wavelet_variance
        return plot_wavelet_variance(self, ax=ax, show_gaussian=show_gaussian)


def _readonly(*arrays):
    for array in arrays:
        array.setflags(write=False)


def analyze(signal,
            filter_name: Union[FilterName, str] = DEFAULT_FILTER,
            compute_v: Union[CovarianceMode, str] = DEFAULT_COMPUTE_V,
            levels: Optional[int] = None,
            p: float = DEFAULT_TAIL_PROBABILITY) -> WaveletVarianceResult:
    """
    Compute the MODWT wavelet variance of a signal.

    Args:
        signal (array_like): Input signal of length N
        filter_name (FilterName or str): Wavelet filter, only "haar"
        compute_v (CovarianceMode or str): "no" (default) skips the Gaussian
            interval, "diag" uses the diagonal covariance approximation,
            "full" is not implemented
        levels (int, optional): Number of scales; defaults to floor(log2(N))
        p (float): One-sided tail probability, the default 0.025 gives 95%
            intervals

    Returns:
        WaveletVarianceResult: Variance, intervals, scales and covariance

    Raises:
        InvalidDecompositionError: If the signal is too short for the levels
        NotImplementedError: If ``compute_v`` is "full"
    """
    compute_v = coerce_enum(CovarianceMode, compute_v,
                            UnsupportedCovarianceModeError, "covariance mode")
    if compute_v == CovarianceMode.FULL:
        raise NotImplementedError(
            "The full asymptotic covariance matrix is not implemented; use compute_v='diag'"
        )

    signal = np.asarray(signal, dtype=float)
    if signal.ndim != 1:
        raise InvalidDecompositionError("The signal must be a one-dimensional sequence")
    n_ts = len(signal)
    if n_ts < 2:
        raise InvalidDecompositionError(
            f"At least 2 samples are needed for a wavelet decomposition, got {n_ts}"
        )

    if levels is None:
        levels = int(np.floor(np.log2(n_ts)))

    start_time = time.time()

    modwt = MaximalOverlapDWT(filter_name)
    wave_filter = modwt.wave_filter
    signal_modwt = modwt.forward(signal, levels, BoundaryMode.PERIODIC)
    signal_modwt_bw = brick_wall(signal_modwt, wave_filter, TransformMethod.MODWT)

    vmod = wave_variance(signal_modwt_bw, CIType.ETA3, p,
                         level_lengths=[len(coeffs) for coeffs in signal_modwt])

    scales = 2.0 ** np.arange(1, levels + 1)

    if compute_v == CovarianceMode.DIAG:
        V = diagonal_covariance(signal_modwt)
        up_gauss, dw_gauss = gaussian_ci(vmod[:, 0], V, p)
    else:
        V = np.eye(levels)
        up_gauss = np.full(levels, np.nan)
        dw_gauss = np.full(levels, np.nan)

    variance = vmod[:, 0].copy()
    low = vmod[:, 1].copy()
    high = vmod[:, 2].copy()
    _readonly(variance, low, high, scales, V, up_gauss, dw_gauss)

    duration = time.time() - start_time
    logger.info(
        "Wavelet variance of %d samples at %d scales (%s filter, compute_v=%s) "
        "computed in %.3f seconds",
        n_ts, levels, wave_filter.name, compute_v.value, duration
    )

    return WaveletVarianceResult(
        variance=variance,
        low=low,
        high=high,
        scales=scales,
        V=V,
        up_gauss=up_gauss,
        dw_gauss=dw_gauss,
        wavelet=wave_filter.name,
    )


wavelet_variance = analyze
