# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet variance estimation and confidence intervals.

The variance at each scale is the mean square of the boundary-free wavelet
coefficients. Confidence intervals use the chi-squared "eta3" approximation
of the equivalent degrees of freedom, with an optional Gaussian interval
built from a diagonal approximation of the asymptotic covariance matrix.
"""

import logging
from enum import Enum

import numpy as np
from scipy import stats

from .config import DEFAULT_CI_TYPE, DEFAULT_TAIL_PROBABILITY
from .errors import (
    EmptyLevelError,
    InvalidDecompositionError,
    UnsupportedCITypeError,
    coerce_enum,
)
from .spectral import dft_acf

logger = logging.getLogger(__name__)


class CIType(Enum):
    """Enum defining the confidence interval methods."""
    ETA3 = "eta3"


def _check_tail_probability(p):
    if not 0.0 < p < 0.5:
        raise ValueError(f"The tail probability p must lie in (0, 0.5), got {p}")


def ci_eta3(y, dims, p=DEFAULT_TAIL_PROBABILITY):
    """
    Compute the eta3 confidence interval.

    Args:
        y (array_like): Wavelet variance at each scale
        dims (array_like): Number of coefficients at each scale, used for the
            equivalent degrees of freedom
        p (float): One-sided tail probability, giving a (1 - 2p) interval

    Returns:
        numpy.ndarray: (J, 3) array with columns variance, lower, upper

    Raises:
        ValueError: If ``y`` and ``dims`` differ in length or ``p`` is out of range
    """
    _check_tail_probability(p)
    y = np.asarray(y, dtype=float)
    dims = np.asarray(dims, dtype=float)
    if y.shape != dims.shape or y.ndim != 1:
        raise ValueError(
            f"Expected one dimension per variance, got {y.size} variances and {dims.size} dimensions"
        )

    scale = 2.0 ** np.arange(1, len(dims) + 1)
    eta3 = np.maximum(dims / scale, 1.0)

    out = np.empty((len(y), 3))
    out[:, 0] = y
    out[:, 1] = eta3 * y / stats.chi2.ppf(1 - p, eta3)
    out[:, 2] = eta3 * y / stats.chi2.ppf(p, eta3)
    return out


_CI_METHODS = {
    CIType.ETA3: ci_eta3,
}


def wave_variance(decomposition, ci_type=DEFAULT_CI_TYPE, p=DEFAULT_TAIL_PROBABILITY,
                  level_lengths=None):
    """
    Estimate the wavelet variance and a confidence interval at each scale.

    Args:
        decomposition (list): Boundary-free coefficient arrays, one per level
        ci_type (CIType or str): Confidence interval method, only "eta3"
        p (float): One-sided tail probability, giving a (1 - 2p) interval
        level_lengths (array_like, optional): Length of each level before the
            boundary coefficients were removed. Defaults to the lengths of the
            supplied levels.

    Returns:
        numpy.ndarray: (J, 3) array with columns variance, lower, upper

    Raises:
        EmptyLevelError: If a level holds no coefficients
        UnsupportedCITypeError: If ``ci_type`` is not supported
    """
    ci_type = coerce_enum(CIType, ci_type, UnsupportedCITypeError, "wave variance type")

    y = np.empty(len(decomposition))
    for j, coeffs in enumerate(decomposition):
        coeffs = np.asarray(coeffs, dtype=float)
        if len(coeffs) == 0:
            raise EmptyLevelError(
                f"Level {j + 1} has no coefficients left after boundary removal; "
                "use fewer levels or a longer signal."
            )
        y[j] = np.dot(coeffs, coeffs) / len(coeffs)

    if level_lengths is None:
        dims = [len(coeffs) for coeffs in decomposition]
    else:
        dims = level_lengths
        if len(dims) != len(y):
            raise ValueError(
                f"Expected {len(y)} level lengths, got {len(dims)}"
            )

    logger.debug("Wavelet variance at %d scales: %s", len(y), y)
    return _CI_METHODS[ci_type](y, dims, p)


def diagonal_covariance(decomposition):
    """
    Diagonal approximation of the asymptotic covariance of the wavelet variance.

    Args:
        decomposition (list): Untrimmed MODWT coefficient arrays; all levels
            share the same length

    Returns:
        numpy.ndarray: (J, J) diagonal matrix with entries 2 A_j / N

    Raises:
        InvalidDecompositionError: If the decomposition has no levels
    """
    if len(decomposition) == 0:
        raise InvalidDecompositionError("The decomposition must hold at least one level")

    Aj = np.empty(len(decomposition))
    for j, coeffs in enumerate(decomposition):
        acf = dft_acf(coeffs)
        Aj[j] = np.dot(acf, acf) - acf[0] ** 2 / 2

    # MODWT levels all have the length of the first one
    return np.diag(2 * Aj / len(decomposition[0]))


def gaussian_ci(variance, V, p=DEFAULT_TAIL_PROBABILITY):
    """
    Gaussian confidence interval of the wavelet variance.

    Args:
        variance (array_like): Wavelet variance at each scale
        V (numpy.ndarray): Covariance matrix of the estimator
        p (float): One-sided tail probability

    Returns:
        tuple: (upper, lower) bounds
    """
    _check_tail_probability(p)
    variance = np.asarray(variance, dtype=float)
    half_width = stats.norm.ppf(1 - p) * np.sqrt(np.diag(V))
    return variance + half_width, variance - half_width
