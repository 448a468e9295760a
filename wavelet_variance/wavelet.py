# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Pyramid wavelet transforms for the Wavelet Variance package.

This module provides the decimated Discrete Wavelet Transform (DWT) and the
non-decimated Maximal Overlap Discrete Wavelet Transform (MODWT). Both are
pyramid algorithms: level j is computed from the scaling coefficients of
level j-1 only, so levels run in order while every position within a level
is computed at once.
"""

import logging
from enum import Enum

import numpy as np

from .config import DEFAULT_BOUNDARY, DEFAULT_FILTER
from .errors import (
    InvalidDecompositionError,
    UnsupportedBoundaryError,
    coerce_enum,
)
from .filters import FilterName, reverse, select_filter

logger = logging.getLogger(__name__)


class BoundaryMode(Enum):
    """Enum defining boundary handling modes for wavelet transforms."""
    PERIODIC = "periodic"
    REFLECTION = "reflection"


def wrap_index(k, M):
    """
    Wrap (possibly negative) indices into ``[0, M)``.

    Args:
        k (int or numpy.ndarray): Index or array of indices
        M (int): Length of the circular sequence

    Returns:
        Index or indices in ``[0, M)``
    """
    # np.mod result has the sign of the divisor
    return np.mod(k, M)


def extend_signal(signal, mode=BoundaryMode.PERIODIC):
    """
    Apply boundary handling to a signal before decomposition.

    Args:
        signal (array_like): Input signal
        mode (BoundaryMode or str): "periodic" leaves the signal unchanged,
            "reflection" appends the time-reversed signal

    Returns:
        numpy.ndarray: New array holding the (possibly doubled) signal
    """
    mode = coerce_enum(BoundaryMode, mode, UnsupportedBoundaryError, "boundary")
    signal = np.array(signal, dtype=float)
    if signal.ndim != 1:
        raise InvalidDecompositionError("The signal must be a one-dimensional sequence")

    if mode == BoundaryMode.REFLECTION:
        return np.concatenate([signal, reverse(signal)])
    return signal


def _check_levels(levels):
    if isinstance(levels, bool) or not isinstance(levels, (int, np.integer)) or levels < 1:
        raise InvalidDecompositionError(
            f"The number of levels must be a positive integer, got {levels!r}"
        )
    return int(levels)


class DiscreteWaveletTransform:
    """
    Discrete Wavelet Transform (DWT) implementation.

    The DWT decomposes a signal into wavelet and scaling coefficients using
    circular filtering followed by downsampling by two, so level j holds
    N / 2^j coefficients.
    """

    def __init__(self, filter_name=FilterName.HAAR):
        """
        Initialize a new DWT object.

        Args:
            filter_name (FilterName or str): The wavelet filter to use
        """
        self.wave_filter = select_filter(filter_name)

    def forward_full(self, signal, levels=4, mode=BoundaryMode.PERIODIC):
        """
        Perform forward DWT, keeping the scaling coefficients of every level.

        Args:
            signal (numpy.ndarray): Input signal
            levels (int): Number of decomposition levels J
            mode (BoundaryMode or str): Method for handling boundaries

        Returns:
            dict: 'wavelet' holds W_1..W_J, 'scaling' holds V_1..V_J
        """
        x = extend_signal(signal, mode)
        J = _check_levels(levels)
        N = len(x)
        tau = 2 ** J

        if N % tau != 0:
            raise InvalidDecompositionError(
                f"The sample size ({N}) must be divisible by 2^{J}. "
                "Either truncate or expand the number of samples."
            )
        if tau > N:
            raise InvalidDecompositionError(
                f"The number of levels [2^{J}] exceeds the sample size ({N}). "
                "Supply a lower number of levels."
            )

        h = self.wave_filter.h
        g = self.wave_filter.g
        taps = np.arange(self.wave_filter.length)

        wavelet_coeffs = []
        scaling_coeffs = []

        for j in range(1, J + 1):
            M = N // 2 ** (j - 1)
            t = np.arange(M // 2)

            # Row t holds the circular indices 2t+1, 2t, 2t-1, ...
            idx = wrap_index((2 * t + 1)[:, None] - taps[None, :], M)
            window = x[idx]

            Wj = window @ h
            Vj = window @ g

            logger.debug("DWT level %d: %d coefficients", j, len(Wj))
            wavelet_coeffs.append(Wj)
            scaling_coeffs.append(Vj)
            x = Vj

        return {
            'wavelet': wavelet_coeffs,
            'scaling': scaling_coeffs
        }

    def forward(self, signal, levels=4, mode=BoundaryMode.PERIODIC):
        """
        Perform forward DWT.

        Args:
            signal (numpy.ndarray): Input signal
            levels (int): Number of decomposition levels J
            mode (BoundaryMode or str): Method for handling boundaries

        Returns:
            list: J arrays of wavelet coefficients, level j holding N / 2^j values
        """
        return self.forward_full(signal, levels, mode)['wavelet']


class MaximalOverlapDWT:
    """
    Maximal Overlap Discrete Wavelet Transform (MODWT) implementation.

    The MODWT is a non-decimated wavelet transform that does not downsample,
    making it translation-invariant. Every level holds N coefficients.
    """

    def __init__(self, filter_name=FilterName.HAAR):
        """
        Initialize a new MODWT object.

        Args:
            filter_name (FilterName or str): The wavelet filter to use
        """
        self.wave_filter = select_filter(filter_name)

        # Scale filters by 1/sqrt(2) for MODWT
        self.ht = self.wave_filter.h / np.sqrt(2)
        self.gt = self.wave_filter.g / np.sqrt(2)

    def forward_full(self, signal, levels=4, mode=BoundaryMode.PERIODIC):
        """
        Perform forward MODWT, keeping the scaling coefficients of every level.

        Args:
            signal (numpy.ndarray): Input signal
            levels (int): Number of decomposition levels J
            mode (BoundaryMode or str): Method for handling boundaries

        Returns:
            dict: 'wavelet' holds W_1..W_J, 'scaling' holds V_1..V_J
        """
        x = extend_signal(signal, mode)
        J = _check_levels(levels)
        N = len(x)

        if 2 ** J > N:
            raise InvalidDecompositionError(
                f"The number of levels [2^{J}] exceeds the sample size ({N}). "
                "Supply a lower number of levels."
            )

        taps = np.arange(len(self.ht))
        t = np.arange(N)

        wavelet_coeffs = []
        scaling_coeffs = []

        for j in range(1, J + 1):
            idx = wrap_index(t[:, None] - taps[None, :] * 2 ** (j - 1), N)
            window = x[idx]

            Wj = window @ self.ht
            Vj = window @ self.gt

            logger.debug("MODWT level %d: %d coefficients", j, len(Wj))
            wavelet_coeffs.append(Wj)
            scaling_coeffs.append(Vj)
            x = Vj

        return {
            'wavelet': wavelet_coeffs,
            'scaling': scaling_coeffs
        }

    def forward(self, signal, levels=4, mode=BoundaryMode.PERIODIC):
        """
        Perform forward MODWT.

        Args:
            signal (numpy.ndarray): Input signal
            levels (int): Number of decomposition levels J
            mode (BoundaryMode or str): Method for handling boundaries

        Returns:
            list: J arrays of wavelet coefficients, each of length N
        """
        return self.forward_full(signal, levels, mode)['wavelet']


def dwt(signal, filter_name=DEFAULT_FILTER, levels=4, boundary=DEFAULT_BOUNDARY):
    """Decimated wavelet coefficients of ``signal`` for ``levels`` levels."""
    return DiscreteWaveletTransform(filter_name).forward(signal, levels, boundary)


def modwt(signal, filter_name=DEFAULT_FILTER, levels=4, boundary=DEFAULT_BOUNDARY):
    """Maximal overlap wavelet coefficients of ``signal`` for ``levels`` levels."""
    return MaximalOverlapDWT(filter_name).forward(signal, levels, boundary)
