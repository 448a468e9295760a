# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Removal of boundary wavelet coefficients ("brick wall").

The circular filtering used by the pyramid transforms contaminates the
leading coefficients of every level with wrap-around values. Those are
dropped here before any variance estimate is computed.
"""

import logging
import math
from enum import Enum

import numpy as np

from .errors import UnsupportedTransformError, coerce_enum

logger = logging.getLogger(__name__)


class TransformMethod(Enum):
    """Enum defining the transforms a decomposition can come from."""
    DWT = "dwt"
    MODWT = "modwt"


def boundary_count(level, filter_length, method=TransformMethod.MODWT):
    """
    Number of boundary coefficients at a decomposition level.

    Args:
        level (int): Zero-based level index j
        filter_length (int): Filter length m
        method (TransformMethod or str): Transform that produced the level

    Returns:
        int: (2^(j+1) - 1)(m - 1) for MODWT, ceil((m - 2)(1 - 2^-(j+1))) for DWT
    """
    method = coerce_enum(TransformMethod, method, UnsupportedTransformError, "method")
    binary_power = 2 ** (level + 1)
    if method == TransformMethod.DWT:
        n = math.ceil((filter_length - 2) * (1.0 - 1.0 / binary_power))
    else:
        n = (binary_power - 1) * (filter_length - 1)
    return max(int(n), 0)


def brick_wall(decomposition, wave_filter, method=TransformMethod.MODWT):
    """
    Remove the boundary coefficients from each level of a decomposition.

    Args:
        decomposition (list): Per-level coefficient arrays from ``dwt`` or ``modwt``
        wave_filter (WaveletFilter): Filter used for the decomposition
        method (TransformMethod or str): "modwt" (default) or "dwt"

    Returns:
        list: New arrays with the leading boundary coefficients removed. A level
        shorter than its boundary count becomes empty.
    """
    trimmed = []
    for j, coeffs in enumerate(decomposition):
        coeffs = np.asarray(coeffs, dtype=float)
        n = min(boundary_count(j, wave_filter.length, method), len(coeffs))
        logger.debug("Level %d: dropping %d of %d coefficients", j + 1, n, len(coeffs))
        trimmed.append(coeffs[n:].copy())
    return trimmed


trim = brick_wall
