# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet filter catalog.

Builds orthonormal wavelet/scaling filter pairs from a symbolic name. The
wavelet filter is always derived from the scaling filter through the
quadrature mirror relationship, so adding a family only means adding its
scaling coefficients to the catalog.
"""

from enum import Enum
from typing import Callable, Dict, NamedTuple, Union

import numpy as np

from .errors import UnsupportedFilterError, coerce_enum


class FilterName(Enum):
    """Enum defining the wavelet filters available in the catalog."""
    HAAR = "haar"


class WaveletFilter(NamedTuple):
    """
    Orthonormal wavelet/scaling filter pair.

    Attributes:
        length (int): Filter length L
        h (numpy.ndarray): Wavelet (high-pass) coefficients
        g (numpy.ndarray): Scaling (low-pass) coefficients
        name (str): Catalog name of the filter
    """
    length: int
    h: np.ndarray
    g: np.ndarray
    name: str


def reverse(x):
    """
    Return a reversed copy of a sequence.

    Args:
        x (array_like): Input sequence

    Returns:
        numpy.ndarray: New array holding ``x`` in reverse order
    """
    return np.array(x, dtype=float)[::-1].copy()


def qmf(g, inverse=True):
    """
    Quadrature mirror filter of a filter.

    The sequence is reversed, then every element at an odd index (inverse
    form) or at an even index (forward form) changes sign.

    Args:
        g (array_like): Filter coefficients
        inverse (bool): Compute the inverse QMF (default) instead of the forward one

    Returns:
        numpy.ndarray: Mirrored filter coefficients
    """
    rev_g = reverse(g)
    offset = 0 if inverse else 1
    for i in range(len(rev_g)):
        if (i + offset) % 2 != 0:
            rev_g[i] = -rev_g[i]
    return rev_g


def haar_filter():
    """
    Create the Haar filter.

    Returns:
        WaveletFilter: Haar wavelet and scaling filters of length 2
    """
    g = np.array([0.7071067811865475, 0.7071067811865475])
    h = qmf(g)
    return _freeze(WaveletFilter(length=2, h=h, g=g, name=FilterName.HAAR.value))


def _freeze(wave_filter):
    wave_filter.h.setflags(write=False)
    wave_filter.g.setflags(write=False)
    return wave_filter


_CATALOG: Dict[FilterName, Callable[[], WaveletFilter]] = {
    FilterName.HAAR: haar_filter,
}


def select_filter(filter_name: Union[FilterName, str] = FilterName.HAAR) -> WaveletFilter:
    """
    Construct the wavelet filter registered under ``filter_name``.

    Args:
        filter_name: Catalog name, currently only "haar"

    Returns:
        WaveletFilter: The requested filter pair

    Raises:
        UnsupportedFilterError: If the name is not in the catalog
    """
    name = coerce_enum(FilterName, filter_name, UnsupportedFilterError, "wave filter")
    return _CATALOG[name]()
