# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Visualization utilities for wavelet variance results.
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_wavelet_variance(result, ax=None, show_gaussian=True, figsize=(8, 6), title=None):
    """Plot the wavelet variance against scale on log-log axes.

    Args:
        result: WaveletVarianceResult from ``analyze``
        ax: Matplotlib axis to plot on (optional)
        show_gaussian: Whether to draw the Gaussian bounds when they were computed.
            A non-positive lower bound cannot be drawn on the log axis and is
            left as a gap in the lower line.
        figsize: Figure size as tuple, used when ``ax`` is None
        title: Title string (optional)

    Returns:
        The matplotlib axis
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    scales = np.asarray(result.scales)

    ax.fill_between(scales, result.low, result.high, color='tab:blue', alpha=0.2,
                    label='eta3 CI')
    ax.plot(scales, result.variance, 'o-', color='tab:blue', label='Wavelet variance')

    if show_gaussian and np.all(np.isfinite(result.up_gauss)):
        ax.plot(scales, result.up_gauss, '--', color='tab:orange', label='Gaussian CI')
        dw_gauss = np.asarray(result.dw_gauss, dtype=float)
        ax.plot(scales, np.where(dw_gauss > 0, dw_gauss, np.nan), '--', color='tab:orange')

    ax.set_xscale('log', base=2)
    ax.set_yscale('log')
    ax.set_xlabel('Scale')
    ax.set_ylabel('Wavelet variance')
    ax.set_title(title or f'{result.wavelet.capitalize()} wavelet variance')
    ax.grid(True, which='both', alpha=0.3)
    ax.legend()

    return ax
