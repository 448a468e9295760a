#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Wavelet Variance Example Script

This script demonstrates the wavelet variance capabilities
of the Wavelet Variance module.

It shows:
1. Discrete and maximal overlap wavelet decompositions
2. Boundary coefficient removal
3. Wavelet variance of white noise and a random walk, with the
   eta3 and Gaussian confidence intervals
"""

import os
import sys
import time
import numpy as np
import matplotlib.pyplot as plt

# Add parent directory to path to import wavelet_variance module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from wavelet_variance import (
    BoundaryMode,
    DiscreteWaveletTransform, MaximalOverlapDWT,
    analyze, brick_wall, configure_logging
)


def example_decomposition():
    """Demonstrate DWT and MODWT decompositions."""
    print("Decomposition Example")

    rng = np.random.default_rng(999)
    signal = rng.normal(0.0, 1.0, 256)

    dwt = DiscreteWaveletTransform("haar")
    modwt = MaximalOverlapDWT("haar")

    dwt_coeffs = dwt.forward(signal, levels=4, mode=BoundaryMode.PERIODIC)
    modwt_coeffs = modwt.forward(signal, levels=4, mode=BoundaryMode.REFLECTION)
    trimmed = brick_wall(modwt_coeffs, modwt.wave_filter)

    print(f"{'Level':<8} {'DWT':<8} {'MODWT':<8} {'Trimmed':<8}")
    for j in range(4):
        print(f"{j + 1:<8} {len(dwt_coeffs[j]):<8} {len(modwt_coeffs[j]):<8} {len(trimmed[j]):<8}")


def example_wavelet_variance():
    """Compare the wavelet variance of white noise and a random walk."""
    print("Wavelet Variance Example")

    rng = np.random.default_rng(2025)
    white_noise = rng.normal(0.0, 1.0, 4096)
    random_walk = np.cumsum(rng.normal(0.0, 0.1, 4096))

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    for ax, (name, signal) in zip(axes, [("White noise", white_noise),
                                         ("Random walk", random_walk)]):
        start_time = time.time()
        result = analyze(signal, compute_v="diag")
        duration = time.time() - start_time

        print(f"{name}: {len(result.scales)} scales in {duration:.4f} seconds")
        print(f"{'Scale':<8} {'Variance':<14} {'Low':<14} {'High':<14}")
        for scale, var, low, high in zip(result.scales, result.variance,
                                         result.low, result.high):
            print(f"{int(scale):<8} {var:<14.6g} {low:<14.6g} {high:<14.6g}")

        result.plot(ax=ax)
        ax.set_title(f'{name} - Haar wavelet variance')

    plt.tight_layout()


if __name__ == "__main__":
    configure_logging()

    print("Wavelet Variance Examples")
    print("=" * 50)

    example_decomposition()
    print("=" * 50)
    example_wavelet_variance()

    # Show all plots
    plt.show()
