# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Global pytest configuration.
"""

import os
import sys

import matplotlib
import numpy as np
import pytest

# Render plots off-screen
matplotlib.use("Agg")

# Add the project root to the Python path so tests can import modules properly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture
def rng():
    """Seeded random generator so test signals are reproducible."""
    return np.random.default_rng(999)


@pytest.fixture
def white_noise(rng):
    """Unit variance white noise of length 16."""
    return rng.normal(0.0, 1.0, 16)


@pytest.fixture
def long_white_noise(rng):
    """Unit variance white noise of length 2^14."""
    return rng.normal(0.0, 1.0, 2 ** 14)
