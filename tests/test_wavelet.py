# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Unit tests for the wavelet transform module.
"""

import unittest

import numpy as np

from wavelet_variance import (
    BoundaryMode,
    DiscreteWaveletTransform,
    InvalidDecompositionError,
    MaximalOverlapDWT,
    UnsupportedBoundaryError,
    dwt,
    extend_signal,
    modwt,
    wrap_index,
)


class TestWaveletTransforms(unittest.TestCase):
    """Test wavelet transform implementations."""

    def setUp(self):
        """Set up test signals."""
        rng = np.random.default_rng(42)
        self.signal_length = 64
        self.noise_signal = rng.normal(0.0, 1.0, self.signal_length)
        self.ramp_signal = np.array([1.0, 2.0, 3.0, 4.0])

    def test_wrap_index(self):
        """Negative indices wrap to the end of the sequence."""
        self.assertEqual(wrap_index(-1, 4), 3)
        self.assertEqual(wrap_index(-5, 4), 3)
        self.assertEqual(wrap_index(6, 4), 2)
        self.assertTrue(np.array_equal(wrap_index(np.array([-2, -1, 0, 1]), 4), [2, 3, 0, 1]))

    def test_extend_signal(self):
        """Test boundary handling modes."""
        periodic = extend_signal(self.ramp_signal, BoundaryMode.PERIODIC)
        self.assertTrue(np.array_equal(periodic, self.ramp_signal))

        reflected = extend_signal(self.ramp_signal, "reflection")
        self.assertTrue(np.array_equal(reflected, [1, 2, 3, 4, 4, 3, 2, 1]))

        with self.assertRaises(UnsupportedBoundaryError):
            extend_signal(self.ramp_signal, "zero")

    def test_dwt_basic(self):
        """Test basic DWT functionality."""
        levels = 4
        result = dwt(self.noise_signal, levels=levels)

        self.assertEqual(len(result), levels)
        for j, coeffs in enumerate(result, start=1):
            self.assertEqual(len(coeffs), self.signal_length // 2 ** j)

    def test_dwt_known_values(self):
        """Haar DWT of a ramp."""
        a = 1.0 / np.sqrt(2.0)
        result = DiscreteWaveletTransform("haar").forward_full(self.ramp_signal, levels=2)

        self.assertTrue(np.allclose(result['wavelet'][0], [a, a]))
        self.assertTrue(np.allclose(result['scaling'][0], [3 * a, 7 * a]))
        self.assertTrue(np.allclose(result['wavelet'][1], [2.0]))
        self.assertTrue(np.allclose(result['scaling'][1], [5.0]))

    def test_dwt_energy_preservation(self):
        """The orthonormal DWT preserves energy."""
        result = DiscreteWaveletTransform().forward_full(self.noise_signal, levels=5)
        energy = sum(np.sum(w ** 2) for w in result['wavelet']) + np.sum(result['scaling'][-1] ** 2)
        self.assertAlmostEqual(energy, np.sum(self.noise_signal ** 2), places=10)

    def test_dwt_invalid_levels(self):
        """DWT requires N divisible by 2^J and 2^J <= N."""
        with self.assertRaises(InvalidDecompositionError):
            dwt(np.ones(10), levels=4)
        with self.assertRaises(InvalidDecompositionError):
            dwt(np.ones(12), levels=3)
        with self.assertRaises(InvalidDecompositionError):
            dwt(np.ones(16), levels=0)
        with self.assertRaises(InvalidDecompositionError):
            dwt(np.ones(16), levels=2.5)

    def test_dwt_reflection_doubles_length(self):
        """Reflection boundary doubles the signal before decomposition."""
        result = dwt(np.arange(8.0), levels=4, boundary=BoundaryMode.REFLECTION)
        self.assertEqual([len(c) for c in result], [8, 4, 2, 1])

        # 8 samples cannot support 4 periodic levels
        with self.assertRaises(InvalidDecompositionError):
            dwt(np.arange(8.0), levels=4, boundary=BoundaryMode.PERIODIC)

    def test_dwt_matches_pywavelets(self):
        """Haar DWT agrees with PyWavelets up to the sign convention."""
        try:
            import pywt
        except ImportError:
            self.skipTest("PyWavelets not installed")

        levels = 3
        result = dwt(self.noise_signal, levels=levels)
        reference = pywt.wavedec(self.noise_signal, 'haar', mode='periodization', level=levels)

        for j in range(levels):
            self.assertTrue(np.allclose(np.abs(result[j]), np.abs(reference[-(j + 1)])))

    def test_modwt_basic(self):
        """Test basic MODWT functionality."""
        levels = 3
        result = MaximalOverlapDWT("haar").forward_full(self.noise_signal, levels)

        self.assertIn('wavelet', result)
        self.assertIn('scaling', result)
        self.assertEqual(len(result['wavelet']), levels)
        self.assertEqual(len(result['scaling']), levels)

        # MODWT doesn't downsample, so all coefficients should have the same length
        for coeffs in result['wavelet'] + result['scaling']:
            self.assertEqual(len(coeffs), self.signal_length)

    def test_modwt_known_values(self):
        """Haar MODWT of a ramp, first level."""
        result = MaximalOverlapDWT().forward_full(self.ramp_signal, levels=1)

        self.assertTrue(np.allclose(result['wavelet'][0], [-1.5, 0.5, 0.5, 0.5]))
        self.assertTrue(np.allclose(result['scaling'][0], [2.5, 1.5, 2.5, 3.5]))

    def test_modwt_second_level_uses_dilated_filter(self):
        """Level 2 filters the level 1 scaling coefficients with lag 2."""
        result = MaximalOverlapDWT().forward_full(self.ramp_signal, levels=2)
        V1 = result['scaling'][0]
        expected = 0.5 * (V1 - np.roll(V1, 2))

        self.assertTrue(np.allclose(result['wavelet'][1], expected))

    def test_modwt_energy_preservation(self):
        """MODWT wavelet and scaling energies sum to the signal energy."""
        result = MaximalOverlapDWT().forward_full(self.noise_signal, levels=4)
        energy = sum(np.sum(w ** 2) for w in result['wavelet']) + np.sum(result['scaling'][-1] ** 2)
        self.assertAlmostEqual(energy, np.sum(self.noise_signal ** 2), places=10)

    def test_modwt_invalid_levels(self):
        """MODWT requires 2^J <= N but not divisibility."""
        with self.assertRaises(InvalidDecompositionError):
            modwt(np.ones(10), levels=4)

        result = modwt(np.ones(12), levels=3)
        self.assertEqual([len(c) for c in result], [12, 12, 12])

    def test_modwt_reflection(self):
        """Reflection boundary doubles the MODWT length."""
        result = modwt(self.noise_signal, levels=2, boundary="reflection")
        for coeffs in result:
            self.assertEqual(len(coeffs), 2 * self.signal_length)

        with self.assertRaises(UnsupportedBoundaryError):
            modwt(self.noise_signal, levels=2, boundary="symmetric")

    def test_input_not_modified(self):
        """Transforms never modify the caller's signal."""
        original = self.noise_signal.copy()
        dwt(self.noise_signal, levels=3, boundary="reflection")
        modwt(self.noise_signal, levels=3, boundary="reflection")
        self.assertTrue(np.array_equal(self.noise_signal, original))


if __name__ == '__main__':
    unittest.main()
