"""
Wavelet Variance Module

This package decomposes a signal with pyramid wavelet transforms and
estimates the wavelet variance of the underlying process together with
confidence intervals.

Key components:
- Wavelet filter catalog (Haar)
- Decimated and maximal overlap wavelet transforms (DWT, MODWT)
- Boundary coefficient removal
- Autocovariance through the discrete Fourier transform
- Wavelet variance with eta3 and Gaussian confidence intervals
"""

from .errors import (
    WaveletVarianceError,
    UnsupportedFilterError,
    UnsupportedBoundaryError,
    InvalidDecompositionError,
    UnsupportedCITypeError,
    EmptyLevelError,
    UnsupportedTransformError,
    UnsupportedCovarianceModeError
)

from .config import configure_logging

from .filters import (
    FilterName,
    WaveletFilter,
    reverse,
    qmf,
    haar_filter,
    select_filter
)

from .wavelet import (
    BoundaryMode,
    DiscreteWaveletTransform,
    MaximalOverlapDWT,
    extend_signal,
    wrap_index,
    dwt,
    modwt
)

from .boundary import (
    TransformMethod,
    boundary_count,
    brick_wall,
    trim
)

from .spectral import (
    dft_acf,
    mod_squared,
    modulus
)

from .variance import (
    CIType,
    ci_eta3,
    wave_variance,
    diagonal_covariance,
    gaussian_ci
)

from .analysis import (
    CovarianceMode,
    WaveletVarianceResult,
    analyze,
    wavelet_variance
)

# Version information
__version__ = '0.1.0'
