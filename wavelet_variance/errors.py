# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Exceptions raised by the wavelet variance package.

Every precondition failure aborts the whole computation. The taxonomy errors
also derive from ValueError so callers catching the generic error keep working.
"""

from enum import Enum
from typing import Type, TypeVar, Union


E = TypeVar("E", bound=Enum)


class WaveletVarianceError(Exception):
    """Base class for all wavelet variance errors."""


class UnsupportedFilterError(WaveletVarianceError, ValueError):
    """The requested wavelet filter is not in the catalog."""


class UnsupportedBoundaryError(WaveletVarianceError, ValueError):
    """The requested boundary handling mode is unknown."""


class InvalidDecompositionError(WaveletVarianceError, ValueError):
    """The number of levels is incompatible with the signal length."""


class UnsupportedCITypeError(WaveletVarianceError, ValueError):
    """The requested confidence interval method is unknown."""


class EmptyLevelError(WaveletVarianceError, ValueError):
    """A decomposition level holds no coefficients."""


class UnsupportedTransformError(WaveletVarianceError, ValueError):
    """The requested transform method is neither DWT nor MODWT."""


class UnsupportedCovarianceModeError(WaveletVarianceError, ValueError):
    """The requested covariance mode is unknown."""


def coerce_enum(enum_cls: Type[E], value: Union[E, str],
                error_cls: Type[WaveletVarianceError], what: str) -> E:
    """
    Convert a string or enum member into a member of ``enum_cls``.

    Args:
        enum_cls: Enum class whose values are the accepted strings
        value: Enum member or its string value
        error_cls: Exception raised when ``value`` is not recognised
        what: Human readable name of the parameter, used in the message

    Returns:
        The matching enum member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        supported = ", ".join(repr(member.value) for member in enum_cls)
        raise error_cls(
            f"The supplied {what} {value!r} is not supported. Choose one of: {supported}"
        ) from None
