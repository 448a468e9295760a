# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Package defaults and logging configuration.
"""

import os
import logging
from typing import Optional, Union

DEFAULT_FILTER = "haar"
DEFAULT_BOUNDARY = "periodic"
DEFAULT_CI_TYPE = "eta3"
DEFAULT_COMPUTE_V = "no"

# One-sided tail probability, (1 - 2p) * 100% interval
DEFAULT_TAIL_PROBABILITY = 0.025

LOG_LEVEL_ENV = "WAVELET_VARIANCE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure logging for the package.

    The library itself never configures logging on import; scripts call this.

    Args:
        level: Logging level name or number. When omitted the value of the
            WAVELET_VARIANCE_LOG_LEVEL environment variable is used, falling
            back to WARNING.

    Returns:
        logging.Logger: The package root logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(format=LOG_FORMAT)
    logger = logging.getLogger("wavelet_variance")
    logger.setLevel(level)
    return logger
