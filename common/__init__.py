"""
Common constants for the BigNum engine.

This package provides the representation constants and default limits
shared by every component.
"""

from common.constants import *

__all__ = [
    # Representation
    "UNIT_DIGITS",
    "BASE",
    # Bit Length
    "BIT_LENGTH_CHUNK_BITS",
    # Input Limits
    "DEFAULT_MAX_INPUT_DIGITS",
    # Logging
    "PERFORMANCE_LOGGER_NAME",
]
