"""
Centralized constants for the BigNum arithmetic engine.

This module provides a single source of truth for the numeric representation
and the default limits used throughout the engine. Components may override the
limits via BigNumConfig (see component_5_bignum_engine).

Organization:
    - Representation: unit base and decimal digits per unit
    - Bit Length: chunk size used when counting bits
    - Input Limits: default guards for text parsing
    - Logging: logger names shared between components

Usage:
    from common.constants import BASE, UNIT_DIGITS
"""

# =============================================================================
# Representation
# =============================================================================

UNIT_DIGITS: int = 4
"""
Number of decimal digits stored in one magnitude unit.

A decimal power base keeps text conversion a matter of slicing the digit
string, while four digits keep every unit product (< 10^8) and every
intermediate carry far inside machine-word range.
"""

BASE: int = 10**UNIT_DIGITS
"""
Radix of one magnitude unit (10_000).

Must be even: the parity of a value is read from its least-significant unit.

Used by:
    - component_1_magnitude.py: every carry / borrow / division step
"""

# =============================================================================
# Bit Length
# =============================================================================

BIT_LENGTH_CHUNK_BITS: int = 12
"""
Bits stripped per halving step in bit_length().

2^12 = 4096 is below BASE, so a value spanning more than one unit always
loses exactly this many bits per short division.
"""

# =============================================================================
# Input Limits
# =============================================================================

DEFAULT_MAX_INPUT_DIGITS: int = 1_000_000
"""
Maximum number of decimal digits accepted by the engine's parser.

Protects the quadratic algorithms from accidental multi-megabyte input.
BigInteger.from_text() itself is unlimited unless a limit is passed.
"""

# =============================================================================
# Logging
# =============================================================================

PERFORMANCE_LOGGER_NAME: str = "bignum.performance"
"""Logger receiving one record per timed operation (PerformanceLogger)."""
