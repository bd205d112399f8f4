"""
Modular Arithmetic for BigNum
mod, add_mod, sub_mod, mul_mod, pow_mod, extended_gcd, gcd, mod_inverse

Every function composes the BigInteger operators; none re-implements unit
arithmetic. Operands may be BigInteger, int or decimal text.
"""

from typing import List, Tuple

from bignum_exceptions import (
    DivisionByZeroError,
    NegativeExponentError,
    NoInverseExistsError,
)
from component_2_big_integer import BigInteger, Operand
from component_6_logging_config import get_logger

logger = get_logger(__name__)

TWO = BigInteger.from_integer(2)


def mod(a: Operand, m: Operand) -> BigInteger:
    """
    Canonical residue of a modulo m

    Returns:
        0 <= result < |m|

    Raises:
        DivisionByZeroError: m is zero
    """
    return BigInteger.coerce(a).modulo(m)


def add_mod(a: Operand, b: Operand, m: Operand) -> BigInteger:
    """(a + b) mod m"""
    return BigInteger.coerce(a).add(b).modulo(m)


def sub_mod(a: Operand, b: Operand, m: Operand) -> BigInteger:
    """(a - b) mod m"""
    return BigInteger.coerce(a).subtract(b).modulo(m)


def mul_mod(a: Operand, b: Operand, m: Operand) -> BigInteger:
    """(a * b) mod m"""
    return BigInteger.coerce(a).multiply(b).modulo(m)


def is_congruent(a: Operand, b: Operand, m: Operand) -> bool:
    """
    Check congruence: a ≡ b (mod m)

    Examples:
        is_congruent(7, 1, 3) = True
        is_congruent(10, 2, 4) = True
    """
    return mod(a, m) == mod(b, m)


def pow_mod(base: Operand, exponent: Operand, m: Operand) -> BigInteger:
    """
    Modular exponentiation: base^exponent mod m

    Square-and-multiply over the bits of the exponent, lowest bit first.

    Args:
        base: Base (any sign)
        exponent: Exponent (must be >= 0)
        m: Modulus (must be != 0)

    Returns:
        base^exponent mod m, in [0, |m|)

    Raises:
        DivisionByZeroError: m is zero
        NegativeExponentError: exponent < 0

    Examples:
        pow_mod(2, 10, 1000) = 24
        pow_mod(3, 100, 7) = 4
    """
    base = BigInteger.coerce(base)
    exponent = BigInteger.coerce(exponent)
    m = BigInteger.coerce(m)

    if m.is_zero():
        raise DivisionByZeroError("Modulo by zero", operation="pow_mod")
    if exponent.negative:
        raise NegativeExponentError(
            "Negative exponents are not supported by pow_mod",
            exponent=exponent.to_text(),
        )

    # Everything is congruent to 0 modulo 1
    if m.absolute().is_one():
        return BigInteger.zero()

    result = BigInteger.one()
    base = base.modulo(m)

    while not exponent.is_zero():
        if exponent.is_odd():
            result = mul_mod(result, base, m)
        base = mul_mod(base, base, m)
        exponent = exponent.divide(TWO)

    return result


def extended_gcd(a: Operand, b: Operand) -> Tuple[BigInteger, BigInteger, BigInteger]:
    """
    Extended Euclidean algorithm

    Descends (a, b) -> (b, a - q*b) pushing every quotient q on an explicit
    stack, then back-substitutes the Bézout coefficients from the base case
    (a, 1, 0): x = y1, y = x1 - q * y1.

    Returns:
        (g, x, y) with a*x + b*y == g and g >= 0

    Examples:
        extended_gcd(240, 46) = (2, -9, 47)
    """
    a = BigInteger.coerce(a)
    b = BigInteger.coerce(b)

    quotients: List[BigInteger] = []
    while not b.is_zero():
        quotient, remainder = a.divmod(b)
        quotients.append(quotient)
        a, b = b, remainder

    x, y = BigInteger.one(), BigInteger.zero()
    for quotient in reversed(quotients):
        x, y = y, x.subtract(quotient.multiply(y))

    # Truncating division may leave a negative gcd for negative inputs
    if a.negative:
        return a.negate(), x.negate(), y.negate()

    return a, x, y


def gcd(a: Operand, b: Operand) -> BigInteger:
    """Greatest common divisor, always >= 0 (gcd(0, 0) = 0)"""
    return extended_gcd(a, b)[0]


def mod_inverse(a: Operand, m: Operand) -> BigInteger:
    """
    Modular inverse: find x with a*x ≡ 1 (mod m)

    Args:
        a: Value
        m: Modulus (must be != 0)

    Returns:
        x in [0, |m|)

    Raises:
        DivisionByZeroError: m is zero
        NoInverseExistsError: gcd(a, m) != 1

    Examples:
        mod_inverse(3, 7) = 5  # 3*5 = 15 ≡ 1 (mod 7)
        mod_inverse(123, 1009) = 484
    """
    a = BigInteger.coerce(a)
    m = BigInteger.coerce(m)

    g, x, _ = extended_gcd(a.modulo(m), m)

    # Inverse exists only when gcd(a, m) = 1
    if not g.is_one():
        logger.debug(
            "No modular inverse",
            extra={"value": a.to_text(), "modulus": m.to_text(), "gcd": g.to_text()},
        )
        raise NoInverseExistsError(
            "Modular inverse does not exist",
            value=a.to_text(),
            modulus=m.to_text(),
            gcd=g.to_text(),
        )

    return x.modulo(m)
