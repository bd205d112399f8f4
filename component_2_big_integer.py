"""
BigInteger Value Type for BigNum
Immutable arbitrary-precision signed integer (sign flag + magnitude units)

All operations return new instances. Division is truncating (quotient rounds
toward zero, remainder takes the dividend's sign); modulo is canonical
(0 <= a mod m < |m|).
"""

from dataclasses import dataclass
from typing import Tuple, Union

from bignum_exceptions import DivisionByZeroError, NegativeExponentError, ParseError
from common.constants import BASE
from component_1_magnitude import (
    ONE_UNITS,
    ZERO_UNITS,
    add_magnitudes,
    bit_length_units,
    compare_magnitudes,
    divmod_magnitudes,
    is_odd_units,
    is_one_units,
    is_zero_units,
    multiply_magnitudes,
    normalize,
    subtract_magnitudes,
    units_from_digits,
    units_from_int,
    units_to_digits,
)

Operand = Union["BigInteger", int, str]


@dataclass(frozen=True, eq=False)
class BigInteger:
    """
    Arbitrary-precision signed integer

    Attributes:
        magnitude: Units in [0, BASE), least-significant first, normalized
        negative: Sign flag; always False for zero

    Construction normalizes the magnitude and clears the sign of zero, so
    every instance satisfies the representation invariants.
    """

    magnitude: Tuple[int, ...] = ZERO_UNITS
    negative: bool = False

    def __post_init__(self):
        units = tuple(normalize(self.magnitude))
        for unit in units:
            if not isinstance(unit, int) or not 0 <= unit < BASE:
                raise ValueError(f"Magnitude unit out of range [0, {BASE}): {unit!r}")

        object.__setattr__(self, "magnitude", units)
        object.__setattr__(self, "negative", bool(self.negative) and not is_zero_units(units))

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls()

    @classmethod
    def one(cls) -> "BigInteger":
        return cls(ONE_UNITS)

    @classmethod
    def from_integer(cls, value: int) -> "BigInteger":
        """Convert a native int (any size, including the i64 range)"""
        if not isinstance(value, int):
            raise TypeError(f"from_integer() expects int, got {type(value).__name__}")

        value = int(value)
        return cls(tuple(units_from_int(abs(value))), value < 0)

    @classmethod
    def from_text(
        cls, text: str, strict: bool = True, max_digits: Union[int, None] = None
    ) -> "BigInteger":
        """
        Parse a decimal integer

        Format: optional leading '-', then one or more ASCII digits.
        Surrounding whitespace is ignored.

        Args:
            text: Input text
            strict: Raise ParseError on malformed input. With strict=False,
                non-digit characters are skipped and input without digits
                yields zero.
            max_digits: Optional limit on the number of digits

        Returns:
            Parsed value

        Raises:
            ParseError: Malformed input (strict mode) or too many digits
        """
        if not isinstance(text, str):
            raise TypeError(f"from_text() expects str, got {type(text).__name__}")

        stripped = text.strip()
        negative = stripped.startswith("-")
        body = stripped[1:] if negative else stripped

        if strict:
            if not body:
                raise ParseError("Empty integer literal", text=text)
            if not (body.isascii() and body.isdigit()):
                raise ParseError("Malformed integer literal", text=text)
            digits = body
        else:
            digits = "".join(ch for ch in body if "0" <= ch <= "9")

        if max_digits is not None and len(digits) > max_digits:
            raise ParseError(
                f"Integer literal exceeds {max_digits} digits",
                text=text,
                context={"digits": len(digits)},
            )

        return cls(tuple(units_from_digits(digits)), negative)

    @classmethod
    def coerce(cls, value: Operand) -> "BigInteger":
        """Accept BigInteger, int or (strictly parsed) str"""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int):
            return cls.from_integer(value)
        if isinstance(value, str):
            return cls.from_text(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to BigInteger")

    # ========================================================================
    # Introspection
    # ========================================================================

    def is_zero(self) -> bool:
        return is_zero_units(self.magnitude)

    def is_one(self) -> bool:
        return not self.negative and is_one_units(self.magnitude)

    def is_odd(self) -> bool:
        return is_odd_units(self.magnitude)

    def is_even(self) -> bool:
        return not is_odd_units(self.magnitude)

    def sign(self) -> int:
        """-1, 0 or 1"""
        if self.is_zero():
            return 0
        return -1 if self.negative else 1

    def bit_length(self) -> int:
        """Bits of |self|; the zero value reports 1"""
        return bit_length_units(self.magnitude)

    def to_text(self) -> str:
        """Canonical decimal text: '-' only for non-zero negatives, no leading zeros"""
        digits = units_to_digits(self.magnitude)
        return "-" + digits if self.negative else digits

    # ========================================================================
    # Comparison
    # ========================================================================

    def compare(self, other: Operand) -> int:
        """
        Total order over signed values

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        other = BigInteger.coerce(other)

        if self.negative != other.negative:
            return -1 if self.negative else 1

        result = compare_magnitudes(self.magnitude, other.magnitude)
        return -result if self.negative else result

    def __eq__(self, other) -> bool:
        if isinstance(other, str) or not isinstance(other, (BigInteger, int)):
            return NotImplemented
        other = BigInteger.coerce(other)
        return self.negative == other.negative and self.magnitude == other.magnitude

    def __hash__(self) -> int:
        # Equal to 5 means hashing like 5
        return hash(int(self))

    def __lt__(self, other) -> bool:
        return self._compare_or_not_implemented(other, lambda c: c < 0)

    def __le__(self, other) -> bool:
        return self._compare_or_not_implemented(other, lambda c: c <= 0)

    def __gt__(self, other) -> bool:
        return self._compare_or_not_implemented(other, lambda c: c > 0)

    def __ge__(self, other) -> bool:
        return self._compare_or_not_implemented(other, lambda c: c >= 0)

    def _compare_or_not_implemented(self, other, predicate):
        if isinstance(other, str) or not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return predicate(self.compare(other))

    # ========================================================================
    # Additive operations
    # ========================================================================

    def negate(self) -> "BigInteger":
        return BigInteger(self.magnitude, not self.negative)

    def absolute(self) -> "BigInteger":
        return BigInteger(self.magnitude, False)

    def add(self, other: Operand) -> "BigInteger":
        other = BigInteger.coerce(other)

        if self.negative == other.negative:
            return BigInteger(
                tuple(add_magnitudes(self.magnitude, other.magnitude)), self.negative
            )

        # Different signs: turn the addition into a subtraction
        if self.negative:
            return other.subtract(self.negate())
        return self.subtract(other.negate())

    def subtract(self, other: Operand) -> "BigInteger":
        other = BigInteger.coerce(other)

        if self.negative != other.negative:
            return self.add(other.negate())

        if self.negative:
            # -a - (-b) = b - a
            return other.negate().subtract(self.negate())

        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            return other.subtract(self).negate()

        return BigInteger(tuple(subtract_magnitudes(self.magnitude, other.magnitude)))

    # ========================================================================
    # Multiplicative operations
    # ========================================================================

    def multiply(self, other: Operand) -> "BigInteger":
        other = BigInteger.coerce(other)
        return BigInteger(
            tuple(multiply_magnitudes(self.magnitude, other.magnitude)),
            self.negative != other.negative,
        )

    def divmod(self, other: Operand) -> Tuple["BigInteger", "BigInteger"]:
        """
        Truncating division with remainder

        Returns:
            (quotient, remainder) with self == quotient * other + remainder,
            quotient rounded toward zero and remainder carrying self's sign

        Raises:
            DivisionByZeroError: other is zero
        """
        other = BigInteger.coerce(other)
        if other.is_zero():
            raise DivisionByZeroError("Division by zero", operation="divide")

        quotient, remainder = divmod_magnitudes(self.magnitude, other.magnitude)
        return (
            BigInteger(tuple(quotient), self.negative != other.negative),
            BigInteger(tuple(remainder), self.negative),
        )

    def divide(self, other: Operand) -> "BigInteger":
        """Truncating quotient (rounds toward zero)"""
        return self.divmod(other)[0]

    def remainder(self, other: Operand) -> "BigInteger":
        """Remainder of the truncating division, with the dividend's sign"""
        return self.divmod(other)[1]

    def modulo(self, modulus: Operand) -> "BigInteger":
        """
        Canonical residue: 0 <= result < |modulus|

        Computed as self - (self / m) * m; a negative raw remainder is lifted
        by |m|.

        Raises:
            DivisionByZeroError: modulus is zero
        """
        modulus = BigInteger.coerce(modulus)
        if modulus.is_zero():
            raise DivisionByZeroError("Modulo by zero", operation="modulo")

        quotient = self.divide(modulus)
        result = self.subtract(quotient.multiply(modulus))

        if result.negative:
            result = result.add(modulus.absolute())

        return result

    def power(self, exponent: Union["BigInteger", int]) -> "BigInteger":
        """
        self ** exponent by square-and-multiply (no modulus)

        Raises:
            NegativeExponentError: exponent < 0
        """
        exponent = BigInteger.coerce(exponent)
        if exponent.negative:
            raise NegativeExponentError(
                "Negative exponents are not supported", exponent=exponent.to_text()
            )

        result = BigInteger.one()
        base = self
        two = BigInteger.from_integer(2)
        while not exponent.is_zero():
            if exponent.is_odd():
                result = result.multiply(base)
            exponent = exponent.divide(two)
            if not exponent.is_zero():
                base = base.multiply(base)

        return result

    # ========================================================================
    # Python protocol
    # ========================================================================

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_text()}')"

    def __int__(self) -> int:
        value = 0
        for unit in reversed(self.magnitude):
            value = value * BASE + unit
        return -value if self.negative else value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    def __add__(self, other):
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.from_integer(other).add(self)

    def __sub__(self, other):
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.from_integer(other).subtract(self)

    def __mul__(self, other):
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.from_integer(other).multiply(self)

    def __mod__(self, other):
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.modulo(other)

    def __rmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.from_integer(other).modulo(self)

    def __pow__(self, exponent, modulus=None):
        if not isinstance(exponent, (BigInteger, int)):
            return NotImplemented
        if modulus is None:
            return self.power(exponent)

        # Import here to avoid circular dependency
        from component_3_modular_arithmetic import pow_mod

        return pow_mod(self, exponent, modulus)
