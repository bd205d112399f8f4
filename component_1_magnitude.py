"""
Magnitude Representation for BigNum
Unsigned unit sequences (least-significant unit first) and the carry/borrow
level algorithms every signed operation is built on.

A magnitude is a list of ints in [0, BASE). Functions here never mutate their
arguments and always return normalized lists: no most-significant zero units,
and zero is exactly [0].
"""

from typing import List, Sequence, Tuple

from common.constants import BASE, BIT_LENGTH_CHUNK_BITS, UNIT_DIGITS

Units = List[int]

ZERO_UNITS: Tuple[int, ...] = (0,)
ONE_UNITS: Tuple[int, ...] = (1,)


# ============================================================================
# Normalization
# ============================================================================


def normalize(units: Sequence[int]) -> Units:
    """Strip most-significant zero units, collapsing zero to [0]."""
    result = list(units)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        result.append(0)
    return result


def is_zero_units(units: Sequence[int]) -> bool:
    return len(units) == 1 and units[0] == 0


def is_one_units(units: Sequence[int]) -> bool:
    return len(units) == 1 and units[0] == 1


def is_odd_units(units: Sequence[int]) -> bool:
    """Parity of the value, read from the least-significant unit (BASE is even)."""
    return bool(units[0] & 1)


# ============================================================================
# Comparison
# ============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare two normalized magnitudes

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# ============================================================================
# Additive
# ============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Units:
    """Unit-wise addition with carry."""
    result: Units = []
    carry = 0
    longest = max(len(a), len(b))

    for i in range(longest):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, unit = divmod(total, BASE)
        result.append(unit)

    if carry:
        result.append(carry)

    return normalize(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> Units:
    """
    Unit-wise subtraction with borrow

    Requires |a| >= |b|; the caller orders the operands.
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("subtract_magnitudes requires a >= b")

    result: Units = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]

        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return normalize(result)


# ============================================================================
# Multiplicative
# ============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> Units:
    """
    Schoolbook long multiplication

    Every unit of a is multiplied against every unit of b into a buffer of
    len(a) + len(b) units, carrying into the next-higher position immediately.
    """
    if is_zero_units(a) or is_zero_units(b):
        return [0]

    result = [0] * (len(a) + len(b))

    for i, a_unit in enumerate(a):
        if a_unit == 0:
            continue
        carry = 0
        for j, b_unit in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + a_unit * b_unit + carry, BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1

    return normalize(result)


def multiply_small(a: Sequence[int], factor: int) -> Units:
    """Multiply a magnitude by a single unit (0 <= factor < BASE)."""
    if factor == 0 or is_zero_units(a):
        return [0]

    result: Units = []
    carry = 0
    for unit in a:
        carry, unit = divmod(unit * factor + carry, BASE)
        result.append(unit)
    while carry:
        carry, unit = divmod(carry, BASE)
        result.append(unit)

    return normalize(result)


def divmod_small(a: Sequence[int], divisor: int) -> Tuple[Units, int]:
    """
    Short division by a positive native int

    Returns:
        (quotient magnitude, remainder int)
    """
    if divisor <= 0:
        raise ValueError("divmod_small requires a positive divisor")

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * BASE + a[i], divisor)

    return normalize(quotient), remainder


def _quotient_unit(remainder: Sequence[int], divisor: Sequence[int]) -> int:
    """
    Largest q in [0, BASE) with divisor * q <= remainder

    Requires len(divisor) >= 2 and remainder < divisor * BASE. The leading
    units of both give a lower bound (top // (lead + 1)) and an upper bound
    (top // lead) on q that differ by at most a couple of units; the exact
    value is found by bisecting between them.
    """
    if compare_magnitudes(remainder, divisor) < 0:
        return 0

    n = len(divisor)
    top = 0
    for unit in reversed(remainder[n - 2 :]):
        top = top * BASE + unit
    lead = divisor[-1] * BASE + divisor[-2]

    low = top // (lead + 1)
    high = min(top // lead, BASE - 1)

    while low < high:
        mid = (low + high + 1) // 2
        if compare_magnitudes(multiply_small(divisor, mid), remainder) <= 0:
            low = mid
        else:
            high = mid - 1

    return low


def divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> Tuple[Units, Units]:
    """
    Long division of magnitudes

    Processes the dividend from its most-significant unit downward, keeping a
    running remainder r = r * BASE + next_unit and extracting one quotient
    unit per position. The remainder starts as the top len(b) - 1 units of
    the dividend, which are below b by length.

    Returns:
        (quotient, remainder) with a == quotient * b + remainder
    """
    if is_zero_units(b):
        raise ZeroDivisionError("divmod_magnitudes by zero")

    if compare_magnitudes(a, b) < 0:
        return [0], list(a)

    if len(b) == 1:
        quotient, rest = divmod_small(a, b[0])
        return quotient, [rest]

    n = len(b)
    quotient: Units = []
    remainder = normalize(a[len(a) - n + 1 :])

    for i in range(len(a) - n, -1, -1):
        # r = r * BASE + a[i]
        remainder = normalize([a[i]] + remainder)
        q_unit = _quotient_unit(remainder, b)
        if q_unit:
            remainder = subtract_magnitudes(remainder, multiply_small(b, q_unit))
        quotient.append(q_unit)

    quotient.reverse()
    return normalize(quotient), remainder


# ============================================================================
# Conversion & introspection
# ============================================================================


def units_from_digits(digits: str) -> Units:
    """Convert a string of ASCII digits (no sign) into a magnitude."""
    units: Units = []
    end = len(digits)
    while end > 0:
        start = max(0, end - UNIT_DIGITS)
        units.append(int(digits[start:end]))
        end = start
    return normalize(units)


def units_to_digits(units: Sequence[int]) -> str:
    """Render a magnitude as decimal digits, most-significant first."""
    parts = [str(units[-1])]
    for i in range(len(units) - 2, -1, -1):
        parts.append(str(units[i]).zfill(UNIT_DIGITS))
    return "".join(parts)


def units_from_int(value: int) -> Units:
    """Convert a non-negative native int into a magnitude."""
    if value < 0:
        raise ValueError("units_from_int requires a non-negative value")

    units: Units = []
    while True:
        value, unit = divmod(value, BASE)
        units.append(unit)
        if value == 0:
            break
    return units


def bit_length_units(units: Sequence[int]) -> int:
    """
    Number of bits of the magnitude, 1 for zero

    Strips BIT_LENGTH_CHUNK_BITS bits per short division while the value
    spans more than one unit, then adds the bits of the remaining unit.
    """
    if is_zero_units(units):
        return 1

    bits = 0
    current = list(units)
    chunk = 1 << BIT_LENGTH_CHUNK_BITS
    while len(current) > 1:
        current, _ = divmod_small(current, chunk)
        bits += BIT_LENGTH_CHUNK_BITS

    return bits + current[0].bit_length()
