# tests/test_modular_arithmetic.py
"""
Tests for the modular arithmetic suite (component_3).

Covers:
- add_mod / sub_mod / mul_mod / is_congruent
- pow_mod (square-and-multiply) against Python's pow
- extended_gcd (Bézout identity, deep Euclid chains)
- mod_inverse (success and failure cases)
"""

import math
import random
import sys

import pytest

from bignum_exceptions import (
    DivisionByZeroError,
    NegativeExponentError,
    NoInverseExistsError,
)
from component_2_big_integer import BigInteger
from component_3_modular_arithmetic import (
    add_mod,
    extended_gcd,
    gcd,
    is_congruent,
    mod,
    mod_inverse,
    mul_mod,
    pow_mod,
    sub_mod,
)

MERSENNE_127 = 2**127 - 1


@pytest.fixture
def rng():
    """Fixture: seeded random generator"""
    return random.Random(1009)


class TestBasicModular:
    """Tests for mod / add_mod / sub_mod / mul_mod"""

    def test_mod_accepts_mixed_operands(self):
        assert mod("-7", 3) == 2
        assert mod(BigInteger.from_integer(10), "4") == 2

    def test_add_mod(self):
        a = "12345678901234567890"
        b = "98765432109876543210"
        expected = (12345678901234567890 + 98765432109876543210) % 1000000007
        assert add_mod(a, b, "1000000007") == expected

    def test_mul_mod_concrete(self):
        result = mul_mod("123456789", "987654321", "1000000007")
        assert result.to_text() == "259106859"
        assert int(result) == (123456789 * 987654321) % 1000000007

    def test_sub_mod_wraps_around(self):
        assert sub_mod(3, 5, 7) == 5

    def test_against_int_oracle(self, rng):
        for _ in range(100):
            a = rng.randrange(-(10**40), 10**40)
            b = rng.randrange(-(10**40), 10**40)
            m = rng.randrange(1, 10**25)
            assert int(add_mod(a, b, m)) == (a + b) % m
            assert int(sub_mod(a, b, m)) == (a - b) % m
            assert int(mul_mod(a, b, m)) == (a * b) % m

    def test_zero_modulus(self):
        with pytest.raises(DivisionByZeroError):
            add_mod(1, 2, 0)
        with pytest.raises(DivisionByZeroError):
            mul_mod(1, 2, 0)

    def test_is_congruent(self):
        assert is_congruent(7, 1, 3)
        assert is_congruent(10, 2, 4)
        assert not is_congruent(10, 3, 4)
        assert is_congruent(-1, 6, 7)


class TestPowMod:
    """Tests for pow_mod()"""

    def test_small_known_values(self):
        assert pow_mod(2, 10, 1000) == 24
        assert pow_mod(3, 100, 7) == 4

    def test_calculator_example(self):
        assert int(pow_mod("12345", "67890", "1000000009")) == pow(12345, 67890, 1000000009)

    def test_matches_repeated_multiplication(self):
        for base in (2, 3, 7, 10, 123):
            for m in (2, 97, 1000, 65537):
                expected = 1 % m
                for exponent in range(0, 301):
                    if exponent % 23 == 0:
                        assert int(pow_mod(base, exponent, m)) == expected
                    expected = expected * base % m

    def test_against_builtin_pow(self, rng):
        for _ in range(5):
            base = rng.randrange(0, 2**128)
            exponent = rng.randrange(0, 2**128)
            m = rng.randrange(2, 2**128)
            assert int(pow_mod(base, exponent, m)) == pow(base, exponent, m)

    def test_modulus_one_is_zero(self):
        assert pow_mod(5, 0, 1).is_zero()
        assert pow_mod(5, 3, -1).is_zero()

    def test_zero_exponent(self):
        assert pow_mod(5, 0, 7).is_one()
        assert pow_mod(0, 0, 7).is_one()

    def test_negative_base(self):
        assert pow_mod(-2, 3, 5) == 2

    def test_negative_modulus_gives_canonical_residue(self):
        assert pow_mod(3, 4, -5) == 1

    def test_negative_exponent_is_rejected(self):
        with pytest.raises(NegativeExponentError):
            pow_mod(2, -1, 7)

    def test_zero_modulus(self):
        with pytest.raises(DivisionByZeroError):
            pow_mod(2, 5, 0)


class TestExtendedGcd:
    """Tests for extended_gcd() and gcd()"""

    def test_textbook_example(self):
        g, x, y = extended_gcd(240, 46)
        assert (g, x, y) == (2, -9, 47)

    def test_zero_operands(self):
        assert extended_gcd(0, 0) == (0, 1, 0)
        g, x, y = extended_gcd(0, 5)
        assert g == 5
        assert int(x) * 0 + int(y) * 5 == 5

    def test_bezout_identity(self, rng):
        for _ in range(100):
            a = rng.randrange(-(10**50), 10**50)
            b = rng.randrange(-(10**50), 10**50)
            g, x, y = extended_gcd(a, b)
            assert int(g) == math.gcd(a, b)
            assert a * int(x) + b * int(y) == int(g)

    def test_consecutive_fibonacci_exceed_recursion_limit(self):
        # Consecutive Fibonacci numbers need one Euclid step per index
        steps = sys.getrecursionlimit() + 500
        a, b = 0, 1
        for _ in range(steps):
            a, b = b, a + b

        g, x, y = extended_gcd(b, a)
        assert g.is_one()
        assert b * int(x) + a * int(y) == 1

    def test_gcd(self):
        assert gcd(12, 18) == 6
        assert gcd(-12, 18) == 6
        assert gcd(0, -7) == 7


class TestModInverse:
    """Tests for mod_inverse()"""

    def test_concrete_inverse(self):
        assert mod_inverse("123", "1009").to_text() == "484"

    def test_small_inverse(self):
        assert mod_inverse(3, 7) == 5

    def test_no_inverse(self):
        with pytest.raises(NoInverseExistsError) as exc_info:
            mod_inverse("4", "8")
        assert exc_info.value.context["gcd"] == "4"

    def test_zero_modulus(self):
        with pytest.raises(DivisionByZeroError):
            mod_inverse(3, 0)

    def test_negative_value(self):
        assert int(mod_inverse(-3, 7)) == pow(-3, -1, 7)

    def test_every_unit_modulo_prime(self):
        for a in range(1, 1009):
            inverse = mod_inverse(a, 1009)
            assert 0 <= int(inverse) < 1009
            assert mul_mod(a, inverse, 1009).is_one()

    def test_large_prime(self, rng):
        for _ in range(10):
            a = rng.randrange(1, MERSENNE_127)
            inverse = mod_inverse(a, MERSENNE_127)
            assert int(inverse) == pow(a, -1, MERSENNE_127)
            assert mul_mod(a, inverse, MERSENNE_127).is_one()

    def test_modulus_one(self):
        assert mod_inverse(5, 1).is_zero()
