"""
BigNum Operations
Operation classes (validate / execute) and the registry the engine dispatches on

Tokens follow the interactive calculator: +, -, *, /, %, addmod, mulmod,
inverse, pow (plus rem, submod, gcd, bits, cmp).
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Union

from component_2_big_integer import BigInteger
from component_3_modular_arithmetic import (
    add_mod,
    gcd,
    mod_inverse,
    mul_mod,
    pow_mod,
    sub_mod,
)

OperationValue = Union[BigInteger, int]


class BaseOperation(ABC):
    """Abstract base class for BigNum operations"""

    def __init__(self, symbol: str, name: str, arity: int):
        self.symbol = symbol
        self.name = name
        self.arity = arity

    def validate(self, *operands) -> Tuple[bool, Optional[str]]:
        """Check operand count and types"""
        if len(operands) != self.arity:
            return (
                False,
                f"{self.name} needs {self.arity} operands, {len(operands)} given",
            )

        for i, op in enumerate(operands):
            if not isinstance(op, BigInteger):
                return False, f"Operand {i+1} is not a BigInteger: {type(op).__name__}"

        return True, None

    @abstractmethod
    def execute(self, *operands) -> OperationValue:
        """Execute the operation on validated operands"""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(symbol={self.symbol!r}, name={self.name!r})"


# ============================================================================
# Basic arithmetic
# ============================================================================


class Addition(BaseOperation):
    def __init__(self):
        super().__init__("+", "addition", 2)

    def execute(self, *operands) -> BigInteger:
        a, b = operands
        return a.add(b)


class Subtraction(BaseOperation):
    def __init__(self):
        super().__init__("-", "subtraction", 2)

    def execute(self, *operands) -> BigInteger:
        a, b = operands
        return a.subtract(b)


class Multiplication(BaseOperation):
    def __init__(self):
        super().__init__("*", "multiplication", 2)

    def execute(self, *operands) -> BigInteger:
        a, b = operands
        return a.multiply(b)


class Division(BaseOperation):
    """Truncating integer division"""

    def __init__(self):
        super().__init__("/", "division", 2)

    def execute(self, *operands) -> BigInteger:
        a, b = operands
        return a.divide(b)


class Remainder(BaseOperation):
    """Remainder of the truncating division (dividend's sign)"""

    def __init__(self):
        super().__init__("rem", "remainder", 2)

    def execute(self, *operands) -> BigInteger:
        a, b = operands
        return a.remainder(b)


class Modulo(BaseOperation):
    """Canonical residue in [0, |m|)"""

    def __init__(self):
        super().__init__("%", "modulo", 2)

    def execute(self, *operands) -> BigInteger:
        a, m = operands
        return a.modulo(m)


# ============================================================================
# Modular arithmetic
# ============================================================================


class ModularAddition(BaseOperation):
    def __init__(self):
        super().__init__("addmod", "modular_addition", 3)

    def execute(self, *operands) -> BigInteger:
        return add_mod(*operands)


class ModularSubtraction(BaseOperation):
    def __init__(self):
        super().__init__("submod", "modular_subtraction", 3)

    def execute(self, *operands) -> BigInteger:
        return sub_mod(*operands)


class ModularMultiplication(BaseOperation):
    def __init__(self):
        super().__init__("mulmod", "modular_multiplication", 3)

    def execute(self, *operands) -> BigInteger:
        return mul_mod(*operands)


class ModularExponentiation(BaseOperation):
    """base^exponent mod m (operands: base, exponent, modulus)"""

    def __init__(self):
        super().__init__("pow", "modular_exponentiation", 3)

    def execute(self, *operands) -> BigInteger:
        return pow_mod(*operands)


class ModularInverse(BaseOperation):
    def __init__(self):
        super().__init__("inverse", "modular_inverse", 2)

    def execute(self, *operands) -> BigInteger:
        return mod_inverse(*operands)


class GreatestCommonDivisor(BaseOperation):
    def __init__(self):
        super().__init__("gcd", "greatest_common_divisor", 2)

    def execute(self, *operands) -> BigInteger:
        return gcd(*operands)


# ============================================================================
# Introspection
# ============================================================================


class BitLength(BaseOperation):
    def __init__(self):
        super().__init__("bits", "bit_length", 1)

    def execute(self, *operands) -> int:
        return operands[0].bit_length()


class Comparison(BaseOperation):
    """Three-way comparison: -1, 0 or 1"""

    def __init__(self):
        super().__init__("cmp", "comparison", 2)

    def execute(self, *operands) -> int:
        a, b = operands
        return a.compare(b)


STANDARD_OPERATIONS = (
    Addition,
    Subtraction,
    Multiplication,
    Division,
    Remainder,
    Modulo,
    ModularAddition,
    ModularSubtraction,
    ModularMultiplication,
    ModularExponentiation,
    ModularInverse,
    GreatestCommonDivisor,
    BitLength,
    Comparison,
)


class OperationRegistry:
    """Registry for all available operations (thread-safe)"""

    def __init__(self):
        self._operations: Dict[str, BaseOperation] = {}
        self._lock = threading.RLock()  # Reentrant lock for nested calls

    def register(self, operation: BaseOperation):
        """Register an operation under its symbol and its name"""
        with self._lock:
            self._operations[operation.symbol] = operation
            self._operations[operation.name] = operation

    def get(self, key: str) -> Optional[BaseOperation]:
        """Get operation by symbol or name"""
        with self._lock:
            return self._operations.get(key)

    def list_operations(self) -> List[str]:
        """List all registered symbols and names"""
        with self._lock:
            return sorted(self._operations.keys())

    @classmethod
    def with_standard_operations(cls) -> "OperationRegistry":
        registry = cls()
        for operation_class in STANDARD_OPERATIONS:
            registry.register(operation_class())
        return registry
