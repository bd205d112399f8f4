"""
BigNum Engine
Facade over the operation registry: parsing with configured limits, dispatch
by operation token, timing and logging
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from bignum_exceptions import (
    InvalidConfigError,
    OperandValidationError,
    UnknownOperationError,
    wrap_exception,
)
from common.constants import DEFAULT_MAX_INPUT_DIGITS
from component_2_big_integer import BigInteger
from component_4_bignum_operations import OperationRegistry, OperationValue
from component_6_logging_config import PerformanceLogger, get_logger

logger = get_logger(__name__)

EngineOperand = Union[BigInteger, int, str]

CONFIG_SECTION = "bignum"


@dataclass
class CalculationResult:
    """Result of an engine calculation"""

    value: OperationValue
    operation: str
    operands: List[BigInteger]
    duration_ms: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_text(self) -> str:
        return str(self.value)


@dataclass
class BigNumConfig:
    """Configuration for BigNumEngine"""

    # Parsing
    strict_parsing: bool = True  # False: skip non-digits, no digits -> 0
    max_input_digits: int = DEFAULT_MAX_INPUT_DIGITS

    # Observability
    track_performance: bool = True  # Time every calculation
    log_calculations: bool = True  # Debug record per calculation

    def __post_init__(self):
        """Validate configuration"""
        if self.max_input_digits < 1:
            raise ValueError("max_input_digits must be >= 1")
        for name in ("strict_parsing", "track_performance", "log_calculations"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")


def load_config(config_path: Union[str, Path]) -> BigNumConfig:
    """
    Load BigNumConfig from the 'bignum' section of a YAML file.

    A missing file or a file without that section yields the defaults.

    Args:
        config_path: Path to the YAML file

    Returns:
        BigNumConfig

    Raises:
        InvalidConfigError: Malformed YAML, unknown keys or invalid values

    Example file:
        bignum:
          strict_parsing: true
          max_input_digits: 20000
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return BigNumConfig()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise wrap_exception(
            e, InvalidConfigError, "Malformed YAML config", path=str(config_path)
        ) from e

    if data is not None and not isinstance(data, dict):
        raise InvalidConfigError(
            "Config file must contain a mapping", context={"path": str(config_path)}
        )

    if not data or CONFIG_SECTION not in data:
        logger.info(f"No '{CONFIG_SECTION}' section in {config_path}, using defaults")
        return BigNumConfig()

    section = data[CONFIG_SECTION]
    if not isinstance(section, dict):
        raise InvalidConfigError(
            f"'{CONFIG_SECTION}' section must be a mapping",
            context={"path": str(config_path)},
        )

    known = {f.name for f in fields(BigNumConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise InvalidConfigError(
            "Unknown configuration keys",
            context={"path": str(config_path), "keys": unknown},
        )

    try:
        config = BigNumConfig(**section)
    except (TypeError, ValueError) as e:
        raise wrap_exception(
            e, InvalidConfigError, "Invalid configuration value", path=str(config_path)
        ) from e

    logger.info(f"[OK] Configuration loaded from {config_path}")
    return config


class BigNumEngine:
    """Main entry point for token-based BigNum calculations (thread-safe)"""

    def __init__(self, config: Optional[BigNumConfig] = None):
        self.config = config or BigNumConfig()
        self.registry = OperationRegistry.with_standard_operations()

        logger.debug(
            "BigNumEngine initialized with config: strict_parsing=%s, "
            "max_input_digits=%d",
            self.config.strict_parsing,
            self.config.max_input_digits,
        )

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path]) -> "BigNumEngine":
        return cls(load_config(config_path))

    def parse(self, text: str) -> BigInteger:
        """Parse decimal text with the configured strictness and digit limit"""
        return BigInteger.from_text(
            text,
            strict=self.config.strict_parsing,
            max_digits=self.config.max_input_digits,
        )

    def to_operand(self, value: EngineOperand) -> BigInteger:
        if isinstance(value, str):
            return self.parse(value)
        if isinstance(value, (BigInteger, int)):
            return BigInteger.coerce(value)
        raise OperandValidationError(
            f"Unsupported operand type: {type(value).__name__}"
        )

    def calculate(self, operation: str, *operands: EngineOperand) -> CalculationResult:
        """
        Execute a calculation

        Args:
            operation: Operation token or name ("+", "pow", "modular_inverse", ...)
            operands: BigInteger, int or decimal text

        Returns:
            CalculationResult with value and timing

        Raises:
            UnknownOperationError: Operation not registered
            OperandValidationError: Wrong operand count or type
            ParseError: Malformed operand text
            DivisionByZeroError, NoInverseExistsError, NegativeExponentError:
                propagated unchanged from the arithmetic
        """
        op = self.registry.get(operation)
        if not op:
            logger.warning("Unknown operation requested: %s", operation)
            raise UnknownOperationError(
                f"Unknown operation: {operation}", operation=operation
            )

        values = [self.to_operand(value) for value in operands]

        valid, error = op.validate(*values)
        if not valid:
            raise OperandValidationError(
                f"Validation failed: {error}", operation=op.name
            )

        if self.config.log_calculations:
            logger.debug(
                "calculate() called: operation=%s, operand_bits=%s",
                op.name,
                [value.bit_length() for value in values],
            )

        if self.config.track_performance:
            with PerformanceLogger(logger.logger, op.name, arity=op.arity) as perf:
                value = op.execute(*values)
            duration_ms = perf.duration_ms
        else:
            value = op.execute(*values)
            duration_ms = 0.0

        return CalculationResult(
            value=value,
            operation=op.name,
            operands=values,
            duration_ms=duration_ms,
            metadata={"symbol": op.symbol},
        )

    def evaluate(self, operation: str, *operands: EngineOperand) -> str:
        """calculate() rendered as canonical text"""
        return self.calculate(operation, *operands).to_text()

    def list_operations(self) -> List[str]:
        return self.registry.list_operations()
