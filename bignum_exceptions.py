"""
bignum_exceptions.py

Central exception hierarchy for the BigNum engine.
Defines specialised exception classes for the different failure scenarios.

Exception hierarchy:
    BigNumException (base)
    ├── ArithmeticException
    │   ├── DivisionByZeroError
    │   ├── NoInverseExistsError
    │   └── NegativeExponentError
    ├── ParsingException
    │   └── ParseError
    ├── OperationException
    │   ├── UnknownOperationError
    │   └── OperandValidationError
    └── ConfigurationException
        └── InvalidConfigError

DivisionByZeroError also derives from ZeroDivisionError, ParseError and
NegativeExponentError from ValueError, so callers that only know the builtin
exception types still catch them.

Usage:
    from bignum_exceptions import DivisionByZeroError, NoInverseExistsError

    try:
        inverse = mod_inverse(a, m)
    except NoInverseExistsError as e:
        logger.error(f"No inverse: {e}")
        logger.error(f"Context: {e.context}")
"""

from typing import Any, Dict, Optional


class BigNumException(Exception):
    """
    Base exception for all BigNum errors.

    Every BigNum exception carries:
    - a human readable message
    - contextual information (dict)
    - an optional original exception (chained via 'from' as well)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_msg = self.message

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# ============================================================================
# ARITHMETIC EXCEPTIONS
# ============================================================================


class ArithmeticException(BigNumException):
    """Base exception for failed arithmetic operations."""


class DivisionByZeroError(ArithmeticException, ZeroDivisionError):
    """
    Divisor or modulus is zero.

    Raised by:
    - divide / remainder / divmod
    - modulo and every modular operation
    """

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        context["operation"] = operation
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class NoInverseExistsError(ArithmeticException):
    """
    Modular inverse does not exist.

    Cause:
    - gcd(a, m) != 1
    """

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        modulus: Optional[str] = None,
        gcd: Optional[str] = None,
        **kwargs,
    ):
        context = kwargs.get("context", {})
        context["value"] = value
        context["modulus"] = modulus
        context["gcd"] = gcd
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class NegativeExponentError(ArithmeticException, ValueError):
    """
    Exponent is negative where only non-negative exponents are defined.

    pow_mod and power never fall back to inverse-based semantics.
    """

    def __init__(self, message: str, exponent: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        context["exponent"] = exponent
        kwargs["context"] = context
        super().__init__(message, **kwargs)


# ============================================================================
# PARSING EXCEPTIONS
# ============================================================================


class ParsingException(BigNumException):
    """Base exception for text conversion errors."""


class ParseError(ParsingException, ValueError):
    """
    Malformed textual integer.

    Causes:
    - empty input or a lone '-'
    - characters other than ASCII digits after the optional sign
    - more digits than the configured limit
    """

    def __init__(self, message: str, text: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        # Long inputs are abbreviated so the message stays readable
        if text is not None and len(text) > 40:
            text = text[:37] + "..."
        context["text"] = text
        kwargs["context"] = context
        super().__init__(message, **kwargs)


# ============================================================================
# OPERATION EXCEPTIONS
# ============================================================================


class OperationException(BigNumException):
    """Base exception for operation dispatch errors."""


class UnknownOperationError(OperationException):
    """Operation token or name is not registered."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        context["operation"] = operation
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class OperandValidationError(OperationException):
    """
    Operands do not fit the operation.

    Causes:
    - wrong number of operands
    - operand is not a BigInteger
    """

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        context["operation"] = operation
        kwargs["context"] = context
        super().__init__(message, **kwargs)


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================


class ConfigurationException(BigNumException):
    """Base exception for configuration errors."""


class InvalidConfigError(ConfigurationException):
    """
    Invalid configuration.

    Causes:
    - unreadable or malformed YAML
    - unknown keys in the 'bignum' section
    - values rejected by BigNumConfig validation
    """


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def wrap_exception(
    exc: Exception, bignum_exception_class: type[BigNumException], message: str, **context
) -> BigNumException:
    """
    Convert a generic exception into a BigNum exception.

    Args:
        exc: Original exception
        bignum_exception_class: Target class (e.g. InvalidConfigError)
        message: Custom error message
        **context: Additional context information

    Returns:
        BigNum exception chained to the original exception

    Example:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise wrap_exception(e, InvalidConfigError, "Malformed YAML", path=path)
    """
    return bignum_exception_class(message=message, context=context, original_exception=exc)


def get_user_friendly_message(exc: Exception, include_details: bool = False) -> str:
    """
    Build a one-line message for a front end from an exception.

    Args:
        exc: Exception object
        include_details: Append the technical message and context (debug mode)

    Returns:
        User facing message
    """
    friendly_messages = {
        DivisionByZeroError: "[ERROR] Division by zero.",
        NoInverseExistsError: "[ERROR] Modular inverse does not exist.",
        NegativeExponentError: "[ERROR] Negative exponents are not supported.",
        ParseError: "[ERROR] Not a valid integer. Use an optional '-' followed by digits.",
        UnknownOperationError: "[ERROR] Unknown operation.",
        OperandValidationError: "[ERROR] Wrong operands for this operation.",
        InvalidConfigError: "[ERROR] Invalid configuration. Please check the settings.",
    }

    default_message = "[ERROR] An unexpected error occurred."

    user_message = friendly_messages.get(type(exc), default_message)

    # Add specific details where available
    if isinstance(exc, NoInverseExistsError) and exc.context.get("gcd"):
        user_message = (
            f"[ERROR] Modular inverse does not exist (gcd = {exc.context['gcd']})."
        )

    elif isinstance(exc, UnknownOperationError) and exc.context.get("operation"):
        user_message = f"[ERROR] Unknown operation '{exc.context['operation']}'."

    if include_details and isinstance(exc, BigNumException):
        user_message += f"\n\nTechnical details: {exc.message}"
        if exc.context:
            user_message += f"\n   Context: {exc.context}"

    return user_message
