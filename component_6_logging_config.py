"""
component_6_logging_config.py

Central logging for the BigNum engine.
Provides structured logging with log levels, formatting and timing.

Features:
- Console logging and optional rotating file logging
- Structured formatting with timestamps and component names
- Extra key/value context appended to every record
- Performance tracking for timed operations (separate logger)

Usage:
    from component_6_logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Inverse computed", extra={"modulus": "1009"})
    logger.warning("No inverse", extra={"value": "4", "modulus": "8"})
"""

import logging
import logging.handlers
import sys
import traceback
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Any, Dict, Literal, MutableMapping, Optional, Tuple, Type

from common.constants import PERFORMANCE_LOGGER_NAME

DEFAULT_LOG_LEVEL: int = logging.INFO
CONSOLE_LOG_LEVEL: int = logging.WARNING
FILE_LOG_LEVEL: int = logging.DEBUG


class BigNumLogFormatter(logging.Formatter):
    """
    Formatter for structured log output.
    Optionally colours console output.
    """

    # ANSI colour codes for console output
    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = False, include_extra: bool = True) -> None:
        self.use_colors: bool = use_colors
        self.include_extra: bool = include_extra

        # Format: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
        fmt = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        if self.include_extra and hasattr(record, "extra_info"):
            extra_str = " | ".join(f"{k}={v}" for k, v in record.extra_info.items())
            if extra_str:
                log_message += f" | {extra_str}"

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            log_message = f"{color}{log_message}{reset}"

        return log_message


class PerformanceLogger:
    """
    Context manager timing an operation.

    Usage:
        with PerformanceLogger(logger, "pow_mod", bits=2048):
            pow_mod(base, exponent, modulus)

    Exceptions are logged and re-raised, never swallowed.
    """

    def __init__(
        self, logger: logging.Logger, operation_name: str, **context: Any
    ) -> None:
        self.logger: logging.Logger = logger
        self.operation_name: str = operation_name
        self.context: Dict[str, Any] = context
        self.start_time: Optional[datetime] = None
        self.duration_ms: float = 0.0

    def __enter__(self) -> "PerformanceLogger":
        self.start_time = datetime.now()
        self.logger.debug(
            f"START: {self.operation_name}", extra={"extra_info": self.context}
        )
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> Literal[False]:
        assert (
            self.start_time is not None
        ), "PerformanceLogger was not entered"
        self.duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is None:
            self.logger.debug(
                f"END: {self.operation_name} (duration: {self.duration_ms:.2f}ms)",
                extra={"extra_info": {**self.context, "duration_ms": self.duration_ms}},
            )

            perf_logger = logging.getLogger(PERFORMANCE_LOGGER_NAME)
            perf_logger.info(
                f"{self.operation_name}: {self.duration_ms:.2f}ms",
                extra={"extra_info": {**self.context, "duration_ms": self.duration_ms}},
            )
        else:
            self.logger.warning(
                f"FAILED: {self.operation_name} (duration: {self.duration_ms:.2f}ms)",
                extra={
                    "extra_info": {
                        **self.context,
                        "duration_ms": self.duration_ms,
                        "error": str(exc_val),
                    }
                },
            )

        return False


class StructuredLogger(logging.LoggerAdapter):
    """
    Logger adapter storing the 'extra' dict as 'extra_info' on the record.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        if extra:
            kwargs["extra"] = {"extra_info": extra}
        return msg, kwargs

    def log_exception(self, exc: Exception, message: str = "", **context: Any) -> None:
        """
        Log an exception with its full traceback and context.
        """
        tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

        self.error(
            f"{message}: {type(exc).__name__}: {str(exc)}\n{tb_str}", extra=context
        )


def setup_logging(
    console_level: int = CONSOLE_LOG_LEVEL,
    file_level: int = FILE_LOG_LEVEL,
    log_file: Optional[Path] = None,
    enable_performance_logging: bool = True,
) -> None:
    """
    Configure the global logging setup.

    Args:
        console_level: Level of the console handler
        file_level: Level of the file handler
        log_file: Path of a rotating log file (None: console only)
        enable_performance_logging: Route timings into the performance logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filtering happens on the handlers

    # Prevent duplicate handlers on repeated setup
    root_logger.handlers.clear()

    # === Console handler ===
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(BigNumLogFormatter(use_colors=sys.stderr.isatty()))
    root_logger.addHandler(console_handler)

    # === Log file ===
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"  # 10 MB
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(BigNumLogFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    # === Performance logger ===
    perf_logger = logging.getLogger(PERFORMANCE_LOGGER_NAME)
    perf_logger.setLevel(logging.INFO if enable_performance_logging else logging.CRITICAL)

    logger = logging.getLogger("bignum.logging_config")
    logger.debug(
        "Logging configured",
        extra={
            "extra_info": {
                "console_level": logging.getLevelName(console_level),
                "file_level": logging.getLevelName(file_level),
                "log_file": str(log_file) if log_file else None,
                "performance_logging": enable_performance_logging,
            }
        },
    )


def get_logger(name: str) -> StructuredLogger:
    """
    Create a structured logger for a component.

    Args:
        name: Component name (usually __name__)

    Returns:
        StructuredLogger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Operation finished", extra={"operation": "pow"})
    """
    return StructuredLogger(logging.getLogger(name), {})


# Automatic initialisation on import; an explicit setup_logging() call overrides it
if not logging.getLogger().handlers:
    setup_logging()
