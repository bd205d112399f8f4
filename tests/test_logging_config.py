# tests/test_logging_config.py
"""
Tests for the logging setup (component_6).

Covers:
- get_logger / StructuredLogger
- BigNumLogFormatter extra_info rendering
- PerformanceLogger timing and exception propagation
- setup_logging with a rotating log file
"""

import logging

import pytest

from component_6_logging_config import (
    BigNumLogFormatter,
    PerformanceLogger,
    StructuredLogger,
    get_logger,
    setup_logging,
)


def make_record(message, **extra_info):
    record = logging.LogRecord(
        name="bignum.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_info:
        record.extra_info = extra_info
    return record


class TestStructuredLogger:
    """Tests for get_logger() and StructuredLogger"""

    def test_get_logger_returns_adapter(self):
        logger = get_logger("bignum.test")
        assert isinstance(logger, StructuredLogger)
        assert logger.logger is logging.getLogger("bignum.test")

    def test_extra_is_moved_to_extra_info(self):
        logger = get_logger("bignum.test")
        msg, kwargs = logger.process("Inverse computed", {"extra": {"modulus": "7"}})
        assert msg == "Inverse computed"
        assert kwargs["extra"] == {"extra_info": {"modulus": "7"}}

    def test_without_extra(self):
        logger = get_logger("bignum.test")
        _, kwargs = logger.process("Plain", {})
        assert "extra" not in kwargs


class TestFormatter:
    """Tests for BigNumLogFormatter"""

    def test_appends_extra_info(self):
        formatter = BigNumLogFormatter()
        output = formatter.format(make_record("Done", operation="pow", bits=2048))
        assert "[bignum.test] Done | operation=pow | bits=2048" in output

    def test_extra_info_can_be_disabled(self):
        formatter = BigNumLogFormatter(include_extra=False)
        output = formatter.format(make_record("Done", operation="pow"))
        assert output.endswith("Done")

    def test_colors(self):
        formatter = BigNumLogFormatter(use_colors=True)
        output = formatter.format(make_record("Done"))
        assert output.startswith(BigNumLogFormatter.COLORS["INFO"])
        assert output.endswith(BigNumLogFormatter.COLORS["RESET"])


class TestPerformanceLogger:
    """Tests for PerformanceLogger"""

    def test_records_duration(self):
        with PerformanceLogger(logging.getLogger("bignum.test"), "multiply") as perf:
            sum(range(1000))
        assert perf.duration_ms >= 0.0

    def test_exceptions_propagate(self):
        perf = PerformanceLogger(logging.getLogger("bignum.test"), "divide")
        with pytest.raises(ZeroDivisionError):
            with perf:
                raise ZeroDivisionError("Division by zero")
        assert perf.duration_ms >= 0.0

    def test_exit_without_enter(self):
        perf = PerformanceLogger(logging.getLogger("bignum.test"), "divide")
        with pytest.raises(AssertionError):
            perf.__exit__(None, None, None)


class TestSetupLogging:
    """Tests for setup_logging()"""

    @pytest.fixture
    def restore_root_handlers(self):
        """Fixture: restore root handlers after the test"""
        root_logger = logging.getLogger()
        saved = list(root_logger.handlers)
        yield
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = saved

    def test_writes_log_file(self, tmp_path, restore_root_handlers):
        log_file = tmp_path / "logs" / "bignum.log"
        setup_logging(log_file=log_file)

        get_logger("bignum.test").info("Written to file", extra={"modulus": "1009"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Written to file | modulus=1009" in content

    def test_repeated_setup_does_not_duplicate_handlers(self, restore_root_handlers):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_performance_logging_disabled(self, restore_root_handlers):
        setup_logging(enable_performance_logging=False)
        assert logging.getLogger("bignum.performance").level == logging.CRITICAL
        setup_logging()
        assert logging.getLogger("bignum.performance").level == logging.INFO
