"""
Tests for logging configuration.

Tests the centralized logging setup including:
- Standard library logging interception
- Third-party logger configuration
- JSON vs console format
- Script logging helper
"""

import json
import logging
from datetime import datetime, timezone
from unittest.mock import MagicMock


class TestInterceptHandler:
    """Tests for InterceptHandler class."""

    def test_intercept_handler_is_logging_handler(self):
        from core.logger import InterceptHandler

        assert isinstance(InterceptHandler(), logging.Handler)

    def test_intercept_handler_emit(self):
        """Test that emit method processes log records."""
        from core.logger import InterceptHandler

        handler = InterceptHandler()
        record = logging.LogRecord(
            name="redis.connection",
            level=logging.WARNING,
            pathname="connection.py",
            lineno=1,
            msg="Test message",
            args=(),
            exc_info=None,
        )

        # Should not raise
        handler.emit(record)


class TestConfigureThirdPartyLoggers:
    """Tests for configure_third_party_loggers function."""

    def test_configures_redis_logger(self):
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("redis").level == logging.WARNING


class TestConfigureScriptLogging:
    """Tests for configure_script_logging function."""

    def test_configure_script_logging_default_level(self):
        from core.logger import configure_script_logging, logger

        configure_script_logging()

        assert len(logger._core.handlers) == 1

    def test_configure_script_logging_invalid_level_defaults_to_info(self):
        from core.logger import configure_script_logging, logger

        configure_script_logging(level="INVALID")

        handler = list(logger._core.handlers.values())[0]
        assert handler.levelno == logger.level("INFO").no

    def test_configure_script_logging_json_format(self):
        from core.logger import configure_script_logging

        # Should not raise
        configure_script_logging(json_format=True)

    def test_intercepts_standard_logging(self):
        from core.logger import configure_script_logging

        configure_script_logging(level="DEBUG")

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert "InterceptHandler" in handler_types


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_setup_logger_creates_handlers(self):
        from core.logger import logger, setup_logger

        logger.remove()
        setup_logger._configured = False

        setup_logger()

        assert len(logger._core.handlers) >= 1

    def test_setup_logger_idempotent(self):
        from core.logger import logger, setup_logger

        setup_logger()
        handlers_count_1 = len(logger._core.handlers)

        setup_logger()
        handlers_count_2 = len(logger._core.handlers)

        assert handlers_count_2 == handlers_count_1


class TestSerializeLogRecord:
    """Flat JSON records."""

    def _record(self, **extra):
        level = MagicMock()
        level.name = "INFO"
        return {
            "time": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "level": level,
            "message": "SET Favorite Movie",
            "module": "client",
            "function": "set",
            "line": 42,
            "exception": None,
            "extra": extra,
        }

    def test_serialize_flat_fields(self):
        from core.logger import serialize_log_record

        output = serialize_log_record(self._record(key="Favorite Movie"))
        payload = json.loads(output.replace("{{", "{").replace("}}", "}"))

        assert payload["level"] == "INFO"
        assert payload["message"] == "SET Favorite Movie"
        assert payload["key"] == "Favorite Movie"
        assert output.endswith("\n")

    def test_non_serializable_extra_stringified(self):
        from core.logger import serialize_log_record

        output = serialize_log_record(self._record(obj=object()))

        assert "object object at" in output


class TestFormatExceptionShort:
    """Tests for format_exception_short function."""

    def test_format_exception_with_context(self):
        from core.logger import format_exception_short

        try:
            raise ValueError("Test error")
        except ValueError as e:
            result = format_exception_short(e, "Test context")

        assert result.startswith("Test context | ValueError: Test error")
        assert "test_logging_config.py" in result

    def test_format_exception_without_traceback(self):
        from core.logger import format_exception_short

        assert format_exception_short(KeyError("x"), "GET") == "GET | KeyError: 'x'"
