"""Tests for structured logging."""

import json
import logging

import pytest

from apps.validator.observability.logger import (
    JsonLogFormatter,
    ValidationLogger,
    clear_context,
    get_logger,
    set_context,
)


class TestGetLogger:
    """Tests for get_logger."""

    def test_get_logger_caches(self) -> None:
        """Test that get_logger returns same instance."""
        logger1 = get_logger("test")
        logger2 = get_logger("test")
        assert logger1 is logger2

    def test_get_logger_different_names(self) -> None:
        """Test that different names get different loggers."""
        logger1 = get_logger("test1")
        logger2 = get_logger("test2")
        assert logger1 is not logger2


class TestLoggingContext:
    """Tests for logging context management."""

    def test_set_and_clear_context(self) -> None:
        """Test setting and clearing context."""
        set_context(request_id="req-123", validation_format="csv")

        clear_context()

        from apps.validator.observability.logger import _request_id, _validation_format

        assert _request_id.get() is None
        assert _validation_format.get() is None

    def test_partial_context_update(self) -> None:
        """Test that partial updates preserve other values."""
        clear_context()
        set_context(request_id="req-123")

        from apps.validator.observability.logger import _request_id, _validation_format

        assert _request_id.get() == "req-123"
        assert _validation_format.get() is None

        set_context(validation_format="emmet")
        assert _request_id.get() == "req-123"
        assert _validation_format.get() == "emmet"
        clear_context()


class TestJsonLogFormatter:
    """Tests for JSON output."""

    def _record(self, msg: str = "hello") -> logging.LogRecord:
        return logging.LogRecord(
            name="apps.validator.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg=msg,
            args=(),
            exc_info=None,
        )

    def test_format_includes_context(self) -> None:
        set_context(request_id="abc", validation_format="json")
        try:
            output = json.loads(JsonLogFormatter().format(self._record()))
        finally:
            clear_context()

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["request_id"] == "abc"
        assert output["format"] == "json"

    def test_format_includes_extra_data(self) -> None:
        clear_context()
        record = self._record()
        record.extra_data = {"error_count": 2}

        output = json.loads(JsonLogFormatter().format(record))

        assert output["data"] == {"error_count": 2}
        assert "request_id" not in output


class TestValidationLogger:
    """Tests for level inheritance and validation events."""

    def test_logger_inherits_level(self) -> None:
        """No level is forced on the underlying logger."""
        logger = get_logger("apps.validator.test_inherit")

        assert isinstance(logger, ValidationLogger)
        assert logger.logger.level == logging.NOTSET
        assert logger.logger.handlers == []

    def test_validation_completed_emitted_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("apps.validator.test_events")

        with caplog.at_level(logging.DEBUG, logger="apps.validator.test_events"):
            logger.validation_completed("csv", text_length=7, error_count=0)

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "Validated csv input (0 errors)"
        assert record.extra_data == {"format": "csv", "text_length": 7, "error_count": 0}

    def test_validation_completed_hidden_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("apps.validator.test_events")

        with caplog.at_level(logging.INFO, logger="apps.validator.test_events"):
            logger.validation_completed("csv", text_length=7, error_count=0)

        assert caplog.records == []
