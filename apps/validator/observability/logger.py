"""Logging for the validator service.

Loggers returned by ``get_logger`` never set their own level or
handlers: records flow to the root logger configured once by
``configure_logging``, so ``LOG_LEVEL=DEBUG`` also enables the per-call
validation records. Records carry the current request id and format.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_validation_format: ContextVar[str | None] = ContextVar("validation_format", default=None)


def set_context(
    request_id: str | None = None,
    validation_format: str | None = None,
) -> None:
    """Set logging context variables."""
    if request_id is not None:
        _request_id.set(request_id)
    if validation_format is not None:
        _validation_format.set(validation_format)


def clear_context() -> None:
    """Clear all logging context variables."""
    _request_id.set(None)
    _validation_format.set(None)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, tagged with request id and format."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if request_id := _request_id.get():
            entry["request_id"] = request_id
        if validation_format := _validation_format.get():
            entry["format"] = validation_format
        if hasattr(record, "extra_data"):
            entry["data"] = record.extra_data
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure the root logger once at startup.

    Args:
        level: Level name such as "DEBUG" or "INFO"; unknown names mean INFO.
        json_output: Emit JSON lines instead of the plain text format.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonLogFormatter() if json_output else logging.Formatter(PLAIN_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )


class ValidationLogger(logging.LoggerAdapter):
    """Adapter adding validation events and an ``extra_data`` keyword."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra_data = kwargs.pop("extra_data", None)
        if extra_data:
            kwargs["extra"] = {**kwargs.get("extra", {}), "extra_data": extra_data}
        return msg, kwargs

    def format_rejected(self, tag: str) -> None:
        self.info(f"Rejected unsupported format: {tag!r}", extra_data={"format": tag})

    def validation_completed(
        self,
        validation_format: str,
        text_length: int,
        error_count: int,
    ) -> None:
        """Log the outcome of one validation call at DEBUG."""
        self.debug(
            f"Validated {validation_format} input ({error_count} errors)",
            extra_data={
                "format": validation_format,
                "text_length": text_length,
                "error_count": error_count,
            },
        )

    def validation_crashed(self, validation_format: str, error: str) -> None:
        """Log a validator that raised instead of returning errors."""
        self.exception(
            f"Validator for {validation_format} raised: {error}",
            extra_data={"format": validation_format, "error": error},
        )


_loggers: dict[str, ValidationLogger] = {}


def get_logger(name: str) -> ValidationLogger:
    """Get or create the validation logger for ``name``."""
    if name not in _loggers:
        _loggers[name] = ValidationLogger(logging.getLogger(name))
    return _loggers[name]
