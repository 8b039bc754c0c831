"""Observability module for the validator service.

This module provides:
- Root logging setup (plain text or JSON lines)
- Validation loggers with request/format context
"""

from .logger import (
    JsonLogFormatter,
    ValidationLogger,
    clear_context,
    configure_logging,
    get_logger,
    set_context,
)

__all__ = [
    "JsonLogFormatter",
    "ValidationLogger",
    "configure_logging",
    "get_logger",
    "set_context",
    "clear_context",
]
