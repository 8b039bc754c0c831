"""Validator API Routers package."""

from . import health, validate

__all__ = [
    "health",
    "validate",
]
