"""Pytest configuration and fixtures for tests."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def dispatcher():
    """Fresh dispatcher with the default size limit."""
    from apps.validator.validation import ValidationDispatcher

    return ValidationDispatcher()


# Environment configuration
def pytest_configure(config):
    """Configure pytest environment."""
    config.addinivalue_line("markers", "integration: mark test as integration test")

    os.environ.setdefault("ENVIRONMENT", "test")
    os.environ.setdefault("LOG_LEVEL", "INFO")
