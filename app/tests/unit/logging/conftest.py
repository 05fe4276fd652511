"""Fixtures for localekit.logging tests."""

import logging
from unittest.mock import Mock

import pytest
import structlog

from localekit.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog and root logger state after each test."""
    root_level = logging.root.level
    yield
    structlog.reset_defaults()
    logging.root.setLevel(root_level)
