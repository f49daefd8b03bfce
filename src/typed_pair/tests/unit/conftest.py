"""Unit test fixtures with mocked dependencies."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from typed_pair.infrastructure.settings import get_settings


@pytest.fixture
def mock_probe():
    """Provide a mocked pair column probe."""
    return MagicMock()


@pytest.fixture
def sqlite_engine():
    """Provide an in-memory SQLite engine."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
