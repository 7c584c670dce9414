# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- A clean settings cache and SESSION_WINDOW_* environment per test
"""

import pytest

from sessionwindows.utils.config import get_settings

_WINDOW_ENV_VARS = (
    "SESSION_WINDOW_GAP_MS",
    "SESSION_WINDOW_MAX_SPAN_MS",
    "SESSION_WINDOW_GRACE_MS",
    "LOG_LEVEL",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop window environment variables and the cached Settings around each test."""
    for name in _WINDOW_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
