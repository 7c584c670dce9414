# ==============================================================================
# Tests for Session Window Settings
# ==============================================================================
"""
Unit tests for environment-driven configuration.

Tests cover:
- Defaults when no environment variables are set
- SESSION_WINDOW_* overrides
- to_spec() validation of configured values
- get_settings() caching
"""

import pytest

from sessionwindows.core.errors import InvalidArgument
from sessionwindows.core.windows import SessionWindowSpec
from sessionwindows.utils.config import SessionWindowSettings, Settings, get_settings


class TestSessionWindowSettings:
    """Tests for SessionWindowSettings."""

    def test_defaults(self):
        window = SessionWindowSettings()
        assert window.gap_ms == 300_000
        assert window.max_span_ms == 600_000
        assert window.grace_ms == 0

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SESSION_WINDOW_GAP_MS", "5")
        monkeypatch.setenv("SESSION_WINDOW_MAX_SPAN_MS", "30000")
        monkeypatch.setenv("SESSION_WINDOW_GRACE_MS", "1000")
        window = SessionWindowSettings()
        assert (window.gap_ms, window.max_span_ms, window.grace_ms) == (5, 30_000, 1000)

    def test_to_spec(self, monkeypatch):
        monkeypatch.setenv("SESSION_WINDOW_GAP_MS", "5")
        monkeypatch.setenv("SESSION_WINDOW_MAX_SPAN_MS", "30000")
        monkeypatch.setenv("SESSION_WINDOW_GRACE_MS", "1000")
        spec = SessionWindowSettings().to_spec()
        assert spec == SessionWindowSpec.with_gap_max_span_and_grace(5, 30_000, 1000)

    def test_to_spec_keeps_configured_grace(self):
        """Settings use the general factory, so a configured grace is applied."""
        spec = SessionWindowSettings(gap_ms=5, max_span_ms=1000, grace_ms=250).to_spec()
        assert spec.grace_period() == 250

    def test_invalid_gap_rejected(self, monkeypatch):
        monkeypatch.setenv("SESSION_WINDOW_GAP_MS", "0")
        with pytest.raises(InvalidArgument) as exc_info:
            SessionWindowSettings().to_spec()
        assert exc_info.value.parameter == "gap"

    def test_negative_grace_rejected(self):
        with pytest.raises(InvalidArgument, match="Grace period must not be negative"):
            SessionWindowSettings(grace_ms=-1).to_spec()


class TestSettings:
    """Tests for the top-level Settings and its cache."""

    def test_nested_window(self, monkeypatch):
        monkeypatch.setenv("SESSION_WINDOW_GAP_MS", "42")
        assert Settings().window.gap_ms == 42

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env(self, monkeypatch):
        assert get_settings().window.gap_ms == 300_000
        monkeypatch.setenv("SESSION_WINDOW_GAP_MS", "7")
        get_settings.cache_clear()
        assert get_settings().window.gap_ms == 7
