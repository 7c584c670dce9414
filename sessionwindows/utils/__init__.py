# ==============================================================================
# Session Window Utilities
# ==============================================================================
"""
Shared utilities. This module exports configuration for use by the CLI.
"""

from sessionwindows.utils.config import (
    SessionWindowSettings,
    Settings,
    get_settings,
)

__all__ = [
    "SessionWindowSettings",
    "Settings",
    "get_settings",
]
