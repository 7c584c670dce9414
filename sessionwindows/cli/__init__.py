# ==============================================================================
# CLI Commands Module
# ==============================================================================
"""
CLI commands for the sessionwindows tool.

Commands are organized into separate modules:
- shared.py: Styling constants and output helpers
- window.py: Build and describe a window from command-line durations
- config.py: Show the window built from environment configuration
"""

from sessionwindows.cli.shared import (
    C,
    I,
    Colors,
    Icons,
    fail,
    format_millis,
    parse_duration_option,
    print_spec,
)

__all__ = [
    "C",
    "I",
    "Colors",
    "Icons",
    "fail",
    "format_millis",
    "parse_duration_option",
    "print_spec",
]
