# ==============================================================================
# Core Domain Logic
# ==============================================================================
"""
Pure domain logic with no I/O.

This module contains:
- SessionWindowSpec and its validating factories
- Millisecond duration validation
- The InvalidArgument error type
"""

from sessionwindows.core.durations import parse_duration, validate_millisecond_duration
from sessionwindows.core.errors import InvalidArgument
from sessionwindows.core.windows import DEFAULT_MAX_SPAN, NO_GRACE_PERIOD, SessionWindowSpec

__all__ = [
    "DEFAULT_MAX_SPAN",
    "InvalidArgument",
    "NO_GRACE_PERIOD",
    "SessionWindowSpec",
    "parse_duration",
    "validate_millisecond_duration",
]
