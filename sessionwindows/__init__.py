# ==============================================================================
# Session Windows
# ==============================================================================
"""
Validated, immutable session window specifications for stream processing.
"""

from sessionwindows.core import (
    DEFAULT_MAX_SPAN,
    NO_GRACE_PERIOD,
    InvalidArgument,
    SessionWindowSpec,
)

__all__ = [
    "DEFAULT_MAX_SPAN",
    "InvalidArgument",
    "NO_GRACE_PERIOD",
    "SessionWindowSpec",
]
