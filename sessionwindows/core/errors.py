# ==============================================================================
# Session Window Errors
# ==============================================================================
"""
Error types raised while building session window specifications.
"""

from datetime import timedelta
from typing import Any


class InvalidArgument(ValueError):
    """
    A window parameter failed validation.

    Attributes:
        parameter: Name of the offending parameter (e.g. "inactivityGap")
        value: The value the caller supplied
    """

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"{failure_prefix(parameter, value)}{reason}")


def failure_prefix(parameter: str, value: Any) -> str:
    """Build the message prefix naming the parameter and offending value."""
    if isinstance(value, timedelta):
        # str(timedelta) renders negatives as "-1 day, 23:59:59.995000"
        shown = f"{value.total_seconds()!r}s"
    else:
        shown = repr(value)
    return f'Invalid value for parameter "{parameter}" (value was: {shown}). '
