# ==============================================================================
# Millisecond Duration Validation
# ==============================================================================
"""
Conversion of user-supplied durations to whole milliseconds.

Window parameters are carried as integer millisecond counts. Callers may hand
in either a ``datetime.timedelta`` or a plain ``int`` already expressed in
milliseconds. Anything that cannot be represented exactly as a signed 64-bit
millisecond count is rejected with InvalidArgument.

Sign constraints (gap > 0, grace >= 0, ...) are not checked here; they belong
to the window specification itself.
"""

import re
from datetime import timedelta

from sessionwindows.core.errors import InvalidArgument

# Signed 64-bit range, the range a downstream engine stores timestamps in
MAX_MILLIS = 2**63 - 1
MIN_MILLIS = -(2**63)

_MICROS_PER_MILLI = 1000

_DURATION_PATTERN = re.compile(r"^(-?\d+)(ms|s|m|h|d)$", re.IGNORECASE)

_UNIT_MILLIS = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}


def validate_millisecond_duration(duration: timedelta | int, parameter: str) -> int:
    """
    Convert a duration to an exact number of milliseconds.

    Args:
        duration: A timedelta, or an int interpreted as milliseconds
        parameter: Parameter name reported in the error message

    Returns:
        The duration as an integer millisecond count (may be negative)

    Raises:
        InvalidArgument: If the value is not a duration, carries a
            sub-millisecond remainder, or falls outside the 64-bit range
    """
    # bool is an int subclass; True is not "1 millisecond"
    if isinstance(duration, bool):
        raise InvalidArgument(
            parameter, duration, "Expected a timedelta or an integer number of milliseconds."
        )

    if isinstance(duration, timedelta):
        micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
        if micros % _MICROS_PER_MILLI != 0:
            raise InvalidArgument(
                parameter, duration, "Duration cannot be represented in whole milliseconds."
            )
        millis = micros // _MICROS_PER_MILLI
    elif isinstance(duration, int):
        millis = duration
    else:
        raise InvalidArgument(
            parameter, duration, "Expected a timedelta or an integer number of milliseconds."
        )

    if not MIN_MILLIS <= millis <= MAX_MILLIS:
        raise InvalidArgument(
            parameter, duration, "Duration is out of range for a 64-bit millisecond count."
        )
    return millis


def parse_duration(text: str) -> timedelta:
    """Parse a duration string (e.g., '250ms', '30s', '5m', '1h', '2d') to a timedelta.

    Args:
        text: Integer followed by a unit suffix (ms, s, m, h, d). A leading
            minus sign is accepted so that validation can report it.

    Returns:
        The parsed timedelta

    Raises:
        ValueError: If the format is invalid
    """
    match = _DURATION_PATTERN.match(text.strip())
    if not match:
        raise ValueError(
            f"Invalid duration format: '{text}'. Use N followed by ms, s, m, h or d "
            "(e.g., 250ms, 30s, 5m, 1h)"
        )
    value = int(match.group(1))
    unit = match.group(2).lower()
    try:
        return timedelta(milliseconds=value * _UNIT_MILLIS[unit])
    except OverflowError as e:
        raise ValueError(f"Duration out of range: '{text}'") from e
