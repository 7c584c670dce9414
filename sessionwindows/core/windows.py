# ==============================================================================
# Session Window Specification
# ==============================================================================
"""
Immutable description of session window parameters.

Sessions represent a period of activity separated by a defined gap of
inactivity. Events that fall within the inactivity gap of an existing session
are merged into it; events outside the gap start a new session. For example,
with a gap of 5 and events for key A at times 10, 12 and 20, there are two
sessions: [10, 12] and [20, 20]. A later event at time 16 merges both into a
single session [10, 20].

This module only describes those parameters. The engine that actually groups
events reads them through:
- inactivity_gap(): whether two adjacent events/sessions merge
- grace_period(): late-arrival cutoff (window end + grace)
- max_span(): upper bound on the duration of one merged session

All values are whole milliseconds.
"""

import logging
from datetime import timedelta
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from sessionwindows.core.durations import validate_millisecond_duration
from sessionwindows.core.errors import InvalidArgument

logger = logging.getLogger(__name__)

# ==============================================================================
# Constants
# ==============================================================================

DEFAULT_MAX_SPAN = timedelta(minutes=10)
NO_GRACE_PERIOD = timedelta(0)


# ==============================================================================
# Parameter Validation
# ==============================================================================


def _validate_gap(gap: timedelta | int) -> int:
    gap_ms = validate_millisecond_duration(gap, "gap")
    if gap_ms <= 0:
        raise InvalidArgument("gap", gap, "Gap time cannot be zero or negative.")
    return gap_ms


def _validate_max_span(max_span: timedelta | int) -> int:
    max_span_ms = validate_millisecond_duration(max_span, "max_span")
    if max_span_ms < 0:
        raise InvalidArgument("max_span", max_span, "Max span must not be negative.")
    return max_span_ms


def _validate_grace(grace: timedelta | int) -> int:
    grace_ms = validate_millisecond_duration(grace, "grace")
    if grace_ms < 0:
        raise InvalidArgument("grace", grace, "Grace period must not be negative.")
    return grace_ms


# ==============================================================================
# SessionWindowSpec
# ==============================================================================


class SessionWindowSpec(BaseModel):
    """
    A session based window specification used for aggregating events into sessions.

    Build instances with the ``with_*`` factories; they validate every
    duration before anything is constructed. Instances are frozen, compare
    by value and are hashable.

    Attributes:
        gap_ms: Inactivity gap in milliseconds (> 0)
        max_span_ms: Maximum duration of one merged session in milliseconds (>= 0)
        grace_ms: Grace period after window end in milliseconds (>= 0)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    gap_ms: int = Field(..., gt=0, strict=True, description="Inactivity gap in milliseconds")
    max_span_ms: int = Field(
        ..., ge=0, strict=True, description="Maximum session span in milliseconds"
    )
    grace_ms: int = Field(..., ge=0, strict=True, description="Grace period in milliseconds")

    # ==========================================================================
    # Factories
    # ==========================================================================

    @classmethod
    def with_gap_no_grace(cls, gap: timedelta | int) -> "SessionWindowSpec":
        """
        Create a specification with the given inactivity gap and no grace period.

        The maximum span is DEFAULT_MAX_SPAN. With a zero grace period, any
        out-of-order record arriving after the window ends is considered late
        and will be dropped.

        Args:
            gap: The gap of inactivity between sessions

        Raises:
            InvalidArgument: If gap is zero or negative or can't be
                represented as whole milliseconds
        """
        return cls.with_gap_and_grace(gap, NO_GRACE_PERIOD)

    @classmethod
    def with_gap_and_grace(
        cls, gap: timedelta | int, grace: timedelta | int
    ) -> "SessionWindowSpec":
        """
        Create a specification with the given inactivity gap and grace period.

        KNOWN DISCREPANCY: the supplied grace is validated and then discarded.
        The result always has a zero grace period and the default maximum
        span. Use with_gap_max_span_and_grace() to set a real grace period.

        Args:
            gap: The gap of inactivity between sessions
            grace: Requested grace period (validated, not applied)

        Raises:
            InvalidArgument: If gap is zero or negative, or grace is negative,
                or either can't be represented as whole milliseconds
        """
        _validate_gap(gap)
        grace_ms = _validate_grace(grace)
        if grace_ms > 0:
            logger.warning(
                "with_gap_and_grace ignores the requested grace period of %d ms; "
                "the window will have no grace period",
                grace_ms,
            )
        return cls.with_gap_max_span_and_grace(gap, DEFAULT_MAX_SPAN, NO_GRACE_PERIOD)

    @classmethod
    def with_gap_and_max_span(
        cls, gap: timedelta | int, max_span: timedelta | int
    ) -> "SessionWindowSpec":
        """Create a specification with the given gap and maximum span, and no grace period."""
        return cls.with_gap_max_span_and_grace(gap, max_span, NO_GRACE_PERIOD)

    @classmethod
    def with_gap_max_span_and_grace(
        cls,
        gap: timedelta | int,
        max_span: timedelta | int,
        grace: timedelta | int,
    ) -> "SessionWindowSpec":
        """
        Create a specification with all three parameters.

        Parameters are validated in the order gap, max_span, grace, so the
        first invalid one in that order is the one reported.

        Args:
            gap: The gap of inactivity between sessions
            max_span: Upper bound on the total duration of one session
            grace: Grace period to admit out-of-order events after window end

        Returns:
            A validated SessionWindowSpec

        Raises:
            InvalidArgument: If gap is zero or negative, max_span or grace is
                negative, or any value can't be represented as whole milliseconds
        """
        gap_ms = _validate_gap(gap)
        max_span_ms = _validate_max_span(max_span)
        grace_ms = _validate_grace(grace)

        spec = cls(gap_ms=gap_ms, max_span_ms=max_span_ms, grace_ms=grace_ms)
        logger.debug("Created %s", spec)
        return spec

    # ==========================================================================
    # Accessors
    # ==========================================================================

    def grace_period(self) -> int:
        """Grace period in milliseconds."""
        return self.grace_ms

    def inactivity_gap(self) -> int:
        """Return the specified gap for the session windows in milliseconds."""
        return self.gap_ms

    def max_span(self) -> int:
        return self.max_span_ms

    # ==========================================================================
    # Value Semantics
    # ==========================================================================

    def equals(self, other: object) -> bool:
        """Structural equality over gap, max span and grace."""
        return self == other

    def describe(self) -> str:
        return (
            f"SessionWindowSpec{{gapMs={self.gap_ms}, "
            f"maxSpanMs={self.max_span_ms}, graceMs={self.grace_ms}}}"
        )

    def __str__(self) -> str:
        return self.describe()

    def as_dict(self) -> dict:
        """Plain dict of the three millisecond values, for JSON output."""
        return {
            "gap_ms": self.gap_ms,
            "max_span_ms": self.max_span_ms,
            "grace_ms": self.grace_ms,
        }

    # ==========================================================================
    # Copies
    # ==========================================================================

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "SessionWindowSpec":
        """Copy the spec; updated values go through the same validation as the factories.

        Raises:
            InvalidArgument: If an update names an unknown field or holds an
                invalid value
        """
        if not update:
            return super().model_copy(deep=deep)

        values = self.as_dict()
        for name, value in update.items():
            if name not in values:
                raise InvalidArgument(name, value, "Unknown session window field.")
            values[name] = value
        return self.with_gap_max_span_and_grace(
            values["gap_ms"], values["max_span_ms"], values["grace_ms"]
        )

    @classmethod
    def model_construct(
        cls, _fields_set: Optional[set[str]] = None, **values: Any
    ) -> "SessionWindowSpec":
        """Validate instead of trusting the values, so no unchecked instance exists."""
        return cls.model_validate(values)
