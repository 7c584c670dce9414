# ==============================================================================
# Window Commands
# ==============================================================================
"""
Session window commands for the sessionwindows CLI.

Builds a SessionWindowSpec from command-line durations and shows the
validated result.
"""

import json
from datetime import timedelta
from typing import Annotated, Optional

import typer

from sessionwindows.cli.shared import C, I, fail, parse_duration_option, print_spec
from sessionwindows.core.errors import InvalidArgument
from sessionwindows.core.windows import SessionWindowSpec


# ==============================================================================
# Helper Functions
# ==============================================================================


def build_spec(
    gap: timedelta,
    max_span: Optional[timedelta] = None,
    grace: Optional[timedelta] = None,
) -> SessionWindowSpec:
    """Pick the factory matching the supplied parameters.

    Raises:
        InvalidArgument: If any parameter fails validation
    """
    if max_span is None and grace is None:
        return SessionWindowSpec.with_gap_no_grace(gap)
    if max_span is None:
        return SessionWindowSpec.with_gap_and_grace(gap, grace)
    if grace is None:
        return SessionWindowSpec.with_gap_and_max_span(gap, max_span)
    return SessionWindowSpec.with_gap_max_span_and_grace(gap, max_span, grace)


# ==============================================================================
# Commands
# ==============================================================================


def window_describe(
    gap: Annotated[
        str, typer.Option("--gap", "-g", help="Inactivity gap (e.g., 500ms, 30s, 5m)")
    ],
    max_span: Annotated[
        Optional[str],
        typer.Option("--max-span", "-m", help="Maximum session span (default 10m)"),
    ] = None,
    grace: Annotated[
        Optional[str],
        typer.Option("--grace", help="Grace period after window end (default 0)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Validate session window parameters and describe the result.

    Durations are an integer followed by a unit: ms, s, m, h or d.

    Note: --grace without --max-span is accepted but the grace period is
    not applied; combine it with --max-span to set a grace period.

    Examples:
        sessionwindows window describe --gap 5m
        sessionwindows window describe -g 30s -m 1h --grace 10s
        sessionwindows window describe -g 30s --json
    """
    gap_td = parse_duration_option(gap, "--gap", json_output)
    max_span_td = parse_duration_option(max_span, "--max-span", json_output) if max_span else None
    grace_td = parse_duration_option(grace, "--grace", json_output) if grace else None

    try:
        spec = build_spec(gap_td, max_span_td, grace_td)
    except InvalidArgument as e:
        fail(str(e), json_output)

    grace_discarded = max_span_td is None and grace_td is not None and grace_td != timedelta(0)

    if json_output:
        output = spec.as_dict()
        output["description"] = spec.describe()
        if grace_discarded:
            output["warning"] = "grace period ignored without --max-span"
        print(json.dumps(output, indent=2))
        return

    print_spec(spec, "Session Window")
    if grace_discarded:
        print(
            f"  {C.BRIGHT_YELLOW}{I.WARN} Grace period ignored without --max-span; "
            f"pass --max-span to apply it{C.RESET}"
        )
        print()
