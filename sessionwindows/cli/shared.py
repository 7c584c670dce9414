# ==============================================================================
# CLI Shared Utilities
# ==============================================================================
"""
Shared utilities for CLI commands.

Contains terminal styling constants and helpers used by multiple command
modules.
"""

import json
from datetime import timedelta
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from sessionwindows.core.durations import parse_duration
from sessionwindows.core.windows import SessionWindowSpec


# ==============================================================================
# Terminal Styling
# ==============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"


class Icons:
    """Status icons using Unicode symbols."""

    CHECK = "✓"
    CROSS = "✗"
    WARN = "!"


# Module-level aliases for convenience
C, I = Colors, Icons


# ==============================================================================
# Helpers
# ==============================================================================


def parse_duration_option(value: str, option: str, json_output: bool = False) -> timedelta:
    """Parse a duration option, exiting with code 1 on a malformed value.

    Args:
        value: Raw option value (e.g. '5m')
        option: Option name used in the error output (e.g. '--gap')
        json_output: Emit the error as JSON instead of colored text
    """
    try:
        return parse_duration(value)
    except ValueError as e:
        fail(f"{option}: {e}", json_output)


def fail(message: str, json_output: bool = False) -> NoReturn:
    """Print an error and exit with code 1."""
    if json_output:
        print(json.dumps({"error": message}))
    else:
        print(f"\n{C.BRIGHT_RED}{I.CROSS} {message}{C.RESET}\n")
    raise typer.Exit(1)


def format_millis(ms: int) -> str:
    """Render a millisecond count with a human-friendly equivalent (e.g. '600,000 ms (10m)')."""
    for unit, size in (("d", 86_400_000), ("h", 3_600_000), ("m", 60_000), ("s", 1000)):
        if ms >= size and ms % size == 0:
            return f"{ms:,} ms ({ms // size}{unit})"
    return f"{ms:,} ms"


def print_spec(spec: SessionWindowSpec, title: str) -> None:
    """Print a spec as a Rich table followed by its describe() line."""
    console = Console()
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Parameter")
    table.add_column("Value", justify="right")
    table.add_row("Inactivity gap", format_millis(spec.inactivity_gap()))
    table.add_row("Max span", format_millis(spec.max_span()))
    table.add_row("Grace period", format_millis(spec.grace_period()))

    print()
    console.print(table)
    print(f"  {C.DIM}{spec.describe()}{C.RESET}")
    print()
