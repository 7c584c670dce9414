# ==============================================================================
# Config Commands
# ==============================================================================
"""
Configuration commands for the sessionwindows CLI.

Shows the window settings loaded from the environment and the window they
produce.
"""

import json
from typing import Annotated

import typer
from pydantic import ValidationError

from sessionwindows.cli.shared import C, I, fail, format_millis, print_spec
from sessionwindows.core.errors import InvalidArgument
from sessionwindows.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def config_show(
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output configuration as JSON")
    ] = False,
) -> None:
    """Display the configured session window and validate it."""
    try:
        settings = get_settings()
    except ValidationError as e:
        fail(f"Invalid session window configuration: {e}", json_output)
    window = settings.window

    try:
        spec = window.to_spec()
    except InvalidArgument as e:
        fail(f"Invalid session window configuration: {e}", json_output)

    # JSON output mode
    if json_output:
        config = {
            "window": {
                "gap_ms": window.gap_ms,
                "max_span_ms": window.max_span_ms,
                "grace_ms": window.grace_ms,
                "description": spec.describe(),
            },
            "log_level": settings.log_level,
            "debug": settings.debug,
        }
        print(json.dumps(config, indent=2))
        return

    # Human-readable output
    print()
    print(f"{C.BOLD}Configuration{C.RESET}")
    print()
    print(f"{C.CYAN}Session Window{C.RESET}")
    print(f"  Gap:        {C.WHITE}{format_millis(window.gap_ms)}{C.RESET}")
    print(f"  Max span:   {C.WHITE}{format_millis(window.max_span_ms)}{C.RESET}")
    print(f"  Grace:      {C.WHITE}{format_millis(window.grace_ms)}{C.RESET}")
    print()
    print(f"{C.CYAN}Logging{C.RESET}")
    print(f"  Level:      {C.WHITE}{settings.log_level}{C.RESET}")
    print(f"  Debug:      {C.WHITE}{settings.debug}{C.RESET}")

    print_spec(spec, "Configured Session Window")
    print(f"  {C.BRIGHT_GREEN}{I.CHECK} Configuration is valid{C.RESET}")
    print()
