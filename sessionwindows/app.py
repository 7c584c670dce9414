# ==============================================================================
# Session Windows CLI
# ==============================================================================
"""
Command-line interface for session window specifications.

Usage:
    sessionwindows --help
    sessionwindows window describe --gap 5m
    sessionwindows window describe --gap 30s --max-span 1h --grace 10s --json
    sessionwindows config show
"""

import logging
import os
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from sessionwindows.utils.config import get_settings

# ==============================================================================
# App Configuration
# ==============================================================================
# Set consistent terminal width for help output formatting
if "COLUMNS" not in os.environ:
    os.environ["COLUMNS"] = "115"

app = typer.Typer(
    name="sessionwindows",
    help="Session window specification CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _level_number(name: str) -> Optional[int]:
    """Numeric level for a level name, or None when the name is not a logging level."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _configured_level() -> int:
    """Level from LOG_LEVEL, falling back to INFO.

    Unloadable settings are reported by `config show`; they must not stop
    commands that never read them.
    """
    try:
        name = get_settings().log_level
    except ValidationError:
        return logging.INFO
    level = _level_number(name)
    return logging.INFO if level is None else level


@app.callback()
def configure(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level (defaults to LOG_LEVEL)"),
    ] = None,
) -> None:
    """Session window specification CLI."""
    if log_level is None:
        level = _configured_level()
    else:
        level = _level_number(log_level)
        if level is None:
            raise typer.BadParameter(
                f"Unknown logging level: '{log_level}'", param_hint="--log-level"
            )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


window_app = typer.Typer(
    help="Session window operations",
    no_args_is_help=True,
)
app.add_typer(window_app, name="window")

# Register window commands from cli.window module
from sessionwindows.cli.window import window_describe

window_app.command("describe")(window_describe)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# Register config commands from cli.config module
from sessionwindows.cli.config import config_show

config_app.command("show")(config_show)


# ==============================================================================
# Entry Point
# ==============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
