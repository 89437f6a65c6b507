"""App configuration and main callback for the reelr CLI."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from reelr.console import console

logger = logging.getLogger(__name__)

# =============================================================================
# Help Panel Names
# =============================================================================

NAMING_COMMANDS = "Naming"


# =============================================================================
# Version Callback
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from reelr import __version__

        console.print(f"reelr {__version__}")
        raise typer.Exit()


# =============================================================================
# App Factory
# =============================================================================


MAIN_EPILOG = """
[bold cyan]Quick Start:[/]
  [dim]1.[/] reelr check               [dim]# Validate naming.yaml[/]
  [dim]2.[/] reelr preview             [dim]# See what your formats produce[/]
  [dim]3.[/] reelr preview -p "{Series Title} - S{season:00}E{episode:00}"
"""


def make_app() -> typer.Typer:
    """Create and configure the main Typer application."""
    return typer.Typer(
        name="reelr",
        help="Media library naming templates - preview and validate",
        epilog=MAIN_EPILOG,
        rich_markup_mode="rich",
        pretty_exceptions_enable=True,
        pretty_exceptions_show_locals=False,
        no_args_is_help=True,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )


# =============================================================================
# Main Callback Factory
# =============================================================================


def create_main_callback(app: typer.Typer) -> None:
    """Register the main callback on the app."""

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                "-V",
                callback=version_callback,
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = False,
        log_level: Annotated[
            str | None,
            typer.Option(
                "--log-level",
                "-l",
                help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: REELR_LOG_LEVEL.",
            ),
        ] = None,
        log_to_file: Annotated[
            bool,
            typer.Option(
                "--log-to-file",
                help="Also write a DEBUG log to reelr.log in the log directory.",
            ),
        ] = False,
    ) -> None:
        """Naming template engine for a media library manager."""
        from reelr.env_settings import get_env_settings
        from reelr.logging_setup import setup_logging
        from reelr.paths import log_dir

        level = (log_level or get_env_settings().app.log_level).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")

        ctx.ensure_object(dict)
        ctx.obj["log_level"] = level

        log_file = log_dir() / "reelr.log" if log_to_file else None
        setup_logging(
            log_level=level,
            log_file=log_file,
            rich_console=True,
            quiet_console=level != "DEBUG",
        )
        logger.debug("Logging configured at %s", level)
