"""Naming commands.

Commands: preview, check
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, replace
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from reelr.cli._app import NAMING_COMMANDS
from reelr.config import ColonReplacementFormat, MultiEpisodeStyle, NamingConfig
from reelr.console import console, print_error, print_info, print_success
from reelr.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _load_config(config: Path | None) -> NamingConfig:
    from reelr.config import load_naming_config

    try:
        return load_naming_config(config)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def register_naming_commands(app: typer.Typer) -> None:
    """Register naming commands on the app."""

    @app.command(rich_help_panel=NAMING_COMMANDS)
    def preview(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="naming.yaml to use (default: user config dir).",
            ),
        ] = None,
        pattern: Annotated[
            str | None,
            typer.Option("--pattern", "-p", help="Standard episode format to preview."),
        ] = None,
        folder_pattern: Annotated[
            str | None,
            typer.Option("--folder-pattern", "-f", help="Series folder format to preview."),
        ] = None,
        colon: Annotated[
            ColonReplacementFormat | None,
            typer.Option("--colon", help="Colon replacement policy."),
        ] = None,
        multi_episode: Annotated[
            MultiEpisodeStyle | None,
            typer.Option("--multi-episode", "-m", help="Multi-episode numbering style."),
        ] = None,
        json_output: Annotated[
            bool,
            typer.Option("--json", "-j", help="Output results as JSON."),
        ] = False,
    ) -> None:
        """👀 Preview names produced by your naming formats.

        Renders a sample series with a single-episode file, a two-episode
        file, the series folder, and the full path.

        [bold]Examples:[/]
          reelr preview                                 [dim]# Use naming.yaml[/]
          reelr preview -p "{Series Title} - {season:0}x{episode:00}"
          reelr preview -m scene --colon dash           [dim]# Try other styles[/]
        """
        from reelr.naming import FileNameBuilder
        from reelr.naming.samples import build_preview

        naming_config = _load_config(config)

        overrides: dict[str, object] = {}
        if pattern is not None:
            overrides["standard_episode_format"] = pattern
        if folder_pattern is not None:
            overrides["series_folder_format"] = folder_pattern
        if colon is not None:
            overrides["colon_replacement_format"] = colon
        if multi_episode is not None:
            overrides["multi_episode_style"] = multi_episode
        naming_config = replace(naming_config, **overrides)  # type: ignore[arg-type]

        try:
            result = build_preview(FileNameBuilder(), naming_config)
        except ConfigurationError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

        if json_output:
            typer.echo(json.dumps(asdict(result), indent=2, ensure_ascii=False))
            return

        table = Table(title="Naming Preview", show_lines=False)
        table.add_column("Sample", style="title", no_wrap=True)
        table.add_column("Result", style="path")
        table.add_row("Single episode", Text(result.single_episode))
        table.add_row("Multi episode", Text(result.multi_episode))
        table.add_row("Series folder", Text(result.series_folder))
        table.add_row("Full path", Text(result.full_path))
        console.print(table)

        print_info(f"Pattern: {naming_config.standard_episode_format}")

    @app.command(rich_help_panel=NAMING_COMMANDS)
    def check(
        path: Annotated[
            Path | None,
            typer.Argument(help="naming.yaml to validate (default: user config dir)."),
        ] = None,
    ) -> None:
        """📝 Validate a naming config file.

        Exits with status 1 when the file is missing, unreadable or invalid.
        """
        from reelr.config import load_naming_config
        from reelr.paths import default_naming_config_path

        target = path or default_naming_config_path()
        try:
            naming_config = load_naming_config(target)
        except ConfigurationError as e:
            logger.debug("Naming config check failed: %s", e.details)
            print_error(str(e))
            raise typer.Exit(1) from e

        print_success(f"{target.name} is valid")
        print_info(f"Standard episode format: {naming_config.standard_episode_format}")
