"""reelr CLI - command-line interface built with Typer and Rich.

Commands:
- preview: render sample names with your naming formats
- check: validate a naming config file
"""

from __future__ import annotations

from reelr.cli._app import create_main_callback, make_app
from reelr.cli.naming import register_naming_commands

app = make_app()
create_main_callback(app)
register_naming_commands(app)


def main() -> None:
    """Entry point for the reelr command."""
    app()


__all__ = ["app", "main"]
