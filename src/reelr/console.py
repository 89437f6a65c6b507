"""Rich console and message helpers for the reelr CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

REELR_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "title": "bold white",
        "dim": "dim",
        "path": "cyan",
        "hint": "dim italic",
    }
)

# Primary console for normal output
console = Console(theme=REELR_THEME, stderr=False)

# Error console for stderr output
err_console = Console(theme=REELR_THEME, stderr=True)


def print_success(message: str) -> None:
    """Print a success message with checkmark.

    Example:
        >>> print_success("naming.yaml is valid")
          ✓ naming.yaml is valid
    """
    console.print(f"  [success]✓[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message with X."""
    console.print(f"  [error]✗[/] {escape(message)}")


def print_info(message: str) -> None:
    console.print(f"  [info]→[/] {escape(message)}")
