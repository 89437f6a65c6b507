"""Logging configuration for reelr.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up under the ``reelr`` logger configured here. The naming engine itself only
emits DEBUG (cache misses, truncation, missing media info) and WARNING
(media info refresh failures).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

LOGGER_NAME = "reelr"

FILE_FORMAT = logging.Formatter(
    "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Console handler and the level it was configured with, for set_console_quiet
_console_handler: logging.Handler | None = None
_console_level: int = logging.INFO


def _resolve_level(log_level: str | None) -> int:
    if log_level is None:
        from reelr.env_settings import get_env_settings

        log_level = get_env_settings().app.log_level
    return getattr(logging, log_level.upper(), logging.INFO)


def _build_console_handler(rich_console: bool) -> logging.Handler:
    if rich_console:
        from reelr.console import err_console

        # Rendered names contain [brackets]; never treat log text as markup
        return RichHandler(
            console=err_console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    return handler


def _build_file_handler(log_file: Path | str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(FILE_FORMAT)
    return handler


def setup_logging(
    log_level: str | None = None,
    log_file: Path | str | None = None,
    rich_console: bool = True,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure the ``reelr`` logger.

    Calling it again replaces (and closes) the handlers of the previous call.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to
            REELR_LOG_LEVEL; unknown names fall back to INFO.
        log_file: Optional file that receives DEBUG and above
        rich_console: Use a RichHandler on stderr instead of a plain stream handler
        quiet_console: Only show WARNING and above on the console

    Returns:
        The ``reelr`` logger
    """
    global _console_handler, _console_level
    level = _resolve_level(log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    console_handler = _build_console_handler(rich_console)
    console_handler.setLevel(logging.WARNING if quiet_console else level)
    logger.addHandler(console_handler)
    _console_handler = console_handler
    _console_level = level

    if log_file:
        logger.addHandler(_build_file_handler(log_file))

    return logger


def set_console_quiet(quiet: bool = True) -> None:
    """
    Toggle quiet mode for console logging.

    Quiet shows only WARNING and above; leaving quiet mode restores the level
    passed to setup_logging. File logging is unaffected.
    """
    if _console_handler is not None:
        _console_handler.setLevel(logging.WARNING if quiet else _console_level)
