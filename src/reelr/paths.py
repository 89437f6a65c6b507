"""Cross-platform path handling using platformdirs.

Provides XDG-compliant paths with environment variable overrides for flexibility.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

from platformdirs import user_config_dir, user_log_dir

logger = logging.getLogger(__name__)

APP_NAME = "reelr"
APPAUTHOR: Literal[False] = False  # Avoid "CompanyName/AppName" nesting on Windows

NAMING_CONFIG_FILENAME = "naming.yaml"


def _env_override(env_var: str) -> Path | None:
    """Check for environment variable override.

    Args:
        env_var: Environment variable name to check

    Returns:
        Path from environment variable if set, None otherwise
    """
    v = os.environ.get(env_var)
    return Path(v).expanduser() if v else None


def config_dir() -> Path:
    """Get application config directory.

    Linux: ~/.config/reelr
    macOS: ~/Library/Application Support/reelr
    Windows: C:\\Users\\<user>\\AppData\\Local\\reelr

    Override with REELR_CONFIG_DIR env var.

    Returns:
        Path to config directory (does NOT auto-create)
    """
    return _env_override("REELR_CONFIG_DIR") or Path(user_config_dir(APP_NAME, APPAUTHOR))


def log_dir(*, ensure: bool = True) -> Path:
    """Get application log directory.

    Linux: ~/.local/state/reelr/log
    macOS: ~/Library/Logs/reelr
    Windows: C:\\Users\\<user>\\AppData\\Local\\reelr\\Logs

    Override with REELR_LOG_DIR env var.

    Args:
        ensure: Create directory if it doesn't exist

    Returns:
        Path to log directory
    """
    d = _env_override("REELR_LOG_DIR") or Path(user_log_dir(APP_NAME, APPAUTHOR))
    if ensure:
        d.mkdir(parents=True, exist_ok=True)
    return d


def default_naming_config_path() -> Path:
    """Location of the user's naming config file (may not exist)."""
    return config_dir() / NAMING_CONFIG_FILENAME
