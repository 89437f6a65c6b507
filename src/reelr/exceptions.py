"""
Reelr exception hierarchy.

Provides typed exceptions for better error handling and clearer error messages.

Exception Hierarchy:
    ReelrError (base)
    └── ConfigurationError - Config file issues, missing settings
        └── NamingFormatError - Naming pattern cannot be used for rendering

Only configuration errors escape a render. Everything else the naming engine
runs into (unknown tokens, missing metadata, a failing media info refresh)
degrades into the rendered string instead of raising.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ReelrError(Exception):
    """Base exception for all reelr errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize reelr exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ReelrError):
    """Configuration file or settings error."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_file:
            details["config_file"] = str(config_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.config_file = config_file
        self.field = field


class NamingFormatError(ConfigurationError):
    """Naming pattern is unusable (e.g. empty standard episode format)."""

    def __init__(self, message: str, *, pattern: str | None = None, **kwargs: Any) -> None:
        details = kwargs.get("details") or {}
        if pattern is not None:
            details["pattern"] = pattern
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.pattern = pattern

