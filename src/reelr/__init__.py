"""reelr - naming template engine for a media library manager."""

from reelr.exceptions import (
    ConfigurationError,
    NamingFormatError,
    ReelrError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Base exception
    "ReelrError",
    # Configuration
    "ConfigurationError",
    "NamingFormatError",
]
