"""Environment-based settings using pydantic-settings.

Usage:
    from reelr.env_settings import get_env_settings

    env = get_env_settings()
    print(env.limits.max_file_name_length)  # From REELR_MAX_FILE_NAME_LENGTH

Environment Variables:
    Naming limits:
        REELR_MAX_FILE_NAME_LENGTH - Longest path segment in bytes (default: 255)
        REELR_MAX_FILE_PATH_LENGTH - Longest full path in bytes (default: 4096)

    Application:
        REELR_LOG_LEVEL - Logging level (default: "INFO")

    Path Overrides (read by reelr.paths):
        REELR_CONFIG_DIR - Override config directory
        REELR_LOG_DIR - Override log directory
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Filesystem limits used when nothing overrides them.
DEFAULT_MAX_FILE_NAME_LENGTH = 255
DEFAULT_MAX_FILE_PATH_LENGTH = 4096


class NamingLimitsEnvSettings(BaseSettings):
    """Filesystem length ceilings for rendered names.

    Reads from REELR_MAX_FILE_NAME_LENGTH, REELR_MAX_FILE_PATH_LENGTH env vars.
    """

    model_config = SettingsConfigDict(
        env_prefix="REELR_",
        extra="ignore",
    )

    max_file_name_length: int = Field(
        default=DEFAULT_MAX_FILE_NAME_LENGTH,
        description="Maximum bytes in one path segment",
    )
    max_file_path_length: int = Field(
        default=DEFAULT_MAX_FILE_PATH_LENGTH,
        description="Maximum bytes in a full path",
    )

    @field_validator("max_file_name_length", "max_file_path_length")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject limits too small to hold a name and an ellipsis."""
        if v < 16:
            raise ValueError(f"Length limits must be at least 16 bytes, got: {v}")
        return v


class AppEnvSettings(BaseSettings):
    """Application-level settings from environment variables.

    Reads from REELR_LOG_LEVEL.
    """

    model_config = SettingsConfigDict(
        env_prefix="REELR_",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"REELR_LOG_LEVEL must be one of {valid_levels}, got: {v}")
        return upper


class EnvSettings(BaseSettings):
    """Combined environment settings.

    Use get_env_settings() to get a cached instance.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    limits: NamingLimitsEnvSettings = Field(default_factory=NamingLimitsEnvSettings)
    app: AppEnvSettings = Field(default_factory=AppEnvSettings)


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings.

    Returns:
        EnvSettings instance with all environment-based configuration.
    """
    return EnvSettings()


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings.

    Useful for testing to ensure fresh settings are loaded.
    """
    get_env_settings.cache_clear()
