"""
Naming configuration: dataclass, enums and naming.yaml loading.

Setting Sources
===============
1. **naming.yaml** (user naming preferences), validated by
   ``reelr.schemas.naming.NamingSchema``:
   - rename_episodes, replace_illegal_characters
   - colon_replacement_format, multi_episode_style
   - standard_episode_format, series_folder_format

2. **Environment** (``reelr.env_settings``): length ceilings and log level.

A missing naming.yaml means defaults; a present but invalid one is a
ConfigurationError. JSON files load too since YAML is a superset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from reelr.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ColonReplacementFormat(str, Enum):
    """How ``:`` is rewritten when illegal character replacement is on."""

    DELETE = "delete"
    DASH = "dash"
    SPACE_DASH = "space_dash"
    SPACE_DASH_SPACE = "space_dash_space"
    SMART = "smart"


class MultiEpisodeStyle(str, Enum):
    """How a file holding several episodes is numbered (S01E01 + S01E02)."""

    EXTEND = "extend"  # S01E01-02
    DUPLICATE = "duplicate"  # S01E01 - S01E02
    REPEAT = "repeat"  # S01E01E02
    SCENE = "scene"  # S01E01-E02
    RANGE = "range"  # S01E01-02 (first and last only)
    PREFIXED_RANGE = "prefixed_range"  # S01E01-E02 (first and last only)


DEFAULT_STANDARD_EPISODE_FORMAT = (
    "{Series Title} - S{season:00}E{episode:00} - {Episode Title} {Quality Full}"
)
DEFAULT_SERIES_FOLDER_FORMAT = "{Series Title}"


@dataclass(frozen=True)
class NamingConfig:
    """User naming settings consumed by the FileNameBuilder."""

    rename_episodes: bool = True
    replace_illegal_characters: bool = True
    colon_replacement_format: ColonReplacementFormat = ColonReplacementFormat.SMART
    multi_episode_style: MultiEpisodeStyle = MultiEpisodeStyle.PREFIXED_RANGE
    standard_episode_format: str = DEFAULT_STANDARD_EPISODE_FORMAT
    series_folder_format: str = DEFAULT_SERIES_FOLDER_FORMAT

    @classmethod
    def default(cls) -> NamingConfig:
        """Settings used when the caller has no user override."""
        return cls()


@dataclass
class BasicNamingConfig:
    """Simplified view of a standard episode format, for settings UIs.

    ``separator`` is the text around the season/episode numbering and
    ``number_style`` the numbering sub-pattern itself (e.g. "S{season:00}E{episode:00}").
    """

    include_series_title: bool = False
    include_episode_title: bool = False
    include_quality: bool = False
    replace_spaces: bool = False
    separator: str = ""
    number_style: str = ""


def naming_config_from_dict(
    data: dict[str, Any],
    *,
    source: Path | str | None = None,
) -> NamingConfig:
    """
    Validate raw settings and convert them to a NamingConfig.

    Args:
        data: Raw mapping (e.g. parsed YAML)
        source: File the data came from, for error messages

    Returns:
        NamingConfig built from the validated data

    Raises:
        ConfigurationError: If the data fails schema validation
    """
    from reelr.schemas.naming import validate_naming_data

    try:
        schema = validate_naming_data(data)
    except PydanticValidationError as e:
        label = source or "naming config"
        raise ConfigurationError(f"Invalid {label}: {e}", config_file=source) from e

    logger.debug("Naming config v%s validated successfully", schema.version)

    return NamingConfig(
        rename_episodes=schema.rename_episodes,
        replace_illegal_characters=schema.replace_illegal_characters,
        colon_replacement_format=ColonReplacementFormat(schema.colon_replacement_format),
        multi_episode_style=MultiEpisodeStyle(schema.multi_episode_style),
        standard_episode_format=schema.standard_episode_format,
        series_folder_format=schema.series_folder_format,
    )


def load_naming_config(config_path: Path | str | None = None) -> NamingConfig:
    """
    Load naming settings from a YAML (or JSON) file.

    Args:
        config_path: File to read. Defaults to naming.yaml in the user config dir.

    Returns:
        NamingConfig with the file's settings, or defaults when the default
        file does not exist

    Raises:
        ConfigurationError: If an explicit file is missing, unreadable,
            not a mapping, or fails validation
    """
    explicit = config_path is not None
    if config_path is None:
        from reelr.paths import default_naming_config_path

        config_path = default_naming_config_path()
    path = Path(config_path)

    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Naming config not found: {path}", config_file=path)
        logger.debug("No naming config at %s, using defaults", path)
        return NamingConfig.default()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read {path}: {e}", config_file=path) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must contain a mapping, got {type(data).__name__}", config_file=path
        )

    return naming_config_from_dict(data, source=path)
