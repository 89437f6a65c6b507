"""
Collaborator protocols for the naming engine.

The engine never talks to the catalog, the quality definitions, the media
info extractor or custom format scoring directly; callers inject objects
satisfying these protocols (duck typing via typing.Protocol). Defaults are
provided so the engine works standalone for previews and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Protocol, runtime_checkable

from reelr.config import NamingConfig
from reelr.models import CustomFormat, EpisodeFile, Quality, Series


@runtime_checkable
class NamingConfigService(Protocol):
    """Source of the user's current naming settings."""

    def get_config(self) -> NamingConfig: ...


@runtime_checkable
class QualityDefinitionService(Protocol):
    """Maps a quality tier to its display title (users may rename tiers)."""

    def get_title(self, quality: Quality) -> str: ...


@runtime_checkable
class MediaInfoUpdater(Protocol):
    """Re-extracts media info for a file.

    ``update`` fills ``episode_file.media_info`` in place. It may be slow (it
    reads the file) and may raise; the engine logs failures and carries on.
    """

    def update(self, episode_file: EpisodeFile, series: Series) -> None: ...


@runtime_checkable
class CustomFormatCalculator(Protocol):
    """Scores a file against the user's custom formats."""

    def parse_custom_format(self, episode_file: EpisodeFile, series: Series) -> list[CustomFormat]:
        """Matched formats, in scoring order."""
        ...


@dataclass
class StaticNamingConfigService:
    """Always returns the same NamingConfig."""

    config: NamingConfig = dataclass_field(default_factory=NamingConfig.default)

    def get_config(self) -> NamingConfig:
        return self.config


class DefaultQualityDefinitionService:
    """Uses the quality's own name as its title."""

    def get_title(self, quality: Quality) -> str:
        return quality.name
