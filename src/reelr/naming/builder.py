"""
FileNameBuilder: renders naming templates into file and folder names.

Rendering one file name:

1. Split the standard episode format on ``/`` and ``\\`` into segments
2. Per segment:
   a. swap season/episode sub-patterns for ``{Season EpisodeN}`` tokens
   b. refresh media info if the segment needs newer facts
   c. pass one: resolve every token except the episode title
   d. measure what is left with the title stubbed out
   e. pass two: compose episode titles into the remaining byte budget
   f. sanitize, expand the ellipsis marker, guard the byte length
3. Join non-blank segments with the host path separator, add the extension

Only configuration errors raise. Unknown tokens, missing metadata and media
info refresh failures degrade into the rendered text.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence

from reelr.config import BasicNamingConfig, NamingConfig
from reelr.env_settings import get_env_settings
from reelr.exceptions import NamingFormatError
from reelr.models import CustomFormat, Episode, EpisodeFile, Series
from reelr.naming.constants import ELLIPSIS, ELLIPSIS_MARKER_REGEX, TRAILING_TRIM_CHARACTERS
from reelr.naming.interfaces import (
    CustomFormatCalculator,
    DefaultQualityDefinitionService,
    MediaInfoUpdater,
    NamingConfigService,
    QualityDefinitionService,
    StaticNamingConfigService,
)
from reelr.naming.mediainfo import needs_media_info_refresh, scene_or_file_name
from reelr.naming.numbering import (
    EpisodeFormat,
    has_episode_identifier,
    parse_episode_formats,
    substitute_numbering_tokens,
)
from reelr.naming.pattern_cache import (
    EPISODE_FORMATS,
    HAS_EPISODE_IDENTIFIER,
    REQUIRES_EPISODE_TITLE,
    PatternCache,
)
from reelr.naming.resolvers import (
    CustomFormatTokens,
    EpisodeFileTokens,
    EpisodeTitlePlaceholder,
    EpisodeTitleStub,
    EpisodeTitleTokens,
    EpisodeTokens,
    IdTokens,
    MediaInfoTokens,
    NumberingTokens,
    QualityTokens,
    SeriesTokens,
    TokenRegistry,
    numbering_values,
    original_title,
)
from reelr.naming.sanitize import (
    byte_length,
    clean_folder_name,
    collapse_separators,
    replace_reserved_device_names,
    substitute_characters,
    trim_edges,
    truncate_utf8,
)
from reelr.naming.tokens import find_tokens, replace_tokens

logger = logging.getLogger(__name__)

# Both slash styles separate folders, whatever the host OS
PATTERN_SPLIT_REGEX = re.compile(r"[\\/]")

EPISODE_TITLE_TOKEN_KEYS = frozenset({"episodetitle", "episodecleantitle"})


def _split_pattern(pattern: str) -> list[str]:
    return [segment for segment in PATTERN_SPLIT_REGEX.split(pattern) if segment]


def _episode_sort_key(episode: Episode) -> tuple[int, str, int]:
    return (episode.season_number, episode.air_date or "", episode.episode_number)


class FileNameBuilder:
    """
    Naming template engine.

    Collaborators are injected; every one has a default so the builder works
    standalone. The pattern cache is the only state shared between renders
    and can be passed in to share it between builders.

    Example:
        builder = FileNameBuilder(quality_definition_service=my_qualities)
        name = builder.build_file_name([episode], series, episode_file, ".mkv")
    """

    def __init__(
        self,
        naming_config_service: NamingConfigService | None = None,
        quality_definition_service: QualityDefinitionService | None = None,
        media_info_updater: MediaInfoUpdater | None = None,
        custom_format_calculator: CustomFormatCalculator | None = None,
        pattern_cache: PatternCache | None = None,
        *,
        max_file_name_length: int | None = None,
        max_file_path_length: int | None = None,
    ) -> None:
        self._naming_config_service = naming_config_service or StaticNamingConfigService()
        self._quality_definition_service = (
            quality_definition_service or DefaultQualityDefinitionService()
        )
        self._media_info_updater = media_info_updater
        self._custom_format_calculator = custom_format_calculator
        self._pattern_cache = pattern_cache if pattern_cache is not None else PatternCache()

        if max_file_name_length is None or max_file_path_length is None:
            limits = get_env_settings().limits
            max_file_name_length = max_file_name_length or limits.max_file_name_length
            max_file_path_length = max_file_path_length or limits.max_file_path_length
        self.max_file_name_length = max_file_name_length
        self.max_file_path_length = max_file_path_length

    # =========================================================================
    # Public API
    # =========================================================================

    def build_file_name(
        self,
        episodes: Sequence[Episode],
        series: Series,
        episode_file: EpisodeFile,
        extension: str = "",
        naming_config: NamingConfig | None = None,
        custom_formats: Sequence[CustomFormat] | None = None,
    ) -> str:
        """
        Render the file name (possibly with sub-folders) for an episode file.

        Args:
            episodes: Episodes contained in the file (at least one)
            series: Series the episodes belong to
            episode_file: The file being named
            extension: Appended to the last segment (e.g. ".mkv")
            naming_config: Settings override; defaults to the config service
            custom_formats: Pre-computed custom formats; defaults to the
                calculator (or none)

        Returns:
            Relative name, segments joined with the host path separator

        Raises:
            ValueError: If episodes is empty
            NamingFormatError: If renaming is on and the standard format is empty
        """
        return self._build_file_name(
            episodes,
            series,
            episode_file,
            extension,
            self.max_file_path_length,
            naming_config,
            custom_formats,
        )

    def build_file_path(
        self,
        episodes: Sequence[Episode],
        series: Series,
        episode_file: EpisodeFile,
        extension: str,
        naming_config: NamingConfig | None = None,
        custom_formats: Sequence[CustomFormat] | None = None,
    ) -> str:
        """
        Render the full path: series root folder joined with the file name.

        The root's bytes (plus a separator) come out of the path budget.

        Raises:
            ValueError: If extension is blank, the series has no root path,
                or episodes is empty
        """
        if not extension or not extension.strip():
            raise ValueError("extension must not be empty")
        if not series.path or not series.path.strip():
            raise ValueError(f"Series {series.title!r} has no root path")

        remaining = self.max_file_path_length - byte_length(series.path) - 1
        file_name = self._build_file_name(
            episodes, series, episode_file, extension, remaining, naming_config, custom_formats
        )
        return os.path.join(series.path, file_name)

    def get_series_folder(self, series: Series, naming_config: NamingConfig | None = None) -> str:
        """Render the series folder format. Only series tokens are available."""
        naming_config = naming_config or self._naming_config_service.get_config()

        registry = TokenRegistry().register(SeriesTokens(series)).register(IdTokens(series))

        components = []
        for segment in _split_pattern(naming_config.series_folder_format):
            component = replace_tokens(segment, registry, naming_config)
            component = clean_folder_name(component)
            component = replace_reserved_device_names(component)
            if component.strip():
                components.append(component)

        return os.path.join(*components) if components else ""

    def requires_episode_title(self, series: Series, episodes: Sequence[Episode]) -> bool:
        """
        Whether the configured standard format uses an episode title token.

        Only the configured pattern is inspected; series and episodes are
        accepted so callers can ask per file.
        """
        naming_config = self._naming_config_service.get_config()
        if not naming_config.rename_episodes:
            return False

        pattern = naming_config.standard_episode_format
        return self._pattern_cache.get_or_compute(
            REQUIRES_EPISODE_TITLE,
            pattern,
            lambda: any(t.key in EPISODE_TITLE_TOKEN_KEYS for t in find_tokens(pattern)),
        )

    def get_basic_naming_config(self, naming_config: NamingConfig) -> BasicNamingConfig:
        """Summarize a standard episode format for simple settings screens."""
        pattern = naming_config.standard_episode_format
        episode_formats = self._episode_formats(pattern)
        if not episode_formats:
            return BasicNamingConfig()

        last = episode_formats[-1]
        basic = BasicNamingConfig(
            separator=last.separator, number_style=last.season_episode_pattern
        )

        for token in find_tokens(pattern):
            if token.separator and token.separator != " ":
                basic.replace_spaces = True

            key = token.key
            if key.startswith(("series", "site")):
                basic.include_series_title = True
            elif key in EPISODE_TITLE_TOKEN_KEYS:
                basic.include_episode_title = True
            elif key.startswith("quality"):
                basic.include_quality = True

        return basic

    # =========================================================================
    # Rendering
    # =========================================================================

    def _build_file_name(
        self,
        episodes: Sequence[Episode],
        series: Series,
        episode_file: EpisodeFile,
        extension: str,
        max_path: int,
        naming_config: NamingConfig | None,
        custom_formats: Sequence[CustomFormat] | None,
    ) -> str:
        if not episodes:
            raise ValueError("At least one episode is required to build a file name")

        naming_config = naming_config or self._naming_config_service.get_config()

        if not naming_config.rename_episodes:
            return original_title(episode_file, True) + extension

        pattern = naming_config.standard_episode_format
        if not pattern or not pattern.strip():
            raise NamingFormatError("Standard episode format cannot be empty", pattern=pattern)

        ordered = tuple(sorted(episodes, key=_episode_sort_key))
        quality_title = self._quality_definition_service.get_title(episode_file.quality.quality)
        formats = tuple(self._custom_formats(episode_file, series, custom_formats))

        segments = _split_pattern(pattern)
        components = []

        for i, segment in enumerate(segments):
            max_segment_length = min(self.max_file_name_length, max_path)
            if i == len(segments) - 1:
                max_segment_length -= byte_length(extension)

            component = self._render_segment(
                segment,
                ordered,
                series,
                episode_file,
                naming_config,
                quality_title,
                formats,
                max_segment_length,
            )
            if component.strip():
                components.append(component)

        return os.sep.join(components) + extension

    def _render_segment(
        self,
        segment: str,
        episodes: tuple[Episode, ...],
        series: Series,
        episode_file: EpisodeFile,
        naming_config: NamingConfig,
        quality_title: str,
        custom_formats: tuple[CustomFormat, ...],
        max_length: int,
    ) -> str:
        identifies_episode = self._pattern_cache.get_or_compute(
            HAS_EPISODE_IDENTIFIER, segment, lambda: has_episode_identifier(segment)
        )

        segment, numbering = substitute_numbering_tokens(
            segment,
            self._episode_formats(segment),
            episodes,
            naming_config.multi_episode_style,
        )

        self._update_media_info_if_needed(segment, episode_file, series)

        registry = TokenRegistry()
        registry.register(SeriesTokens(series))
        registry.register(IdTokens(series))
        registry.register(EpisodeTokens(episodes))
        registry.register(NumberingTokens(episodes, numbering_values(numbering)))
        registry.register(EpisodeTitlePlaceholder())
        registry.register(
            EpisodeFileTokens(episode_file, not identifies_episode or episode_file.id == 0)
        )
        registry.register(QualityTokens.from_quality(episode_file.quality, quality_title))
        if episode_file.media_info is not None:
            registry.register(
                MediaInfoTokens(episode_file.media_info, scene_or_file_name(episode_file))
            )
        else:
            logger.debug("Media info is unavailable for %s", episode_file.relative_path)
        registry.register(CustomFormatTokens(custom_formats))

        component = replace_tokens(segment, registry, naming_config, escape=True).strip()

        title_budget = max_length - self._length_without_episode_title(component, naming_config)
        registry.register(EpisodeTitleTokens(episodes, title_budget, naming_config))
        component = replace_tokens(component, registry, naming_config).strip()

        return self._finalize_segment(component, naming_config, max_length)

    def _length_without_episode_title(self, component: str, naming_config: NamingConfig) -> int:
        """Bytes the segment takes with episode titles rendered empty."""
        # Substitution only; separators next to the title stay in the final name.
        stub = TokenRegistry().register(EpisodeTitleStub())
        rendered = replace_tokens(component, stub, naming_config)
        return byte_length(substitute_characters(rendered, naming_config))

    @staticmethod
    def _finalize_segment(component: str, naming_config: NamingConfig, max_length: int) -> str:
        component = substitute_characters(component, naming_config)
        component = trim_edges(collapse_separators(component))
        component = ELLIPSIS_MARKER_REGEX.sub(ELLIPSIS, component)
        component = replace_reserved_device_names(component)

        if byte_length(component) > max_length:
            logger.debug(
                "Truncating %r to %d bytes (was %d)", component, max_length, byte_length(component)
            )
            component = truncate_utf8(component, max_length).rstrip(TRAILING_TRIM_CHARACTERS)

        return component

    # =========================================================================
    # Helpers
    # =========================================================================

    def _episode_formats(self, pattern: str) -> tuple[EpisodeFormat, ...]:
        return self._pattern_cache.get_or_compute(
            EPISODE_FORMATS, pattern, lambda: parse_episode_formats(pattern)
        )

    def _custom_formats(
        self,
        episode_file: EpisodeFile,
        series: Series,
        custom_formats: Sequence[CustomFormat] | None,
    ) -> Sequence[CustomFormat]:
        if custom_formats is not None:
            return custom_formats
        if self._custom_format_calculator is None:
            return []
        return self._custom_format_calculator.parse_custom_format(episode_file, series)

    def _update_media_info_if_needed(
        self, pattern: str, episode_file: EpisodeFile, series: Series
    ) -> None:
        """Ask the updater for fresh media info when the pattern needs it.

        Failures are logged and swallowed: stale or missing media info just
        renders as empty tokens.
        """
        if not series.path or not series.path.strip():
            return
        if self._media_info_updater is None:
            return
        if not needs_media_info_refresh(pattern, episode_file):
            return

        try:
            self._media_info_updater.update(episode_file, series)
        except Exception as e:
            logger.warning(
                "Failed to refresh media info for %s (series=%s): %s",
                episode_file.path or episode_file.relative_path,
                series.title,
                e,
                exc_info=True,
            )
