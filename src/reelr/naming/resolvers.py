"""
Token groups and the resolver registry.

Each token group is a small frozen dataclass carrying only the data its
tokens need. ``resolve_token`` dispatches on the group type; a group
returns ``None`` for token names it does not own.

The registry is built fresh for every rendered segment:

    registry = TokenRegistry()
    registry.register(SeriesTokens(series))
    registry.register(EpisodeTitlePlaceholder())
    ...
    registry.resolve(token_match)  # Resolved(...) or DEFERRED

Groups registered later take precedence, which is how the pass-two
EpisodeTitleTokens replace the pass-one placeholder. Tokens no group owns
resolve to the empty string.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field as dataclass_field

from reelr.config import NamingConfig
from reelr.models import CustomFormat, Episode, EpisodeFile, Gender, MediaInfo, QualityModel, Series
from reelr.naming import mediainfo as mi
from reelr.naming.constants import (
    DEFAULT_RELEASE_GROUP,
    EPISODE_CLEAN_TITLE_SEPARATOR,
    EPISODE_TITLE_SEPARATOR,
    UNKNOWN_AIR_DATE,
)
from reelr.naming.languages import format_languages_token
from reelr.naming.numbering import format_number
from reelr.naming.sanitize import substitute_characters
from reelr.naming.titles import (
    clean_title,
    compose_episode_title,
    episode_titles,
    slug_title,
    title_first_character,
    title_the,
    title_without_year,
    title_year,
)
from reelr.naming.tokens import DEFERRED, Resolution, Resolved, TokenMatch, token_key

# =============================================================================
# Token Groups
# =============================================================================

SERIES_TOKEN_PREFIXES = ("series", "site")


@dataclass(frozen=True)
class SeriesTokens:
    """``{Series Title}``, ``{Series TitleYear}`` ... (``Site`` is an alias)."""

    series: Series


@dataclass(frozen=True)
class IdTokens:
    """``{TpdbId}``."""

    series: Series


@dataclass(frozen=True)
class EpisodeTokens:
    """``{Release Date}`` and the performer tokens."""

    episodes: tuple[Episode, ...]


@dataclass(frozen=True)
class NumberingTokens:
    """Synthesized ``{Season EpisodeN}`` tokens plus ``{season}``, ``{episode}``, ``{absolute}``."""

    episodes: tuple[Episode, ...]
    season_episode: Mapping[str, str] = dataclass_field(default_factory=dict)


@dataclass(frozen=True)
class EpisodeTitlePlaceholder:
    """Pass one: leave the episode title tokens for later."""


@dataclass(frozen=True)
class EpisodeTitleStub:
    """Measurement: episode title tokens take no room."""


@dataclass(frozen=True)
class EpisodeTitleTokens:
    """Pass two: episode titles composed under ``max_length`` bytes.

    Titles are measured after colon and illegal character substitution, since
    that is the text that ends up in the name.
    """

    episodes: tuple[Episode, ...]
    max_length: int
    naming_config: NamingConfig = dataclass_field(default_factory=NamingConfig)


@dataclass(frozen=True)
class EpisodeFileTokens:
    """``{Original Title}``, ``{Original Filename}``, ``{Release Group}``."""

    episode_file: EpisodeFile
    use_current_filename: bool


@dataclass(frozen=True)
class QualityTokens:
    """``{Quality Full}``, ``{Quality Title}``, ``{Quality Proper}``, ``{Quality Real}``."""

    title: str
    proper: str = ""
    real: str = ""

    @classmethod
    def from_quality(cls, quality: QualityModel, title: str) -> QualityTokens:
        return cls(
            title=title,
            proper="Proper" if quality.revision.version > 1 else "",
            real="REAL" if quality.revision.real > 0 else "",
        )


@dataclass(frozen=True)
class MediaInfoTokens:
    """``{MediaInfo ...}`` tokens; only registered when the file has media info."""

    media_info: MediaInfo
    scene_name: str = ""


@dataclass(frozen=True)
class CustomFormatTokens:
    """``{Custom Formats}``: formats flagged for renaming, in the order given."""

    formats: tuple[CustomFormat, ...] = ()


TokenGroup = (
    SeriesTokens
    | IdTokens
    | EpisodeTokens
    | NumberingTokens
    | EpisodeTitlePlaceholder
    | EpisodeTitleStub
    | EpisodeTitleTokens
    | EpisodeFileTokens
    | QualityTokens
    | MediaInfoTokens
    | CustomFormatTokens
)

_EPISODE_TITLE_KEYS = frozenset({"episodetitle", "episodecleantitle"})


# =============================================================================
# File Name Helpers
# =============================================================================


def _file_stem(path: str) -> str:
    """File name without directory or extension; both slash styles count."""
    name = re.split(r"[\\/]", path)[-1]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def original_file_name(episode_file: EpisodeFile, use_current_filename: bool) -> str:
    """Stored file name without extension, or "" when not allowed as a fallback."""
    if not use_current_filename:
        return ""
    if not episode_file.relative_path or not episode_file.relative_path.strip():
        return _file_stem(episode_file.path)
    return _file_stem(episode_file.relative_path)


def original_title(episode_file: EpisodeFile, use_current_filename: bool) -> str:
    """Scene name, falling back to the stored file name."""
    if not episode_file.scene_name or not episode_file.scene_name.strip():
        return original_file_name(episode_file, use_current_filename)
    return episode_file.scene_name


# =============================================================================
# Group Resolvers
# =============================================================================


def _resolve_series(group: SeriesTokens, key: str) -> str | None:
    for prefix in SERIES_TOKEN_PREFIXES:
        if key.startswith(prefix):
            name = key[len(prefix) :]
            break
    else:
        return None

    title = group.series.title
    year = group.series.year

    match name:
        case "title":
            return title
        case "titleslug":
            return slug_title(title)
        case "cleantitle":
            return clean_title(title)
        case "cleantitleyear":
            return clean_title(title_year(title, year))
        case "cleantitlewithoutyear":
            return clean_title(title_without_year(title))
        case "titlethe":
            return title_the(title)
        case "titleyear":
            return title_year(title, year)
        case "titlewithoutyear":
            return title_without_year(title)
        case "titletheyear":
            return title_year(title_the(title), year)
        case "titlethewithoutyear":
            return title_without_year(title_the(title))
        case "titlefirstcharacter":
            return title_first_character(title)
        case "year":
            return str(year) if year else ""
        case "network":
            return group.series.network or ""
    return None


def _resolve_episode(group: EpisodeTokens, key: str) -> str | None:
    episodes = group.episodes

    def performers(gender: Gender | None) -> str:
        return " ".join(
            actor.name
            for episode in episodes
            for actor in episode.actors
            if gender is None or actor.gender == gender
        )

    match key:
        case "releasedate":
            air_date = episodes[0].air_date
            if air_date and air_date.strip():
                return air_date.replace("-", " ")
            return UNKNOWN_AIR_DATE
        case "episodeperformers":
            return performers(None)
        case "episodeperformersfemale":
            return performers(Gender.FEMALE)
        case "episodeperformersmale":
            return performers(Gender.MALE)
    return None


def _resolve_numbering(group: NumberingTokens, token: TokenMatch) -> str | None:
    key = token.key
    if key in group.season_episode:
        return group.season_episode[key]

    first = group.episodes[0]
    match key:
        case "season":
            return format_number(first.season_number, token.custom_format)
        case "episode":
            return format_number(first.episode_number, token.custom_format)
        case "absolute":
            if first.absolute_episode_number is None:
                return ""
            return format_number(first.absolute_episode_number, token.custom_format)
    return None


def _resolve_episode_title(group: EpisodeTitleTokens, key: str) -> str:
    titles = episode_titles(group.episodes)
    separator = EPISODE_TITLE_SEPARATOR
    if key == "episodecleantitle":
        titles = [clean_title(t) for t in titles]
        separator = EPISODE_CLEAN_TITLE_SEPARATOR
    titles = [substitute_characters(t, group.naming_config) for t in titles]
    return compose_episode_title(titles, separator, group.max_length)


def _resolve_episode_file(group: EpisodeFileTokens, token: TokenMatch) -> str | None:
    episode_file = group.episode_file
    match token.key:
        case "originaltitle":
            return original_title(episode_file, group.use_current_filename)
        case "originalfilename":
            return original_file_name(episode_file, group.use_current_filename)
        case "releasegroup":
            if episode_file.release_group is not None:
                return episode_file.release_group
            return token.default_value(DEFAULT_RELEASE_GROUP)
    return None


def _resolve_quality(group: QualityTokens, key: str) -> str | None:
    match key:
        case "qualityfull":
            return " ".join(part for part in (group.title, group.proper, group.real) if part)
        case "qualitytitle":
            return group.title
        case "qualityproper":
            return group.proper
        case "qualityreal":
            return group.real
    return None


def _resolve_media_info(group: MediaInfoTokens, token: TokenMatch) -> str | None:
    media_info = group.media_info
    language_filter = token.custom_format

    def audio_languages(skip_english_only: bool) -> str:
        return format_languages_token(
            media_info.audio_languages, language_filter, skip_english_only=skip_english_only
        )

    def subtitle_languages() -> str:
        return format_languages_token(
            media_info.subtitles, language_filter, skip_english_only=False
        )

    match token.key:
        case "mediainfovideo" | "mediainfovideocodec":
            return mi.format_video_codec(media_info, group.scene_name)
        case "mediainfovideobitdepth":
            return mi.format_video_bit_depth(media_info)
        case "mediainfoaudio" | "mediainfoaudiocodec":
            return mi.format_audio_codec(media_info)
        case "mediainfoaudiochannels":
            return mi.format_audio_channels(media_info)
        case "mediainfoaudiolanguages":
            return audio_languages(skip_english_only=True)
        case "mediainfoaudiolanguagesall":
            return audio_languages(skip_english_only=False)
        case "mediainfosubtitlelanguages" | "mediainfosubtitlelanguagesall":
            return subtitle_languages()
        case "mediainfosimple":
            video = mi.format_video_codec(media_info, group.scene_name)
            return f"{video} {mi.format_audio_codec(media_info)}"
        case "mediainfofull":
            video = mi.format_video_codec(media_info, group.scene_name)
            audio = mi.format_audio_codec(media_info)
            return f"{video} {audio}{audio_languages(True)} {subtitle_languages()}"
        case "mediainfovideodynamicrange":
            return mi.format_video_dynamic_range(media_info)
        case "mediainfovideodynamicrangetype":
            return mi.format_video_dynamic_range_type(media_info)
    return None


def resolve_token(group: TokenGroup, token: TokenMatch) -> Resolution | None:
    """
    Resolve ``token`` against one group.

    Returns:
        Resolved / DEFERRED, or None when the group does not own the token
    """
    key = token.key
    value: str | None

    match group:
        case SeriesTokens():
            value = _resolve_series(group, key)
        case IdTokens():
            value = str(group.series.tpdb_id) if key == "tpdbid" else None
        case EpisodeTokens():
            value = _resolve_episode(group, key)
        case NumberingTokens():
            value = _resolve_numbering(group, token)
        case EpisodeTitlePlaceholder():
            return DEFERRED if key in _EPISODE_TITLE_KEYS else None
        case EpisodeTitleStub():
            value = "" if key in _EPISODE_TITLE_KEYS else None
        case EpisodeTitleTokens():
            value = _resolve_episode_title(group, key) if key in _EPISODE_TITLE_KEYS else None
        case EpisodeFileTokens():
            value = _resolve_episode_file(group, token)
        case QualityTokens():
            value = _resolve_quality(group, key)
        case MediaInfoTokens():
            value = _resolve_media_info(group, token)
        case CustomFormatTokens():
            if key != "customformats":
                return None
            value = " ".join(str(f) for f in group.formats if f.include_when_renaming)
        case _:
            raise TypeError(f"Unknown token group: {type(group).__name__}")

    return None if value is None else Resolved(value)


# =============================================================================
# Registry
# =============================================================================


@dataclass
class TokenRegistry:
    """Ordered collection of token groups for one segment render.

    Instance-based and cheap; a new one is built per segment so resolvers
    never see another render's data.
    """

    _groups: list[TokenGroup] = dataclass_field(default_factory=list)

    def register(self, group: TokenGroup) -> TokenRegistry:
        """Add a group. It takes precedence over groups registered earlier."""
        self._groups.append(group)
        return self

    def resolve(self, token: TokenMatch) -> Resolution:
        for group in reversed(self._groups):
            resolution = resolve_token(group, token)
            if resolution is not None:
                return resolution
        return Resolved("")

    def __len__(self) -> int:
        return len(self._groups)


def numbering_values(values: Mapping[str, str]) -> dict[str, str]:
    """Re-key ``{Season Episode1}``-style token texts by token_key."""
    return {token_key(name): value for name, value in values.items()}
