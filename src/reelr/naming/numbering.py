"""
Season/episode numbering.

A template like ``S{season:00}E{episode:00}`` is a numbering sub-pattern.
Each distinct sub-pattern in a segment is swapped for a synthesized
``{Season EpisodeN}`` token whose value is the sub-pattern rendered for
every episode in the file, according to the multi-episode style.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from reelr.config import MultiEpisodeStyle
from reelr.models import Episode
from reelr.naming.constants import (
    AIR_DATE_REGEX,
    EPISODE_REGEX,
    SEASON_EPISODE_PATTERN_REGEX,
    SEASON_EPISODE_TOKEN_FORMAT,
    SEASON_REGEX,
)


@dataclass(frozen=True)
class EpisodeFormat:
    """One numbering sub-pattern found in a template."""

    separator: str  # text around the sub-pattern, e.g. " - "
    episode_separator: str  # "E", "x", ".e" ...
    episode_pattern: str  # "{episode:00}"
    season_episode_pattern: str  # "S{season:00}E{episode:00}"


def parse_episode_formats(pattern: str) -> tuple[EpisodeFormat, ...]:
    """Every numbering sub-pattern in ``pattern``, in order of appearance."""
    formats = []
    for m in SEASON_EPISODE_PATTERN_REGEX.finditer(pattern):
        # The separator after the sub-pattern wins over the one before it
        separator = m.group("trailing_separator") or m.group("leading_separator") or ""
        formats.append(
            EpisodeFormat(
                separator=separator,
                episode_separator=m.group("episode_separator"),
                episode_pattern=m.group("episode"),
                season_episode_pattern=m.group("season_episode"),
            )
        )
    return tuple(formats)


def has_episode_identifier(pattern: str) -> bool:
    """True when the pattern numbers episodes or names them by release date."""
    return bool(SEASON_EPISODE_PATTERN_REGEX.search(pattern) or AIR_DATE_REGEX.search(pattern))


def format_number(value: int, custom_format: str | None) -> str:
    """
    Zero-pad ``value`` to the width of an all-zero format.

    Examples:
        >>> format_number(3, "00")
        '03'
        >>> format_number(3, None)
        '3'
        >>> format_number(123, "00")
        '123'
    """
    if custom_format and set(custom_format) == {"0"}:
        return str(value).zfill(len(custom_format))
    return str(value)


def _replace_number_token(token: str, value: int) -> str:
    _, _, custom_format = token.strip("{}").partition(":")
    return format_number(value, custom_format or None)


def replace_number_tokens(pattern: str, episode: Episode) -> str:
    """Fill the ``{season}`` / ``{episode}`` tokens of a sub-pattern for one episode."""
    pattern = EPISODE_REGEX.sub(
        lambda m: _replace_number_token(m.group("episode"), episode.episode_number), pattern
    )
    return SEASON_REGEX.sub(
        lambda m: _replace_number_token(m.group("season"), episode.season_number), pattern
    )


def _format_episodes(base: str, follow: str, episodes: Sequence[Episode]) -> str:
    parts = [replace_number_tokens(base if i == 0 else follow, ep) for i, ep in enumerate(episodes)]
    return "".join(parts)


def render_season_episode(
    episode_format: EpisodeFormat,
    episodes: Sequence[Episode],
    style: MultiEpisodeStyle,
) -> str:
    """
    Render one sub-pattern for the file's episodes.

    With ``S{season:00}E{episode:00}`` and episodes 1-3 of season 1:

    ========================  =======================
    extend                    S01E01-02-03
    duplicate                 S01E01 - S01E02 - S01E03
    repeat                    S01E01E02E03
    scene                     S01E01-E02-E03
    range                     S01E01-03
    prefixed_range            S01E01-E03
    ========================  =======================
    """
    base = episode_format.season_episode_pattern
    episode_part = episode_format.episode_pattern
    prefixed_part = episode_format.episode_separator + episode_part

    match style:
        case MultiEpisodeStyle.DUPLICATE:
            return _format_episodes(base, episode_format.separator + base, episodes)
        case MultiEpisodeStyle.REPEAT:
            return _format_episodes(base, prefixed_part, episodes)
        case MultiEpisodeStyle.SCENE:
            return _format_episodes(base, "-" + prefixed_part, episodes)
        case MultiEpisodeStyle.RANGE:
            return _format_episodes(base, "-" + episode_part, _first_and_last(episodes))
        case MultiEpisodeStyle.PREFIXED_RANGE:
            return _format_episodes(base, "-" + prefixed_part, _first_and_last(episodes))
        case _:
            return _format_episodes(base, "-" + episode_part, episodes)


def _first_and_last(episodes: Sequence[Episode]) -> list[Episode]:
    if len(episodes) > 1:
        return [episodes[0], episodes[-1]]
    return list(episodes)


def substitute_numbering_tokens(
    pattern: str,
    episode_formats: Sequence[EpisodeFormat],
    episodes: Sequence[Episode],
    style: MultiEpisodeStyle,
) -> tuple[str, dict[str, str]]:
    """
    Swap each distinct sub-pattern for a ``{Season EpisodeN}`` token.

    Returns:
        (rewritten pattern, token text -> rendered numbering)
    """
    values: dict[str, str] = {}
    seen: set[str] = set()
    index = 1

    for episode_format in episode_formats:
        if episode_format.season_episode_pattern in seen:
            continue
        seen.add(episode_format.season_episode_pattern)

        token = SEASON_EPISODE_TOKEN_FORMAT.format(index=index)
        index += 1
        pattern = pattern.replace(episode_format.season_episode_pattern, token)
        values[token] = render_season_episode(episode_format, episodes, style)

    return pattern, values
