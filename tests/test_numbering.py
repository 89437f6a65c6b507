"""Tests for season/episode numbering."""

from __future__ import annotations

import pytest

from reelr.config import MultiEpisodeStyle
from reelr.models import Episode
from reelr.naming.numbering import (
    EpisodeFormat,
    format_number,
    has_episode_identifier,
    parse_episode_formats,
    render_season_episode,
    replace_number_tokens,
    substitute_numbering_tokens,
)
from tests.conftest import make_episodes

STANDARD = "{Series Title} - S{season:00}E{episode:00} - {Episode Title}"


class TestParseEpisodeFormats:
    """Tests for finding numbering sub-patterns."""

    def test_standard_pattern(self) -> None:
        [fmt] = parse_episode_formats(STANDARD)
        assert fmt == EpisodeFormat(
            separator=" - ",
            episode_separator="E",
            episode_pattern="{episode:00}",
            season_episode_pattern="S{season:00}E{episode:00}",
        )

    def test_scene_style_pattern(self) -> None:
        [fmt] = parse_episode_formats("{Series.Title}.S{season:00}E{episode:00}.{Episode.Title}")
        assert fmt.separator == "."

    def test_x_separator(self) -> None:
        [fmt] = parse_episode_formats("{Series Title} - {season:0}x{episode:00} - {Episode Title}")
        assert fmt.episode_separator == "x"
        assert fmt.season_episode_pattern == "{season:0}x{episode:00}"

    def test_leading_separator_used_when_nothing_follows(self) -> None:
        [fmt] = parse_episode_formats("{Series Title} - S{season:00}E{episode:00}")
        assert fmt.separator == " - "

    def test_no_separator(self) -> None:
        [fmt] = parse_episode_formats("S{season:00}E{episode:00}")
        assert fmt.separator == ""

    def test_no_numbering(self) -> None:
        assert parse_episode_formats("{Series Title} - {Release Date}") == ()


class TestHasEpisodeIdentifier:
    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            (STANDARD, True),
            ("{Series Title} - {Release Date}", True),
            ("{Series Title} - {Release.Date}", True),
            ("{Series Title} - {Episode Title}", False),
            ("Season {season:00}", False),
        ],
    )
    def test_detection(self, pattern: str, expected: bool) -> None:
        assert has_episode_identifier(pattern) is expected


class TestNumberFormatting:
    def test_format_number(self) -> None:
        assert format_number(3, "00") == "03"
        assert format_number(3, "000") == "003"
        assert format_number(123, "00") == "123"
        assert format_number(3, None) == "3"

    def test_replace_number_tokens(self) -> None:
        episode = Episode(title="x", season_number=2, episode_number=7)
        assert replace_number_tokens("S{season:00}E{episode:00}", episode) == "S02E07"
        assert replace_number_tokens("{season}x{episode:000}", episode) == "2x007"


THREE_EPISODES = make_episodes("One", "Two", "Three")


class TestRenderSeasonEpisode:
    """Tests for the multi-episode styles."""

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (MultiEpisodeStyle.EXTEND, "S01E01-02-03"),
            (MultiEpisodeStyle.DUPLICATE, "S01E01 - S01E02 - S01E03"),
            (MultiEpisodeStyle.REPEAT, "S01E01E02E03"),
            (MultiEpisodeStyle.SCENE, "S01E01-E02-E03"),
            (MultiEpisodeStyle.RANGE, "S01E01-03"),
            (MultiEpisodeStyle.PREFIXED_RANGE, "S01E01-E03"),
        ],
    )
    def test_styles(self, style: MultiEpisodeStyle, expected: str) -> None:
        [fmt] = parse_episode_formats(STANDARD)
        assert render_season_episode(fmt, THREE_EPISODES, style) == expected

    @pytest.mark.parametrize("style", list(MultiEpisodeStyle))
    def test_single_episode_same_for_every_style(self, style: MultiEpisodeStyle) -> None:
        [fmt] = parse_episode_formats(STANDARD)
        assert render_season_episode(fmt, THREE_EPISODES[:1], style) == "S01E01"

    def test_x_style_repeat(self) -> None:
        [fmt] = parse_episode_formats("{Series Title} - {season:0}x{episode:00} - {Episode Title}")
        result = render_season_episode(fmt, THREE_EPISODES[:2], MultiEpisodeStyle.REPEAT)
        assert result == "1x01x02"


class TestSubstituteNumberingTokens:
    def test_sub_pattern_replaced(self) -> None:
        formats = parse_episode_formats(STANDARD)
        pattern, values = substitute_numbering_tokens(
            STANDARD, formats, THREE_EPISODES[:2], MultiEpisodeStyle.EXTEND
        )
        assert pattern == "{Series Title} - {Season Episode1} - {Episode Title}"
        assert values == {"{Season Episode1}": "S01E01-02"}

    def test_repeated_sub_pattern_shares_a_token(self) -> None:
        text = "S{season:00}E{episode:00} - {Series Title} - S{season:00}E{episode:00}"
        formats = parse_episode_formats(text)
        pattern, values = substitute_numbering_tokens(
            text, formats, THREE_EPISODES[:1], MultiEpisodeStyle.EXTEND
        )
        assert pattern == "{Season Episode1} - {Series Title} - {Season Episode1}"
        assert list(values) == ["{Season Episode1}"]

    def test_distinct_sub_patterns_numbered(self) -> None:
        text = "S{season:00}E{episode:00} - {season}x{episode:00}"
        formats = parse_episode_formats(text)
        pattern, values = substitute_numbering_tokens(
            text, formats, THREE_EPISODES[:1], MultiEpisodeStyle.EXTEND
        )
        assert pattern == "{Season Episode1} - {Season Episode2}"
        assert values == {"{Season Episode1}": "S01E01", "{Season Episode2}": "1x01"}
