"""Tests for token matching and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from reelr.config import NamingConfig
from reelr.naming.tokens import (
    DEFERRED,
    Resolution,
    Resolved,
    TokenMatch,
    apply_token_casing,
    find_tokens,
    replace_tokens,
    token_key,
)


@dataclass
class DictLookup:
    """Resolves tokens by key from a plain dict; unknown keys render empty."""

    values: dict[str, Resolution] = field(default_factory=dict)
    seen: list[TokenMatch] = field(default_factory=list)

    def resolve(self, match: TokenMatch) -> Resolution:
        self.seen.append(match)
        return self.values.get(match.key, Resolved(""))


def lookup(**values: str) -> DictLookup:
    return DictLookup({key: Resolved(value) for key, value in values.items()})


class TestTokenKey:
    """Tests for token name canonicalization."""

    @pytest.mark.parametrize(
        "name",
        ["Series Title", "series.title", "SERIES_TITLE", "{Series-Title}", "seriestitle"],
    )
    def test_variants_share_a_key(self, name: str) -> None:
        assert token_key(name) == "seriestitle"


class TestFindTokens:
    """Tests for placeholder decomposition."""

    def test_plain_token(self) -> None:
        [match] = find_tokens("{Series Title}")
        assert match.token == "Series Title"
        assert match.separator == " "
        assert match.prefix == ""
        assert match.suffix == ""
        assert match.custom_format is None
        assert match.raw == "{Series Title}"

    def test_decoration(self) -> None:
        [match] = find_tokens("{[Quality Full]}")
        assert match.prefix == "["
        assert match.token == "Quality Full"
        assert match.suffix == "]"
        assert match.decorated

    def test_dash_prefix(self) -> None:
        [match] = find_tokens("{-Release Group}")
        assert match.prefix == "-"
        assert match.key == "releasegroup"

    def test_custom_format(self) -> None:
        [match] = find_tokens("{MediaInfo AudioLanguages:EN+DE}")
        assert match.key == "mediainfoaudiolanguages"
        assert match.custom_format == "EN+DE"

    def test_number_format(self) -> None:
        [match] = find_tokens("{season:00}")
        assert match.key == "season"
        assert match.custom_format == "00"

    def test_escaped_braces_skipped(self) -> None:
        assert find_tokens("{{Series Title}}") == []

    def test_order_preserved(self) -> None:
        keys = [m.key for m in find_tokens("{Series Title} - {Episode Title} {Quality Full}")]
        assert keys == ["seriestitle", "episodetitle", "qualityfull"]

    def test_malformed_braces_ignored(self) -> None:
        assert find_tokens("Show {Title") == []
        assert find_tokens("Show } Title {}") == []


class TestCasing:
    """Tests for token-name driven casing."""

    def test_lowercase_name_forces_lowercase(self) -> None:
        assert apply_token_casing("series title", "My Show") == "my show"

    def test_uppercase_name_forces_uppercase(self) -> None:
        assert apply_token_casing("SERIES TITLE", "My Show") == "MY SHOW"

    def test_mixed_case_keeps_value(self) -> None:
        assert apply_token_casing("Series Title", "My Show") == "My Show"
        assert apply_token_casing("series Title", "My Show") == "My Show"


class TestReplaceTokens:
    """Tests for single-pass token substitution."""

    def test_values_substituted(self) -> None:
        result = replace_tokens(
            "{Series Title} - {Quality Title}",
            lookup(seriestitle="My Show", qualitytitle="HDTV-720p"),
            NamingConfig(),
        )
        assert result == "My Show - HDTV-720p"

    def test_casing_follows_token_name(self) -> None:
        values = lookup(seriestitle="My Show")
        assert replace_tokens("{series title}", values, NamingConfig()) == "my show"
        assert replace_tokens("{SERIES TITLE}", values, NamingConfig()) == "MY SHOW"

    def test_separator_replaces_spaces(self) -> None:
        values = lookup(seriestitle="My Family Pies")
        assert replace_tokens("{Series.Title}", values, NamingConfig()) == "My.Family.Pies"
        assert replace_tokens("{Series_Title}", values, NamingConfig()) == "My_Family_Pies"

    def test_decoration_dropped_for_empty_value(self) -> None:
        values = lookup(releasegroup="")
        assert replace_tokens("Show{-Release Group}", values, NamingConfig()) == "Show"

    def test_decoration_kept_for_value(self) -> None:
        values = lookup(releasegroup="GRP", qualityfull="HDTV-720p")
        result = replace_tokens("{[Quality Full]}{-Release Group}", values, NamingConfig())
        assert result == "[HDTV-720p]-GRP"

    def test_unknown_token_renders_empty(self) -> None:
        assert replace_tokens("a{Bogus Token}b", DictLookup(), NamingConfig()) == "ab"

    def test_value_is_cleaned(self) -> None:
        values = lookup(episodetitle="Part: One?")
        assert replace_tokens("{Episode Title}", values, NamingConfig()) == "Part - One!"

    def test_value_whitespace_trimmed(self) -> None:
        values = lookup(seriestitle="  padded  ")
        assert replace_tokens("[{Series Title}]", values, NamingConfig()) == "[padded]"

    def test_deferred_keeps_placeholder(self) -> None:
        values = DictLookup({"episodetitle": DEFERRED, "seriestitle": Resolved("Show")})
        result = replace_tokens("{Series Title} - {Episode Title}", values, NamingConfig())
        assert result == "Show - {Episode Title}"

    def test_malformed_braces_left_literal(self) -> None:
        values = lookup(seriestitle="Show")
        assert replace_tokens("{Series Title} {Title", values, NamingConfig()) == "Show {Title"


class TestEscaping:
    """Tests for doubled-brace escapes."""

    def test_escapes_unwrapped_without_escape_mode(self) -> None:
        values = lookup(seriestitle="Show")
        result = replace_tokens("{{Series Title}} {Series Title}", values, NamingConfig())
        assert result == "{Series Title} Show"

    def test_escapes_kept_in_escape_mode(self) -> None:
        values = lookup(seriestitle="Show")
        result = replace_tokens(
            "{{Series Title}} {Series Title}", values, NamingConfig(), escape=True
        )
        assert result == "{{Series Title}} Show"

    def test_braces_in_values_doubled_in_escape_mode(self) -> None:
        values = lookup(seriestitle="{weird}")
        result = replace_tokens("{Series Title}", values, NamingConfig(), escape=True)
        assert result == "{{weird}}"

    def test_two_passes_round_trip(self) -> None:
        """An escaped pass followed by a plain pass leaves literal braces once."""
        first = replace_tokens(
            "{{literal}} {Series Title}", lookup(seriestitle="{weird}"), NamingConfig(), escape=True
        )
        second = replace_tokens(first, DictLookup(), NamingConfig())
        assert second == "{literal} {weird}"

    def test_escaped_text_never_resolved(self) -> None:
        values = lookup(seriestitle="Show")
        replace_tokens("{{Series Title}}", values, NamingConfig())
        assert values.seen == []
