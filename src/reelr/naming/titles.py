"""
Title helpers and the episode title composer.

The static helpers (title_the, slug_title, clean_title, title_year,
title_without_year) need no render context and are safe to call directly.
"""

from __future__ import annotations

from collections.abc import Sequence

from reelr.models import Episode
from reelr.naming.constants import (
    ELLIPSIS,
    ELLIPSIS_MARKER,
    EPISODE_TITLE_TRIM_CHARACTERS,
    MULTI_PART_CLEANUP_REGEX,
    SCENIFY_REMOVE_CHARS,
    SCENIFY_REPLACE_CHARS,
    TITLE_PREFIX_REGEX,
    YEAR_REGEX,
)
from reelr.naming.sanitize import byte_length, truncate_utf8

# The marker renders as "..." so it costs three bytes of budget
ELLIPSIS_LENGTH = byte_length(ELLIPSIS)


def slug_title(title: str) -> str:
    """
    Compact form: spaces removed, punctuation scrubbed.

    Examples:
        >>> slug_title("My Family Pies")
        'MyFamilyPies'
    """
    title = title.replace(" ", "")
    title = SCENIFY_REPLACE_CHARS.sub(" ", title)
    return SCENIFY_REMOVE_CHARS.sub("", title)


def clean_title(title: str) -> str:
    """
    Title with "&" spelled out and scene-unfriendly punctuation removed.

    Examples:
        >>> clean_title("Law & Order: SVU")
        'Law and Order SVU'
    """
    title = title.replace("&", "and")
    title = SCENIFY_REPLACE_CHARS.sub(" ", title)
    return SCENIFY_REMOVE_CHARS.sub("", title)


def title_the(title: str) -> str:
    """
    Move a leading article to the end.

    Examples:
        >>> title_the("The Office (US)")
        'Office, The (US)'
        >>> title_the("A Team")
        'Team, A'
    """
    return TITLE_PREFIX_REGEX.sub(r"\2, \1\3", title)


def title_year(title: str, year: int | None) -> str:
    """Append "(year)" unless the year is unknown or the title already ends in one."""
    if not year:
        return title
    if YEAR_REGEX.search(title):
        return title
    return f"{title} ({year})"


def title_without_year(title: str) -> str:
    return YEAR_REGEX.sub("", title)


def title_first_character(title: str) -> str:
    """First character of the "The"-moved title, upper-cased ("The Wire" -> "W")."""
    moved = title_the(title)
    return moved[:1].upper()


def cleanup_multi_part_title(title: str) -> str:
    """Drop "(1)", "Part 2", "Pt. 3" style suffixes."""
    return MULTI_PART_CLEANUP_REGEX.sub("", title).strip()


def _dedupe(items: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(items))


def episode_titles(episodes: Sequence[Episode]) -> list[str]:
    """
    Titles to compose for a file, in episode order.

    A single episode keeps its title as-is (minus trailing " .?"). For
    multi-episode files the multi-part suffixes are collapsed and duplicates
    removed, unless that would blank every title.
    """
    trimmed = [e.title.rstrip(EPISODE_TITLE_TRIM_CHARACTERS) for e in episodes]
    if len(trimmed) == 1:
        return trimmed

    titles = _dedupe([cleanup_multi_part_title(t) for t in trimmed])
    if all(not t.strip() for t in titles):
        titles = _dedupe(trimmed)
    return titles


def compose_episode_title(titles: Sequence[str], separator: str, max_length: int) -> str:
    """
    Join episode titles under a byte ceiling.

    Strategies, first that fits wins:

    1. every title joined by `` <separator> ``
    2. first and last title around an ellipsis (two or more titles)
    3. first title followed by an ellipsis (two or more titles)
    4. the single title whole
    5. the first title cut down to leave room for an ellipsis

    The ellipsis is emitted as the ``{ellipsis}`` marker and expanded after
    sanitization.

    Args:
        titles: Titles in episode order (non-empty)
        separator: "+" for titles, "and" for clean titles
        max_length: Byte budget for the result

    Returns:
        Composed title text
    """
    joiner = f" {separator.strip()} "
    joined = joiner.join(titles)
    if byte_length(joined) <= max_length:
        return joined

    first = titles[0]
    first_length = byte_length(first)

    if len(titles) >= 2:
        last = titles[-1]
        if first_length + byte_length(last) + ELLIPSIS_LENGTH <= max_length:
            return f"{first.rstrip(' .')}{ELLIPSIS_MARKER}{last}"

        if first_length + ELLIPSIS_LENGTH <= max_length:
            return f"{first.rstrip(' .')}{ELLIPSIS_MARKER}"

    if len(titles) == 1 and first_length <= max_length:
        return first

    if max_length < ELLIPSIS_LENGTH:
        return ""

    truncated = truncate_utf8(first, max_length - ELLIPSIS_LENGTH).rstrip(" .")
    return f"{truncated}{ELLIPSIS_MARKER}"
