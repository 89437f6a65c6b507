"""
Constants used across naming modules.

Contains patterns, maps, and configuration values used for:
- Token matching in user templates
- Season/episode sub-pattern extraction
- Filename sanitization
- Title helpers (slug, clean title, "The" handling)
"""

from __future__ import annotations

import re

# =============================================================================
# Token Matching
# =============================================================================

# Either an escaped brace ({{ or }}) or a placeholder:
#   {<prefix><token>[<separator><word>][:<custom_format>]<suffix>}
# Prefix/suffix are decoration that only renders when the token is non-empty.
TITLE_REGEX = re.compile(
    r"(?P<escaped>\{\{|\}\})"
    r"|\{(?P<prefix>[- ._\[(]*)"
    r"(?P<token>(?:[a-z0-9]+)(?:(?P<separator>[- ._]+)(?:[a-z0-9]+))?)"
    r"(?::(?P<custom_format>[a-z0-9+-]+(?<!-)))?"
    r"(?P<suffix>[- ._)\]]*)\}",
    re.IGNORECASE,
)

# Characters ignored when comparing token names ("Series.Title" == "series title")
TOKEN_KEY_STRIP_REGEX = re.compile(r"\s|_|\W")

# =============================================================================
# Season / Episode Numbering
# =============================================================================

EPISODE_REGEX = re.compile(r"(?P<episode>\{episode(?::0+)?\})", re.IGNORECASE)

SEASON_REGEX = re.compile(r"(?P<season>\{season(?::0+)?\})", re.IGNORECASE)

# "S{season:00}E{episode:00}" plus the separators around it. The leading
# separator only counts after a closing brace, the trailing one only before
# an opening brace.
SEASON_EPISODE_PATTERN_REGEX = re.compile(
    r"(?P<leading_separator>(?<=\})[- ._]+?)?"
    r"(?P<season_episode>s?\{season(?::0+)?\}"
    r"(?P<episode_separator>[- ._]?[ex])"
    r"(?P<episode>\{episode(?::0+)?\}))"
    r"(?P<trailing_separator>[- ._]+?(?=\{))?",
    re.IGNORECASE,
)

AIR_DATE_REGEX = re.compile(r"\{Release(\s|\W|_)Date\}", re.IGNORECASE)

# Token name prefixes for the synthesized numbering tokens
SEASON_EPISODE_TOKEN_FORMAT = "{{Season Episode{index}}}"

# =============================================================================
# Episode Titles
# =============================================================================

# Removes "(1)", "Part 2", "Pt. 3" from the end of multi-part episode titles
MULTI_PART_CLEANUP_REGEX = re.compile(
    r"(?:\:?\s?(?:\(\d+\)|(Part|Pt\.?)\s?\d+))$", re.IGNORECASE
)

EPISODE_TITLE_TRIM_CHARACTERS = " .?"

# Substituted for "..." only after sanitization so the dots survive cleanup
ELLIPSIS_MARKER = "{ellipsis}"
ELLIPSIS = "..."
ELLIPSIS_MARKER_REGEX = re.compile(re.escape(ELLIPSIS_MARKER), re.IGNORECASE)

EPISODE_TITLE_SEPARATOR = "+"
EPISODE_CLEAN_TITLE_SEPARATOR = "and"

# =============================================================================
# Title Helpers
# =============================================================================

SCENIFY_REMOVE_CHARS = re.compile(
    r"(?<=\s)(,|<|>|\/|\\|;|:|'|\"|\||`|~|!|\?|@|\$|%|\^|\*|-|_|=){1}(?=\s)"
    r"|('|:|\?|,)(?=(?:(?:s|m)\s)|\s|$)"
    r"|(\(|\)|\[|\]|\{|\})",
    re.IGNORECASE,
)
SCENIFY_REPLACE_CHARS = re.compile(r"[\/]", re.IGNORECASE)

TITLE_PREFIX_REGEX = re.compile(r"^(The|An|A) (.*?)((?: *\([^)]+\))*)$", re.IGNORECASE)

YEAR_REGEX = re.compile(r"\(\d{4}\)$", re.IGNORECASE)

# =============================================================================
# Filename Sanitization
# =============================================================================

# Runs of the same separator character collapse to one
FILE_NAME_CLEANUP_REGEX = re.compile(r"([- ._])\1+")

LEADING_TRIM_CHARACTERS = " ."
TRAILING_TRIM_CHARACTERS = " .-_"

# Illegal character -> replacement when replace_illegal_characters is on.
# With replacement off every one of these is deleted.
ILLEGAL_CHARACTER_MAP: dict[str, str] = {
    "\\": "+",
    "/": "+",
    "<": "",
    ">": "",
    "?": "!",
    "*": "-",
    "|": "",
    '"': "",
}

# Windows device names; "con.x" becomes "con_x". Underscores already after
# the dot are absorbed so the rewrite cannot create a "__" run.
RESERVED_DEVICE_NAMES_REGEX = re.compile(
    r"^(?P<name>aux|com[1-9]|con|lpt[1-9]|nul|prn)\._*", re.IGNORECASE
)

# =============================================================================
# Tokens With Fallbacks
# =============================================================================

DEFAULT_RELEASE_GROUP = "Reelr"
UNKNOWN_AIR_DATE = "Unknown"

# Media info tokens whose facts only exist from a given extractor revision on
MIN_MEDIA_INFO_SCHEMA_REVISIONS: dict[str, int] = {
    "mediainfovideodynamicrange": 5,
    "mediainfovideodynamicrangetype": 8,
}
