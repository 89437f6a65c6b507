"""
Filename sanitization.

The pipeline is order sensitive:

1. Colon handling (policy from NamingConfig)
2. Illegal character substitution (or deletion)
3. Collapse runs of the same separator character
4. Trim leading space/dot and trailing space/dot/separator
5. Rewrite reserved device names ("con.mkv" -> "con_mkv")

Token values only go through steps 1-2 plus a light trim; whole path
segments go through all five.
"""

from __future__ import annotations

from reelr.config import ColonReplacementFormat, NamingConfig
from reelr.naming.constants import (
    FILE_NAME_CLEANUP_REGEX,
    ILLEGAL_CHARACTER_MAP,
    LEADING_TRIM_CHARACTERS,
    RESERVED_DEVICE_NAMES_REGEX,
    TRAILING_TRIM_CHARACTERS,
)

_COLON_REPLACEMENTS: dict[ColonReplacementFormat, str] = {
    ColonReplacementFormat.DELETE: "",
    ColonReplacementFormat.DASH: "-",
    ColonReplacementFormat.SPACE_DASH: " -",
    ColonReplacementFormat.SPACE_DASH_SPACE: " - ",
}


def replace_colons(text: str, naming_config: NamingConfig) -> str:
    """Apply the configured colon policy."""
    if not naming_config.replace_illegal_characters:
        return text.replace(":", "")

    if naming_config.colon_replacement_format == ColonReplacementFormat.SMART:
        # "Title: Subtitle" reads better as "Title - Subtitle"
        text = text.replace(": ", " - ")
        return text.replace(":", "-")

    return text.replace(":", _COLON_REPLACEMENTS[naming_config.colon_replacement_format])


def replace_illegal_characters(text: str, naming_config: NamingConfig) -> str:
    """Replace (or delete) characters no filesystem we target accepts."""
    replace = naming_config.replace_illegal_characters
    for bad, good in ILLEGAL_CHARACTER_MAP.items():
        text = text.replace(bad, good if replace else "")
    return text


def substitute_characters(text: str, naming_config: NamingConfig) -> str:
    """Steps 1-2 of the pipeline. These are the only steps that can grow text."""
    return replace_illegal_characters(replace_colons(text, naming_config), naming_config)


def collapse_separators(text: str) -> str:
    """Collapse "a..b" to "a.b", "a  b" to "a b" and so on."""
    return FILE_NAME_CLEANUP_REGEX.sub(r"\1", text)


def trim_edges(text: str) -> str:
    return text.lstrip(LEADING_TRIM_CHARACTERS).rstrip(TRAILING_TRIM_CHARACTERS)


def replace_reserved_device_names(text: str) -> str:
    """
    Rewrite names Windows reserves for devices.

    Examples:
        >>> replace_reserved_device_names("con.")
        'con_'
        >>> replace_reserved_device_names("Con.Air.2160p")
        'Con_Air.2160p'
        >>> replace_reserved_device_names("Conan")
        'Conan'
    """
    return RESERVED_DEVICE_NAMES_REGEX.sub(lambda m: m.group("name") + "_", text)


def sanitize_file_name(text: str, naming_config: NamingConfig | None = None) -> str:
    """
    Run the full five step pipeline over a path segment.

    The result is stable: sanitizing it again returns it unchanged.
    """
    naming_config = naming_config or NamingConfig.default()

    text = substitute_characters(text, naming_config)
    text = collapse_separators(text)
    text = trim_edges(text)
    return replace_reserved_device_names(text)


def clean_file_name(name: str, naming_config: NamingConfig | None = None) -> str:
    """
    Clean a single value for use inside a file name.

    Applies colon and illegal character handling, then strips leading
    space/dot and trailing space. Used on every resolved token value.

    Examples:
        >>> clean_file_name("Part: One")
        'Part - One'
        >>> clean_file_name("What? Why*")
        'What! Why-'
    """
    naming_config = naming_config or NamingConfig.default()
    return substitute_characters(name, naming_config).lstrip(LEADING_TRIM_CHARACTERS).rstrip(" ")


def clean_folder_name(name: str) -> str:
    """Collapse repeated separators and trim space/dot from both ends."""
    return collapse_separators(name).strip(" .")


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Cut text to at most max_bytes of UTF-8 without splitting a character."""
    if max_bytes <= 0:
        return ""
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))
