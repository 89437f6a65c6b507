"""
Token matching and rendering.

A template segment is scanned with ``TITLE_REGEX``; each hit is either an
escaped brace (``{{`` / ``}}``) or a placeholder which is decomposed into a
``TokenMatch`` and handed to a resolver lookup.

Rendering rules for a resolved value:
- surrounding whitespace is trimmed
- an all-lowercase token name forces lowercase output, all-uppercase forces
  uppercase, anything else keeps the resolver's casing
- a non-space separator in the token name replaces spaces in the value
- the value is cleaned (colon policy, illegal characters)
- prefix/suffix decoration is only emitted around a non-empty value
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from reelr.naming.constants import TITLE_REGEX, TOKEN_KEY_STRIP_REGEX
from reelr.naming.sanitize import clean_file_name

if TYPE_CHECKING:
    from reelr.config import NamingConfig


def token_key(name: str) -> str:
    """
    Canonical lookup key for a token name.

    Examples:
        >>> token_key("{Series Title}")
        'seriestitle'
        >>> token_key("series.title")
        'seriestitle'
    """
    return TOKEN_KEY_STRIP_REGEX.sub("", name).lower()


@dataclass(frozen=True)
class TokenMatch:
    """One placeholder occurrence in a template segment."""

    token: str
    prefix: str = ""
    separator: str = ""
    custom_format: str | None = None
    suffix: str = ""
    raw: str = ""

    @property
    def key(self) -> str:
        return token_key(self.token)

    @property
    def decorated(self) -> bool:
        return bool(self.prefix or self.suffix)

    def default_value(self, default: str) -> str:
        """Fallback text, suppressed when the token carries decoration."""
        return "" if self.decorated else default

    @classmethod
    def from_regex(cls, match: re.Match[str]) -> TokenMatch:
        return cls(
            token=match.group("token"),
            prefix=match.group("prefix") or "",
            separator=match.group("separator") or "",
            custom_format=(match.group("custom_format") or "").strip() or None,
            suffix=match.group("suffix") or "",
            raw=match.group(0),
        )


@dataclass(frozen=True)
class Resolved:
    """A token resolved to a value (possibly empty)."""

    value: str


class _Deferred:
    """Leave the placeholder untouched for a later pass."""

    _instance: _Deferred | None = None

    def __new__(cls) -> _Deferred:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DEFERRED"


DEFERRED: Final = _Deferred()

Resolution = Resolved | _Deferred


class TokenLookup(Protocol):
    """Anything that can resolve a TokenMatch (see resolvers.TokenRegistry)."""

    def resolve(self, match: TokenMatch) -> Resolution: ...


def find_tokens(pattern: str) -> list[TokenMatch]:
    """All placeholder occurrences in order, escaped braces skipped."""
    return [
        TokenMatch.from_regex(m) for m in TITLE_REGEX.finditer(pattern) if not m.group("escaped")
    ]


def apply_token_casing(token: str, value: str) -> str:
    letters = [c for c in token if c.isalpha()]
    if all(c.islower() for c in letters):
        return value.lower()
    if all(c.isupper() for c in letters):
        return value.upper()
    return value


def render_value(match: TokenMatch, value: str, naming_config: NamingConfig) -> str:
    """Apply the rendering rules to one resolved value."""
    value = apply_token_casing(match.token, value.strip())

    if match.separator.strip():
        value = value.replace(" ", match.separator)

    value = clean_file_name(value, naming_config)

    if value.strip():
        value = f"{match.prefix}{value}{match.suffix}"

    return value


def replace_tokens(
    pattern: str,
    lookup: TokenLookup,
    naming_config: NamingConfig,
    *,
    escape: bool = False,
) -> str:
    """
    Substitute every placeholder in ``pattern``.

    Args:
        pattern: Template segment
        lookup: Resolver registry for this render
        naming_config: Settings for value cleaning
        escape: Keep ``{{``/``}}`` as-is and double braces in replacement
            text so a later pass can tell synthesized braces apart from
            template ones

    Returns:
        The rendered segment
    """

    def _replace(m: re.Match[str]) -> str:
        escaped = m.group("escaped")
        if escaped:
            return escaped if escape else escaped[0]

        token_match = TokenMatch.from_regex(m)
        resolution = lookup.resolve(token_match)
        if isinstance(resolution, _Deferred):
            return token_match.raw

        text = render_value(token_match, resolution.value, naming_config)

        if escape:
            text = text.replace("{", "{{").replace("}", "}}")
        return text

    return TITLE_REGEX.sub(_replace, pattern)
