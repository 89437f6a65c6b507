"""
Language code normalization for the media info language tokens.

Media info reports ISO 639-2 codes (either the bibliographic "B" or the
terminology "T" variant) and sometimes already two-letter codes. Tokens
render upper-case ISO 639-1 codes, e.g. ``[EN+DE]``.
"""

from __future__ import annotations

from collections.abc import Iterable

# ISO 639-2/B -> ISO 639-2/T for the twenty languages where they differ
# See: https://www.loc.gov/standards/iso639-2/ISO-639-2_utf-8.txt
ISO639_B_TO_T: dict[str, str] = {
    "alb": "sqi",
    "arm": "hye",
    "baq": "eus",
    "bur": "mya",
    "chi": "zho",
    "cze": "ces",
    "dut": "nld",
    "fre": "fra",
    "geo": "kat",
    "ger": "deu",
    "gre": "ell",
    "ice": "isl",
    "mac": "mkd",
    "mao": "mri",
    "may": "msa",
    "per": "fas",
    "rum": "ron",
    "slo": "slk",
    "tib": "bod",
    "wel": "cym",
}

# ISO 639-2/T -> ISO 639-1
ISO639_T_TO_1: dict[str, str] = {
    "afr": "af",
    "amh": "am",
    "ara": "ar",
    "aze": "az",
    "bel": "be",
    "ben": "bn",
    "bod": "bo",
    "bos": "bs",
    "bul": "bg",
    "cat": "ca",
    "ces": "cs",
    "cym": "cy",
    "dan": "da",
    "deu": "de",
    "ell": "el",
    "eng": "en",
    "epo": "eo",
    "est": "et",
    "eus": "eu",
    "fas": "fa",
    "fin": "fi",
    "fra": "fr",
    "gle": "ga",
    "glg": "gl",
    "guj": "gu",
    "heb": "he",
    "hin": "hi",
    "hrv": "hr",
    "hun": "hu",
    "hye": "hy",
    "ind": "id",
    "isl": "is",
    "ita": "it",
    "jpn": "ja",
    "kan": "kn",
    "kat": "ka",
    "kaz": "kk",
    "khm": "km",
    "kor": "ko",
    "lao": "lo",
    "lat": "la",
    "lav": "lv",
    "lit": "lt",
    "ltz": "lb",
    "mal": "ml",
    "mar": "mr",
    "mkd": "mk",
    "mlt": "mt",
    "mon": "mn",
    "mri": "mi",
    "msa": "ms",
    "mya": "my",
    "nep": "ne",
    "nld": "nl",
    "nno": "nn",
    "nob": "nb",
    "nor": "no",
    "pan": "pa",
    "pol": "pl",
    "por": "pt",
    "pus": "ps",
    "ron": "ro",
    "rus": "ru",
    "sin": "si",
    "slk": "sk",
    "slv": "sl",
    "som": "so",
    "spa": "es",
    "sqi": "sq",
    "srp": "sr",
    "swa": "sw",
    "swe": "sv",
    "tam": "ta",
    "tel": "te",
    "tgl": "tl",
    "tha": "th",
    "tur": "tr",
    "ukr": "uk",
    "urd": "ur",
    "uzb": "uz",
    "vie": "vi",
    "yid": "yi",
    "zho": "zh",
    "zul": "zu",
}

_ISO639_1_CODES: frozenset[str] = frozenset(ISO639_T_TO_1.values())

UNDETERMINED = "und"
WILDCARD_MARKER = "--"


def to_two_letter_code(code: str) -> str:
    """
    Normalize one language code to upper-case ISO 639-1.

    Unknown codes are returned as given (trimmed).

    Examples:
        >>> to_two_letter_code("ger")
        'DE'
        >>> to_two_letter_code("eng")
        'EN'
        >>> to_two_letter_code("en")
        'EN'
        >>> to_two_letter_code("xyz")
        'xyz'
    """
    code = code.strip()
    normalized = code.lower()
    normalized = ISO639_B_TO_T.get(normalized, normalized)

    if normalized in ISO639_T_TO_1:
        return ISO639_T_TO_1[normalized].upper()
    if normalized in _ISO639_1_CODES:
        return normalized.upper()
    return code


def normalize_languages(languages: Iterable[str]) -> list[str]:
    """Drop blanks and "und", normalize, de-duplicate in first-seen order."""
    codes = [
        to_two_letter_code(item)
        for item in languages
        if item and item.strip() and item.strip() != UNDETERMINED
    ]
    return list(dict.fromkeys(codes))


def _filter_languages(codes: list[str], language_filter: str) -> list[str]:
    if language_filter.startswith("-"):
        excluded = {part.upper() for part in language_filter.split("-") if part}
        return [c for c in codes if c.upper() not in excluded]

    by_upper = {c.upper(): c for c in codes}
    wanted = [part.upper() for part in language_filter.split("+") if part]
    return [by_upper[w] for w in dict.fromkeys(wanted) if w in by_upper]


def format_languages_token(
    languages: Iterable[str],
    language_filter: str | None,
    *,
    skip_english_only: bool,
    quoted: bool = True,
) -> str:
    """
    Render a language list token.

    Args:
        languages: Raw codes from media info
        language_filter: Token custom format. ``-EN-DE`` excludes codes,
            ``EN+DE`` keeps only those (in filter order); a trailing ``+``
            appends ``--`` when some detected languages were left out
        skip_english_only: Render nothing when the result is just EN
        quoted: Wrap non-empty output in brackets

    Returns:
        e.g. ``[EN+DE]`` or ""
    """
    codes = normalize_languages(languages)
    filtered = codes

    if language_filter and language_filter.strip():
        filtered = _filter_languages(codes, language_filter)
        if language_filter.endswith("+") and len(filtered) != len(codes):
            filtered = [*filtered, WILDCARD_MARKER]

    if skip_english_only and filtered == ["EN"]:
        return ""

    response = "+".join(filtered)
    if quoted and response.strip():
        return f"[{response}]"
    return response
