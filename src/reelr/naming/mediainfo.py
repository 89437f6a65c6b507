"""
Media info formatting for the ``{MediaInfo ...}`` tokens.

Turns raw extractor facts (codec ids, channel counts, HDR descriptors) into
the short labels used in release names, e.g. "x265", "EAC3", "5.1".
"""

from __future__ import annotations

import logging

from reelr.models import EpisodeFile, MediaInfo
from reelr.naming.constants import MIN_MEDIA_INFO_SCHEMA_REVISIONS
from reelr.naming.tokens import find_tokens

logger = logging.getLogger(__name__)


# =============================================================================
# Codec Labels
# =============================================================================

_VIDEO_CODECS: dict[str, str] = {
    "xvid": "XviD",
    "divx": "DivX",
    "vc1": "VC1",
    "vc-1": "VC1",
    "av1": "AV1",
    "vp9": "VP9",
    "mpeg2": "MPEG2",
    "mpeg-2": "MPEG2",
    "mpeg2video": "MPEG2",
}

_AUDIO_CODECS: dict[str, str] = {
    "ac3": "AC3",
    "ac-3": "AC3",
    "eac3": "EAC3",
    "e-ac-3": "EAC3",
    "dts": "DTS",
    "aac": "AAC",
    "truehd": "TrueHD",
    "flac": "FLAC",
    "opus": "Opus",
    "mp3": "MP3",
    "pcm": "PCM",
    "vorbis": "Vorbis",
}

DEFAULT_VIDEO_BIT_DEPTH = 8


def scene_or_file_name(episode_file: EpisodeFile) -> str:
    """Scene release name if known, else the stored file name."""
    if episode_file.scene_name and episode_file.scene_name.strip():
        return episode_file.scene_name
    return episode_file.relative_path or episode_file.path


def format_video_codec(media_info: MediaInfo, scene_name: str = "") -> str:
    """
    Short video codec label.

    AVC/HEVC report the encoder family the release name advertises
    ("x264" vs "h264") when the scene name tells us.
    """
    codec = (media_info.video_codec or "").strip()
    normalized = codec.lower()
    scene = scene_name.lower()

    match normalized:
        case "avc" | "h264" | "h.264" | "x264":
            return "x264" if "x264" in scene else "h264"
        case "hevc" | "h265" | "h.265" | "x265":
            return "x265" if "x265" in scene else "h265"
        case _:
            return _VIDEO_CODECS.get(normalized, codec)


def format_audio_codec(media_info: MediaInfo) -> str:
    codec = (media_info.audio_codec or "").strip()
    return _AUDIO_CODECS.get(codec.lower(), codec)


def format_audio_channels(media_info: MediaInfo) -> str:
    """Channel count with one decimal ("5.1", "2.0"), empty when unknown."""
    channels = media_info.audio_channels or 0.0
    if channels <= 0:
        return ""
    return f"{channels:.1f}"


def format_video_bit_depth(media_info: MediaInfo) -> str:
    depth = media_info.video_bit_depth or 0
    return str(depth if depth > 0 else DEFAULT_VIDEO_BIT_DEPTH)


def format_video_dynamic_range(media_info: MediaInfo) -> str:
    return (media_info.video_dynamic_range or "").strip()


def format_video_dynamic_range_type(media_info: MediaInfo) -> str:
    return (media_info.video_dynamic_range_type or "").strip()


# =============================================================================
# Schema Revision Checks
# =============================================================================


def required_schema_revision(pattern: str) -> int:
    """Highest media info schema revision any token in ``pattern`` needs (0 if none)."""
    revisions = [MIN_MEDIA_INFO_SCHEMA_REVISIONS.get(m.key, 0) for m in find_tokens(pattern)]
    return max(revisions, default=0)


def needs_media_info_refresh(pattern: str, episode_file: EpisodeFile) -> bool:
    """True when cached media info is older than the pattern requires."""
    current = episode_file.media_info.schema_revision if episode_file.media_info else 0
    required = required_schema_revision(pattern)
    if required > current:
        logger.debug(
            "Media info for %s is revision %d, pattern needs %d",
            episode_file.relative_path or episode_file.path,
            current,
            required,
        )
        return True
    return False
