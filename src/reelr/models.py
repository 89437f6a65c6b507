"""Data models for reelr.

These are read-only snapshots handed to the naming engine by the catalog.
The engine never writes to them; the one exception is ``EpisodeFile.media_info``,
which an injected media info updater may fill in before tokens are resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Gender(Enum):
    """Performer gender tag used by the performer tokens."""

    FEMALE = "female"
    MALE = "male"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Actor:
    """A performer credited on an episode."""

    name: str
    gender: Gender = Gender.UNKNOWN


@dataclass(frozen=True)
class Series:
    """
    Series snapshot.

    ``year`` of 0 means unknown. ``path`` is the root folder on disk; when it
    is empty the engine will not ask for a media info refresh.
    """

    title: str
    year: int = 0
    network: str | None = None
    tpdb_id: int = 0
    path: str | None = None


@dataclass(frozen=True)
class Episode:
    """Episode snapshot."""

    title: str
    season_number: int
    episode_number: int
    air_date: str | None = None  # ISO "YYYY-MM-DD"
    absolute_episode_number: int | None = None
    actors: tuple[Actor, ...] = ()


@dataclass(frozen=True)
class Quality:
    """A quality tier (e.g. HDTV-720p)."""

    id: int
    name: str


@dataclass(frozen=True)
class Revision:
    """Release revision: version > 1 is a proper/repack, real > 0 is a REAL release."""

    version: int = 1
    real: int = 0


@dataclass(frozen=True)
class QualityModel:
    """Quality of an episode file."""

    quality: Quality
    revision: Revision = field(default_factory=Revision)


@dataclass
class MediaInfo:
    """
    Media info extracted from an episode file.

    ``schema_revision`` records which extractor version produced the data.
    Tokens that need newer facts trigger a refresh when it is too old.
    """

    video_codec: str = ""
    video_bit_depth: int = 0
    video_dynamic_range: str = ""  # "HDR" or ""
    video_dynamic_range_type: str = ""  # e.g. "DV HDR10", "HLG"
    audio_codec: str = ""
    audio_channels: float = 0.0
    audio_languages: list[str] = field(default_factory=list)
    subtitles: list[str] = field(default_factory=list)
    schema_revision: int = 0


@dataclass
class EpisodeFile:
    """
    Episode file snapshot.

    ``id`` is 0 until the file has been imported into the catalog.
    """

    quality: QualityModel
    relative_path: str = ""
    path: str = ""
    id: int = 0
    scene_name: str | None = None
    release_group: str | None = None
    media_info: MediaInfo | None = None


@dataclass(frozen=True)
class CustomFormat:
    """A custom format matched by the external scoring service."""

    name: str
    include_when_renaming: bool = False

    def __str__(self) -> str:
        return self.name
