"""
Sample data for previewing naming formats.

Used by ``reelr preview`` (and handy in tests) to show what a format
produces without touching a real library.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from reelr.config import NamingConfig
from reelr.models import (
    Actor,
    CustomFormat,
    Episode,
    EpisodeFile,
    Gender,
    MediaInfo,
    Quality,
    QualityModel,
    Revision,
    Series,
)
from reelr.naming.builder import FileNameBuilder

SAMPLE_EXTENSION = ".mkv"


@dataclass(frozen=True)
class SamplePreview:
    """Rendered names for the sample library."""

    single_episode: str
    multi_episode: str
    series_folder: str
    full_path: str


def sample_series() -> Series:
    return Series(
        title="The Series Title's!",
        year=2010,
        network="Sample Network",
        tpdb_id=12345,
        path=posixpath.join("/media", "shows", "The Series Title's! (2010)"),
    )


def sample_episodes() -> list[Episode]:
    actors = (Actor("Jane Doe", Gender.FEMALE), Actor("John Roe", Gender.MALE))
    return [
        Episode(
            title="Episode Title (1)",
            season_number=1,
            episode_number=1,
            absolute_episode_number=1,
            air_date="2013-10-30",
            actors=actors,
        ),
        Episode(
            title="Episode Title (2)",
            season_number=1,
            episode_number=2,
            absolute_episode_number=2,
            air_date="2013-10-30",
            actors=actors,
        ),
    ]


def sample_episode_file() -> EpisodeFile:
    return EpisodeFile(
        id=1,
        quality=QualityModel(Quality(id=5, name="WEBDL-1080p"), Revision(version=2)),
        relative_path="Season 01/The.Series.Title's!.S01E01.1080p.WEB-DL.mkv",
        scene_name="The.Series.Title's!.S01E01.1080p.WEB-DL.DDP5.1.H.264-RlsGrp",
        release_group="RlsGrp",
        media_info=MediaInfo(
            video_codec="AVC",
            video_bit_depth=10,
            video_dynamic_range="HDR",
            video_dynamic_range_type="HDR10",
            audio_codec="EAC3",
            audio_channels=5.1,
            audio_languages=["eng", "ger"],
            subtitles=["eng", "fre"],
            schema_revision=8,
        ),
    )


def sample_custom_formats() -> list[CustomFormat]:
    return [
        CustomFormat("Surround Sound", include_when_renaming=True),
        CustomFormat("x264", include_when_renaming=True),
        CustomFormat("Internal Scoring Only"),
    ]


def build_preview(builder: FileNameBuilder, naming_config: NamingConfig) -> SamplePreview:
    """Render every sample name with ``naming_config``."""
    series = sample_series()
    episodes = sample_episodes()
    episode_file = sample_episode_file()
    formats = sample_custom_formats()

    return SamplePreview(
        single_episode=builder.build_file_name(
            episodes[:1], series, episode_file, SAMPLE_EXTENSION, naming_config, formats
        ),
        multi_episode=builder.build_file_name(
            episodes, series, episode_file, SAMPLE_EXTENSION, naming_config, formats
        ),
        series_folder=builder.get_series_folder(series, naming_config),
        full_path=builder.build_file_path(
            episodes[:1], series, episode_file, SAMPLE_EXTENSION, naming_config, formats
        ),
    )
