"""Tests for media info labels and schema revision checks."""

from __future__ import annotations

import logging

import pytest

from reelr.models import EpisodeFile, MediaInfo, Quality, QualityModel
from reelr.naming.mediainfo import (
    format_audio_channels,
    format_audio_codec,
    format_video_bit_depth,
    format_video_codec,
    needs_media_info_refresh,
    required_schema_revision,
    scene_or_file_name,
)


def make_file(media_info: MediaInfo | None = None, **kwargs: object) -> EpisodeFile:
    return EpisodeFile(
        quality=QualityModel(Quality(id=1, name="SDTV")),
        relative_path="Season 01/Show.S01E01.mkv",
        media_info=media_info,
        **kwargs,  # type: ignore[arg-type]
    )


class TestVideoCodec:
    """Tests for the video codec label."""

    @pytest.mark.parametrize(
        ("codec", "scene", "expected"),
        [
            ("AVC", "Show.S01E01.720p.HDTV.x264-GRP", "x264"),
            ("AVC", "Show.S01E01.720p.WEB.H.264-GRP", "h264"),
            ("HEVC", "Show.S01E01.2160p.x265-GRP", "x265"),
            ("HEVC", "", "h265"),
            ("XviD", "", "XviD"),
            ("mpeg2video", "", "MPEG2"),
            ("VC-1", "", "VC1"),
            ("ProRes", "", "ProRes"),
        ],
    )
    def test_labels(self, codec: str, scene: str, expected: str) -> None:
        assert format_video_codec(MediaInfo(video_codec=codec), scene) == expected

    def test_missing_codec(self) -> None:
        assert format_video_codec(MediaInfo()) == ""


class TestAudio:
    """Tests for the audio labels."""

    @pytest.mark.parametrize(
        ("codec", "expected"),
        [("E-AC-3", "EAC3"), ("ac3", "AC3"), ("TrueHD", "TrueHD"), ("Weird", "Weird")],
    )
    def test_codec(self, codec: str, expected: str) -> None:
        assert format_audio_codec(MediaInfo(audio_codec=codec)) == expected

    @pytest.mark.parametrize(("channels", "expected"), [(5.1, "5.1"), (2, "2.0"), (7.1, "7.1")])
    def test_channels(self, channels: float, expected: str) -> None:
        assert format_audio_channels(MediaInfo(audio_channels=channels)) == expected

    def test_unknown_channels(self) -> None:
        assert format_audio_channels(MediaInfo()) == ""


class TestVideoBitDepth:
    def test_reported_depth(self) -> None:
        assert format_video_bit_depth(MediaInfo(video_bit_depth=10)) == "10"

    def test_defaults_to_eight(self) -> None:
        assert format_video_bit_depth(MediaInfo()) == "8"


class TestSceneOrFileName:
    def test_prefers_scene_name(self) -> None:
        assert scene_or_file_name(make_file(scene_name="Scene.Name")) == "Scene.Name"

    def test_falls_back_to_stored_name(self) -> None:
        assert scene_or_file_name(make_file(scene_name="  ")) == "Season 01/Show.S01E01.mkv"


class TestSchemaRevision:
    """Tests for deciding when media info is too old."""

    def test_plain_pattern_needs_nothing(self) -> None:
        assert required_schema_revision("{Series Title} {MediaInfo VideoCodec}") == 0

    def test_dynamic_range(self) -> None:
        assert required_schema_revision("{MediaInfo VideoDynamicRange}") == 5

    def test_dynamic_range_type_wins(self) -> None:
        pattern = "{MediaInfo VideoDynamicRange} {[MediaInfo.VideoDynamicRangeType]}"
        assert required_schema_revision(pattern) == 8

    def test_refresh_needed_without_media_info(self) -> None:
        assert needs_media_info_refresh("{MediaInfo VideoDynamicRange}", make_file())

    def test_refresh_needed_for_old_revision(self, caplog: pytest.LogCaptureFixture) -> None:
        episode_file = make_file(MediaInfo(schema_revision=5))
        with caplog.at_level(logging.DEBUG, logger="reelr.naming.mediainfo"):
            assert needs_media_info_refresh("{MediaInfo VideoDynamicRangeType}", episode_file)
        assert "pattern needs 8" in caplog.text

    def test_current_revision_is_enough(self) -> None:
        episode_file = make_file(MediaInfo(schema_revision=8))
        assert not needs_media_info_refresh("{MediaInfo VideoDynamicRangeType}", episode_file)

    def test_no_refresh_for_patterns_without_requirements(self) -> None:
        assert not needs_media_info_refresh("{Series Title}", make_file())
