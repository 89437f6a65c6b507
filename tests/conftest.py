"""Shared pytest fixtures and helpers for reelr tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import replace
from unittest import mock

import pytest

from reelr.config import NamingConfig
from reelr.env_settings import clear_env_settings_cache
from reelr.models import Episode, EpisodeFile, Quality, QualityModel, Series
from reelr.naming import FileNameBuilder, PatternCache, StaticNamingConfigService

SCENARIO_PATTERN = "{Series Title} - S{season:00}E{episode:00} - {Episode Title} {Quality Title}"


@pytest.fixture(autouse=True)
def _isolated_env() -> Iterator[None]:
    """Keep REELR_* variables from the developer's shell out of tests."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith("REELR_")}
    with mock.patch.dict(os.environ, cleaned, clear=True):
        clear_env_settings_cache()
        yield
    clear_env_settings_cache()


@pytest.fixture
def series() -> Series:
    return Series(
        title="My Family Pies", year=2019, network="Pie TV", tpdb_id=4242, path="/tv/pies"
    )


@pytest.fixture
def episode() -> Episode:
    return Episode(title="Pilot", season_number=1, episode_number=3, air_date="2019-05-04")


@pytest.fixture
def episode_file() -> EpisodeFile:
    return EpisodeFile(
        id=7,
        quality=QualityModel(Quality(id=4, name="HDTV-720p")),
        relative_path="Season 01/My.Family.Pies.S01E03.720p.HDTV.x264-GRP.mkv",
        path="/tv/pies/Season 01/My.Family.Pies.S01E03.720p.HDTV.x264-GRP.mkv",
    )


@pytest.fixture
def naming_config() -> NamingConfig:
    return NamingConfig(standard_episode_format=SCENARIO_PATTERN)


@pytest.fixture
def builder(naming_config: NamingConfig) -> FileNameBuilder:
    return FileNameBuilder(
        naming_config_service=StaticNamingConfigService(naming_config),
        pattern_cache=PatternCache(),
        max_file_name_length=255,
        max_file_path_length=4096,
    )


def with_pattern(config: NamingConfig, pattern: str, **changes: object) -> NamingConfig:
    """Copy of config with a different standard episode format."""
    return replace(config, standard_episode_format=pattern, **changes)  # type: ignore[arg-type]


def make_episodes(*titles: str, season: int = 1, first: int = 1) -> list[Episode]:
    """Consecutive episodes with the given titles."""
    return [
        Episode(title=title, season_number=season, episode_number=first + i)
        for i, title in enumerate(titles)
    ]
