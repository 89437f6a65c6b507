"""Tests for title helpers and the episode title composer."""

from __future__ import annotations

import pytest

from reelr.naming.constants import ELLIPSIS_MARKER
from reelr.naming.titles import (
    clean_title,
    cleanup_multi_part_title,
    compose_episode_title,
    episode_titles,
    slug_title,
    title_first_character,
    title_the,
    title_without_year,
    title_year,
)
from tests.conftest import make_episodes


class TestTitleHelpers:
    """Tests for the static title helpers."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("The Office (US)", "Office, The (US)"),
            ("The Wire", "Wire, The"),
            ("A Team", "Team, A"),
            ("An Idiot Abroad", "Idiot Abroad, An"),
            ("Theory of Everything", "Theory of Everything"),
        ],
    )
    def test_title_the(self, title: str, expected: str) -> None:
        assert title_the(title) == expected

    def test_slug_title(self) -> None:
        assert slug_title("My Family Pies") == "MyFamilyPies"

    def test_clean_title(self) -> None:
        assert clean_title("Law & Order: SVU") == "Law and Order SVU"

    def test_clean_title_drops_brackets(self) -> None:
        assert clean_title("Show (2019)") == "Show 2019"

    def test_title_year_appends(self) -> None:
        assert title_year("My Show", 2019) == "My Show (2019)"

    def test_title_year_unknown_year(self) -> None:
        assert title_year("My Show", 0) == "My Show"
        assert title_year("My Show", None) == "My Show"

    def test_title_year_already_present(self) -> None:
        assert title_year("My Show (2010)", 2019) == "My Show (2010)"

    def test_title_without_year(self) -> None:
        assert title_without_year("My Show (2010)") == "My Show "
        assert title_without_year("My Show") == "My Show"

    def test_first_character_skips_article(self) -> None:
        assert title_first_character("The Wire") == "W"
        assert title_first_character("the wire") == "W"
        assert title_first_character("") == ""


class TestEpisodeTitles:
    """Tests for collecting titles of the episodes in a file."""

    def test_single_episode_keeps_part_suffix(self) -> None:
        assert episode_titles(make_episodes("Finale (1)")) == ["Finale (1)"]

    def test_single_episode_trims_trailing_punctuation(self) -> None:
        assert episode_titles(make_episodes("Who?")) == ["Who"]

    def test_multi_part_collapsed(self) -> None:
        assert episode_titles(make_episodes("Finale (1)", "Finale (2)")) == ["Finale"]
        assert episode_titles(make_episodes("Big Day Part 1", "Big Day Part 2")) == ["Big Day"]

    def test_distinct_titles_kept_in_order(self) -> None:
        assert episode_titles(make_episodes("Alpha", "Beta")) == ["Alpha", "Beta"]

    def test_falls_back_when_cleanup_blanks_everything(self) -> None:
        assert episode_titles(make_episodes("Part 1", "Part 2")) == ["Part 1", "Part 2"]

    @pytest.mark.parametrize(
        ("title", "expected"),
        [("Finale (1)", "Finale"), ("Finale: Part 2", "Finale"), ("Finale Pt. 3", "Finale")],
    )
    def test_cleanup_multi_part_title(self, title: str, expected: str) -> None:
        assert cleanup_multi_part_title(title) == expected


THREE = ["Alpha", "Beta", "Gamma"]


class TestComposeEpisodeTitle:
    """Tests for fitting titles into a byte budget."""

    def test_all_titles_joined(self) -> None:
        # "Alpha + Beta + Gamma" is 20 bytes
        assert compose_episode_title(THREE, "+", 20) == "Alpha + Beta + Gamma"

    def test_first_and_last(self) -> None:
        assert compose_episode_title(THREE, "+", 19) == f"Alpha{ELLIPSIS_MARKER}Gamma"
        assert compose_episode_title(THREE, "+", 13) == f"Alpha{ELLIPSIS_MARKER}Gamma"

    def test_first_only(self) -> None:
        assert compose_episode_title(THREE, "+", 12) == f"Alpha{ELLIPSIS_MARKER}"
        assert compose_episode_title(THREE, "+", 8) == f"Alpha{ELLIPSIS_MARKER}"

    def test_truncated_first(self) -> None:
        assert compose_episode_title(THREE, "+", 7) == f"Alph{ELLIPSIS_MARKER}"
        assert compose_episode_title(THREE, "+", 3) == ELLIPSIS_MARKER

    def test_budget_too_small_for_ellipsis(self) -> None:
        assert compose_episode_title(THREE, "+", 2) == ""
        assert compose_episode_title(THREE, "+", -10) == ""

    def test_two_titles(self) -> None:
        # Joined and first+last+ellipsis are both 12 bytes
        assert compose_episode_title(["Alpha", "Beta"], "+", 12) == "Alpha + Beta"
        assert compose_episode_title(["Alpha", "Beta"], "+", 11) == f"Alpha{ELLIPSIS_MARKER}"
        assert compose_episode_title(["Alpha", "Beta"], "+", 7) == f"Alph{ELLIPSIS_MARKER}"

    def test_single_title(self) -> None:
        assert compose_episode_title(["Alpha"], "+", 5) == "Alpha"
        assert compose_episode_title(["Alpha"], "+", 4) == f"A{ELLIPSIS_MARKER}"

    def test_clean_separator(self) -> None:
        assert compose_episode_title(["Alpha", "Beta"], "and", 100) == "Alpha and Beta"

    def test_truncation_trims_trailing_space_and_dot(self) -> None:
        assert compose_episode_title(["Hello. World"], "+", 9) == f"Hello{ELLIPSIS_MARKER}"

    def test_truncation_counts_bytes(self) -> None:
        # "Ü" takes two bytes, so a three byte cut keeps "Ün"
        assert compose_episode_title(["Ünïcödé"], "+", 6) == f"Ün{ELLIPSIS_MARKER}"
