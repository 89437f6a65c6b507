"""Tests for console message helpers."""

from __future__ import annotations

import pytest
from rich.console import Console

from reelr import console as console_module
from reelr.console import REELR_THEME, print_error, print_info, print_success


@pytest.fixture
def recording_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    recorder = Console(theme=REELR_THEME, record=True, width=120, force_terminal=False)
    monkeypatch.setattr(console_module, "console", recorder)
    return recorder


class TestMessages:
    def test_success(self, recording_console: Console) -> None:
        print_success("naming.yaml is valid")
        assert "✓ naming.yaml is valid" in recording_console.export_text()

    def test_error(self, recording_console: Console) -> None:
        print_error("Naming config not found")
        assert "✗ Naming config not found" in recording_console.export_text()

    def test_markup_escaped(self, recording_console: Console) -> None:
        """Patterns contain square brackets that must not be read as markup."""
        print_info("Pattern: [{Quality Full}]")
        assert "[{Quality Full}]" in recording_console.export_text()

    def test_theme_styles(self) -> None:
        for name in ("info", "success", "warning", "error", "path"):
            assert name in REELR_THEME.styles
