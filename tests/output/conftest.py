"""Fixtures for output tests."""

import pytest


@pytest.fixture
def _color_term(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make Rich detect a color-capable terminal."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
