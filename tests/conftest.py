"""Shared pytest fixtures for nextday tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from nextday.config.models import CalendarBounds
from nextday.domain.types import Range


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def bounds() -> CalendarBounds:
    """Default day/month/year bounds."""
    return CalendarBounds()


@pytest.fixture
def default_ranges() -> tuple[Range, Range, Range]:
    """Default (day, month, year) ranges, unpacked for the validator."""
    b = CalendarBounds()
    return b.day, b.month, b.year


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no NEXTDAY_* env vars.

    Also restores root logger state, since the CLI reconfigures logging.
    """
    for name in list(os.environ):
        if name.startswith("NEXTDAY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("nextday")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)
