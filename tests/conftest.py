"""Shared pytest fixtures and test helpers for timegap tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from timegap.config.settings import TimeGapSettings
from timegap.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no TIMEGAP_* overrides.

    Keeps a developer's own ``timegap.toml`` or environment out of the
    settings the CLI and services see.
    """
    for name in list(os.environ):
        if name.startswith("TIMEGAP_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_process_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    tg_level = logging.getLogger("timegap").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("timegap").setLevel(tg_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> TimeGapSettings:
    """Default settings with no config file."""
    return TimeGapSettings.from_cli(start=tmp_path)


def write_config(directory: Path, text: str) -> Path:
    """Write a ``timegap.toml`` into *directory* and return its path."""
    path = directory / "timegap.toml"
    path.write_text(text, encoding="utf-8")
    return path
