"""Shared pytest fixtures for flatkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from flatkit.config.settings import FlatkitSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config leaking in from env.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so walk-up discovery never finds a stray flatkit.toml.
    """
    for var in ("FLATKIT_CONFIG", "FLATKIT_QUIET", "FLATKIT_FLATTEN__DEFAULT_DEPTH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FlatkitSettings:
    """Default settings resolved from an empty directory."""
    monkeypatch.delenv("FLATKIT_CONFIG", raising=False)
    return FlatkitSettings.from_cli(start=tmp_path)
