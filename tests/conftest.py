"""Shared pytest fixtures and test helpers for rangectl tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from rangectl.config.settings import RangeSettings
from rangectl.domain.dates import parse_date
from rangectl.domain.rules import parse_rule
from rangectl.domain.state import RangeState


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RangeSettings:
    """Default settings with no config file and no env overrides."""
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)
    return RangeSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``. Tests that write
    a ``rangectl.toml`` can request ``tmp_path`` too; it is the same
    directory.
    """
    monkeypatch.delenv("RANGECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def d(text: str) -> date:
    """Shorthand for ``parse_date``."""
    return parse_date(text)


def make_state(rule: str, start: str | None = None, end: str | None = None) -> RangeState:
    """Build a RangeState from strings."""
    return RangeState(
        rule=parse_rule(rule),
        start=parse_date(start) if start else None,
        end=parse_date(end) if end else None,
    )
