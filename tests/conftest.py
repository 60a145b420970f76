"""Shared pytest fixtures for docissue tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from docissue.config.settings import DocSettings
from docissue.domain.clock import FixedClock
from docissue.domain.models import Student
from docissue.services.telemetry import _current_span, disable_telemetry

ISSUE_DATE = date(2026, 2, 1)


@pytest.fixture(autouse=True)
def _reset_global_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    monkeypatch.delenv("DOCISSUE_CONFIG", raising=False)
    monkeypatch.delenv("DOCISSUE_CLOCK__DATE", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("docissue")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to 2026-02-01 (day 32)."""
    return FixedClock(ISSUE_DATE)


@pytest.fixture
def student() -> Student:
    return Student(id="UCC-0042", name="Alejandro Parra", program="Ing. Software", gpa=4.2)


@pytest.fixture
def settings(tmp_path: Path) -> DocSettings:
    """Settings rooted at an empty temp directory (no docissue.toml)."""
    return DocSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so no docissue.toml is found."""
    monkeypatch.chdir(tmp_path)
