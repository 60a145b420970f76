"""Tests for DocSettings — CLI flags, env vars and TOML."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click
import pytest

from docissue.config.settings import DocSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DocSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.templates.directory is None
        assert settings.template_dir is None
        assert settings.clock.date is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DocSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "docissue.toml").write_text(
            '[templates]\ndirectory = "tpl"\n\n[clock]\ndate = 2026-02-01\n'
        )
        settings = DocSettings.from_cli(project_root=tmp_path)
        assert settings.clock.date == date(2026, 2, 1)
        assert settings.template_dir == tmp_path / "tpl"
        assert settings.config_path == (tmp_path / "docissue.toml").resolve()

    def test_absolute_template_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        (tmp_path / "docissue.toml").write_text(f'[templates]\ndirectory = "{target.as_posix()}"\n')
        settings = DocSettings.from_cli(project_root=tmp_path / "sub")
        assert settings.template_dir == target

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "docissue.toml").write_text('[templates]\ndirectory = "tpl"\n')
        nested = tmp_path / "deep" / "er"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = DocSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.template_dir == tmp_path.resolve() / "tpl"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[clock]\ndate = 2026-12-31\n")
        settings = DocSettings.from_cli(config_path=str(custom))
        assert settings.clock.date == date(2026, 12, 31)
        assert settings.project_root == custom.parent

    def test_explicit_config_missing(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            DocSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "docissue.toml").write_text("[clock\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DocSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "docissue.toml").write_text("[clock]\ndate = 2026-02-01\n")
        monkeypatch.setenv("DOCISSUE_CLOCK__DATE", "2026-03-01")
        settings = DocSettings.from_cli(project_root=tmp_path)
        assert settings.clock.date == date(2026, 3, 1)

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCISSUE_CLOCK__DATE", "2026-03-01")
        settings = DocSettings.from_cli(project_root=tmp_path, clock={"date": "2026-04-01"})
        assert settings.clock.date == date(2026, 4, 1)

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = DocSettings.from_cli(
            project_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
