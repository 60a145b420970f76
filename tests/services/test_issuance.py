"""Tests for IssuanceService — the ServiceResult façade."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docissue.config.settings import DocSettings
from docissue.domain.clock import FixedClock
from docissue.domain.types import RequestType
from docissue.services.issuance import IssuanceService


@pytest.fixture
def svc(settings: DocSettings, clock: FixedClock) -> IssuanceService:
    return IssuanceService(settings, clock=clock)


def _issue(svc: IssuanceService, request_type: RequestType | str, gpa: float = 4.2, **kw: str):
    fields = {"student_id": "UCC-0042", "name": "Alejandro Parra", "program": "Ing. Software"}
    fields.update(kw)
    return svc.issue(request_type, gpa=gpa, **fields)


class TestIssue:
    def test_transcript_success(self, svc: IssuanceService) -> None:
        result = _issue(svc, RequestType.TRANSCRIPT)
        assert result.ok
        assert result.op == "issue_document"
        assert result.data["type"] == "transcript"
        assert result.data["label"] == "TRANSCRIPT"
        assert result.data["stamp"] == "TRN-0042-32"
        assert result.data["issued_on"] == "2026-02-01"
        assert "GPA: 4.20" in result.data["body"]
        assert result.data["student"] == {
            "id": "UCC-0042",
            "name": "Alejandro Parra",
            "program": "Ing. Software",
            "gpa": 4.2,
        }

    def test_string_type(self, svc: IssuanceService) -> None:
        result = _issue(svc, "Enrollment")
        assert result.ok
        assert result.data["stamp"] == "ENR-0042-32"

    def test_invalid_student(self, svc: IssuanceService) -> None:
        result = _issue(svc, RequestType.TRANSCRIPT, gpa=5.01, name="  ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_STUDENT"
        fields = {e["field"] for e in result.error.detail["errors"]}
        assert fields == {"name", "gpa"}
        json.loads(result.model_dump_json())

    def test_unsupported_type(self, svc: IssuanceService) -> None:
        result = _issue(svc, "diploma")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_TYPE"
        assert result.error.detail == {"request_type": "diploma"}

    def test_rule_violation(self, svc: IssuanceService) -> None:
        result = _issue(svc, RequestType.ENROLLMENT, gpa=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RULE_VIOLATION"
        assert result.error.detail["minimum_gpa"] == 0.0
        assert result.data == {}

    def test_template_error(self, tmp_path: Path, clock: FixedClock) -> None:
        overrides = tmp_path / "tpl"
        overrides.mkdir()
        (overrides / "transcript.txt.j2").write_text("{{ nope }}", encoding="utf-8")
        settings = DocSettings.from_cli(
            project_root=tmp_path, templates={"directory": Path("tpl")}
        )
        result = _issue(IssuanceService(settings, clock=clock), RequestType.TRANSCRIPT)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "TEMPLATE_ERROR"

    @pytest.mark.parametrize(
        ("content", "reason"),
        [(b"\n", "empty body"), (b"\xff\xfe bad", "cannot read template")],
    )
    def test_unusable_override_is_template_error(
        self, tmp_path: Path, clock: FixedClock, content: bytes, reason: str
    ) -> None:
        overrides = tmp_path / "tpl"
        overrides.mkdir()
        (overrides / "transcript.txt.j2").write_bytes(content)
        settings = DocSettings.from_cli(
            project_root=tmp_path, templates={"directory": Path("tpl")}
        )
        result = _issue(IssuanceService(settings, clock=clock), RequestType.TRANSCRIPT)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "TEMPLATE_ERROR"
        assert reason in result.error.detail["reason"]
        json.loads(result.model_dump_json())


class TestClockFromSettings:
    def test_settings_date(self, tmp_path: Path) -> None:
        settings = DocSettings.from_cli(project_root=tmp_path, clock={"date": "2026-12-31"})
        result = _issue(IssuanceService(settings), RequestType.ENROLLMENT)
        assert result.data["stamp"] == "ENR-0042-365"
        assert result.data["issued_on"] == "2026-12-31"

    def test_explicit_clock_wins(self, tmp_path: Path, clock: FixedClock) -> None:
        settings = DocSettings.from_cli(project_root=tmp_path, clock={"date": "2026-12-31"})
        result = _issue(IssuanceService(settings, clock=clock), RequestType.ENROLLMENT)
        assert result.data["stamp"] == "ENR-0042-32"


class TestDemoAndTypes:
    def test_demo(self, svc: IssuanceService) -> None:
        result = svc.demo()
        assert result.ok
        assert result.data["label"] == "TRANSCRIPT"
        assert "ID: UCC-0042" in result.data["body"]
        assert "Estudiante: Alejandro Parra" in result.data["body"]
        assert "GPA: 4.20" in result.data["body"]
        assert result.data["stamp"] == "TRN-0042-32"

    def test_list_types(self, svc: IssuanceService) -> None:
        result = svc.list_types()
        assert result.ok
        assert result.op == "list_types"
        assert result.data["count"] == 2
        by_type = {item["type"]: item for item in result.data["items"]}
        assert by_type["enrollment"]["prefix"] == "ENR"
        assert by_type["enrollment"]["rule"] == "gpa > 0"
        assert by_type["transcript"]["prefix"] == "TRN"
        assert by_type["transcript"]["rule"] == "gpa >= 1"
