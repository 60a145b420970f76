"""Tests for GpaRule."""

from __future__ import annotations

import pytest

from docissue.domain.errors import DocIssueError, RuleViolationError
from docissue.domain.models import Student
from docissue.domain.rules import GpaRule


def _student(gpa: float) -> Student:
    return Student(id="UCC-0042", name="Alejandro Parra", program="Ing. Software", gpa=gpa)


EXCLUSIVE = GpaRule(request_type="enrollment", minimum=0.0, inclusive=False, message="too low")
INCLUSIVE = GpaRule(request_type="transcript", minimum=1.0, message="too low")


class TestGpaRule:
    def test_exclusive_rejects_threshold(self) -> None:
        with pytest.raises(RuleViolationError):
            EXCLUSIVE.validate(_student(0.0))

    def test_exclusive_accepts_just_above(self) -> None:
        EXCLUSIVE.validate(_student(0.01))

    def test_inclusive_rejects_below(self) -> None:
        with pytest.raises(RuleViolationError):
            INCLUSIVE.validate(_student(0.99))

    def test_inclusive_accepts_threshold(self) -> None:
        INCLUSIVE.validate(_student(1.0))

    def test_error_carries_detail(self) -> None:
        with pytest.raises(RuleViolationError) as exc_info:
            INCLUSIVE.validate(_student(0.5))
        err = exc_info.value
        assert isinstance(err, DocIssueError)
        assert err.code == "RULE_VIOLATION"
        assert str(err) == "too low"
        assert err.detail() == {"request_type": "transcript", "minimum_gpa": 1.0, "gpa": 0.5}

    def test_describe(self) -> None:
        assert EXCLUSIVE.describe() == "gpa > 0"
        assert INCLUSIVE.describe() == "gpa >= 1"
