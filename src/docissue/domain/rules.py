"""Issuance rules: minimum GPA a student needs for each document type."""

from __future__ import annotations

from dataclasses import dataclass

from docissue.domain.errors import RuleViolationError
from docissue.domain.models import Student


@dataclass(frozen=True)
class GpaRule:
    """Reject students whose GPA is below *minimum*.

    With ``inclusive=False`` the GPA must be strictly greater than
    *minimum*, so a rule of ``GpaRule(..., minimum=0.0, inclusive=False)``
    rejects a GPA of exactly zero.
    """

    request_type: str
    minimum: float
    message: str
    inclusive: bool = True

    def allows(self, gpa: float) -> bool:
        if self.inclusive:
            return gpa >= self.minimum
        return gpa > self.minimum

    def validate(self, student: Student) -> None:
        """Raise :class:`RuleViolationError` unless *student* satisfies the rule."""
        if not self.allows(student.gpa):
            raise RuleViolationError(
                self.message,
                request_type=self.request_type,
                minimum=self.minimum,
                gpa=student.gpa,
            )

    def describe(self) -> str:
        op = ">=" if self.inclusive else ">"
        return f"gpa {op} {self.minimum:g}"
