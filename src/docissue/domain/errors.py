"""Issuance error taxonomy.

Invalid student data surfaces as pydantic's ``ValidationError`` at model
construction. Everything raised after that derives from :class:`DocIssueError`.
"""

from __future__ import annotations

from typing import Any


class DocIssueError(Exception):
    """Base class for issuance failures."""

    code = "ISSUANCE_ERROR"

    def detail(self) -> dict[str, Any]:
        return {}


class UnsupportedRequestTypeError(DocIssueError):
    """No document bundle exists for the requested type."""

    code = "UNSUPPORTED_TYPE"

    def __init__(self, request_type: object) -> None:
        self.request_type = request_type
        super().__init__(f"Unsupported request type: {request_type!r}")

    def detail(self) -> dict[str, Any]:
        return {"request_type": str(self.request_type)}


class RuleViolationError(DocIssueError):
    """The student does not satisfy the bundle's issuance rule."""

    code = "RULE_VIOLATION"

    def __init__(self, message: str, *, request_type: str, minimum: float, gpa: float) -> None:
        self.request_type = request_type
        self.minimum = minimum
        self.gpa = gpa
        super().__init__(message)

    def detail(self) -> dict[str, Any]:
        return {"request_type": self.request_type, "minimum_gpa": self.minimum, "gpa": self.gpa}


class TemplateRenderError(DocIssueError):
    """A document template could not be loaded or rendered."""

    code = "TEMPLATE_ERROR"

    def __init__(self, template_name: str, reason: str) -> None:
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Cannot render template {template_name!r}: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"template": self.template_name, "reason": self.reason}
