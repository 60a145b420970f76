"""IssuanceService — document issuance behind the ServiceResult contract.

This is the one place where the issuance error taxonomy becomes
``ServiceError`` codes:

* ``INVALID_STUDENT`` — the student record failed validation.
* ``UNSUPPORTED_TYPE`` — no bundle for the requested type.
* ``RULE_VIOLATION`` — the student fails the bundle's GPA rule.
* ``TEMPLATE_ERROR`` — an override template could not be rendered.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from docissue.domain.errors import DocIssueError
from docissue.domain.models import Document, Student
from docissue.domain.types import RequestType
from docissue.services.base import BaseService
from docissue.services.documents import DocumentService
from docissue.services.factories import BUNDLES, select_factory
from docissue.services.result import ServiceResult
from docissue.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

# Sample request printed by `docissue demo`.
DEMO_STUDENT_ID = "UCC-0042"
DEMO_NAME = "Alejandro Parra"
DEMO_PROGRAM = "Ing. Software"
DEMO_GPA = 4.2


def _validation_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into JSON-safe ``{field, message}`` pairs."""
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors(include_url=False)
    ]


def _document_data(document: Document, student: Student) -> dict[str, Any]:
    return {
        "type": document.request_type.value,
        "label": document.request_type.label,
        "body": document.body,
        "stamp": document.stamp,
        "issued_on": document.issued_on.isoformat(),
        "student": student.model_dump(),
    }


class IssuanceService(BaseService):
    """Issue enrollment constancies and transcript certificates."""

    @traced
    def issue(
        self,
        request_type: RequestType | str,
        *,
        student_id: str,
        name: str,
        program: str,
        gpa: float,
    ) -> ServiceResult:
        """Issue a document of *request_type* for the given student record."""
        op = "issue_document"

        with trace_span("student"):
            try:
                student = Student(id=student_id, name=name, program=program, gpa=gpa)
            except ValidationError as exc:
                errors = _validation_errors(exc)
                log.warning("document.rejected", code="INVALID_STUDENT", errors=errors)
                return ServiceResult.failure(
                    op,
                    "INVALID_STUDENT",
                    "Invalid student data: "
                    + "; ".join(f"{e['field']}: {e['message']}" for e in errors),
                    {"errors": errors},
                )

        try:
            bundle = select_factory(request_type)
            service = DocumentService(bundle, clock=self._clock, templates=self._templates)
            document = service.issue(student)
        except DocIssueError as exc:
            log.warning(
                "document.rejected",
                code=exc.code,
                request_type=str(request_type),
                student_id=student.id,
            )
            return ServiceResult.failure(op, exc.code, str(exc), exc.detail())

        log.debug(
            "document.issued",
            request_type=document.request_type.value,
            student_id=student.id,
            stamp=document.stamp,
        )
        return ServiceResult(ok=True, op=op, data=_document_data(document, student))

    def demo(self) -> ServiceResult:
        """Issue the sample transcript for ``UCC-0042``."""
        return self.issue(
            RequestType.TRANSCRIPT,
            student_id=DEMO_STUDENT_ID,
            name=DEMO_NAME,
            program=DEMO_PROGRAM,
            gpa=DEMO_GPA,
        )

    @traced
    def list_types(self) -> ServiceResult:
        """Describe every request type: label, stamp prefix and GPA rule."""
        items = [
            {
                "type": request_type.value,
                "label": request_type.label,
                "prefix": bundle.stamper.prefix,
                "template": bundle.template.name,
                "rule": bundle.rules.describe(),
            }
            for request_type, bundle in BUNDLES.items()
        ]
        return ServiceResult(ok=True, op="list_types", data={"items": items, "count": len(items)})
