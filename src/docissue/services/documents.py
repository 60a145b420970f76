"""DocumentService — validate, render, stamp.

The orchestrator raises on any failure and never returns a partial
document. Callers that need a :class:`ServiceResult` go through
:class:`docissue.services.issuance.IssuanceService`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docissue.domain.clock import Clock, SystemClock
from docissue.domain.models import Document, Student
from docissue.services.telemetry import trace_span

if TYPE_CHECKING:
    from jinja2 import Environment

    from docissue.services.factories import DocumentBundle


class DocumentService:
    """Issue documents with one bundle.

    Usage::

        service = DocumentService(select_factory(RequestType.TRANSCRIPT))
        document = service.issue(student)
    """

    def __init__(
        self,
        bundle: DocumentBundle,
        *,
        clock: Clock | None = None,
        templates: Environment | None = None,
    ) -> None:
        self._bundle = bundle
        self._clock = clock or SystemClock()
        self._templates = templates

    def issue(self, student: Student) -> Document:
        """Validate *student*, render the body, stamp it, and build the document.

        The date is read once, so the body date and the stamp's day of
        year always agree.

        Raises:
            RuleViolationError: The student fails the bundle's rule.
            TemplateRenderError: The template could not be rendered.
        """
        issued_on = self._clock.today()

        with trace_span("validate"):
            self._bundle.rules.validate(student)

        with trace_span("render") as span:
            body = self._bundle.template.render(
                student, issued_on, environment=self._templates
            )
            if span is not None:
                span.annotate("template", self._bundle.template.name)

        with trace_span("stamp"):
            stamp = self._bundle.stamper.stamp(student, issued_on)

        return Document(
            request_type=self._bundle.request_type,
            body=body,
            stamp=stamp,
            issued_on=issued_on,
        )
