"""Document bundles and the factory selector.

Each request type maps to one frozen bundle of template, rules and
stamper. The bundles are built once at import time; selection is a
table lookup.
"""

from __future__ import annotations

from dataclasses import dataclass

from docissue.domain.errors import UnsupportedRequestTypeError
from docissue.domain.rules import GpaRule
from docissue.domain.stamps import PrefixStamper
from docissue.domain.types import RequestType
from docissue.infrastructure.templates import DocumentTemplate


@dataclass(frozen=True)
class DocumentBundle:
    """Matched family of strategies used to issue one document type."""

    request_type: RequestType
    template: DocumentTemplate
    rules: GpaRule
    stamper: PrefixStamper


ENROLLMENT_BUNDLE = DocumentBundle(
    request_type=RequestType.ENROLLMENT,
    template=DocumentTemplate("enrollment.txt.j2"),
    rules=GpaRule(
        request_type=RequestType.ENROLLMENT.value,
        minimum=0.0,
        inclusive=False,
        message="Enrollment constancy requires a GPA above 0",
    ),
    stamper=PrefixStamper("ENR"),
)

TRANSCRIPT_BUNDLE = DocumentBundle(
    request_type=RequestType.TRANSCRIPT,
    template=DocumentTemplate("transcript.txt.j2"),
    rules=GpaRule(
        request_type=RequestType.TRANSCRIPT.value,
        minimum=1.0,
        message="GPA too low for a transcript certificate (minimum 1.0)",
    ),
    stamper=PrefixStamper("TRN"),
)

BUNDLES: dict[RequestType, DocumentBundle] = {
    RequestType.ENROLLMENT: ENROLLMENT_BUNDLE,
    RequestType.TRANSCRIPT: TRANSCRIPT_BUNDLE,
}


def _coerce(request_type: RequestType | str) -> RequestType:
    if isinstance(request_type, RequestType):
        return request_type
    if isinstance(request_type, str):
        try:
            return RequestType(request_type.strip().lower())
        except ValueError:
            pass
    raise UnsupportedRequestTypeError(request_type)


def select_factory(request_type: RequestType | str) -> DocumentBundle:
    """Return the bundle for *request_type*.

    Accepts a :class:`RequestType` or its string value, case-insensitive.

    Raises:
        UnsupportedRequestTypeError: No bundle is registered for the type.
    """
    resolved = _coerce(request_type)
    try:
        return BUNDLES[resolved]
    except KeyError:
        raise UnsupportedRequestTypeError(request_type) from None
