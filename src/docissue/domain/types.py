"""Request types accepted by the registrar.

The set is closed: every member must have a bundle registered in
:mod:`docissue.services.factories`.
"""

from __future__ import annotations

from enum import StrEnum


class RequestType(StrEnum):
    """Kinds of document a student can request."""

    ENROLLMENT = "enrollment"
    TRANSCRIPT = "transcript"

    @property
    def label(self) -> str:
        """Display label printed above the document (``ENROLLMENT``, ``TRANSCRIPT``)."""
        return self.name
