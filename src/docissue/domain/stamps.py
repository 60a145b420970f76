"""Pseudo-stamp codes appended to issued documents.

Format: ``{PREFIX}-{last 4 chars of student id}-{day of year}``, for
example ``TRN-0042-290``. Not an authentication mechanism.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from docissue.domain.models import Student

ID_SUFFIX_LENGTH = 4


def id_suffix(student_id: str) -> str:
    """Trailing four characters of *student_id*, or the whole id if shorter.

    Examples:
        >>> id_suffix("UCC-0042")
        '0042'
        >>> id_suffix("A7")
        'A7'
    """
    return student_id[-ID_SUFFIX_LENGTH:]


def stamp_code(prefix: str, student_id: str, on: date) -> str:
    """Build the stamp for *student_id* issued on *on*."""
    return f"{prefix}-{id_suffix(student_id)}-{on.timetuple().tm_yday}"


@dataclass(frozen=True)
class PrefixStamper:
    """Stamp generator bound to a document-type prefix (``ENR``, ``TRN``)."""

    prefix: str

    def stamp(self, student: Student, on: date) -> str:
        return stamp_code(self.prefix, student.id, on)
