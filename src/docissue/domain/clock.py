"""Issuance date sources.

Rendering and stamping both depend on "today". Services take a
:class:`Clock` so tests and the ``--date`` flag can pin the date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Reads the host clock."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Always reports the same date."""

    on: date

    def today(self) -> date:
        return self.on
