"""BaseService — shared construction for docissue services.

Every service receives the resolved :class:`DocSettings`. The issuance
clock and the template environment are derived from it once, at
construction, unless the caller injects its own clock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docissue.domain.clock import Clock, FixedClock, SystemClock
from docissue.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from docissue.config.settings import DocSettings


class BaseService:
    """Base for service-layer classes.

    Subclasses implement operations that return ``ServiceResult``.
    """

    def __init__(self, settings: DocSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or self._clock_from_settings(settings)
        self._templates: Environment = build_template_environment(settings.template_dir)

    @staticmethod
    def _clock_from_settings(settings: DocSettings) -> Clock:
        if settings.clock.date is not None:
            return FixedClock(settings.clock.date)
        return SystemClock()
