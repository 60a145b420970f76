"""Jinja2 document templates with a user override directory.

Every failure to load or render a template, including unreadable
override files and bodies that render empty, surfaces as
:class:`TemplateRenderError`.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
)

from docissue.domain.errors import TemplateRenderError
from docissue.domain.models import Student

TEMPLATE_GROUP = "documents"

_HUNDREDTHS = Decimal("0.01")


def two_decimals(value: float) -> str:
    """Format *value* with two decimals, rounding ties away from zero.

    Rounds the shortest decimal form of the float, so ``2.675`` prints
    as ``2.68`` rather than the binary-exact ``2.67``.

    Examples:
        >>> two_decimals(4.2)
        '4.20'
        >>> two_decimals(0.125)
        '0.13'
    """
    return str(Decimal(repr(float(value))).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def build_template_environment(override_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Files in *override_dir* replace the packaged template of the same name
    (``enrollment.txt.j2``, ``transcript.txt.j2``). Templates that are not
    overridden still come from the package. The ``two_decimals`` filter is
    available to every template.
    """
    loaders: list[BaseLoader] = []
    if override_dir is not None:
        loaders.append(FileSystemLoader(str(override_dir)))

    loaders.append(PackageLoader("docissue", f"templates/{TEMPLATE_GROUP}"))
    env = Environment(
        loader=ChoiceLoader(loaders),
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["two_decimals"] = two_decimals
    return env


@functools.cache
def default_environment() -> Environment:
    """Shared environment over the packaged templates only."""
    return build_template_environment()


@dataclass(frozen=True)
class DocumentTemplate:
    """A named document template (``enrollment.txt.j2``)."""

    name: str

    def render(
        self,
        student: Student,
        issued_on: date,
        *,
        environment: Environment | None = None,
    ) -> str:
        """Render the body for *student*. Trailing newlines are dropped.

        Raises:
            TemplateRenderError: The template is missing, unreadable, invalid,
                references an unknown variable, or renders a blank body.
        """
        env = environment or default_environment()
        try:
            text = env.get_template(self.name).render(student=student, issued_on=issued_on)
        except TemplateError as exc:
            raise TemplateRenderError(self.name, str(exc) or type(exc).__name__) from exc
        except (UnicodeDecodeError, OSError) as exc:
            raise TemplateRenderError(self.name, f"cannot read template: {exc}") from exc

        body = text.rstrip("\n")
        if not body.strip():
            raise TemplateRenderError(self.name, "template rendered an empty body")
        return body
