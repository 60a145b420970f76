"""Command: issue an enrollment constancy or transcript certificate."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docissue.commands._base import DocCommand
from docissue.domain.types import RequestType

if TYPE_CHECKING:
    from docissue.commands._context import AppContext


@click.command(
    cls=DocCommand,
    examples="""\
  docissue issue enrollment --id UCC-0107 --name "Laura Gómez" --program Derecho --gpa 3.8
  docissue issue transcript --id UCC-0042 --name "Alejandro Parra" \\
      --program "Ing. Software" --gpa 4.2
  docissue --date 2026-02-01 issue transcript --id UCC-0042 --name "Alejandro Parra" \\
      --program "Ing. Software" --gpa 4.2
  docissue -q issue enrollment --id UCC-0107 --name "Laura Gómez" --program Derecho --gpa 3.8
  docissue --json issue transcript --id UCC-0042 --name "Alejandro Parra" \\
      --program "Ing. Software" --gpa 4.2""",
)
@click.argument(
    "request_type",
    metavar="TYPE",
    type=click.Choice([t.value for t in RequestType], case_sensitive=False),
)
@click.option("--id", "student_id", required=True, help="Student identifier, e.g. UCC-0042.")
@click.option("--name", required=True, help="Student full name.")
@click.option("--program", required=True, help="Academic program.")
@click.option("--gpa", type=float, required=True, help="Grade-point average (0-5).")
@click.pass_obj
def issue(
    app: AppContext,
    request_type: str,
    student_id: str,
    name: str,
    program: str,
    gpa: float,
) -> None:
    """Issue a document of TYPE for a student."""
    app.emit(
        app.service.issue(
            request_type,
            student_id=student_id,
            name=name,
            program=program,
            gpa=gpa,
        )
    )
