"""Command: list request types with their stamp prefix and GPA rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docissue.commands._base import DocCommand

if TYPE_CHECKING:
    from docissue.commands._context import AppContext


@click.command(
    "types",
    cls=DocCommand,
    examples="""\
  docissue types
  docissue -q types
  docissue --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List the document types that can be requested."""
    app.emit(app.service.list_types())
