"""Command: issue the sample transcript."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docissue.commands._base import DocCommand

if TYPE_CHECKING:
    from docissue.commands._context import AppContext


@click.command(
    cls=DocCommand,
    examples="""\
  docissue demo
  docissue --date 2026-02-01 demo
  docissue --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Issue a transcript certificate for the sample student UCC-0042."""
    app.emit(app.service.demo())
