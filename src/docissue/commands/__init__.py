"""Subcommand modules for docissue.

register_commands() imports lazily so ``docissue --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from docissue.commands.demo import demo
    from docissue.commands.issue import issue
    from docissue.commands.types_cmd import types_cmd

    cli.add_command(issue)
    cli.add_command(demo)
    cli.add_command(types_cmd)
