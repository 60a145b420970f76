"""Root CLI group for docissue with global flags and command registration."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import click

from docissue import __version__
from docissue.commands import register_commands
from docissue.commands._base import DocGroup
from docissue.commands._context import AppContext
from docissue.config.models import ClockConfig
from docissue.config.settings import DocSettings


@click.group(
    cls=DocGroup,
    invoke_without_command=True,
    examples="""\
  docissue demo
  docissue issue transcript --id UCC-0042 --name "Alejandro Parra" \\
      --program "Ing. Software" --gpa 4.2
  docissue --date 2026-02-01 --json demo
  docissue -c ./docissue.toml types""",
)
@click.version_option(version=__version__, prog_name="docissue")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (stamp only).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and telemetry spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--date",
    "issue_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Issue as of this date (YYYY-MM-DD) instead of today.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    issue_date: datetime | None,
) -> None:
    """docissue — registrar document issuance."""
    overrides: dict[str, Any] = {}
    if issue_date is not None:
        overrides["clock"] = ClockConfig(date=issue_date.date())
    settings = DocSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
