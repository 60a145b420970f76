"""Click command and group classes shared by every docissue command.

Both accept ``examples=`` and expose it as an eager ``--examples`` flag
that prints the text and exits before required arguments are checked,
so ``docissue issue --examples`` works without ``TYPE`` or ``--id``.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the ``--examples`` option when example text is supplied."""

    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class DocCommand(_ExamplesMixin, click.Command):
    """A leaf command (``issue``, ``demo``, ``types``)."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DocGroup(_ExamplesMixin, click.Group):
    """The root group; subcommands default to :class:`DocCommand`."""

    command_class = DocCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
