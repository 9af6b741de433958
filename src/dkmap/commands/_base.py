"""click Command that prints usage examples on request."""

from __future__ import annotations

from typing import Any

import click


class DkCommand(click.Command):
    """A command whose ``examples`` text is shown by an eager ``--examples`` flag.

    ``--help`` stays short; commands without examples get no flag at all.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"{ctx.command_path} examples:\n\n{self.examples}")
        ctx.exit()
