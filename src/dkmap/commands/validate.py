"""Command: check a mappings file without touching the device."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dkmap.commands._base import DkCommand

if TYPE_CHECKING:
    from dkmap.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  dkmap validate mappings.toml
  dkmap --json validate ./config/mappings.toml
  dkmap --require-microphone validate mappings.toml""",
)
@click.argument("file", type=click.Path(path_type=str))
@click.pass_obj
def validate(app: AppContext, file: str) -> None:
    """Validate FILE and report the resolved settings.

    Exits with status 1 if FILE is not a valid mappings file.
    """
    app.emit(app.service.validate(file))
