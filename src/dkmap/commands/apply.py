"""Command: send mappings to the DK-BASIC controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dkmap.commands._base import DkCommand

if TYPE_CHECKING:
    from dkmap.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  dkmap apply mappings.toml
  dkmap -v apply /boot/dk-basic/mappings.toml""",
)
@click.argument("file", type=click.Path(path_type=str))
@click.pass_obj
def apply(app: AppContext, file: str) -> None:
    """Apply the settings in FILE to the device.

    If FILE is missing or invalid, the default settings are applied instead.
    """
    app.emit(app.service.apply(file))
