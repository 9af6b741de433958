"""Subcommand modules for dkmap.

Provides register_commands() which uses deferred imports to keep
``dkmap --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from dkmap.commands.apply import apply
    from dkmap.commands.validate import validate

    cli.add_command(apply)
    cli.add_command(validate)
