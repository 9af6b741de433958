"""Root CLI group for dkmap with global flags and command registration."""

from __future__ import annotations

import click

from dkmap import __version__
from dkmap.commands import register_commands
from dkmap.commands._context import AppContext
from dkmap.config.settings import DkSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dkmap")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--require-microphone",
    is_flag=True,
    help="Reject MIC beats unless [global] microphone = true.",
)
@click.option(
    "--strict-filename",
    is_flag=True,
    help="Reject files not named mappings.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    require_microphone: bool,
    strict_filename: bool,
) -> None:
    """dkmap: DK-BASIC mappings validator.

    Run "apply" on DK-BASIC hardware; run "validate" anywhere else.
    """
    settings = DkSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        require_microphone=require_microphone,
        strict_filename=strict_filename,
    )
    ctx.ensure_object(dict)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
