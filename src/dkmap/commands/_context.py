"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the MappingsService and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dkmap.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dkmap.config.settings import DkSettings
    from dkmap.services.device import DeviceTransport
    from dkmap.services.mappings import MappingsService
    from dkmap.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: DkSettings, transport: DeviceTransport | None = None) -> None:
        self.settings = settings
        self._transport = transport
        self._service: MappingsService | None = None

        from dkmap.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> MappingsService:
        """The mappings service (created lazily on first access)."""
        if self._service is None:
            from dkmap.services.mappings import MappingsService

            self._service = MappingsService(
                policy=self.settings.policy,
                transport=self._transport,
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
