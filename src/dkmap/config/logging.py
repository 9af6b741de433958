"""Log rendering for dkmap.

Services log through ``logging.getLogger(__name__)``. Their records are
rendered by structlog's ProcessorFormatter, so context bound by
``MappingsService`` with ``structlog.contextvars.bound_contextvars``
(``op`` and ``file``) appears on every line written during a command.

Output always goes to stderr: a console layout by default, JSON lines
with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "dkmap"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def build_formatter(*, log_json: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """Return the formatter used for the stderr handler."""
    tail: list[structlog.types.Processor]
    if log_json:
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to stderr through :func:`build_formatter`.

    Third-party loggers stay at WARNING; the ``dkmap`` tree drops to DEBUG
    with *verbose*.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_json=log_json))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
