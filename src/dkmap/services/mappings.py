"""MappingsService: validate and apply ``mappings.toml``.

validate: PARSE -> REPORT (failure is an error result)
apply:    PARSE -> (FALLBACK to defaults on any ParseError) -> ENCODE -> SEND
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog

from dkmap.domain.constants import MAPPINGS_FILENAME
from dkmap.domain.errors import ParseError
from dkmap.domain.parse import DEFAULT_POLICY, ParsePolicy, parse
from dkmap.domain.settings import Settings, default_settings
from dkmap.services.device import DeviceTransport, LogTransport, encode_settings
from dkmap.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class MappingsService:
    """Runs the parse pipeline on behalf of the CLI.

    Usage::

        svc = MappingsService(policy=ParsePolicy(require_microphone=True))
        result = svc.validate("mappings.toml")
    """

    def __init__(
        self,
        policy: ParsePolicy = DEFAULT_POLICY,
        transport: DeviceTransport | None = None,
    ) -> None:
        self._policy = policy
        self._transport = transport if transport is not None else LogTransport()

    @property
    def transport(self) -> DeviceTransport:
        return self._transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, path: str | Path) -> ServiceResult:
        """Parse *path* and report whether it is a valid mappings file."""
        op = "validate"
        with structlog.contextvars.bound_contextvars(op=op, file=str(path)):
            return self._validate(op, path)

    def _validate(self, op: str, path: str | Path) -> ServiceResult:
        warnings = self._filename_warnings(path)
        try:
            settings = parse(path, self._policy)
        except ParseError as exc:
            logger.debug("Validation failed (%s)", exc.code)
            return ServiceResult(
                ok=False,
                op=op,
                warnings=warnings,
                error=ServiceError.from_parse_error(exc),
                meta=self._meta(path),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data=self._describe(path, settings),
            warnings=warnings,
            meta=self._meta(path),
        )

    def apply(self, path: str | Path) -> ServiceResult:
        """Send the settings in *path* to the device.

        Any parse failure falls back to :func:`default_settings`; apply
        itself only fails if the transport does.
        """
        op = "apply"
        with structlog.contextvars.bound_contextvars(op=op, file=str(path)):
            return self._apply(op, path)

    def _apply(self, op: str, path: str | Path) -> ServiceResult:
        source = "file"
        fallback: dict[str, Any] | None = None
        try:
            settings = parse(path, self._policy)
        except ParseError as exc:
            logger.warning("Mappings invalid, using default settings (%s)", exc.code)
            settings = default_settings()
            source = "defaults"
            fallback = {"code": exc.code, "message": exc.message}

        payload = encode_settings(settings)
        try:
            self._transport.send(payload)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="TRANSPORT_FAILED",
                    message=f"Could not send settings to device: {exc}",
                    detail={"source": source},
                ),
                meta=self._meta(path),
            )

        data = self._describe(path, settings)
        data["source"] = source
        if fallback is not None:
            data["fallback"] = fallback
        return ServiceResult(ok=True, op=op, data=data, meta=self._meta(path))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _filename_warnings(self, path: str | Path) -> list[str]:
        name = Path(path).name
        if self._policy.strict_filename or not name or name == MAPPINGS_FILENAME:
            return []
        logger.info("Mappings file is named %r, expected %r", name, MAPPINGS_FILENAME)
        return [f"File is named {name!r}; the device only loads {MAPPINGS_FILENAME!r}"]

    def _meta(self, path: str | Path) -> dict[str, Any]:
        return {"file": str(path), "policy": self._policy.model_dump()}

    @staticmethod
    def _describe(path: str | Path, settings: Settings) -> dict[str, Any]:
        payload = encode_settings(settings)
        return {
            "file": str(path),
            "debounce": payload["debounce"],
            "combo_window": payload["combo_window"],
            "microphone": payload["microphone"],
            "rhythms": payload["freestyle"],
        }
