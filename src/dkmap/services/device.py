"""Device seam: encode settings and hand them to a transport.

The controller link itself is not part of this package. Anything with a
``send(payload)`` method can stand in for it; :class:`LogTransport` only
records what would have been sent.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from dkmap.domain.settings import Settings

logger = logging.getLogger(__name__)


class DeviceTransport(Protocol):
    """Anything that can deliver an encoded payload to the controller."""

    def send(self, payload: dict[str, Any]) -> None: ...


class LogTransport:
    """Transport that logs payloads and keeps them for inspection."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    def send(self, payload: dict[str, Any]) -> None:
        logger.debug(
            "Sending settings: debounce=%s combo_window=%s rhythms=%d",
            payload["debounce"],
            payload["combo_window"],
            len(payload["freestyle"]),
        )
        self.sent.append(payload)


def encode_settings(settings: Settings) -> dict[str, Any]:
    """Flatten *settings* into the payload sent to the controller.

    Each beat becomes ``[input, delay]`` where the final delay is None.
    """
    glob = settings.global_
    return {
        "debounce": glob.debounce,
        "combo_window": glob.combo_window,
        "microphone": glob.microphone,
        "freestyle": [
            {
                "character": rhythm.character,
                "beats": [[beat.input.value, beat.delay] for beat in rhythm.beats],
            }
            for rhythm in settings.freestyle.rhythms or ()
        ],
    }
