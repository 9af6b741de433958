"""Physical and virtual inputs of the DK-BASIC controller.

Beat tokens in ``mappings.toml`` resolve through :data:`BEAT_TOKENS`.
Matching is exact and case-sensitive.
"""

from __future__ import annotations

from enum import StrEnum


class Input(StrEnum):
    """Controller inputs a rhythm beat can trigger."""

    BACK_LEFT_BONGO = "BackLeftBongo"
    FRONT_LEFT_BONGO = "FrontLeftBongo"
    BACK_RIGHT_BONGO = "BackRightBongo"
    FRONT_RIGHT_BONGO = "FrontRightBongo"
    START_PAUSE_BUTTON = "StartPauseButton"
    CLAP_MICROPHONE = "ClapMicrophone"


BEAT_TOKENS: dict[str, Input] = {
    "BLB": Input.BACK_LEFT_BONGO,
    "FLB": Input.FRONT_LEFT_BONGO,
    "BRB": Input.BACK_RIGHT_BONGO,
    "FRB": Input.FRONT_RIGHT_BONGO,
    "SPB": Input.START_PAUSE_BUTTON,
    "MIC": Input.CLAP_MICROPHONE,
}

# Inputs that only work when the microphone is switched on in [global].
MICROPHONE_INPUTS: frozenset[Input] = frozenset({Input.CLAP_MICROPHONE})


def lookup_beat(token: str) -> Input | None:
    """Return the input for *token*, or None if it is not a known beat."""
    return BEAT_TOKENS.get(token)
