"""Validated, immutable mapping settings.

A :class:`Settings` value is only ever produced by the parse pipeline or by
:func:`default_settings`, so consumers may trust every invariant:

- ``debounce`` and ``combo_window`` are within their bounds.
- Every rhythm has at least one beat; only the last beat has no delay.
- Every delay is within the debounce bounds.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dkmap.domain.constants import MIN_COMBO_WINDOW, MIN_DEBOUNCE_TIME
from dkmap.domain.inputs import Input


class GlobalSettings(BaseModel):
    """Resolved [global] table with defaults filled in."""

    model_config = {"frozen": True}

    debounce: int = MIN_DEBOUNCE_TIME
    combo_window: int = MIN_COMBO_WINDOW
    microphone: bool = False


class Beat(BaseModel):
    """One input event and the delay (ms) before the next beat."""

    model_config = {"frozen": True}

    input: Input
    delay: int | None = None


class Rhythm(BaseModel):
    """A beat sequence bound to a single ASCII trigger character."""

    model_config = {"frozen": True}

    character: str
    beats: tuple[Beat, ...]

    @property
    def inputs(self) -> tuple[Input, ...]:
        return tuple(beat.input for beat in self.beats)

    @property
    def delays(self) -> tuple[int, ...]:
        """Inter-beat delays, one fewer than the beats."""
        return tuple(beat.delay for beat in self.beats if beat.delay is not None)


class FreestyleSettings(BaseModel):
    """Freestyle rhythms, or None when the document declares none."""

    model_config = {"frozen": True}

    rhythms: tuple[Rhythm, ...] | None = None

    def find(self, character: str) -> Rhythm | None:
        """Return the first rhythm bound to *character*, if any."""
        for rhythm in self.rhythms or ():
            if rhythm.character == character:
                return rhythm
        return None


class Settings(BaseModel):
    """Fully validated contents of ``mappings.toml``."""

    model_config = {"frozen": True, "populate_by_name": True}

    global_: GlobalSettings = Field(default_factory=GlobalSettings, alias="global")
    freestyle: FreestyleSettings = Field(default_factory=FreestyleSettings)


def default_settings() -> Settings:
    """Return the settings used when no valid mappings file is available."""
    return Settings(global_=GlobalSettings(), freestyle=FreestyleSettings())
