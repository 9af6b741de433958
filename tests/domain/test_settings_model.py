"""Tests for the validated settings model and its defaults."""

import pytest
from pydantic import ValidationError

from dkmap.domain.constants import MIN_COMBO_WINDOW, MIN_DEBOUNCE_TIME
from dkmap.domain.inputs import Input
from dkmap.domain.settings import (
    Beat,
    FreestyleSettings,
    GlobalSettings,
    Rhythm,
    Settings,
    default_settings,
)


def _rhythm(character: str = "a") -> Rhythm:
    return Rhythm(
        character=character,
        beats=(
            Beat(input=Input.BACK_LEFT_BONGO, delay=100),
            Beat(input=Input.FRONT_RIGHT_BONGO, delay=None),
        ),
    )


class TestDefaultSettings:
    def test_values(self) -> None:
        settings = default_settings()
        assert settings.global_.debounce == MIN_DEBOUNCE_TIME
        assert settings.global_.combo_window == MIN_COMBO_WINDOW
        assert settings.global_.microphone is False
        assert settings.freestyle.rhythms is None

    def test_fresh_instance_each_call(self) -> None:
        assert default_settings() == default_settings()
        assert default_settings() is not default_settings()

    def test_matches_bare_constructor(self) -> None:
        assert Settings() == default_settings()


class TestImmutability:
    def test_global_frozen(self) -> None:
        settings = default_settings()
        with pytest.raises(ValidationError):
            settings.global_.debounce = 300  # type: ignore[misc]

    def test_settings_frozen(self) -> None:
        settings = default_settings()
        with pytest.raises(ValidationError):
            settings.freestyle = FreestyleSettings(rhythms=())  # type: ignore[misc]

    def test_beats_are_tuples(self) -> None:
        assert isinstance(_rhythm().beats, tuple)


class TestRhythm:
    def test_inputs_and_delays(self) -> None:
        rhythm = _rhythm()
        assert rhythm.inputs == (Input.BACK_LEFT_BONGO, Input.FRONT_RIGHT_BONGO)
        assert rhythm.delays == (100,)

    def test_find(self) -> None:
        freestyle = FreestyleSettings(rhythms=(_rhythm("a"), _rhythm("b")))
        found = freestyle.find("b")
        assert found is not None
        assert found.character == "b"
        assert freestyle.find("z") is None

    def test_find_without_rhythms(self) -> None:
        assert FreestyleSettings().find("a") is None


class TestSerialization:
    def test_dump_by_alias(self) -> None:
        settings = Settings(global_=GlobalSettings(debounce=200))
        dumped = settings.model_dump(mode="json", by_alias=True)
        assert dumped["global"]["debounce"] == 200
        assert dumped["freestyle"] == {"rhythms": None}
