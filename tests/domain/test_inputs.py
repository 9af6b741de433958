"""Tests for the beat token table."""

import pytest

from dkmap.domain.inputs import BEAT_TOKENS, MICROPHONE_INPUTS, Input, lookup_beat


class TestBeatTokens:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("BLB", Input.BACK_LEFT_BONGO),
            ("FLB", Input.FRONT_LEFT_BONGO),
            ("BRB", Input.BACK_RIGHT_BONGO),
            ("FRB", Input.FRONT_RIGHT_BONGO),
            ("SPB", Input.START_PAUSE_BUTTON),
            ("MIC", Input.CLAP_MICROPHONE),
        ],
    )
    def test_known_tokens(self, token: str, expected: Input) -> None:
        assert lookup_beat(token) is expected

    @pytest.mark.parametrize("token", ["blb", "Mic", "XYZ", "", " BLB", "BLB "])
    def test_unknown_tokens(self, token: str) -> None:
        assert lookup_beat(token) is None

    def test_table_covers_every_input(self) -> None:
        assert set(BEAT_TOKENS.values()) == set(Input)

    def test_only_clap_needs_microphone(self) -> None:
        assert MICROPHONE_INPUTS == {Input.CLAP_MICROPHONE}

    def test_input_values(self) -> None:
        assert Input.BACK_LEFT_BONGO == "BackLeftBongo"
        assert Input.CLAP_MICROPHONE.value == "ClapMicrophone"
