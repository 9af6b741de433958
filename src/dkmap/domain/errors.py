"""ParseError taxonomy for ``mappings.toml``.

Each variant carries exactly the payload needed to explain the failure.
``code`` is stable and surfaces as ``ServiceError.code``; ``detail`` holds
the payload in a JSON-friendly form.
"""

from __future__ import annotations

from typing import Any


class ParseError(Exception):
    """Base class for every mappings parse failure."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.detail.items())
        return f"{type(self).__name__}({args})"


# --- File-level ---


class InvalidFilename(ParseError):
    code = "INVALID_FILENAME"

    def __init__(self, path: str) -> None:
        super().__init__(f"{path!r} has no file name", path=path)
        self.path = path


class UnexpectedFilename(ParseError):
    code = "UNEXPECTED_FILENAME"

    def __init__(self, name: str) -> None:
        super().__init__(f"Expected a file named 'mappings.toml', got {name!r}", name=name)
        self.name = name


class CannotReadFile(ParseError):
    code = "CANNOT_READ_FILE"

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot read {name!r}", name=name)
        self.name = name


class InvalidToml(ParseError):
    code = "INVALID_TOML"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid mappings document: {reason}", reason=reason)
        self.reason = reason


# --- [global] ---


class InvalidDebounceTime(ParseError):
    code = "INVALID_DEBOUNCE_TIME"

    def __init__(self, value: int) -> None:
        super().__init__(f"Debounce time {value} ms is out of range", value=value)
        self.value = value


class InvalidComboWindow(ParseError):
    code = "INVALID_COMBO_WINDOW"

    def __init__(self, value: int) -> None:
        super().__init__(f"Combo window {value} ms is out of range", value=value)
        self.value = value


# --- [[freestyle]] ---


class InvalidCharacter(ParseError):
    code = "INVALID_CHARACTER"

    def __init__(self, character: str) -> None:
        super().__init__(f"Rhythm character {character!r} is not ASCII", character=character)
        self.character = character


class InvalidBeat(ParseError):
    code = "INVALID_BEAT"

    def __init__(self, beat: str, character: str) -> None:
        super().__init__(
            f"Unknown beat {beat!r} in rhythm {character!r}", beat=beat, character=character
        )
        self.beat = beat
        self.character = character


class InvalidDelay(ParseError):
    code = "INVALID_DELAY"

    def __init__(self, delay: int, character: str) -> None:
        super().__init__(
            f"Delay {delay} ms in rhythm {character!r} is out of range",
            delay=delay,
            character=character,
        )
        self.delay = delay
        self.character = character


class EmptyRhythm(ParseError):
    code = "EMPTY_RHYTHM"

    def __init__(self, character: str) -> None:
        super().__init__(f"Rhythm {character!r} has no beats", character=character)
        self.character = character


class TooFewDelays(ParseError):
    code = "TOO_FEW_DELAYS"

    def __init__(self, character: str) -> None:
        super().__init__(
            f"Rhythm {character!r} has fewer beats than its delays allow",
            character=character,
        )
        self.character = character


class TooManyDelays(ParseError):
    code = "TOO_MANY_DELAYS"

    def __init__(self, character: str) -> None:
        super().__init__(
            f"Rhythm {character!r} has more beats than its delays allow",
            character=character,
        )
        self.character = character


class MicrophoneDisabled(ParseError):
    code = "MICROPHONE_DISABLED"

    def __init__(self, character: str) -> None:
        super().__init__(
            f"Rhythm {character!r} uses MIC but [global] microphone is not enabled",
            character=character,
        )
        self.character = character
