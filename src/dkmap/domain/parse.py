"""Parse pipeline: ``mappings.toml`` path -> validated :class:`Settings`.

Pipeline: NAME -> READ -> DECODE -> GLOBAL -> FREESTYLE -> POLICY

Every step either returns its result or raises a :class:`ParseError`;
the first failure aborts the whole parse. Nothing here logs or prints.

Precedence inside one rhythm:
character -> non-empty -> beat/delay count -> each beat -> each delay.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ValidationError

from dkmap.domain.constants import (
    MAPPINGS_FILENAME,
    MAX_COMBO_WINDOW,
    MAX_DEBOUNCE_TIME,
    MIN_COMBO_WINDOW,
    MIN_DEBOUNCE_TIME,
)
from dkmap.domain.document import GlobalDocument, MappingsDocument, RhythmDocument
from dkmap.domain.errors import (
    CannotReadFile,
    EmptyRhythm,
    InvalidBeat,
    InvalidCharacter,
    InvalidComboWindow,
    InvalidDebounceTime,
    InvalidDelay,
    InvalidFilename,
    InvalidToml,
    MicrophoneDisabled,
    TooFewDelays,
    TooManyDelays,
    UnexpectedFilename,
)
from dkmap.domain.inputs import MICROPHONE_INPUTS, Input, lookup_beat
from dkmap.domain.settings import Beat, FreestyleSettings, GlobalSettings, Rhythm, Settings


class ParsePolicy(BaseModel):
    """Optional checks layered on top of the base rules.

    Attributes:
        require_microphone: Reject rhythms that use ``MIC`` unless
            ``[global] microphone = true``.
        strict_filename: Reject files not named ``mappings.toml``.
    """

    model_config = {"frozen": True}

    require_microphone: bool = False
    strict_filename: bool = False


DEFAULT_POLICY = ParsePolicy()


# --- Public API ---


def parse(path: str | Path, policy: ParsePolicy = DEFAULT_POLICY) -> Settings:
    """Read, decode, and validate the mappings file at *path*."""
    path = Path(path)
    name = file_name(path)
    if policy.strict_filename and name != MAPPINGS_FILENAME:
        raise UnexpectedFilename(name)
    text = read_text(path, name)
    return parse_text(text, policy)


def parse_text(text: str, policy: ParsePolicy = DEFAULT_POLICY) -> Settings:
    """Validate raw TOML *text* (no I/O)."""
    document = load_document(text)
    return parse_document(document, policy)


def parse_document(document: MappingsDocument, policy: ParsePolicy = DEFAULT_POLICY) -> Settings:
    """Validate an already-decoded document."""
    settings = Settings(
        global_=parse_global(document),
        freestyle=parse_freestyle(document),
    )
    check_policy(settings, policy)
    return settings


# --- File access ---


def file_name(path: Path) -> str:
    """Return the final path component, or raise :class:`InvalidFilename`."""
    name = path.name
    if name in ("", ".", ".."):
        raise InvalidFilename(str(path))
    return name


def read_text(path: Path, name: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CannotReadFile(name) from exc


def load_document(text: str) -> MappingsDocument:
    """Decode TOML *text* into the raw document model.

    Syntax errors and shape mismatches both surface as :class:`InvalidToml`.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidToml(str(exc)) from exc
    try:
        return MappingsDocument.model_validate(data)
    except ValidationError as exc:
        raise InvalidToml(_describe_validation_error(exc)) from exc


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    extra = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{loc}: {first['msg']}{extra}" if loc else f"{first['msg']}{extra}"


# --- [global] ---


def parse_global(document: MappingsDocument) -> GlobalSettings:
    """Resolve [global], filling defaults for absent keys."""
    raw = document.global_ or GlobalDocument()
    return GlobalSettings(
        debounce=_check_debounce(raw.debounce),
        combo_window=_check_combo_window(raw.combo_window),
        microphone=bool(raw.microphone),
    )


def _check_debounce(value: int | None) -> int:
    if value is None:
        return MIN_DEBOUNCE_TIME
    if not MIN_DEBOUNCE_TIME <= value <= MAX_DEBOUNCE_TIME:
        raise InvalidDebounceTime(value)
    return value


def _check_combo_window(value: int | None) -> int:
    if value is None:
        return MIN_COMBO_WINDOW
    if not MIN_COMBO_WINDOW <= value <= MAX_COMBO_WINDOW:
        raise InvalidComboWindow(value)
    return value


# --- [[freestyle]] ---


def parse_freestyle(document: MappingsDocument) -> FreestyleSettings:
    """Resolve every [[freestyle]] rhythm in document order."""
    if document.freestyle is None:
        return FreestyleSettings()
    return FreestyleSettings(rhythms=tuple(parse_rhythm(raw) for raw in document.freestyle))


def parse_rhythm(raw: RhythmDocument) -> Rhythm:
    character = raw.character
    if not character.isascii():
        raise InvalidCharacter(character)
    if not raw.beats:
        raise EmptyRhythm(character)

    expected = len(raw.delays) + 1
    if len(raw.beats) < expected:
        raise TooFewDelays(character)
    if len(raw.beats) > expected:
        raise TooManyDelays(character)

    inputs = [_resolve_beat(beat, character) for beat in raw.beats]
    delays: list[int | None] = [_check_delay(delay, character) for delay in raw.delays]
    # Nothing follows the last beat.
    delays.append(None)

    return Rhythm(
        character=character,
        beats=tuple(Beat(input=i, delay=d) for i, d in zip(inputs, delays, strict=True)),
    )


def _resolve_beat(token: str, character: str) -> Input:
    resolved = lookup_beat(token)
    if resolved is None:
        raise InvalidBeat(token, character)
    return resolved


def _check_delay(delay: int, character: str) -> int:
    if not MIN_DEBOUNCE_TIME <= delay <= MAX_DEBOUNCE_TIME:
        raise InvalidDelay(delay, character)
    return delay


# --- Cross-field policy ---


def check_policy(settings: Settings, policy: ParsePolicy = DEFAULT_POLICY) -> None:
    """Apply optional cross-field rules to already-resolved settings."""
    if policy.require_microphone and not settings.global_.microphone:
        for rhythm in settings.freestyle.rhythms or ():
            if any(beat.input in MICROPHONE_INPUTS for beat in rhythm.beats):
                raise MicrophoneDisabled(rhythm.character)
