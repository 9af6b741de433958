"""Shared pytest fixtures and test helpers for dkmap tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

VALID_MAPPINGS = """\
[global]
debounce = 200

[[freestyle]]
character = '$'
beats = ["BLB", "MIC"]
delays = [150]
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_mappings(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing TOML text to ``<tmp>/mappings.toml`` (or *name*)."""

    def _write(text: str, name: str = "mappings.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_mappings(write_mappings: Callable[..., Path]) -> Path:
    return write_mappings(VALID_MAPPINGS)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep DKMAP_* env vars from leaking into settings."""
    for var in ("DKMAP_REQUIRE_MICROPHONE", "DKMAP_STRICT_FILENAME", "DKMAP_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    yield
