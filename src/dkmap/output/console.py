"""Rich Console factory and theme for dkmap output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DK_THEME = Theme(
    {
        "dk.ok": "bold green",
        "dk.error": "bold red",
        "dk.warning": "bold yellow",
        "dk.op": "bold cyan",
        "dk.key": "dim",
        "dk.path": "dim",
        "dk.char": "bold magenta",
        "dk.input.bongo": "green",
        "dk.input.button": "yellow",
        "dk.input.mic": "blue",
        "dk.delay": "cyan",
    }
)

_INPUT_STYLES: dict[str, str] = {
    "BackLeftBongo": "dk.input.bongo",
    "FrontLeftBongo": "dk.input.bongo",
    "BackRightBongo": "dk.input.bongo",
    "FrontRightBongo": "dk.input.bongo",
    "StartPauseButton": "dk.input.button",
    "ClapMicrophone": "dk.input.mic",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_input(name: str) -> str:
    """Return the Rich style name for a controller input."""
    return _INPUT_STYLES.get(name, "")
