"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Both operations report resolved settings, so successful results share
:func:`_render_settings`; failures go through :func:`_render_error`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dkmap.output.console import create_console, get_output, style_for_input

if TYPE_CHECKING:
    from rich.console import Console

    from dkmap.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_settings(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dk.ok")
    op = Text(f"  {result.op}", style="dk.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="dk.key")
    if key == "file":
        v = Text(str(value), style="dk.path")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _beat_text(beat: list[Any]) -> Text:
    name, delay = beat
    text = Text(str(name), style=style_for_input(str(name)))
    if delay is not None:
        text.append(f" +{delay}ms", style="dk.delay")
    return text


def _rhythm_table(rhythms: list[dict[str, Any]]) -> Table:
    """Build a Rich Table with one row per freestyle rhythm."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="dk.char", no_wrap=True)
    table.add_column("Beats", justify="right")
    table.add_column("Sequence")

    for rhythm in rhythms:
        beats = rhythm.get("beats", [])
        sequence = Text(" -> ").join(_beat_text(beat) for beat in beats)
        table.add_row(Text(repr(rhythm.get("character", ""))), Text(str(len(beats))), sequence)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dk.error")
    op = Text(f"  {result.op}", style="dk.op")
    sep = Text(" - ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}"))


# ── Settings renderer ─────────────────────────────────────────────────


def _render_settings(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render validate/apply results: globals plus a rhythm table."""
    _status_line(console, result)
    for key in ("file", "source", "debounce", "combo_window", "microphone"):
        if key in result.data:
            _field(console, key, result.data[key])

    fallback = result.data.get("fallback")
    if fallback:
        console.print(
            Text.assemble(
                ("  fallback: ", "dk.key"),
                (fallback["code"], "dk.warning"),
                f" ({fallback['message']})",
            )
        )

    rhythms = result.data.get("rhythms") or []
    _field(console, "rhythms", len(rhythms))
    if rhythms:
        console.print()
        console.print(_rhythm_table(rhythms))
    if verbose:
        _render_meta(console, result)
