"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Ops without an entry are demo runs, whose narration is written out
verbatim rather than through Rich.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from patternctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from patternctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op not in _OP_RENDERERS:
        return _render_transcript(result, verbose=verbose)

    console = create_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).removesuffix("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="pat.ok")
    op = Text(f"  {result.op}", style="pat.op")
    console.print(label, op, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pat.error")
    op = Text(f"  {result.op}", style="pat.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_transcript(result: ServiceResult, *, verbose: bool = False) -> str:
    """Join demo narration as-is, one line per entry.

    Rich expands tabs and drops control characters, so only the verbose
    status line and meta block go through a console.
    """
    body = "\n".join(result.lines)
    if not verbose:
        return body

    head = create_console()
    _status_line(head, result)
    tail = create_console()
    _render_meta(tail, result)
    return (get_output(head) + body + "\n" + get_output(tail)).removesuffix("\n")


def _render_demo_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the demo catalog as a table."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Demo", style="pat.id")
    table.add_column("Pattern", style="pat.pattern")
    for item in result.data.get("items", []):
        table.add_row(item["id"], item["pattern"])
    console.print(table)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_demos": _render_demo_list,
}
