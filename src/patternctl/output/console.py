"""Rich Console factory and theme for patternctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PATTERN_THEME = Theme(
    {
        "pat.ok": "bold green",
        "pat.error": "bold red",
        "pat.op": "bold cyan",
        "pat.id": "bold blue",
        "pat.pattern": "bold",
    }
)


def create_console() -> Console:
    """Create a 120-column Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PATTERN_THEME,
        highlight=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
