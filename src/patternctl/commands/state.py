"""Command: shared state container demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl state
  patternctl state --initial draft --second published
  patternctl --json state""",
)
@click.option("--initial", default=None, help="Initial state (default from [state] config).")
@click.option("--second", default=None, help="State to switch to (default from [state] config).")
@click.pass_obj
def state(app: AppContext, initial: str | None, second: str | None) -> None:
    """Change a shared state container through a client and show it."""
    from patternctl.services.state import StateService

    app.emit(StateService(app.settings).run(initial=initial, second=second))
