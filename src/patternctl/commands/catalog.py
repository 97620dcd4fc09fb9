"""Commands: list the demos, or run all of them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl demos
  patternctl -q demos""",
)
@click.pass_obj
def demos(app: AppContext) -> None:
    """List the available pattern demos."""
    from patternctl.services.catalog import list_demos

    app.emit(list_demos())


@click.command(
    "run-all",
    cls=PatternCommand,
    examples="""\
  patternctl run-all
  patternctl --json run-all""",
)
@click.pass_obj
def run_all(app: AppContext) -> None:
    """Run every demo in order."""
    from patternctl.services.catalog import run_all as run_all_demos

    app.emit(run_all_demos(app.settings))
