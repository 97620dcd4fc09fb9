"""Command: Command pattern demo (invoker, commands, receiver)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    "command",
    cls=PatternCommand,
    examples="""\
  patternctl command
  patternctl command --no-on-start
  patternctl command --no-on-start --no-on-finish""",
)
@click.option("--no-on-start", is_flag=True, help="Leave the invoker's on-start command unset.")
@click.option("--no-on-finish", is_flag=True, help="Leave the invoker's on-finish command unset.")
@click.pass_obj
def command_cmd(app: AppContext, no_on_start: bool, no_on_finish: bool) -> None:
    """Run an invoker with simple and receiver-backed commands."""
    from patternctl.services.command import CommandService

    app.emit(
        CommandService(app.settings).run(on_start=not no_on_start, on_finish=not no_on_finish)
    )
