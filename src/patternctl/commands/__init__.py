"""Subcommand modules for patternctl.

Provides register_commands() which attaches every demo command to the
root group.  Command modules import their services lazily so
``patternctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the demo commands and catalog commands on the root CLI group."""
    # --- Demos ---
    from patternctl.commands.chain import chain
    from patternctl.commands.command import command_cmd
    from patternctl.commands.state import state

    cli.add_command(chain)
    cli.add_command(command_cmd)
    cli.add_command(state)

    # --- Catalog ---
    from patternctl.commands.catalog import demos, run_all

    cli.add_command(demos)
    cli.add_command(run_all)
