"""Command: Chain of Responsibility demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand
from patternctl.domain.types import HandlerKind

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext

_HANDLERS = [k.value for k in HandlerKind]


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl chain
  patternctl chain --entry squirrel
  patternctl chain --food MeatBall --food Banana
  patternctl chain --order dog,monkey --entry dog --food Banana
  patternctl --json chain""",
)
@click.option(
    "--entry",
    type=click.Choice(_HANDLERS),
    default=None,
    help="Send requests to this handler instead of running the full demo.",
)
@click.option(
    "--food",
    "foods",
    multiple=True,
    help="Food to offer (repeatable). Replaces the configured foods.",
)
@click.option(
    "--order",
    default=None,
    help="Comma-separated handler order used with --food (default: monkey,squirrel,dog).",
)
@click.pass_obj
def chain(
    app: AppContext,
    entry: str | None,
    foods: tuple[str, ...],
    order: str | None,
) -> None:
    """Pass food requests along a chain of animal handlers."""
    from patternctl.services.chain import ChainService

    svc = ChainService(app.settings)
    if foods or order:
        kinds = [k.strip() for k in order.split(",")] if order else None
        offered = list(foods) or list(app.settings.chain.foods)
        start = entry or (kinds[0] if kinds else HandlerKind.MONKEY.value)
        app.emit(svc.offer(offered, entry=start, order=kinds))
    else:
        app.emit(svc.run(entry=entry))
