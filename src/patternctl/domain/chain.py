"""Chain of Responsibility — handlers that eat food or pass it along.

Each handler either accepts a request (an exact match on one food) or
narrates its refusal and forwards the request to its successor.  The
chain can be entered at any link; earlier links are never visited.

Usage::

    transcript = Transcript()
    monkey, squirrel, dog = build_chain(list(HandlerKind), transcript)
    monkey.handle("Nut")  # -> "Squirrel: I'll eat the Nut."
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

from patternctl.domain.narration import Narrator
from patternctl.domain.types import HandlerKind

logger = logging.getLogger(__name__)


class ChainCycleError(ValueError):
    """Raised when linking a handler would make the chain loop back on itself."""


class Handler:
    """Base handler with the default forwarding behavior.

    Subclasses only declare what they accept and what they are called.
    """

    kind: ClassVar[HandlerKind]
    label: ClassVar[str]
    accepts: ClassVar[str]

    def __init__(self, narrator: Narrator) -> None:
        self._narrator = narrator
        self._next: Handler | None = None

    @property
    def next(self) -> Handler | None:
        return self._next

    def set_next(self, handler: Handler) -> Handler:
        """Link *handler* as successor and return it.

        Returning the argument allows ``monkey.set_next(squirrel).set_next(dog)``.
        """
        if any(link is self for link in handler.walk()):
            msg = f"Linking {handler.label} after {self.label} would create a cycle"
            raise ChainCycleError(msg)
        self._next = handler
        return handler

    def walk(self) -> Iterator[Handler]:
        """Yield this handler and every successor, in order."""
        node: Handler | None = self
        while node is not None:
            yield node
            node = node._next

    def chain(self) -> list[str]:
        """Labels of this handler and its successors."""
        return [h.label for h in self.walk()]

    def success_message(self, request: str) -> str:
        return f"{self.label}: I'll eat the {request}."

    def handle(self, request: str) -> str | None:
        """Consume *request* or forward it; ``None`` when nobody downstream took it."""
        if request == self.accepts:
            logger.debug("%s accepted %r", self.label, request)
            return self.success_message(request)

        self._narrator.say(f"{self.label} can't eat the {request}")
        logger.debug("%s rejected %r", self.label, request)
        if self._next is None:
            return None
        return self._next.handle(request)


class MonkeyHandler(Handler):
    kind = HandlerKind.MONKEY
    label = "Monkey"
    accepts = "Banana"


class SquirrelHandler(Handler):
    kind = HandlerKind.SQUIRREL
    label = "Squirrel"
    accepts = "Nut"


class DogHandler(Handler):
    kind = HandlerKind.DOG
    label = "Dog"
    accepts = "MeatBall"


HANDLER_TYPES: dict[HandlerKind, type[Handler]] = {
    HandlerKind.MONKEY: MonkeyHandler,
    HandlerKind.SQUIRREL: SquirrelHandler,
    HandlerKind.DOG: DogHandler,
}


def build_handler(kind: HandlerKind | str, narrator: Narrator) -> Handler:
    """Instantiate the handler for *kind* (raises ``ValueError`` if unknown)."""
    return HANDLER_TYPES[HandlerKind(kind)](narrator)


def build_chain(kinds: Sequence[HandlerKind | str], narrator: Narrator) -> list[Handler]:
    """Build handlers for *kinds* and link them in the given order."""
    handlers = [build_handler(kind, narrator) for kind in kinds]
    for current, successor in zip(handlers, handlers[1:]):
        current.set_next(successor)
    return handlers


@dataclass(frozen=True)
class Offer:
    """Outcome of offering one food to a chain."""

    food: str
    result: str | None

    @property
    def eaten(self) -> bool:
        return self.result is not None


def offer(handler: Handler, foods: Sequence[str], narrator: Narrator) -> list[Offer]:
    """Client code: offer each food to *handler* and narrate the outcome.

    The client only knows the single handler it was given, not whether
    it heads a chain.
    """
    offers: list[Offer] = []
    for food in foods:
        narrator.say(f"Client: Who wants a {food}?")
        result = handler.handle(food)
        if result is not None:
            narrator.say(f"   {result}")
        else:
            narrator.say(f"   {food} was left untouched.")
        offers.append(Offer(food=food, result=result))
    return offers
