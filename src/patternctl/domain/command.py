"""Command — requests turned into stand-alone objects.

An :class:`Invoker` holds optional commands and triggers them around its
own work without knowing which concrete command or receiver is involved.
Commands either act on their own (:class:`SimpleCommand`) or delegate to
a :class:`Receiver` (:class:`ComplexCommand`).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from patternctl.domain.narration import Narrator

logger = logging.getLogger(__name__)


class Command(ABC):
    """A unit of work with a single no-argument action."""

    @abstractmethod
    def execute(self) -> None: ...

    @property
    def name(self) -> str:
        return type(self).__name__


class SimpleCommand(Command):
    """Command that handles its payload itself."""

    def __init__(self, payload: str, narrator: Narrator) -> None:
        self._payload = payload
        self._narrator = narrator

    def execute(self) -> None:
        self._narrator.say(
            f"SimpleCommand: See, I can do simple things like printing ({self._payload})"
        )


class Receiver:
    """Knows how to carry out the work behind a request. Holds no state."""

    def __init__(self, narrator: Narrator) -> None:
        self._narrator = narrator

    def do_something(self, a: str) -> None:
        self._narrator.say(f"Receiver: Working on ({a}.)")

    def do_something_else(self, b: str) -> None:
        self._narrator.say(f"Receiver: Also working on ({b}.)")


class ComplexCommand(Command):
    """Command that delegates to a receiver with its context arguments."""

    def __init__(self, receiver: Receiver, a: str, b: str, narrator: Narrator) -> None:
        self._receiver = receiver
        self._a = a
        self._b = b
        self._narrator = narrator

    def execute(self) -> None:
        self._narrator.say("ComplexCommand: Complex stuff should be done by a receiver object.")
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """Runs an optional on-start and on-finish command around its own work."""

    def __init__(self, narrator: Narrator) -> None:
        self._narrator = narrator
        self._on_start: Command | None = None
        self._on_finish: Command | None = None

    @property
    def on_start(self) -> Command | None:
        return self._on_start

    @property
    def on_finish(self) -> Command | None:
        return self._on_finish

    def set_on_start(self, command: Command | None) -> None:
        self._on_start = command

    def set_on_finish(self, command: Command | None) -> None:
        self._on_finish = command

    def run(self) -> None:
        """Execute on-start, do the work, execute on-finish. Unset steps are skipped."""
        self._narrator.say("Invoker: Does anybody want something done before I begin?")
        if self._on_start is not None:
            logger.debug("Executing on-start command %s", self._on_start.name)
            self._on_start.execute()

        self._narrator.say("Invoker: ...doing something really important...")

        self._narrator.say("Invoker: Does anybody want something done after I finish?")
        if self._on_finish is not None:
            logger.debug("Executing on-finish command %s", self._on_finish.name)
            self._on_finish.execute()

    do_something_important = run
