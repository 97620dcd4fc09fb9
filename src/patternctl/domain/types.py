"""Closed enumerations shared by the demos."""

from __future__ import annotations

from enum import StrEnum


class HandlerKind(StrEnum):
    """The three handlers of the Chain of Responsibility demo."""

    MONKEY = "monkey"
    SQUIRREL = "squirrel"
    DOG = "dog"


class DemoName(StrEnum):
    """Runnable demos, in catalog order."""

    CHAIN = "chain"
    COMMAND = "command"
    STATE = "state"
