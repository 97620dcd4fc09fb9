"""State container — one mutable string behind a getter and a setter."""

from __future__ import annotations

import logging

from patternctl.domain.narration import Narrator

logger = logging.getLogger(__name__)


class StateContainer:
    """Holds exactly one textual value. No validation, no history."""

    def __init__(self, state: str) -> None:
        self._state = state

    def change_state(self, state: str) -> None:
        logger.debug("State changed from %r to %r", self._state, state)
        self._state = state

    def get_state(self) -> str:
        return self._state


class ClientClass:
    """Client that writes through to a shared container and can show it."""

    def __init__(self, container: StateContainer, narrator: Narrator) -> None:
        self._data = container
        self._narrator = narrator

    def change_my_class_state(self, state: str) -> None:
        self._data.change_state(state)

    def show_state(self) -> None:
        self._narrator.say(self._data.get_state())
