"""StateService — runs the state container demo."""

from __future__ import annotations

import time

from patternctl.domain.state import ClientClass, StateContainer
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult


class StateService(BaseService):
    """Shows one container through a client and through its own getter."""

    def run(self, *, initial: str | None = None, second: str | None = None) -> ServiceResult:
        """Show the initial state, change it, and show it again.

        *initial* and *second* default to the ``[state]`` config values.
        """
        op = "state_demo"
        started = time.perf_counter()
        cfg = self._settings.state
        first_value = cfg.initial if initial is None else initial
        second_value = cfg.second if second is None else second

        transcript = self._transcript()
        transcript.say(cfg.greeting)
        transcript.say()

        container = StateContainer(first_value)
        client = ClientClass(container, transcript)

        client.show_state()
        transcript.say(container.get_state())

        client.change_my_class_state(second_value)
        client.show_state()
        transcript.say(container.get_state())

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "initial": first_value,
                "final": container.get_state(),
                "lines": transcript.lines,
            },
            meta=self._meta(started, transcript),
        )
