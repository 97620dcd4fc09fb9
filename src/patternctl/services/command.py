"""CommandService — runs the Command demo."""

from __future__ import annotations

import logging
import time

from patternctl.domain.command import ComplexCommand, Invoker, Receiver, SimpleCommand
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CommandService(BaseService):
    """Parameterizes an invoker with the simple and complex commands."""

    def run(self, *, on_start: bool = True, on_finish: bool = True) -> ServiceResult:
        """Run the invoker with either command optionally left unset."""
        op = "command_demo"
        started = time.perf_counter()
        cfg = self._settings.command
        transcript = self._transcript()

        invoker = Invoker(transcript)
        if on_start:
            invoker.set_on_start(SimpleCommand(cfg.simple_payload, transcript))

        if on_finish:
            receiver = Receiver(transcript)
            invoker.set_on_finish(
                ComplexCommand(receiver, cfg.receiver_a, cfg.receiver_b, transcript)
            )

        invoker.run()
        logger.debug(
            "Invoker ran with on_start=%s on_finish=%s",
            invoker.on_start and invoker.on_start.name,
            invoker.on_finish and invoker.on_finish.name,
        )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "on_start": invoker.on_start.name if invoker.on_start else None,
                "on_finish": invoker.on_finish.name if invoker.on_finish else None,
                "lines": transcript.lines,
            },
            meta=self._meta(started, transcript),
        )
