"""ChainService — runs the Chain of Responsibility demo.

The full demo builds Monkey > Squirrel > Dog, offers the configured foods
to the head of the chain, then offers them again to the configured
sub-chain entry to show that a chain can be entered at any link.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from patternctl.domain.chain import Handler, Offer, build_chain, offer
from patternctl.domain.narration import Transcript
from patternctl.domain.types import HandlerKind
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

CHAIN_ORDER: tuple[HandlerKind, ...] = (
    HandlerKind.MONKEY,
    HandlerKind.SQUIRREL,
    HandlerKind.DOG,
)

_HANDLER_NAMES = frozenset(k.value for k in HandlerKind)


def _offer_dicts(offers: list[Offer]) -> list[dict[str, Any]]:
    return [{"food": o.food, "result": o.result, "eaten": o.eaten} for o in offers]


class ChainService(BaseService):
    """Builds the handler chain and plays the client code against it."""

    def _build(
        self, transcript: Transcript, kinds: Sequence[HandlerKind | str] = CHAIN_ORDER
    ) -> dict[HandlerKind, Handler]:
        handlers = build_chain(kinds, transcript)
        return {h.kind: h for h in handlers}

    def _session(
        self,
        handler: Handler,
        foods: Sequence[str],
        transcript: Transcript,
        *,
        title: str,
    ) -> dict[str, Any]:
        """Announce the chain, offer every food, and describe the outcome."""
        chain = handler.chain()
        transcript.say(f"{title}: {' > '.join(chain)}")
        transcript.say()
        offers = offer(handler, foods, transcript)
        logger.debug(
            "Offered %d foods to %s, %d eaten",
            len(offers),
            handler.label,
            sum(o.eaten for o in offers),
        )
        return {"entry": handler.kind.value, "chain": chain, "offers": _offer_dicts(offers)}

    def run(self, entry: str | None = None) -> ServiceResult:
        """Run the classic demo, or a single session starting at *entry*."""
        op = "chain_demo"
        started = time.perf_counter()
        cfg = self._settings.chain

        if entry is not None and str(entry) not in _HANDLER_NAMES:
            return self._unknown_handler(op, entry)

        transcript = self._transcript()
        handlers = self._build(transcript)
        head = handlers[CHAIN_ORDER[0]]

        entries: list[dict[str, Any]] = []
        if entry is None:
            entries.append(self._session(head, cfg.foods, transcript, title="Chain"))
            transcript.say()
            sub = handlers[cfg.subchain_entry]
            entries.append(self._session(sub, cfg.foods, transcript, title="Subchain"))
        else:
            start = handlers[HandlerKind(entry)]
            title = "Chain" if start is head else "Subchain"
            entries.append(self._session(start, cfg.foods, transcript, title=title))

        return ServiceResult(
            ok=True,
            op=op,
            data={"entries": entries, "lines": transcript.lines},
            meta=self._meta(started, transcript),
        )

    def offer(
        self,
        foods: Sequence[str],
        entry: str = HandlerKind.MONKEY,
        order: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Offer arbitrary *foods* to the chain starting at *entry*.

        *order* overrides the link order (defaults to Monkey > Squirrel > Dog);
        *entry* must be one of its links.
        """
        op = "chain_offer"
        started = time.perf_counter()

        if not foods:
            return ServiceResult.failure(op, "NO_REQUESTS", "No foods to offer")

        kinds = list(order) if order is not None else list(CHAIN_ORDER)
        for name in [*kinds, entry]:
            if str(name) not in _HANDLER_NAMES:
                return self._unknown_handler(op, name)
        if entry not in kinds:
            return ServiceResult.failure(
                op,
                "UNKNOWN_HANDLER",
                f"Handler '{entry}' is not part of the chain",
                entry=str(entry),
                chain=[str(k) for k in kinds],
            )

        repeated = sorted({str(k) for k in kinds if kinds.count(k) > 1})
        if repeated:
            return ServiceResult.failure(
                op,
                "CHAIN_CYCLE",
                f"Handler '{repeated[0]}' appears more than once in the chain",
                chain=[str(k) for k in kinds],
            )

        transcript = self._transcript()
        handlers = self._build(transcript, kinds)

        start = handlers[HandlerKind(entry)]
        session = self._session(start, foods, transcript, title="Chain")
        return ServiceResult(
            ok=True,
            op=op,
            data={"entries": [session], "lines": transcript.lines},
            meta=self._meta(started, transcript),
        )

    @staticmethod
    def _unknown_handler(op: str, name: str) -> ServiceResult:
        known = [k.value for k in HandlerKind]
        return ServiceResult.failure(
            op,
            "UNKNOWN_HANDLER",
            f"Unknown handler '{name}' (expected one of: {', '.join(known)})",
            entry=str(name),
        )
