"""Demo catalog — name-to-service dispatch and the run-everything op."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from patternctl.domain.narration import Transcript
from patternctl.domain.types import DemoName
from patternctl.services.chain import ChainService
from patternctl.services.command import CommandService
from patternctl.services.result import ServiceResult
from patternctl.services.state import StateService

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings

logger = logging.getLogger(__name__)

PATTERNS: dict[DemoName, str] = {
    DemoName.CHAIN: "Chain of Responsibility",
    DemoName.COMMAND: "Command",
    DemoName.STATE: "Shared state container",
}

_RUNNERS: dict[DemoName, Callable[[PatternSettings], ServiceResult]] = {
    DemoName.CHAIN: lambda s: ChainService(s).run(),
    DemoName.COMMAND: lambda s: CommandService(s).run(),
    DemoName.STATE: lambda s: StateService(s).run(),
}


def list_demos() -> ServiceResult:
    """Describe every runnable demo."""
    items = [{"id": name.value, "pattern": PATTERNS[name]} for name in DemoName]
    return ServiceResult(ok=True, op="list_demos", data={"count": len(items), "items": items})


def run_demo(name: str, settings: PatternSettings) -> ServiceResult:
    """Run one demo by catalog name."""
    try:
        demo = DemoName(name)
    except ValueError:
        known = ", ".join(d.value for d in DemoName)
        return ServiceResult.failure(
            "run_demo",
            "UNKNOWN_DEMO",
            f"Unknown demo '{name}' (expected one of: {known})",
            name=name,
        )
    logger.debug("Running demo %s", demo.value)
    return _RUNNERS[demo](settings)


def run_all(settings: PatternSettings) -> ServiceResult:
    """Run every demo in catalog order; transcripts are separated by a blank line."""
    op = "run_all"
    started = time.perf_counter()
    transcript = Transcript()
    demos: list[str] = []
    warnings: list[str] = []

    for demo in DemoName:
        result = run_demo(demo.value, settings)
        if not result.ok:
            return ServiceResult(ok=False, op=op, error=result.error, data={"demos": demos})
        if demos:
            transcript.say()
        transcript.extend(result.lines)
        warnings.extend(result.warnings)
        demos.append(demo.value)

    meta = None
    if settings.verbose:
        meta = {"duration_ms": round((time.perf_counter() - started) * 1000, 3)}
    return ServiceResult(
        ok=True,
        op=op,
        data={"demos": demos, "lines": transcript.lines},
        warnings=warnings,
        meta=meta,
    )
