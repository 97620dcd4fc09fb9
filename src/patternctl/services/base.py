"""BaseService — shared foundation for the demo services.

Every service receives the frozen :class:`PatternSettings` at
construction time and reads its literal data (foods, messages, states)
from the matching config section.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from patternctl.domain.narration import Transcript

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class StateService(BaseService):
            def run(self) -> ServiceResult:
                transcript = self._transcript()
                ...
    """

    def __init__(self, settings: PatternSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> PatternSettings:
        return self._settings

    def _transcript(self) -> Transcript:
        """Fresh narration sink for one demo run."""
        return Transcript()

    def _meta(self, started: float, transcript: Transcript) -> dict[str, Any] | None:
        """Timing and line count, only collected in verbose mode."""
        if not self._settings.verbose:
            return None
        return {
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            "line_count": len(transcript),
        }
