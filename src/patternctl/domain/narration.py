"""Narration sink for demo participants.

Every participant writes its console lines through a :class:`Narrator`
instead of printing, so a run produces an ordered transcript that the
output layer renders and the tests inspect.
"""

from __future__ import annotations

from typing import Protocol


class Narrator(Protocol):
    """Anything that accepts one line of narration at a time."""

    def say(self, line: str = "") -> None: ...


class Transcript:
    """Narrator that records lines in order."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def say(self, line: str = "") -> None:
        """Record *line*; embedded newlines become separate lines."""
        self._lines.extend(line.split("\n"))

    def extend(self, lines: list[str]) -> None:
        for line in lines:
            self.say(line)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
