"""Tests for the Transcript narrator and domain enums."""

from __future__ import annotations

import pytest

from patternctl.domain.narration import Transcript
from patternctl.domain.types import DemoName, HandlerKind


class TestTranscript:
    def test_records_in_order(self) -> None:
        t = Transcript()
        t.say("one")
        t.say()
        t.say("two")
        assert t.lines == ["one", "", "two"]
        assert len(t) == 3

    def test_splits_embedded_newlines(self) -> None:
        t = Transcript()
        t.say("a\nb")
        assert t.lines == ["a", "b"]

    def test_lines_is_a_copy(self) -> None:
        t = Transcript()
        t.say("x")
        t.lines.append("y")
        assert t.lines == ["x"]

    def test_extend(self) -> None:
        t = Transcript()
        t.extend(["a", "", "b"])
        assert t.lines == ["a", "", "b"]


ENUM_CASES = [
    (HandlerKind, ["monkey", "squirrel", "dog"]),
    (DemoName, ["chain", "command", "state"]),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_in_order(enum_cls: type, expected_values: list[str]) -> None:
    assert [e.value for e in enum_cls] == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)
