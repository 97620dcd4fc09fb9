"""Shared pytest fixtures and test helpers for patternctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patternctl.config.settings import PatternSettings
from patternctl.domain.narration import Transcript

_CLASSIC_CHAIN = [
    "Chain: Monkey > Squirrel > Dog",
    "",
    "Client: Who wants a Nut?",
    "Monkey can't eat the Nut",
    "   Squirrel: I'll eat the Nut.",
    "Client: Who wants a Banana?",
    "   Monkey: I'll eat the Banana.",
    "Client: Who wants a Cup of coffee?",
    "Monkey can't eat the Cup of coffee",
    "Squirrel can't eat the Cup of coffee",
    "Dog can't eat the Cup of coffee",
    "   Cup of coffee was left untouched.",
    "",
    "Subchain: Squirrel > Dog",
    "",
    "Client: Who wants a Nut?",
    "   Squirrel: I'll eat the Nut.",
    "Client: Who wants a Banana?",
    "Squirrel can't eat the Banana",
    "Dog can't eat the Banana",
    "   Banana was left untouched.",
    "Client: Who wants a Cup of coffee?",
    "Squirrel can't eat the Cup of coffee",
    "Dog can't eat the Cup of coffee",
    "   Cup of coffee was left untouched.",
]

_CLASSIC_COMMAND = [
    "Invoker: Does anybody want something done before I begin?",
    "SimpleCommand: See, I can do simple things like printing (Say Hi!)",
    "Invoker: ...doing something really important...",
    "Invoker: Does anybody want something done after I finish?",
    "ComplexCommand: Complex stuff should be done by a receiver object.",
    "Receiver: Working on (Send email.)",
    "Receiver: Also working on (Save report.)",
]

_CLASSIC_STATE = [
    "Hello, World!",
    "",
    "Initial state",
    "Initial state",
    "Second state",
    "Second state",
]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("patternctl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture(autouse=True)
def _no_ambient_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no PATTERNCTL_* overrides."""
    for name in list(os.environ):
        if name.startswith("PATTERNCTL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def settings(tmp_path: Path) -> PatternSettings:
    """Default settings; no patternctl.toml exists under tmp_path."""
    return PatternSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def classic_chain() -> list[str]:
    """Transcript of the original Chain of Responsibility console demo."""
    return list(_CLASSIC_CHAIN)


@pytest.fixture
def classic_command() -> list[str]:
    """Transcript of the original Command console demo."""
    return list(_CLASSIC_COMMAND)


@pytest.fixture
def classic_state() -> list[str]:
    """Transcript of the original state container console demo."""
    return list(_CLASSIC_STATE)
