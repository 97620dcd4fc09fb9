"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here reproduce the classic demo
output, and patternctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from patternctl.domain.types import HandlerKind

# --- patternctl.toml sections ---


class ChainConfig(BaseModel):
    """[chain] section."""

    model_config = {"frozen": True}

    foods: list[str] = Field(default_factory=lambda: ["Nut", "Banana", "Cup of coffee"])
    subchain_entry: HandlerKind = HandlerKind.SQUIRREL


class CommandConfig(BaseModel):
    """[command] section."""

    model_config = {"frozen": True}

    simple_payload: str = "Say Hi!"
    receiver_a: str = "Send email"
    receiver_b: str = "Save report"


class StateConfig(BaseModel):
    """[state] section."""

    model_config = {"frozen": True}

    greeting: str = "Hello, World!"
    initial: str = "Initial state"
    second: str = "Second state"
