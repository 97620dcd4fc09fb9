"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from patternctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="state_demo", data={"lines": ["a"]})
        assert result.ok is True
        assert result.warnings == []
        assert result.error is None
        assert result.lines == ["a"]

    def test_lines_default_empty(self) -> None:
        assert ServiceResult(ok=True, op="list_demos").lines == []

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("chain_demo", "UNKNOWN_HANDLER", "nope", entry="cat")
        assert result.ok is False
        assert result.error == ServiceError(
            code="UNKNOWN_HANDLER", message="nope", detail={"entry": "cat"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_shape(self) -> None:
        result = ServiceResult(ok=True, op="x", data={"lines": ["a", ""]})
        payload = json.loads(result.model_dump_json())
        assert payload["data"]["lines"] == ["a", ""]
        assert payload["error"] is None
