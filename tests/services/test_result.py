"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from dialctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="run", data={"zero_landings": 3})
        assert result.ok is True
        assert result.op == "run"
        assert result.data == {"zero_landings": 3}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_DIRECTION", message="bad token")
        result = ServiceResult(ok=False, op="run", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DIRECTION"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="turn", data={"steps": [{"position": 0}]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["steps"][0]["position"] == 0

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="run")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
