"""Tests for ServiceResult, ServiceError, and ErrorCode."""

import json

import pytest
from pydantic import ValidationError

from flatkit.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="flatten", data={"result": [1, 2]})
        assert result.ok is True
        assert result.op == "flatten"
        assert result.data == {"result": [1, 2]}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_constructor(self) -> None:
        result = ServiceResult.failure("inspect", ErrorCode.INVALID_JSON, "bad input", line=1)
        assert result.ok is False
        assert result.op == "inspect"
        assert result.data == {}
        assert result.error is not None
        assert result.error.code is ErrorCode.INVALID_JSON
        assert result.error.message == "bad input"
        assert result.error.detail == {"line": 1}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="flatten",
            data={"result": [1, [2]]},
            meta={"duration_ms": 0.5},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["result"] == [1, [2]]
        assert parsed["meta"]["duration_ms"] == 0.5

    def test_error_code_serializes_as_string(self) -> None:
        result = ServiceResult.failure("flatten", ErrorCode.INPUT_TOO_DEEP, "too deep")
        parsed = json.loads(result.model_dump_json())
        assert parsed["error"]["code"] == "INPUT_TOO_DEEP"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code=ErrorCode.INVALID_JSON, message="bad")
        assert error.detail == {}

    def test_code_from_string(self) -> None:
        assert ServiceError(code="INPUT_TOO_DEEP", message="x").code is ErrorCode.INPUT_TOO_DEEP

    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="E001", message="bad")
