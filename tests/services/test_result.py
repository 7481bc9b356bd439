"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from shopkit.domain.outcome import RuleError
from shopkit.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult.success("calculate_discount", discounted_price=90.0)
        assert result.ok is True
        assert result.op == "calculate_discount"
        assert result.data == {"discounted_price": 90.0}
        assert result.warnings == []
        assert result.error is None

    def test_failure_from_rule_error(self) -> None:
        err = RuleError(code="INVALID_PRICE", message="Invalid price", field="price")
        result = ServiceResult.failure("calculate_discount", err)
        assert result.ok is False
        assert result.error == ServiceError(
            code="INVALID_PRICE", message="Invalid price", detail={"field": "price"}
        )

    def test_failure_from_service_error(self) -> None:
        err = ServiceError(code="E001", message="bad")
        assert ServiceResult.failure("op", err).error is err

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("can_drive", allowed=True)
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["allowed"] is True

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E001", message="bad").detail == {}

    def test_rule_error_without_field(self) -> None:
        err = ServiceError.from_rule_error(RuleError(code="X", message="Invalid x"))
        assert err.detail == {}
