"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from insight_logs.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from insight_logs.kernel.errors import (
    BackingStoreUnavailableError,
    DomainError,
    InfrastructureError,
    InsightError,
    RejectedLevelError,
    SerializationError,
    ValidationError,
)


class TestInsightError:
    def test_message_is_stored(self) -> None:
        err = InsightError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert InsightError("m").code == "insight_error"

    def test_custom_code(self) -> None:
        assert InsightError("m", code="custom").code == "custom"

    def test_to_dict_flattens_detail(self) -> None:
        err = InsightError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"error": "InsightError", "code": "my_code", "message": "m", "key": "val"}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = InsightError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = InsightError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_detail_is_copied(self) -> None:
        detail = {"x": 1}
        InsightError("m", detail=detail).detail["y"] = 2
        assert detail == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(InsightError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DomainError, InsightError),
            (ValidationError, DomainError),
            (RejectedLevelError, DomainError),
            (ConfigError, InsightError),
            (MissingRequiredSettingError, ConfigError),
            (InvalidSettingValueError, ConfigError),
            (InfrastructureError, InsightError),
            (BackingStoreUnavailableError, InfrastructureError),
            (SerializationError, InfrastructureError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)


class TestRejectedLevelError:
    def test_carries_level(self) -> None:
        err = RejectedLevelError("debug")
        assert err.level == "debug"
        assert err.code == "rejected_level"
        assert "debug" in err.message
        assert err.to_dict()["level"] == "debug"

    def test_custom_message(self) -> None:
        err = RejectedLevelError("trace", "nope")
        assert err.message == "nope"


class TestValidationError:
    def test_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "page"}])
        assert err.to_dict()["errors"] == [{"field": "page"}]

    def test_errors_default_empty(self) -> None:
        err = ValidationError("bad")
        assert err.errors == []
        assert "errors" not in err.to_dict()


class TestInfrastructureErrors:
    def test_backing_store_default_message(self) -> None:
        err = BackingStoreUnavailableError("redis")
        assert err.resource == "redis"
        assert "redis" in err.message
        assert err.code == "backing_store_unavailable"
        assert err.to_dict()["resource"] == "redis"

    def test_backing_store_chains_cause(self) -> None:
        cause = OSError("connection refused")
        err = BackingStoreUnavailableError("redis", cause=cause)
        assert err.__cause__ is cause

    def test_serialization_payload_type(self) -> None:
        err = SerializationError("bad json", payload_type="context")
        assert err.payload_type == "context"
        assert err.code == "serialization_error"
        assert err.to_dict()["payload_type"] == "context"


class TestConfigErrors:
    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("INSIGHT_REDIS_URL")
        assert err.setting_name == "INSIGHT_REDIS_URL"
        assert err.to_dict()["setting"] == "INSIGHT_REDIS_URL"

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("log_ttl", 0, "must be positive")
        assert err.reason == "must be positive"
        assert err.to_dict()["value"] == "0"
