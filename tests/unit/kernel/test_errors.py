"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from datadog_util.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from datadog_util.kernel.errors import (
    AbortedError,
    ApplicationError,
    BaseError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("oops").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("oops", code="custom").code == "custom"

    def test_str_is_message(self) -> None:
        assert str(BaseError("human readable")) == "human readable"

    def test_to_json(self) -> None:
        parsed = json.loads(BaseError("oops", code="oops").to_json())
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r

    def test_detail(self) -> None:
        err = BaseError("ctx", detail={"metric": "latency"})
        assert err.to_dict()["detail"]["metric"] == "latency"

    def test_cause(self) -> None:
        cause = ValueError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert "ValueError" in err.to_dict()["cause"]


class TestApplicationErrors:
    def test_aborted_defaults(self) -> None:
        err = AbortedError()
        assert err.code == "aborted"
        assert err.reason is None
        assert issubclass(AbortedError, ApplicationError)

    def test_aborted_reason(self) -> None:
        assert AbortedError(reason="shutdown").reason == "shutdown"

    def test_config_errors(self) -> None:
        missing = MissingRequiredSettingError("DATADOG_API_KEY", field="api_key")
        assert missing.message == "DATADOG_API_KEY must be set"
        assert missing.code == "missing_required_setting"
        invalid = InvalidSettingValueError("interval_seconds", -1, "must be positive")
        assert invalid.env_key == "interval_seconds"
        assert invalid.message == "interval_seconds=-1 must be positive"
        secret = InvalidSettingValueError("api_key", "k", "must not be empty", secret=True)
        assert secret.value == "***"
        for cls in (MissingRequiredSettingError, InvalidSettingValueError):
            assert issubclass(cls, ConfigError)
            assert issubclass(cls, ApplicationError)


class TestInfrastructureErrors:
    def test_external_service_error(self) -> None:
        err = ExternalServiceError("datadog", status_code=503)
        assert err.service == "datadog"
        assert err.status_code == 503
        assert "datadog" in err.message

    def test_timeout_is_infrastructure(self) -> None:
        assert issubclass(TimeoutError, InfrastructureError)

    def test_raises(self) -> None:
        with pytest.raises(InfrastructureError):
            raise ExternalServiceError("datadog", "boom")
