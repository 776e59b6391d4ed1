"""Config validation errors.

Each error names the environment variable an operator has to fix, e.g.
``DATADOG_API_KEY``, and keeps the dataclass field it maps to in ``detail``.
Values of secret fields never reach the message.
"""
from __future__ import annotations

from datadog_util.kernel.errors import ApplicationError

_REDACTED = "***"


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, field: str | None = None) -> None:
        super().__init__(
            f"{env_key} must be set",
            detail={"env_key": env_key, "field": field},
        )
        self.env_key = env_key
        self.field = field


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable.

    *env_key* defaults to *field* for settings built directly in code.  With
    ``secret=True`` the offending value is replaced by ``***``.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        field: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
        secret: bool = False,
    ) -> None:
        self.field = field
        self.env_key = env_key or field
        self.value = _REDACTED if secret else value
        self.reason = reason
        super().__init__(
            f"{self.env_key}={self.value!r} {reason}",
            detail={"env_key": self.env_key, "field": field},
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
