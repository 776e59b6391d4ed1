"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from datadog_util.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and list fields whose values must never be
    echoed in ``_secret_fields``.  ``_validate`` runs after construction,
    whether the instance came from a loader or from code.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``DATADOG`` + ``api_key`` -> ``DATADOG_API_KEY``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def is_secret(cls, field_name: str) -> bool:
        return field_name in cls._secret_fields

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _invalid(self, field_name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(
            field_name,
            getattr(self, field_name),
            reason,
            env_key=self.env_key(field_name),
            secret=self.is_secret(field_name),
        )

    def _require_positive(self, *field_names: str) -> None:
        for name in field_names:
            if getattr(self, name) <= 0:
                raise self._invalid(name, "must be positive")


__all__ = ["Settings"]
