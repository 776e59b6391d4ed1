"""Application-layer errors."""

from __future__ import annotations

from typing import Any

from datadog_util.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AbortedError(ApplicationError):
    """An operation was abandoned because its abort signal fired."""

    default_code = "aborted"

    def __init__(
        self,
        message: str = "Operation aborted",
        *,
        reason: object = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.reason = reason


__all__ = ["AbortedError", "ApplicationError"]
