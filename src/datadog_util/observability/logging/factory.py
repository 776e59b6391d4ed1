"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any, Mapping

import structlog

_SECRET_KEYS = frozenset({"api_key", "dd-api-key"})
_NOISY_LOGGERS = ("httpx", "httpcore")


def _mask(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: "***" if str(k).lower() in _SECRET_KEYS else _mask(v) for k, v in value.items()}
    return value


def mask_api_keys(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """structlog processor: hide ``api_key`` / ``DD-API-KEY`` values at any depth."""
    return _mask(event_dict)


class JsonLoggerFactory:
    """Route structlog and stdlib records to one JSON-lines handler on the root logger.

    httpx and httpcore log every submission at INFO; they are held at
    WARNING unless *level* is more verbose than INFO.
    """

    @staticmethod
    def configure(level: int = logging.INFO, *, stream: IO[str] | None = None) -> logging.Handler:
        pre_chain: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            mask_api_keys,
        ]
        structlog.configure(
            processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=pre_chain,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)

        noisy_level = level if level < logging.INFO else logging.WARNING
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(noisy_level)
        return handler


__all__ = ["JsonLoggerFactory", "mask_api_keys"]
