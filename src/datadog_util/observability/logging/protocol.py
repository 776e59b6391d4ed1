"""Observability – OptionalLogger protocol."""
from __future__ import annotations

from typing import Any, Literal, Protocol

LogLevel = Literal["debug", "info", "warning", "error"]


class OptionalLogger(Protocol):
    """Leveled logger sink.

    Every method is optional: a sink may implement only ``error``, only
    ``debug``, both, or any of the others.  structlog bound loggers and
    :class:`logging.Logger` instances both satisfy it.
    """

    def debug(self, event: str, **kw: Any) -> None: ...
    def error(self, event: str, **kw: Any) -> None: ...


def log_optional(sink: object | None, level: LogLevel, event: str, **kw: Any) -> None:
    """Call ``sink.<level>(event, **kw)`` if the sink exists and has that level."""
    if sink is None:
        return
    method = getattr(sink, level, None)
    if method is None:
        return
    if kw:
        method(event, **kw)
    else:
        method(event)


__all__ = ["LogLevel", "OptionalLogger", "log_optional"]
