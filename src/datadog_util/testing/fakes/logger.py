"""Testing fakes – RecordingLogger."""
from __future__ import annotations

from typing import Any


class RecordingLogger:
    """Logger sink that keeps ``(level, message)`` pairs in :attr:`records`."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.records.append(("debug", event))

    def info(self, event: str, **kw: Any) -> None:
        self.records.append(("info", event))

    def warning(self, event: str, **kw: Any) -> None:
        self.records.append(("warning", event))

    def error(self, event: str, **kw: Any) -> None:
        self.records.append(("error", event))

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]

    @property
    def last(self) -> tuple[str, str] | None:
        return self.records[-1] if self.records else None


__all__ = ["RecordingLogger"]
