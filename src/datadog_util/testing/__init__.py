"""Testing support – fakes for driving metrics and reporters deterministically."""

from datadog_util.testing.fakes import (
    FakeClock,
    FakeIntervalTimer,
    FrozenClock,
    RecordingLogger,
    RecordingTransport,
    TransportCall,
)

__all__ = [
    "FakeClock",
    "FakeIntervalTimer",
    "FrozenClock",
    "RecordingLogger",
    "RecordingTransport",
    "TransportCall",
]
