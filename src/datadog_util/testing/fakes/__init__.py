"""Testing fakes – in-memory doubles for clock, timer, transport and logger."""
from datadog_util.testing.fakes.clock import FakeClock
from datadog_util.testing.fakes.logger import RecordingLogger
from datadog_util.testing.fakes.timer import FakeIntervalTimer
from datadog_util.testing.fakes.transport import RecordingTransport, TransportCall
from datadog_util.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FakeIntervalTimer",
    "FrozenClock",
    "RecordingLogger",
    "RecordingTransport",
    "TransportCall",
]
