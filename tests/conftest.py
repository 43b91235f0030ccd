# tests/conftest.py
import threading

import pytest

from sdk.ids import NS_PER_MS
from sdk.logging import reset_logging
from sdk.registry import StopwatchRegistry


class FakeClock:
    """
    Monotonic nanosecond clock driven by the test.
    `tick_ms` is added after every read so concurrent callers see distinct instants.
    """

    def __init__(self, start_ms: int = 1_000, tick_ms: int = 0):
        self._now = start_ms * NS_PER_MS
        self._tick = tick_ms * NS_PER_MS
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = self._now
            self._now += self._tick
            return now

    def advance(self, ms: float) -> None:
        with self._lock:
            self._now += int(ms * NS_PER_MS)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return StopwatchRegistry(clock=clock)


@pytest.fixture
def make_clock():
    return FakeClock


@pytest.fixture(autouse=True)
def _restore_logging():
    # CLI runs attach handlers bound to CliRunner's temporary streams
    yield
    reset_logging()
