"""Thread-safe named stopwatch recording lap durations.

Stopwatches are normally obtained from :class:`sdk.registry.StopwatchRegistry`,
which validates ids and keeps track of every stopwatch it created. Building a
:class:`Stopwatch` directly skips both.

Durations are measured on a monotonic nanosecond clock and reported in
milliseconds.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, List

from core.errors import InvalidStateError
from core.events import StopwatchSnapshot
from sdk.ids import now_monotonic_ns, ns_to_ms

logger = logging.getLogger(__name__)


class StopwatchState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class Stopwatch:
    """A named stopwatch; equal to any other stopwatch with the same id.

    Calling :meth:`stop` and then :meth:`start` again works as a pause: the
    time spent stopped is not counted, and the last recorded lap is reopened
    so it keeps accumulating from where it was.
    """

    def __init__(self, stopwatch_id: str, clock: Callable[[], int] = now_monotonic_ns):
        self._id = stopwatch_id
        self._clock = clock
        self._lock = threading.Lock()
        self._state = StopwatchState.STOPPED
        self._laps_ns: List[int] = []
        self._last_ns = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def state(self) -> StopwatchState:
        with self._lock:
            return self._state

    @property
    def running(self) -> bool:
        return self.state is StopwatchState.RUNNING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Start, or resume after :meth:`stop`."""
        with self._lock:
            if self._state is StopwatchState.RUNNING:
                logger.warning("start() on running stopwatch %r", self._id)
                raise InvalidStateError(f"stopwatch {self._id!r} is already running")
            now = self._clock()
            if not self._laps_ns:
                self._last_ns = now
            else:
                self._last_ns = now - self._laps_ns.pop()
            self._state = StopwatchState.RUNNING
            logger.debug("stopwatch %r started", self._id)

    def lap(self) -> float:
        """Record the interval since the previous lap; return it in ms."""
        with self._lock:
            if self._state is StopwatchState.STOPPED:
                logger.warning("lap() on stopped stopwatch %r", self._id)
                raise InvalidStateError(f"stopwatch {self._id!r} must be running to lap")
            return ns_to_ms(self._record_lap())

    def stop(self) -> float:
        """Record the open interval as a final lap and stop; return it in ms."""
        with self._lock:
            if self._state is StopwatchState.STOPPED:
                logger.warning("stop() on stopped stopwatch %r", self._id)
                raise InvalidStateError(f"stopwatch {self._id!r} must be running to stop")
            d = self._record_lap()
            self._state = StopwatchState.STOPPED
            logger.debug("stopwatch %r stopped after %d laps", self._id, len(self._laps_ns))
            return ns_to_ms(d)

    def reset(self) -> None:
        with self._lock:
            self._state = StopwatchState.STOPPED
            self._laps_ns.clear()
            self._last_ns = 0
            logger.debug("stopwatch %r reset", self._id)

    def _record_lap(self) -> int:
        # caller holds self._lock
        now = self._clock()
        d = max(0, now - self._last_ns)
        self._laps_ns.append(d)
        self._last_ns = now
        return d

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_lap_times(self) -> List[float]:
        """Return a copy of the recorded lap times in milliseconds."""
        with self._lock:
            return [ns_to_ms(d) for d in self._laps_ns]

    @property
    def elapsed_ms(self) -> float:
        with self._lock:
            return ns_to_ms(self._elapsed_ns())

    def _elapsed_ns(self) -> int:
        total = sum(self._laps_ns)
        if self._state is StopwatchState.RUNNING:
            total += max(0, self._clock() - self._last_ns)
        return total

    def snapshot(self) -> StopwatchSnapshot:
        with self._lock:
            return StopwatchSnapshot(
                id=self._id,
                state=self._state.value,
                laps_ms=[ns_to_ms(d) for d in self._laps_ns],
                total_ms=ns_to_ms(self._elapsed_ns()),
            )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stopwatch):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"Stopwatch ID: {self._id} | laptimes: {self.get_lap_times()}"

    def __repr__(self) -> str:
        return f"Stopwatch(id={self._id!r}, state={self._state.value})"


__all__ = ["Stopwatch", "StopwatchState"]
