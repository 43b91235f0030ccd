from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple
from core.errors import InvalidArgumentError
from core.events import StopwatchSnapshot
from core.timing.stopwatch import Stopwatch
from .ids import now_monotonic_ns

logger = logging.getLogger(__name__)

class StopwatchRegistry:
    """Creates stopwatches under unique ids and remembers all of them.

    Ids are never removed or reused. Stopwatches are used directly once
    created; the registry is only needed again to enumerate or look them up.
    """
    def __init__(self, clock: Callable[[], int] = now_monotonic_ns):
        self._clock = clock
        self._lock = threading.Lock()
        self._map: Dict[str, Stopwatch] = {}

    def create(self, stopwatch_id: str) -> Stopwatch:
        if stopwatch_id is None:
            raise InvalidArgumentError("id cannot be None")
        if not isinstance(stopwatch_id, str):
            raise InvalidArgumentError(f"id must be a str, got {type(stopwatch_id).__name__}")
        if not stopwatch_id:
            raise InvalidArgumentError("id cannot be empty")
        with self._lock:
            if stopwatch_id in self._map:
                logger.warning("stopwatch id %r already exists", stopwatch_id)
                raise InvalidArgumentError(f"id {stopwatch_id!r} already exists")
            sw = Stopwatch(stopwatch_id, clock=self._clock)
            self._map[stopwatch_id] = sw
        logger.info("registered stopwatch %r", stopwatch_id)
        return sw

    def list(self) -> Tuple[Stopwatch, ...]:
        """Snapshot of every stopwatch created so far."""
        with self._lock:
            return tuple(self._map.values())

    def get(self, stopwatch_id: str) -> Optional[Stopwatch]:
        with self._lock:
            return self._map.get(stopwatch_id)

    def snapshots(self) -> List[StopwatchSnapshot]:
        return [sw.snapshot() for sw in self.list()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._map)

    def __contains__(self, stopwatch_id: object) -> bool:
        with self._lock:
            return stopwatch_id in self._map

REGISTRY = StopwatchRegistry()
