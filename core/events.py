"""Snapshot models describing stopwatches at a point in time."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from sdk.ids import now_utc_ms


class StopwatchSnapshot(BaseModel):
    """Consistent, read-only view of one stopwatch."""

    id: str
    state: Literal["stopped", "running"]
    laps_ms: List[float] = Field(default_factory=list)
    total_ms: float = 0.0
    taken_ts_ms: int = Field(default_factory=now_utc_ms)

    @property
    def lap_count(self) -> int:
        return len(self.laps_ms)


def snapshot_dump(snapshot: StopwatchSnapshot) -> Dict[str, Any]:
    """Return a serialisable representation of ``snapshot``.

    Prefers :meth:`model_dump` (pydantic v2) and falls back to :meth:`dict`
    (v1) so callers always get a plain ``dict`` suitable for JSON.
    """

    if hasattr(snapshot, "model_dump"):
        return snapshot.model_dump()  # type: ignore[return-value]
    return snapshot.dict()  # type: ignore[return-value]


__all__ = ["StopwatchSnapshot", "snapshot_dump"]
