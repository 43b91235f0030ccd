from __future__ import annotations
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
from typing import Literal

from core.errors import InvalidArgumentError, InvalidStateError
from core.events import snapshot_dump
from core.timing.stopwatch import Stopwatch
from sdk.registry import REGISTRY, StopwatchRegistry

app = FastAPI(title="Stopwatch API")

Action = Literal["start", "lap", "stop", "reset"]

class CreateStopwatch(BaseModel):
    id: str

def get_registry() -> StopwatchRegistry:
    return REGISTRY

def _lookup(registry: StopwatchRegistry, stopwatch_id: str) -> Stopwatch:
    sw = registry.get(stopwatch_id)
    if sw is None:
        raise HTTPException(status_code=404, detail=f"unknown stopwatch {stopwatch_id!r}")
    return sw

@app.get("/stopwatches")
def list_stopwatches(registry: StopwatchRegistry = Depends(get_registry)):
    items = sorted(registry.snapshots(), key=lambda s: s.id)
    return {"stopwatches": [snapshot_dump(s) for s in items]}

@app.get("/stopwatches/{stopwatch_id}")
def get_stopwatch(stopwatch_id: str, registry: StopwatchRegistry = Depends(get_registry)):
    return snapshot_dump(_lookup(registry, stopwatch_id).snapshot())

@app.post("/stopwatches", status_code=201)
def create_stopwatch(body: CreateStopwatch, registry: StopwatchRegistry = Depends(get_registry)):
    try:
        sw = registry.create(body.id)
    except InvalidArgumentError as exc:
        # duplicate -> 409, empty id -> 422
        raise HTTPException(status_code=409 if body.id in registry else 422, detail=str(exc)) from exc
    return snapshot_dump(sw.snapshot())

@app.post("/stopwatches/{stopwatch_id}/{action}")
def act(stopwatch_id: str, action: Action, registry: StopwatchRegistry = Depends(get_registry)):
    sw = _lookup(registry, stopwatch_id)
    try:
        getattr(sw, action)()
    except InvalidStateError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return snapshot_dump(sw.snapshot())
