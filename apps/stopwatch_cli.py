from __future__ import annotations

import json
import threading
import time
from typing import List, Optional

import typer
from pydantic import ValidationError

from core.errors import StopwatchError
from core.events import snapshot_dump
from core.timing.stopwatch import Stopwatch
from sdk.config import load_config
from sdk.logging import configure_logging
from sdk.registry import StopwatchRegistry


app = typer.Typer(add_completion=False, no_args_is_help=True)


def _format(sw: Stopwatch, precision: int) -> str:
    laps = ", ".join(f"{ms:.{precision}f}" for ms in sw.get_lap_times())
    return f"{sw.id}: [{laps}] total={sw.elapsed_ms:.{precision}f}ms"


def _run_laps(sw: Stopwatch, laps: int, interval: float) -> None:
    sw.start()
    for _ in range(laps - 1):
        time.sleep(interval)
        sw.lap()
    time.sleep(interval)
    sw.stop()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override STOPWATCH_LOG_LEVEL"),
) -> None:
    """Drive named stopwatches from the command line."""

    try:
        configure_logging(log_level)
    except ValidationError as exc:
        typer.echo(f"[stopwatch] invalid STOPWATCH_* setting: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command()
def demo(
    count: int = typer.Option(4, "--count", "-c", min=1, help="Number of stopwatches, one thread each"),
    laps: int = typer.Option(3, "--laps", "-l", min=1, help="Laps per stopwatch (the last one is the stop)"),
    interval: float = typer.Option(0.01, help="Seconds slept before each lap"),
    prefix: str = typer.Option("sw", help="Id prefix; ids are <prefix>-<n>"),
    as_json: bool = typer.Option(False, "--json", help="Print snapshots as JSON lines"),
) -> None:
    """Run COUNT stopwatches concurrently and print their laps."""

    cfg = load_config()
    registry = StopwatchRegistry()
    try:
        watches = [registry.create(f"{prefix}-{i}") for i in range(count)]
    except StopwatchError as exc:
        typer.echo(f"[stopwatch] {exc}", err=True)
        raise typer.Exit(code=1)

    threads: List[threading.Thread] = [
        threading.Thread(target=_run_laps, args=(sw, laps, interval), daemon=True)
        for sw in watches
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for sw in sorted(registry.list(), key=lambda s: s.id):
        if as_json:
            typer.echo(json.dumps(snapshot_dump(sw.snapshot())))
        else:
            typer.echo(_format(sw, cfg.summary_precision))


@app.command()
def pause(
    name: str = typer.Option("paused", "--name", "-n", help="Stopwatch id"),
    run: float = typer.Option(0.05, help="Seconds measured before and after the pause"),
    gap: float = typer.Option(0.1, help="Seconds spent stopped; not counted"),
) -> None:
    """Show that stop() then start() resumes the last lap without the gap."""

    cfg = load_config()
    registry = StopwatchRegistry()
    try:
        sw = registry.create(name)
    except StopwatchError as exc:
        typer.echo(f"[stopwatch] {exc}", err=True)
        raise typer.Exit(code=1)
    sw.start()
    time.sleep(run)
    sw.stop()
    time.sleep(gap)
    sw.start()
    time.sleep(run)
    sw.stop()
    typer.echo(_format(sw, cfg.summary_precision))


if __name__ == "__main__":
    app()
