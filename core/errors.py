"""Error kinds raised by stopwatches and the registry."""

from __future__ import annotations


class StopwatchError(Exception):
    """Base class for misuse of a stopwatch or registry."""


class InvalidArgumentError(StopwatchError, ValueError):
    """Raised by ``create`` for a missing, empty or duplicate id."""


class InvalidStateError(StopwatchError, RuntimeError):
    """Raised when an operation is not allowed in the current state."""


__all__ = ["StopwatchError", "InvalidArgumentError", "InvalidStateError"]
