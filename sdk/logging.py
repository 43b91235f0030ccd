from __future__ import annotations
import logging
from typing import IO, Optional
from .config import load_config

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGERS = ("core", "sdk", "apps")

_handler: Optional[logging.Handler] = None

def configure_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Route project logs to ``stream`` (stderr) at ``level``; the root logger is left alone."""
    global _handler
    reset_logging()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(FORMAT))
    lvl = (level or load_config().log_level).upper()
    for name in LOGGERS:
        log = logging.getLogger(name)
        log.addHandler(handler)
        log.setLevel(lvl)
    _handler = handler
    return handler

def reset_logging() -> None:
    global _handler
    for name in LOGGERS:
        log = logging.getLogger(name)
        if _handler is not None:
            log.removeHandler(_handler)
        log.setLevel(logging.NOTSET)
    _handler = None
