"""Logging helpers for the ErrorSet package namespace."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attach a single stream handler to the ``errorset`` logger.

    Calling it again is a no-op once a handler is installed.
    """

    root = logging.getLogger("errorset")
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"errorset.{name}")


@contextmanager
def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 100) -> Iterator[Dict[str, Any]]:
    """
    Log how long the wrapped block took.

    The yielded dict is attached to the record as ``extra``; callers fill in
    counters such as ``count`` while the block runs. Slow blocks log at
    WARNING, others at DEBUG.
    """

    stats: Dict[str, Any] = {"count": None}
    start = time.monotonic()
    try:
        yield stats
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
        logger.log(
            level,
            "%s took %.2fms (count=%s)",
            name,
            elapsed_ms,
            stats["count"],
            extra={**stats, "elapsed_ms": elapsed_ms},
        )
