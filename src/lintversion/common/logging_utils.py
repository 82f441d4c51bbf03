"""Logging helpers shared across modules.

Keeps DEBUG tracing cheap: callers guard structured records with
``is_debug_enabled`` so the ``extra`` payload is only built when it will be
emitted.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Union

from lintversion.constants import Constants


def configure_logging(level: Union[int, str] = logging.WARNING, fmt: Optional[str] = None) -> None:
    """Attach a stream handler to the package logger.

    Args:
        level: Logging level name or number.
        fmt: Optional format string; defaults to Constants.LOG_FORMAT.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root = logging.getLogger("lintversion")
    root.setLevel(level)
    if not any(getattr(h, "_lintversion", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or Constants.LOG_FORMAT))
        handler._lintversion = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` payload for structured log records, dropping None values."""
    return {k: v for k, v in fields.items() if v is not None}


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Elapsed milliseconds; keeps counting while still inside the block."""
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 3)
