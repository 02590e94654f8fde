"""Timing helpers for load and export pipelines."""

from __future__ import annotations

from time import monotonic


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self) -> None:
        self.duration: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = monotonic()
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.duration = monotonic() - self._start
