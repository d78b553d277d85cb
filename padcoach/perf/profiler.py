"""Lightweight call timing for the per-frame hot path."""

from __future__ import annotations

import logging
import time
from collections import deque

from ..constants import TIMING_SERIES_CAP

logger = logging.getLogger(__name__)


class ScopedTimer:
    """Context manager that records its own duration exactly once on exit."""

    def __init__(self, profiler: PerformanceProfiler, name: str):
        self.profiler = profiler
        self.name = name
        self._start_ns = 0

    def __enter__(self) -> ScopedTimer:
        self._start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        elapsed_us = (time.perf_counter_ns() - self._start_ns) // 1000
        self.profiler.record_timing(self.name, elapsed_us)


class PerformanceProfiler:
    """Per-name timing series, each capped at the most recent samples."""

    def __init__(self, capacity: int = TIMING_SERIES_CAP):
        self.capacity = capacity
        self.timings: dict[str, deque[int]] = {}

    def record_timing(self, name: str, microseconds: int) -> None:
        series = self.timings.get(name)
        if series is None:
            series = self.timings[name] = deque(maxlen=self.capacity)
        series.append(int(microseconds))

    def timer(self, name: str) -> ScopedTimer:
        """Time a block: ``with profiler.timer("tick"): ...``"""
        return ScopedTimer(self, name)

    def stats(self, name: str) -> tuple[int, int, int] | None:
        """(avg, min, max) in microseconds, or None with no samples."""
        series = self.timings.get(name)
        if not series:
            return None
        return sum(series) // len(series), min(series), max(series)

    def report(self) -> list[str]:
        """One summary line per timed name, also written to the log."""
        lines = []
        for name in sorted(self.timings):
            stats = self.stats(name)
            if stats is None:
                continue
            avg, lo, hi = stats
            line = f"{name} - Avg: {avg}us, Min: {lo}us, Max: {hi}us"
            logger.info(line)
            lines.append(line)
        return lines

    def clear(self) -> None:
        self.timings.clear()
