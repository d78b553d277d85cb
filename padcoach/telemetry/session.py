"""Per-session boost statistics.

The tracker is fed one kinematic sample per frame and keeps the running
totals the HUD and the coaching triggers read. It does not touch the heatmap
itself; ingest() returns what changed this tick and the caller forwards the
consumption to the spatial aggregator.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from ..constants import EFFICIENCY_LOG_CAP, EFFICIENCY_LOG_EVICT, HISTORY_LOG_CAP, MAX_BOOST, MINOR_PAD_YIELD

Vec3 = tuple[float, float, float]

# Behavior labels, most specific first.
BEHAVIOR_STARVED = "starved"
BEHAVIOR_HOARDING = "hoarding"
BEHAVIOR_BOOSTING = "boosting"
BEHAVIOR_BALANCED = "balanced"


@dataclass(frozen=True)
class KinematicSample:
    """One frame of player state as reported by the host."""

    pos: Vec3
    speed: float
    boost: float  # 0-100
    timestamp: float


@dataclass(frozen=True)
class TickDelta:
    consumed: float = 0.0
    picked_up: float = 0.0


@dataclass
class SessionMetrics:
    """Running totals for one session."""

    session_start: float | None = None
    total_time: float = 0.0
    distance: float = 0.0
    avg_speed: float = 0.0
    samples: int = 0

    total_boost_used: float = 0.0
    big_pads: int = 0
    small_pads: int = 0

    ball_touches: int = 0
    demolitions: int = 0

    # Accumulated time per boost band
    time_at_low_boost: float = 0.0
    time_at_max_boost: float = 0.0
    time_with_no_boost: float = 0.0

    # Current uninterrupted stretch in each band
    low_boost_streak: float = 0.0
    max_boost_streak: float = 0.0

    last_boost: float | None = None
    last_pos: Vec3 | None = None
    behavior: str = BEHAVIOR_BALANCED

    efficiency_log: list[float] = field(default_factory=list)
    history_log: list[float] = field(default_factory=list)

    def record_efficiency(self, value: float) -> None:
        self.efficiency_log.append(value)
        if len(self.efficiency_log) > EFFICIENCY_LOG_CAP:
            del self.efficiency_log[:EFFICIENCY_LOG_EVICT]

    def add_history(self, values: Iterable[float]) -> None:
        """Append per-match averages, keeping only the most recent HISTORY_LOG_CAP."""
        self.history_log.extend(values)
        if len(self.history_log) > HISTORY_LOG_CAP:
            del self.history_log[:-HISTORY_LOG_CAP]

    @property
    def avg_boost_per_minute(self) -> float:
        if self.total_time <= 0:
            return 0.0
        return self.total_boost_used / (self.total_time / 60.0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the scalar totals for reports and JSON responses."""
        return {
            "session_start": self.session_start,
            "total_time": self.total_time,
            "distance": self.distance,
            "avg_speed": self.avg_speed,
            "total_boost_used": self.total_boost_used,
            "avg_boost_per_minute": self.avg_boost_per_minute,
            "big_pads": self.big_pads,
            "small_pads": self.small_pads,
            "ball_touches": self.ball_touches,
            "demolitions": self.demolitions,
            "time_at_low_boost": self.time_at_low_boost,
            "time_at_max_boost": self.time_at_max_boost,
            "time_with_no_boost": self.time_with_no_boost,
            "behavior": self.behavior,
        }


class SessionTracker:
    """Accumulates SessionMetrics from per-frame samples."""

    def __init__(self, low_boost_threshold: float = 20.0, low_boost_time: float = 3.0, max_boost_time: float = 5.0):
        self.low_boost_threshold = low_boost_threshold
        self.low_boost_time = low_boost_time
        self.max_boost_time = max_boost_time
        self.metrics = SessionMetrics()

    def ingest(self, sample: KinematicSample, dt: float) -> TickDelta:
        """Fold one frame into the session totals.

        Args:
            sample: Player state for this frame.
            dt: Seconds since the previous frame.

        Returns:
            Boost consumed and picked up since the previous frame.
        """
        m = self.metrics
        if m.session_start is None:
            m.session_start = sample.timestamp

        m.total_time += dt
        if m.last_pos is not None:
            m.distance += math.dist(m.last_pos, sample.pos)
        m.last_pos = sample.pos

        m.samples += 1
        m.avg_speed += (sample.speed - m.avg_speed) / m.samples

        consumed = 0.0
        picked_up = 0.0
        if m.last_boost is not None:
            change = sample.boost - m.last_boost
            if change < 0:
                consumed = -change
                m.total_boost_used += consumed
            elif change > 0:
                picked_up = change
                # A small pad never gives more than its yield.
                if change > MINOR_PAD_YIELD:
                    m.big_pads += 1
                else:
                    m.small_pads += 1
        m.last_boost = sample.boost

        if sample.boost < self.low_boost_threshold:
            m.time_at_low_boost += dt
            m.low_boost_streak += dt
        else:
            m.low_boost_streak = 0.0

        if sample.boost >= MAX_BOOST:
            m.time_at_max_boost += dt
            m.max_boost_streak += dt
        else:
            m.max_boost_streak = 0.0

        if sample.boost <= 0.0:
            m.time_with_no_boost += dt

        if m.low_boost_streak >= self.low_boost_time:
            m.behavior = BEHAVIOR_STARVED
        elif m.max_boost_streak >= self.max_boost_time:
            m.behavior = BEHAVIOR_HOARDING
        elif consumed > 0:
            m.behavior = BEHAVIOR_BOOSTING
        else:
            m.behavior = BEHAVIOR_BALANCED

        return TickDelta(consumed=consumed, picked_up=picked_up)

    def record_ball_touch(self) -> None:
        self.metrics.ball_touches += 1

    def record_demolition(self) -> None:
        self.metrics.demolitions += 1

    def reset(self) -> None:
        """Start a new session. The cross-session history log is kept."""
        history = self.metrics.history_log
        self.metrics = SessionMetrics(history_log=history)
