from __future__ import annotations

from ..constants import EFFICIENCY_TTL_S


class EfficiencyCache:
    """Boost used per unit of session time, recomputed at most once per TTL.

    Within the TTL the previous value is returned even if the inputs have
    moved on; call invalidate() to force a fresh value sooner.
    """

    def __init__(self, ttl: float = EFFICIENCY_TTL_S):
        self.ttl = ttl
        self._value: float | None = None
        self.computed_at: float | None = None

    def get(self, total_used: float, total_time: float, now: float) -> float:
        if self._value is not None and self.computed_at is not None and now - self.computed_at < self.ttl:
            return self._value

        self._value = total_used / total_time * 100.0 if total_time > 0 else 0.0
        self.computed_at = now
        return self._value

    def invalidate(self) -> None:
        self._value = None
        self.computed_at = None
