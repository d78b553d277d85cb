from .efficiency import EfficiencyCache
from .history import HistoryStore
from .session import KinematicSample, SessionMetrics, SessionTracker, TickDelta
from .spatial import Sample, SpatialAggregator

__all__ = [
    "EfficiencyCache",
    "HistoryStore",
    "KinematicSample",
    "Sample",
    "SessionMetrics",
    "SessionTracker",
    "SpatialAggregator",
    "TickDelta",
]
