from .profiler import PerformanceProfiler, ScopedTimer

__all__ = ["PerformanceProfiler", "ScopedTimer"]
