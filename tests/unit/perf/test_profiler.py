"""Tests for PerformanceProfiler."""

from __future__ import annotations

import logging

import pytest

from padcoach.perf.profiler import PerformanceProfiler


def test_report_example():
    prof = PerformanceProfiler()
    for us in (10, 20, 30):
        prof.record_timing("x", us)
    assert prof.report() == ["x - Avg: 20us, Min: 10us, Max: 30us"]


def test_average_is_floored():
    prof = PerformanceProfiler()
    prof.record_timing("y", 1)
    prof.record_timing("y", 2)
    assert prof.stats("y") == (1, 1, 2)


def test_report_sorted_and_logged(caplog):
    prof = PerformanceProfiler()
    prof.record_timing("tick", 5)
    prof.record_timing("route", 7)
    with caplog.at_level(logging.INFO):
        lines = prof.report()
    assert [line.split(" - ")[0] for line in lines] == ["route", "tick"]
    assert "tick - Avg: 5us" in caplog.text


def test_empty_report():
    assert PerformanceProfiler().report() == []
    assert PerformanceProfiler().stats("nothing") is None


def test_series_capped_oldest_first():
    prof = PerformanceProfiler(capacity=1000)
    for i in range(1500):
        prof.record_timing("z", i)
    series = prof.timings["z"]
    assert len(series) == 1000
    assert series[0] == 500
    assert prof.stats("z") == (999, 500, 1499)


def test_timer_records_once():
    prof = PerformanceProfiler()
    with prof.timer("block"):
        pass
    assert len(prof.timings["block"]) == 1
    assert prof.timings["block"][0] >= 0


def test_timer_records_on_exception():
    prof = PerformanceProfiler()
    with pytest.raises(ValueError):
        with prof.timer("fails"):
            raise ValueError("nope")
    assert len(prof.timings["fails"]) == 1


def test_timer_records_on_early_return():
    prof = PerformanceProfiler()

    def work(flag: bool) -> int:
        with prof.timer("work"):
            if flag:
                return 1
            return 2

    work(True)
    work(False)
    assert len(prof.timings["work"]) == 2


def test_clear():
    prof = PerformanceProfiler()
    prof.record_timing("a", 1)
    prof.clear()
    assert prof.report() == []
