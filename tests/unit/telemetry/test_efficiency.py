"""Tests for the TTL-memoized efficiency metric."""

import pytest

from padcoach.telemetry.efficiency import EfficiencyCache


def test_ratio():
    cache = EfficiencyCache()
    assert cache.get(50.0, 100.0, now=0.0) == pytest.approx(50.0)


def test_zero_time_is_zero():
    cache = EfficiencyCache()
    assert cache.get(50.0, 0.0, now=0.0) == 0.0


def test_stale_within_ttl():
    cache = EfficiencyCache(ttl=1.0)
    first = cache.get(10.0, 100.0, now=5.0)
    # Inputs changed, but we are still inside the TTL.
    assert cache.get(90.0, 100.0, now=5.999) == first
    assert cache.computed_at == 5.0


def test_recomputes_after_ttl():
    cache = EfficiencyCache(ttl=1.0)
    cache.get(10.0, 100.0, now=5.0)
    assert cache.get(90.0, 100.0, now=6.0) == pytest.approx(90.0)
    assert cache.computed_at == 6.0


def test_invalidate_forces_recompute():
    cache = EfficiencyCache(ttl=1.0)
    cache.get(10.0, 100.0, now=5.0)
    cache.invalidate()
    assert cache.computed_at is None
    assert cache.get(30.0, 100.0, now=5.1) == pytest.approx(30.0)


def test_zero_value_is_still_cached():
    cache = EfficiencyCache(ttl=1.0)
    assert cache.get(0.0, 0.0, now=0.0) == 0.0
    assert cache.get(50.0, 100.0, now=0.5) == 0.0
