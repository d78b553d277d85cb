"""Tests for the per-map graph memo."""

from padcoach.nav.cache import NavGraphCache
from padcoach.nav.pads import STANDARD_PADS


def test_same_map_reuses_graph():
    cache = NavGraphCache()
    g1 = cache.get("stadium_p")
    g2 = cache.get("stadium_p")
    assert g1 is g2
    assert cache.builds == 1
    assert len(g1) == len(STANDARD_PADS)


def test_map_change_rebuilds():
    cache = NavGraphCache()
    g1 = cache.get("stadium_p")
    g2 = cache.get("hoopsstadium_p")
    assert g1 is not g2
    assert cache.builds == 2
    assert cache.map_id == "hoopsstadium_p"
    # Only one map is remembered.
    g3 = cache.get("stadium_p")
    assert g3 is not g1
    assert cache.builds == 3


def test_unknown_map_is_empty_not_error():
    cache = NavGraphCache()
    graph = cache.get("mystery_p")
    assert graph.empty
    assert cache.get("mystery_p") is graph
    assert cache.builds == 1


def test_caches_are_independent():
    a, b = NavGraphCache(), NavGraphCache()
    a.get("stadium_p")
    assert b.map_id is None
    assert b.builds == 0


def test_clear():
    cache = NavGraphCache()
    cache.get("stadium_p")
    cache.clear()
    cache.get("stadium_p")
    assert cache.builds == 2
