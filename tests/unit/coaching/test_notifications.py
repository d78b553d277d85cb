"""Tests for the notification scheduler."""

from __future__ import annotations

import logging

import pytest

from padcoach.coaching.notifications import Notification, NotificationKind, NotificationScheduler


def note(msg: str, lifetime: float = 3.0) -> Notification:
    return Notification(NotificationKind.CUSTOM, msg, lifetime=lifetime)


class TestShow:
    def test_show_appends(self):
        sched = NotificationScheduler()
        sched.show(note("a"))
        assert [n.message for n in sched.active] == ["a"]

    def test_capacity_evicts_oldest_inserted(self):
        sched = NotificationScheduler()
        # The first one has the most lifetime left; it still goes first.
        sched.show(note("n0", lifetime=100.0))
        for i in range(1, 5):
            sched.show(note(f"n{i}", lifetime=1.0))
        assert len(sched) == 5

        sched.show(note("n5"))
        assert len(sched) == 5
        assert [n.message for n in sched.active] == ["n1", "n2", "n3", "n4", "n5"]

    def test_never_exceeds_capacity(self):
        sched = NotificationScheduler(capacity=5)
        for i in range(50):
            sched.show(note(str(i)))
            assert len(sched) <= 5
        assert [n.message for n in sched.active] == ["45", "46", "47", "48", "49"]

    def test_active_is_a_copy(self):
        sched = NotificationScheduler()
        sched.show(note("a"))
        sched.active.clear()
        assert len(sched) == 1


class TestUpdate:
    def test_expiry(self):
        sched = NotificationScheduler()
        sched.show(note("short", lifetime=1.0))
        sched.show(note("long", lifetime=3.0))
        sched.update(0.5)
        assert len(sched) == 2
        sched.update(0.5)
        assert [n.message for n in sched.active] == ["long"]
        sched.update(2.0)
        assert len(sched) == 0

    def test_alpha_fades(self):
        n = note("x", lifetime=2.0)
        assert n.alpha == 1.0
        n.elapsed = 1.5
        assert n.alpha == pytest.approx(0.25)
        n.elapsed = 5.0
        assert n.alpha == 0.0

    def test_trigger_fires_every_true_tick(self):
        sched = NotificationScheduler()
        template = Notification(NotificationKind.LOW_RESOURCE, "low", lifetime=10.0)
        sched.register_trigger(lambda: True, template)
        fired = sched.update(0.1)
        sched.update(0.1)
        assert len(fired) == 1
        assert len(sched) == 2
        # Each firing gets its own copy of the template.
        assert sched.active[0] is not sched.active[1]
        assert template.elapsed == 0.0
        assert sched.active[0].elapsed == pytest.approx(0.1)

    def test_false_trigger_does_nothing(self):
        sched = NotificationScheduler()
        sched.register_trigger(lambda: False, note("never"))
        assert sched.update(0.1) == []
        assert len(sched) == 0

    def test_raising_trigger_is_logged_and_skipped(self, caplog):
        sched = NotificationScheduler()

        def broken() -> bool:
            raise RuntimeError("boom")

        sched.register_trigger(broken, note("broken"))
        sched.register_trigger(lambda: True, note("fine"))
        with caplog.at_level(logging.ERROR):
            fired = sched.update(0.1)
        assert [n.message for n in fired] == ["fine"]
        assert "Error in custom trigger" in caplog.text

    def test_clear(self):
        sched = NotificationScheduler()
        sched.show(note("a"))
        sched.clear()
        assert sched.active == []

    def test_to_dict(self):
        d = Notification(NotificationKind.HIGH_EFFICIENCY, "m", lifetime=2.0, color=(1.0, 0.0, 0.0, 1.0)).to_dict()
        assert d["kind"] == "high_efficiency"
        assert d["color"] == [1.0, 0.0, 0.0, 1.0]
        assert d["alpha"] == 1.0


@pytest.mark.parametrize("capacity", [0, -1])
def test_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        NotificationScheduler(capacity=capacity)
