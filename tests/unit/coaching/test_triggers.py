from padcoach.coaching.triggers import EdgeTrigger


def test_fires_once_per_rise():
    state = {"on": False}
    trigger = EdgeTrigger(lambda: state["on"])
    assert trigger() is False
    state["on"] = True
    assert trigger() is True
    assert trigger() is False
    assert trigger() is False
    state["on"] = False
    assert trigger() is False
    state["on"] = True
    assert trigger() is True
    assert trigger.fire_count == 2


def test_rearm():
    trigger = EdgeTrigger(lambda: True)
    assert trigger()
    assert not trigger()
    trigger.rearm()
    assert trigger()
