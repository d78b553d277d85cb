"""Tests for the draw primitive builders."""

from __future__ import annotations

import pytest

from padcoach.coaching.notifications import Notification, NotificationKind
from padcoach.nav.graph import NavGraph
from padcoach.nav.pads import PadType
from padcoach.render import Line, Rect, Text, notification_panel, pad_markers, route_overlay

YELLOW = (1.0, 1.0, 0.0, 1.0)


def flat(pos):
    return (pos[0], pos[1])


def test_route_overlay_segments(square_pads):
    graph = NavGraph.build(square_pads)
    lines = route_overlay(graph, [0, 1, 2], flat, YELLOW, 2.0)
    assert lines == [
        Line((0.0, 0.0), (100.0, 0.0), YELLOW, 2.0),
        Line((100.0, 0.0), (100.0, 100.0), YELLOW, 2.0),
    ]


def test_route_overlay_skips_offscreen(square_pads):
    graph = NavGraph.build(square_pads)

    def behind_camera_for_pad_1(pos):
        return None if pos == square_pads[1].pos else flat(pos)

    lines = route_overlay(graph, [0, 1, 2], behind_camera_for_pad_1, YELLOW)
    assert lines == [Line((0.0, 0.0), (100.0, 100.0), YELLOW, 1.0)]


def test_route_overlay_short_or_empty(square_pads):
    graph = NavGraph.build(square_pads)
    assert route_overlay(graph, [2], flat, YELLOW) == []
    assert route_overlay(NavGraph.build([]), [0, 1], flat, YELLOW) == []


def test_pad_markers(square_pads):
    graph = NavGraph.build(square_pads)
    markers = pad_markers(graph, flat)
    assert len(markers) == 4
    assert markers[0] == Rect((-4.0, -4.0), (8.0, 8.0), (0.0, 1.0, 0.0, 1.0))
    assert markers[1].color == (1.0, 1.0, 0.0, 1.0)

    majors = pad_markers(graph, flat, PadType.MAJOR)
    assert len(majors) == 2


def test_notification_panel_layout():
    fresh = Notification(NotificationKind.LOW_RESOURCE, "low", lifetime=2.0, color=(1.0, 0.0, 0.0, 1.0))
    half = Notification(NotificationKind.CUSTOM, "half", lifetime=2.0, elapsed=1.0)
    prims = notification_panel([fresh, half], (1920.0, 1080.0))
    assert len(prims) == 6

    bg, border, text = prims[:3]
    assert bg == Rect((1520.0, 100.0), (350.0, 40.0), (0.0, 0.0, 0.0, 0.7))
    assert border == Rect((1520.0, 100.0), (350.0, 3.0), (1.0, 0.0, 0.0, 1.0))
    assert text == Text((1530.0, 110.0), "low", (1.0, 1.0, 1.0, 1.0))

    bg2, _, text2 = prims[3:]
    assert bg2.position == (1520.0, 145.0)
    assert bg2.color[3] == pytest.approx(0.35)
    assert text2.color[3] == pytest.approx(0.5)
