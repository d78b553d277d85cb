"""Draw primitives handed to the host each frame.

Nothing here draws; these helpers turn routes, pads and notifications into
plain primitives in screen space using the host's projection function. A
projector returns None for points it cannot place on screen (behind the
camera), and those points are skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .coaching.notifications import Notification
from .nav.graph import NavGraph
from .nav.pads import PadType, Vec3

Vec2 = tuple[float, float]
Color = tuple[float, float, float, float]
Projector = Callable[[Vec3], "Vec2 | None"]

MAJOR_PAD_COLOR: Color = (0.0, 1.0, 0.0, 1.0)
MINOR_PAD_COLOR: Color = (1.0, 1.0, 0.0, 1.0)

PAD_MARKER_SIZE = 8.0

# Notification panel layout (pixels)
PANEL_TOP = 100.0
PANEL_HEIGHT = 40.0
PANEL_MARGIN = 5.0
PANEL_WIDTH = 350.0
PANEL_RIGHT_OFFSET = 400.0
PANEL_BORDER = 3.0
PANEL_TEXT_INSET = 10.0
PANEL_BG_ALPHA = 0.7


@dataclass(frozen=True)
class Line:
    start: Vec2
    end: Vec2
    color: Color
    thickness: float = 1.0


@dataclass(frozen=True)
class Rect:
    position: Vec2
    size: Vec2
    color: Color


@dataclass(frozen=True)
class Text:
    position: Vec2
    text: str
    color: Color


Primitive = Line | Rect | Text


def route_overlay(
    graph: NavGraph,
    path: Sequence[int],
    project: Projector,
    color: Color,
    thickness: float = 1.0,
) -> list[Line]:
    """Screen-space segments joining consecutive pads on ``path``."""
    if graph.empty or len(path) < 2:
        return []
    points: list[Vec2] = []
    for idx in path:
        if not graph.is_valid(idx):
            continue
        screen = project(graph.nodes[idx].pos)
        if screen is not None:
            points.append(screen)
    return [Line(a, b, color, thickness) for a, b in zip(points, points[1:])]


def pad_markers(graph: NavGraph, project: Projector, pad_filter: PadType | None = None) -> list[Rect]:
    """One square per pad, green for big pads and yellow for small ones."""
    half = PAD_MARKER_SIZE / 2
    out = []
    for node in graph.nodes:
        if pad_filter is not None and node.pad_type is not pad_filter:
            continue
        screen = project(node.pos)
        if screen is None:
            continue
        color = MAJOR_PAD_COLOR if node.pad_type is PadType.MAJOR else MINOR_PAD_COLOR
        out.append(Rect((screen[0] - half, screen[1] - half), (PAD_MARKER_SIZE, PAD_MARKER_SIZE), color))
    return out


def notification_panel(notifications: Sequence[Notification], screen_size: Vec2) -> list[Primitive]:
    """Stacked notification boxes along the right edge, fading out with age."""
    out: list[Primitive] = []
    for i, notif in enumerate(notifications):
        alpha = notif.alpha
        x = screen_size[0] - PANEL_RIGHT_OFFSET
        y = PANEL_TOP + i * (PANEL_HEIGHT + PANEL_MARGIN)

        out.append(Rect((x, y), (PANEL_WIDTH, PANEL_HEIGHT), (0.0, 0.0, 0.0, PANEL_BG_ALPHA * alpha)))
        r, g, b, a = notif.color
        out.append(Rect((x, y), (PANEL_WIDTH, PANEL_BORDER), (r, g, b, a * alpha)))
        out.append(Text((x + PANEL_TEXT_INSET, y + PANEL_TEXT_INSET), notif.message, (1.0, 1.0, 1.0, alpha)))
    return out
