"""Timed coaching messages for the HUD."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..constants import MAX_NOTIFICATIONS, NOTIFICATION_LIFETIME_S

logger = logging.getLogger(__name__)

Color = tuple[float, float, float, float]
Predicate = Callable[[], bool]


class NotificationKind(Enum):
    LOW_RESOURCE = "low_resource"
    HIGH_EFFICIENCY = "high_efficiency"
    POSITIONING_HINT = "positioning_hint"
    CUSTOM = "custom"


@dataclass
class Notification:
    kind: NotificationKind
    message: str
    lifetime: float = NOTIFICATION_LIFETIME_S
    color: Color = (1.0, 1.0, 1.0, 1.0)
    elapsed: float = 0.0

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.lifetime

    @property
    def alpha(self) -> float:
        """Fade factor in [0, 1], 1 when fresh and 0 at expiry."""
        if self.lifetime <= 0:
            return 0.0
        return max(0.0, min(1.0, 1.0 - self.elapsed / self.lifetime))

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "lifetime": self.lifetime,
            "color": list(self.color),
            "elapsed": self.elapsed,
            "alpha": self.alpha,
        }


class NotificationScheduler:
    """Active notification list plus registered triggers.

    At most ``capacity`` notifications are shown; showing one more drops the
    oldest by insertion order, regardless of how much lifetime it has left.
    Triggers are evaluated once per update() and show a fresh copy of their
    template every time they return true, so a trigger that should not
    repeat has to throttle itself.
    """

    def __init__(self, capacity: int = MAX_NOTIFICATIONS):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._active: list[Notification] = []
        self._triggers: list[tuple[Predicate, Notification]] = []

    @property
    def active(self) -> list[Notification]:
        return list(self._active)

    def show(self, notification: Notification) -> None:
        while len(self._active) >= self.capacity:
            self._active.pop(0)
        self._active.append(notification)
        logger.info(f"Showing: {notification.message}")

    def register_trigger(self, predicate: Predicate, template: Notification) -> None:
        self._triggers.append((predicate, template))

    def update(self, dt: float) -> list[Notification]:
        """Age active notifications, drop expired ones and run the triggers.

        Returns:
            Notifications fired by triggers during this update.
        """
        for n in self._active:
            n.elapsed += dt
        self._active = [n for n in self._active if not n.expired]

        fired: list[Notification] = []
        for predicate, template in self._triggers:
            if self._evaluate(predicate):
                notification = dataclasses.replace(template, elapsed=0.0)
                self.show(notification)
                fired.append(notification)
        return fired

    @staticmethod
    def _evaluate(predicate: Predicate) -> bool:
        try:
            return bool(predicate())
        except Exception:
            logger.exception("Error in custom trigger")
            return False

    def clear(self) -> None:
        self._active.clear()

    def __len__(self) -> int:
        return len(self._active)
