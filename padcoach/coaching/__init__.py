from .notifications import Notification, NotificationKind, NotificationScheduler
from .triggers import EdgeTrigger

__all__ = ["EdgeTrigger", "Notification", "NotificationKind", "NotificationScheduler"]
