from __future__ import annotations

from collections.abc import Callable


class EdgeTrigger:
    """Predicate that is true once per rise of ``condition``.

    Fires on the first evaluation where the condition holds, then stays
    quiet until the condition has been seen false again.
    """

    def __init__(self, condition: Callable[[], bool]):
        self.condition = condition
        self._armed = True
        self.fire_count = 0

    def __call__(self) -> bool:
        if not self.condition():
            self._armed = True
            return False
        if not self._armed:
            return False
        self._armed = False
        self.fire_count += 1
        return True

    def rearm(self) -> None:
        self._armed = True
