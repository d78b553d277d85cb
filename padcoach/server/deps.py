"""Request dependencies shared by the route modules."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, Request

from padcoach.coach import BoostCoach


def get_coach(request: Request) -> BoostCoach:
    """The BoostCoach bound to this app by create_app()."""
    coach = getattr(request.app.state, "coach", None)
    if coach is None:
        raise HTTPException(503, "Coach not initialized")
    return coach


@contextmanager
def locked_coach(request: Request) -> Iterator[BoostCoach]:
    """Hold the app's session lock while using its BoostCoach.

    Plain ``def`` endpoints run in the threadpool and BoostCoach has no
    locking of its own, so every handler goes through here.
    """
    coach = get_coach(request)
    lock: threading.Lock = request.app.state.coach_lock
    with lock:
        yield coach
