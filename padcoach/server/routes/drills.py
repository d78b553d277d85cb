# padcoach/server/routes/drills.py
"""Training drill endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from padcoach.drills import DrillSnapshot

from ..deps import locked_coach
from ..models import DrillPayload

router = APIRouter(prefix="/drills", tags=["drills"])


@router.get("")
def list_drills(request: Request) -> list[str]:
    with locked_coach(request) as coach:
        return coach.list_drills()


@router.post("")
def save_drill(payload: DrillPayload, request: Request) -> dict[str, str]:
    drill = DrillSnapshot(
        name=payload.name,
        car_location=payload.car_location,
        car_rotation=payload.car_rotation,
        ball_location=payload.ball_location,
        ball_velocity=payload.ball_velocity,
    )
    with locked_coach(request) as coach:
        saved = coach.save_drill(drill)
    if not saved:
        raise HTTPException(status_code=500, detail=f"Failed to save drill {payload.name!r}")
    return {"status": "saved", "name": payload.name}


@router.get("/{name}")
def load_drill(name: str, request: Request) -> dict[str, Any]:
    with locked_coach(request) as coach:
        drill = coach.load_drill(name)
    if drill is None:
        raise HTTPException(status_code=404, detail=f"Drill not found: {name}")
    return {"name": drill.name, **drill.to_dict()}


@router.delete("/{name}")
def delete_drill(name: str, request: Request) -> dict[str, str]:
    with locked_coach(request) as coach:
        if name not in coach.list_drills():
            raise HTTPException(status_code=404, detail=f"Drill not found: {name}")
        deleted = coach.delete_drill(name)
    if not deleted:
        raise HTTPException(status_code=500, detail=f"Failed to delete drill {name!r}")
    return {"status": "deleted", "name": name}
