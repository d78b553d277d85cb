# padcoach/server/routes/session.py
"""Per-frame ingest, session commands and reports."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from padcoach.telemetry.session import KinematicSample

from ..deps import locked_coach
from ..models import ConfigRequest, ReportResponse, TickRequest, TickResponse

router = APIRouter(prefix="/session", tags=["session"])


@router.post("/tick", response_model=TickResponse)
def tick(req: TickRequest, request: Request) -> TickResponse:
    sample = KinematicSample(pos=req.pos, speed=req.speed, boost=req.boost, timestamp=req.timestamp)
    with locked_coach(request) as coach:
        efficiency = coach.tick(sample, req.dt)
        return TickResponse(
            efficiency=efficiency,
            behavior=coach.metrics.behavior,
            notifications=len(coach.notifications),
        )


@router.post("/events/touch")
def ball_touch(request: Request) -> dict[str, int]:
    with locked_coach(request) as coach:
        coach.record_ball_touch()
        return {"ball_touches": coach.metrics.ball_touches}


@router.post("/events/demolition")
def demolition(request: Request) -> dict[str, int]:
    with locked_coach(request) as coach:
        coach.record_demolition()
        return {"demolitions": coach.metrics.demolitions}


@router.get("/metrics")
def get_metrics(request: Request) -> dict[str, Any]:
    with locked_coach(request) as coach:
        return {**coach.metrics.to_dict(), "efficiency": coach.last_efficiency}


@router.get("/notifications")
def get_notifications(request: Request) -> list[dict[str, Any]]:
    """Active HUD notifications, oldest first."""
    with locked_coach(request) as coach:
        return [n.to_dict() for n in coach.notifications.active]


@router.post("/reset")
def reset_session(request: Request) -> dict[str, str]:
    with locked_coach(request) as coach:
        coach.reset_session()
    return {"status": "reset"}


@router.post("/report", response_model=ReportResponse)
def generate_report(request: Request) -> ReportResponse:
    with locked_coach(request) as coach:
        return ReportResponse(lines=coach.generate_report())


@router.post("/performance", response_model=ReportResponse)
def show_performance_report(request: Request) -> ReportResponse:
    with locked_coach(request) as coach:
        return ReportResponse(lines=coach.show_performance_report())


@router.get("/config", response_model=ReportResponse)
def get_config(request: Request) -> ReportResponse:
    with locked_coach(request) as coach:
        return ReportResponse(lines=coach.describe_config())


@router.post("/config", response_model=ReportResponse)
def set_config(req: ConfigRequest, request: Request) -> ReportResponse:
    with locked_coach(request) as coach:
        if not coach.set_option(req.option, req.value):
            raise HTTPException(status_code=400, detail=f"Invalid config option {req.option}={req.value!r}")
        return ReportResponse(lines=coach.describe_config())


@router.post("/history/save")
def save_match(request: Request) -> dict[str, int]:
    with locked_coach(request) as coach:
        if not coach.save_match():
            raise HTTPException(status_code=500, detail="Failed to save match stats")
        return {"matches": len(coach.metrics.history_log)}


@router.post("/history/export")
def export_history(request: Request) -> dict[str, str]:
    with locked_coach(request) as coach:
        if not coach.export_history():
            raise HTTPException(status_code=500, detail="Failed to export history")
        return {"path": str(coach.history.export_path)}


@router.post("/history/import")
def import_history(request: Request) -> dict[str, int]:
    with locked_coach(request) as coach:
        imported = coach.import_history()
        return {"imported": imported, "matches": len(coach.metrics.history_log)}
