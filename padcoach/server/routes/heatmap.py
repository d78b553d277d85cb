# padcoach/server/routes/heatmap.py
"""Heatmap export endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from ..deps import locked_coach

router = APIRouter(prefix="/heatmap", tags=["heatmap"])


@router.post("/export/{name}")
def export_heatmap(name: str, request: Request) -> dict[str, str]:
    with locked_coach(request) as coach:
        path = coach.export_heatmap(name)
    if path is None:
        raise HTTPException(status_code=400, detail=f"Heatmap {name!r} was not exported")
    return {"path": str(path)}


@router.post("/clear")
def clear_heatmap(request: Request) -> dict[str, str]:
    with locked_coach(request) as coach:
        coach.clear_heatmap()
    return {"status": "cleared"}
