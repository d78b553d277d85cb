# padcoach/server/routes/nav.py
"""Pad graph and routing endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from padcoach.nav.pads import PadType

from ..deps import locked_coach
from ..models import RouteRequest, RouteResponse

router = APIRouter(prefix="/nav", tags=["nav"])


@router.get("/graph/{map_id}")
def get_pad_graph(map_id: str, request: Request) -> dict[str, Any]:
    """Pad graph for a map (cached per map)."""
    with locked_coach(request) as coach:
        graph = coach.set_map(map_id)
        return {"map_id": map_id, **graph.to_dict()}


@router.post("/route", response_model=RouteResponse)
def request_route(req: RouteRequest, request: Request) -> RouteResponse:
    """Route from the pad nearest the player to the pad nearest the ball."""
    with locked_coach(request) as coach:
        path = coach.request_route(req.map_id, req.player_pos, req.ball_pos, use_heuristic=req.use_heuristic)
        graph = coach.current_graph()
        positions = [list(graph.nodes[i].pos) for i in path] if graph is not None else []
    return RouteResponse(found=bool(path), path=path, positions=positions)


@router.post("/pads/toggle")
def toggle_pad_display(request: Request) -> dict[str, bool]:
    with locked_coach(request) as coach:
        return {"show_pads": coach.toggle_pad_display()}


@router.post("/pads/filter")
def set_pad_filter(request: Request, pad_type: str = "all") -> dict[str, str]:
    """Restrict pad markers to 'major' or 'minor' pads, or show 'all'."""
    try:
        pad_filter = None if pad_type == "all" else PadType(pad_type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Unknown pad type {pad_type!r}") from e
    with locked_coach(request) as coach:
        coach.set_pad_filter(pad_filter)
    return {"pad_filter": pad_type}
