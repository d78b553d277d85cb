# padcoach/server/models.py
"""Pydantic models for API requests/responses."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    uptime_s: float


class TickRequest(BaseModel):
    """One frame of player state pushed by the game host."""

    pos: tuple[float, float, float]
    speed: float
    boost: float = Field(ge=0.0, le=100.0)
    timestamp: float
    dt: float = Field(ge=0.0)


class TickResponse(BaseModel):
    efficiency: float
    behavior: str
    notifications: int


class RouteRequest(BaseModel):
    """Request for a pad route from the player to the ball."""

    map_id: str
    player_pos: tuple[float, float, float]
    ball_pos: tuple[float, float, float]
    use_heuristic: bool | None = None


class RouteResponse(BaseModel):
    found: bool
    path: list[int]
    positions: list[list[float]]


class ConfigRequest(BaseModel):
    option: str
    value: str


class DrillPayload(BaseModel):
    name: str
    car_location: tuple[float, float, float]
    car_rotation: tuple[float, float, float]
    ball_location: tuple[float, float, float]
    ball_velocity: tuple[float, float, float]


class ReportResponse(BaseModel):
    lines: list[str]
