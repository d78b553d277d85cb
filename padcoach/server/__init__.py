# padcoach/server/__init__.py
"""padcoach command server - HTTP surface over a BoostCoach session."""

from __future__ import annotations

import logging
import threading
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from padcoach.coach import BoostCoach

from .config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("padcoach.server")


def _attach_log_file(path: Path) -> None:
    root = logging.getLogger()
    resolved = path.resolve()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == resolved:
            return
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%H:%M:%S"))
    root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    app.state.started_at = time.time()
    logger.info(f"padcoach server starting on {settings.HOST}:{settings.PORT}")
    yield
    logger.info("padcoach server shutting down...")


def create_app(
    *,
    coach: BoostCoach | None = None,
    data_dir: Path | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        coach: Session to serve; a new one is created when omitted.
        data_dir: Storage directory for a newly created session.
    """
    from .models import HealthResponse
    from .routes import drills, heatmap, nav, session

    if settings.LOG_FILE is not None:
        _attach_log_file(settings.LOG_FILE)

    app = FastAPI(lifespan=lifespan, title="padcoach")
    app.state.coach = coach or BoostCoach(data_dir=data_dir or settings.DATA_DIR)
    app.state.coach_lock = threading.Lock()
    app.state.started_at = time.time()

    app.include_router(session.router)
    app.include_router(nav.router)
    app.include_router(heatmap.router)
    app.include_router(drills.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="ok", uptime_s=time.time() - app.state.started_at)

    return app
