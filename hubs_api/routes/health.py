"""
Lambda Hubs API — Health Check Route
======================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs SELECT 1 against the app's engine and reports uptime.

    Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable or not configured (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from hubs_api import __version__
from hubs_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    """
    Probe the database and report aggregate status.

    The engine comes from app.state, where the app factory stored it; an app
    assembled without one (e.g. around in-memory test doubles) reports
    the database as disconnected.
    """
    db_status = "connected"
    engine = getattr(request.app.state, "engine", None)

    if engine is None:
        db_status = "disconnected"
    else:
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            db_status = "disconnected"
            logger.warning("Health check: database unreachable: %s", str(e))

    healthy = db_status == "connected"
    body = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(status_code=200 if healthy else 503, content=body.model_dump())
